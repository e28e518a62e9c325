[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iristerm"
version = "0.1.0"
description = "Terminal state primitives: cell grid, cursor, damage tracking, modes and an ANSI/VT escape sequence parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "vt100", "ansi", "escape-sequences", "parser", "emulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iristerm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
