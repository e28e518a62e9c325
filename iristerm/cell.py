"""Terminal cells, colours and text attributes."""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, field


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..=255, got {value}")
    return value


class ColorKind(enum.Enum):
    """Which colour space a Color value uses."""

    DEFAULT = "default"
    ANSI = "ansi"
    INDEXED = "indexed"
    RGB = "rgb"


@dataclass(frozen=True)
class Color:
    """A foreground or background colour; Color() is the terminal default."""

    kind: ColorKind = ColorKind.DEFAULT
    index: int = 0
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def ansi(cls, index: int) -> Color:
        """One of the ANSI base colours."""
        return cls(ColorKind.ANSI, index=_check_byte("index", index))

    @classmethod
    def indexed(cls, index: int) -> Color:
        """A colour from the extended 256-colour palette."""
        return cls(ColorKind.INDEXED, index=_check_byte("index", index))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """A true-colour value."""
        return cls(
            ColorKind.RGB,
            r=_check_byte("r", r),
            g=_check_byte("g", g),
            b=_check_byte("b", b),
        )


class CellFlags(enum.IntFlag):
    """Styling flags for a cell."""

    BOLD = 0b0000_0001
    ITALIC = 0b0000_0010
    UNDERLINE = 0b0000_0100
    STRIKETHROUGH = 0b0000_1000
    INVERSE = 0b0001_0000
    DIM = 0b0010_0000
    BLINK = 0b0100_0000
    HIDDEN = 0b1000_0000


@dataclass(frozen=True)
class CellAttrs:
    """Rendering attributes stored alongside a cell."""

    fg: Color = field(default_factory=Color)
    bg: Color = field(default_factory=Color)
    flags: CellFlags = CellFlags(0)


class CellWidth(enum.Enum):
    """The width class of a cell."""

    SINGLE = "single"
    DOUBLE = "double"
    CONTINUATION = "continuation"

    @classmethod
    def from_char(cls, character: str) -> CellWidth:
        """Classify a character as single or double width."""
        if unicodedata.east_asian_width(character) in ("W", "F"):
            return cls.DOUBLE
        return cls.SINGLE

    def columns(self) -> int:
        """Number of columns occupied by this width class."""
        return {CellWidth.SINGLE: 1, CellWidth.DOUBLE: 2, CellWidth.CONTINUATION: 0}[self]


@dataclass(frozen=True)
class Cell:
    """A single terminal cell; Cell() is a blank space."""

    character: str = " "
    width: CellWidth = CellWidth.SINGLE
    attrs: CellAttrs = field(default_factory=CellAttrs)

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(f"a cell holds exactly one character, got {self.character!r}")

    @classmethod
    def from_char(cls, character: str, attrs: CellAttrs | None = None) -> Cell:
        """Create a cell whose width is derived from the character."""
        return cls(character, CellWidth.from_char(character), attrs if attrs is not None else CellAttrs())

    @classmethod
    def continuation(cls, attrs: CellAttrs | None = None) -> Cell:
        """Create the hidden trailing half of a wide character."""
        return cls(" ", CellWidth.CONTINUATION, attrs if attrs is not None else CellAttrs())

    def is_wide(self) -> bool:
        """True when the cell occupies two columns."""
        return self.width is CellWidth.DOUBLE

    def is_empty(self) -> bool:
        """True when the cell is a blank single-width space."""
        return self.character == " " and self.width is CellWidth.SINGLE