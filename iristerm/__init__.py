"""Terminal state primitives: cells, grid, cursor, damage tracking, modes and escape-sequence parsing."""

__version__ = "0.1.0"