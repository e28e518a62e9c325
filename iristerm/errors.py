"""Errors raised by the terminal core."""

from __future__ import annotations


class IrisError(Exception):
    """Base class for all terminal core errors."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(vars(self).items()))))


class InvalidPositionError(IrisError):
    """The requested position fell outside the visible grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"invalid position ({row}, {col}) for grid size {rows}x{cols}")
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class InvalidAsciiRunError(IrisError):
    """An ASCII fast-path write received a byte outside printable ASCII."""

    def __init__(self, byte: int) -> None:
        super().__init__(f"invalid ASCII run byte 0x{byte:02X}; expected printable ASCII")
        self.byte = byte


class ResizeFailedError(IrisError):
    """A resize operation failed validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"resize failed: {reason}")
        self.reason = reason


def validate_printable_ascii(data: bytes) -> None:
    """Raise InvalidAsciiRunError on the first byte outside 0x20..=0x7e."""
    bad = next((byte for byte in data if not 0x20 <= byte <= 0x7E), None)
    if bad is not None:
        raise InvalidAsciiRunError(bad)