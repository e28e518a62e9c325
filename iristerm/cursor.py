"""Cursor position, style and save/restore state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class CursorPosition:
    """A zero-based cursor position inside the grid."""

    row: int = 0
    col: int = 0


class CursorStyle(enum.Enum):
    """How the cursor is drawn."""

    BLOCK = "block"
    UNDERLINE = "underline"
    BAR = "bar"


@dataclass(frozen=True)
class SavedCursor:
    """Cursor state captured by DEC save."""

    position: CursorPosition
    style: CursorStyle


@dataclass
class Cursor:
    """Cursor state tracked by the terminal."""

    position: CursorPosition = field(default_factory=CursorPosition)
    style: CursorStyle = CursorStyle.BLOCK
    visible: bool = True
    blinking: bool = True

    def move_to(self, row: int, col: int) -> None:
        """Move to an absolute position."""
        self.position = CursorPosition(row, col)

    def move_up(self, count: int) -> None:
        """Move up, stopping at the first row."""
        self.position = replace(self.position, row=max(self.position.row - count, 0))

    def move_down(self, count: int, max_rows: int) -> None:
        """Move down, clamping to the last of max_rows rows."""
        row = min(self.position.row + count, max(max_rows - 1, 0))
        self.position = replace(self.position, row=row)

    def move_left(self, count: int) -> None:
        """Move left, stopping at column zero."""
        self.position = replace(self.position, col=max(self.position.col - count, 0))

    def move_right(self, count: int, max_cols: int) -> None:
        """Move right, clamping to the last of max_cols columns."""
        col = min(self.position.col + count, max(max_cols - 1, 0))
        self.position = replace(self.position, col=col)

    def save(self) -> SavedCursor:
        """Capture the current position and style."""
        return SavedCursor(self.position, self.style)

    def restore(self, saved: SavedCursor) -> None:
        """Restore a previously saved position and style."""
        self.position = saved.position
        self.style = saved.style