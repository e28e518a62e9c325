"""Tracking of changed grid regions between render passes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DamageRegion:
    """An inclusive rectangular region of damaged cells."""

    start_row: int
    end_row: int
    start_col: int
    end_col: int


class DamageTracker:
    """Records which rows and columns changed since the last take()."""

    def __init__(self, rows: int = 0) -> None:
        self._rows: list[tuple[int, int] | None] = [None] * rows
        self._all_damaged = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DamageTracker):
            return NotImplemented
        return self._rows == other._rows and self._all_damaged == other._all_damaged

    def __repr__(self) -> str:
        return f"DamageTracker(rows={len(self._rows)}, all_damaged={self._all_damaged})"

    def _has_row(self, row: int) -> bool:
        return 0 <= row < len(self._rows)

    def resize(self, rows: int) -> None:
        """Track a new row count; the whole grid counts as damaged."""
        self._rows = [None] * rows
        self._all_damaged = True

    def mark(self, row: int, col: int) -> None:
        """Mark one cell as damaged."""
        self.mark_range(row, col, col)

    def mark_range(self, row: int, start_col: int, end_col: int) -> None:
        """Mark an inclusive column range of a row as damaged."""
        if start_col > end_col or not self._has_row(row):
            return
        current = self._rows[row]
        if current is None:
            self._rows[row] = (start_col, end_col)
        else:
            self._rows[row] = (min(current[0], start_col), max(current[1], end_col))

    def mark_row(self, row: int, cols: int) -> None:
        """Mark a whole row of cols columns as damaged."""
        if self._has_row(row):
            self._rows[row] = (0, cols - 1) if cols > 0 else None

    def mark_all(self) -> None:
        """Mark the entire grid as damaged."""
        self._all_damaged = True
        self._rows = [None] * len(self._rows)

    def is_damaged(self) -> bool:
        """True when any damage is pending."""
        return self._all_damaged or any(span is not None for span in self._rows)

    def take(self, cols: int) -> list[DamageRegion]:
        """Drain pending damage into regions."""
        if self._all_damaged:
            self._all_damaged = False
            if not self._rows or cols == 0:
                return []
            return [DamageRegion(0, len(self._rows) - 1, 0, cols - 1)]

        regions = [
            DamageRegion(row, row, span[0], span[1])
            for row, span in enumerate(self._rows)
            if span is not None
        ]
        self._rows = [None] * len(self._rows)
        return regions