"""The visible grid of terminal cells."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .cell import Cell, CellAttrs, CellWidth
from .damage import DamageRegion, DamageTracker
from .errors import InvalidPositionError, ResizeFailedError, validate_printable_ascii

_BLANK = Cell()


@dataclass(frozen=True)
class GridSize:
    """The dimensions of the visible grid."""

    rows: int = 24
    cols: int = 80


def _checked_cell_count(size: GridSize) -> int:
    if size.rows < 0 or size.cols < 0:
        raise ResizeFailedError(
            f"grid dimensions must be non-negative, got {size.rows}x{size.cols}"
        )
    return size.rows * size.cols


class Grid:
    """A pre-allocated visible grid of terminal cells with damage tracking."""

    def __init__(self, size: GridSize | None = None) -> None:
        size = size if size is not None else GridSize()
        count = _checked_cell_count(size)
        self._size = size
        self._cells: list[Cell] = [_BLANK] * count
        self._damage = DamageTracker(size.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._size == other._size
            and self._cells == other._cells
            and self._damage == other._damage
        )

    def __repr__(self) -> str:
        return f"Grid(size={self._size!r})"

    # --- dimensions and access -------------------------------------------

    def size(self) -> GridSize:
        """The current grid size."""
        return self._size

    def rows(self) -> int:
        """The number of rows."""
        return self._size.rows

    def cols(self) -> int:
        """The number of columns."""
        return self._size.cols

    def cell(self, row: int, col: int) -> Cell | None:
        """The cell at a position, or None when it lies outside the grid."""
        index = self._index_of(row, col)
        return None if index is None else self._cells[index]

    def row(self, row: int) -> list[Cell] | None:
        """A copy of one row's cells, or None when the row does not exist."""
        if not 0 <= row < self.rows():
            return None
        start = row * self.cols()
        return self._cells[start:start + self.cols()]

    def __getitem__(self, row: int) -> list[Cell]:
        """A copy of one row's cells; raises IndexError when out of range."""
        cells = self.row(row)
        if cells is None:
            raise IndexError(f"row {row} out of range for {self.rows()} rows")
        return cells

    def take_damage(self) -> list[DamageRegion]:
        """Return and clear the accumulated damage."""
        return self._damage.take(self.cols())

    def mark_all_damage(self) -> None:
        """Mark the whole grid as damaged without touching cell data."""
        self._damage.mark_all()

    # --- indexing helpers ----------------------------------------------------

    def _index_of(self, row: int, col: int) -> int | None:
        if 0 <= row < self.rows() and 0 <= col < self.cols():
            return row * self.cols() + col
        return None

    def _invalid_position(self, row: int, col: int) -> InvalidPositionError:
        return InvalidPositionError(row, col, self.rows(), self.cols())

    def _checked_index(self, row: int, col: int) -> int:
        index = self._index_of(row, col)
        if index is None:
            raise self._invalid_position(row, col)
        return index

    def _validate_row_range(self, top: int, bottom: int) -> None:
        if top > bottom:
            raise self._invalid_position(top, 0)
        if bottom >= self.rows():
            raise self._invalid_position(bottom, 0)
        if top < 0:
            raise self._invalid_position(top, 0)

    # --- resize --------------------------------------------------------------

    def resize(self, new_size: GridSize) -> None:
        """Resize, keeping the overlapping top-left content."""
        count = _checked_cell_count(new_size)
        new_cells = [_BLANK] * count
        if new_size.cols > 0:
            old_cols = self.cols()
            keep_rows = min(self.rows(), new_size.rows)
            keep_cols = min(old_cols, new_size.cols)
            for row in range(keep_rows):
                old_row = self._cells[row * old_cols:row * old_cols + keep_cols]
                new_start = row * new_size.cols
                for col, cell in enumerate(old_row):
                    if cell.width is CellWidth.CONTINUATION:
                        has_leader = col > 0 and old_row[col - 1].width is CellWidth.DOUBLE
                        if not has_leader:
                            cell = _BLANK
                    if cell.width is CellWidth.DOUBLE and col + 1 >= new_size.cols:
                        cell = replace(cell, width=CellWidth.SINGLE)
                    new_cells[new_start + col] = cell

        self._size = new_size
        self._cells = new_cells
        self._damage.resize(new_size.rows)

    # --- scrolling -----------------------------------------------------------

    def scroll_up(self, count: int) -> None:
        """Scroll the whole grid up by count rows."""
        rows, cols = self.rows(), self.cols()
        if rows == 0 or cols == 0:
            return
        shift = min(count, rows)
        if shift <= 0:
            return
        self._cells = self._cells[shift * cols:] + [_BLANK] * (shift * cols)
        self._damage.mark_all()

    def scroll_down(self, count: int) -> None:
        """Scroll the whole grid down by count rows."""
        rows, cols = self.rows(), self.cols()
        if rows == 0 or cols == 0:
            return
        shift = min(count, rows)
        if shift <= 0:
            return
        self._cells = [_BLANK] * (shift * cols) + self._cells[:(rows - shift) * cols]
        self._damage.mark_all()

    def scroll_up_range(self, top: int, bottom: int, count: int) -> None:
        """Scroll the inclusive row range top..bottom up by count rows."""
        self._validate_row_range(top, bottom)
        cols = self.cols()
        if cols == 0:
            return
        shift = min(count, bottom - top + 1)
        if shift <= 0:
            return
        start, end = top * cols, (bottom + 1) * cols
        region = self._cells[start:end]
        self._cells[start:end] = region[shift * cols:] + [_BLANK] * (shift * cols)
        self._mark_rows(top, bottom)

    def scroll_down_range(self, top: int, bottom: int, count: int) -> None:
        """Scroll the inclusive row range top..bottom down by count rows."""
        self._validate_row_range(top, bottom)
        cols = self.cols()
        if cols == 0:
            return
        shift = min(count, bottom - top + 1)
        if shift <= 0:
            return
        start, end = top * cols, (bottom + 1) * cols
        region = self._cells[start:end]
        self._cells[start:end] = [_BLANK] * (shift * cols) + region[:len(region) - shift * cols]
        self._mark_rows(top, bottom)

    def _mark_rows(self, top: int, bottom: int) -> None:
        for row in range(top, bottom + 1):
            self._damage.mark_row(row, self.cols())

    def insert_blank_cells(self, row: int, col: int, count: int) -> None:
        """Insert count blanks at a position, shifting the rest of the row right."""
        cols = self.cols()
        if cols == 0:
            return
        start = self._checked_index(row, col)
        shift = min(count, cols - col)
        if shift <= 0:
            return
        end = (row + 1) * cols
        tail = self._cells[start:end]
        self._cells[start:end] = [_BLANK] * shift + tail[:len(tail) - shift]
        self._normalize_row(row)
        self._damage.mark_row(row, cols)

    def delete_cells(self, row: int, col: int, count: int) -> None:
        """Delete count cells at a position, shifting the rest of the row left."""
        cols = self.cols()
        if cols == 0:
            return
        start = self._checked_index(row, col)
        shift = min(count, cols - col)
        if shift <= 0:
            return
        end = (row + 1) * cols
        tail = self._cells[start:end]
        self._cells[start:end] = tail[shift:] + [_BLANK] * shift
        self._normalize_row(row)
        self._damage.mark_row(row, cols)

    # --- writing -------------------------------------------------------------

    def write(self, row: int, col: int, cell: Cell) -> None:
        """Write a cell and record the damaged columns."""
        index = self._checked_index(row, col)
        self._clear_wide_span_at(row, col)

        if cell.width is CellWidth.DOUBLE:
            if col + 1 < self.cols():
                self._clear_wide_span_at(row, col + 1)
            else:
                cell = replace(cell, width=CellWidth.SINGLE)

        self._cells[index] = cell
        self._damage.mark(row, col)

        if cell.width is CellWidth.DOUBLE and col + 1 < self.cols():
            self._cells[index + 1] = Cell.continuation(cell.attrs)
            self._damage.mark(row, col + 1)

    def write_ascii_run(
        self, row: int, col: int, data: bytes, attrs: CellAttrs | None = None
    ) -> None:
        """Write printable ASCII bytes into one row as single-width cells."""
        if not data:
            return
        validate_printable_ascii(data)
        attrs = attrs if attrs is not None else CellAttrs()

        end_col = col + len(data)
        if not (0 <= row < self.rows() and 0 <= col < self.cols()) or end_col > self.cols():
            raise self._invalid_position(row, col)

        start = row * self.cols() + col
        end = start + len(data)
        if any(cell.width is not CellWidth.SINGLE for cell in self._cells[start:end]):
            for offset in range(len(data)):
                self._clear_wide_span_at(row, col + offset)

        self._cells[start:end] = [Cell(chr(byte), CellWidth.SINGLE, attrs) for byte in data]
        self._damage.mark_range(row, col, end_col - 1)

    def clear_row(self, row: int) -> None:
        """Blank a single row."""
        if not 0 <= row < self.rows():
            raise self._invalid_position(row, 0)
        start = row * self.cols()
        self._cells[start:start + self.cols()] = [_BLANK] * self.cols()
        self._damage.mark_row(row, self.cols())

    def clear(self) -> None:
        """Blank the whole grid."""
        self._cells = [_BLANK] * len(self._cells)
        self._damage.mark_all()

    def _clear_wide_span_at(self, row: int, col: int) -> None:
        index = self._index_of(row, col)
        if index is None:
            return
        width = self._cells[index].width
        if width is CellWidth.DOUBLE:
            self._cells[index] = _BLANK
            self._damage.mark(row, col)
            if col + 1 < self.cols():
                self._cells[index + 1] = _BLANK
                self._damage.mark(row, col + 1)
        elif width is CellWidth.CONTINUATION:
            self._cells[index] = _BLANK
            self._damage.mark(row, col)
            if col > 0 and self._cells[index - 1].width is CellWidth.DOUBLE:
                self._cells[index - 1] = _BLANK
                self._damage.mark(row, col - 1)

    def _normalize_row(self, row: int) -> None:
        cols = self.cols()
        if not 0 <= row < self.rows() or cols == 0:
            return
        start = row * cols
        for col in range(cols):
            index = start + col
            cell = self._cells[index]
            if cell.width is CellWidth.CONTINUATION:
                has_leader = col > 0 and self._cells[index - 1].width is CellWidth.DOUBLE
                if not has_leader:
                    self._cells[index] = _BLANK
            elif cell.width is CellWidth.DOUBLE:
                if col + 1 >= cols:
                    self._cells[index] = replace(cell, width=CellWidth.SINGLE)
                else:
                    self._cells[index + 1] = Cell.continuation(cell.attrs)