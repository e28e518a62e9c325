import pytest

from iristerm.cell import Cell, CellAttrs, CellFlags, CellWidth, Color, ColorKind


def test_cell_default_is_blank():
    cell = Cell()
    assert cell.character == " "
    assert cell.width == CellWidth.SINGLE
    assert cell.attrs.flags == CellFlags(0)
    assert cell.is_empty()


def test_cell_width_detects_ascii():
    assert Cell.from_char("a").width == CellWidth.SINGLE


def test_cell_width_detects_cjk():
    assert Cell.from_char("中").width == CellWidth.DOUBLE
    assert Cell.from_char("中").is_wide()


def test_cell_width_allows_emoji_width_variance():
    assert Cell.from_char("😀").width in (CellWidth.SINGLE, CellWidth.DOUBLE)


def test_cell_with_attrs_keeps_style():
    attrs = CellAttrs(
        fg=Color.ansi(2),
        bg=Color.indexed(8),
        flags=CellFlags.BOLD | CellFlags.UNDERLINE,
    )
    cell = Cell.from_char("x", attrs)
    assert cell.attrs == attrs


def test_continuation_cell():
    attrs = CellAttrs(flags=CellFlags.ITALIC)
    cell = Cell.continuation(attrs)
    assert cell.width == CellWidth.CONTINUATION
    assert cell.attrs == attrs
    assert not cell.is_empty()
    assert not cell.is_wide()


def test_width_columns():
    assert CellWidth.SINGLE.columns() == 1
    assert CellWidth.DOUBLE.columns() == 2
    assert CellWidth.CONTINUATION.columns() == 0


def test_default_cell_equals_from_space():
    assert Cell.from_char(" ") == Cell()


def test_color_constructors():
    assert Color().kind == ColorKind.DEFAULT
    assert Color.rgb(1, 2, 3) == Color.rgb(1, 2, 3)
    assert Color.ansi(1) != Color.indexed(1)
    assert (Color.rgb(1, 2, 3).r, Color.rgb(1, 2, 3).g, Color.rgb(1, 2, 3).b) == (1, 2, 3)


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.indexed(256)
    with pytest.raises(ValueError):
        Color.rgb(0, -1, 0)


def test_cell_rejects_multiple_characters():
    with pytest.raises(ValueError):
        Cell("ab")