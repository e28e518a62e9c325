import pytest

from iristerm.cell import Color
from iristerm.parser.actions import (
    BackTab,
    ClearTabStop,
    CursorColumn,
    CursorDown,
    CursorForward,
    CursorPositionAction,
    CursorUp,
    DeleteCharacters,
    DeleteLines,
    EraseDisplay,
    EraseLine,
    ForwardTab,
    GraphicsRendition,
    InsertCharacters,
    InsertLines,
    Rendition,
    ResetModes,
    RestoreCursor,
    SaveCursor,
    ScrollUp,
    SetGraphicsRendition,
    SetModes,
    SetScrollRegion,
)
from iristerm.parser.csi import parse_csi


@pytest.mark.parametrize(
    "final, expected",
    [
        ("A", CursorUp(1)),
        ("@", InsertCharacters(1)),
        ("J", EraseDisplay(0)),
        ("L", InsertLines(1)),
        ("M", DeleteLines(1)),
        ("P", DeleteCharacters(1)),
        ("S", ScrollUp(1)),
        ("I", ForwardTab(1)),
        ("Z", BackTab(1)),
        ("`", CursorColumn(1)),
        ("a", CursorForward(1)),
        ("e", CursorDown(1)),
        ("g", ClearTabStop(0)),
        ("r", SetScrollRegion(1, 0)),
    ],
)
def test_csi_uses_default_parameters(final, expected):
    assert parse_csi([], None, ord(final)) == [expected]


def test_csi_parses_sgr_extended_colors():
    assert parse_csi([38, 5, 200], None, ord("m")) == [
        SetGraphicsRendition((GraphicsRendition(Rendition.FOREGROUND, Color.indexed(200)),))
    ]


def test_csi_rejects_non_dec_private_markers_for_modes():
    assert parse_csi([4], ord(">"), ord("h")) == []
    assert parse_csi([25], ord("<"), ord("l")) == []


def test_csi_parses_explicit_erase_modes_and_scroll_region_reset():
    assert parse_csi([1], None, ord("J")) == [EraseDisplay(1)]
    assert parse_csi([2], None, ord("J")) == [EraseDisplay(2)]
    assert parse_csi([3], None, ord("J")) == [EraseDisplay(3)]
    assert parse_csi([1], None, ord("K")) == [EraseLine(1)]
    assert parse_csi([2], None, ord("K")) == [EraseLine(2)]
    assert parse_csi([], None, ord("r")) == [SetScrollRegion(1, 0)]


def test_csi_cursor_position_reads_both_parameters():
    assert parse_csi([12, 24], None, ord("H")) == [CursorPositionAction(12, 24)]
    assert parse_csi([0, 0], None, ord("f")) == [CursorPositionAction(1, 1)]


def test_csi_private_modes_drop_zero_parameters():
    assert parse_csi([25], ord("?"), ord("l")) == [ResetModes(True, (25,))]
    assert parse_csi([0, 4], None, ord("h")) == [SetModes(False, (4,))]
    assert parse_csi([], None, ord("h")) == []


def test_csi_save_and_restore_cursor():
    assert parse_csi([], None, ord("s")) == [SaveCursor()]
    assert parse_csi([], None, ord("u")) == [RestoreCursor()]


def test_csi_unknown_final_byte_is_ignored():
    assert parse_csi([1], None, ord("q")) == []