"""Translation of complete CSI sequences into actions."""

from __future__ import annotations

from typing import Optional, Sequence

from . import actions as act

_COUNTED = {
    ord("A"): act.CursorUp,
    ord("B"): act.CursorDown,
    ord("C"): act.CursorForward,
    ord("D"): act.CursorBack,
    ord("E"): act.CursorNextLine,
    ord("F"): act.CursorPreviousLine,
    ord("G"): act.CursorColumn,
    ord("`"): act.CursorColumn,
    ord("I"): act.ForwardTab,
    ord("L"): act.InsertLines,
    ord("M"): act.DeleteLines,
    ord("P"): act.DeleteCharacters,
    ord("a"): act.CursorForward,
    ord("d"): act.VerticalPosition,
    ord("e"): act.CursorDown,
    ord("@"): act.InsertCharacters,
    ord("S"): act.ScrollUp,
    ord("T"): act.ScrollDown,
    ord("Z"): act.BackTab,
    ord("X"): act.EraseCharacters,
}

_MODED = {
    ord("J"): act.EraseDisplay,
    ord("K"): act.EraseLine,
    ord("g"): act.ClearTabStop,
}

_DEC_PRIVATE = ord("?")


def _param_or(params: Sequence[int], index: int, default: int) -> int:
    value = params[index] if index < len(params) else 0
    return value or default


def _normalized_modes(params: Sequence[int], private_marker: Optional[int]) -> tuple:
    if private_marker is not None and private_marker != _DEC_PRIVATE:
        return ()
    if private_marker is None and not params:
        return ()
    return tuple(value for value in params if value != 0)


def parse_csi(
    params: Sequence[int], private_marker: Optional[int], final_byte: int
) -> list[act.Action]:
    """Actions for a CSI sequence with the given parameters and final byte."""
    if final_byte in _COUNTED:
        return [_COUNTED[final_byte](_param_or(params, 0, 1))]
    if final_byte in _MODED:
        return [_MODED[final_byte](_param_or(params, 0, 0))]

    final = chr(final_byte)
    if final in "Hf":
        return [act.CursorPositionAction(_param_or(params, 0, 1), _param_or(params, 1, 1))]
    if final == "r":
        bottom = params[1] if len(params) > 1 else 0
        return [act.SetScrollRegion(_param_or(params, 0, 1), bottom)]
    if final == "m":
        return [act.SetGraphicsRendition(act.parse_sgr(params))]
    if final == "s":
        return [act.SaveCursor()]
    if final == "u":
        return [act.RestoreCursor()]
    if final in "hl":
        modes = _normalized_modes(params, private_marker)
        if not modes:
            return []
        private = private_marker == _DEC_PRIVATE
        kind = act.SetModes if final == "h" else act.ResetModes
        return [kind(private, modes)]
    return []