"""ANSI and DEC terminal mode flags."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Mode(enum.Enum):
    """Supported ANSI and DEC modes; each value names a TerminalModes field."""

    ORIGIN = "origin"
    WRAP = "wrap"
    INSERT = "insert"
    NEWLINE = "newline"
    KEYPAD = "keypad"
    CURSOR_VISIBLE = "cursor_visible"
    CURSOR_BLINK = "cursor_blink"
    ALTERNATE_SCREEN = "alternate_screen"
    BRACKETED_PASTE = "bracketed_paste"
    FOCUS_EVENT = "focus_event"
    SYNCHRONIZED_OUTPUT = "synchronized_output"

    @classmethod
    def from_ansi_param(cls, param: int) -> Mode | None:
        """Map an ANSI mode parameter to a mode, if known."""
        # Keypad mode is toggled by ESC = / ESC >, not by CSI parameters.
        return _ANSI_PARAMS.get(param)

    @classmethod
    def from_dec_private_param(cls, param: int) -> Mode | None:
        """Map a DEC private mode parameter to a mode, if known."""
        return _DEC_PRIVATE_PARAMS.get(param)


_ANSI_PARAMS = {4: Mode.INSERT, 20: Mode.NEWLINE}

_DEC_PRIVATE_PARAMS = {
    6: Mode.ORIGIN,
    7: Mode.WRAP,
    12: Mode.CURSOR_BLINK,
    25: Mode.CURSOR_VISIBLE,
    1004: Mode.FOCUS_EVENT,
    1049: Mode.ALTERNATE_SCREEN,
    2004: Mode.BRACKETED_PASTE,
    2026: Mode.SYNCHRONIZED_OUTPUT,
}


@dataclass
class TerminalModes:
    """The set of mode flags held by the terminal."""

    origin: bool = False
    wrap: bool = True
    insert: bool = False
    newline: bool = False
    keypad: bool = False
    cursor_visible: bool = True
    cursor_blink: bool = True
    alternate_screen: bool = False
    bracketed_paste: bool = False
    focus_event: bool = False
    synchronized_output: bool = False

    def set_mode(self, mode: Mode, enabled: bool) -> None:
        """Enable or disable one mode."""
        setattr(self, mode.value, enabled)