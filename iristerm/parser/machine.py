"""A stateful parser turning terminal byte streams into actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import actions as act
from .charset import Charset
from .control import parse_control
from .csi import parse_csi
from .payloads import parse_dcs, parse_osc
from .utf8 import (
    REPLACEMENT_CHARACTER,
    decode_utf8_char,
    is_utf8_continuation,
    utf8_sequence_len,
)

_ESC = 0x1B
_BEL = 0x07
_CAN = 0x18
_SUB = 0x1A
_SHIFT_OUT = 0x0E
_SHIFT_IN = 0x0F
_BACKSLASH = ord("\\")
_U16_MAX = 0xFFFF
_MAX_INTERMEDIATES = 4
_PRIVATE_MARKERS = frozenset(b"?><=")


class ParserState(enum.Enum):
    """States of the escape-sequence parser."""

    GROUND = "ground"
    ESCAPE = "escape"
    ESCAPE_CHARSET = "escape_charset"
    OSC_STRING = "osc_string"
    OSC_ESCAPE = "osc_escape"
    DCS_STRING = "dcs_string"
    DCS_ESCAPE = "dcs_escape"
    IGNORE_STRING = "ignore_string"
    IGNORE_STRING_ESCAPE = "ignore_string_escape"
    CSI_ENTRY = "csi_entry"
    CSI_PARAM = "csi_param"
    CSI_INTERMEDIATE = "csi_intermediate"


@dataclass(frozen=True)
class ParserConfig:
    """Bounds that keep sequence accumulation finite."""

    max_params: int = 16
    max_osc_bytes: int = 4096
    max_dcs_bytes: int = 4096
    max_ignored_string_bytes: int = 4096


class Parser:
    """Parses ANSI/VT byte streams into actions, keeping state across chunks."""

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self._config = config if config is not None else ParserConfig()
        self._state = ParserState.GROUND
        self._charset_slot = 0
        self._params: List[int] = []
        self._intermediates = bytearray()
        self._current_param: Optional[int] = None
        self._private_marker: Optional[int] = None
        self._charsets = [Charset.ASCII] * 4
        self._active_charset = 0
        self._single_shift_charset: Optional[int] = None
        self._last_printed_char: Optional[str] = None
        self._osc_buffer = bytearray()
        self._dcs_buffer = bytearray()
        self._ignored_string_len = 0
        self._utf8_buffer = bytearray()
        self._utf8_expected = 0
        self._handlers: Dict[ParserState, Callable[[int, List[act.Action]], None]] = {
            ParserState.GROUND: self._ground,
            ParserState.ESCAPE: self._escape,
            ParserState.ESCAPE_CHARSET: self._escape_charset,
            ParserState.OSC_STRING: self._osc_string,
            ParserState.OSC_ESCAPE: self._osc_escape,
            ParserState.DCS_STRING: self._dcs_string,
            ParserState.DCS_ESCAPE: self._dcs_escape,
            ParserState.IGNORE_STRING: self._ignored_string,
            ParserState.IGNORE_STRING_ESCAPE: self._ignored_string_escape,
            ParserState.CSI_ENTRY: self._csi_entry,
            ParserState.CSI_PARAM: self._csi_param,
            ParserState.CSI_INTERMEDIATE: self._csi_intermediate,
        }

    def __repr__(self) -> str:
        return f"Parser(state={self._state.name}, config={self._config!r})"

    @property
    def config(self) -> ParserConfig:
        """The bounds this parser was created with."""
        return self._config

    def state(self) -> ParserState:
        """The current parser state."""
        return self._state

    def reset(self) -> None:
        """Drop any partial sequence and return to the ground state."""
        self._state = ParserState.GROUND
        self._params.clear()
        self._intermediates.clear()
        self._current_param = None
        self._private_marker = None
        self._osc_buffer.clear()
        self._dcs_buffer.clear()
        self._ignored_string_len = 0
        self._single_shift_charset = None
        self._reset_utf8()

    def parse(self, data: bytes) -> List[act.Action]:
        """Consume a chunk of bytes and return the actions it completes."""
        out: List[act.Action] = []
        for byte in data:
            self._handlers[self._state](byte, out)
        return out

    # --- shared helpers ------------------------------------------------------

    def _reset_terminal_state(self) -> None:
        self._state = ParserState.GROUND
        self._params.clear()
        self._intermediates.clear()
        self._current_param = None
        self._private_marker = None
        self._charsets = [Charset.ASCII] * 4
        self._active_charset = 0
        self._single_shift_charset = None
        self._last_printed_char = None
        self._reset_utf8()

    def _print(self, character: str) -> act.Print:
        self._last_printed_char = character
        return act.Print(character)

    def _repeat_last_printed(self, count: int, out: List[act.Action]) -> None:
        if self._last_printed_char is not None:
            out.extend([act.Print(self._last_printed_char)] * max(count, 1))

    def _embedded_control(self, byte: int, out: List[act.Action]) -> bool:
        if byte in (_CAN, _SUB):
            self.reset()
            return True
        if self._charset_shift(byte):
            return True
        action = parse_control(byte)
        if action is None:
            return False
        out.append(action)
        return True

    def _charset_shift(self, byte: int) -> bool:
        if byte == _SHIFT_OUT:
            self._active_charset = 1
            return True
        if byte == _SHIFT_IN:
            self._active_charset = 0
            return True
        return False

    def _translate_printable(self, byte: int) -> str:
        slot = self._single_shift_charset
        self._single_shift_charset = None
        if slot is None:
            slot = self._active_charset
        return self._charsets[slot].translate(byte)

    def _push_param(self, value: int) -> None:
        if len(self._params) < self._config.max_params:
            self._params.append(value)

    def _take_current_param(self) -> int:
        value = self._current_param if self._current_param is not None else 0
        self._current_param = None
        return value

    def _take_private_marker(self) -> Optional[int]:
        marker = self._private_marker
        self._private_marker = None
        return marker

    # --- ground and UTF-8 ----------------------------------------------------

    def _ground(self, byte: int, out: List[act.Action]) -> None:
        if self._utf8_expected > 0:
            self._utf8_continuation(byte, out)
            return
        if self._charset_shift(byte):
            return
        action = parse_control(byte)
        if action is not None:
            out.append(action)
            return
        if byte == _ESC:
            self._state = ParserState.ESCAPE
        elif 0x20 <= byte <= 0x7E:
            out.append(self._print(self._translate_printable(byte)))
        elif byte >= 0x80:
            self._utf8_lead(byte, out)

    def _utf8_lead(self, byte: int, out: List[act.Action]) -> None:
        expected = utf8_sequence_len(byte)
        if expected is None:
            out.append(self._print(REPLACEMENT_CHARACTER))
            return
        self._utf8_buffer = bytearray([byte])
        self._utf8_expected = expected
        if expected == 1:
            self._finish_utf8(out)

    def _utf8_continuation(self, byte: int, out: List[act.Action]) -> None:
        if not is_utf8_continuation(byte):
            self._reset_utf8()
            out.append(self._print(REPLACEMENT_CHARACTER))
            self._ground(byte, out)
            return
        self._utf8_buffer.append(byte)
        if len(self._utf8_buffer) == self._utf8_expected:
            self._finish_utf8(out)

    def _finish_utf8(self, out: List[act.Action]) -> None:
        character = decode_utf8_char(bytes(self._utf8_buffer))
        self._reset_utf8()
        out.append(self._print(character))

    def _reset_utf8(self) -> None:
        self._utf8_buffer = bytearray()
        self._utf8_expected = 0

    # --- escape sequences ----------------------------------------------------

    def _escape(self, byte: int, out: List[act.Action]) -> None:
        if self._embedded_control(byte, out):
            return

        self._state = ParserState.GROUND
        char = chr(byte)
        if byte == _ESC:
            self._state = ParserState.ESCAPE
        elif char in "()*+":
            self._state = ParserState.ESCAPE_CHARSET
            self._charset_slot = "()*+".index(char)
        elif char == "[":
            self._state = ParserState.CSI_ENTRY
            self._params.clear()
            self._intermediates.clear()
            self._current_param = None
            self._private_marker = None
        elif char == "]":
            self._state = ParserState.OSC_STRING
            self._osc_buffer.clear()
        elif char == "P":
            self._state = ParserState.DCS_STRING
            self._dcs_buffer.clear()
        elif char in "X^_":
            self._state = ParserState.IGNORE_STRING
            self._ignored_string_len = 0
        elif char == "N":
            self._single_shift_charset = 2
        elif char == "O":
            self._single_shift_charset = 3
        elif char == "c":
            self._reset_terminal_state()
            out.append(act.ResetTerminal())
        else:
            action = _SIMPLE_ESCAPES.get(char)
            if action is not None:
                out.append(action)

    def _escape_charset(self, byte: int, out: List[act.Action]) -> None:
        if self._embedded_control(byte, out):
            return
        self._state = ParserState.GROUND
        charset = Charset.from_designator(byte)
        if charset is not None:
            self._charsets[self._charset_slot] = charset

    # --- CSI -----------------------------------------------------------------

    def _csi_entry(self, byte: int, out: List[act.Action]) -> None:
        if self._embedded_control(byte, out):
            return

        if byte == _ESC:
            self._state = ParserState.ESCAPE
        elif byte in _PRIVATE_MARKERS:
            self._private_marker = byte
            self._state = ParserState.CSI_PARAM
        elif 0x30 <= byte <= 0x39:
            self._current_param = byte - 0x30
            self._state = ParserState.CSI_PARAM
        elif byte == ord(";"):
            self._push_param(0)
            self._state = ParserState.CSI_PARAM
        elif 0x20 <= byte <= 0x2F:
            self._intermediates = bytearray([byte])
            self._state = ParserState.CSI_INTERMEDIATE
        elif 0x40 <= byte <= 0x7E:
            self._state = ParserState.GROUND
            marker = self._take_private_marker()
            if byte == ord("b") and marker is None:
                self._repeat_last_printed(1, out)
            else:
                out.extend(parse_csi([], marker, byte))
        else:
            self.reset()

    def _csi_param(self, byte: int, out: List[act.Action]) -> None:
        if self._embedded_control(byte, out):
            return

        if byte == _ESC:
            self._state = ParserState.ESCAPE
        elif 0x30 <= byte <= 0x39:
            current = self._current_param if self._current_param is not None else 0
            self._current_param = min(current * 10 + (byte - 0x30), _U16_MAX)
        elif byte == ord(";"):
            self._push_param(self._take_current_param())
        elif 0x20 <= byte <= 0x2F:
            self._push_param(self._take_current_param())
            self._intermediates = bytearray([byte])
            self._state = ParserState.CSI_INTERMEDIATE
        elif 0x40 <= byte <= 0x7E:
            self._push_param(self._take_current_param())
            marker = self._take_private_marker()
            self._state = ParserState.GROUND
            if byte == ord("b") and marker is None:
                count = self._params[0] if self._params else 1
                self._repeat_last_printed(count, out)
            else:
                out.extend(parse_csi(self._params, marker, byte))
            self._params.clear()
            self._intermediates.clear()
        else:
            self.reset()

    def _csi_intermediate(self, byte: int, out: List[act.Action]) -> None:
        if self._embedded_control(byte, out):
            return

        if byte == _ESC:
            self._state = ParserState.ESCAPE
        elif 0x20 <= byte <= 0x2F:
            if len(self._intermediates) < _MAX_INTERMEDIATES:
                self._intermediates.append(byte)
        elif 0x40 <= byte <= 0x7E:
            self._state = ParserState.GROUND
            self._intermediates.clear()
            self._params.clear()
            self._current_param = None
            self._private_marker = None
        else:
            self.reset()

    # --- string sequences ----------------------------------------------------

    def _abandon_and_reparse(self, byte: int, out: List[act.Action]) -> None:
        """Drop a truncated string and treat byte as fresh ground input."""
        self.reset()
        self._ground(byte, out)

    def _osc_string(self, byte: int, out: List[act.Action]) -> None:
        if byte not in (_BEL, _ESC) and self._embedded_control(byte, out):
            return
        if byte == _BEL:
            self._finish_osc(out)
        elif byte == _ESC:
            self._state = ParserState.OSC_ESCAPE
        elif len(self._osc_buffer) >= self._config.max_osc_bytes:
            self._abandon_and_reparse(byte, out)
        else:
            self._osc_buffer.append(byte)

    def _osc_escape(self, byte: int, out: List[act.Action]) -> None:
        if byte == _BACKSLASH:
            self._finish_osc(out)
            return
        if len(self._osc_buffer) + 2 > self._config.max_osc_bytes:
            self._abandon_and_reparse(byte, out)
            return
        self._osc_buffer += bytes((_ESC, byte))
        self._state = ParserState.OSC_STRING

    def _dcs_string(self, byte: int, out: List[act.Action]) -> None:
        if byte != _ESC and self._embedded_control(byte, out):
            return
        if byte == _ESC:
            self._state = ParserState.DCS_ESCAPE
        elif len(self._dcs_buffer) >= self._config.max_dcs_bytes:
            self._abandon_and_reparse(byte, out)
        else:
            self._dcs_buffer.append(byte)

    def _dcs_escape(self, byte: int, out: List[act.Action]) -> None:
        if byte == _BACKSLASH:
            self._finish_dcs(out)
            return
        if len(self._dcs_buffer) + 2 > self._config.max_dcs_bytes:
            self._abandon_and_reparse(byte, out)
            return
        self._dcs_buffer += bytes((_ESC, byte))
        self._state = ParserState.DCS_STRING

    def _ignored_string(self, byte: int, out: List[act.Action]) -> None:
        if byte != _ESC and self._embedded_control(byte, out):
            return
        if byte == _ESC:
            self._state = ParserState.IGNORE_STRING_ESCAPE
        elif self._ignored_string_len >= self._config.max_ignored_string_bytes:
            self._abandon_and_reparse(byte, out)
        else:
            self._ignored_string_len += 1

    def _ignored_string_escape(self, byte: int, out: List[act.Action]) -> None:
        if byte == _BACKSLASH:
            self._finish_ignored_string()
            return
        if self._ignored_string_len + 2 > self._config.max_ignored_string_bytes:
            self._abandon_and_reparse(byte, out)
            return
        self._ignored_string_len += 2
        self._state = ParserState.IGNORE_STRING

    def _end_string(self) -> None:
        self._state = ParserState.GROUND
        self._current_param = None
        self._private_marker = None
        self._reset_utf8()

    def _finish_osc(self, out: List[act.Action]) -> None:
        self._end_string()
        out.extend(parse_osc(bytes(self._osc_buffer)))
        self._osc_buffer.clear()

    def _finish_dcs(self, out: List[act.Action]) -> None:
        self._end_string()
        out.extend(parse_dcs(bytes(self._dcs_buffer)))
        self._dcs_buffer.clear()

    def _finish_ignored_string(self) -> None:
        self._end_string()
        self._ignored_string_len = 0


_SIMPLE_ESCAPES: Dict[str, act.Action] = {
    "D": act.Index(),
    "E": act.NextLine(),
    "H": act.SetTabStop(),
    "M": act.ReverseIndex(),
    "Z": act.DeviceAttributes(),
    "7": act.SaveCursor(),
    "8": act.RestoreCursor(),
    "=": act.SetKeypadMode(True),
    ">": act.SetKeypadMode(False),
}