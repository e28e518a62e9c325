"""Terminal operations produced by the escape-sequence parser."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from ..cell import Color


class Action:
    """Base class of every operation the parser emits."""

    __slots__ = ()


@dataclass(frozen=True)
class Print(Action):
    """Print a visible character."""

    character: str


@dataclass(frozen=True)
class Bell(Action):
    """Ring the terminal bell."""


@dataclass(frozen=True)
class Backspace(Action):
    """Move the cursor one cell left."""


@dataclass(frozen=True)
class Tab(Action):
    """Advance to the next tab stop."""


@dataclass(frozen=True)
class ForwardTab(Action):
    """Advance to the next tab stop count times."""

    count: int


@dataclass(frozen=True)
class BackTab(Action):
    """Move backward to the previous tab stop count times."""

    count: int


@dataclass(frozen=True)
class LineFeed(Action):
    """Move to the next line."""


@dataclass(frozen=True)
class VerticalTab(Action):
    """Vertical tab, handled like a line feed."""


@dataclass(frozen=True)
class FormFeed(Action):
    """Form feed, handled like a line feed."""


@dataclass(frozen=True)
class CarriageReturn(Action):
    """Return the cursor to column zero."""


@dataclass(frozen=True)
class Index(Action):
    """Move down one row, scrolling if needed."""


@dataclass(frozen=True)
class NextLine(Action):
    """Move down one row and return to column zero."""


@dataclass(frozen=True)
class ReverseIndex(Action):
    """Move up one row, scrolling down if needed."""


@dataclass(frozen=True)
class ScrollUp(Action):
    """Scroll the active region up by count rows."""

    count: int


@dataclass(frozen=True)
class ScrollDown(Action):
    """Scroll the active region down by count rows."""

    count: int


@dataclass(frozen=True)
class SaveCursor(Action):
    """Save the current cursor state."""


@dataclass(frozen=True)
class RestoreCursor(Action):
    """Restore the saved cursor state."""


@dataclass(frozen=True)
class CursorUp(Action):
    """Move the cursor up by count rows."""

    count: int


@dataclass(frozen=True)
class CursorDown(Action):
    """Move the cursor down by count rows."""

    count: int


@dataclass(frozen=True)
class CursorForward(Action):
    """Move the cursor right by count columns."""

    count: int


@dataclass(frozen=True)
class CursorBack(Action):
    """Move the cursor left by count columns."""

    count: int


@dataclass(frozen=True)
class CursorNextLine(Action):
    """Move down count rows and return to column zero."""

    count: int


@dataclass(frozen=True)
class CursorPreviousLine(Action):
    """Move up count rows and return to column zero."""

    count: int


@dataclass(frozen=True)
class CursorColumn(Action):
    """Move the cursor to a one-based column."""

    column: int


@dataclass(frozen=True)
class CursorPositionAction(Action):
    """Move the cursor to a one-based row and column."""

    row: int
    col: int


@dataclass(frozen=True)
class VerticalPosition(Action):
    """Move the cursor to a one-based row."""

    row: int


@dataclass(frozen=True)
class InsertCharacters(Action):
    """Insert blank characters at the cursor."""

    count: int


@dataclass(frozen=True)
class DeleteCharacters(Action):
    """Delete characters at the cursor."""

    count: int


@dataclass(frozen=True)
class InsertLines(Action):
    """Insert blank lines in the scrolling region."""

    count: int


@dataclass(frozen=True)
class DeleteLines(Action):
    """Delete lines in the scrolling region."""

    count: int


@dataclass(frozen=True)
class EraseDisplay(Action):
    """Erase visible content of the display in the given mode."""

    mode: int


@dataclass(frozen=True)
class EraseLine(Action):
    """Erase visible content of the current row in the given mode."""

    mode: int


@dataclass(frozen=True)
class EraseCharacters(Action):
    """Erase count characters from the cursor."""

    count: int


@dataclass(frozen=True)
class SetTabStop(Action):
    """Set a tab stop at the current column."""


@dataclass(frozen=True)
class ClearTabStop(Action):
    """Clear tab stops: mode 0 the current one, mode 3 all."""

    mode: int


@dataclass(frozen=True)
class SetScrollRegion(Action):
    """Set the scrolling region with one-based bounds; bottom 0 means the last row."""

    top: int
    bottom: int


class Rendition(enum.Enum):
    """Kinds of SGR attribute change."""

    RESET = "reset"
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    INVERSE = "inverse"
    HIDDEN = "hidden"
    STRIKETHROUGH = "strikethrough"
    FOREGROUND = "foreground"
    BACKGROUND = "background"


@dataclass(frozen=True)
class GraphicsRendition:
    """A single SGR change: a flag toggle (bool), a colour, or a reset (None)."""

    kind: Rendition
    value: Union[bool, Color, None] = None


@dataclass(frozen=True)
class SetGraphicsRendition(Action):
    """Apply a sequence of SGR changes."""

    renditions: Tuple[GraphicsRendition, ...]


@dataclass(frozen=True)
class SetWindowTitle(Action):
    """Update the window title."""

    title: str


@dataclass(frozen=True)
class SetHyperlink(Action):
    """Update the active hyperlink target."""

    id: Optional[str]
    uri: str


@dataclass(frozen=True)
class DeviceAttributes(Action):
    """Request primary device attributes."""


@dataclass(frozen=True)
class ResetTerminal(Action):
    """Reset the terminal to its initial state."""


@dataclass(frozen=True)
class SetKeypadMode(Action):
    """Select keypad application mode (True) or numeric mode (False)."""

    application: bool


@dataclass(frozen=True)
class SetModes(Action):
    """Enable ANSI or DEC private modes."""

    private: bool
    modes: Tuple[int, ...]


@dataclass(frozen=True)
class ResetModes(Action):
    """Disable ANSI or DEC private modes."""

    private: bool
    modes: Tuple[int, ...]


_TOGGLES = {
    1: (Rendition.BOLD, True),
    2: (Rendition.DIM, True),
    3: (Rendition.ITALIC, True),
    4: (Rendition.UNDERLINE, True),
    5: (Rendition.BLINK, True),
    7: (Rendition.INVERSE, True),
    8: (Rendition.HIDDEN, True),
    9: (Rendition.STRIKETHROUGH, True),
    23: (Rendition.ITALIC, False),
    24: (Rendition.UNDERLINE, False),
    25: (Rendition.BLINK, False),
    27: (Rendition.INVERSE, False),
    28: (Rendition.HIDDEN, False),
    29: (Rendition.STRIKETHROUGH, False),
}


def _clamp(value: int) -> int:
    return min(value, 0xFF)


def _take_extended_color(rest: deque) -> Optional[Color]:
    """Consume a 5;n or 2;r;g;b colour spec from rest, or leave it untouched."""
    if len(rest) >= 2 and rest[0] == 5:
        rest.popleft()
        return Color.indexed(_clamp(rest.popleft()))
    if len(rest) >= 4 and rest[0] == 2:
        rest.popleft()
        r, g, b = (_clamp(rest.popleft()) for _ in range(3))
        return Color.rgb(r, g, b)
    return None


def parse_sgr(params: Iterable[int]) -> Tuple[GraphicsRendition, ...]:
    """Turn SGR parameters into attribute changes; empty input means reset."""
    rest = deque(params)
    renditions: list[GraphicsRendition] = []

    while rest:
        code = rest.popleft()
        if code == 0:
            renditions.append(GraphicsRendition(Rendition.RESET))
        elif code in _TOGGLES:
            kind, enabled = _TOGGLES[code]
            renditions.append(GraphicsRendition(kind, enabled))
        elif code == 22:
            renditions.append(GraphicsRendition(Rendition.BOLD, False))
            renditions.append(GraphicsRendition(Rendition.DIM, False))
        elif 30 <= code <= 37:
            renditions.append(GraphicsRendition(Rendition.FOREGROUND, Color.ansi(code - 30)))
        elif 90 <= code <= 97:
            renditions.append(GraphicsRendition(Rendition.FOREGROUND, Color.ansi(code - 90 + 8)))
        elif code == 39:
            renditions.append(GraphicsRendition(Rendition.FOREGROUND, Color()))
        elif 40 <= code <= 47:
            renditions.append(GraphicsRendition(Rendition.BACKGROUND, Color.ansi(code - 40)))
        elif 100 <= code <= 107:
            renditions.append(GraphicsRendition(Rendition.BACKGROUND, Color.ansi(code - 100 + 8)))
        elif code == 49:
            renditions.append(GraphicsRendition(Rendition.BACKGROUND, Color()))
        elif code in (38, 48):
            color = _take_extended_color(rest)
            if color is not None:
                kind = Rendition.FOREGROUND if code == 38 else Rendition.BACKGROUND
                renditions.append(GraphicsRendition(kind, color))

    if not renditions:
        renditions.append(GraphicsRendition(Rendition.RESET))
    return tuple(renditions)