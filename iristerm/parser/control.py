"""C0 control characters."""

from __future__ import annotations

from typing import Optional

from .actions import (
    Action,
    Backspace,
    Bell,
    CarriageReturn,
    FormFeed,
    LineFeed,
    Tab,
    VerticalTab,
)

_CONTROLS = {
    0x07: Bell(),
    0x08: Backspace(),
    0x09: Tab(),
    0x0A: LineFeed(),
    0x0B: VerticalTab(),
    0x0C: FormFeed(),
    0x0D: CarriageReturn(),
}


def parse_control(byte: int) -> Optional[Action]:
    """The action for a supported C0 control byte, or None."""
    return _CONTROLS.get(byte)