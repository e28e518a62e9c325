"""OSC and DCS string payload handling."""

from __future__ import annotations

from typing import Callable, Optional

from .actions import Action, SetHyperlink, SetWindowTitle

# DCS protocols recognised by their final byte. None are supported yet, so
# every DCS payload is consumed without producing actions.
_DCS_HANDLERS: dict[int, Callable[[bytes], list[Action]]] = {}


def _decode(data: bytes) -> Optional[str]:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _parse_hyperlink(data: bytes) -> list[Action]:
    params, _, uri_bytes = data.partition(b";")
    uri = _decode(uri_bytes)
    if uri is None:
        return []
    id_bytes = next(
        (part[len(b"id="):] for part in params.split(b":") if part.startswith(b"id=")),
        None,
    )
    link_id = _decode(id_bytes) if id_bytes is not None else None
    return [SetHyperlink(link_id, uri)]


def parse_osc(payload: bytes) -> list[Action]:
    """Actions for an OSC payload: window titles (0, 2) and hyperlinks (8)."""
    command, separator, data = payload.partition(b";")
    if not separator:
        return []
    if command in (b"0", b"2"):
        title = _decode(data)
        return [] if title is None else [SetWindowTitle(title)]
    if command == b"8":
        return _parse_hyperlink(data)
    return []


def _dcs_final_byte(payload: bytes) -> Optional[int]:
    """The first byte in the final-byte range, which selects the DCS protocol."""
    return next((byte for byte in payload if 0x40 <= byte <= 0x7E), None)


def parse_dcs(payload: bytes) -> list[Action]:
    """Actions for a DCS payload; payloads of unsupported protocols yield none."""
    final = _dcs_final_byte(payload)
    if final is None:
        return []
    handler = _DCS_HANDLERS.get(final)
    if handler is None:
        return []
    return handler(payload)