"""Helpers for decoding UTF-8 byte by byte."""

from __future__ import annotations

from typing import Optional

REPLACEMENT_CHARACTER = "\ufffd"


def utf8_sequence_len(byte: int) -> Optional[int]:
    """The sequence length a lead byte announces, or None if it cannot lead."""
    if 0x00 <= byte <= 0x7F:
        return 1
    if 0xC2 <= byte <= 0xDF:
        return 2
    if 0xE0 <= byte <= 0xEF:
        return 3
    if 0xF0 <= byte <= 0xF4:
        return 4
    return None


def is_utf8_continuation(byte: int) -> bool:
    """True for bytes in 0x80..=0xbf."""
    return 0x80 <= byte <= 0xBF


def decode_utf8_char(data: bytes) -> str:
    """The first character of a complete UTF-8 sequence, or U+FFFD if invalid or empty."""
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return REPLACEMENT_CHARACTER
    return text[0] if text else REPLACEMENT_CHARACTER