"""Character sets selectable through ESC ( / ) / * / + designation."""

from __future__ import annotations

import enum
from typing import Optional

_UK_POUND = "\u00a3"

_DEC_SPECIAL = {
    ord("j"): "\u2518",
    ord("k"): "\u2510",
    ord("l"): "\u250c",
    ord("m"): "\u2514",
    ord("n"): "\u253c",
    ord("q"): "\u2500",
    ord("t"): "\u251c",
    ord("u"): "\u2524",
    ord("v"): "\u2534",
    ord("w"): "\u252c",
    ord("x"): "\u2502",
}


class Charset(enum.Enum):
    """A graphic character set that can be designated into G0..G3."""

    ASCII = "ascii"
    UK = "uk"
    DEC_SPECIAL = "dec_special"

    @classmethod
    def from_designator(cls, byte: int) -> Optional[Charset]:
        """The charset named by a designation final byte, or None if unknown."""
        return _DESIGNATORS.get(byte)

    def translate(self, byte: int) -> str:
        """Map a printable byte to the character it shows in this charset."""
        if self is Charset.UK and byte == ord("#"):
            return _UK_POUND
        if self is Charset.DEC_SPECIAL:
            return _DEC_SPECIAL.get(byte, chr(byte))
        return chr(byte)


_DESIGNATORS = {
    ord("0"): Charset.DEC_SPECIAL,
    ord("A"): Charset.UK,
    ord("B"): Charset.ASCII,
}