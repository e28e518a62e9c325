import pytest

from iristerm.parser.charset import Charset


@pytest.mark.parametrize(
    "designator, expected",
    [
        (b"0", Charset.DEC_SPECIAL),
        (b"A", Charset.UK),
        (b"B", Charset.ASCII),
    ],
)
def test_known_designators(designator, expected):
    assert Charset.from_designator(designator[0]) is expected


@pytest.mark.parametrize("designator", [b"<", b"Z", b"1"])
def test_unknown_designators_return_none(designator):
    assert Charset.from_designator(designator[0]) is None


def test_uk_charset_maps_hash_to_pound():
    assert Charset.UK.translate(ord("#")) == "\u00a3"


def test_uk_charset_leaves_other_bytes_alone():
    assert Charset.UK.translate(ord("q")) == "q"


def test_ascii_charset_keeps_hash():
    assert Charset.ASCII.translate(ord("#")) == "#"


def test_dec_special_line_drawing():
    assert Charset.DEC_SPECIAL.translate(ord("q")) == "\u2500"
    assert Charset.DEC_SPECIAL.translate(ord("x")) == "\u2502"


@pytest.mark.parametrize(
    "byte, expected",
    [
        (b"j", "\u2518"),
        (b"k", "\u2510"),
        (b"l", "\u250c"),
        (b"m", "\u2514"),
        (b"n", "\u253c"),
        (b"t", "\u251c"),
        (b"u", "\u2524"),
        (b"v", "\u2534"),
        (b"w", "\u252c"),
    ],
)
def test_dec_special_table(byte, expected):
    assert Charset.DEC_SPECIAL.translate(byte[0]) == expected


def test_dec_special_passes_through_unmapped_bytes():
    assert Charset.DEC_SPECIAL.translate(ord("A")) == "A"
    assert Charset.DEC_SPECIAL.translate(ord("#")) == "#"


def test_ascii_translate_is_identity_over_printable_range():
    assert all(Charset.ASCII.translate(byte) == chr(byte) for byte in range(0x20, 0x7F))