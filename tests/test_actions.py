from iristerm.cell import Color
from iristerm.parser.actions import GraphicsRendition, Rendition, parse_sgr

R = Rendition
GR = GraphicsRendition


def test_sgr_defaults_to_reset_when_empty():
    assert parse_sgr([]) == (GR(R.RESET),)


def test_sgr_parses_truecolor_and_reset_codes():
    assert parse_sgr([1, 38, 2, 1, 2, 3, 49, 22]) == (
        GR(R.BOLD, True),
        GR(R.FOREGROUND, Color.rgb(1, 2, 3)),
        GR(R.BACKGROUND, Color()),
        GR(R.BOLD, False),
        GR(R.DIM, False),
    )


def test_sgr_parses_bright_ansi_colors():
    assert parse_sgr([94, 103]) == (
        GR(R.FOREGROUND, Color.ansi(12)),
        GR(R.BACKGROUND, Color.ansi(11)),
    )


def test_sgr_parses_supported_attribute_toggle_codes():
    assert parse_sgr([1, 2, 3, 4, 5, 7, 8, 9, 22, 23, 24, 25, 27, 28, 29]) == (
        GR(R.BOLD, True),
        GR(R.DIM, True),
        GR(R.ITALIC, True),
        GR(R.UNDERLINE, True),
        GR(R.BLINK, True),
        GR(R.INVERSE, True),
        GR(R.HIDDEN, True),
        GR(R.STRIKETHROUGH, True),
        GR(R.BOLD, False),
        GR(R.DIM, False),
        GR(R.ITALIC, False),
        GR(R.UNDERLINE, False),
        GR(R.BLINK, False),
        GR(R.INVERSE, False),
        GR(R.HIDDEN, False),
        GR(R.STRIKETHROUGH, False),
    )


def test_sgr_parses_standard_and_default_colors():
    foreground = parse_sgr([30, 31, 32, 33, 34, 35, 36, 37, 39])
    assert foreground == tuple(
        GR(R.FOREGROUND, Color.ansi(i)) for i in range(8)
    ) + (GR(R.FOREGROUND, Color()),)

    background = parse_sgr([40, 41, 42, 43, 44, 45, 46, 47, 49])
    assert background == tuple(
        GR(R.BACKGROUND, Color.ansi(i)) for i in range(8)
    ) + (GR(R.BACKGROUND, Color()),)


def test_sgr_clamps_extended_color_components():
    assert parse_sgr([38, 5, 999, 48, 2, 256, 257, 258]) == (
        GR(R.FOREGROUND, Color.indexed(255)),
        GR(R.BACKGROUND, Color.rgb(255, 255, 255)),
    )


def test_sgr_unknown_codes_only_yield_reset():
    assert parse_sgr([6, 200]) == (GR(R.RESET),)


def test_sgr_incomplete_extended_color_consumes_nothing():
    # "38;5" lacks a value, so the 5 is read as blink on its own.
    assert parse_sgr([38, 5]) == (GR(R.BLINK, True),)


def test_sgr_explicit_zero_is_reset():
    assert parse_sgr([0, 1]) == (GR(R.RESET), GR(R.BOLD, True))