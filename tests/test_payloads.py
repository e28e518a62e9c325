from iristerm.parser.actions import SetHyperlink, SetWindowTitle
from iristerm.parser.payloads import parse_dcs, parse_osc


def test_osc_parses_window_titles():
    assert parse_osc(b"2;Iris") == [SetWindowTitle("Iris")]


def test_osc_zero_also_sets_title():
    assert parse_osc(b"0;Iris") == [SetWindowTitle("Iris")]


def test_osc_parses_hyperlinks():
    assert parse_osc(b"8;id=prompt-1;https://example.com") == [
        SetHyperlink("prompt-1", "https://example.com")
    ]


def test_osc_hyperlink_without_id():
    assert parse_osc(b"8;;https://example.com") == [SetHyperlink(None, "https://example.com")]


def test_osc_hyperlink_finds_id_among_other_params():
    assert parse_osc(b"8;foo=bar:id=abc;https://example.com") == [
        SetHyperlink("abc", "https://example.com")
    ]


def test_osc_hyperlink_rejects_invalid_utf8_uri():
    assert parse_osc(b"8;;\xff") == []


def test_osc_without_separator_is_ignored():
    assert parse_osc(b"2") == []


def test_osc_rejects_invalid_utf8_title():
    assert parse_osc(b"2;\xc3") == []


def test_osc_unknown_command_is_ignored():
    assert parse_osc(b"52;c;data") == []


def test_unsupported_dcs_payloads_are_ignored():
    assert parse_dcs(b"qignored") == []