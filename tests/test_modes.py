import pytest

from iristerm.modes import Mode, TerminalModes


def test_terminal_modes_default_to_wrap_and_visible_cursor():
    modes = TerminalModes()
    assert modes.wrap
    assert not modes.keypad
    assert modes.cursor_visible
    assert modes.cursor_blink


def test_terminal_modes_can_toggle_flags():
    modes = TerminalModes()
    modes.set_mode(Mode.WRAP, False)
    assert not modes.wrap

    modes.set_mode(Mode.BRACKETED_PASTE, True)
    assert modes.bracketed_paste

    modes.set_mode(Mode.KEYPAD, True)
    assert modes.keypad


def test_mode_parsing_maps_known_parameters():
    assert Mode.from_ansi_param(4) == Mode.INSERT
    assert Mode.from_dec_private_param(25) == Mode.CURSOR_VISIBLE
    assert Mode.from_dec_private_param(9999) is None


@pytest.mark.parametrize(
    ("param", "mode"),
    [
        (6, Mode.ORIGIN),
        (7, Mode.WRAP),
        (12, Mode.CURSOR_BLINK),
        (1004, Mode.FOCUS_EVENT),
        (1049, Mode.ALTERNATE_SCREEN),
        (2004, Mode.BRACKETED_PASTE),
        (2026, Mode.SYNCHRONIZED_OUTPUT),
    ],
)
def test_dec_private_params(param, mode):
    assert Mode.from_dec_private_param(param) == mode


def test_ansi_params():
    assert Mode.from_ansi_param(20) == Mode.NEWLINE
    assert Mode.from_ansi_param(25) is None


def test_every_mode_toggles_its_own_flag():
    for mode in Mode:
        modes = TerminalModes()
        before = getattr(modes, mode.value)
        modes.set_mode(mode, not before)
        assert getattr(modes, mode.value) is (not before)
        changed = [m for m in Mode if getattr(modes, m.value) != getattr(TerminalModes(), m.value)]
        assert changed == [mode]