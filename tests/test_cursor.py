from iristerm.cursor import Cursor, CursorPosition, CursorStyle


def test_cursor_movement_respects_bounds():
    cursor = Cursor()
    cursor.move_right(100, 80)
    cursor.move_down(100, 24)
    assert cursor.position.col == 79
    assert cursor.position.row == 23

    cursor.move_left(200)
    cursor.move_up(200)
    assert cursor.position.col == 0
    assert cursor.position.row == 0


def test_cursor_save_and_restore_round_trips():
    cursor = Cursor()
    cursor.move_to(4, 9)
    saved = cursor.save()
    cursor.move_to(0, 0)
    cursor.restore(saved)
    assert cursor.position.row == 4
    assert cursor.position.col == 9


def test_cursor_defaults():
    cursor = Cursor()
    assert cursor.position == CursorPosition(0, 0)
    assert cursor.style == CursorStyle.BLOCK
    assert cursor.visible
    assert cursor.blinking


def test_restore_brings_back_style():
    cursor = Cursor()
    cursor.style = CursorStyle.BAR
    saved = cursor.save()
    cursor.style = CursorStyle.UNDERLINE
    cursor.restore(saved)
    assert cursor.style == CursorStyle.BAR


def test_move_down_with_zero_rows_stays_at_zero():
    cursor = Cursor()
    cursor.move_down(5, 0)
    cursor.move_right(5, 0)
    assert cursor.position == CursorPosition(0, 0)


def test_small_moves_are_exact():
    cursor = Cursor()
    cursor.move_to(5, 5)
    cursor.move_up(2)
    cursor.move_left(3)
    assert cursor.position == CursorPosition(3, 2)