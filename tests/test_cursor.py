import random

from hexview.core.cursor import CursorModel, NibblePhase


def test_move_clamps_without_wrapping():
    cursor = CursorModel(4, 2)

    assert not cursor.move(-1)
    assert cursor.offset == 0

    assert cursor.move(3)
    assert cursor.offset == 3

    assert not cursor.move(1)
    assert cursor.offset == 3

    assert cursor.move(-10)
    assert cursor.offset == 0


def test_move_row_clamps_into_short_last_row():
    # rows: [0..3] [4..7] [8, 9]
    cursor = CursorModel(10, 4)
    cursor.move_to(7)

    assert cursor.move_row(1)
    assert cursor.offset == 9

    assert cursor.move_row(-5)
    assert cursor.offset == 1

    assert cursor.move_row(5)
    assert cursor.offset == 9

    assert not cursor.move_row(1)


def test_move_row_keeps_column():
    cursor = CursorModel(32, 8)
    cursor.move_to(3)

    cursor.move_row(2)

    assert cursor.offset == 19


def test_row_start_and_end():
    cursor = CursorModel(10, 4)
    cursor.move_to(9)

    assert not cursor.move_row_end()
    assert cursor.move_row_start()
    assert cursor.offset == 8

    cursor.move_to(5)
    assert cursor.move_row_end()
    assert cursor.offset == 7


def test_selection_range_is_ordered_and_inclusive():
    cursor = CursorModel(8, 4)
    assert cursor.selection_range() is None

    cursor.move_to(3)
    cursor.start_selection()
    assert cursor.selection_range() == (3, 3)

    cursor.move_to(1)
    assert cursor.selection_range() == (1, 3)

    cursor.move_to(6)
    assert cursor.selection_range() == (3, 6)

    cursor.clear_selection()
    assert cursor.selection_range() is None


def test_empty_cursor_is_disabled():
    cursor = CursorModel(0, 16)

    assert not cursor.enabled
    assert cursor.offset is None
    assert not cursor.move(1)
    assert not cursor.move_row(1)
    assert not cursor.move_row_start()
    assert not cursor.move_row_end()

    cursor.start_selection()
    assert cursor.selection_range() is None


def test_reset_and_clamp():
    cursor = CursorModel(10, 4)
    cursor.move_to(9)
    cursor.start_selection()
    cursor.set_nibble_phase(NibblePhase.LOW)

    cursor.clamp_to(5)
    assert cursor.offset == 4
    assert cursor.selection_range() == (4, 4)

    cursor.reset(3)
    assert cursor.offset == 0
    assert cursor.nibble_phase is NibblePhase.HIGH
    assert cursor.selection_range() is None

    cursor.clamp_to(0)
    assert cursor.offset is None


def test_offset_stays_in_bounds_for_any_moves():
    rng = random.Random(42)

    for _ in range(200):
        length = rng.randint(1, 100)
        cursor = CursorModel(length, rng.randint(1, 17))

        for _ in range(50):
            if rng.random() < 0.5:
                cursor.move(rng.randint(-40, 40))
            else:
                cursor.move_row(rng.randint(-5, 5))

            assert 0 <= cursor.offset < length
