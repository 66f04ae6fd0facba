import io

import pytest

from blocktris.console import Color, Console, Key, KeyReader, Timer, translate_key


def _console():
    stream = io.StringIO()
    return Console(stream), stream


def test_move_to_origin_is_cursor_home():
    console, stream = _console()
    console.move(0, 0)
    assert stream.getvalue() == "\x1b[1;1H"


def test_background_change_keeps_text_color():
    console, _ = _console()
    console.change_text_color(Color.RED)
    console.change_background_color(Color.BLUE)
    assert console.text_color == Color.RED
    assert console.background_color == Color.BLUE


def test_text_color_change_resets_background():
    console, _ = _console()
    console.change_background_color(Color.BLUE)
    console.change_text_color(Color.YELLOW)
    assert console.background_color == Color.BLACK


def test_every_color_has_its_own_sequence():
    outputs = set()
    for color in Color:
        console, stream = _console()
        console.change_text_color(color)
        outputs.add(stream.getvalue())
    assert len(outputs) == len(Color)


def test_hide_cursor_sequence():
    console, stream = _console()
    console.set_cursor_visible(False)
    assert stream.getvalue() == "\x1b[?25l"


def test_clear_leaves_cursor_at_home():
    console, stream = _console()
    console.clear()
    home, home_stream = _console()
    home.move(0, 0)
    assert stream.getvalue().endswith(home_stream.getvalue())


@pytest.mark.parametrize(
    "sequence, expected",
    [
        ("\x1b[A", Key.UP),
        ("\x1b[B", Key.DOWN),
        ("\x1b[C", Key.RIGHT),
        ("\x1b[D", Key.LEFT),
        (b"\xe0H", Key.UP),
        ("\r", Key.ENTER),
        (" ", Key.SPACE),
        ("\x7f", Key.BACKSPACE),
        ("", Key.NULL),
    ],
)
def test_translate_key(sequence, expected):
    assert translate_key(sequence) == expected


def test_translate_plain_character():
    assert translate_key("c") == ord("c")


def test_key_reader_splits_pending_input():
    pending = iter(["ab\x1b[B", ""])
    reader = KeyReader(poll=lambda: next(pending, ""))
    keys = [reader.get_key() for _ in range(4)]
    assert keys == [ord("a"), ord("b"), Key.DOWN, Key.NULL]


def test_timer_reports_milliseconds():
    readings = iter([10.0, 10.25])
    timer = Timer(clock=lambda: next(readings))
    assert timer.elapsed() == 250


def test_timer_reset_starts_over():
    readings = iter([1.0, 5.0, 5.0])
    timer = Timer(clock=lambda: next(readings))
    timer.reset()
    assert timer.elapsed() == 0