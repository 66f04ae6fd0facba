import io
import re

from blocktris.console import Color, Console
from blocktris.painting import ColorPainter, Painter, PaintStd, blank_painter

_WRITE = re.compile(r"\x1b\[(-?\d+);(-?\d+)H([^\x1b]*)")


def _writes(stream):
    return [(int(col) - 1, int(row) - 1, text) for row, col, text in _WRITE.findall(stream.getvalue())]


def _painter(shape=("*",)):
    stream = io.StringIO()
    return Painter(shape, Console(stream)), stream


def test_point_size_from_shape():
    painter, _ = _painter(["ab", "c"])
    assert (painter.width, painter.height) == (len("ab"), 2)


def test_point_writes_each_line_on_its_row():
    painter, stream = _painter(["ab", "cd"])
    painter.point(3, 4)
    assert _writes(stream) == [(3, 4, "ab"), (3, 5, "cd")]


def test_horizontal_steps_by_point_width():
    painter, stream = _painter(["■"])
    painter.horizontal(0, 0, 3)
    assert [x for x, _, _ in _writes(stream)] == [0, painter.width, 2 * painter.width]


def test_cursor_standard_matches_point_standard():
    painter, stream = _painter(["■"])
    other, other_stream = _painter(["■"])
    painter.rect(0, 0, 2 * painter.width, 2, PaintStd.CURSOR)
    other.rect(0, 0, 2, 2)
    assert stream.getvalue() == other_stream.getvalue()


def test_rect_border_covers_only_edges():
    painter, stream = _painter()
    painter.rect_border(0, 0, 3, 3)
    cells = {(x, y) for x, y, _ in _writes(stream)}
    for i in range(3):
        assert {(i, 0), (i, 2), (0, i), (2, i)} <= cells
    assert (1, 1) not in cells


def test_rect_fills_area():
    painter, stream = _painter()
    painter.rect(0, 0, 2, 3)
    cells = {(x, y) for x, y, _ in _writes(stream)}
    assert cells == {(x, y) for x in range(2) for y in range(3)}


def test_eraser_has_same_size_and_blanks():
    painter, _ = _painter(["■■", "■■"])
    eraser = painter.eraser()
    assert eraser.same_point_size(painter)
    assert all(set(line) == {" "} for line in eraser.shape)


def test_blank_painter_shape_and_cap():
    assert blank_painter(5, 2).shape == [" " * 5] * 2
    assert blank_painter(100, 1).width == 60


def test_fill_with_replaces_elements():
    painter, _ = _painter(["■■"])
    painter.fill_with("□")
    assert painter.shape == ["□□"]


def test_copy_is_independent():
    painter, _ = _painter(["■"])
    duplicate = painter.copy()
    duplicate.fill_with(" ")
    assert painter.shape == ["■"]
    assert duplicate.same_point_size(painter)


def test_color_painter_sets_colors_before_drawing():
    stream = io.StringIO()
    painter = ColorPainter(["*"], Color.RED, Color.BLUE, Console(stream))
    painter.point(0, 0)
    expected_stream = io.StringIO()
    expected = Console(expected_stream)
    expected.change_text_color(Color.RED)
    expected.change_background_color(Color.BLUE)
    assert stream.getvalue().startswith(expected_stream.getvalue())
    assert _writes(stream) == [(0, 0, "*")]


def test_color_painter_set_color_and_copy():
    painter = ColorPainter(["■"], console=Console(io.StringIO()))
    painter.set_color(Color.AQUA, Color.GRAY)
    duplicate = painter.copy()
    assert isinstance(duplicate, ColorPainter)
    assert (duplicate.point_color, duplicate.background_color) == (Color.AQUA, Color.GRAY)
    assert duplicate.shape == painter.shape