"""Painters draw a small text shape (a "point") at console positions."""

from collections.abc import Sequence
from enum import Enum

from blocktris.console import Color, Console
from blocktris.textutil import text_width

ERASE_WIDTH = 60


class PaintStd(Enum):
    """Whether sizes are counted in points or in cursor cells."""

    POINT = 0
    CURSOR = 1


class Painter:
    """Draws a multi-line shape as one point and builds lines and boxes of it."""

    def __init__(self, shape: Sequence[str] = ("*",), console: "Console | None" = None):
        self.console = console if console is not None else Console()
        self.shape = list(shape)
        self.height = len(self.shape)
        self.width = max((text_width(line) for line in self.shape), default=0)

    def copy(self) -> "Painter":
        return Painter(self.shape, self.console)

    def same_point_size(self, other: "Painter") -> bool:
        return self.width == other.width and self.height == other.height

    def _press(self, x: int, y: int) -> None:
        for offset, line in enumerate(self.shape):
            self.console.move(x, y + offset)
            self.console.write(line)

    def _horizontal(self, x: int, y: int, w: int) -> None:
        for i in range(w):
            self._press(x + i * self.width, y)

    def _vertical(self, x: int, y: int, h: int) -> None:
        for i in range(h):
            self._press(x, y + i * self.height)

    def _rect_border(self, x: int, y: int, w: int, h: int) -> None:
        self._horizontal(x, y, w)
        self._vertical(x, y, h)
        self._horizontal(x, y + (h - 1) * self.height, w)
        self._vertical(x + (w - 1) * self.width, y, h)

    def _rect(self, x: int, y: int, w: int, h: int) -> None:
        for i in range(h):
            self._horizontal(x, y + i, w)

    def _points_wide(self, w: int, standard: PaintStd) -> int:
        return w // self.width if standard is PaintStd.CURSOR else w

    def _points_high(self, h: int, standard: PaintStd) -> int:
        return h // self.height if standard is PaintStd.CURSOR else h

    def point(self, x: int, y: int) -> None:
        self._press(x, y)

    def horizontal(self, x: int, y: int, w: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._horizontal(x, y, self._points_wide(w, standard))

    def vertical(self, x: int, y: int, h: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._vertical(x, y, self._points_high(h, standard))

    def rect_border(
        self, x: int, y: int, w: int, h: int, standard: PaintStd = PaintStd.POINT
    ) -> None:
        self._rect_border(x, y, self._points_wide(w, standard), self._points_high(h, standard))

    def rect(self, x: int, y: int, w: int, h: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._rect(x, y, self._points_wide(w, standard), self._points_high(h, standard))

    def eraser(self) -> "Painter":
        """A painter of blanks with the same point size."""
        return Painter([" " * self.width] * self.height, self.console)

    def fill_with(self, element: str) -> None:
        """Redraw every line of the shape with repetitions of ``element``."""
        element_width = text_width(element)
        if element_width == 0:
            raise ValueError("fill element must have a visible width")
        self.shape = [element * (text_width(line) // element_width) for line in self.shape]


def blank_painter(w: int, h: int, console: "Console | None" = None) -> Painter:
    """A painter whose single point is a ``w`` by ``h`` block of blanks."""
    line = " " * min(max(w, 0), ERASE_WIDTH)
    return Painter([line] * h, console)


class ColorPainter(Painter):
    """A painter that sets its colours before every drawing call."""

    def __init__(
        self,
        shape: Sequence[str] = ("*",),
        point_color: Color = Color.WHITE,
        background_color: Color = Color.BLACK,
        console: "Console | None" = None,
    ):
        super().__init__(shape, console)
        self.point_color = Color(point_color)
        self.background_color = Color(background_color)

    def _setting(self) -> None:
        self.console.change_text_color(self.point_color)
        self.console.change_background_color(self.background_color)

    def copy(self) -> "ColorPainter":
        return ColorPainter(self.shape, self.point_color, self.background_color, self.console)

    def set_color(self, point_color: Color, background_color: Color) -> None:
        self.point_color = Color(point_color)
        self.background_color = Color(background_color)

    def point(self, x: int, y: int) -> None:
        self._setting()
        super().point(x, y)

    def horizontal(self, x: int, y: int, w: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._setting()
        super().horizontal(x, y, w, standard)

    def vertical(self, x: int, y: int, h: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._setting()
        super().vertical(x, y, h, standard)

    def rect_border(
        self, x: int, y: int, w: int, h: int, standard: PaintStd = PaintStd.POINT
    ) -> None:
        self._setting()
        super().rect_border(x, y, w, h, standard)

    def rect(self, x: int, y: int, w: int, h: int, standard: PaintStd = PaintStd.POINT) -> None:
        self._setting()
        super().rect(x, y, w, h, standard)