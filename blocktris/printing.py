"""Printers place lines of text inside a box with a chosen alignment."""

from collections.abc import Sequence
from enum import Enum

from blocktris.console import Color, Console
from blocktris.textutil import text_width


class AlignX(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class AlignY(Enum):
    TOP = 0
    MIDDLE = 1
    BOTTOM = 2


def _aligned(start: int, size: int, length: int, mode: int) -> int:
    if mode == 0:
        return start
    if mode == 1:
        return start + int((size - length) / 2)
    return start + size - length


class Printer:
    """Prints text lines aligned within a box."""

    def __init__(
        self,
        align_x: AlignX = AlignX.LEFT,
        align_y: AlignY = AlignY.MIDDLE,
        console: "Console | None" = None,
    ):
        self.align_x = align_x
        self.align_y = align_y
        self.console = console if console is not None else Console()

    def copy(self) -> "Printer":
        return Printer(self.align_x, self.align_y, self.console)

    def set_align(self, align_x: AlignX, align_y: AlignY) -> None:
        self.align_x = align_x
        self.align_y = align_y

    def print_text(self, x: int, y: int, w: int, h: int, tokens: Sequence[str]) -> None:
        top = _aligned(y, h, len(tokens), self.align_y.value)
        for row, token in enumerate(tokens):
            left = _aligned(x, w, text_width(token), self.align_x.value)
            self.console.move(left, top + row)
            self.console.write(token)


class ColorPrinter(Printer):
    """A printer that sets its colours before printing."""

    def __init__(
        self,
        align_x: AlignX = AlignX.LEFT,
        align_y: AlignY = AlignY.MIDDLE,
        text_color: Color = Color.WHITE,
        background_color: Color = Color.BLACK,
        console: "Console | None" = None,
    ):
        super().__init__(align_x, align_y, console)
        self.text_color = Color(text_color)
        self.background_color = Color(background_color)

    def copy(self) -> "ColorPrinter":
        return ColorPrinter(
            self.align_x, self.align_y, self.text_color, self.background_color, self.console
        )

    def set_color(self, text_color: Color, background_color: Color) -> None:
        self.text_color = Color(text_color)
        self.background_color = Color(background_color)

    def print_text(self, x: int, y: int, w: int, h: int, tokens: Sequence[str]) -> None:
        self.console.change_text_color(self.text_color)
        self.console.change_background_color(self.background_color)
        super().print_text(x, y, w, h, tokens)