"""Text input field, drawing canvas and modal message boxes."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from blocktris.console import HEIGHT, WIDTH, Console, Key, KeyReader
from blocktris.painting import ColorPainter, Painter, PaintStd, blank_painter
from blocktris.printing import AlignX, AlignY, ColorPrinter, Printer
from blocktris.textutil import split, text_width

_IDLE = 0.005


class Scanner:
    """A one-line text field of limited width."""

    def __init__(self, x: int, y: int, w: int, h: int, printer: Printer):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.printer = printer
        self.text = ""

    @staticmethod
    def _accepts(code: int) -> bool:
        return 21 <= code <= 126 or code == Key.BACKSPACE

    def move(self, dx: int, dy: int, redraw: bool = True) -> None:
        if redraw:
            self.erase()
        self.x += dx
        self.y += dy
        if redraw:
            self.draw()

    def draw(self) -> None:
        self.printer.print_text(self.x, self.y, self.w, self.h, [self.text])

    def erase(self) -> None:
        Painter([" "], self.printer.console).rect(self.x, self.y, self.w, self.h)

    def enter(self, char: "str | int", redraw: bool = True) -> None:
        """Type one character; backspace removes the last one."""
        code = ord(char) if isinstance(char, str) else int(char)
        if not self._accepts(code):
            return
        if code == Key.BACKSPACE:
            if self.text:
                if redraw:
                    self.erase()
                self.text = self.text[:-1]
                if redraw:
                    self.draw()
        elif len(self.text) < self.w:
            self.text += chr(code)
            if redraw:
                self.draw()

    def clear(self, redraw: bool = True) -> None:
        if redraw:
            self.erase()
        self.text = ""


class ScannerCreator:
    """Builds scanners."""

    def create_scanner(self, x: int, y: int, w: int, h: int, printer: Printer) -> Scanner:
        return Scanner(x, y, w, h, printer)


class Canvas:
    """A set of painters fixed at positions, with an optional update hook."""

    def __init__(self) -> None:
        self.figures: list[tuple[Painter, int, int]] = []
        self.update_handler: "Callable[[Canvas], None] | None" = None

    def add_figure(self, painter: Painter, x: int, y: int) -> None:
        self.figures.append((painter, x, y))

    def draw(self) -> None:
        for painter, x, y in self.figures:
            painter.point(x, y)

    def set_update_handler(self, handler: "Callable[[Canvas], None] | None") -> None:
        self.update_handler = handler

    def update(self) -> None:
        if self.update_handler is not None:
            self.update_handler(self)

    def erase(self) -> None:
        for painter, x, y in self.figures:
            Painter([" "], painter.console).rect(x, y, painter.width, painter.height)


class Toast(ABC):
    """A modal box shown in the middle of the screen."""

    def __init__(
        self,
        key_reader: "KeyReader | None" = None,
        console: "Console | None" = None,
        screen_width: int = WIDTH,
        screen_height: int = HEIGHT,
    ):
        self.key_reader = key_reader if key_reader is not None else KeyReader()
        self.console = console if console is not None else Console()
        self.screen_width = screen_width
        self.screen_height = screen_height

    @staticmethod
    def _lines(question: "str | Sequence[str]") -> list[str]:
        return split(question, "\n") if isinstance(question, str) else list(question)

    def _frame(self, lines: list[str], min_width: int = 0) -> tuple[int, int, int, int]:
        h = len(lines) + 4
        w = max(max((text_width(line) for line in lines), default=0) + 10, min_width)
        x = (self.screen_width - w) // 2
        y = (self.screen_height - h) // 2
        blank_painter(w, h, self.console).point(x, y)
        ColorPainter(["#"], console=self.console).rect_border(x, y, w, h, PaintStd.CURSOR)
        ColorPrinter(AlignX.CENTER, AlignY.MIDDLE, console=self.console).print_text(
            x + 1, y + 1, w - 2, h - 2, lines
        )
        return x, y, w, h

    def _next_key(self) -> int:
        while True:
            key = self.key_reader.get_key()
            if key != Key.NULL:
                return key
            time.sleep(_IDLE)

    @abstractmethod
    def ask(self, question: "str | Sequence[str]") -> str:
        """Show the box and return the answer."""


class NoticeToast(Toast):
    """Shows a message until Enter is pressed."""

    def ask(self, question: "str | Sequence[str]") -> str:
        lines = self._lines(question) + ["", "Press Enter!!"]
        x, y, w, h = self._frame(lines)
        while self._next_key() != Key.ENTER:
            pass
        blank_painter(w, h, self.console).point(x, y)
        return ""


class InputToast(Toast):
    """Shows a question and returns the line typed before Enter."""

    def ask(self, question: "str | Sequence[str]") -> str:
        lines = self._lines(question) + ["", ""]
        x, y, w, h = self._frame(lines, min_width=30)
        scanner_w = w - 10
        scanner = Scanner(
            self.screen_width // 2 - scanner_w // 2,
            y + h - 3,
            scanner_w,
            1,
            Printer(AlignX.CENTER, AlignY.MIDDLE, self.console),
        )
        while (key := self._next_key()) != Key.ENTER:
            scanner.enter(int(key))
        blank_painter(w, h, self.console).point(x, y)
        return scanner.text