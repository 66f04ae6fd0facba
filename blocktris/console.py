"""Terminal control: colours, cursor placement, key reading and timing."""

import os
import select
import sys
import time
from collections.abc import Callable
from enum import IntEnum
from typing import TextIO

try:
    import msvcrt
except ImportError:
    msvcrt = None

try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

WIDTH = 200
HEIGHT = 50


class Color(IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    AQUA = 3
    RED = 4
    PURPLE = 5
    YELLOW = 6
    WHITE = 7
    GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_AQUA = 11
    LIGHT_RED = 12
    LIGHT_PURPLE = 13
    LIGHT_YELLOW = 14
    LIGHT_WHITE = 15


class Key(IntEnum):
    NULL = -1
    BACKSPACE = 8
    ENTER = 13
    SPACE = 32
    UP = 72
    LEFT = 75
    RIGHT = 77
    DOWN = 80


def _ansi_code(color: Color, normal: int, bright: int) -> int:
    value = int(color)
    # Console colour bits are blue/green/red; ANSI orders them red/green/blue.
    index = ((value & 1) << 2) | (value & 2) | ((value & 4) >> 2)
    return (bright if value & 8 else normal) + index


class Console:
    """Writes text and control sequences to a terminal stream."""

    def __init__(self, stream: "TextIO | None" = None):
        self.stream = stream if stream is not None else sys.stdout
        self.text_color = Color.WHITE
        self.background_color = Color.BLACK

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _apply_colors(self) -> None:
        fg = _ansi_code(self.text_color, 30, 90)
        bg = _ansi_code(self.background_color, 40, 100)
        self._emit(f"\x1b[{fg};{bg}m")

    def change_text_color(self, color: Color) -> None:
        """Set the text colour; the background goes back to black."""
        self.text_color = Color(color)
        self.background_color = Color.BLACK
        self._apply_colors()

    def change_background_color(self, color: Color) -> None:
        """Set the background colour, keeping the text colour."""
        self.background_color = Color(color)
        self._apply_colors()

    def move(self, x: int, y: int) -> None:
        self._emit(f"\x1b[{y + 1};{x + 1}H")

    def write(self, text: str) -> None:
        self._emit(text)

    def clear(self) -> None:
        self._emit("\x1b[2J")
        self.move(0, 0)

    def change_screen_size(self, width: int, height: int) -> None:
        self._emit(f"\x1b[8;{height};{width}t")

    def set_cursor_visible(self, flag: bool) -> None:
        self._emit("\x1b[?25h" if flag else "\x1b[?25l")


_ESCAPE_KEYS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_PREFIXES = ("\x00", "\xe0")


def _as_key(code: int) -> int:
    try:
        return Key(code)
    except ValueError:
        return code


def translate_key(sequence: "str | bytes") -> int:
    """Map one raw key sequence to its key code."""
    if isinstance(sequence, bytes):
        sequence = sequence.decode("latin-1")
    if not sequence:
        return Key.NULL
    first = sequence[0]
    if first == "\x1b" and len(sequence) == 3 and sequence[1] in "[O":
        return _ESCAPE_KEYS.get(sequence[2], Key.NULL)
    if first in _PREFIXES and len(sequence) == 2:
        return _as_key(ord(sequence[1]))
    if first in "\r\n":
        return Key.ENTER
    if first == "\x7f":
        return Key.BACKSPACE
    return _as_key(ord(first))


def _default_poll() -> str:
    if msvcrt is not None:
        chars = []
        while msvcrt.kbhit():
            chars.append(msvcrt.getwch())
        return "".join(chars)
    fd = sys.stdin.fileno()
    ready, _, _ = select.select([fd], [], [], 0)
    if not ready:
        return ""
    return os.read(fd, 64).decode("utf-8", errors="replace")


def _token_length(buffer: str) -> int:
    if buffer[0] == "\x1b" and len(buffer) >= 3 and buffer[1] in "[O":
        return 3
    if buffer[0] in _PREFIXES and len(buffer) >= 2:
        return 2
    return 1


class KeyReader:
    """Non-blocking key reader; use as a context manager for raw input."""

    def __init__(self, poll: "Callable[[], str] | None" = None):
        self._poll = poll if poll is not None else _default_poll
        self._buffer = ""
        self._saved_mode = None

    def __enter__(self) -> "KeyReader":
        if termios is not None and msvcrt is None and sys.stdin.isatty():
            fd = sys.stdin.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved_mode is not None:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None

    def get_key(self) -> int:
        """Return one pending key code, or ``Key.NULL`` when none is waiting."""
        self._buffer += self._poll()
        if not self._buffer:
            return Key.NULL
        length = _token_length(self._buffer)
        token, self._buffer = self._buffer[:length], self._buffer[length:]
        return translate_key(token)


class Timer:
    """Measures elapsed time in milliseconds since the last reset."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        self._start = self._clock()

    def elapsed(self) -> int:
        return int((self._clock() - self._start) * 1000)