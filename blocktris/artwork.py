"""Large block-letter title art drawn on scene backgrounds."""

from collections.abc import Sequence

from blocktris.console import WIDTH, Color, Console
from blocktris.painting import ColorPainter
from blocktris.widgets import Canvas

_T = (
    "▦▦▦▦▦",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
)

_E = (
    "▦▦▦▦▦",
    "▦        ",
    "▦        ",
    "▦▦▦▦▦",
    "▦        ",
    "▦        ",
    "▦▦▦▦▦",
)

_R = (
    "▦▦▦▦  ",
    "▦      ▦",
    "▦      ▦",
    "▦▦▦▦  ",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
)

_I = (
    "▦▦▦▦▦",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "    ▦    ",
    "▦▦▦▦▦",
)

_S = (
    "▦▦▦▦▦",
    "▦        ",
    "▦        ",
    "▦▦▦▦▦",
    "        ▦",
    "        ▦",
    "▦▦▦▦▦",
)

_C = (
    "▦▦▦▦▦",
    "▦      ▦",
    "▦        ",
    "▦        ",
    "▦        ",
    "▦      ▦",
    "▦▦▦▦▦",
)

_O = (
    "▦▦▦▦▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦▦▦▦▦",
)

_D = (
    "▦▦▦▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦▦▦▦  ",
)

_V = (
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "▦      ▦",
    "  ▦  ▦   ",
    "    ▦    ",
)

_L = (
    "▦        ",
    "▦        ",
    "▦        ",
    "▦        ",
    "▦        ",
    "▦        ",
    "▦▦▦▦▦",
)

_P = (
    "▦▦▦▦  ",
    "▦      ▦",
    "▦      ▦",
    "▦▦▦▦  ",
    "▦        ",
    "▦        ",
    "▦        ",
)

# The title's E has a short fourth-from-last row.
_TITLE_E = (
    "▦▦▦▦▦",
    "▦        ",
    "▦        ",
    "▦▦▦▦▦",
    "▦    ",
    "▦        ",
    "▦▦▦▦▦",
)

TETRIS_LETTERS = (_T, _TITLE_E, _T, _R, _I, _S)
TETRIS_COLORS = (Color.RED, Color.YELLOW, Color.GREEN, Color.AQUA, Color.BLUE, Color.PURPLE)

SCORE_LETTERS = (_S, _C, _O, _R, _E)
SCORE_COLORS = (Color.RED, Color.YELLOW, Color.GREEN, Color.AQUA, Color.BLUE)
SCORE_POSITIONS = ((65, 10), (80, 10), (95, 10), (110, 10), (125, 10))

DEVELOPER_LETTERS = (_D, _E, _V, _E, _L, _O, _P, _E, _R)
DEVELOPER_COLORS = (
    Color.RED,
    Color.YELLOW,
    Color.GREEN,
    Color.LIGHT_GREEN,
    Color.LIGHT_AQUA,
    Color.AQUA,
    Color.LIGHT_BLUE,
    Color.BLUE,
    Color.PURPLE,
)

TETRIS_ORIGIN = (WIDTH // 2 - 40, 5)
DEVELOPER_ORIGIN = (45, 5)


def _letter_canvas(
    letters: Sequence[Sequence[str]],
    colors: Sequence[Color],
    positions: Sequence[tuple[int, int]],
    console: "Console | None",
) -> Canvas:
    canvas = Canvas()
    for letter, color, (x, y) in zip(letters, colors, positions):
        canvas.add_figure(ColorPainter(list(letter), color, Color.BLACK, console), x, y)
    return canvas


def tetris_canvas(
    x: "int | None" = None, y: "int | None" = None, console: "Console | None" = None
) -> Canvas:
    """The game title, one coloured letter every 13 columns."""
    x = TETRIS_ORIGIN[0] if x is None else x
    y = TETRIS_ORIGIN[1] if y is None else y
    positions = [(x + 13 * i, y) for i in range(len(TETRIS_LETTERS))]
    return _letter_canvas(TETRIS_LETTERS, TETRIS_COLORS, positions, console)


def score_canvas(console: "Console | None" = None) -> Canvas:
    """The heading of the ranking screen."""
    return _letter_canvas(SCORE_LETTERS, SCORE_COLORS, SCORE_POSITIONS, console)


def developer_canvas(
    x: "int | None" = None, y: "int | None" = None, console: "Console | None" = None
) -> Canvas:
    """The heading of the developer screen, one letter every 12 columns."""
    x = DEVELOPER_ORIGIN[0] if x is None else x
    y = DEVELOPER_ORIGIN[1] if y is None else y
    positions = [(x + 12 * i, y) for i in range(len(DEVELOPER_LETTERS))]
    return _letter_canvas(DEVELOPER_LETTERS, DEVELOPER_COLORS, positions, console)