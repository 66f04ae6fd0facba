"""Score keeping for a game and the panel that shows it."""

from blocktris.painting import ColorPainter, PaintStd
from blocktris.printing import AlignX, ColorPrinter

SCORE_KEYS = ("Level", "Score", "Line ", "Block")


class ScoreBoard:
    """A framed panel listing level, score, cleared lines and placed blocks."""

    def __init__(self, width: int, painter: ColorPainter, height: int = 9):
        self.width = width
        self.height = height
        self.painter = painter
        console = painter.console
        self.key_printer = ColorPrinter(AlignX.LEFT, console=console)
        self.value_printer = ColorPrinter(AlignX.RIGHT, console=console)
        self.eraser = ColorPainter([" "], console=console)
        self.draw_x = 0
        self.draw_y = 0

    def _set_origin(self, draw_x: int, draw_y: int) -> None:
        self.draw_x = draw_x
        self.draw_y = draw_y

    def draw(self, draw_x: int, draw_y: int, level: int, score: int, line: int, block: int) -> None:
        self._set_origin(draw_x, draw_y)
        self.redraw_content(level, score, line, block)
        self.redraw_frame()

    def draw_content(
        self, draw_x: int, draw_y: int, level: int, score: int, line: int, block: int
    ) -> None:
        self._set_origin(draw_x, draw_y)
        self.redraw_content(level, score, line, block)

    def redraw_content(self, level: int, score: int, line: int, block: int) -> None:
        for row, value in enumerate((level, score, line, block)):
            y = self.draw_y + 2 * row
            self.value_printer.print_text(self.draw_x + 2, y + 1, self.width - 4, 1, [str(value)])

    def erase(self) -> None:
        self.eraser.rect(self.draw_x, self.draw_y, self.width, self.height)

    def draw_frame(self, draw_x: int, draw_y: int) -> None:
        self._set_origin(draw_x, draw_y)
        self.redraw_frame()

    def redraw_frame(self) -> None:
        for row, key in enumerate(SCORE_KEYS):
            y = self.draw_y + 2 * row
            self.painter.rect_border(self.draw_x, y, self.width, 3, PaintStd.CURSOR)
            self.key_printer.print_text(self.draw_x + 2, y + 1, self.width * 2 - 4, 1, [key])


class ScoreManager:
    """Tracks level, score, cleared lines and placed blocks."""

    def __init__(self, score_board: ScoreBoard):
        self.score_board = score_board
        self.level = 1
        self.score = 0
        self.lines = 0
        self.blocks = 0
        self.draw_x = 0
        self.draw_y = 0

    def _line_score(self) -> int:
        return self.level * 10

    def _block_score(self) -> int:
        return self.level

    def _line_bonus(self) -> int:
        return self.level * 10

    def draw(self, draw_x: int, draw_y: int) -> None:
        self.draw_x = draw_x
        self.draw_y = draw_y
        self.redraw()

    def redraw(self) -> None:
        self.score_board.draw(
            self.draw_x, self.draw_y, self.level, self.score, self.lines, self.blocks
        )

    def redraw_content(self) -> None:
        self.score_board.redraw_content(self.level, self.score, self.lines, self.blocks)

    def add_blocks(self, count: int) -> None:
        self.blocks += count
        self.score += self._block_score() * count

    def add_lines(self, count: int) -> None:
        """Count cleared lines; clearing several at once earns a bonus."""
        self.lines += count
        self.score += self._line_score() * count + self._line_bonus() * (count - 1)
        self.level = 1 + self.lines // 5