"""Selectable on-screen elements arranged in grids, lists and text fields."""

from collections.abc import Callable

from blocktris.console import Color, Console, Key
from blocktris.painting import ColorPainter, Painter, PaintStd, blank_painter
from blocktris.printing import AlignX, AlignY, ColorPrinter, Printer
from blocktris.textutil import ProgramError, split
from blocktris.widgets import ScannerCreator

State = dict[str, str]


class UIElement:
    """A boxed, named element that may hold child elements on a grid.

    One child is pointed at; selecting the element passes the selection down
    to it unless ``select_propagation`` is off, in which case the element and
    all of its children are selected together.
    """

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        text: str = "",
        map_w: int = 0,
        map_h: int = 0,
        *,
        selected_painter: "Painter | None" = None,
        unselected_painter: "Painter | None" = None,
        selected_printer: "Printer | None" = None,
        unselected_printer: "Printer | None" = None,
        border: bool = True,
        console: "Console | None" = None,
    ):
        self.console = console if console is not None else Console()
        if selected_painter is None:
            selected_painter = ColorPainter(["*"], Color.AQUA, Color.BLACK, self.console)
        if unselected_painter is None:
            unselected_painter = ColorPainter(["*"], Color.WHITE, Color.BLACK, self.console)
        if selected_printer is None:
            selected_printer = ColorPrinter(
                AlignX.CENTER, AlignY.MIDDLE, Color.AQUA, Color.BLACK, self.console
            )
        if unselected_printer is None:
            unselected_printer = ColorPrinter(
                AlignX.CENTER, AlignY.MIDDLE, Color.WHITE, Color.BLACK, self.console
            )
        self.selected_painter = selected_painter
        self.unselected_painter = unselected_painter
        self.selected_printer = selected_printer
        self.unselected_printer = unselected_printer
        self.painter: Painter = unselected_painter
        self.printer: Printer = unselected_printer

        self.parent: "UIElement | None" = None
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.name = text
        self.ended = False
        self.border = border
        self.terminal = True
        self.state_propagation = True
        self.select_propagation = True
        self.selected = False
        self.state_getter: "Callable[[UIElement], State] | None" = None

        self.map_w = map_w
        self.map_h = map_h
        self.grid: list[list[tuple[UIElement | None, bool]]] = [
            [(None, False)] * map_w for _ in range(map_h)
        ]
        self.children: list[UIElement] = []
        self.select_point_x = 0
        self.select_point_y = 0
        self._pointable_enrolled = False
        self.unselect(False)

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    def _set_selected_state(self) -> None:
        self.selected = True
        self.printer = self.selected_printer
        self.painter = self.selected_painter

    def _set_unselected_state(self) -> None:
        self.selected = False
        self.printer = self.unselected_printer
        self.painter = self.unselected_painter

    def _in_grid(self, x: int, y: int) -> bool:
        return 0 <= x < self.map_w and 0 <= y < self.map_h

    def _exists(self, x: int, y: int) -> bool:
        return self._in_grid(x, y) and self.grid[y][x][0] is not None

    def _pointable(self, x: int, y: int) -> bool:
        return self._exists(x, y) and self.grid[y][x][1]

    def _point_to(self, x: int, y: int) -> None:
        if not self._exists(x, y):
            raise ProgramError("no exist")
        self.select_point_x = x
        self.select_point_y = y

    def _select_other(self, x: int, y: int, redraw: bool = True) -> None:
        if not self._exists(x, y):
            raise ProgramError("no exist")
        self.unselect(redraw)
        self._point_to(x, y)
        self.select(redraw)

    def _pointed(self) -> "UIElement":
        if not self.children:
            raise ProgramError("no child")
        return self.grid[self.select_point_y][self.select_point_x][0]

    def _select_towards(self, dx: int, dy: int, redraw: bool = True) -> bool:
        nx, ny = self.select_point_x + dx, self.select_point_y + dy
        if self._pointable(nx, ny):
            self._select_other(nx, ny, redraw)
            return True
        return False

    def _select_up(self, redraw: bool = True) -> bool:
        return self._select_towards(0, -1, redraw)

    def _select_down(self, redraw: bool = True) -> bool:
        return self._select_towards(0, 1, redraw)

    def _select_left(self, redraw: bool = True) -> bool:
        return self._select_towards(-1, 0, redraw)

    def _select_right(self, redraw: bool = True) -> bool:
        return self._select_towards(1, 0, redraw)

    def _draw_border(self) -> None:
        if self.border:
            self.painter.rect_border(self.x, self.y, self.w, self.h, PaintStd.CURSOR)

    def _draw_text(self) -> None:
        pw, ph = self.painter.width, self.painter.height
        self.printer.print_text(
            self.x + pw, self.y + ph, self.w - 2 * pw, self.h - 2 * ph, split(self.name, "\n")
        )

    def select(self, redraw: bool = True) -> None:
        """Select the element that is, in effect, the innermost one."""
        if self.select_propagation:
            if not self.children:
                self._set_selected_state()
            else:
                self._pointed().select(False)
        else:
            self._set_selected_state()
            for child in self.children:
                child.select(False)
        if redraw:
            self.draw()

    def unselect(self, redraw: bool = True) -> None:
        if self.select_propagation:
            if not self.children:
                self._set_unselected_state()
            else:
                self._pointed().unselect(False)
        else:
            self._set_unselected_state()
            for child in self.children:
                child.unselect(False)
        if redraw:
            self.draw()

    def set_root_end(self, flag: bool) -> None:
        """Set the end flag of the topmost ancestor."""
        root = self
        while root.parent is not None:
            root = root.parent
        root.ended = flag

    def selected_leaf(self) -> "UIElement":
        """The element that is finally selected beneath this one."""
        if self.select_propagation and self.children:
            return self._pointed().selected_leaf()
        return self

    def whole_state(self) -> State:
        """This element's state merged with that of everything below it."""
        state = self.state()
        if self.state_propagation:
            state.update(self.sub_element_state())
        return state

    def state(self) -> State:
        if self.state_getter is not None:
            return dict(self.state_getter(self))
        return {self.name: ""} if self.name else {}

    def sub_element_state(self) -> State:
        state: State = {}
        for child in self.children:
            state.update(child.whole_state())
        return state

    def enroll(
        self, element: "UIElement", x: int, y: int, selectable: bool = True, select: bool = False
    ) -> None:
        """Add ``element`` at grid cell (x, y), placing it relative to this element."""
        if not self._in_grid(x, y) or self._exists(x, y):
            raise ProgramError(f"can not enroll button in ({x}, {y})")
        element.parent = self
        self.children.append(element)
        element.move(self.x, self.y, False)
        self.grid[y][x] = (element, selectable)
        if not self._pointable_enrolled and selectable:
            self._pointable_enrolled = True
            self._point_to(x, y)
            self.select(False)
        elif select:
            self._select_other(x, y, False)
        else:
            element.unselect(False)

    def move(self, dx: int, dy: int, redraw: bool = True) -> None:
        if redraw:
            self.erase()
        self.x += dx
        self.y += dy
        for child in self.children:
            child.move(dx, dy, redraw)
        if redraw:
            self.draw()

    def move_to(self, x: int, y: int, redraw: bool = True) -> None:
        self.move(x - self.x, y - self.y, redraw)

    def draw(self) -> None:
        for child in self.children:
            child.draw()
        self._draw_border()
        self._draw_text()

    def redraw(self) -> None:
        self.erase()
        self.draw()

    def erase(self) -> None:
        blank_painter(self.w, self.h, self.console).point(self.x, self.y)

    def draw_all_text(self) -> None:
        """Draw the text of this element and of every element below it."""
        for child in self.children:
            child.draw_all_text()
        self._draw_text()
        if not self.terminal:
            self._pointed().draw()

    def handle_key(self, key: int) -> bool:
        """Handle a key, trying the pointed child first; return whether it was used."""
        if self.select_propagation and self.children:
            if self._pointed().handle_key(key):
                return True
        if key == Key.UP:
            return self._select_up()
        if key == Key.DOWN:
            return self._select_down()
        if key == Key.LEFT:
            return self._select_left()
        if key == Key.RIGHT:
            return self._select_right()
        if key == Key.SPACE:
            self.set_root_end(True)
            return True
        return False


class UIListElement(UIElement):
    """A vertical list of equally sized elements that scrolls its visible window."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        length: int = 10,
        visible: int = 10,
        *,
        selected_painter: "Painter | None" = None,
        unselected_painter: "Painter | None" = None,
        selected_printer: "Printer | None" = None,
        unselected_printer: "Printer | None" = None,
        console: "Console | None" = None,
    ):
        super().__init__(
            x,
            y,
            w,
            h,
            "",
            1,
            length,
            selected_painter=selected_painter,
            unselected_painter=unselected_painter,
            selected_printer=selected_printer,
            unselected_printer=unselected_printer,
            border=False,
            console=console,
        )
        self.list_len = visible
        self.start_idx = 0
        self.element_w: "int | None" = None
        self.element_h: "int | None" = None

    def set_element_size(self, w: int, h: int) -> None:
        """Fix the size every element must have; allowed only once."""
        if self.element_w is not None:
            raise ProgramError("element size is already set")
        self.element_w = w
        self.element_h = h

    def enroll(
        self, element: UIElement, x: int, y: int, selectable: bool = True, select: bool = False
    ) -> None:
        if self.element_w is not None:
            if (element.width, element.height) != (self.element_w, self.element_h):
                raise ProgramError("element Size does not match with set size")
        else:
            self.set_element_size(element.width, element.height)
        super().enroll(element, x, y, True, select)

    def erase(self) -> None:
        Painter([" "], self.console).rect(self.x, self.y, self.w, self.h)

    def _visible_children(self) -> list[UIElement]:
        return self.children[self.start_idx : self.start_idx + self.list_len]

    def _finish_drawing(self) -> None:
        self._draw_border()
        self._draw_text()
        if self.children:
            self._pointed().draw()

    def redraw(self) -> None:
        for child in self._visible_children():
            child.redraw()
        self._finish_drawing()

    def draw(self) -> None:
        for child in self._visible_children():
            child.draw()
        self._finish_drawing()

    def handle_key(self, key: int) -> bool:
        if key == Key.UP:
            if self._select_up(False) and self.select_point_y < self.start_idx:
                self.start_idx -= 1
                self.move(0, self.element_h - 1, False)
            self.redraw()
            return True
        if key == Key.DOWN:
            if self._select_down(False):
                end_idx = self.start_idx + self.list_len - 1
                if self.select_point_y > end_idx:
                    self.start_idx += 1
                    self.move(0, -(self.element_h - 1), False)
            self.redraw()
            return True
        if key == Key.SPACE:
            self.set_root_end(True)
            return True
        return False


class UIScannerElement(UIElement):
    """A boxed text field; its state is the typed text under its name."""

    def __init__(
        self,
        x: int,
        y: int,
        w: int,
        h: int,
        name: str,
        scanner_creator: "ScannerCreator | None" = None,
        *,
        selected_painter: "Painter | None" = None,
        unselected_painter: "Painter | None" = None,
        selected_printer: "Printer | None" = None,
        unselected_printer: "Printer | None" = None,
        border: bool = True,
        console: "Console | None" = None,
    ):
        super().__init__(
            x,
            y,
            w,
            h,
            name,
            0,
            0,
            selected_painter=selected_painter,
            unselected_painter=unselected_painter,
            selected_printer=selected_printer,
            unselected_printer=unselected_printer,
            border=border,
            console=console,
        )
        if not self.unselected_painter.same_point_size(self.selected_painter):
            raise ProgramError(
                "selectedPainter's point shape is not same to unselectedPainter's"
            )
        creator = scanner_creator if scanner_creator is not None else ScannerCreator()
        pw, ph = self.unselected_painter.width, self.unselected_painter.height
        self.scanner = creator.create_scanner(
            x + pw,
            y + ph,
            w - 2 * pw,
            h - 2 * ph,
            Printer(AlignX.CENTER, AlignY.MIDDLE, self.console),
        )
        self.unselect(False)

    def draw(self) -> None:
        self.painter.rect_border(self.x, self.y, self.w, self.h, PaintStd.CURSOR)
        self.scanner.draw()

    def move(self, dx: int, dy: int, redraw: bool = True) -> None:
        super().move(dx, dy, redraw)
        self.scanner.move(dx, dy, redraw)

    def state(self) -> State:
        return {self.name: self.scanner.text}

    def handle_key(self, key: int) -> bool:
        """Arrow keys are left to the parent; anything else is typed."""
        if key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
            return False
        self.scanner.enter(int(key))
        return True