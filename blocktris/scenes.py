"""Scenes shown one after another, and the director that runs them."""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from blocktris.console import WIDTH, Console, Key, KeyReader
from blocktris.records import SingleScore, SingleScoreManager, current_date
from blocktris.textutil import ProgramError
from blocktris.ui import State, UIElement
from blocktris.widgets import Canvas, InputToast, NoticeToast, Toast

_IDLE = 0.005
GAME_TOP = 15


class Scene(ABC):
    """One screen of the program."""

    @abstractmethod
    def action(self) -> str:
        """Run the scene and return the next scene's name; empty means quit."""


class FunctionScene(Scene):
    """Draws a canvas, then runs a function that names the next scene."""

    def __init__(self, canvas: Canvas, function: Callable[[], str]):
        if function is None:
            raise ProgramError("function parameter is None")
        self.canvas = canvas
        self.function = function

    def action(self) -> str:
        self.canvas.draw()
        return self.function()


class UIScene(Scene):
    """Feeds keys to a UI until it ends and a handler names the next scene."""

    def __init__(
        self,
        background: Canvas,
        ui: UIElement,
        next_scene_name_handler: Callable[[UIElement, State], str],
        key_reader: "KeyReader | None" = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.background = background
        self.ui = ui
        self.next_scene_name_handler = next_scene_name_handler
        self.key_reader = key_reader if key_reader is not None else KeyReader()
        self._sleep = sleep

    def action(self) -> str:
        self.ui.draw()
        self.background.draw()
        while True:
            key = self.key_reader.get_key()
            if key != Key.NULL:
                self.ui.handle_key(key)
                if self.ui.ended:
                    name = self.next_scene_name_handler(
                        self.ui.selected_leaf(), self.ui.whole_state()
                    )
                    if name:
                        return name
            else:
                self._sleep(_IDLE)
            self.background.update()


class SingleModeGameScene(Scene):
    """Plays one single-player game, then records the player's score."""

    def __init__(
        self,
        canvas: Canvas,
        tetris,
        next_scene_name: str,
        score_manager: SingleScoreManager,
        *,
        key_reader: "KeyReader | None" = None,
        console: "Console | None" = None,
        notice_toast: "Toast | None" = None,
        input_toast: "Toast | None" = None,
        date_provider: Callable[[], str] = current_date,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.canvas = canvas
        self.tetris = tetris
        self.next_scene_name = next_scene_name
        self.score_manager = score_manager
        self.key_reader = key_reader if key_reader is not None else KeyReader()
        console = console if console is not None else Console()
        self.notice_toast = (
            notice_toast if notice_toast is not None else NoticeToast(self.key_reader, console)
        )
        self.input_toast = (
            input_toast if input_toast is not None else InputToast(self.key_reader, console)
        )
        self.date_provider = date_provider
        self._sleep = sleep

    def action(self) -> str:
        tetris = self.tetris
        tetris.draw(WIDTH // 2 - tetris.width // 2, GAME_TOP)
        self.canvas.draw()
        controls = {
            Key.UP: tetris.turn_right,
            Key.DOWN: tetris.move_down,
            Key.RIGHT: tetris.move_right,
            Key.LEFT: tetris.move_left,
            Key.SPACE: tetris.drag_down,
            ord("c"): tetris.hold,
        }
        while not tetris.ended:
            tetris.update()
            key = self.key_reader.get_key()
            command = controls.get(key)
            if command is not None:
                command()
            elif key == Key.NULL:
                self._sleep(0.001)
        self.notice_toast.ask("Game Over")
        name = self.input_toast.ask("Enter your name!!")
        self.score_manager.insert(SingleScore(name, self.date_provider(), tetris.score))
        return self.next_scene_name


class Director:
    """Knows how to build each scene by name and runs them in turn."""

    def __init__(self, console: "Console | None" = None):
        self.console = console if console is not None else Console()
        self.scenes: dict[str, Callable[[], Scene]] = {}
        self.current_scene_name = ""

    def enroll_scene(self, name: str, factory: Callable[[], Scene]) -> None:
        self.scenes[name] = factory

    def run(self, start_scene_name: str) -> None:
        """Run scenes from ``start_scene_name`` until one returns an empty name."""
        self.current_scene_name = start_scene_name
        while True:
            self.console.clear()
            factory = self.scenes.get(self.current_scene_name)
            if factory is None:
                raise ProgramError(f"unknown scene: {self.current_scene_name}")
            self.current_scene_name = factory().action()
            if self.current_scene_name == "":
                break
        self.console.write("종료")