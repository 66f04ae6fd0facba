"""A tiny console check runner that reports passes and failures."""

from collections.abc import Callable

from blocktris.console import Color, Console

RULE = "-----------------------------------------\n"


class CheckRunner:
    """Runs named checks and prints a coloured summary."""

    def __init__(self, console: "Console | None" = None):
        self.console = console if console is not None else Console()
        self.total = 0
        self.success = 0
        self.failed = 0
        self.failed_names: list[str] = []

    def _colored(self, color: Color, text: str) -> None:
        self.console.change_text_color(color)
        self.console.write(text)
        self.console.change_text_color(Color.WHITE)

    def start(self) -> None:
        self.total = 0
        self.success = 0
        self.failed = 0
        self.failed_names = []
        self.console.write("Test Start!!!\n")
        self.console.write(RULE)

    def run(self, name: str, function: Callable[[], object]) -> bool:
        """Run one check; a truthy result counts as a pass."""
        self.total += 1
        self.console.write(f"* Test({self.total})\n")
        self.console.write(f"\t- Name   : {name}\n")
        self.console.write("\t- Result : ")
        passed = bool(function())
        if passed:
            self.success += 1
            self._colored(Color.GREEN, "SUCCESS!!!\n")
        else:
            self.failed += 1
            self.failed_names.append(name)
            self._colored(Color.RED, "FAIL\n")
        self.console.write("\n")
        self.console.write(RULE)
        return passed

    def finish(self) -> None:
        self._colored(Color.BLUE, "Total   ")
        self.console.write(f": {self.total}\n")
        self._colored(Color.GREEN, "Success ")
        self.console.write(f": {self.success}\n")
        self._colored(Color.RED, "Fail    ")
        self.console.write(f": {self.failed}\n")
        if self.failed_names:
            self.console.write("Fail Function List:\n")
            for name in self.failed_names:
                self.console.write(f"\t* {name}\n")
        self.console.write(RULE)