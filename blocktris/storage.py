"""Line-oriented file storage and record access objects built on it."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class FileManager:
    """Reads and writes a text file as a list of lines."""

    def __init__(self, file_name: "str | PathLike[str]"):
        self.path = Path(file_name)

    def read_lines(self) -> list[str]:
        """Return the lines of the file; a missing file has no lines."""
        try:
            with self.path.open(encoding="utf-8", newline=None) as handle:
                content = handle.read()
        except FileNotFoundError:
            return []
        lines = content.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the file's content, writing each line followed by a newline."""
        with self.path.open("w", encoding="utf-8", newline="\n") as handle:
            for line in lines:
                handle.write(f"{line}\n")


class Dao(ABC, Generic[T]):
    """Stores objects of one kind, one per line, through a FileManager."""

    def __init__(self, file_manager: FileManager):
        self.file_manager = file_manager

    @abstractmethod
    def parse(self, text: str) -> T:
        """Turn one stored line into an object."""

    @abstractmethod
    def to_string(self, obj: T) -> str:
        """Turn an object into one stored line."""

    def get_all_objects(self) -> list[T]:
        return [self.parse(line) for line in self.file_manager.read_lines()]

    def set_all_objects(self, objects: Iterable[T]) -> None:
        self.file_manager.write_lines(self.to_string(obj) for obj in objects)