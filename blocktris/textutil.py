"""Small text helpers shared across the package."""

import unicodedata
import uuid


class ProgramError(Exception):
    """Raised when the program reaches a state it cannot continue from."""


def split(text: str, key: str) -> list[str]:
    """Split ``text`` on every occurrence of ``key``, keeping empty pieces."""
    if not key:
        raise ValueError("separator must not be empty")
    return text.split(key)


def text_width(text: str) -> int:
    """Number of terminal cells ``text`` occupies.

    Wide, full-width and ambiguous characters (box drawing, middle dots and
    the like) take two cells; combining marks take none.
    """
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F", "A") else 1
    return width


def new_id() -> str:
    """Return a fresh random identifier in canonical UUID form."""
    return str(uuid.uuid4())