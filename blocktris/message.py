"""Conversion between flat string dictionaries and ``key:value/...`` messages."""

from collections.abc import Mapping

from blocktris.textutil import ProgramError, split


def to_message(obj: Mapping[str, str]) -> str:
    """Encode a mapping as ``key:value`` pairs joined by ``/``."""
    return "/".join(f"{key}:{value}" for key, value in obj.items())


def to_object(text: str) -> dict[str, str]:
    """Decode a ``key:value/key:value`` message into a dictionary."""
    result: dict[str, str] = {}
    for token in split(text, "/"):
        key, sep, value = token.partition(":")
        if not sep:
            raise ValueError(f"malformed message element: {token!r}")
        if key in result:
            raise ProgramError("key duplicated")
        result[key] = value
    return result