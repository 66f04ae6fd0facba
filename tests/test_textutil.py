import uuid

import pytest

from blocktris.textutil import new_id, split, text_width


def test_split_simple():
    assert split("a/b/c", "/") == ["a", "b", "c"]


def test_split_keeps_empty_pieces():
    assert split("a//b/", "/") == ["a", "", "b", ""]


def test_split_empty_text_gives_one_empty_piece():
    assert split("", "/") == [""]


def test_split_multi_character_key():
    assert split("x::y::z", "::") == ["x", "y", "z"]


def test_split_rejects_empty_key():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize("text", ["a/b", "/", "", "name/127.0.0.1/5000", "//x//"])
def test_split_round_trip(text):
    assert "/".join(split(text, "/")) == text


def test_text_width_ascii():
    assert text_width("Level") == len("Level")


def test_text_width_wide_characters():
    assert text_width("■") == 2
    assert text_width("ㆍ") == text_width("■")
    assert text_width("■■■") == 3 * text_width("■")


def test_new_id_is_canonical_and_fresh():
    first = new_id()
    second = new_id()
    assert str(uuid.UUID(first)) == first
    assert first != second