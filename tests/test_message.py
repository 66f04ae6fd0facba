import pytest

from blocktris.message import to_message, to_object
from blocktris.textutil import ProgramError


def test_to_message_single_pair():
    assert to_message({"name": "tom"}) == "name:tom"


def test_to_message_empty():
    assert to_message({}) == ""


def test_to_object_pairs():
    assert to_object("ip:127.0.0.1/port:5000") == {"ip": "127.0.0.1", "port": "5000"}


@pytest.mark.parametrize(
    "obj",
    [{"a": "1"}, {"a": "1", "b": ""}, {"name": "x", "ip": "127.0.0.1", "port": "5000"}],
)
def test_round_trip(obj):
    assert to_object(to_message(obj)) == obj


def test_duplicate_key_raises():
    with pytest.raises(ProgramError):
        to_object("a:1/a:2")


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        to_object("a:1/b")