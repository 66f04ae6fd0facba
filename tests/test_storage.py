import pytest

from blocktris.storage import Dao, FileManager


class _PairDao(Dao):
    def parse(self, text):
        key, value = text.split("=")
        return key, value

    def to_string(self, obj):
        return f"{obj[0]}={obj[1]}"


def test_missing_file_has_no_lines(tmp_path):
    assert FileManager(tmp_path / "absent.txt").read_lines() == []


def test_write_then_read_round_trip(tmp_path):
    manager = FileManager(tmp_path / "data.txt")
    lines = ["first", "", "third line"]
    manager.write_lines(lines)
    assert manager.read_lines() == lines


def test_every_line_ends_with_newline(tmp_path):
    path = tmp_path / "data.txt"
    FileManager(path).write_lines(["a", "b"])
    assert path.read_text(encoding="utf-8") == "a\nb\n"


def test_last_line_without_newline_is_read(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"x\r\ny")
    assert FileManager(str(path)).read_lines() == ["x", "y"]


def test_dao_round_trip(tmp_path):
    dao = _PairDao(FileManager(tmp_path / "pairs.txt"))
    pairs = [("a", "1"), ("b", "2")]
    dao.set_all_objects(pairs)
    assert dao.get_all_objects() == pairs


def test_dao_empty_file_gives_no_objects(tmp_path):
    dao = _PairDao(FileManager(tmp_path / "pairs.txt"))
    assert dao.get_all_objects() == []


def test_dao_is_abstract(tmp_path):
    with pytest.raises(TypeError):
        Dao(FileManager(tmp_path / "x.txt"))