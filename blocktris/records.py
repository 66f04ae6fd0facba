"""Stored records: single-mode scores, local users and known servers."""

import bisect
import datetime
from dataclasses import dataclass, field

from blocktris.storage import Dao
from blocktris.textutil import ProgramError, split


def current_date() -> str:
    """Today's date in ISO form."""
    return datetime.date.today().isoformat()


def _fields(text: str, count: int) -> list[str]:
    tokens = split(text, "/")
    if len(tokens) < count:
        raise ValueError(f"expected {count} fields in {text!r}")
    return tokens[:count]


@dataclass
class SingleScore:
    """One finished single-player game; higher scores sort first."""

    name: str
    date: str
    score: int = field(compare=False)

    def __lt__(self, other: "SingleScore") -> bool:
        return self.score > other.score


class SingleScoreDao(Dao[SingleScore]):
    """Stores scores as ``score/name/date`` lines."""

    def parse(self, text: str) -> SingleScore:
        score, name, date = _fields(text, 3)
        return SingleScore(name, date, int(score))

    def to_string(self, obj: SingleScore) -> str:
        return f"{obj.score}/{obj.name}/{obj.date}"


class SingleScoreManager:
    """Keeps scores ranked from highest to lowest and saves every change."""

    def __init__(self, dao: SingleScoreDao):
        self.dao = dao
        self.data: list[SingleScore] = dao.get_all_objects()

    def insert(self, score: SingleScore) -> None:
        """Rank a new score ahead of existing equal ones and save."""
        self.data.insert(bisect.bisect_left(self.data, score), score)
        self.dao.set_all_objects(self.data)


@dataclass
class SingleUser:
    name: str
    win: int
    draw: int
    lose: int
    max_score: int


class SingleUserDao(Dao[SingleUser]):
    """Stores users as ``name/win/draw/lose/max_score`` lines."""

    def parse(self, text: str) -> SingleUser:
        name, win, draw, lose, max_score = _fields(text, 5)
        return SingleUser(name, int(win), int(draw), int(lose), int(max_score))

    def to_string(self, obj: SingleUser) -> str:
        return f"{obj.name}/{obj.win}/{obj.draw}/{obj.lose}/{obj.max_score}"


class SingleUserManager:
    """Holds every stored local user."""

    def __init__(self, dao: SingleUserDao):
        self.dao = dao
        self.users: list[SingleUser] = dao.get_all_objects()

    def all_user_names(self) -> list[str]:
        return [user.name for user in self.users]


@dataclass(frozen=True)
class ServerInfor:
    name: str
    ip: str
    port: str


class ServerInforDao(Dao[ServerInfor]):
    """Stores servers as ``name/ip/port`` lines."""

    def parse(self, text: str) -> ServerInfor:
        name, ip, port = _fields(text, 3)
        return ServerInfor(name, ip, port)

    def to_string(self, obj: ServerInfor) -> str:
        return f"{obj.name}/{obj.ip}/{obj.port}"


class ServerInforManager:
    """Holds the known servers, unique by name, and saves every change."""

    def __init__(self, dao: ServerInforDao):
        self.dao = dao
        self.data: list[ServerInfor] = dao.get_all_objects()

    def name_exists(self, name: str) -> bool:
        return any(info.name == name for info in self.data)

    def insert(self, info: ServerInfor) -> None:
        if self.name_exists(info.name):
            raise ProgramError("server name already exist")
        self.data.append(info)
        self.dao.set_all_objects(self.data)

    def get_by_name(self, name: str) -> ServerInfor:
        for info in self.data:
            if info.name == name:
                return info
        raise ProgramError("not exist name")

    def all_server_names(self) -> list[str]:
        return [info.name for info in self.data]

    def all_objects(self) -> list[ServerInfor]:
        return list(self.data)