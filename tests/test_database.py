import io
from dataclasses import dataclass

import pytest

from calorietrack.database import Database, NoResultError


@dataclass(frozen=True)
class _Item:
    HEADER = "Name,Rank"

    name: str
    rank: int

    @classmethod
    def from_line(cls, line):
        if not line:
            return None
        name, rank = line.split(",")
        return cls(name, int(rank))

    @property
    def lookup_name(self):
        return self.name

    def to_line(self):
        return f"{self.name},{self.rank}"

    def sort_key(self):
        return self.rank

    def describe(self):
        return f"<{self.name}>\n"


@pytest.fixture
def db(tmp_path):
    database = Database(_Item, tmp_path / "items.csv")
    database.append(_Item("b", 3))
    database.append(_Item("a", 1))
    database.append(_Item("b", 2))
    return database


def test_load_creates_missing_file_with_header(tmp_path):
    path = tmp_path / "new.csv"
    database = Database(_Item, path)
    database.load()
    assert path.read_text(encoding="utf-8") == _Item.HEADER + "\n"
    assert len(database) == 0


def test_save_orders_by_sort_key(db):
    db.save()
    lines = db.path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == _Item.HEADER
    assert [_Item.from_line(line).rank for line in lines[1:]] == [1, 2, 3]


def test_save_then_load_round_trip(db):
    db.save()
    again = Database(_Item, db.path)
    again.load()
    assert sorted(again.records(), key=lambda i: i.rank) == sorted(
        db.records(), key=lambda i: i.rank
    )


def test_load_skips_blank_lines(tmp_path):
    path = tmp_path / "items.csv"
    path.write_text("Name,Rank\n\nx,5\n", encoding="utf-8")
    database = Database(_Item, path)
    database.load()
    assert database.records() == [_Item("x", 5)]


def test_find_returns_first_match(db):
    assert db.find("b") == _Item("b", 3)


def test_find_missing_raises(db):
    with pytest.raises(NoResultError):
        db.find("zzz")


def test_find_all(db):
    assert db.find_all("b") == [_Item("b", 3), _Item("b", 2)]
    with pytest.raises(NoResultError):
        db.find_all("zzz")


def test_contains_len_iter(db):
    assert "a" in db
    assert "c" not in db
    assert len(db) == 3
    assert [item.name for item in db] == ["b", "a", "b"]


def test_sort_in_place(db):
    db.sort()
    assert [item.rank for item in db] == [1, 2, 3]


def test_output_writes_descriptions(db):
    out = io.StringIO()
    db.output(out)
    assert out.getvalue() == "<b>\n<a>\n<b>\n"


def test_records_is_a_copy(db):
    copy = db.records()
    copy.clear()
    assert len(db) == 3