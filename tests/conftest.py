import sqlite3
from contextlib import closing
from pathlib import Path

import pytest

from lahmanql.persistence import BaseballStore


PEOPLE = [
    ("1", "Andy", "Anderson", 2000, "CAN"),
    ("2", "Bob", "Ball", 2001, "CAN"),
    ("3", "Bill", "Baker", 2002, "USA"),
    ("4", "Charlie", "Cho", 2003, "CAN"),
]

# playerID, AB, _2B, _3B, HR, H, SO
BATTING = [
    ("1", 10, 20, 2, 2, 3, 4),
    ("1", 90, 21, 3, 8, 7, 6),
    ("2", 50, 22, 3, 6, 7, 8),
    ("3", 10, 23, 4, 2, 3, 4),
    ("3", 10, 24, 2, 2, 3, 4),
    ("3", 10, 23, 3, 2, 3, 4),
    ("4", 50, 22, 2, 6, 7, 8),
]


def seed(db_path: Path, people=PEOPLE, batting=BATTING) -> None:
    with closing(sqlite3.connect(db_path)) as conn:
        with conn:
            conn.executemany("INSERT INTO People VALUES (?, ?, ?, ?, ?)", people)
            conn.executemany("INSERT INTO Batting VALUES (?, ?, ?, ?, ?, ?, ?)", batting)


@pytest.fixture
def store(tmp_path: Path) -> BaseballStore:
    store = BaseballStore(tmp_path / "lahman.sqlite")
    seed(store.db_path)
    return store


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
