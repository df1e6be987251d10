from pathlib import Path

import pytest

from lahmanql.ingest import BattingRow, import_lahman, load_batting_csv, load_people_csv
from lahmanql.persistence import BaseballStore


def _people_csv() -> str:
    return """playerID,birthYear,birthMonth,birthCountry,nameFirst,nameLast,bats
aaronha01,1934,2,USA,Hank,Aaron,R
ruthba01,1895,2,USA,Babe,Ruth,L
mysteryx01,,,,Mystery,Player,R
,1900,1,USA,Nameless,Row,R
"""


def _batting_csv() -> str:
    return """playerID,yearID,stint,teamID,G,AB,R,H,2B,3B,HR,RBI,SO
aaronha01,1954,1,ML1,122,468,58,131,27,6,13,69,39
aaronha01,1955,1,ML1,153,602,105,189,37,9,27,106,61
ruthba01,1914,1,BOS,5,10,1,2,1,0,0,2,
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_people_csv_skips_rows_without_id(tmp_path: Path):
    rows, skipped = load_people_csv(_write(tmp_path, "People.csv", _people_csv()))

    assert skipped == 1
    assert [row.player_id for row in rows] == ["aaronha01", "ruthba01", "mysteryx01"]
    assert rows[0].as_tuple() == ("aaronha01", "Hank", "Aaron", 1934, "USA")
    assert rows[2].birth_year is None
    assert rows[2].birth_country == ""


def test_load_batting_csv_maps_lahman_columns(tmp_path: Path):
    rows, skipped = load_batting_csv(_write(tmp_path, "Batting.csv", _batting_csv()))

    assert skipped == 0
    assert rows[0] == BattingRow(
        player_id="aaronha01", at_bats=468, doubles=27, triples=6, home_runs=13, hits=131, strikeouts=39
    )
    assert rows[2].strikeouts == 0


@pytest.mark.anyio
async def test_import_lahman_populates_store(tmp_path: Path):
    store = BaseballStore(tmp_path / "import.sqlite")

    report = await import_lahman(
        store,
        _write(tmp_path, "People.csv", _people_csv()),
        _write(tmp_path, "Batting.csv", _batting_csv()),
    )

    assert (report.people, report.batting, report.skipped) == (3, 3, 1)
    assert await store.find_players("Hank", "A") == ["aaronha01"]

    aaron, mystery = await store.fetch_stats(["aaronha01", "mysteryx01"])
    assert aaron.at_bats == 468 + 602
    assert aaron.home_runs == 40
    assert mystery is None

    profile, = await store.fetch_profiles(["mysteryx01"])
    assert profile.name == "Mystery Player"
    assert profile.year is None


@pytest.mark.anyio
async def test_import_lahman_twice_keeps_batting_totals(tmp_path: Path):
    store = BaseballStore(tmp_path / "reimport.sqlite")
    people_csv = _write(tmp_path, "People.csv", _people_csv())
    batting_csv = _write(tmp_path, "Batting.csv", _batting_csv())

    await import_lahman(store, people_csv, batting_csv)
    report = await import_lahman(store, people_csv, batting_csv)

    assert report.batting == 3
    aaron, ruth = await store.fetch_stats(["aaronha01", "ruthba01"])
    assert aaron.at_bats == 468 + 602
    assert aaron.hits == 131 + 189
    assert ruth.at_bats == 10
