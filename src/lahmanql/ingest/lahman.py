"""Load Lahman ``People.csv`` and ``Batting.csv`` exports into the store."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

from lahmanql.persistence import BaseballStore


logger = logging.getLogger(__name__)


def _text(row: Mapping[str, Optional[str]], column: str) -> str:
    value = row.get(column)
    return value.strip() if value is not None else ""


def _int_or_none(value: str) -> Optional[int]:
    if value == "":
        return None
    try:
        return int(float(value))
    except ValueError:
        return None


class PersonRow(BaseModel):
    player_id: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    birth_year: Optional[int] = None
    birth_country: str = ""

    @classmethod
    def from_csv(cls, row: Mapping[str, Optional[str]]) -> "PersonRow":
        return cls(
            player_id=_text(row, "playerID"),
            first_name=_text(row, "nameFirst"),
            last_name=_text(row, "nameLast"),
            birth_year=_int_or_none(_text(row, "birthYear")),
            birth_country=_text(row, "birthCountry"),
        )

    def as_tuple(self) -> Tuple[str, str, str, Optional[int], str]:
        return (self.player_id, self.first_name, self.last_name, self.birth_year, self.birth_country)


class BattingRow(BaseModel):
    """One player-season (or stint) line; blank counting stats load as 0."""

    player_id: str = Field(..., min_length=1)
    at_bats: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    hits: int = 0
    strikeouts: int = 0

    @classmethod
    def from_csv(cls, row: Mapping[str, Optional[str]]) -> "BattingRow":
        def count(column: str) -> int:
            return _int_or_none(_text(row, column)) or 0

        return cls(
            player_id=_text(row, "playerID"),
            at_bats=count("AB"),
            doubles=count("2B"),
            triples=count("3B"),
            home_runs=count("HR"),
            hits=count("H"),
            strikeouts=count("SO"),
        )

    def as_tuple(self) -> Tuple[str, int, int, int, int, int, int]:
        return (
            self.player_id,
            self.at_bats,
            self.doubles,
            self.triples,
            self.home_runs,
            self.hits,
            self.strikeouts,
        )


@dataclass
class ImportReport:
    people: int
    batting: int
    skipped: int


def _read_rows(path: Path) -> List[dict[str, Optional[str]]]:
    with path.open(newline="", encoding="utf-8-sig") as handle:
        return list(csv.DictReader(handle))


def load_people_csv(path: Path) -> Tuple[List[PersonRow], int]:
    """Parse a People export; returns the rows and how many lacked a playerID."""

    rows: List[PersonRow] = []
    skipped = 0
    for raw in _read_rows(path):
        if not _text(raw, "playerID"):
            skipped += 1
            continue
        rows.append(PersonRow.from_csv(raw))
    return rows, skipped


def load_batting_csv(path: Path) -> Tuple[List[BattingRow], int]:
    rows: List[BattingRow] = []
    skipped = 0
    for raw in _read_rows(path):
        if not _text(raw, "playerID"):
            skipped += 1
            continue
        rows.append(BattingRow.from_csv(raw))
    return rows, skipped


async def import_lahman(
    store: BaseballStore,
    people_csv: Path,
    batting_csv: Path | None = None,
) -> ImportReport:
    people, skipped = load_people_csv(people_csv)
    people_count = await store.insert_people(row.as_tuple() for row in people)
    logger.info("Imported %d people from %s", people_count, people_csv)

    batting_count = 0
    if batting_csv is not None:
        batting, batting_skipped = load_batting_csv(batting_csv)
        skipped += batting_skipped
        batting_count = await store.insert_batting(row.as_tuple() for row in batting)
        logger.info("Imported %d batting lines from %s", batting_count, batting_csv)

    if skipped:
        logger.warning("Skipped %d row(s) without a playerID", skipped)
    return ImportReport(people=people_count, batting=batting_count, skipped=skipped)
