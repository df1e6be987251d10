"""SQLite-backed storage for players, batting lines and lineups."""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, TypeVar

from lahmanql.exceptions import StorageError
from lahmanql.lineups.assignment import AssignmentQuery
from lahmanql.models import Lineup, PlayerProfile, PlayerStats, Position


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _scatter(idents: Sequence[str], found: dict[str, T]) -> List[Optional[T]]:
    return [found.get(ident) for ident in idents]


def _placeholders(count: int) -> str:
    return ",".join("?" for _ in range(count))


class BaseballStore:
    """Set-oriented access to the People, Batting and lineup tables.

    Every public coroutine runs its query on a worker thread with its own
    connection. Lookups for unknown identifiers yield ``None`` slots, never
    errors; ``sqlite3`` failures surface as :class:`StorageError`.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        try:
            self._ensure_schema()
        except sqlite3.Error as exc:
            raise StorageError(f"Unable to initialize {self.db_path}: {exc}") from exc

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS People (
                    playerID TEXT UNIQUE,
                    nameFirst TEXT,
                    nameLast TEXT,
                    birthYear INTEGER,
                    birthCountry TEXT
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS Batting (
                    playerID TEXT,
                    AB INTEGER,
                    _2B INTEGER,
                    _3B INTEGER,
                    HR INTEGER,
                    H INTEGER,
                    SO INTEGER
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS Lineups (
                    lineupId INTEGER PRIMARY KEY AUTOINCREMENT
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS LineupAssignments (
                    lineupId INTEGER,
                    position TEXT,
                    playerId TEXT,
                    UNIQUE (lineupId, position),
                    UNIQUE (lineupId, playerId)
                )
                """
            )
        logger.debug("Schema ready at %s", self.db_path)

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(func, *args)
        except sqlite3.Error as exc:
            raise StorageError(f"{func.__name__} failed: {exc}") from exc

    # -- players ---------------------------------------------------------

    def _find_players(self, first_name: str, last_name: str) -> List[str]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT playerID
                FROM People
                WHERE substr(nameFirst, 1, length(:first)) = :first
                    AND substr(nameLast, 1, length(:last)) = :last
                ORDER BY nameFirst, nameLast, playerID
                """,
                {"first": first_name, "last": last_name},
            ).fetchall()
        return [row["playerID"] for row in rows]

    async def find_players(self, first_name: str, last_name: str) -> List[str]:
        """Return ids whose first and last names start with the given prefixes."""

        return await self._run(self._find_players, first_name, last_name)

    def _fetch_profiles(self, idents: Sequence[str]) -> List[Optional[PlayerProfile]]:
        distinct = list(dict.fromkeys(idents))
        if not distinct:
            return []
        with self._connect() as conn:
            rows = conn.execute(
                f"""
                SELECT playerID, nameFirst, nameLast, birthCountry, birthYear
                FROM People
                WHERE playerID IN ({_placeholders(len(distinct))})
                """,
                distinct,
            ).fetchall()
        found = {
            row["playerID"]: PlayerProfile(
                name=f"{row['nameFirst'] or ''} {row['nameLast'] or ''}",
                country=row["birthCountry"] or "",
                year=row["birthYear"],
            )
            for row in rows
        }
        return _scatter(idents, found)

    async def fetch_profiles(self, idents: Sequence[str]) -> List[Optional[PlayerProfile]]:
        """Profiles aligned with ``idents``; ``None`` where no People row exists."""

        return await self._run(self._fetch_profiles, list(idents))

    def _fetch_stats(self, idents: Sequence[str]) -> List[Optional[PlayerStats]]:
        distinct = list(dict.fromkeys(idents))
        if not distinct:
            return []
        with self._connect() as conn:
            rows = conn.execute(
                f"""
                SELECT
                    playerID,
                    COALESCE(SUM(AB), 0) AS AB,
                    COALESCE(SUM(_2B), 0) AS _2B,
                    COALESCE(SUM(_3B), 0) AS _3B,
                    COALESCE(SUM(HR), 0) AS HR,
                    COALESCE(SUM(H), 0) AS H,
                    COALESCE(SUM(SO), 0) AS SO
                FROM Batting
                WHERE playerID IN ({_placeholders(len(distinct))})
                GROUP BY playerID
                """,
                distinct,
            ).fetchall()
        found = {
            row["playerID"]: PlayerStats.from_totals(
                at_bats=row["AB"],
                doubles=row["_2B"],
                triples=row["_3B"],
                home_runs=row["HR"],
                hits=row["H"],
                strikeouts=row["SO"],
            )
            for row in rows
        }
        return _scatter(idents, found)

    async def fetch_stats(self, idents: Sequence[str]) -> List[Optional[PlayerStats]]:
        """Aggregated stats aligned with ``idents``; ``None`` where no Batting rows exist."""

        return await self._run(self._fetch_stats, list(idents))

    # -- lineups ---------------------------------------------------------

    def _fetch_lineup(self, lineup_id: int) -> Lineup:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT position, playerId
                FROM Lineups
                INNER JOIN LineupAssignments
                    ON Lineups.lineupId = LineupAssignments.lineupId
                WHERE Lineups.lineupId = ?
                """,
                (lineup_id,),
            ).fetchall()
        players: dict[Position, str] = {}
        for row in rows:
            position = Position.parse(row["position"])
            if position is not None and row["playerId"] is not None:
                players[position] = row["playerId"]
        return Lineup(lineup_id=lineup_id, players=players)

    async def fetch_lineup(self, lineup_id: int) -> Lineup:
        """Return the lineup shape for ``lineup_id`` without checking that it exists."""

        return await self._run(self._fetch_lineup, lineup_id)

    def _insert_lineup(self) -> int:
        with self._connect() as conn:
            cursor = conn.execute("INSERT INTO Lineups DEFAULT VALUES")
            lineup_id = cursor.lastrowid
        logger.info("Created lineup %s", lineup_id)
        return int(lineup_id)

    async def create_lineup(self) -> Lineup:
        lineup_id = await self._run(self._insert_lineup)
        return await self.fetch_lineup(lineup_id)

    def _persist_assignment(self, lineup_id: int, position: Position, query: AssignmentQuery) -> bool:
        has_name = query.first_name is not None and query.last_name is not None
        with self._connect() as conn:
            cursor = conn.execute(
                """
                INSERT OR REPLACE INTO LineupAssignments (lineupId, position, playerId)
                SELECT :lineup_id, :position, playerID
                FROM People
                WHERE EXISTS (SELECT 1 FROM Lineups WHERE lineupId = :lineup_id)
                    AND (
                        playerID = :player_id
                        OR (
                            :has_name
                            AND substr(nameFirst, 1, length(:first)) = :first
                            AND substr(nameLast, 1, length(:last)) = :last
                        )
                    )
                ORDER BY playerID = :player_id DESC, People.rowid
                LIMIT 1
                """,
                {
                    "lineup_id": lineup_id,
                    "position": position.value,
                    "player_id": query.player_id,
                    "has_name": int(has_name),
                    "first": query.first_name or "",
                    "last": query.last_name or "",
                },
            )
            written = cursor.rowcount > 0
        return written

    async def persist_assignment(self, lineup_id: int, position: Position, query: AssignmentQuery) -> bool:
        """Resolve ``query`` to one player and store it at ``position``.

        The literal identifier wins over name-prefix matches. When nothing
        matches, or the lineup does not exist, no row is written and the
        current assignment at ``position`` is kept. Returns whether a row
        was written.
        """

        return await self._run(self._persist_assignment, lineup_id, position, query)

    # -- bulk loading ----------------------------------------------------

    def _insert_people(self, rows: List[Sequence[Any]]) -> int:
        with self._connect() as conn:
            conn.executemany(
                """
                INSERT OR REPLACE INTO People (playerID, nameFirst, nameLast, birthYear, birthCountry)
                VALUES (?, ?, ?, ?, ?)
                """,
                rows,
            )
        return len(rows)

    async def insert_people(self, rows: Iterable[Sequence[Any]]) -> int:
        """Insert ``(playerID, nameFirst, nameLast, birthYear, birthCountry)`` rows."""

        return await self._run(self._insert_people, list(rows))

    def _insert_batting(self, rows: List[Sequence[Any]]) -> int:
        player_ids = sorted({row[0] for row in rows})
        with self._connect() as conn:
            conn.executemany("DELETE FROM Batting WHERE playerID = ?", [(player_id,) for player_id in player_ids])
            conn.executemany(
                "INSERT INTO Batting (playerID, AB, _2B, _3B, HR, H, SO) VALUES (?, ?, ?, ?, ?, ?, ?)",
                rows,
            )
        return len(rows)

    async def insert_batting(self, rows: Iterable[Sequence[Any]]) -> int:
        """Store ``(playerID, AB, _2B, _3B, HR, H, SO)`` rows.

        Every player named in ``rows`` has their earlier batting lines
        replaced in the same transaction, so loading an export twice leaves
        the totals unchanged.
        """

        return await self._run(self._insert_batting, list(rows))


__all__ = ["BaseballStore"]
