"""Resolve free-form lineup slot queries to players and persist them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from lahmanql.models import Lineup, LineupAssignments, Position

if TYPE_CHECKING:
    from lahmanql.persistence import BaseballStore


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssignmentQuery:
    """Both candidate readings of one slot query.

    ``player_id`` is the raw text taken as an identifier. ``first_name`` and
    ``last_name`` are name prefixes; they are both ``None`` when the text has
    no name reading, and ``last_name`` is ``""`` (unconstrained) for a
    single-word query.
    """

    player_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


def parse_assignment_query(text: str) -> AssignmentQuery:
    """Read ``text`` as an identifier and, for one or two words, a name prefix.

    An empty query never matches by name.
    """

    if text == "":
        return AssignmentQuery(player_id=text)

    parts = text.split(" ")
    if len(parts) == 1:
        return AssignmentQuery(player_id=text, first_name=parts[0], last_name="")
    if len(parts) == 2:
        return AssignmentQuery(player_id=text, first_name=parts[0], last_name=parts[1])
    # Three or more tokens match by identifier only.
    return AssignmentQuery(player_id=text)


async def apply_assignments(store: "BaseballStore", lineup_id: int, assignments: LineupAssignments) -> None:
    """Write every supplied position concurrently and wait for all of them.

    A position whose query matches nobody keeps its current player. If one
    write fails the error propagates; writes that already landed are kept.
    """

    positions: list[Position] = []
    writes = []
    for position, text in assignments.items():
        positions.append(position)
        writes.append(store.persist_assignment(lineup_id, position, parse_assignment_query(text)))

    results = await asyncio.gather(*writes)
    for position, written in zip(positions, results):
        if not written:
            logger.debug("Lineup %s: no player matched for %s; left unchanged", lineup_id, position.value)


async def update_lineup(store: "BaseballStore", lineup_id: int, assignments: LineupAssignments) -> Lineup:
    await apply_assignments(store, lineup_id, assignments)
    return await store.fetch_lineup(lineup_id)
