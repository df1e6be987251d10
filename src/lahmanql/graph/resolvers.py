"""Field resolvers for the baseball GraphQL schema."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from graphql import GraphQLResolveInfo

from lahmanql.exceptions import UserInputError
from lahmanql.lineups import update_lineup
from lahmanql.models import Lineup, LineupAssignments, PlayerProfile, PlayerRef, PlayerStats, Position

from .context import RequestContext


NO_PLAYER_FOUND = "No player found"


def _context(info: GraphQLResolveInfo) -> RequestContext:
    return info.context


# Query

async def resolve_player(_: Any, info: GraphQLResolveInfo, playerId: str) -> PlayerRef:
    return PlayerRef(player_id=playerId)


async def resolve_players(_: Any, info: GraphQLResolveInfo, firstName: str, lastName: str) -> List[PlayerRef]:
    idents = await _context(info).store.find_players(firstName, lastName)
    return [PlayerRef(player_id=ident) for ident in idents]


async def resolve_lineup(_: Any, info: GraphQLResolveInfo, lineupId: int) -> Lineup:
    return await _context(info).store.fetch_lineup(lineupId)


# Mutation

async def resolve_update_lineup(
    _: Any,
    info: GraphQLResolveInfo,
    lineupId: Optional[int] = None,
    **positions: Optional[str],
) -> Lineup:
    store = _context(info).store
    assignments = LineupAssignments.model_validate(positions)
    if lineupId is None:
        created = await store.create_lineup()
        lineupId = created.lineup_id
    return await update_lineup(store, lineupId, assignments)


# Player

def resolve_player_id(player: PlayerRef, info: GraphQLResolveInfo) -> str:
    return player.player_id


async def resolve_profile(player: PlayerRef, info: GraphQLResolveInfo) -> PlayerProfile:
    profile = await _context(info).profiles.load(player.player_id)
    if profile is None:
        raise UserInputError(NO_PLAYER_FOUND)
    return profile


async def resolve_stats(player: PlayerRef, info: GraphQLResolveInfo) -> PlayerStats:
    # Unknown players and players without batting rows both land here.
    stats = await _context(info).stats.load(player.player_id)
    if stats is None:
        raise UserInputError(NO_PLAYER_FOUND)
    return stats


# Stats / Lineup

def attribute_resolver(name: str) -> Callable[[Any, GraphQLResolveInfo], Any]:
    def resolve(obj: Any, info: GraphQLResolveInfo) -> Any:
        return getattr(obj, name)

    return resolve


def resolve_lineup_id(lineup: Lineup, info: GraphQLResolveInfo) -> int:
    return lineup.lineup_id


def resolve_average(lineup: Lineup, info: GraphQLResolveInfo) -> Optional[PlayerStats]:
    return None


def position_resolver(position: Position) -> Callable[[Lineup, GraphQLResolveInfo], Optional[PlayerRef]]:
    def resolve(lineup: Lineup, info: GraphQLResolveInfo) -> Optional[PlayerRef]:
        player_id = lineup.player_at(position)
        if player_id is None:
            return None
        return PlayerRef(player_id=player_id)

    return resolve
