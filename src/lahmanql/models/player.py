"""Player models shared by the store, loaders and GraphQL resolvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def _ratio(numerator: int, denominator: int) -> float:
    # Zero at-bats is left unguarded: 0/0 -> nan, n/0 -> +/-inf.
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


@dataclass(frozen=True)
class PlayerRef:
    """Player stub; profile and stats are resolved lazily from the id."""

    player_id: str


class PlayerProfile(BaseModel):
    name: str
    country: str
    year: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class PlayerStats(BaseModel):
    """Career batting totals aggregated over every Batting row of a player."""

    at_bats: int = Field(..., ge=0)
    hits: int = Field(..., ge=0)
    home_runs: int = Field(..., ge=0)
    strikeouts: int = Field(..., ge=0)
    batting_average: float
    slugging: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_totals(
        cls,
        *,
        at_bats: int,
        doubles: int,
        triples: int,
        home_runs: int,
        hits: int,
        strikeouts: int,
    ) -> "PlayerStats":
        singles = hits - doubles - triples - home_runs
        total_bases = singles + 2 * doubles + 3 * triples + 4 * home_runs
        return cls(
            at_bats=at_bats,
            hits=hits,
            home_runs=home_runs,
            strikeouts=strikeouts,
            batting_average=_ratio(hits, at_bats),
            slugging=_ratio(total_bases, at_bats),
        )
