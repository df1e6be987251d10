"""Domain models for players and lineups."""

from .lineup import Lineup, LineupAssignments, Position
from .player import PlayerProfile, PlayerRef, PlayerStats

__all__ = [
    "Lineup",
    "LineupAssignments",
    "PlayerProfile",
    "PlayerRef",
    "PlayerStats",
    "Position",
]
