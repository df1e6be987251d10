"""Per-operation state handed to every resolver as ``info.context``."""

from __future__ import annotations

from dataclasses import dataclass, field

from lahmanql.loader import BatchLoader
from lahmanql.models import PlayerProfile, PlayerStats
from lahmanql.persistence import BaseballStore


@dataclass
class RequestContext:
    """Store handle plus loaders that live exactly as long as one operation."""

    store: BaseballStore
    profiles: BatchLoader[str, PlayerProfile] = field(init=False)
    stats: BatchLoader[str, PlayerStats] = field(init=False)

    def __post_init__(self) -> None:
        self.profiles = BatchLoader(self.store.fetch_profiles, name="profiles")
        self.stats = BatchLoader(self.store.fetch_stats, name="stats")
