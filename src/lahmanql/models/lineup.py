"""Lineup models: the nine defensive positions and per-position assignments."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class Position(str, Enum):
    PITCHER = "pitcher"
    CATCHER = "catcher"
    FIRST_BASE = "firstBase"
    SECOND_BASE = "secondBase"
    THIRD_BASE = "thirdBase"
    SHORTSTOP = "shortstop"
    LEFT_FIELD = "leftField"
    CENTER_FIELD = "centerField"
    RIGHT_FIELD = "rightField"

    @classmethod
    def parse(cls, value: str) -> Optional["Position"]:
        """Return the position for a stored key, or None if it is not one of the nine."""

        try:
            return cls(value)
        except ValueError:
            return None


class LineupAssignments(BaseModel):
    """Sparse position -> query-string map for one lineup update.

    Keys are the camelCase position names (``firstBase``); snake_case field
    names are accepted too. Anything else is rejected.
    """

    pitcher: Optional[str] = None
    catcher: Optional[str] = None
    first_base: Optional[str] = None
    second_base: Optional[str] = None
    third_base: Optional[str] = None
    shortstop: Optional[str] = None
    left_field: Optional[str] = None
    center_field: Optional[str] = None
    right_field: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def items(self) -> Iterator[Tuple[Position, str]]:
        """Yield ``(position, query)`` for the supplied positions only."""

        supplied = self.model_dump(by_alias=True, exclude_none=True)
        for position in Position:
            if position.value in supplied:
                yield position, supplied[position.value]


class Lineup(BaseModel):
    lineup_id: int
    players: Dict[Position, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def player_at(self, position: Position) -> Optional[str]:
        return self.players.get(position)
