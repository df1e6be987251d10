import pytest
from pydantic import ValidationError

from lahmanql.lineups import AssignmentQuery, parse_assignment_query, update_lineup
from lahmanql.models import LineupAssignments, Position
from lahmanql.persistence import BaseballStore


def test_parse_single_token_matches_first_name_only():
    assert parse_assignment_query("B") == AssignmentQuery(player_id="B", first_name="B", last_name="")


def test_parse_two_tokens_split_first_and_last():
    assert parse_assignment_query("Bill B") == AssignmentQuery(player_id="Bill B", first_name="Bill", last_name="B")


@pytest.mark.parametrize("text", ["", "Ken Griffey Jr.", "Bill  B"])
def test_parse_without_name_reading_keeps_identifier_only(text: str):
    query = parse_assignment_query(text)
    assert query.player_id == text
    assert query.first_name is None
    assert query.last_name is None


def test_assignments_accept_camel_and_snake_keys():
    assignments = LineupAssignments.model_validate({"firstBase": "1", "right_field": "2", "pitcher": None})
    assert list(assignments.items()) == [(Position.FIRST_BASE, "1"), (Position.RIGHT_FIELD, "2")]


def test_assignments_reject_unknown_positions():
    with pytest.raises(ValidationError):
        LineupAssignments.model_validate({"designatedHitter": "1"})


@pytest.mark.anyio
async def test_update_lineup_resolves_each_position(store: BaseballStore):
    lineup = await store.create_lineup()

    result = await update_lineup(
        store,
        lineup.lineup_id,
        LineupAssignments.model_validate(
            {
                "pitcher": "1",
                "catcher": "Bill B",
                "shortstop": "B",
                "firstBase": "z",
                "secondBase": "zz zz",
            }
        ),
    )

    assert result.lineup_id == lineup.lineup_id
    assert result.players == {
        Position.PITCHER: "1",
        Position.CATCHER: "3",
        Position.SHORTSTOP: "2",
    }


@pytest.mark.anyio
async def test_update_lineup_leaves_unsupplied_positions(store: BaseballStore):
    lineup = await store.create_lineup()
    await update_lineup(store, lineup.lineup_id, LineupAssignments(pitcher="1"))

    result = await update_lineup(store, lineup.lineup_id, LineupAssignments(catcher="Charlie"))

    assert result.players == {Position.PITCHER: "1", Position.CATCHER: "4"}


@pytest.mark.anyio
async def test_update_lineup_is_idempotent(store: BaseballStore):
    lineup = await store.create_lineup()
    assignments = LineupAssignments(pitcher="1")

    once = await update_lineup(store, lineup.lineup_id, assignments)
    twice = await update_lineup(store, lineup.lineup_id, assignments)

    assert once == twice


@pytest.mark.anyio
async def test_update_missing_lineup_is_a_noop(store: BaseballStore):
    result = await update_lineup(store, -1, LineupAssignments(pitcher="1"))

    assert result.lineup_id == -1
    assert result.players == {}
