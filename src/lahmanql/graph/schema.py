"""GraphQL type definitions and their resolver bindings."""

from __future__ import annotations

from graphql import GraphQLObjectType, GraphQLSchema, build_schema

from lahmanql.models import Position

from . import resolvers


TYPE_DEFS = """
    type Query {
        player(playerId: String!): Player
        players(firstName: String!, lastName: String!): [Player]!
        lineup(lineupId: Int!): Lineup
    }

    type Player {
        playerId: String!
        profile: Profile!
        stats: Stats!
    }

    type Profile {
        name: String!
        country: String!
        year: Int!
    }

    type Stats {
        atBats: Int!
        homeRuns: Int!
        hits: Int!
        strikeouts: Int!
        battingAverage: Float!
        sluggingPercentage: Float!
    }

    type Mutation {
        lineup(
            lineupId: Int,
            pitcher: String,
            catcher: String,
            firstBase: String,
            secondBase: String,
            thirdBase: String,
            shortstop: String,
            leftField: String,
            centerField: String,
            rightField: String
        ): Lineup
    }

    type Lineup {
        lineupId: Int
        average: Stats
        pitcher: Player
        catcher: Player
        firstBase: Player
        secondBase: Player
        thirdBase: Player
        shortstop: Player
        leftField: Player
        centerField: Player
        rightField: Player
    }
"""

STATS_ATTRIBUTES = {
    "atBats": "at_bats",
    "homeRuns": "home_runs",
    "hits": "hits",
    "strikeouts": "strikeouts",
    "battingAverage": "batting_average",
    "sluggingPercentage": "slugging",
}


def _object_type(schema: GraphQLSchema, name: str) -> GraphQLObjectType:
    type_ = schema.get_type(name)
    if not isinstance(type_, GraphQLObjectType):
        raise TypeError(f"{name} is not an object type in the schema")
    return type_


def build_lahman_schema() -> GraphQLSchema:
    """Parse :data:`TYPE_DEFS` and attach the resolvers to their fields."""

    schema = build_schema(TYPE_DEFS)

    query = _object_type(schema, "Query").fields
    query["player"].resolve = resolvers.resolve_player
    query["players"].resolve = resolvers.resolve_players
    query["lineup"].resolve = resolvers.resolve_lineup

    mutation = _object_type(schema, "Mutation").fields
    mutation["lineup"].resolve = resolvers.resolve_update_lineup

    player = _object_type(schema, "Player").fields
    player["playerId"].resolve = resolvers.resolve_player_id
    player["profile"].resolve = resolvers.resolve_profile
    player["stats"].resolve = resolvers.resolve_stats

    stats = _object_type(schema, "Stats").fields
    for field_name, attribute in STATS_ATTRIBUTES.items():
        stats[field_name].resolve = resolvers.attribute_resolver(attribute)

    lineup = _object_type(schema, "Lineup").fields
    lineup["lineupId"].resolve = resolvers.resolve_lineup_id
    lineup["average"].resolve = resolvers.resolve_average
    for position in Position:
        lineup[position.value].resolve = resolvers.position_resolver(position)

    return schema
