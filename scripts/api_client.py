"""Lightweight GraphQL client for the lahmanql API."""

from __future__ import annotations

import argparse
import json

import httpx


POSITIONS = (
    "pitcher",
    "catcher",
    "firstBase",
    "secondBase",
    "thirdBase",
    "shortstop",
    "leftField",
    "centerField",
    "rightField",
)

PLAYER_FIELDS = """
    playerId
    profile { name country year }
    stats { atBats hits homeRuns strikeouts battingAverage sluggingPercentage }
"""

LINEUP_FIELDS = "lineupId " + " ".join(f"{position} {{ playerId profile {{ name }} }}" for position in POSITIONS)


def post(client: httpx.Client, query: str, variables: dict | None = None) -> dict:
    resp = client.post("/graphql", json={"query": query, "variables": variables or {}})
    if resp.status_code == 503:
        raise SystemExit(f"storage unavailable: {resp.json().get('detail')}")
    resp.raise_for_status()
    return resp.json()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the lahmanql GraphQL API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:4000")
    parser.add_argument("--player", metavar="PLAYER_ID", help="Fetch one player's profile and stats")
    parser.add_argument("--search", nargs=2, metavar=("FIRST", "LAST"), help="Search players by name prefixes")
    parser.add_argument("--lineup", type=int, metavar="LINEUP_ID", help="Fetch a lineup")
    parser.add_argument(
        "--assign",
        action="append",
        default=[],
        metavar="POSITION=QUERY",
        help="Assign a player (id or name) to a position; creates a lineup unless --lineup is given",
    )
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.player:
            query = f"query($id: String!) {{ player(playerId: $id) {{ {PLAYER_FIELDS} }} }}"
            print(json.dumps(post(client, query, {"id": args.player}), indent=2))
        if args.search:
            query = f"query($f: String!, $l: String!) {{ players(firstName: $f, lastName: $l) {{ {PLAYER_FIELDS} }} }}"
            print(json.dumps(post(client, query, {"f": args.search[0], "l": args.search[1]}), indent=2))
        if args.assign:
            variables: dict[str, object] = {}
            for item in args.assign:
                position, sep, text = item.partition("=")
                if not sep or position not in POSITIONS:
                    raise SystemExit(f"Invalid assignment {item!r}; expected POSITION=QUERY")
                variables[position] = text
            if args.lineup is not None:
                variables["lineupId"] = args.lineup
            params = ", ".join(["$lineupId: Int"] + [f"${p}: String" for p in POSITIONS])
            arguments = ", ".join(["lineupId: $lineupId"] + [f"{p}: ${p}" for p in POSITIONS])
            query = f"mutation({params}) {{ lineup({arguments}) {{ {LINEUP_FIELDS} }} }}"
            print(json.dumps(post(client, query, variables), indent=2))
        elif args.lineup is not None:
            query = f"query($id: Int!) {{ lineup(lineupId: $id) {{ {LINEUP_FIELDS} }} }}"
            print(json.dumps(post(client, query, {"id": args.lineup}), indent=2))


if __name__ == "__main__":
    main()
