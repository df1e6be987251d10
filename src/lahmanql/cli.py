"""Command-line interface for serving and populating the baseball database."""

from __future__ import annotations

import argparse
import asyncio
import json
from dataclasses import asdict
from pathlib import Path

from lahmanql.config import Settings
from lahmanql.ingest import import_lahman
from lahmanql.logging_utils import configure_logging
from lahmanql.persistence import BaseballStore


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Baseball statistics GraphQL service")
    parser.add_argument("--db", type=Path, default=None, help="SQLite database path (overrides LAHMANQL_DB_PATH)")
    parser.add_argument("--log-level", default=None, help="Logging level (overrides LAHMANQL_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the GraphQL API with uvicorn")
    serve.add_argument("--host", default=None, help="Bind address (overrides LAHMANQL_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (overrides LAHMANQL_PORT)")

    subparsers.add_parser("init-db", help="Create the database tables if missing")

    importer = subparsers.add_parser("import", help="Load Lahman People/Batting CSV exports")
    importer.add_argument("people", type=Path, help="Path to People.csv")
    importer.add_argument("batting", type=Path, nargs="?", default=None, help="Optional path to Batting.csv")

    return parser.parse_args(argv)


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides: dict[str, object] = {}
    if args.db is not None:
        overrides["db_path"] = args.db
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if getattr(args, "host", None):
        overrides["host"] = args.host
    if getattr(args, "port", None):
        overrides["port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)
    return settings


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = _resolve_settings(args)
    logger = configure_logging(settings.log_level)

    if args.command == "serve":
        import uvicorn

        from lahmanql.api import create_app

        uvicorn.run(
            create_app(settings),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
        return

    store = BaseballStore(settings.db_path)
    if args.command == "init-db":
        logger.info("Database ready at %s", store.db_path)
        return

    if args.command == "import":
        for path in (args.people, args.batting):
            if path is not None and not path.exists():
                raise SystemExit(f"{path} does not exist")
        report = asyncio.run(import_lahman(store, args.people, args.batting))
        print(json.dumps(asdict(report), indent=2))


if __name__ == "__main__":
    main()
