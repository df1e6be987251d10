"""HTTP API serving the baseball GraphQL schema."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException

from lahmanql.api.schemas import GraphQLRequest
from lahmanql.config import Settings
from lahmanql.exceptions import StorageError
from lahmanql.graph import build_lahman_schema, execute_operation
from lahmanql.persistence import BaseballStore


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="lahmanql")
    store = BaseballStore(settings.db_path)
    schema = build_lahman_schema()
    app.state.settings = settings
    app.state.store = store
    app.state.schema = schema
    logger.info("Serving GraphQL over %s", store.db_path)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/graphql")
    async def graphql_endpoint(payload: GraphQLRequest) -> dict[str, Any]:
        try:
            result = await execute_operation(
                schema,
                payload.query,
                store=store,
                variables=payload.variables,
                operation_name=payload.operation_name,
            )
        except StorageError as exc:
            logger.error("GraphQL operation aborted by storage failure: %s", exc)
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return result.formatted

    return app


__all__ = ["create_app"]
