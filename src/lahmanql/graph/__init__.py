"""GraphQL resolution over the baseball store."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from graphql import ExecutionResult, GraphQLSchema, graphql

from lahmanql.exceptions import StorageError
from lahmanql.persistence import BaseballStore

from .context import RequestContext
from .schema import TYPE_DEFS, build_lahman_schema


async def execute_operation(
    schema: GraphQLSchema,
    query: str,
    *,
    store: BaseballStore,
    variables: Optional[Mapping[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> ExecutionResult:
    """Run one GraphQL operation with a fresh :class:`RequestContext`.

    Field-level failures stay in ``result.errors``. A :class:`StorageError`
    raised by any resolver is re-raised instead, failing the whole operation.
    """

    context = RequestContext(store=store)
    result = await graphql(
        schema,
        query,
        context_value=context,
        variable_values=dict(variables) if variables is not None else None,
        operation_name=operation_name,
    )
    for error in result.errors or []:
        if isinstance(error.original_error, StorageError):
            raise error.original_error
    return result


__all__ = [
    "RequestContext",
    "TYPE_DEFS",
    "build_lahman_schema",
    "execute_operation",
]
