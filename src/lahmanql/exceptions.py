"""Error types raised across lahmanql."""

from __future__ import annotations

from graphql import GraphQLError


BAD_USER_INPUT = "BAD_USER_INPUT"


class LahmanQLError(Exception):
    """Base class for lahmanql failures."""


class StorageError(LahmanQLError):
    """The backing database could not be reached or rejected a query."""


class UserInputError(GraphQLError):
    """Client-visible error for a field the caller's input cannot satisfy."""

    def __init__(self, message: str) -> None:
        super().__init__(message, extensions={"code": BAD_USER_INPUT})
