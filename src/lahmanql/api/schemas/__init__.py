"""Pydantic models for API I/O."""

from .graphql import GraphQLRequest

__all__ = ["GraphQLRequest"]
