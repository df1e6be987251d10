"""Request-scoped batch loading."""

from .batch import BatchLoader

__all__ = ["BatchLoader"]
