"""Configuration helpers for the database path, server bind and logging."""

from .settings import Settings

__all__ = ["Settings"]
