"""Baseball statistics and lineups over GraphQL."""

__version__ = "0.1.0"
