"""Lineup slot resolution and updates."""

from .assignment import AssignmentQuery, apply_assignments, parse_assignment_query, update_lineup

__all__ = [
    "AssignmentQuery",
    "apply_assignments",
    "parse_assignment_query",
    "update_lineup",
]
