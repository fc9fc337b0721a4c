"""
Domain models and value objects.

Contains immutable snapshot models of collection state.
"""

from src.core.domain.group_snapshot import GroupSnapshot, first_duplicate_index

__all__ = [
    "GroupSnapshot",
    "first_duplicate_index",
]
