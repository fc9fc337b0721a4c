"""Collections: упорядоченные коллекции без дубликатов.

- Group: add/delete/has, фабрика from_iterable, перезапускаемая итерация
- GroupIterator: внешний курсор с состояниями POSITIONED/EXHAUSTED
"""

from .group import (
    Group,
    GroupConfig,
    IterationMode,
    MembershipIndex,
)
from .iterator import GroupIterator, IteratorState

__all__ = [
    "Group",
    "GroupConfig",
    "IterationMode",
    "MembershipIndex",
    "GroupIterator",
    "IteratorState",
]
