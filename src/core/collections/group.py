"""Group: упорядоченная коллекция без дубликатов.

- Порядок участников = порядок вставки
- Инвариант: никакие два участника не равны по ==
- Итерация перезапускаемая: каждый iter(group) возвращает новый GroupIterator
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, List, Optional, Set, TypeVar

from src.core.collections.iterator import GroupIterator
from src.core.domain.group_snapshot import GroupSnapshot

T = TypeVar("T")

logger = logging.getLogger(__name__)


class IterationMode(str, Enum):
    """Что видит курсор при изменении группы во время итерации.

    LIVE: курсор читает живой список по индексу (возможны пропуски/повторы)
    SNAPSHOT: курсор читает копию списка на момент создания
    """

    LIVE = "LIVE"
    SNAPSHOT = "SNAPSHOT"


class MembershipIndex(str, Enum):
    """Способ проверки членства.

    SCAN: линейный проход, O(n)
    HASHED: hash set для hashable значений, линейный проход для остальных
    """

    SCAN = "SCAN"
    HASHED = "HASHED"


@dataclass(frozen=True)
class GroupConfig:
    """Конфигурация Group."""

    iteration_mode: IterationMode = IterationMode.LIVE
    membership_index: MembershipIndex = MembershipIndex.SCAN


def _is_hashable(value) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


class Group(Generic[T]):
    """Упорядоченная коллекция уникальных значений.

    Операции add/delete/has никогда не бросают исключений. Не потокобезопасна:
    конкурентные изменения требуют внешней синхронизации.
    """

    def __init__(self, config: Optional[GroupConfig] = None):
        """
        Args:
            config: конфигурация группы (default GroupConfig())
        """
        self.config = config or GroupConfig()
        self._members: List[T] = []

        # Side index для HASHED режима
        self._hashed: Set[T] = set()
        self._unhashable: List[T] = []

    @classmethod
    def from_iterable(
        cls,
        items: Iterable[T],
        config: Optional[GroupConfig] = None
    ) -> "Group[T]":
        """Создание группы из конечной последовательности.

        Первое вхождение сохраняет позицию, последующие дубликаты отбрасываются.

        Args:
            items: исходные значения
            config: конфигурация новой группы

        Returns:
            Новая Group
        """
        group = cls(config)
        seen = 0
        for item in items:
            seen += 1
            group.add(item)

        dropped = seen - len(group)
        if dropped:
            logger.debug("Group import dropped %d duplicate(s) of %d item(s)", dropped, seen)
        return group

    @classmethod
    def from_snapshot(
        cls,
        snapshot: GroupSnapshot,
        config: Optional[GroupConfig] = None
    ) -> "Group":
        """Восстановление группы из GroupSnapshot с сохранением порядка."""
        logger.debug("Restoring group from snapshot, size=%d", snapshot.size)
        return cls.from_iterable(snapshot.members, config)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def add(self, value: T) -> None:
        """Добавление в конец, если значения ещё нет. Иначе no-op."""
        if self.has(value):
            return

        self._members.append(value)
        if self.config.membership_index == MembershipIndex.HASHED:
            if _is_hashable(value):
                self._hashed.add(value)
            else:
                self._unhashable.append(value)

    def delete(self, value: T) -> None:
        """Удаление значения, если оно есть. Иначе no-op."""
        try:
            index = self._members.index(value)
        except ValueError:
            return

        member = self._members.pop(index)
        if self.config.membership_index == MembershipIndex.HASHED:
            if _is_hashable(member):
                self._hashed.discard(member)
            else:
                self._unhashable = [m for m in self._unhashable if m is not member]

    def has(self, value: T) -> bool:
        """True если какой-либо участник равен value."""
        if self.config.membership_index == MembershipIndex.HASHED and _is_hashable(value):
            return value in self._hashed or value in self._unhashable
        return value in self._members

    @property
    def size(self) -> int:
        return len(self._members)

    def snapshot(self) -> GroupSnapshot:
        """Immutable снапшот текущих участников."""
        return GroupSnapshot(members=tuple(self._members), size=len(self._members))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> GroupIterator[T]:
        if self.config.iteration_mode == IterationMode.SNAPSHOT:
            return GroupIterator(list(self._members))
        return GroupIterator(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, value) -> bool:
        return self.has(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"Group({self._members!r})"
