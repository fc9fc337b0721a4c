"""GroupIterator: внешний курсор по элементам Group.

Состояния курсора:
- POSITIONED(i): следующий вызов next() вернёт элемент с индексом i
- EXHAUSTED: терминальное состояние, next() всегда сигнализирует StopIteration
"""

from enum import Enum
from typing import Generic, List, TypeVar

T = TypeVar("T")


class IteratorState(str, Enum):
    """Состояние курсора GroupIterator."""

    POSITIONED = "POSITIONED"
    EXHAUSTED = "EXHAUSTED"


class GroupIterator(Generic[T]):
    """Курсор по последовательности участников Group.

    Держит read-only ссылку на список участников и текущий offset.
    Каждый iter(group) создаёт новый курсор с offset = 0.

    В LIVE режиме список является живым backing list группы, и изменения группы
    во время итерации видны по индексу, поэтому элементы могут быть пропущены
    или выданы повторно. В SNAPSHOT режиме группа передаёт копию списка.
    """

    def __init__(self, members: List[T]):
        """
        Args:
            members: список участников (живой или снапшот)
        """
        self._members = members
        self._position = 0
        self._state = IteratorState.POSITIONED

    @property
    def position(self) -> int:
        """Индекс следующего элемента."""
        return self._position

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state == IteratorState.EXHAUSTED

    def __iter__(self) -> "GroupIterator[T]":
        return self

    def __next__(self) -> T:
        # EXHAUSTED терминален даже если группа выросла после завершения
        if self._state == IteratorState.EXHAUSTED:
            raise StopIteration

        if self._position < len(self._members):
            value = self._members[self._position]
            self._position += 1
            return value

        self._state = IteratorState.EXHAUSTED
        raise StopIteration

    def __repr__(self) -> str:
        return f"GroupIterator(position={self._position}, state={self._state.value})"
