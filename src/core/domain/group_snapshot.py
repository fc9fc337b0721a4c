"""
GroupSnapshot: Модель снапшота состояния Group

Immutable Pydantic модель, представляющая участников группы в порядке вставки.
Совместима с JSON Schema (src/core/contracts/schema/group_snapshot.json).
"""

from typing import Any, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator


def first_duplicate_index(members: Sequence[Any]) -> Optional[int]:
    """
    Индекс первого участника, равного (по ==) одному из предыдущих.

    Равенство Python, а не JSON: 1, 1.0 и True считаются одним значением.

    Returns:
        Индекс дубликата или None
    """
    for i, member in enumerate(members):
        for other in members[:i]:
            if other == member:
                return i
    return None


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class GroupSnapshot(BaseModel):
    """
    Снапшот участников Group.

    Immutable модель (frozen=True), members хранится как tuple.
    Порядок members = порядок вставки.
    """

    schema_version: Literal["1"] = Field(default="1", description="Версия схемы снапшота")
    members: Tuple[Any, ...] = Field(default=(), description="Участники в порядке вставки")
    size: int = Field(..., ge=0, description="Количество участников")

    model_config = {"frozen": True}

    @field_validator("members")
    @classmethod
    def validate_members_unique(cls, v: Tuple[Any, ...]) -> Tuple[Any, ...]:
        """Проверка отсутствия дубликатов (по ==)."""
        index = first_duplicate_index(v)
        if index is not None:
            raise ValueError(f"duplicate member {v[index]!r} at index {index}")
        return v

    @field_validator("size")
    @classmethod
    def validate_size_matches(cls, v: int, info) -> int:
        """Проверка, что size совпадает с количеством members"""
        if "members" in info.data:
            count = len(info.data["members"])
            if v != count:
                raise ValueError(f"size {v} does not match members count {count}")
        return v
