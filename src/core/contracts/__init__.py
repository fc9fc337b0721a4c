"""
Contract Validation Module

Модуль для валидации JSON контрактов (снапшоты Group).
Схемы поставляются как package data в src/core/contracts/schema/.
"""

from .validators import (
    DEFAULT_SCHEMA_DIR,
    ContractValidator,
    GroupSnapshotValidator,
    SchemaLoader,
    get_schema_loader,
    validate_group_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GroupSnapshotValidator",
    # Functions
    "get_schema_loader",
    "validate_group_snapshot",
    # Constants
    "DEFAULT_SCHEMA_DIR",
]
