"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- group_snapshot.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.group_snapshot import first_duplicate_index

# Схемы поставляются как package data рядом с модулем
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в DEFAULT_SCHEMA_DIR (src/core/contracts/schema/).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'group_snapshot')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика, создаётся при первом использовании
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий SchemaLoader для DEFAULT_SCHEMA_DIR."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, False иначе."""
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации схемы."""
        return self.validator.iter_errors(data)


class GroupSnapshotValidator(ContractValidator):
    """
    Валидатор для group_snapshot контракта.

    Помимо схемы проверяет, что size совпадает с количеством members, и
    уникальность members по == (uniqueItems в JSON Schema различает 1 и true).
    """

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("group_snapshot", loader)

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        count = len(data["members"])
        if data["size"] != count:
            raise ValidationError(
                f"size {data['size']} does not match members count {count}"
            )

        index = first_duplicate_index(data["members"])
        if index is not None:
            raise ValidationError(
                f"duplicate member {data['members'][index]!r} at index {index}"
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_group_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация group_snapshot данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    GroupSnapshotValidator().validate(data)
