"""
JSON Schema Contract Validators

Модуль для валидации JSON данных реестра ERC20 ↔ denom согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- erc20_to_denom.json  (одна запись)
- erc20_to_denoms.json (экспорт реестра)

Схемы проверяют только форму данных. Семантика (дубликаты, bridged деномы)
проверяется ERC20Registry.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'erc20_to_denom')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)


class ERC20ToDenomValidator(ContractValidator):
    """Валидатор для одной записи erc20_to_denom."""

    def __init__(self):
        super().__init__("erc20_to_denom")


class ERC20ToDenomsValidator(ContractValidator):
    """Валидатор для экспорта реестра erc20_to_denoms."""

    def __init__(self):
        super().__init__("erc20_to_denoms")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_erc20_to_denom_contract(data: Dict[str, Any]) -> None:
    """
    Валидация одной записи erc20_to_denom.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ERC20ToDenomValidator().validate(data)


def validate_erc20_to_denoms_contract(data: Dict[str, Any]) -> None:
    """
    Валидация экспорта реестра erc20_to_denoms.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ERC20ToDenomsValidator().validate(data)
