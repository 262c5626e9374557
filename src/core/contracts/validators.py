"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- difference_breakdown.json (DifferenceBreakdown)
- redate_result.json (RedateResult, выход для адаптера)
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Определяем корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'redate_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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

    Принимает как dict, так и pydantic модель (она сериализуется через
    model_dump(mode="json")), поэтому выход доменных моделей проверяется
    без ручного преобразования.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    @staticmethod
    def _as_instance(data: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json")
        return data

    def validate(self, data: Union[Dict[str, Any], BaseModel]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(self._as_instance(data))

    def is_valid(self, data: Union[Dict[str, Any], BaseModel]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(self._as_instance(data))

    def error_messages(self, data: Union[Dict[str, Any], BaseModel]) -> List[str]:
        """
        Все нарушения контракта в виде "<путь>: <сообщение>".

        Порядок стабилен (сортировка по пути в документе); корень обозначается "$".
        """
        errors = sorted(
            self.validator.iter_errors(self._as_instance(data)),
            key=lambda e: [str(p) for p in e.absolute_path],
        )
        return [
            "/".join(["$", *(str(p) for p in e.absolute_path)]) + f": {e.message}"
            for e in errors
        ]


class DifferenceBreakdownValidator(ContractValidator):
    """Валидатор для difference_breakdown контракта."""

    def __init__(self):
        super().__init__("difference_breakdown")


class RedateResultValidator(ContractValidator):
    """Валидатор для redate_result контракта."""

    def __init__(self):
        super().__init__("redate_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_difference_breakdown(data: Union[Dict[str, Any], BaseModel]) -> None:
    """
    Валидация difference_breakdown данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DifferenceBreakdownValidator().validate(data)


def validate_redate_result(data: Union[Dict[str, Any], BaseModel]) -> None:
    """
    Валидация redate_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RedateResultValidator().validate(data)
