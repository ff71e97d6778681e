"""
JSON Schema Contract Validators

Модуль для валидации сериализованных дробей согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- fraction.json: {"numerator": int, "denominator": int}

Контракт проверяет только форму данных. Доменные инварианты
(ненулевой знаменатель, диапазон) проверяет create_with_feedback.

Тип "integer" переопределён: по умолчанию JSON Schema считает 1.0 целым,
здесь целыми считаются только int (без bool).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.validators import extend

from exactfrac.core.domain.fraction import CreationFeedback, Fraction, create_with_feedback

FRACTION_SCHEMA_PATH = Path(__file__).parent / "schema" / "fraction.json"


def _is_strict_integer(checker, instance) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


@lru_cache(maxsize=None)
def load_schema(schema_path: Path) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла (кэшируется).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


# =============================================================================
# FRACTION VALIDATOR
# =============================================================================


class FractionValidator:
    """Валидатор fraction контракта."""

    def __init__(self, schema_path: Path = FRACTION_SCHEMA_PATH):
        self.schema = load_schema(schema_path)
        self.validator = StrictIntegerValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction_payload(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной дроби.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FractionValidator().validate(data)


def fraction_to_payload(fraction: Fraction) -> Dict[str, int]:
    """Сериализация дроби в dict контракта (компоненты как сохранены)."""
    return fraction.model_dump()


def fraction_from_payload(data: Dict[str, Any]) -> Union[Fraction, CreationFeedback]:
    """
    Десериализация дроби из dict контракта.

    Форма (включая целочисленность полей) проверяется схемой, доменные
    инварианты — create_with_feedback.

    Returns:
        Fraction, либо CreationFeedback при нарушении доменного инварианта

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_fraction_payload(data)
    return create_with_feedback(data["numerator"], data["denominator"])
