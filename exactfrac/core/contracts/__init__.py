"""
Contract Validation Module

Валидация JSON контракта сериализованной дроби.
"""

from .validators import (
    FRACTION_SCHEMA_PATH,
    FractionValidator,
    StrictIntegerValidator,
    fraction_from_payload,
    fraction_to_payload,
    load_schema,
    validate_fraction_payload,
)

__all__ = [
    # Schema
    "FRACTION_SCHEMA_PATH",
    "load_schema",
    # Classes
    "FractionValidator",
    "StrictIntegerValidator",
    # Functions
    "validate_fraction_payload",
    "fraction_to_payload",
    "fraction_from_payload",
]
