"""
Tests for JSON Schema Contract Validators

Комплексное тестирование контракта fraction:
- Загрузка и meta-validation схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и additionalProperties
- Строгий тип integer (1.0 не является целым)
- Интеграция с доменной моделью (create_with_feedback)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from exactfrac.core.contracts import (
    FRACTION_SCHEMA_PATH,
    FractionValidator,
    fraction_from_payload,
    fraction_to_payload,
    load_schema,
    validate_fraction_payload,
)
from exactfrac.core.domain import CreationFeedback, FractionErrorKind, create


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_payload():
    """Валидная сериализованная дробь."""
    return {"numerator": -7, "denominator": 9}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestLoadSchema:
    """Тесты load_schema"""

    def test_loads_and_caches(self) -> None:
        schema = load_schema(FRACTION_SCHEMA_PATH)
        assert schema["title"] == "Fraction"
        assert load_schema(FRACTION_SCHEMA_PATH) is schema

    def test_missing_schema(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema(tmp_path / "does_not_exist.json")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            FractionValidator(broken)


# =============================================================================
# VALIDATION
# =============================================================================


class TestFractionValidator:
    """Тесты валидации fraction контракта"""

    def test_valid_payload(self, valid_payload) -> None:
        validate_fraction_payload(valid_payload)
        assert FractionValidator().is_valid(valid_payload)

    def test_zero_denominator_passes_schema(self) -> None:
        """Схема проверяет форму, а не доменные инварианты"""
        assert FractionValidator().is_valid({"numerator": 1, "denominator": 0})

    @pytest.mark.parametrize("missing", ["numerator", "denominator"])
    def test_required_fields(self, valid_payload, missing: str) -> None:
        del valid_payload[missing]
        with pytest.raises(ValidationError):
            validate_fraction_payload(valid_payload)

    @pytest.mark.parametrize("bad_value", ["1", 1.5, 1.0, None, True, [1]])
    def test_non_integer_rejected(self, valid_payload, bad_value) -> None:
        valid_payload["numerator"] = bad_value
        with pytest.raises(ValidationError):
            validate_fraction_payload(valid_payload)

    def test_integral_float_rejected_as_type_error(self, valid_payload) -> None:
        """1.0 не проходит тип integer"""
        valid_payload["denominator"] = 2.0
        errors = list(FractionValidator().iter_errors(valid_payload))
        assert len(errors) == 1
        assert errors[0].validator == "type"

    def test_additional_properties_rejected(self, valid_payload) -> None:
        valid_payload["simplified"] = True
        errors = list(FractionValidator().iter_errors(valid_payload))
        assert len(errors) == 1
        assert errors[0].validator == "additionalProperties"


# =============================================================================
# SERIALIZATION
# =============================================================================


class TestPayloadConversion:
    """Тесты fraction_to_payload / fraction_from_payload"""

    def test_to_payload_keeps_components(self) -> None:
        assert fraction_to_payload(create(2, -4)) == {"numerator": 2, "denominator": -4}

    def test_roundtrip(self, valid_payload) -> None:
        fraction = fraction_from_payload(valid_payload)
        assert fraction == create(-7, 9)
        assert fraction_to_payload(fraction) == valid_payload

    def test_domain_violation_returns_feedback(self) -> None:
        result = fraction_from_payload({"numerator": 1, "denominator": 0})
        assert isinstance(result, CreationFeedback)
        assert result.kind == FractionErrorKind.DENOMINATOR_ZERO

    def test_malformed_payload_raises(self) -> None:
        with pytest.raises(ValidationError):
            fraction_from_payload({"numerator": 1})

    def test_integral_float_payload_raises(self) -> None:
        """Дробные типы отклоняются схемой, а не доменной моделью"""
        with pytest.raises(ValidationError):
            fraction_from_payload({"numerator": 1.0, "denominator": 2})
