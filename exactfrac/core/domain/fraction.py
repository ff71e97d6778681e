"""
Fraction — Immutable Exact Rational Value

Immutable Pydantic модель точной дроби numerator/denominator в домене
нативного знакового целого (см. exactfrac.core.math.integers).

Конструкторы:
- create: валидирующий, при ошибке возвращает None
- create_with_feedback: валидирующий, при ошибке возвращает CreationFeedback
  (какое поле и почему)
- create_unsafe: без валидации (model_construct), только для литералов
- from_tuple: обёртка над create

Дробь НЕ сокращается автоматически и не нормализует знак.
Оператор == структурный (оба поля равны); равенство рациональных
значений — exactfrac.core.math.fraction_arithmetic.equal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from exactfrac.core.math.integers import MAX_SUPPORTED, MIN_SUPPORTED, gcd


# =============================================================================
# CREATION FEEDBACK
# =============================================================================


class FractionErrorKind(str, Enum):
    """Классификация ошибки создания дроби"""

    NUMERATOR_OUT_OF_RANGE = "numerator_out_of_range"
    DENOMINATOR_ZERO = "denominator_zero"
    DENOMINATOR_OUT_OF_RANGE = "denominator_out_of_range"


@dataclass(frozen=True)
class CreationFeedback:
    """Детальная причина отказа в создании дроби."""

    kind: FractionErrorKind
    field: str
    value: object
    message: str


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Точная дробь numerator/denominator.

    Инвариант (только при валидирующем создании):
    - denominator != 0
    - MIN_SUPPORTED <= numerator, denominator <= MAX_SUPPORTED

    Immutable модель (frozen=True), strict: bool и float не принимаются.
    """

    numerator: int = Field(..., ge=MIN_SUPPORTED, le=MAX_SUPPORTED, description="Числитель")
    denominator: int = Field(
        ..., ge=MIN_SUPPORTED, le=MAX_SUPPORTED, description="Знаменатель (ненулевой)"
    )

    model_config = {"frozen": True, "strict": True}

    @field_validator("denominator")
    @classmethod
    def validate_denominator_non_zero(cls, v: int) -> int:
        """Знаменатель не может быть нулём"""
        if v == 0:
            raise ValueError("denominator must not be zero")
        return v

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def is_zero(self) -> bool:
        """True если numerator == 0 (при любом знаменателе)"""
        return self.numerator == 0

    def is_one(self) -> bool:
        """
        Структурная проверка на единицу: numerator == denominator.

        3/3 — единица, 2/2 тоже; нормализация не выполняется.
        """
        return self.numerator == self.denominator

    def is_negative_one(self) -> bool:
        """Структурная проверка на минус единицу: -numerator == denominator"""
        return -self.numerator == self.denominator

    def is_whole_number(self) -> bool:
        """
        True если после сокращения знаменатель равен 1.

        Сокращённый знаменатель равен |d| / gcd(n, d), поэтому условие
        эквивалентно gcd(n, d) == |d|.
        """
        return gcd(self.numerator, self.denominator) == abs(self.denominator)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create(numerator: int, denominator: int) -> Optional[Fraction]:
    """
    Валидирующее создание дроби.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Fraction, либо None если знаменатель нулевой или компонент вне домена

    Examples:
        >>> create(1, 2)
        Fraction(numerator=1, denominator=2)
        >>> create(1, 0) is None
        True
    """
    try:
        return Fraction(numerator=numerator, denominator=denominator)
    except ValidationError:
        return None


def create_with_feedback(
    numerator: int, denominator: int
) -> Union[Fraction, CreationFeedback]:
    """
    Валидирующее создание дроби с детальной причиной отказа.

    Числитель проверяется первым: если невалидны оба поля, отчёт
    касается числителя.

    Returns:
        Fraction, либо CreationFeedback с kind, field и сообщением
    """
    try:
        return Fraction(numerator=numerator, denominator=denominator)
    except ValidationError as e:
        first = e.errors()[0]
        field = first["loc"][0]
        if field == "numerator":
            return _feedback_for_numerator(numerator)
        return _feedback_for_denominator(denominator, first["type"])


def create_unsafe(numerator: int, denominator: int) -> Fraction:
    """
    Создание дроби БЕЗ валидации.

    Только для литералов и заведомо валидных значений. При нулевом
    знаменателе или компоненте вне домена результаты simplify, reciprocal
    и сравнений не определены: это ответственность вызывающего.
    """
    return Fraction.model_construct(numerator=numerator, denominator=denominator)


def from_tuple(pair: tuple[int, int]) -> Optional[Fraction]:
    """Создание дроби из пары (numerator, denominator) через create."""
    numerator, denominator = pair
    return create(numerator, denominator)


# =============================================================================
# ACCESSORS
# =============================================================================


def get_numerator(fraction: Fraction) -> int:
    """Числитель как сохранён (без сокращения)."""
    return fraction.numerator


def get_denominator(fraction: Fraction) -> int:
    """Знаменатель как сохранён (без сокращения)."""
    return fraction.denominator


# =============================================================================
# FEEDBACK HELPERS
# =============================================================================


def _range_text() -> str:
    return f"[{MIN_SUPPORTED}, {MAX_SUPPORTED}]"


def _feedback_for_numerator(numerator: object) -> CreationFeedback:
    if not isinstance(numerator, int) or isinstance(numerator, bool):
        message = f"numerator must be an integer, got {type(numerator).__name__}"
    else:
        message = f"numerator {numerator} is outside the supported range {_range_text()}"
    return CreationFeedback(
        kind=FractionErrorKind.NUMERATOR_OUT_OF_RANGE,
        field="numerator",
        value=numerator,
        message=message,
    )


def _feedback_for_denominator(denominator: object, error_type: str) -> CreationFeedback:
    # value_error поднимает только validate_denominator_non_zero
    if error_type == "value_error":
        return CreationFeedback(
            kind=FractionErrorKind.DENOMINATOR_ZERO,
            field="denominator",
            value=denominator,
            message="denominator must not be zero",
        )
    if not isinstance(denominator, int) or isinstance(denominator, bool):
        message = f"denominator must be an integer, got {type(denominator).__name__}"
    else:
        message = f"denominator {denominator} is outside the supported range {_range_text()}"
    return CreationFeedback(
        kind=FractionErrorKind.DENOMINATOR_OUT_OF_RANGE,
        field="denominator",
        value=denominator,
        message=message,
    )
