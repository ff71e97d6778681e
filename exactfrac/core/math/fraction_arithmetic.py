"""
Fraction Arithmetic — Pure Operations over Fraction

Модуль реализует все операции над Fraction:
- reciprocal / simplify
- multiply / divide / add / subtract (без автоматического сокращения)
- to_float / round_to_nearest_int (lossy проекции)
- convert_to_same_denominator / convert_all_to_same_denominator
- compare / equal / sort
- checked_* варианты арифметики с контролем переполнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции чистые: входные дроби не изменяются
2. multiply/add/subtract не выполняют promotion: компоненты результата
   приводятся к нативной ширине через wrap_int (молчаливое переполнение)
3. checked_* возвращают None вместо результата вне домена
4. compare задаёт полный порядок по рациональному значению и не зависит
   от wrap-around (выравнивание выполняется точной целочисленной арифметикой)
5. simplify всегда возвращает знаменатель > 0
"""

import logging
import math
from enum import Enum
from functools import cmp_to_key
from typing import Iterable, Optional

from exactfrac.core.domain.fraction import Fraction, create, create_unsafe
from exactfrac.core.math.integers import gcd, lcm, lcm_all, wrap_int

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух дробей"""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1


# =============================================================================
# FIXED-WIDTH CONSTRUCTION
# =============================================================================


def _fixed_width(numerator: int, denominator: int, operation: str) -> Fraction:
    """Дробь из точных компонент, приведённых к нативной ширине."""
    wrapped_num = wrap_int(numerator)
    wrapped_den = wrap_int(denominator)

    if wrapped_num != numerator or wrapped_den != denominator:
        logger.debug(
            "%s overflow: %d/%d wrapped to %d/%d",
            operation,
            numerator,
            denominator,
            wrapped_num,
            wrapped_den,
        )

    return create_unsafe(wrapped_num, wrapped_den)


# =============================================================================
# RECIPROCAL / SIMPLIFY
# =============================================================================


def reciprocal(fraction: Fraction) -> Optional[Fraction]:
    """
    Обратная дробь через валидирующий конструктор.

    Returns:
        denominator/numerator, либо None если числитель нулевой
        (становится нулевым знаменателем) или вне домена

    Examples:
        >>> reciprocal(create(2, 3))
        Fraction(numerator=3, denominator=2)
        >>> reciprocal(create(0, 3)) is None
        True
    """
    return create(fraction.denominator, fraction.numerator)


def simplify(fraction: Fraction) -> Fraction:
    """
    Сокращение до несократимой дроби с положительным знаменателем.

    Алгоритм:
        1. Если denominator < 0: меняем знак обоих компонент
        2. Делим оба компонента на gcd(numerator, denominator)

    Отрицание безопасно: оба компонента >= MIN_SUPPORTED = INT_MIN + 1.

    Examples:
        >>> simplify(create(46, 60))
        Fraction(numerator=23, denominator=30)
        >>> simplify(create(3, -6))
        Fraction(numerator=-1, denominator=2)
        >>> simplify(create(0, -5))
        Fraction(numerator=0, denominator=1)
    """
    numerator = fraction.numerator
    denominator = fraction.denominator

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    # gcd(0, d) == d, поэтому divisor > 0 для любого валидного знаменателя
    divisor = gcd(numerator, denominator)

    return create_unsafe(numerator // divisor, denominator // divisor)


# =============================================================================
# ARITHMETIC
# =============================================================================


def multiply(left: Fraction, right: Fraction) -> Fraction:
    """
    Произведение (n1*n2)/(d1*d2) без сокращения.

    Переполнение не детектируется: компоненты приводятся к нативной ширине.
    Для безопасности используйте simplify операндов или checked_multiply.
    """
    return _fixed_width(
        left.numerator * right.numerator,
        left.denominator * right.denominator,
        "multiply",
    )


def divide(left: Fraction, right: Fraction) -> Optional[Fraction]:
    """
    Частное: multiply(left, reciprocal(right)).

    Returns:
        Произведение, либо None если reciprocal(right) невалиден
        (в частности, числитель right равен нулю)
    """
    inverted = reciprocal(right)
    if inverted is None:
        return None
    return multiply(left, inverted)


def _aligned_for_sum(left: Fraction, right: Fraction) -> tuple[int, int, int]:
    """
    Точное выравнивание знаменателей для сложения/вычитания.

    Если один знаменатель делится на другой, масштабируется только операнд
    с меньшим знаменателем (меньше промежуточные значения); иначе через LCM.

    Returns:
        (left_numerator, right_numerator, common_denominator)
    """
    d1 = left.denominator
    d2 = right.denominator

    if d1 == d2:
        return left.numerator, right.numerator, d1

    if d1 % d2 == 0:
        return left.numerator, right.numerator * (d1 // d2), d1

    if d2 % d1 == 0:
        return left.numerator * (d2 // d1), right.numerator, d2

    common = lcm(d1, d2)
    return (
        left.numerator * (common // d1),
        right.numerator * (common // d2),
        common,
    )


def add(left: Fraction, right: Fraction) -> Fraction:
    """
    Сумма через общий знаменатель, без сокращения.

    Examples:
        >>> add(create(1, 2), create(2, 3))
        Fraction(numerator=7, denominator=6)
        >>> add(create(4, 5), create(-3, 5))
        Fraction(numerator=1, denominator=5)
    """
    n1, n2, common = _aligned_for_sum(left, right)
    return _fixed_width(n1 + n2, common, "add")


def subtract(left: Fraction, right: Fraction) -> Fraction:
    """
    Разность через общий знаменатель, без сокращения.

    Examples:
        >>> subtract(create(1, 2), create(2, 3))
        Fraction(numerator=-1, denominator=6)
    """
    n1, n2, common = _aligned_for_sum(left, right)
    return _fixed_width(n1 - n2, common, "subtract")


def checked_multiply(left: Fraction, right: Fraction) -> Optional[Fraction]:
    """multiply с контролем домена: None если компонент результата вне домена."""
    return create(
        left.numerator * right.numerator,
        left.denominator * right.denominator,
    )


def checked_add(left: Fraction, right: Fraction) -> Optional[Fraction]:
    """add с контролем домена: None если компонент результата вне домена."""
    n1, n2, common = _aligned_for_sum(left, right)
    return create(n1 + n2, common)


def checked_subtract(left: Fraction, right: Fraction) -> Optional[Fraction]:
    """subtract с контролем домена: None если компонент результата вне домена."""
    n1, n2, common = _aligned_for_sum(left, right)
    return create(n1 - n2, common)


# =============================================================================
# LOSSY PROJECTIONS
# =============================================================================


def to_float(fraction: Fraction) -> float:
    """
    Lossy проекция numerator / denominator.

    Точность не гарантируется для больших по модулю компонент.
    """
    return fraction.numerator / fraction.denominator


def round_to_nearest_int(fraction: Fraction) -> int:
    """
    Округление до ближайшего целого (round half away from zero).

    Examples:
        >>> round_to_nearest_int(create(5, 2))
        3
        >>> round_to_nearest_int(create(-5, 2))
        -3
        >>> round_to_nearest_int(create(7, 3))
        2
        >>> round_to_nearest_int(create(2**53 - 1, 2**54))
        0
    """
    value = to_float(fraction)
    magnitude = abs(value)

    # Дробная часть magnitude - floor(magnitude) вычисляется точно, value + 0.5 округляется
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1

    if value < 0:
        return -rounded
    return rounded


# =============================================================================
# DENOMINATOR ALIGNMENT
# =============================================================================


def convert_to_same_denominator(
    left: Fraction, right: Fraction
) -> tuple[Fraction, Fraction]:
    """
    Приведение двух дробей к общему знаменателю L = lcm(d1, d2).

    Если знаменатели уже равны, входы возвращаются без изменений.
    Каждая возвращённая дробь равна своему входу как рациональное число.

    Examples:
        >>> convert_to_same_denominator(create(1, 5), create(-9, 10))
        (Fraction(numerator=2, denominator=10), Fraction(numerator=-9, denominator=10))
    """
    if left.denominator == right.denominator:
        return left, right

    common = lcm(left.denominator, right.denominator)
    return (
        _fixed_width(left.numerator * (common // left.denominator), common, "align"),
        _fixed_width(right.numerator * (common // right.denominator), common, "align"),
    )


def convert_all_to_same_denominator(fractions: Iterable[Fraction]) -> list[Fraction]:
    """
    Приведение последовательности дробей к общему знаменателю.

    Общий знаменатель — свёртка LCM по всем знаменателям, начиная с 1.
    Порядок сохраняется. Пустой вход → пустой список.
    """
    items = list(fractions)
    if not items:
        return []

    common = lcm_all(f.denominator for f in items)
    return [
        _fixed_width(f.numerator * (common // f.denominator), common, "align")
        for f in items
    ]


# =============================================================================
# COMPARISON
# =============================================================================


def compare(left: Fraction, right: Fraction) -> Ordering:
    """
    Сравнение по рациональному значению.

    Выравнивание к общему знаменателю lcm(|d1|, |d2|) > 0 выполняется
    точно (без wrap), затем сравниваются числители. Положительный общий
    знаменатель сохраняет порядок и для отрицательных знаменателей.

    Examples:
        >>> compare(create(1, 2), create(2, 4))
        <Ordering.EQUAL: 0>
        >>> compare(create(1, -3), create(2, -3))
        <Ordering.GREATER_THAN: 1>
    """
    common = lcm(left.denominator, right.denominator)
    n1 = left.numerator * (common // left.denominator)
    n2 = right.numerator * (common // right.denominator)

    if n1 < n2:
        return Ordering.LESS_THAN
    if n1 > n2:
        return Ordering.GREATER_THAN
    return Ordering.EQUAL


def equal(left: Fraction, right: Fraction) -> bool:
    """Равенство рациональных значений: compare(left, right) == EQUAL."""
    return compare(left, right) == Ordering.EQUAL


def sort(fractions: Iterable[Fraction]) -> list[Fraction]:
    """
    Стабильная сортировка по неубыванию рационального значения.

    Returns:
        Новый список; вход не изменяется
    """
    return sorted(fractions, key=cmp_to_key(lambda a, b: compare(a, b).value))
