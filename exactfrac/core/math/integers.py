"""
Integers — Fixed-Width Integer Domain

Модуль фиксирует целочисленный домен, в котором работают дроби:
- Границы нативного знакового целого (выводятся из sys.maxsize)
- MIN_SUPPORTED / MAX_SUPPORTED для валидации числителя и знаменателя
- Two's complement wrap-around для арифметики без promotion
- GCD / LCM и свёртка LCM по последовательности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. MIN_SUPPORTED = INT_MIN + 1, поэтому -x всегда представимо для x в домене
2. gcd(0, d) == |d|, деления на ноль не происходит
3. wrap_int(x) всегда лежит в [INT_MIN, INT_MAX]
4. Все функции чистые и реентерабельные
"""

import math
import sys
from dataclasses import dataclass
from typing import Final, Iterable

# =============================================================================
# ГРАНИЦЫ НАТИВНОГО ЦЕЛОГО
# =============================================================================

# Ширина нативного знакового слова (64 на 64-битных платформах)
INT_BITS: Final[int] = sys.maxsize.bit_length() + 1

INT_MAX: Final[int] = sys.maxsize
INT_MIN: Final[int] = -sys.maxsize - 1

# INT_MIN исключён: -INT_MIN переполняется обратно в INT_MIN
MIN_SUPPORTED: Final[int] = INT_MIN + 1
MAX_SUPPORTED: Final[int] = INT_MAX

_MODULUS: Final[int] = 1 << INT_BITS


@dataclass(frozen=True)
class IntegerDomain:
    """Параметры целочисленного домена одной записью."""

    bits: int
    int_min: int
    int_max: int
    min_supported: int
    max_supported: int


NATIVE_DOMAIN: Final[IntegerDomain] = IntegerDomain(
    bits=INT_BITS,
    int_min=INT_MIN,
    int_max=INT_MAX,
    min_supported=MIN_SUPPORTED,
    max_supported=MAX_SUPPORTED,
)


# =============================================================================
# ПРОВЕРКИ И WRAP-AROUND
# =============================================================================


def is_supported_int(value: int) -> bool:
    """
    Проверка, что значение допустимо как числитель или знаменатель.

    Args:
        value: Проверяемое целое

    Returns:
        True если MIN_SUPPORTED <= value <= MAX_SUPPORTED

    Examples:
        >>> is_supported_int(0)
        True
        >>> is_supported_int(INT_MIN)
        False
    """
    return MIN_SUPPORTED <= value <= MAX_SUPPORTED


def is_native_int(value: int) -> bool:
    """True если значение помещается в нативное слово (включая INT_MIN)."""
    return INT_MIN <= value <= INT_MAX


def wrap_int(value: int) -> int:
    """
    Приведение целого к нативной ширине (two's complement).

    Воспроизводит молчаливое переполнение фиксированного слова:
    результат равен value по модулю 2**INT_BITS.

    Args:
        value: Произвольное целое

    Returns:
        Целое в [INT_MIN, INT_MAX]

    Examples:
        >>> wrap_int(INT_MAX + 1) == INT_MIN
        True
        >>> wrap_int(-5)
        -5
    """
    if INT_MIN <= value <= INT_MAX:
        return value
    return ((value - INT_MIN) % _MODULUS) + INT_MIN


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (всегда неотрицательный).

    gcd(0, d) == |d|, gcd(0, 0) == 0.

    Examples:
        >>> gcd(46, 60)
        2
        >>> gcd(0, -7)
        7
    """
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное (всегда неотрицательное).

    lcm(a, 0) == 0 по соглашению math.lcm.

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-5, 10)
        10
    """
    return math.lcm(a, b)


def lcm_all(values: Iterable[int]) -> int:
    """
    Свёртка LCM по последовательности, начиная с 1.

    Args:
        values: Последовательность целых (знаменателей)

    Returns:
        LCM всех значений; 1 для пустой последовательности

    Raises:
        ValueError: Если элемент последовательности не является int

    Examples:
        >>> lcm_all([2, 3, 4])
        12
        >>> lcm_all([])
        1
    """
    result = 1
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"lcm_all expects integers, got {value!r}")
        result = lcm(result, value)
    return result
