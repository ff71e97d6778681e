"""
Core math modules для exactfrac

Целочисленный домен фиксированной ширины и GCD/LCM.
Операции над дробями: exactfrac.core.math.fraction_arithmetic.
"""

from exactfrac.core.math.integers import (
    INT_BITS,
    INT_MAX,
    INT_MIN,
    MAX_SUPPORTED,
    MIN_SUPPORTED,
    NATIVE_DOMAIN,
    IntegerDomain,
    gcd,
    is_native_int,
    is_supported_int,
    lcm,
    lcm_all,
    wrap_int,
)

__all__ = [
    # Constants
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    "MAX_SUPPORTED",
    "MIN_SUPPORTED",
    "NATIVE_DOMAIN",
    # Types
    "IntegerDomain",
    # Functions
    "gcd",
    "is_native_int",
    "is_supported_int",
    "lcm",
    "lcm_all",
    "wrap_int",
]
