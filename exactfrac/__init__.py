"""
exactfrac — immutable exact fractions over a fixed-width integer domain.

Fraction values are never mutated; every operation returns a new value
or None / CreationFeedback when the result cannot be represented.
"""

from exactfrac.core.domain import (
    CreationFeedback,
    Fraction,
    FractionErrorKind,
    create,
    create_unsafe,
    create_with_feedback,
    from_tuple,
    get_denominator,
    get_numerator,
)
from exactfrac.core.math import MAX_SUPPORTED, MIN_SUPPORTED, gcd, lcm, lcm_all
from exactfrac.core.math.fraction_arithmetic import (
    Ordering,
    add,
    checked_add,
    checked_multiply,
    checked_subtract,
    compare,
    convert_all_to_same_denominator,
    convert_to_same_denominator,
    divide,
    equal,
    multiply,
    reciprocal,
    round_to_nearest_int,
    simplify,
    sort,
    subtract,
    to_float,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "Fraction",
    "CreationFeedback",
    "FractionErrorKind",
    "Ordering",
    # Construction
    "create",
    "create_unsafe",
    "create_with_feedback",
    "from_tuple",
    # Accessors
    "get_denominator",
    "get_numerator",
    # Integer domain
    "MAX_SUPPORTED",
    "MIN_SUPPORTED",
    "gcd",
    "lcm",
    "lcm_all",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "checked_add",
    "checked_subtract",
    "checked_multiply",
    "reciprocal",
    "simplify",
    "to_float",
    "round_to_nearest_int",
    # Alignment and ordering
    "convert_to_same_denominator",
    "convert_all_to_same_denominator",
    "compare",
    "equal",
    "sort",
]
