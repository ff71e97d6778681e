"""
Domain models and value objects.

Contains the Fraction value type and its construction feedback.
"""

from exactfrac.core.domain.fraction import (
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

__all__ = [
    # Fraction model
    "Fraction",
    # Creation feedback
    "CreationFeedback",
    "FractionErrorKind",
    # Constructors
    "create",
    "create_unsafe",
    "create_with_feedback",
    "from_tuple",
    # Accessors
    "get_denominator",
    "get_numerator",
]
