"""
Core math modules

Арифметика фиксированной точки без float: доли [0, 1] и знаковые числа.
"""

from referenda_curves.core.math.fixed_point import (
    # Constants
    ACCURACY,
    DIV,
    PARTS_PER_PERCENT,
    SIGNED_MAX,
    SIGNED_MIN,
    # Exceptions
    DomainError,
    # Types
    FixedFraction,
    Rounding,
    SignedFixed,
    # Functions
    rounding_div,
)

__all__ = [
    # Fixed Point — Constants
    "ACCURACY",
    "DIV",
    "PARTS_PER_PERCENT",
    "SIGNED_MAX",
    "SIGNED_MIN",
    # Fixed Point — Exceptions
    "DomainError",
    # Fixed Point — Types
    "FixedFraction",
    "Rounding",
    "SignedFixed",
    # Fixed Point — Functions
    "rounding_div",
]
