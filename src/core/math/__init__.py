"""
Core math modules для float64-error-bounds

Арифметика float64 с отслеживанием верхней границы ошибки округления и
правило надёжности знака для robust геометрических предикатов.
"""

# Error Tracking
from src.core.math.error_tracking import (
    # Constants
    SMALLEST_POSITIVE_FLOAT64,
    UNIT_ROUNDOFF,
    # Types
    ErrorTrackedFloat,
    # Functions
    rounding_increment,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_valid_float,
    validate_finite,
    validate_non_negative,
)

# Sign Filter
from src.core.math.sign_filter import (
    Sign,
    SignVerdict,
    certified_sign,
    evaluate_sign,
    is_sign_reliable,
)

__all__ = [
    # Error Tracking — Constants
    "SMALLEST_POSITIVE_FLOAT64",
    "UNIT_ROUNDOFF",
    # Error Tracking — Types
    "ErrorTrackedFloat",
    # Error Tracking — Functions
    "rounding_increment",
    # Numerical Safeguards
    "is_valid_float",
    "validate_finite",
    "validate_non_negative",
    # Sign Filter — Types
    "Sign",
    "SignVerdict",
    # Sign Filter — Functions
    "certified_sign",
    "evaluate_sign",
    "is_sign_reliable",
]
