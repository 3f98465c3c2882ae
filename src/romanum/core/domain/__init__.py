"""
Domain models and value objects.

Содержит RomanValue, таблицу цифр и таксономию ошибок.
"""

from romanum.core.domain.digits import (
    DIGIT_VALUES,
    MINUS_SIGN,
    PLUS_SIGN,
    ROMAN_PAIRS,
    ZERO_DIGIT,
    digit_value,
    is_digit,
)
from romanum.core.domain.errors import (
    EmptyInputError,
    IllegalOrderingError,
    InvalidDigitError,
    InvalidExpressionError,
    NullArgumentError,
    RomanErrorKind,
    RomanNumeralError,
    TooManyOperandsError,
)
from romanum.core.domain.roman_value import RomanValue

__all__ = [
    # Digits module
    "DIGIT_VALUES",
    "ROMAN_PAIRS",
    "ZERO_DIGIT",
    "MINUS_SIGN",
    "PLUS_SIGN",
    "digit_value",
    "is_digit",
    # Errors
    "RomanErrorKind",
    "RomanNumeralError",
    "EmptyInputError",
    "InvalidDigitError",
    "IllegalOrderingError",
    "NullArgumentError",
    "InvalidExpressionError",
    "TooManyOperandsError",
    # Value model
    "RomanValue",
]
