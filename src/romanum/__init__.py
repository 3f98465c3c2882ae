"""
romanum — целые числа в римской записи

Значение-тип RomanValue с каноническим форматированием, "дружественным"
разбором, арифметикой и вычислением выражений <roman> (+|-) <roman>.

    >>> from romanum import RomanValue
    >>> str(RomanValue(1982))
    'MCMLXXXII'
    >>> RomanValue.eval("XL--II").value
    42
"""

from romanum.core.domain import (
    EmptyInputError,
    IllegalOrderingError,
    InvalidDigitError,
    InvalidExpressionError,
    NullArgumentError,
    RomanErrorKind,
    RomanNumeralError,
    RomanValue,
    TooManyOperandsError,
)
from romanum.core.math import (
    evaluate_expression,
    format_roman,
    parse_roman,
    try_eval,
    try_parse,
)

__version__ = "1.0.0"

__all__ = [
    "RomanValue",
    # Operations
    "format_roman",
    "parse_roman",
    "try_parse",
    "evaluate_expression",
    "try_eval",
    # Errors
    "RomanErrorKind",
    "RomanNumeralError",
    "EmptyInputError",
    "InvalidDigitError",
    "IllegalOrderingError",
    "NullArgumentError",
    "InvalidExpressionError",
    "TooManyOperandsError",
]
