"""
Errors — Таксономия ошибок римских чисел

Все ошибки относятся к классу "невалидный ввод": повтор с тем же вводом
бессмысленен, исправлять должен вызывающий код.

Иерархия:
    RomanNumeralError (ValueError)
    ├── EmptyInputError          — None / пустая строка / только пробелы
    ├── InvalidDigitError        — символы вне {I, V, X, L, C, D, M}
    ├── IllegalOrderingError     — эвристика порядка цифр отвергла строку
    ├── NullArgumentError        — add(None) / sum(None)
    ├── InvalidExpressionError   — некорректное выражение для eval
    └── TooManyOperandsError     — второй оператор в выражении
"""

from enum import Enum
from typing import Iterable, Tuple

from romanum.core.domain.digits import (
    DIGITS_SEPARATOR,
    EMPTY_INPUT_MESSAGE,
    ILLEGAL_ORDERING_MESSAGE,
    INVALID_DIGIT_MESSAGE,
    INVALID_EXPRESSION_MESSAGE,
    TOO_MANY_OPERANDS_MESSAGE,
    quote_digit,
)


# =============================================================================
# ENUMS
# =============================================================================


class RomanErrorKind(str, Enum):
    """Вид ошибки (для result-типов и для исключений)"""

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_DIGIT = "INVALID_DIGIT"
    ILLEGAL_ORDERING = "ILLEGAL_ORDERING"
    NULL_ARGUMENT = "NULL_ARGUMENT"
    INVALID_EXPRESSION = "INVALID_EXPRESSION"
    TOO_MANY_OPERANDS = "TOO_MANY_OPERANDS"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RomanNumeralError(ValueError):
    """
    Базовая ошибка римских чисел.

    Наследует ValueError: любой вызывающий код, ожидающий ValueError
    от разбора строки, продолжает работать.
    """

    kind: RomanErrorKind


class EmptyInputError(RomanNumeralError):
    """Пустой ввод: None, "" или строка из одних пробельных символов."""

    kind = RomanErrorKind.EMPTY_INPUT

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class InvalidDigitError(RomanNumeralError):
    """
    Недопустимые символы.

    Сообщение перечисляет ВСЕ найденные символы, каждый в кавычках,
    через запятую, в порядке появления: Invalid Roman digit(s): 'A', 'B'
    """

    kind = RomanErrorKind.INVALID_DIGIT

    def __init__(self, invalid_digits: Iterable[str]):
        self.invalid_digits: Tuple[str, ...] = tuple(invalid_digits)
        super().__init__(format_invalid_digits(self.invalid_digits))


class IllegalOrderingError(RomanNumeralError):
    """Порядок цифр отвергнут. Сообщение содержит исходную строку целиком."""

    kind = RomanErrorKind.ILLEGAL_ORDERING

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{ILLEGAL_ORDERING_MESSAGE} {text}")


class NullArgumentError(RomanNumeralError):
    """Отсутствующий аргумент арифметики (add(None), sum(None))."""

    kind = RomanErrorKind.NULL_ARGUMENT


class InvalidExpressionError(RomanNumeralError):
    """Выражение не соответствует форме <roman> (+|-) <roman>."""

    kind = RomanErrorKind.INVALID_EXPRESSION

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"{INVALID_EXPRESSION_MESSAGE}: '{expression}'")


class TooManyOperandsError(RomanNumeralError):
    """Второй оператор в выражении: поддерживаются ровно два операнда."""

    kind = RomanErrorKind.TOO_MANY_OPERANDS

    def __init__(self, expression: str):
        self.expression = expression
        super().__init__(f"{TOO_MANY_OPERANDS_MESSAGE}: '{expression}'")


# =============================================================================
# UTILITIES
# =============================================================================


def format_invalid_digits(invalid_digits: Iterable[str]) -> str:
    """
    Текст ошибки для списка невалидных символов.

    Examples:
        >>> format_invalid_digits(["A", "B"])
        "Invalid Roman digit(s): 'A', 'B'"
    """
    chars = DIGITS_SEPARATOR.join(quote_digit(c) for c in invalid_digits)
    return f"{INVALID_DIGIT_MESSAGE} {chars}"

