"""
Digits — Таблица римских цифр и символьные константы

Единственный источник истины для:
- весов семи классических цифр (I, V, X, L, C, D, M)
- упорядоченной таблицы 13 пар (вес, символ) для канонического форматирования
- служебных символов (ноль, знак минус, знак плюс)
- текстов сообщений об ошибках

ЗАПРЕЩЕНО дублировать веса цифр вне этого модуля.
"""

from typing import Final, Mapping, Tuple


# =============================================================================
# СЛУЖЕБНЫЕ СИМВОЛЫ
# =============================================================================

# Ноль не имеет классического римского эквивалента: используется "N" (nulla)
ZERO_DIGIT: Final[str] = "N"

MINUS_SIGN: Final[str] = "-"
PLUS_SIGN: Final[str] = "+"

# Оформление списка невалидных цифр: 'A', 'B'
DIGIT_QUOTE: Final[str] = "'"
DIGITS_SEPARATOR: Final[str] = ", "


# =============================================================================
# ВЕСА ЦИФР
# =============================================================================

DIGIT_VALUES: Final[Mapping[str, int]] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Порядок критичен: жадное разложение идёт строго по убыванию веса.
# Поэтому tuple, а не dict.
ROMAN_PAIRS: Final[Tuple[Tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)  # 1982 = M CM L XXX II


# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

INVALID_DIGIT_MESSAGE: Final[str] = "Invalid Roman digit(s):"
ILLEGAL_ORDERING_MESSAGE: Final[str] = "Illegal Roman digit sequence:"
EMPTY_INPUT_MESSAGE: Final[str] = "NULL or empty input"
ADD_NULL_MESSAGE: Final[str] = "Cannot Add null object"
SUM_NULL_MESSAGE: Final[str] = "Invalid Sum() invocation with NULL argument"
INVALID_EXPRESSION_MESSAGE: Final[str] = "Invalid expression"
TOO_MANY_OPERANDS_MESSAGE: Final[str] = "Too many arguments"

# "{message}: '{argument}'"
NULL_MESSAGE_PATTERN: Final[str] = "{0}: '{1}'"


# =============================================================================
# ДОСТУП К ВЕСАМ
# =============================================================================


def is_digit(symbol: str) -> bool:
    """Проверка, что символ — одна из семи классических цифр."""
    return symbol in DIGIT_VALUES


def digit_value(symbol: str) -> int:
    """
    Вес одной римской цифры.

    Args:
        symbol: Один символ (например, 'X')

    Returns:
        Вес цифры (например, 10)

    Raises:
        KeyError: Если символ не является римской цифрой.
            Вызывающий код обязан проверить символ через is_digit
            или check_validity до вызова.
    """
    return DIGIT_VALUES[symbol]


def quote_digit(symbol: str) -> str:
    """'X' → "'X'" """
    return f"{DIGIT_QUOTE}{symbol}{DIGIT_QUOTE}"
