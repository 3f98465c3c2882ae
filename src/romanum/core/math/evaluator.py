"""
Evaluator — Вычисление выражений вида <roman> (+|-) <roman>

Поддерживается ровно одна бинарная операция (сложение или вычитание)
над двумя римскими операндами, каждый со своим необязательным знаком.
Пробельные символы в любом месте выражения игнорируются.

Разбор по трём слотам (левый операнд, оператор, правый операнд):
- ведущий "-" принадлежит левому операнду
- первый "+" или "-" после левого операнда — оператор
- "-" в начале правого операнда — знак правого операнда
- любой следующий оператор — TooManyOperandsError

Примеры:
    "IV + XL"   → 44
    "XL--II"    → 42
    "-X - -II"  → -8
    "-X+-II"    → -12
    "IV"        → 4 (один операнд, без оператора)
"""

from dataclasses import dataclass
from typing import Optional

from romanum.core.domain.digits import MINUS_SIGN, PLUS_SIGN, ZERO_DIGIT, is_digit
from romanum.core.domain.errors import (
    EmptyInputError,
    InvalidDigitError,
    InvalidExpressionError,
    RomanNumeralError,
    TooManyOperandsError,
)
from romanum.core.math.parser import ParseOutcome, parse_roman


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ExpressionTokens:
    """Результат разбора выражения по слотам."""

    left: str
    operator: str
    right: str


# =============================================================================
# ТОКЕНИЗАЦИЯ
# =============================================================================


def _strip_expression(expression: Optional[str]) -> str:
    """Удаление всех пробельных символов и проверка краёв выражения."""
    if expression is None:
        raise EmptyInputError()

    stripped = "".join(expression.split())

    if stripped.startswith(PLUS_SIGN) or stripped.endswith(PLUS_SIGN):
        raise InvalidExpressionError(stripped)

    return stripped


def _is_operand_symbol(symbol: str) -> bool:
    return is_digit(symbol) or symbol == ZERO_DIGIT or symbol == MINUS_SIGN


def tokenize_expression(expression: Optional[str]) -> ExpressionTokens:
    """
    Разбор выражения на левый операнд, оператор и правый операнд.

    Args:
        expression: Выражение, например "-X + -II"

    Returns:
        ExpressionTokens(left="-X", operator="+", right="-II")

    Raises:
        EmptyInputError: expression is None
        InvalidExpressionError: Ведущий/замыкающий "+" или нет оператора
        TooManyOperandsError: Второй оператор
        InvalidDigitError: Символ, не являющийся цифрой, "N" или знаком
    """
    stripped = _strip_expression(expression)

    slots = ["", "", ""]
    slot = 0
    rest = stripped

    if stripped.startswith(MINUS_SIGN):
        slots[0] = MINUS_SIGN
        rest = stripped[1:]

    for c in rest:
        if slot == 0 and c in (PLUS_SIGN, MINUS_SIGN):
            slots[1] = c
            slot = 2
            continue

        # После оператора допустим только знак правого операнда
        if c == PLUS_SIGN or (c == MINUS_SIGN and slots[2]):
            raise TooManyOperandsError(stripped)

        if not _is_operand_symbol(c):
            raise InvalidDigitError((c,))

        slots[slot] += c

    if not slots[1]:
        raise InvalidExpressionError(stripped)

    return ExpressionTokens(left=slots[0], operator=slots[1], right=slots[2])


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


def evaluate_expression(expression: Optional[str]) -> int:
    """
    Вычисление выражения <roman> (+|-) <roman>.

    Выражение без "+" и "-" разбирается как одно римское число.

    Args:
        expression: Выражение, например "IV + XL"

    Returns:
        Целый результат

    Raises:
        RomanNumeralError: Любая ошибка разбора выражения или операндов
    """
    stripped = _strip_expression(expression)

    if PLUS_SIGN not in stripped and MINUS_SIGN not in stripped:
        return parse_roman(stripped)

    tokens = tokenize_expression(stripped)
    left = parse_roman(tokens.left)
    right = parse_roman(tokens.right)

    if tokens.operator == PLUS_SIGN:
        return left + right
    return left - right


def try_eval(expression: Optional[str]) -> ParseOutcome:
    """Вычисление без исключений."""
    try:
        value = evaluate_expression(expression)
    except RomanNumeralError as e:
        return ParseOutcome(ok=False, value=None, error_kind=e.kind, details=str(e))

    return ParseOutcome(ok=True, value=value, error_kind=None, details="PASS")
