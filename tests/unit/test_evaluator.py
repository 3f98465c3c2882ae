"""
Тесты вычисления выражений <roman> (+|-) <roman>

Покрытие:
- Известные выражения (знаки, пробелы, N)
- Один операнд без оператора
- Паритет с int-арифметикой на случайных значениях
- Ошибки: невалидные символы, лишние операторы, "+" по краям, None
- Токенизация по слотам
"""

import random

import pytest

from romanum.core.domain.errors import (
    EmptyInputError,
    IllegalOrderingError,
    InvalidDigitError,
    InvalidExpressionError,
    RomanErrorKind,
    TooManyOperandsError,
)
from romanum.core.math.evaluator import (
    ExpressionTokens,
    evaluate_expression,
    tokenize_expression,
    try_eval,
)
from romanum.core.math.formatter import format_roman


EXPRESSIONS = {
    "IV + XL": 44,
    "XXIII + LIV": 77,
    "MCCXXXIV + CDXLI": 1675,
    "CCCXXXII + CCXVII": 549,
    "MD + MD": 3000,
    "XXXVIII + CCXXVI": 264,
    "N + I": 1,
    "XXXIII + LXIV": 97,
    "CDXCVIII + II": 500,
    "XL--II": 42,
    "-X - II  ": -12,
    "-X + II  ": -8,
    "-X - -II ": -8,
    "-X + -II ": -12,
    "-X+-II   ": -12,
    "-X +-II  ": -12,
    "  IV  +  XL  ": 44,
    "IV+XL": 44,
    "X - X": 0,
    "N - N": 0,
    "\tM\n-\nI": 999,
}


# =============================================================================
# ВЫЧИСЛЕНИЕ
# =============================================================================


class TestEvaluateExpression:
    """Корректные выражения"""

    @pytest.mark.parametrize("expression,expected", EXPRESSIONS.items())
    def test_known_expressions(self, expression: str, expected: int) -> None:
        """Таблица известных выражений"""
        assert evaluate_expression(expression) == expected

    @pytest.mark.parametrize(
        "expression,expected",
        [("IV", 4), ("  MCMLXXXII ", 1982), ("N", 0), ("I I I I", 4)],
    )
    def test_single_operand(self, expression: str, expected: int) -> None:
        """Без оператора выражение — одно римское число"""
        assert evaluate_expression(expression) == expected

    def test_parity_with_int_addition(self) -> None:
        """Инвариант: eval(f"{a} + {b}") == a + b"""
        rng = random.Random(2023)
        for _ in range(200):
            a = rng.randint(-3000, 3000)
            b = rng.randint(-3000, 3000)
            expression = f"{format_roman(a)} + {format_roman(b)}"
            assert evaluate_expression(expression) == a + b

    def test_parity_with_int_subtraction(self) -> None:
        """Инвариант: eval(f"{a} - {b}") == a - b"""
        rng = random.Random(1969)
        for _ in range(200):
            a = rng.randint(-3000, 3000)
            b = rng.randint(-3000, 3000)
            expression = f"{format_roman(a)} - {format_roman(b)}"
            assert evaluate_expression(expression) == a - b


class TestEvaluateErrors:
    """Некорректные выражения"""

    def test_none(self) -> None:
        """None → EmptyInputError"""
        with pytest.raises(EmptyInputError, match="NULL or empty"):
            evaluate_expression(None)

    @pytest.mark.parametrize("expression", ["", "   "])
    def test_empty(self, expression: str) -> None:
        """Пустое выражение → EmptyInputError"""
        with pytest.raises(EmptyInputError):
            evaluate_expression(expression)

    @pytest.mark.parametrize(
        "expression,bad",
        [("IV = XL", "="), ("=", "="), ("IK + XL", "K"), ("AX + II", "A"), ("X + I*", "*")],
    )
    def test_invalid_digit(self, expression: str, bad: str) -> None:
        """Сообщение содержит невалидный символ в кавычках"""
        with pytest.raises(InvalidDigitError) as exc_info:
            evaluate_expression(expression)
        assert f"'{bad}'" in str(exc_info.value)

    @pytest.mark.parametrize("expression", ["IV XL +", "+X + X", "+", "X+"])
    def test_plus_at_edges(self, expression: str) -> None:
        """"+" в начале или в конце → InvalidExpressionError"""
        with pytest.raises(InvalidExpressionError, match="Invalid expression"):
            evaluate_expression(expression)

    @pytest.mark.parametrize("expression", ["X + X + X", "X - X + X", "X - X - X", "X + X - X"])
    def test_too_many_operands(self, expression: str) -> None:
        """Второй оператор → TooManyOperandsError"""
        with pytest.raises(TooManyOperandsError, match="Too many arguments"):
            evaluate_expression(expression)

    @pytest.mark.parametrize("expression", ["-X", " - M "])
    def test_missing_operator(self, expression: str) -> None:
        """Знак без оператора → InvalidExpressionError"""
        with pytest.raises(InvalidExpressionError):
            evaluate_expression(expression)

    @pytest.mark.parametrize(
        "expression,expected",
        [("X--", 10), ("--X", -10), ("X - -", 10), ("- - -", 0)],
    )
    def test_sign_only_operand_is_zero(self, expression: str, expected: int) -> None:
        """Операнд из одного знака читается как 0"""
        assert evaluate_expression(expression) == expected

    def test_operand_error_forwarded(self) -> None:
        """Ошибка разбора операнда пробрасывается"""
        with pytest.raises(IllegalOrderingError) as exc_info:
            evaluate_expression("IIC + II")
        assert "IIC" in str(exc_info.value)

    def test_missing_right_operand(self) -> None:
        """Пустой правый операнд → EmptyInputError"""
        with pytest.raises(EmptyInputError):
            evaluate_expression("X -")


# =============================================================================
# ТОКЕНИЗАЦИЯ
# =============================================================================


class TestTokenizeExpression:
    """Тесты для tokenize_expression"""

    @pytest.mark.parametrize(
        "expression,tokens",
        [
            ("IV + XL", ExpressionTokens("IV", "+", "XL")),
            ("-X - -II", ExpressionTokens("-X", "-", "-II")),
            ("XL--II", ExpressionTokens("XL", "-", "-II")),
            ("-X+-II", ExpressionTokens("-X", "+", "-II")),
            ("N + I", ExpressionTokens("N", "+", "I")),
        ],
    )
    def test_slots(self, expression: str, tokens: ExpressionTokens) -> None:
        """Разбор по слотам: левый операнд, оператор, правый операнд"""
        assert tokenize_expression(expression) == tokens

    def test_tokens_immutable(self) -> None:
        """ExpressionTokens — frozen dataclass"""
        tokens = tokenize_expression("I + I")
        with pytest.raises(AttributeError):
            tokens.operator = "-"


class TestTryEval:
    """Тесты для try_eval"""

    def test_success(self) -> None:
        """Успешное вычисление"""
        outcome = try_eval("IV + XL")
        assert outcome.ok
        assert outcome.value == 44

    @pytest.mark.parametrize(
        "expression,kind",
        [
            (None, RomanErrorKind.EMPTY_INPUT),
            ("X + X + X", RomanErrorKind.TOO_MANY_OPERANDS),
            ("+X + X", RomanErrorKind.INVALID_EXPRESSION),
            ("IV = XL", RomanErrorKind.INVALID_DIGIT),
            ("IIC + II", RomanErrorKind.ILLEGAL_ORDERING),
        ],
    )
    def test_failure(self, expression, kind: RomanErrorKind) -> None:
        """Ошибка возвращается как значение"""
        outcome = try_eval(expression)
        assert not outcome.ok
        assert outcome.error_kind == kind
