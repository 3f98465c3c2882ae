"""
RomanValue — Целое число в римской записи

Immutable Pydantic модель-значение. Все операции (parse, add, sum, eval)
создают новый экземпляр; изменение поля value запрещено (frozen=True).

Строковое представление — всегда каноническая форма:
    str(RomanValue(1982)) == "MCMLXXXII"
    str(RomanValue()) == "N"
"""

from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, Field

from romanum.core.domain.digits import (
    ADD_NULL_MESSAGE,
    NULL_MESSAGE_PATTERN,
    SUM_NULL_MESSAGE,
)
from romanum.core.domain.errors import NullArgumentError
from romanum.core.math.evaluator import evaluate_expression
from romanum.core.math.formatter import format_roman
from romanum.core.math.parser import parse_roman


class RomanValue(BaseModel):
    """
    Целое число со знаком, представленное римскими цифрами.

    Immutable модель (frozen=True). Конструируется из int:
        RomanValue(4), RomanValue(value=4), RomanValue() == RomanValue(0)

    Диапазон не ограничен; каноническая строка для больших чисел —
    длинная серия "M".
    """

    value: int = Field(0, strict=True, description="Целое значение (со знаком)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: int = 0, **data: Any) -> None:
        super().__init__(value=value, **data)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_roman(self) -> str:
        """Каноническая римская запись."""
        return format_roman(self.value)

    def __str__(self) -> str:
        return self.to_roman()

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Разбор
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: Optional[str]) -> "RomanValue":
        """
        Разбор римской записи.

        Raises:
            EmptyInputError, InvalidDigitError, IllegalOrderingError
        """
        return cls(parse_roman(text))

    @classmethod
    def eval(cls, expression: Optional[str]) -> "RomanValue":
        """
        Вычисление выражения <roman> (+|-) <roman>.

        Examples:
            >>> RomanValue.eval("IV + XL").value
            44
        """
        return cls(evaluate_expression(expression))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: Optional["RomanValue"]) -> "RomanValue":
        """
        Сумма двух значений. Операнды не изменяются.

        Raises:
            NullArgumentError: other is None
            TypeError: other не RomanValue
        """
        if other is None:
            raise NullArgumentError(NULL_MESSAGE_PATTERN.format(ADD_NULL_MESSAGE, "other"))
        if not isinstance(other, RomanValue):
            raise TypeError(f"Cannot Add {type(other).__name__} to RomanValue")

        return RomanValue(self.value + other.value)

    def __add__(self, other: Any) -> "RomanValue":
        if not isinstance(other, RomanValue):
            return NotImplemented
        return self.add(other)

    @classmethod
    def sum(
        cls, *numbers: Union["RomanValue", Iterable["RomanValue"], None]
    ) -> "RomanValue":
        """
        Сумма произвольного числа значений.

        Принимает значения как отдельные аргументы или одной коллекцией:
            RomanValue.sum(a, b, c)
            RomanValue.sum([a, b, c])

        Пустой набор даёт ноль; отсутствующая коллекция (sum(None)) — ошибка.

        Raises:
            NullArgumentError: Коллекция или элемент коллекции is None
            TypeError: Элемент коллекции не RomanValue
        """
        if len(numbers) == 1 and not isinstance(numbers[0], RomanValue):
            numbers = numbers[0]

        if numbers is None:
            raise NullArgumentError(NULL_MESSAGE_PATTERN.format(SUM_NULL_MESSAGE, "numbers"))

        total = 0
        for number in numbers:
            if number is None:
                raise NullArgumentError(
                    NULL_MESSAGE_PATTERN.format(SUM_NULL_MESSAGE, "number")
                )
            if not isinstance(number, RomanValue):
                raise TypeError(f"Cannot Sum {type(number).__name__} with RomanValue")
            total += number.value

        return cls(total)

