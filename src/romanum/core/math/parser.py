"""
Parser — Разбор римской записи в целое число

Порядок обработки входной строки:
1. None / пустая строка / только пробельные символы → EmptyInputError
2. Обрезка пробельных символов по краям (любых: пробел, \\t, \\n, ...)
3. Ровно "N" → 0 (минуя все проверки)
4. Проверка допустимости символов (check_validity)
5. Проверка порядка цифр (check_legality)
6. Накопление значения справа налево

Проверки 4-5 возвращают DigitCheckResult и никогда не бросают исключений.
Исключения бросает только parse_roman; try_parse — безысключительная форма.

Правило "чтения":
- цифра перед БОЛЬШЕЙ цифрой вычитается (IV, IX)
- перед меньшей или равной — прибавляется (VI, II, XI)
Остальные классические правила намеренно не проверяются — "дружественный"
разбор неоптимальных записей: IIII = 4, VV = 10, VX = 5, IM = 999.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from romanum.core.domain.digits import (
    MINUS_SIGN,
    ZERO_DIGIT,
    digit_value,
    is_digit,
)
from romanum.core.domain.errors import (
    EmptyInputError,
    IllegalOrderingError,
    InvalidDigitError,
    RomanErrorKind,
    RomanNumeralError,
    format_invalid_digits,
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DigitCheckResult:
    """Результат проверки цифр."""

    passed: bool
    error_kind: Optional[RomanErrorKind]

    # Невалидные символы в порядке появления (только для INVALID_DIGIT)
    invalid_digits: Tuple[str, ...]

    # Детали
    details: str


@dataclass(frozen=True)
class ParseOutcome:
    """Результат разбора без исключений: либо значение, либо вид ошибки."""

    ok: bool
    value: Optional[int]
    error_kind: Optional[RomanErrorKind]
    details: str


_PASSED = DigitCheckResult(passed=True, error_kind=None, invalid_digits=(), details="PASS")


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def _digits_start(text: str) -> int:
    """Индекс первой цифры: 1, если строка начинается со знака минус."""
    return 1 if text.startswith(MINUS_SIGN) else 0


def check_validity(text: str) -> DigitCheckResult:
    """
    Проверка допустимости символов.

    Каждый символ (после одного необязательного ведущего "-") должен быть
    одной из цифр I, V, X, L, C, D, M. Собираются ВСЕ невалидные символы.

    Args:
        text: Обрезанная строка

    Returns:
        DigitCheckResult; при провале — error_kind=INVALID_DIGIT
    """
    digits = text[_digits_start(text):]
    invalid = tuple(c for c in digits if not is_digit(c))

    if invalid:
        return DigitCheckResult(
            passed=False,
            error_kind=RomanErrorKind.INVALID_DIGIT,
            invalid_digits=invalid,
            details=format_invalid_digits(invalid),
        )

    return _PASSED


def check_legality(text: str) -> DigitCheckResult:
    """
    Эвристика порядка цифр.

    Сканирование справа налево с запоминанием максимального веса.
    Цифра строго меньше максимума увеличивает счётчик "серии меньших",
    цифра >= максимума сбрасывает серию и обновляет максимум.
    Серия длиннее 1 (две "вычитаемые" цифры подряд) — строка отвергается.

    Это НЕ полная грамматика римских чисел: IIII, VV, DD, VX, IM допустимы,
    IIV, IIX, VVX, IVX, DDDM — нет.

    Предполагается, что check_validity уже пройдена.

    Args:
        text: Обрезанная строка

    Returns:
        DigitCheckResult; при провале — error_kind=ILLEGAL_ORDERING,
        details содержит всю строку
    """
    max_digit = 0
    less_digits_count = 0

    for i in range(len(text) - 1, _digits_start(text) - 1, -1):
        current = digit_value(text[i])
        if current < max_digit:
            less_digits_count += 1
            if less_digits_count > 1:
                return DigitCheckResult(
                    passed=False,
                    error_kind=RomanErrorKind.ILLEGAL_ORDERING,
                    invalid_digits=(),
                    details=text,
                )
        else:
            max_digit = current
            less_digits_count = 0

    return _PASSED


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_roman(text: Optional[str]) -> int:
    """
    Разбор римской записи в целое число.

    Args:
        text: Римская запись, возможно с пробельными символами по краям
            и с ведущим "-"

    Returns:
        Целое значение

    Raises:
        EmptyInputError: None, пустая строка или только пробелы
        InvalidDigitError: Символы вне I, V, X, L, C, D, M
        IllegalOrderingError: Порядок цифр отвергнут check_legality

    Examples:
        >>> parse_roman("MCMLXXXII")
        1982
        >>> parse_roman("IIII")
        4
        >>> parse_roman(" -L\\n")
        -50
    """
    if text is None:
        raise EmptyInputError()

    text = text.strip()
    if not text:
        raise EmptyInputError()

    if text == ZERO_DIGIT:
        return 0

    validity = check_validity(text)
    if not validity.passed:
        raise InvalidDigitError(validity.invalid_digits)

    legality = check_legality(text)
    if not legality.passed:
        raise IllegalOrderingError(legality.details)

    start = _digits_start(text)
    prev = 0
    result = 0
    for i in range(len(text) - 1, start - 1, -1):
        current = digit_value(text[i])
        result += -current if prev > current else current
        prev = current

    return -result if start else result


def try_parse(text: Optional[str]) -> ParseOutcome:
    """
    Разбор без исключений.

    Returns:
        ParseOutcome(ok=True, value=...) или ParseOutcome(ok=False, error_kind=...)
    """
    try:
        value = parse_roman(text)
    except RomanNumeralError as e:
        return ParseOutcome(ok=False, value=None, error_kind=e.kind, details=str(e))

    return ParseOutcome(ok=True, value=value, error_kind=None, details="PASS")
