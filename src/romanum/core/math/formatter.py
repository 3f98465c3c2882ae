"""
Formatter — Каноническая запись целого числа римскими цифрами

Каноническая форма уникальна и минимальна: жадное разложение модуля числа
по упорядоченной таблице 13 пар (вес, символ) строго по убыванию веса.

ИНВАРИАНТЫ:
1. 0 ↔ "N", и никакое другое значение не даёт "N"
2. Результат зависит только от значения (чистая функция)
3. Верхней границы нет: большие числа дают длинную серию "M"
"""

from romanum.core.domain.digits import MINUS_SIGN, ROMAN_PAIRS, ZERO_DIGIT


def format_roman(value: int) -> str:
    """
    Каноническая римская запись целого числа.

    Args:
        value: Целое число (может быть отрицательным)

    Returns:
        Римская запись; для отрицательных — с ведущим "-"

    Examples:
        >>> format_roman(1982)
        'MCMLXXXII'
        >>> format_roman(-23)
        '-XXIII'
        >>> format_roman(0)
        'N'
    """
    if value == 0:
        return ZERO_DIGIT

    number = abs(value)
    parts = [MINUS_SIGN] if value < 0 else []

    for weight, symbol in ROMAN_PAIRS:
        while number >= weight:
            parts.append(symbol)
            number -= weight

    return "".join(parts)
