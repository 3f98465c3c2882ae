"""
Core math modules для romanum

Преобразования int ↔ римская запись и вычисление выражений.
"""

# Formatter
from romanum.core.math.formatter import format_roman

# Parser
from romanum.core.math.parser import (
    DigitCheckResult,
    ParseOutcome,
    check_legality,
    check_validity,
    parse_roman,
    try_parse,
)

# Evaluator
from romanum.core.math.evaluator import (
    ExpressionTokens,
    evaluate_expression,
    tokenize_expression,
    try_eval,
)

__all__ = [
    # Formatter
    "format_roman",
    # Parser
    "DigitCheckResult",
    "ParseOutcome",
    "check_validity",
    "check_legality",
    "parse_roman",
    "try_parse",
    # Evaluator
    "ExpressionTokens",
    "tokenize_expression",
    "evaluate_expression",
    "try_eval",
]
