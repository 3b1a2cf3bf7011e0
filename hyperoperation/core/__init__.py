"""
Core hyperoperation primitives

Числовой контракт, рекурсивный вычислитель и нотация Кнута.
"""

# Numeric capability contract
from hyperoperation.core.numeric import (
    MAX_ARROWS,
    HyperoperationDomainError,
    KnuthNumber,
    is_knuth_number,
    one_of,
    validate_arrows,
    validate_operand,
    zero_of,
)

# Evaluator
from hyperoperation.core.evaluator import hyperoperation

# Notation
from hyperoperation.core.notation import (
    ASCII_NOTATION,
    DEFAULT_NOTATION,
    NotationConfig,
    arrows_symbol,
    format_expression,
    render_number,
)

__all__ = [
    # Numeric — Constants
    "MAX_ARROWS",
    # Numeric — Exceptions
    "HyperoperationDomainError",
    # Numeric — Types
    "KnuthNumber",
    # Numeric — Functions
    "is_knuth_number",
    "one_of",
    "validate_arrows",
    "validate_operand",
    "zero_of",
    # Evaluator
    "hyperoperation",
    # Notation — Config
    "ASCII_NOTATION",
    "DEFAULT_NOTATION",
    "NotationConfig",
    # Notation — Functions
    "arrows_symbol",
    "format_expression",
    "render_number",
]
