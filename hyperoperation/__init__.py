"""
Hyperoperation — вычисление гипероператоров в нотации Кнута.

Умножение, возведение в степень, тетрация и далее, для int
(arbitrary precision) и fixed-width беззнаковых типов (numpy.uint*).
"""

import logging

from hyperoperation.core import (
    ASCII_NOTATION,
    DEFAULT_NOTATION,
    MAX_ARROWS,
    HyperoperationDomainError,
    KnuthNumber,
    NotationConfig,
    arrows_symbol,
    format_expression,
    hyperoperation,
)
from hyperoperation.domain import Hyperoperation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ASCII_NOTATION",
    "DEFAULT_NOTATION",
    "MAX_ARROWS",
    "Hyperoperation",
    "HyperoperationDomainError",
    "KnuthNumber",
    "NotationConfig",
    "arrows_symbol",
    "format_expression",
    "hyperoperation",
]
