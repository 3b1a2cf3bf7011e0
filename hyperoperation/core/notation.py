"""
Knuth Notation — каноническое текстовое представление

Формат: "<num_a> <symbol> <num_b>"
- arrows == 0: symbol = "×"
- arrows > 0:  symbol = "↑" * arrows

Examples:
    3 × 4    (arrows=0)
    3 ↑ 4    (arrows=1)
    3 ↑↑ 4   (arrows=2)
"""

from dataclasses import dataclass
from typing import Final

from hyperoperation.core.numeric import validate_arrows

# Размер блока десятичных цифр: ниже минимального значения
# sys.set_int_max_str_digits (640), поэтому str() блока всегда допустим
_DIGITS_PER_CHUNK: Final[int] = 600
_CHUNK_BASE: Final[int] = 10**_DIGITS_PER_CHUNK


@dataclass(frozen=True)
class NotationConfig:
    """Набор глифов для отображения выражения."""

    multiplication_glyph: str = "×"
    arrow_glyph: str = "↑"


DEFAULT_NOTATION = NotationConfig()

# Для терминалов без Unicode
ASCII_NOTATION = NotationConfig(multiplication_glyph="*", arrow_glyph="^")


def arrows_symbol(arrows: int, config: NotationConfig | None = None) -> str:
    """
    Символ операции для заданного количества стрелок.

    Examples:
        >>> arrows_symbol(0)
        '×'
        >>> arrows_symbol(3)
        '↑↑↑'
        >>> arrows_symbol(2, ASCII_NOTATION)
        '^^'
    """
    validate_arrows(arrows)
    config = config or DEFAULT_NOTATION

    if arrows == 0:
        return config.multiplication_glyph
    return config.arrow_glyph * arrows


def render_number(value: object) -> str:
    """
    Десятичное представление операнда.

    str(int) отказывает для чисел длиннее sys.get_int_max_str_digits()
    (4300 цифр по умолчанию). Большие int переводятся блоками по
    _DIGITS_PER_CHUNK цифр, поэтому длина результата не ограничена.
    Остальные типы форматируются через str().

    Examples:
        >>> render_number(42)
        '42'
        >>> len(render_number(10**5000))
        5001
    """
    if not isinstance(value, int) or value < _CHUNK_BASE:
        return str(value)

    chunks = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{_DIGITS_PER_CHUNK}d}")
    chunks.append(str(value))

    return "".join(reversed(chunks))


def format_expression(
    num_a: object,
    num_b: object,
    arrows: int,
    config: NotationConfig | None = None,
) -> str:
    """
    Форматирование выражения в нотации Кнута.

    Args:
        num_a: Первое число
        num_b: Второе число
        arrows: Количество стрелок
        config: Набор глифов (default: DEFAULT_NOTATION)

    Returns:
        Строка вида "3 ↑↑ 4"; int операнды любой длины (см. render_number)
    """
    symbol = arrows_symbol(arrows, config)
    return f"{render_number(num_a)} {symbol} {render_number(num_b)}"
