"""
Hyperoperation — Модель выражения в нотации Кнута

Immutable Pydantic модель: два операнда и количество стрелок.
Вычисление не изменяет модель, форматирование можно выполнять сколько угодно раз.

Example:
    >>> expr = Hyperoperation.new(3, 3, 2)  # 3 ↑↑ 3
    >>> str(expr)
    '3 ↑↑ 3'
    >>> expr.evaluate()
    7625597484987
"""

import logging
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from hyperoperation.core.evaluator import hyperoperation
from hyperoperation.core.notation import NotationConfig, format_expression
from hyperoperation.core.numeric import MAX_ARROWS, validate_arrows, validate_operand

logger = logging.getLogger(__name__)


class Hyperoperation(BaseModel):
    """
    Выражение num_a ↑^arrows num_b.

    Immutable модель (frozen=True). Операнды принимаются без коэрции:
    int остаётся int, numpy.uint64 остаётся numpy.uint64.

    ВАЖНО: для некоторых выражений (например, 3 ↑↑↑ 3) вычисление займёт
    очень много времени и/или переполнит fixed-width тип. Для больших
    результатов используйте int.
    """

    num_a: Any = Field(..., description="Первое число, до стрелок")
    num_b: Any = Field(..., description="Второе число, после стрелок")
    arrows: int = Field(..., ge=0, le=MAX_ARROWS, description="Количество стрелок")

    model_config = {"frozen": True}  # Immutable

    @field_validator("num_a", "num_b")
    @classmethod
    def validate_number(cls, v: Any, info: ValidationInfo) -> Any:
        """Операнд должен быть неотрицательным беззнаковым KnuthNumber."""
        return validate_operand(v, info.field_name)

    @field_validator("arrows", mode="before")
    @classmethod
    def validate_arrows_count(cls, v: Any) -> int:
        """
        Те же правила, что и у hyperoperation(): только int, без коэрции.

        mode="before": "2" и True отвергаются до lax int коэрции pydantic.
        """
        return validate_arrows(v)

    @classmethod
    def new(cls, num_a: Any, num_b: Any, arrows: int) -> "Hyperoperation":
        """Позиционный конструктор."""
        return cls(num_a=num_a, num_b=num_b, arrows=arrows)

    def evaluate(self) -> Any:
        """
        Вычисление значения выражения.

        Returns:
            Результат того же типа, что и операнды

        Example:
            >>> Hyperoperation.new(2, 3, 3).evaluate()
            65536
        """
        logger.debug("Evaluating %s", self)
        return hyperoperation(self.num_a, self.num_b, self.arrows)

    def to_notation(self, config: NotationConfig | None = None) -> str:
        """Форматирование с заданным набором глифов."""
        return format_expression(self.num_a, self.num_b, self.arrows, config)

    def __str__(self) -> str:
        return self.to_notation()
