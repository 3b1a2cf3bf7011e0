"""
Hyperoperation Evaluator — рекурсивное вычисление a ↑^n b

Рекурсивное определение:
    a ↑^0 b = a × b
    a ↑^n b = a ↑^(n-1) (a ↑^n (b-1)),   a ↑^n 1 = a

Раскрыто итеративно по b (без двойной рекурсии):
    acc = a
    repeat (b - 1) times: acc = a ↑^(n-1) acc

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глубина рекурсии ≤ arrows (≤ MAX_ARROWS)
2. Итерация по num_b — явный цикл, стек не растёт с num_b
3. Переполнение не детектируется: поведение определяет тип числа
4. a ↑^n 0 = 1 для n ≥ 1 (декремент нуля никогда не выполняется)

ВАЖНО: стоимость растёт экстремально быстро с arrows и num_b.
Для больших результатов используйте int (arbitrary precision), а не
fixed-width типы вроде numpy.uint64.
"""

import logging
import operator

from hyperoperation.core.numeric import (
    Num,
    one_of,
    validate_arrows,
    validate_operand,
)

logger = logging.getLogger(__name__)


def hyperoperation(num_a: Num, num_b: Num, arrows: int) -> Num:
    """
    Вычисление hyperoperation в нотации Кнута.

    Эквивалентно Hyperoperation.new(num_a, num_b, arrows).evaluate().

    Args:
        num_a: Первое число (до стрелок)
        num_b: Второе число (после стрелок)
        arrows: Количество стрелок (0 = умножение, 1 = степень, 2 = тетрация)

    Returns:
        Результат того же типа, что и операнды

    Raises:
        HyperoperationDomainError: Если операнды отрицательные или arrows вне диапазона

    Examples:
        >>> hyperoperation(3, 3, 2)  # 3 ↑↑ 3
        7625597484987
        >>> hyperoperation(4, 7, 0)  # 4 × 7
        28
        >>> hyperoperation(2, 0, 1)  # 2 ↑ 0
        1
    """
    validate_operand(num_a, "num_a")
    validate_operand(num_b, "num_b")
    validate_arrows(arrows)

    logger.debug("Evaluating hyperoperation num_a=%s num_b=%s arrows=%d", num_a, num_b, arrows)

    return _evaluate(num_a, num_b, arrows)


def _evaluate(num_a: Num, num_b: Num, arrows: int) -> Num:
    # TODO: arrows == 1 можно считать через pow вместо повторного умножения
    if arrows == 0:
        return num_b * num_a

    one = one_of(num_b)

    # num_b == 0: a ↑^n 0 = 1
    if num_b < one:
        return one

    result = num_a
    for _ in range(operator.index(num_b - one)):
        result = _evaluate(num_a, result, arrows - 1)

    return result
