"""
Numeric Capability Contract — требования к типу операнда

Минимальный набор операций, который должен поддерживать тип числа, чтобы
участвовать в hyperoperation:
- Умножение (результат того же типа)
- Вычитание (только для декремента num_b)
- Сложение
- Полный порядок (сравнение)
- Конверсия в int через __index__ (только для подсчёта итераций)
- Мультипликативная единица ("one")

Подходящие типы:
- int (arbitrary precision, аналог BigUint)
- numpy.uint8 ... numpy.uint64 (fixed-width, переполнение на стороне типа)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды неотрицательны (unsigned семантика)
2. arrows ∈ [0, MAX_ARROWS]
3. bool не является числом для hyperoperation
"""

from typing import Any, Final, Protocol, TypeVar, runtime_checkable

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное количество стрелок (ширина одного байта)
MAX_ARROWS: Final[int] = 255


# =============================================================================
# EXCEPTIONS
# =============================================================================


class HyperoperationDomainError(ValueError):
    """
    Нарушение domain для hyperoperation.

    Возникает при:
    1. arrows вне диапазона [0, MAX_ARROWS] или не int
    2. Отрицательном операнде
    3. Операнде, не удовлетворяющем KnuthNumber
    """

    pass


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class KnuthNumber(Protocol):
    """Число, пригодное как первый или второй операнд hyperoperation."""

    def __mul__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __index__(self) -> int: ...


Num = TypeVar("Num", bound=KnuthNumber)


# =============================================================================
# ЕДИНИЦЫ ТИПА
# =============================================================================


def one_of(value: Num) -> Num:
    """
    Мультипликативная единица для типа value.

    Если тип предоставляет classmethod one() — используется он,
    иначе type(value)(1).

    Examples:
        >>> one_of(7)
        1
        >>> type(one_of(7)) is int
        True
    """
    num_type = type(value)
    factory = getattr(num_type, "one", None)
    if callable(factory):
        return factory()
    return num_type(1)


def zero_of(value: Num) -> Num:
    """Аддитивная единица (ноль) для типа value. Правило то же, что в one_of."""
    num_type = type(value)
    factory = getattr(num_type, "zero", None)
    if callable(factory):
        return factory()
    return num_type(0)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_knuth_number(value: Any) -> bool:
    """
    Структурная проверка операнда.

    float не проходит (нет __index__), bool отвергается явно.

    Examples:
        >>> is_knuth_number(3)
        True
        >>> is_knuth_number(3.0)
        False
        >>> is_knuth_number(True)
        False
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, KnuthNumber)


def validate_operand(value: Num, name: str) -> Num:
    """
    Валидация операнда hyperoperation.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        HyperoperationDomainError: Если value не KnuthNumber, знаковый
            fixed-width тип (numpy.int*) или отрицательный
    """
    if not is_knuth_number(value):
        raise HyperoperationDomainError(
            f"{name} must be a non-negative integer number, "
            f"got {type(value).__name__}: {value!r}"
        )

    # Fixed-width типы должны быть беззнаковыми (dtype.kind == "u"), не "i"
    if getattr(getattr(value, "dtype", None), "kind", None) == "i":
        raise HyperoperationDomainError(
            f"{name} must be an unsigned number, got signed {type(value).__name__}"
        )

    if value < zero_of(value):
        raise HyperoperationDomainError(f"{name} must be non-negative, got {value}")

    return value


def validate_arrows(arrows: int) -> int:
    """
    Валидация количества стрелок.

    Raises:
        HyperoperationDomainError: Если arrows не int или вне [0, MAX_ARROWS]
    """
    if isinstance(arrows, bool) or not isinstance(arrows, int):
        raise HyperoperationDomainError(
            f"arrows must be an int, got {type(arrows).__name__}: {arrows!r}"
        )

    if arrows < 0 or arrows > MAX_ARROWS:
        raise HyperoperationDomainError(
            f"arrows must be in [0, {MAX_ARROWS}], got {arrows}"
        )

    return arrows
