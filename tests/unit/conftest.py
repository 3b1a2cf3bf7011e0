"""Общие fixtures для unit тестов."""

import pytest


class Natural:
    """Минимальный пользовательский тип с one()/zero()."""

    def __init__(self, value: int) -> None:
        self.value = value

    @classmethod
    def one(cls) -> "Natural":
        return cls(1)

    @classmethod
    def zero(cls) -> "Natural":
        return cls(0)

    def __mul__(self, other: "Natural") -> "Natural":
        return Natural(self.value * other.value)

    def __sub__(self, other: "Natural") -> "Natural":
        return Natural(self.value - other.value)

    def __add__(self, other: "Natural") -> "Natural":
        return Natural(self.value + other.value)

    def __lt__(self, other: "Natural") -> bool:
        return self.value < other.value

    def __le__(self, other: "Natural") -> bool:
        return self.value <= other.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Natural) and self.value == other.value

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Natural({self.value})"


@pytest.fixture
def natural() -> type[Natural]:
    """Пользовательский тип числа, реализующий KnuthNumber."""
    return Natural
