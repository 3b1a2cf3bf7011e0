"""
Тесты для модели Hyperoperation

Проверяет:
1. Создание и валидацию модели Pydantic
2. Вычисление и форматирование
3. Immutability (frozen=True)
4. Невалидные данные
"""

import logging

import numpy as np
import pytest
from pydantic import ValidationError

from hyperoperation import ASCII_NOTATION, Hyperoperation, hyperoperation


@pytest.fixture
def tetration() -> Hyperoperation:
    """3 ↑↑ 3"""
    return Hyperoperation.new(3, 3, 2)


class TestConstruction:
    """Создание модели."""

    def test_new_matches_keyword_constructor(self, tetration: Hyperoperation) -> None:
        assert tetration == Hyperoperation(num_a=3, num_b=3, arrows=2)
        assert tetration.num_a == 3
        assert tetration.num_b == 3
        assert tetration.arrows == 2

    def test_operands_not_coerced(self) -> None:
        """numpy операнды сохраняют свой тип."""
        expr = Hyperoperation.new(np.uint64(3), np.uint64(4), 1)
        assert isinstance(expr.num_a, np.uint64)
        assert isinstance(expr.num_b, np.uint64)

    def test_negative_operand_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            Hyperoperation.new(-3, 3, 2)

    def test_float_operand_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Hyperoperation.new(3, 2.5, 2)

    @pytest.mark.parametrize("arrows", [-1, 256, 1000])
    def test_arrows_out_of_range(self, arrows: int) -> None:
        with pytest.raises(ValidationError):
            Hyperoperation.new(3, 3, arrows)

    @pytest.mark.parametrize("arrows", [True, False, "2", 2.0])
    def test_arrows_not_coerced(self, arrows: object) -> None:
        """bool, str и float для arrows отвергаются, как и в hyperoperation()."""
        with pytest.raises(ValidationError, match="arrows must be an int"):
            Hyperoperation.new(3, 3, arrows)  # type: ignore

    def test_signed_numpy_operand_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unsigned"):
            Hyperoperation.new(np.int64(3), np.int64(3), 2)

    def test_immutable(self, tetration: Hyperoperation) -> None:
        """Модель должна быть immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            tetration.arrows = 3  # type: ignore

    def test_copy(self, tetration: Hyperoperation) -> None:
        clone = tetration.model_copy()
        assert clone == tetration
        assert clone.evaluate() == tetration.evaluate()


class TestEvaluate:
    """Вычисление значения."""

    @pytest.mark.parametrize(
        "num_a, num_b, arrows, expected",
        [
            (4, 7, 0, 28),
            (3, 2, 2, 27),
            (2, 4, 2, 65536),
            (2, 3, 3, 65536),
            (3, 3, 2, 7625597484987),
        ],
    )
    def test_small(self, num_a: int, num_b: int, arrows: int, expected: int) -> None:
        assert Hyperoperation.new(num_a, num_b, arrows).evaluate() == expected

    def test_big(self) -> None:
        result = Hyperoperation.new(5, 3, 2).evaluate()
        assert result % 100_000_000 == 8203125

    def test_matches_free_function(self, tetration: Hyperoperation) -> None:
        assert tetration.evaluate() == hyperoperation(3, 3, 2)

    def test_evaluate_does_not_modify(self, tetration: Hyperoperation) -> None:
        tetration.evaluate()
        assert str(tetration) == "3 ↑↑ 3"

    def test_evaluate_logs_expression(self, tetration: Hyperoperation, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="hyperoperation"):
            tetration.evaluate()
        assert "Evaluating 3 ↑↑ 3" in caplog.text


class TestNotation:
    """Форматирование модели."""

    def test_str(self) -> None:
        assert str(Hyperoperation.new(3, 4, 2)) == "3 ↑↑ 4"
        assert str(Hyperoperation.new(3, 4, 0)) == "3 × 4"
        assert f"{Hyperoperation.new(3, 4, 2)}" == "3 ↑↑ 4"

    def test_to_notation_ascii(self) -> None:
        assert Hyperoperation.new(3, 4, 3).to_notation(ASCII_NOTATION) == "3 ^^^ 4"


    def test_str_beyond_int_str_digits_limit(self) -> None:
        """Операнд длиннее 4300 цифр форматируется без ValueError."""
        expr = Hyperoperation.new(10**5000, 2, 1)
        assert str(expr) == "1" + "0" * 5000 + " ↑ 2"
