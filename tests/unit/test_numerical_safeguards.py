"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Деление с fallback на ноль при нулевом делителе
2. Проверку валидности float
3. Epsilon-сравнения float
4. Валидацию толерантностей и непустоты
"""

import math

import pytest

from probability_engine.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PROBABILITY_SUM,
    divide_or_zero,
    is_close,
    is_valid_float,
    validate_non_empty,
    validate_tolerance,
)

# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivideOrZero:
    """Тесты для divide_or_zero"""

    def test_normal_division(self) -> None:
        """Обычное деление работает корректно"""
        assert divide_or_zero(10.0, 2.0) == 5.0
        assert divide_or_zero(-10.0, 4.0) == -2.5

    def test_zero_denominator_returns_zero(self) -> None:
        """Нулевой делитель даёт 0.0"""
        assert divide_or_zero(10.0, 0.0) == 0.0
        assert divide_or_zero(-10.0, 0.0) == 0.0
        assert divide_or_zero(0.0, 0.0) == 0.0

    def test_negative_zero_denominator_returns_zero(self) -> None:
        """-0.0 считается нулём"""
        assert divide_or_zero(3.0, -0.0) == 0.0

    def test_small_denominator_not_clamped(self) -> None:
        """Малый ненулевой делитель используется как есть"""
        assert divide_or_zero(1.0, 1e-20) == pytest.approx(1e20)

    def test_nan_propagates(self) -> None:
        """NaN не санитизируется"""
        assert math.isnan(divide_or_zero(float("nan"), 2.0))


# =============================================================================
# ТЕСТЫ ПРОВЕРОК FLOAT
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e10)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        """Толерантности по умолчанию"""
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12
        assert EPS_PROBABILITY_SUM == 1e-9

    def test_close_values(self) -> None:
        """Близкие значения равны"""
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(0.1 + 0.2, 0.3)

    def test_distant_values(self) -> None:
        """Далёкие значения не равны"""
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerance(self) -> None:
        """Пользовательская толерантность"""
        assert is_close(1.0, 1.05, rel_tol=0.1)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateTolerance:
    """Тесты для validate_tolerance"""

    def test_positive_passes(self) -> None:
        """Положительная толерантность проходит"""
        validate_tolerance(1e-9)
        validate_tolerance(0.5, "tol")

    def test_zero_or_negative_raises(self) -> None:
        """Ноль и отрицательные значения вызывают ошибку"""
        with pytest.raises(ValueError, match="tol must be positive"):
            validate_tolerance(0.0)
        with pytest.raises(ValueError, match="tol must be positive"):
            validate_tolerance(-1e-9)

    def test_nan_raises(self) -> None:
        """NaN вызывает ошибку"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_tolerance(float("nan"))


class TestValidateNonEmpty:
    """Тесты для validate_non_empty"""

    def test_non_empty_passes(self) -> None:
        """Непустая последовательность проходит"""
        validate_non_empty([1.0], "x")
        validate_non_empty((0.0, 0.0), "x")

    def test_empty_raises_with_name(self) -> None:
        """Пустая последовательность вызывает ошибку с именем параметра"""
        with pytest.raises(ValueError, match="weights must be non-empty"):
            validate_non_empty([], "weights")
