"""
Numerical Safeguards — базовые примитивы для операций над последовательностями

Модуль содержит общие для всей библиотеки численные примитивы:
- Толерантности для float-сравнений (is_close, проверки PMF/CDF)
- Деление с явным fallback на ноль при нулевом делителе
- Проверки валидности float и непустоты последовательностей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divide_or_zero никогда не поднимает ZeroDivisionError (точный ноль → 0.0)
2. Никакой epsilon-подмены делителя: малые ненулевые делители используются как есть
3. NaN/Inf НЕ санитизируются — распространяются по правилам IEEE-754
"""

import math
from collections.abc import Sized
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Допуск для проверки sum(pmf) ≈ 1 и cdf[-1] ≈ 1
# Накопленная ошибка prefix-sum растёт с длиной, поэтому допуск шире EPS_FLOAT_COMPARE_ABS
EPS_PROBABILITY_SUM: Final[float] = 1e-9


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_or_zero(numerator: float, denominator: float) -> float:
    """
    Деление с fallback 0.0 при точно нулевом делителе.

    В отличие от epsilon-защищённого деления, малые ненулевые делители
    не ограничиваются: 1.0 / 1e-300 даёт 1e300.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, либо 0.0 если denominator == 0

    Examples:
        >>> divide_or_zero(10.0, 2.0)
        5.0
        >>> divide_or_zero(10.0, 0.0)
        0.0
        >>> divide_or_zero(-3.0, -0.0)
        0.0
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_tolerance(tol: float, name: str = "tol") -> None:
    """
    Валидация, что толерантность строго положительна и конечна.

    Raises:
        ValueError: Если tol <= 0 или NaN/Inf
    """
    if not is_valid_float(tol):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {tol}")

    if tol <= 0:
        raise ValueError(f"{name} must be positive, got {tol}")


def validate_non_empty(values: Sized, name: str) -> None:
    """
    Валидация, что последовательность непустая.

    Args:
        values: Проверяемая последовательность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если len(values) == 0
    """
    if len(values) == 0:
        raise ValueError(f"{name} must be non-empty")
