"""
Descriptive — описательная статистика над последовательностями

Модуль вычисляет:
- Среднее (expectation / average) и среднее по ненулевым элементам
- Популяционную дисперсию и стандартное отклонение (делитель = count, НЕ count-1)
- Ковариацию, корреляцию и автокорреляцию
- Сводку DescriptiveSummary одним вызовом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая коллекция для average/variance/std → StatisticsDomainViolation
2. Нулевая дисперсия в correlation → StatisticsDomainViolation (не NaN)
3. average_non_zero без ненулевых элементов → 0.0 (явный fallback, не ошибка)
4. Входные последовательности никогда не мутируются

ФОРМУЛЫ:
    E[x]        = sum(x) / n
    Var[x]      = sum((x_i - E[x])^2) / n
    Cov[x, y]   = E[(x - E[x]) * (y - E[y])]
    Corr[x, y]  = Cov[x, y] / (std(x) * std(y))
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from probability_engine.core.math.elementwise import multiply, subtract

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class StatisticsDomainViolation(Exception):
    """
    Статистика не определена на переданных данных.

    Возникает при:
    1. average / variance / standard_deviation на пустой коллекции
    2. correlation, когда std(x) * std(y) == 0 (константная последовательность)

    Сознательные fallback-ветки (деление на нулевой скаляр, average_non_zero
    без ненулевых элементов) этим исключением НЕ сигнализируются.
    """
    pass


# =============================================================================
# СРЕДНИЕ
# =============================================================================


def average(values: Iterable[float]) -> float:
    """
    Арифметическое среднее.

    Args:
        values: Любой iterable float (потребляется один раз)

    Returns:
        sum(values) / count

    Raises:
        StatisticsDomainViolation: если коллекция пустая

    Examples:
        >>> average([1.0, 2.0, 3.0])
        2.0
    """
    items = list(values)
    if not items:
        raise StatisticsDomainViolation("average is undefined for an empty collection")
    return sum(items) / len(items)


def expectation(values: Iterable[float]) -> float:
    """Математическое ожидание E[x] (синоним average)."""
    return average(values)


def average_non_zero(values: Sequence[float]) -> float:
    """
    Среднее только по элементам, точно не равным нулю.

    Нули исключаются и из суммы, и из количества.

    Returns:
        Среднее ненулевых элементов, либо 0.0 если таких нет

    Examples:
        >>> average_non_zero([0.0, 0.0, 4.0, 6.0])
        5.0
        >>> average_non_zero([0.0, 0.0])
        0.0
    """
    total = 0.0
    count = 0
    for value in values:
        if value != 0:
            total += value
            count += 1

    if count > 0:
        return total / count

    logger.debug("average_non_zero: no non-zero elements among %d, returning 0.0", len(values))
    return 0.0


# =============================================================================
# ДИСПЕРСИЯ
# =============================================================================


def variance(values: Iterable[float]) -> float:
    """
    Популяционная дисперсия: среднее квадратов отклонений от среднего.

    Делитель = count (НЕ count - 1).

    Raises:
        StatisticsDomainViolation: если коллекция пустая

    Examples:
        >>> variance([2.0, 2.0, 2.0, 2.0])
        0.0
        >>> variance([1.0, 3.0])
        1.0
    """
    items = list(values)
    if not items:
        raise StatisticsDomainViolation("variance is undefined for an empty collection")

    mean = average(items)
    numerator = 0.0
    for value in items:
        numerator += (value - mean) * (value - mean)
    return numerator / len(items)


def standard_deviation(values: Iterable[float]) -> float:
    """Стандартное отклонение: sqrt(variance)."""
    return math.sqrt(variance(values))


# =============================================================================
# КОВАРИАЦИЯ И КОРРЕЛЯЦИЯ
# =============================================================================


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Популяционная ковариация E[(x - E[x]) * (y - E[y])].

    Построена на поэлементных subtract/multiply, поэтому наследует их
    политику длин: если y короче x, недостающие произведения равны 0,
    но учитываются в делителе len(x); хвост более длинного y игнорируется
    в произведениях, но участвует в E[y].

    Raises:
        StatisticsDomainViolation: если x или y пустой

    Examples:
        >>> covariance([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
        1.3333333333333333
    """
    deviations_x = subtract(x, expectation(x))
    deviations_y = subtract(y, expectation(y))
    return expectation(multiply(deviations_x, deviations_y))


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Коэффициент корреляции Пирсона: Cov[x, y] / (std(x) * std(y)).

    Raises:
        StatisticsDomainViolation: если x или y пустой, либо std(x) * std(y) == 0

    Examples:
        >>> round(correlation([1.0, 2.0, 3.0], [3.0, 2.0, 1.0]), 12)
        -1.0
    """
    denominator = standard_deviation(x) * standard_deviation(y)
    if denominator == 0:
        raise StatisticsDomainViolation(
            "correlation is undefined: zero standard deviation "
            f"(len(x)={len(x)}, len(y)={len(y)})"
        )
    return covariance(x, y) / denominator


def autocorrelation(x: Sequence[float]) -> float:
    """
    Автокорреляция без лага: correlation(x, x).

    Для любой неконстантной последовательности ≈ 1.0.

    Raises:
        StatisticsDomainViolation: для пустой или константной последовательности
    """
    return correlation(x, x)


# =============================================================================
# DESCRIPTIVE SUMMARY
# =============================================================================


class DescriptiveSummary(NamedTuple):
    """Сводные описательные статистики последовательности."""
    count: int  # Количество элементов
    mean: float  # E[x]
    variance: float  # Популяционная дисперсия
    standard_deviation: float  # sqrt(variance)
    mean_non_zero: float  # Среднее по ненулевым элементам (0.0 если нет)


def describe(values: Sequence[float]) -> DescriptiveSummary:
    """
    Вычисление сводных статистик одним вызовом.

    Args:
        values: Непустая последовательность

    Returns:
        DescriptiveSummary

    Raises:
        StatisticsDomainViolation: если values пустая

    Examples:
        >>> summary = describe([0.0, 2.0, 4.0])
        >>> summary.count
        3
        >>> summary.mean
        2.0
        >>> summary.mean_non_zero
        3.0
    """
    var = variance(values)
    return DescriptiveSummary(
        count=len(values),
        mean=average(values),
        variance=var,
        standard_deviation=math.sqrt(var),
        mean_non_zero=average_non_zero(values),
    )
