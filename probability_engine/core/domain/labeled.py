"""
LabeledValue — пара (label, value) и статистики над помеченными последовательностями

Immutable Pydantic модель для пары с непрозрачной меткой. Метка не участвует
в арифметике и никогда не сравнивается: повторяющиеся метки считаются отдельно.

Статистики принимают любой iterable, элементы которого — LabeledValue
либо кортежи (label, value), в любой смеси.

ИЗВЕСТНАЯ ОСОБЕННОСТЬ:
labeled_max_value стартует с 0.0 и принимает значение только если оно строго
больше текущего максимума. Для коллекции из одних отрицательных значений
результат 0.0, а не истинный максимум. Поведение сохраняется (см. DESIGN.md).
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

from probability_engine.core.math.descriptive import (
    StatisticsDomainViolation,
    average,
    standard_deviation,
    variance,
)


# =============================================================================
# MODELS
# =============================================================================


class LabeledValue(BaseModel):
    """
    Пара (label, value).

    label — произвольный объект без арифметического смысла,
    value — вещественное число, участвующее в статистиках.
    """

    label: Any = Field(..., description="Непрозрачная метка")
    value: float = Field(..., description="Числовое значение")

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[Any, float]:
        """Представление в виде кортежа (label, value)."""
        return (self.label, self.value)


LabeledItem = LabeledValue | tuple[Any, float]


def _value_of(item: LabeledItem) -> float:
    if isinstance(item, LabeledValue):
        return item.value
    _, value = item
    return value


def _values(items: Iterable[LabeledItem]) -> list[float]:
    return [_value_of(item) for item in items]


# =============================================================================
# СТАТИСТИКИ
# =============================================================================


def labeled_sum(items: Iterable[LabeledItem]) -> float:
    """
    Сумма значений. Пустая коллекция → 0.0.

    Examples:
        >>> labeled_sum([("a", 1.5), ("b", 2.5)])
        4.0
        >>> labeled_sum([])
        0.0
    """
    total = 0.0
    for item in items:
        total += _value_of(item)
    return total


def labeled_average(items: Iterable[LabeledItem]) -> float:
    """
    Среднее значений.

    Raises:
        StatisticsDomainViolation: если коллекция пустая
    """
    values = _values(items)
    if not values:
        raise StatisticsDomainViolation("labeled average is undefined for an empty collection")
    return average(values)


def labeled_variance(items: Iterable[LabeledItem]) -> float:
    """
    Популяционная дисперсия значений (делитель = count).

    Raises:
        StatisticsDomainViolation: если коллекция пустая
    """
    values = _values(items)
    if not values:
        raise StatisticsDomainViolation("labeled variance is undefined for an empty collection")
    return variance(values)


def labeled_standard_deviation(items: Iterable[LabeledItem]) -> float:
    """
    Стандартное отклонение значений.

    Raises:
        StatisticsDomainViolation: если коллекция пустая
    """
    values = _values(items)
    if not values:
        raise StatisticsDomainViolation(
            "labeled standard deviation is undefined for an empty collection"
        )
    return standard_deviation(values)


def labeled_max_value(items: Iterable[LabeledItem]) -> float:
    """
    Максимум значений с нулевым полом.

    Текущий максимум стартует с 0.0, поэтому для пустой коллекции или
    коллекции только из отрицательных значений результат 0.0.

    Examples:
        >>> labeled_max_value([("a", 1.0), ("b", 7.0), ("c", 3.0)])
        7.0
        >>> labeled_max_value([("a", -1.0), ("b", -2.0)])
        0.0
    """
    max_value = 0.0
    for item in items:
        value = _value_of(item)
        if value > max_value:
            max_value = value
    return max_value
