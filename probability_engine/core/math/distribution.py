"""
Distribution — построение PMF/CDF и условная фильтрация

Модуль обеспечивает:
- Нормализацию неотрицательной последовательности в PMF
- Построение CDF как prefix-sum от PMF
- Поиск бина по CDF (обратная CDF со ступенчатой левой непрерывностью)
- Индикаторные маски и условную фильтрацию по параллельной последовательности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sum(x) <= 0 → to_pmf возвращает копию x без нормализации (не ошибка)
2. to_cdf неубывающая для неотрицательного x, последний элемент ≈ 1.0
3. get_cdf_bin всегда в [0, len(x) - 1] для непустого x
4. get_cdf_value читает ИСХОДНОЕ x (не CDF) по найденному бину
5. given* сохраняет длину: отфильтрованные позиции равны 0.0, а не удаляются
"""

import logging
from collections.abc import Callable, Sequence

from probability_engine.core.math.elementwise import divide
from probability_engine.core.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    validate_non_empty,
    validate_tolerance,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[float], bool]


# =============================================================================
# PMF / CDF
# =============================================================================


def to_pmf(x: Sequence[float]) -> list[float]:
    """
    Нормализация последовательности в PMF.

    Args:
        x: Последовательность весов

    Returns:
        x / sum(x) если sum(x) > 0, иначе копия x без изменений

    Examples:
        >>> to_pmf([1.0, 3.0])
        [0.25, 0.75]
        >>> to_pmf([0.0, 0.0])
        [0.0, 0.0]
    """
    total = sum(x)
    if total > 0:
        return divide(x, total)

    logger.debug("to_pmf: non-positive sum %r, returning input un-normalized", total)
    return list(x)


def to_cdf(x: Sequence[float]) -> list[float]:
    """
    CDF как running prefix-sum от to_pmf(x).

    Examples:
        >>> to_cdf([1.0, 1.0, 2.0])
        [0.25, 0.5, 1.0]
    """
    y = to_pmf(x)
    for k in range(len(y) - 1):
        y[k + 1] += y[k]
    return y


def get_cdf_bin(x: Sequence[float], observation: float) -> int:
    """
    Индекс первого бина, чья кумулятивная вероятность строго больше observation.

    Если такого бина нет (observation >= всех значений CDF, включая
    финальное ≈ 1.0), возвращается последний индекс.

    Args:
        x: Непустая последовательность весов (нормализуется внутри)
        observation: Наблюдение, обычно в [0, 1)

    Returns:
        Индекс в [0, len(x) - 1]

    Raises:
        ValueError: если x пустая

    Examples:
        >>> get_cdf_bin([1.0, 1.0, 2.0], 0.3)
        1
        >>> get_cdf_bin([1.0, 1.0, 2.0], 1.0)
        2
    """
    validate_non_empty(x, "x")

    cdf = to_cdf(x)
    for k, cumulative in enumerate(cdf):
        if observation < cumulative:
            return k
    return len(x) - 1


def get_cdf_value(x: Sequence[float], observation: float) -> float:
    """
    Исходное (ненормализованное) значение x в бине get_cdf_bin(x, observation).

    ВАЖНО: бин ищется по CDF, но значение читается из x, а не из CDF.

    Examples:
        >>> get_cdf_value([10.0, 30.0], 0.5)
        30.0
    """
    return x[get_cdf_bin(x, observation)]


def is_pmf(x: Sequence[float], tol: float = EPS_PROBABILITY_SUM) -> bool:
    """
    Проверка, что x — корректная PMF: все элементы >= 0 и |sum(x) - 1| <= tol.

    Пустая последовательность PMF не является.

    Raises:
        ValueError: если tol <= 0
    """
    validate_tolerance(tol)

    if len(x) == 0:
        return False
    if any(value < 0 for value in x):
        return False
    return abs(sum(x) - 1.0) <= tol


def is_cdf(x: Sequence[float], tol: float = EPS_PROBABILITY_SUM) -> bool:
    """
    Проверка, что x — корректная CDF.

    Условия: x[0] >= 0, x неубывающая, |x[-1] - 1| <= tol.

    Raises:
        ValueError: если tol <= 0
    """
    validate_tolerance(tol)

    if len(x) == 0:
        return False
    if x[0] < 0:
        return False
    if any(x[k + 1] < x[k] for k in range(len(x) - 1)):
        return False
    return abs(x[-1] - 1.0) <= tol


# =============================================================================
# МАСКИ И УСЛОВНАЯ ФИЛЬТРАЦИЯ
# =============================================================================


def flatten(x: Sequence[float], predicate: Predicate) -> list[float]:
    """
    Индикаторная маска: 1.0 где predicate(x[i]), иначе 0.0.

    Examples:
        >>> flatten([0.5, 2.0, 3.0], lambda v: v > 1.0)
        [0.0, 1.0, 1.0]
    """
    return [1.0 if predicate(value) else 0.0 for value in x]


def _validate_condition(x: Sequence[float], condition: Sequence[float]) -> None:
    if len(condition) < len(x):
        raise ValueError(
            f"condition must cover every index of x: "
            f"len(condition)={len(condition)} < len(x)={len(x)}"
        )


def given(
    x: Sequence[float],
    condition: Sequence[float],
    predicate: Predicate,
) -> list[float]:
    """
    Фильтрация x по параллельной последовательности condition.

    y[i] = x[i] если predicate(condition[i]), иначе 0.0. Длина сохраняется.

    Args:
        x: Фильтруемая последовательность
        condition: Параллельная последовательность условий (len >= len(x))
        predicate: Предикат над элементом condition

    Returns:
        Новый список длины len(x)

    Raises:
        ValueError: если condition короче x

    Examples:
        >>> given([1.0, 2.0, 3.0], [0.0, 1.0, 1.0], lambda c: c > 0)
        [0.0, 2.0, 3.0]
    """
    values, _ = given_with_condition(x, condition, predicate)
    return values


def given_with_condition(
    x: Sequence[float],
    condition: Sequence[float],
    predicate: Predicate,
) -> tuple[list[float], list[float]]:
    """
    Как given, но дополнительно возвращает отфильтрованные значения condition.

    Returns:
        (values, given_condition):
            - values: x[i] в сохранённых позициях, 0.0 в остальных
            - given_condition: condition[i] в сохранённых позициях, 0.0 в остальных

    Raises:
        ValueError: если condition короче x

    Examples:
        >>> given_with_condition([1.0, 2.0], [5.0, -5.0], lambda c: c > 0)
        ([1.0, 0.0], [5.0, 0.0])
    """
    _validate_condition(x, condition)

    values = [0.0] * len(x)
    given_condition = [0.0] * len(x)
    for i in range(len(x)):
        if predicate(condition[i]):
            values[i] = x[i]
            given_condition[i] = condition[i]

    return values, given_condition


def given_pmf(
    x: Sequence[float],
    condition: Sequence[float],
    predicate: Predicate,
) -> list[float]:
    """
    Условная PMF: to_pmf(given(x, condition, predicate)).

    Examples:
        >>> given_pmf([1.0, 2.0, 3.0], [0.0, 1.0, 1.0], lambda c: c > 0)
        [0.0, 0.4, 0.6]
    """
    return to_pmf(given(x, condition, predicate))


def given_pmf_with_condition(
    x: Sequence[float],
    condition: Sequence[float],
    predicate: Predicate,
) -> tuple[list[float], list[float]]:
    """
    Условная PMF вместе с отфильтрованными значениями condition.

    Нормализуется только первая компонента; given_condition возвращается как есть.
    """
    values, given_condition = given_with_condition(x, condition, predicate)
    return to_pmf(values), given_condition
