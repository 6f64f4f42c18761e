"""
Elementwise — поэлементная арифметика над последовательностями

Два семейства операций, результат всегда новой длины len(x):
- sequence ⊕ sequence: выравнивание по индексу
- sequence ⊕ scalar: скаляр применяется к каждому элементу

ПОЛИТИКА НЕСОВПАДЕНИЯ ДЛИН (i >= len(other)):
    add / subtract / divide → копируется x[i]
    multiply                → записывается 0.0

ПОЛИТИКА ДЕЛЕНИЯ НА НОЛЬ:
    divide(seq, seq)    → 0.0 в позиции с нулевым делителем
    divide(seq, scalar) → при scalar == 0 вся последовательность нулевая

Асимметрия политик сохраняется намеренно: downstream-код полагается
на конкретные fallback-значения (см. DESIGN.md).
"""

import logging
import numbers
from collections.abc import Sequence

from probability_engine.core.math.numerical_safeguards import divide_or_zero

logger = logging.getLogger(__name__)

Operand = float | Sequence[float]


def _is_scalar(other: Operand) -> bool:
    return isinstance(other, numbers.Real)


# =============================================================================
# SEQUENCE ⊕ SEQUENCE
# =============================================================================


def _add_sequence(x: Sequence[float], y: Sequence[float]) -> list[float]:
    return [x[i] + y[i] if i < len(y) else x[i] for i in range(len(x))]


def _subtract_sequence(x: Sequence[float], y: Sequence[float]) -> list[float]:
    return [x[i] - y[i] if i < len(y) else x[i] for i in range(len(x))]


def _multiply_sequence(x: Sequence[float], y: Sequence[float]) -> list[float]:
    return [x[i] * y[i] if i < len(y) else 0.0 for i in range(len(x))]


def _divide_sequence(x: Sequence[float], y: Sequence[float]) -> list[float]:
    return [divide_or_zero(x[i], y[i]) if i < len(y) else x[i] for i in range(len(x))]


# =============================================================================
# SEQUENCE ⊕ SCALAR
# =============================================================================


def _divide_scalar(x: Sequence[float], scalar: float) -> list[float]:
    if scalar == 0:
        # Short-circuit на всю операцию, а не поэлементно
        logger.debug("divide by zero scalar, returning %d zeros", len(x))
        return [0.0] * len(x)
    return [value / scalar for value in x]


# =============================================================================
# PUBLIC API
# =============================================================================


def add(x: Sequence[float], other: Operand) -> list[float]:
    """
    Поэлементное сложение.

    Args:
        x: Первый операнд (определяет длину результата)
        other: Скаляр или последовательность

    Returns:
        Новый список длины len(x); за пределами len(other) копируется x[i]

    Examples:
        >>> add([1.0, 2.0, 3.0], [4.0, 5.0])
        [5.0, 7.0, 3.0]
        >>> add([1.0, 2.0], 0.5)
        [1.5, 2.5]
    """
    if _is_scalar(other):
        return [value + other for value in x]
    return _add_sequence(x, other)


def subtract(x: Sequence[float], other: Operand) -> list[float]:
    """
    Поэлементное вычитание.

    За пределами len(other) копируется x[i] (как в add).

    Examples:
        >>> subtract([5.0, 7.0, 3.0], [4.0, 5.0])
        [1.0, 2.0, 3.0]
        >>> subtract([1.0, 2.0], 1.0)
        [0.0, 1.0]
    """
    if _is_scalar(other):
        return [value - other for value in x]
    return _subtract_sequence(x, other)


def multiply(x: Sequence[float], other: Operand) -> list[float]:
    """
    Поэлементное умножение.

    ВАЖНО: за пределами len(other) записывается 0.0, а не x[i].

    Examples:
        >>> multiply([1.0, 2.0, 3.0], [4.0, 5.0])
        [4.0, 10.0, 0.0]
        >>> multiply([1.0, 2.0], 3.0)
        [3.0, 6.0]
    """
    if _is_scalar(other):
        return [value * other for value in x]
    return _multiply_sequence(x, other)


def divide(x: Sequence[float], other: Operand) -> list[float]:
    """
    Поэлементное деление.

    Для последовательности: нулевой делитель даёт 0.0 в этой позиции,
    за пределами len(other) копируется x[i].
    Для скаляра: scalar == 0 даёт последовательность нулей целиком.

    Args:
        x: Делимое
        other: Скаляр или последовательность делителей

    Returns:
        Новый список длины len(x)

    Examples:
        >>> divide([10.0, 20.0], [2.0, 0.0])
        [5.0, 0.0]
        >>> divide([1.0, 2.0, 3.0], 0.0)
        [0.0, 0.0, 0.0]
        >>> divide([1.0, 2.0, 3.0], [1.0])
        [1.0, 2.0, 3.0]
    """
    if _is_scalar(other):
        return _divide_scalar(x, other)
    return _divide_sequence(x, other)
