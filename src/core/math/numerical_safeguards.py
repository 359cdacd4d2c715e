"""
Numerical Safeguards — Indices, Dimensions & Native Division

Модуль содержит проверки, которые для вектора фиксированной размерности
должны срабатывать до любых вычислений:

- Разрешение знаковых индексов (отрицательные считаются с конца)
- Проверка границ slice (обе границы включительно)
- Проверка совпадения размерностей операндов
- Деление по родной семантике продвинутого типа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. effective = index if index >= 0 else N + index; вне [0, N) → IndexOutOfRangeError
2. Несовпадение размерностей → DimensionMismatchError до вычислений
3. Целочисленное деление усекается к нулю; делитель 0 → ZeroDivisionError
4. Float/complex деление следует IEEE 754: x/0 → inf/nan без исключения
5. Ни одна ошибка не подавляется: всё пробрасывается вызывающему
"""

import operator
from typing import Any, Final

import numpy as np

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Виды dtype с целочисленным делением (signed / unsigned)
INTEGER_KINDS: Final[frozenset[str]] = frozenset("iu")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FixedVectorError(Exception):
    """Базовая ошибка для всех нарушений контракта FixedVector."""


class IndexOutOfRangeError(FixedVectorError, IndexError):
    """
    Индекс вне диапазона после разрешения отрицательных индексов.

    Хранит исходный (запрошенный) индекс и размерность вектора.
    Восстановимая ошибка: вызывающий может повторить с валидным индексом.
    """

    def __init__(self, index: int, dimension: int):
        self.index = index
        self.dimension = dimension
        super().__init__(f"Index {index} out of range for FixedVector<{dimension}>")


class DimensionMismatchError(FixedVectorError, TypeError):
    """
    Размерности операндов не совпадают.

    Для вектора фиксированной размерности это ошибка типа, а не значения:
    операция отклоняется до каких-либо вычислений.
    """

    def __init__(self, expected: int, actual: int, operation: str = "operation"):
        self.expected = expected
        self.actual = actual
        self.operation = operation
        super().__init__(
            f"{operation} requires dimension {expected}, got {actual}"
        )


class SliceBoundsError(FixedVectorError, IndexError):
    """Граница slice вне [0, N) после разрешения отрицательных индексов."""

    def __init__(self, start: int, end: int, dimension: int):
        self.start = start
        self.end = end
        self.dimension = dimension
        super().__init__(
            f"Slice bounds ({start}, {end}) out of range for FixedVector<{dimension}>"
        )


# =============================================================================
# ИНДЕКСЫ
# =============================================================================


def as_index(index: Any) -> int:
    """
    Приведение индекса к int.

    Допускаются int и numpy integer; bool и прочие типы отклоняются.

    Raises:
        TypeError: если индекс не целое число
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError("FixedVector indices must be integers, not bool")
    try:
        return operator.index(index)
    except TypeError as e:
        raise TypeError(
            f"FixedVector indices must be integers, not {type(index).__name__}"
        ) from e


def normalize_index(index: int, dimension: int) -> int | None:
    """
    Разрешение знакового индекса без исключения.

    Returns:
        Эффективный индекс в [0, dimension) или None, если он вне диапазона

    Examples:
        >>> normalize_index(-1, 4)
        3
        >>> normalize_index(4, 4) is None
        True
    """
    effective = index if index >= 0 else dimension + index
    if effective < 0 or effective >= dimension:
        return None
    return effective


def resolve_index(index: Any, dimension: int) -> int:
    """
    Разрешение знакового индекса для get/set.

    Args:
        index: запрошенный индекс (отрицательный считается с конца)
        dimension: размерность вектора N

    Returns:
        Эффективный индекс в [0, N)

    Raises:
        TypeError: если индекс не целое число
        IndexOutOfRangeError: если эффективный индекс вне [0, N)

    Examples:
        >>> resolve_index(0, 3)
        0
        >>> resolve_index(-1, 3)
        2
        >>> resolve_index(3, 3)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        IndexOutOfRangeError: Index 3 out of range for FixedVector<3>
    """
    requested = as_index(index)
    effective = normalize_index(requested, dimension)
    if effective is None:
        raise IndexOutOfRangeError(requested, dimension)
    return effective


def resolve_slice_bounds(start: Any, end: Any, dimension: int) -> tuple[int, int]:
    """
    Разрешение границ slice (обе включительно).

    Обе границы разрешаются по тому же правилу, что и индексы, и обязаны
    лежать в [0, N). Порядок start > end допустим: такой slice развёрнут.

    Returns:
        (start, end): эффективные границы

    Raises:
        TypeError: если граница не целое число
        SliceBoundsError: если хотя бы одна граница вне [0, N)
    """
    requested_start = as_index(start)
    requested_end = as_index(end)

    effective_start = normalize_index(requested_start, dimension)
    effective_end = normalize_index(requested_end, dimension)
    if effective_start is None or effective_end is None:
        raise SliceBoundsError(requested_start, requested_end, dimension)

    return effective_start, effective_end


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================


def validate_dimension(dimension: Any, name: str = "dimension") -> int:
    """
    Валидация размерности: неотрицательное целое.

    Raises:
        TypeError: если размерность не целое число
        ValueError: если размерность отрицательная
    """
    if isinstance(dimension, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, not bool")
    try:
        value = operator.index(dimension)
    except TypeError as e:
        raise TypeError(f"{name} must be an integer, got {type(dimension).__name__}") from e

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def require_same_dimension(expected: int, actual: int, operation: str = "operation") -> None:
    """
    Проверка совпадения размерностей.

    Raises:
        DimensionMismatchError: если expected != actual
    """
    if expected != actual:
        raise DimensionMismatchError(expected, actual, operation)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def truncating_divide(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Целочисленное деление с усечением к нулю.

    numpy floor_divide округляет к -inf; результат корректируется на +1
    там, где остаток ненулевой и знаки операндов различны.

    Raises:
        ZeroDivisionError: если хотя бы один делитель равен 0

    Examples:
        >>> truncating_divide(np.array([7, -7]), np.array([2, 2]))
        array([ 3, -3])
    """
    if np.any(rhs == 0):
        raise ZeroDivisionError("integer division by zero")

    quotient = np.floor_divide(lhs, rhs)
    remainder = lhs - quotient * rhs
    needs_adjust = (remainder != 0) & ((lhs < 0) != (rhs < 0))
    return quotient + needs_adjust.astype(quotient.dtype)


def native_divide(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Деление по родной семантике продвинутого типа.

    Оба операнда уже приведены к одному (продвинутому) dtype.

    Args:
        lhs: делимое
        rhs: делитель (массив той же формы или 0-d)

    Returns:
        Частное того же dtype, что и операнды

    Raises:
        ZeroDivisionError: целочисленный dtype и делитель 0

    Notes:
        - int / int: усечение к нулю (7 / 2 → 3, -7 / 2 → -3)
        - float / 0.0: inf, -inf или nan (IEEE 754), без исключения
    """
    if lhs.dtype.kind in INTEGER_KINDS:
        return truncating_divide(lhs, rhs)

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(lhs, rhs)
