"""
Vector Ops — Free Operations over FixedVector

Композиции поверх публичного контракта FixedVector:
- weighted_sum: alpha * v1 + beta * v2
- concat: вариадическая конкатенация векторов разных размерностей и типов
- make_vector: вектор явного типа из позиционных аргументов
- build_vector: вектор из позиционных аргументов с выведенным типом

Тип результата всегда вычисляется попарной свёрткой продвижения
слева направо до каких-либо приведений значений.
"""

import logging
from typing import Any

from src.core.domain.fixed_vector import FixedVector
from src.core.math.numerical_safeguards import require_same_dimension
from src.core.math.promotion import promote, promote_many, promote_scalars, scalar_dtype

logger = logging.getLogger(__name__)


# =============================================================================
# WEIGHTED SUM
# =============================================================================


def weighted_sum(v1: FixedVector, alpha: Any, v2: FixedVector, beta: Any) -> FixedVector:
    """
    Взвешенная сумма двух векторов одной размерности.

    result[i] = alpha * v1[i] + beta * v2[i]

    Тип результата: promote(promote(T1, type(alpha)), promote(T2, type(beta))).

    Args:
        v1: первый вектор
        alpha: вес первого вектора (скаляр)
        v2: второй вектор (той же размерности)
        beta: вес второго вектора (скаляр)

    Returns:
        Новый вектор размерности N

    Raises:
        DimensionMismatchError: если размерности v1 и v2 различны
        TypeError: если alpha или beta не числовые скаляры

    Examples:
        >>> a = make_vector(int, 1, 2)
        >>> b = make_vector(int, 3, 4)
        >>> str(weighted_sum(a, 2, b, 0.5))
        '[3.5, 5.5]'
    """
    require_same_dimension(v1.dimension, v2.dimension, "weighted_sum")

    result_dtype = promote(
        promote(v1.dtype, scalar_dtype(alpha)),
        promote(v2.dtype, scalar_dtype(beta)),
    )
    return v1.multiply(alpha).add(v2.multiply(beta)).convert(result_dtype)


# =============================================================================
# CONCAT
# =============================================================================


def concat(*vectors: FixedVector) -> FixedVector:
    """
    Конкатенация векторов слева направо.

    Размерность результата: сумма размерностей, тип: продвинутый тип
    всех входных dtype (попарно слева направо).

    Raises:
        ValueError: если не передано ни одного вектора
        TypeError: если аргумент не FixedVector

    Examples:
        >>> str(concat(make_vector(int, 1, 2), make_vector(float, 3.5, 4.5)))
        '[1.0, 2.0, 3.5, 4.5]'
    """
    if not vectors:
        raise ValueError("concat requires at least one vector")
    for position, vector in enumerate(vectors):
        if not isinstance(vector, FixedVector):
            raise TypeError(
                f"concat argument {position} must be a FixedVector, got {type(vector).__name__}"
            )

    result_dtype = promote_many(*(v.dtype for v in vectors))
    if any(v.dtype != result_dtype for v in vectors):
        logger.debug("concat promotes %s to %s",
                     [str(v.dtype) for v in vectors], result_dtype)

    total = sum(v.dimension for v in vectors)
    result = FixedVector.default(result_dtype, total)
    position = 0
    for vector in vectors:
        for item in vector:
            result[position] = item
            position += 1
    return result


# =============================================================================
# VARIADIC CONSTRUCTION
# =============================================================================


def make_vector(dtype: Any, *args: Any) -> FixedVector:
    """
    Вектор типа dtype размерности len(args).

    Каждый аргумент явно приводится к dtype в порядке следования, так же
    как в FixedVector.convert: целые вне диапазона dtype заворачиваются
    (make_vector(np.int8, 200) даёт [-56]), float → int усекается к нулю.

    Examples:
        >>> str(make_vector(int, 1.9, 2, -3.7))
        '[1, 2, -3]'
    """
    return FixedVector.from_values(args, dtype)


def build_vector(*args: Any) -> FixedVector:
    """
    Вектор с типом, выведенным из типов аргументов.

    Тип элемента: продвинутый тип всех аргументов (попарно слева направо).

    Raises:
        ValueError: если аргументов нет (тип не может быть выведен)
        TypeError: если аргумент не числовой скаляр или выведен bool

    Examples:
        >>> v = build_vector(1, 2.5, 3)
        >>> v.dtype
        dtype('float64')
    """
    if not args:
        raise ValueError("build_vector requires at least one value to infer the element type")
    return FixedVector.from_values(args, promote_scalars(*args))
