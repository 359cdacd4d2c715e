"""
Promotion — Element Types & Numeric Widening

Модуль определяет допустимые типы элементов FixedVector и правило
продвижения (promotion) типов при смешивании операндов:

- Тип элемента: numpy dtype вида int / uint / float / complex
- Builtin-типы Python отображаются в numpy defaults (int → int64,
  float → float64, complex → complex128)
- Тип скаляра определяется его собственным типом, а не значением
- Продвижение двух типов = numpy.result_type(dtype_a, dtype_b)
- Продвижение N типов = попарная свёртка слева направо

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Продвижение зависит только от типов, никогда от значений
2. int + float → float, меньший + больший → больший
3. bool, str, object, longdouble и non-native byte order не допускаются
4. Все операции детерминированы и не имеют побочных эффектов
"""

from functools import reduce
from typing import Any, Final

import numpy as np

# =============================================================================
# ДОПУСТИМЫЕ ВИДЫ ТИПОВ
# =============================================================================

# numpy dtype.kind: signed int, unsigned int, float, complex
NUMERIC_KINDS: Final[frozenset[str]] = frozenset("iufc")

# Допустимые типы элементов (только native byte order)
ELEMENT_DTYPE_NAMES: Final[frozenset[str]] = frozenset({
    "int8", "int16", "int32", "int64",
    "uint8", "uint16", "uint32", "uint64",
    "float16", "float32", "float64",
    "complex64", "complex128",
})

# Builtin-типы Python → numpy dtype (не зависит от платформы)
BUILTIN_DTYPES: Final[dict[type, np.dtype]] = {
    int: np.dtype(np.int64),
    float: np.dtype(np.float64),
    complex: np.dtype(np.complex128),
}


# =============================================================================
# ТИПЫ ЭЛЕМЕНТОВ
# =============================================================================


def as_element_dtype(dtype: Any) -> np.dtype:
    """
    Нормализация типа элемента к numpy dtype.

    Args:
        dtype: numpy dtype, numpy scalar type, builtin (int/float/complex)
            или имя типа ("int32", "float64")

    Returns:
        numpy dtype числового вида

    Raises:
        TypeError: если тип не является числовым типом элемента

    Examples:
        >>> as_element_dtype(int)
        dtype('int64')
        >>> as_element_dtype("float32")
        dtype('float32')
    """
    if dtype is None:
        raise TypeError("Element type must be given explicitly, got None")
    if isinstance(dtype, type) and issubclass(dtype, (bool, np.bool_)):
        raise TypeError("bool is not a numeric element type")
    if isinstance(dtype, type) and dtype in BUILTIN_DTYPES:
        return BUILTIN_DTYPES[dtype]

    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise TypeError(f"Unsupported element type: {dtype!r}") from e

    if resolved.kind not in NUMERIC_KINDS:
        raise TypeError(f"Unsupported element type: {resolved} (kind '{resolved.kind}')")
    if resolved.name not in ELEMENT_DTYPE_NAMES or not resolved.isnative:
        raise TypeError(f"Unsupported element type: {resolved.str} (not a fixed-width native type)")
    return resolved


def is_numeric_scalar(value: Any) -> bool:
    """Проверка, что значение: числовой скаляр (Python number или numpy scalar).

    numpy scalar допускается только допустимого типа элемента или bool.
    """
    if isinstance(value, np.generic):
        return value.dtype.kind == "b" or value.dtype.name in ELEMENT_DTYPE_NAMES
    return isinstance(value, (int, float, complex))


def scalar_dtype(value: Any) -> np.dtype:
    """
    Тип скаляра по его собственному типу.

    numpy scalar сохраняет свой dtype; Python int/float/complex
    отображаются в int64/float64/complex128.

    Raises:
        TypeError: если значение не числовой скаляр
    """
    if not is_numeric_scalar(value):
        raise TypeError(f"Expected a numeric scalar, got {type(value).__name__}")

    if isinstance(value, np.generic):
        return value.dtype
    if isinstance(value, bool):
        return np.dtype(np.bool_)
    for builtin in (int, float, complex):
        if isinstance(value, builtin):
            return BUILTIN_DTYPES[builtin]
    raise TypeError(f"Expected a numeric scalar, got {type(value).__name__}")


# =============================================================================
# ПРОДВИЖЕНИЕ ТИПОВ
# =============================================================================


def promote(a: Any, b: Any) -> np.dtype:
    """
    Продвинутый тип результата для пары типов.

    Args:
        a: первый тип (всё, что принимает numpy.dtype)
        b: второй тип

    Returns:
        numpy.result_type(a, b) для dtype (не для значений)

    Examples:
        >>> promote(np.int32, np.float32)
        dtype('float64')
        >>> promote(np.int8, np.int16)
        dtype('int16')
    """
    return np.result_type(_as_dtype(a), _as_dtype(b))


def _as_dtype(dtype: Any) -> np.dtype:
    if isinstance(dtype, type) and dtype in BUILTIN_DTYPES:
        return BUILTIN_DTYPES[dtype]
    return np.dtype(dtype)


def promote_many(*dtypes: Any) -> np.dtype:
    """
    Продвинутый тип для нескольких типов: попарная свёртка слева направо.

    Raises:
        ValueError: если не передано ни одного типа
    """
    if not dtypes:
        raise ValueError("promote_many requires at least one type")
    return reduce(promote, dtypes[1:], _as_dtype(dtypes[0]))


def promote_scalars(*values: Any) -> np.dtype:
    """Продвинутый тип для набора скаляров (по их типам)."""
    if not values:
        raise ValueError("promote_scalars requires at least one value")
    return promote_many(*(scalar_dtype(v) for v in values))
