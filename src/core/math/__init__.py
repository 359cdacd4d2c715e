"""
Core math modules для fixvec

Правила продвижения типов и проверки, выполняемые до вычислений.
"""

# Promotion
from src.core.math.promotion import (
    BUILTIN_DTYPES,
    ELEMENT_DTYPE_NAMES,
    NUMERIC_KINDS,
    as_element_dtype,
    is_numeric_scalar,
    promote,
    promote_many,
    promote_scalars,
    scalar_dtype,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    INTEGER_KINDS,
    # Exceptions
    DimensionMismatchError,
    FixedVectorError,
    IndexOutOfRangeError,
    SliceBoundsError,
    # Indices
    as_index,
    normalize_index,
    resolve_index,
    resolve_slice_bounds,
    # Dimensions
    require_same_dimension,
    validate_dimension,
    # Division
    native_divide,
    truncating_divide,
)

__all__ = [
    # Promotion
    "BUILTIN_DTYPES",
    "ELEMENT_DTYPE_NAMES",
    "NUMERIC_KINDS",
    "as_element_dtype",
    "is_numeric_scalar",
    "promote",
    "promote_many",
    "promote_scalars",
    "scalar_dtype",
    # Numerical Safeguards: Exceptions
    "FixedVectorError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "SliceBoundsError",
    # Numerical Safeguards: Indices
    "as_index",
    "normalize_index",
    "resolve_index",
    "resolve_slice_bounds",
    # Numerical Safeguards: Dimensions
    "validate_dimension",
    "require_same_dimension",
    # Numerical Safeguards: Division
    "INTEGER_KINDS",
    "native_divide",
    "truncating_divide",
]
