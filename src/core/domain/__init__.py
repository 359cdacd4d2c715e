"""
Domain models and value objects.

Contains the FixedVector value type, its free operations and its
serialised snapshot.
"""

from src.core.domain.fixed_vector import FixedVector
from src.core.domain.snapshot import VectorSnapshot
from src.core.domain.vector_ops import (
    build_vector,
    concat,
    make_vector,
    weighted_sum,
)
from src.core.math.numerical_safeguards import (
    DimensionMismatchError,
    FixedVectorError,
    IndexOutOfRangeError,
    SliceBoundsError,
)

__all__ = [
    # FixedVector
    "FixedVector",
    # Free operations
    "weighted_sum",
    "concat",
    "make_vector",
    "build_vector",
    # Snapshot
    "VectorSnapshot",
    # Errors
    "FixedVectorError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "SliceBoundsError",
]
