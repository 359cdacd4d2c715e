"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных векторов.
"""

from .validators import (
    ContractValidator,
    FixedVectorValidator,
    SchemaLoader,
    validate_fixed_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FixedVectorValidator",
    # Functions
    "validate_fixed_vector",
]
