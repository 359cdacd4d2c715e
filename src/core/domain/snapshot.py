"""
VectorSnapshot — Serialised Form of FixedVector

Immutable Pydantic модель, представляющая снапшот вектора для передачи
и хранения. Совместима с JSON Schema контрактом (contracts/schema/fixed_vector.json).

Формат:
    {"dtype": "int64", "dimension": 3, "values": [1, 2, 3]}

Для complex dtype каждое значение: пара [real, imag].
inf и nan сериализуются в JSON как Infinity, -Infinity и NaN.
Целочисленные значения обязаны быть целыми и лежать в диапазоне dtype.
"""

from typing import Union

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.fixed_vector import FixedVector
from src.core.math.numerical_safeguards import INTEGER_KINDS, DimensionMismatchError
from src.core.math.promotion import as_element_dtype

# Значение элемента: число или пара [real, imag] для complex
SnapshotValue = Union[int, float, list[float]]


class VectorSnapshot(BaseModel):
    """
    Снапшот FixedVector.

    Инварианты:
    - dtype: имя числового numpy dtype
    - len(values) == dimension
    - complex dtype ↔ значения в виде пар [real, imag]
    - integer dtype: значения целые и в пределах numpy.iinfo
    """

    dtype: str = Field(..., min_length=1, description="Имя numpy dtype элементов")
    dimension: int = Field(..., ge=0, description="Размерность вектора N")
    values: list[SnapshotValue] = Field(default_factory=list, description="Элементы по порядку")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("dtype")
    @classmethod
    def validate_dtype(cls, v: str) -> str:
        """Имя dtype нормализуется (например, 'float' → 'float64')."""
        try:
            return str(as_element_dtype(v))
        except TypeError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_values(self) -> "VectorSnapshot":
        """Проверка длины, формы и диапазона значений относительно dtype."""
        if len(self.values) != self.dimension:
            raise ValueError(
                f"values length {len(self.values)} does not match dimension {self.dimension}"
            )

        element_dtype = as_element_dtype(self.dtype)
        is_complex = element_dtype.kind == "c"
        bounds = np.iinfo(element_dtype) if element_dtype.kind in INTEGER_KINDS else None
        for i, value in enumerate(self.values):
            if is_complex and not (isinstance(value, list) and len(value) == 2):
                raise ValueError(f"values[{i}] must be a [real, imag] pair for {self.dtype}")
            if not is_complex and isinstance(value, list):
                raise ValueError(f"values[{i}] must be a number for {self.dtype}")
            if bounds is None:
                continue
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"values[{i}] must be an integer for {self.dtype}, got {value}")
            if not bounds.min <= int(value) <= bounds.max:
                raise ValueError(
                    f"values[{i}] = {int(value)} out of range [{bounds.min}, {bounds.max}] for {self.dtype}"
                )
        return self

    @classmethod
    def from_vector(cls, vector: FixedVector) -> "VectorSnapshot":
        """Снапшот вектора (значения: обычные числа Python)."""
        values: list[SnapshotValue] = []
        for item in vector.to_list():
            if isinstance(item, complex):
                values.append([item.real, item.imag])
            else:
                values.append(item)
        return cls(dtype=str(vector.dtype), dimension=vector.dimension, values=values)

    def to_vector(self, dimension: int | None = None) -> FixedVector:
        """
        Восстановление FixedVector из снапшота.

        Args:
            dimension: ожидаемая размерность (если задана, обязана совпадать)

        Raises:
            DimensionMismatchError: если dimension задана и != self.dimension
        """
        if dimension is not None and dimension != self.dimension:
            raise DimensionMismatchError(dimension, self.dimension, "to_vector")

        items = [
            complex(value[0], value[1]) if isinstance(value, list) else value
            for value in self.values
        ]
        return FixedVector.from_values(items, self.dtype)
