"""
FixedVector — Numeric Vector of Fixed Dimension

Значимый тип (value type): упорядоченная последовательность ровно N
элементов одного числового dtype. N и dtype фиксируются при создании и
не меняются за время жизни экземпляра.

Возможности:
- Создание: default (нули), filled (одно значение), from_vector (приведение типа)
- Доступ: get/set и v[i] со знаковыми индексами (-1 = последний элемент)
- Арифметика: add / subtract / multiply / divide (и + - * /) со скаляром
  или вектором той же размерности, с продвижением типа результата
- Структура: resize, convert, slice (включительно, с разворотом при start > end)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(v) == v.dimension == N на всё время жизни
2. Каждый экземпляр владеет своими данными (копия при каждом создании)
3. Все операции, кроме set, возвращают новый вектор
4. Проверки размерности и границ выполняются до вычислений
"""

import logging
from typing import Any, Callable, Iterator

import numpy as np

from src.core.math.numerical_safeguards import (
    native_divide,
    require_same_dimension,
    resolve_index,
    resolve_slice_bounds,
    validate_dimension,
)
from src.core.math.promotion import as_element_dtype, is_numeric_scalar, promote, scalar_dtype

logger = logging.getLogger(__name__)

ArrayOp = Callable[[np.ndarray, np.ndarray], np.ndarray]


class FixedVector:
    """
    Вектор фиксированной размерности N с элементами числового dtype.

    Конструктор создаёт вектор, заполненный значением fill (по умолчанию 0).
    Для явного намерения используйте FixedVector.default / FixedVector.filled.

    Examples:
        >>> v = FixedVector.default(int, 3)
        >>> v[0] = 5
        >>> str(v)
        '[5, 0, 0]'
        >>> str(v + 0.5)
        '[5.5, 0.5, 0.5]'
    """

    __slots__ = ("_data",)

    # numpy отдаёт приоритет нашим reflected-операторам
    __array_ufunc__ = None

    def __init__(self, dtype: Any, dimension: int, fill: Any = 0):
        element_dtype = as_element_dtype(dtype)
        size = validate_dimension(dimension)
        self._data = np.full(size, fill, dtype=element_dtype)

    # =========================================================================
    # СОЗДАНИЕ
    # =========================================================================

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "FixedVector":
        """Обёртка над одномерным массивом без копирования (только для своих массивов)."""
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def default(cls, dtype: Any, dimension: int) -> "FixedVector":
        """Вектор из N нулей типа dtype."""
        return cls(dtype, dimension)

    @classmethod
    def filled(cls, value: Any, dimension: int, dtype: Any = None) -> "FixedVector":
        """
        Вектор, все элементы которого равны value.

        Args:
            value: значение заполнения (приводится к dtype)
            dimension: размерность N
            dtype: тип элемента; по умолчанию: тип самого value
        """
        element_dtype = scalar_dtype(value) if dtype is None else dtype
        return cls(element_dtype, dimension, fill=value)

    @classmethod
    def from_vector(
        cls, other: "FixedVector", dtype: Any, dimension: int | None = None
    ) -> "FixedVector":
        """
        Converting constructor: поэлементное явное приведение к dtype.

        Args:
            other: исходный вектор
            dtype: целевой тип элемента
            dimension: ожидаемая размерность (если задана, обязана совпадать)

        Raises:
            DimensionMismatchError: если dimension задана и != other.dimension
        """
        if dimension is not None:
            require_same_dimension(
                validate_dimension(dimension), other.dimension, "from_vector"
            )
        return other.convert(dtype)

    @classmethod
    def from_values(cls, values: Any, dtype: Any) -> "FixedVector":
        """
        Вектор из последовательности значений, каждое приводится к dtype.

        Приведение то же, что и в convert: значение берётся в своём
        собственном типе и приводится с casting="unsafe" (200 → int8 даёт -56).

        Raises:
            TypeError: если значение не числовой скаляр
        """
        element_dtype = as_element_dtype(dtype)
        items = list(values)
        data = np.empty(len(items), dtype=element_dtype)
        for i, item in enumerate(items):
            if not is_numeric_scalar(item):
                raise TypeError(f"Expected a numeric scalar, got {type(item).__name__}")
            data[i] = np.asarray(item).astype(element_dtype, casting="unsafe")
        return cls._wrap(data)

    def copy(self) -> "FixedVector":
        """Независимая копия того же типа и размерности."""
        return self._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "FixedVector":
        return self.copy()

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    def size(self) -> int:
        """Размерность N (константа для экземпляра)."""
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._data.shape[0]

    def get(self, index: int) -> np.generic:
        """
        Элемент по знаковому индексу.

        Raises:
            IndexOutOfRangeError: если индекс вне диапазона
        """
        return self._data[resolve_index(index, self.dimension)]

    def set(self, index: int, value: Any) -> "FixedVector":
        """
        Запись элемента по знаковому индексу (значение приводится к dtype).

        Изменяет только сам вектор. Возвращает self для цепочек вызовов.

        Raises:
            IndexOutOfRangeError: если индекс вне диапазона
        """
        self._data[resolve_index(index, self.dimension)] = value
        return self

    def __getitem__(self, index: int) -> np.generic:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._data.copy())

    def to_list(self) -> list:
        """Элементы как обычные числа Python."""
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Копия данных как numpy массив."""
        return self._data.copy()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ И СРАВНЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"FixedVector<{self.dtype}, {self.dimension}>{self}"

    def __eq__(self, other: object) -> bool:
        """Равенство по значениям; NaN на одной позиции считается равным."""
        if not isinstance(other, FixedVector):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        has_nan = self.dtype.kind in "fc" or other.dtype.kind in "fc"
        return bool(np.array_equal(self._data, other._data, equal_nan=has_nan))

    __hash__ = None  # mutable

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _apply(self, other: Any, op: ArrayOp, name: str) -> "FixedVector":
        """
        Поэлементная операция со скаляром или вектором.

        Оба операнда приводятся к продвинутому типу, затем применяется op.
        """
        if isinstance(other, FixedVector):
            require_same_dimension(self.dimension, other.dimension, name)
            result_dtype = promote(self.dtype, other.dtype)
            rhs = other._data.astype(result_dtype)
        else:
            result_dtype = promote(self.dtype, scalar_dtype(other))
            rhs = np.asarray(other, dtype=result_dtype)

        lhs = self._data.astype(result_dtype)
        return self._wrap(np.asarray(op(lhs, rhs), dtype=result_dtype))

    def add(self, other: Any) -> "FixedVector":
        """Поэлементное сложение со скаляром или вектором той же размерности."""
        return self._apply(other, np.add, "add")

    def subtract(self, other: Any) -> "FixedVector":
        """Поэлементное вычитание."""
        return self._apply(other, np.subtract, "subtract")

    def multiply(self, other: Any) -> "FixedVector":
        """Поэлементное умножение."""
        return self._apply(other, np.multiply, "multiply")

    def divide(self, other: Any) -> "FixedVector":
        """
        Поэлементное деление по родной семантике продвинутого типа.

        - целые / целые: усечение к нулю; делитель 0 → ZeroDivisionError
        - с участием float: IEEE деление; x / 0.0 → inf / nan

        Raises:
            ZeroDivisionError: целочисленное деление на 0
            DimensionMismatchError: размерности векторов не совпадают
        """
        return self._apply(other, native_divide, "divide")

    def _operator(self, other: Any, method: Callable[[Any], "FixedVector"]) -> Any:
        if isinstance(other, FixedVector) or _is_scalar_operand(other):
            return method(other)
        return NotImplemented

    def __add__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.add)

    def __sub__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.subtract)

    def __mul__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.multiply)

    def __truediv__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.divide)

    def __radd__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.add)

    def __rmul__(self, other: Any) -> "FixedVector":
        return self._operator(other, self.multiply)

    # =========================================================================
    # СТРУКТУРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def resize(self, dimension: int) -> "FixedVector":
        """
        Новый вектор размерности M того же типа.

        Копируются первые min(N, M) элементов; при росте хвост заполняется
        нулями, при уменьшении хвост отбрасывается.
        """
        size = validate_dimension(dimension)
        result = np.zeros(size, dtype=self.dtype)
        keep = min(self.dimension, size)
        result[:keep] = self._data[:keep]
        if size < self.dimension:
            logger.debug("resize %d -> %d drops %d trailing elements",
                         self.dimension, size, self.dimension - size)
        return self._wrap(result)

    def convert(self, dtype: Any) -> "FixedVector":
        """Поэлементное явное приведение к dtype (float → int усекается к нулю)."""
        target = as_element_dtype(dtype)
        return self._wrap(self._data.astype(target, casting="unsafe"))

    def slice(self, start: int, end: int) -> "FixedVector":
        """
        Включительный slice с автоматическим разворотом.

        Обе границы разрешаются как индексы и обязаны лежать в [0, N).

        - start <= end: элементы start..end по возрастанию (end - start + 1)
        - start > end: элементы start..end по убыванию (start - end + 1)

        Raises:
            SliceBoundsError: если граница вне диапазона

        Examples:
            >>> v = FixedVector.from_values([10, 20, 30, 40], int)
            >>> str(v.slice(1, 3)), str(v.slice(3, 1)), str(v.slice(-3, -1))
            ('[20, 30, 40]', '[40, 30, 20]', '[20, 30, 40]')
        """
        first, last = resolve_slice_bounds(start, end, self.dimension)
        if first <= last:
            return self._wrap(self._data[first:last + 1].copy())
        return self._wrap(self._data[last:first + 1][::-1].copy())


def _is_scalar_operand(value: Any) -> bool:
    try:
        scalar_dtype(value)
    except TypeError:
        return False
    return True
