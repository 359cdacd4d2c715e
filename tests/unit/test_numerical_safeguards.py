"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Разрешение знаковых индексов и IndexOutOfRangeError
2. Разрешение границ slice и SliceBoundsError
3. Валидацию размерностей и DimensionMismatchError
4. Деление по родной семантике (усечение int, IEEE float)
"""

import numpy as np
import pytest

from src.core.math.numerical_safeguards import (
    DimensionMismatchError,
    FixedVectorError,
    IndexOutOfRangeError,
    SliceBoundsError,
    as_index,
    native_divide,
    normalize_index,
    require_same_dimension,
    resolve_index,
    resolve_slice_bounds,
    truncating_divide,
    validate_dimension,
)

# =============================================================================
# ИНДЕКСЫ
# =============================================================================


class TestResolveIndex:
    """Тесты для resolve_index"""

    def test_non_negative_is_absolute(self) -> None:
        """Неотрицательные индексы абсолютные"""
        assert resolve_index(0, 4) == 0
        assert resolve_index(3, 4) == 3

    def test_negative_counts_from_end(self) -> None:
        """-1: последний элемент, -N: первый"""
        assert resolve_index(-1, 4) == 3
        assert resolve_index(-4, 4) == 0

    def test_numpy_integer_accepted(self) -> None:
        """numpy integer допускается как индекс"""
        assert resolve_index(np.int32(-2), 4) == 2

    @pytest.mark.parametrize("index", [4, 100, -5, -100])
    def test_out_of_range_raises(self, index: int) -> None:
        """Вне [0, N) → IndexOutOfRangeError с исходным индексом"""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            resolve_index(index, 4)
        assert exc_info.value.index == index
        assert exc_info.value.dimension == 4

    def test_error_message(self) -> None:
        """Сообщение содержит индекс и размерность"""
        with pytest.raises(IndexOutOfRangeError, match=r"Index 5 out of range for FixedVector<3>"):
            resolve_index(5, 3)

    def test_empty_vector_has_no_valid_index(self) -> None:
        """N = 0: любой индекс вне диапазона"""
        with pytest.raises(IndexOutOfRangeError):
            resolve_index(0, 0)
        with pytest.raises(IndexOutOfRangeError):
            resolve_index(-1, 0)

    def test_error_is_index_error(self) -> None:
        """IndexOutOfRangeError ловится как IndexError и FixedVectorError"""
        error = IndexOutOfRangeError(7, 2)
        assert isinstance(error, IndexError)
        assert isinstance(error, FixedVectorError)

    @pytest.mark.parametrize("bad", [1.0, "1", None, True])
    def test_non_integer_index_rejected(self, bad) -> None:
        """Нецелые индексы (и bool) → TypeError"""
        with pytest.raises(TypeError):
            as_index(bad)

    def test_normalize_index_without_exception(self) -> None:
        """normalize_index возвращает None вне диапазона"""
        assert normalize_index(-2, 5) == 3
        assert normalize_index(5, 5) is None
        assert normalize_index(-6, 5) is None


class TestResolveSliceBounds:
    """Тесты для resolve_slice_bounds"""

    def test_forward_bounds(self) -> None:
        assert resolve_slice_bounds(1, 3, 4) == (1, 3)

    def test_reversed_bounds_allowed(self) -> None:
        """start > end допустим (развёрнутый slice)"""
        assert resolve_slice_bounds(3, 1, 4) == (3, 1)

    def test_negative_bounds(self) -> None:
        assert resolve_slice_bounds(-3, -1, 4) == (1, 3)

    @pytest.mark.parametrize("start, end", [(0, 4), (4, 0), (-5, 1), (1, -5)])
    def test_out_of_range_raises(self, start: int, end: int) -> None:
        """Любая граница вне [0, N) → SliceBoundsError"""
        with pytest.raises(SliceBoundsError) as exc_info:
            resolve_slice_bounds(start, end, 4)
        assert exc_info.value.start == start
        assert exc_info.value.end == end
        assert exc_info.value.dimension == 4


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================


class TestDimensions:
    """Тесты для validate_dimension и require_same_dimension"""

    def test_valid_dimensions(self) -> None:
        assert validate_dimension(0) == 0
        assert validate_dimension(np.int64(5)) == 5

    def test_negative_dimension_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            validate_dimension(-1)

    @pytest.mark.parametrize("bad", [2.0, "3", True, None])
    def test_non_integer_dimension_raises(self, bad) -> None:
        with pytest.raises(TypeError):
            validate_dimension(bad)

    def test_same_dimension_passes(self) -> None:
        require_same_dimension(3, 3)

    def test_mismatch_raises_type_error(self) -> None:
        """Несовпадение размерностей: ошибка типа"""
        with pytest.raises(DimensionMismatchError, match="add requires dimension 3, got 2") as exc_info:
            require_same_dimension(3, 2, "add")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
        assert isinstance(exc_info.value, TypeError)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestNativeDivide:
    """Тесты для native_divide и truncating_divide"""

    def test_integer_division_truncates_toward_zero(self) -> None:
        """int / int усекается к нулю, а не к -inf"""
        lhs = np.array([7, -7, 7, -7, 6], dtype=np.int64)
        rhs = np.array([2, 2, -2, -2, 3], dtype=np.int64)
        result = native_divide(lhs, rhs)
        assert result.tolist() == [3, -3, -3, 3, 2]
        assert result.dtype == np.int64

    def test_integer_division_by_scalar(self) -> None:
        result = native_divide(np.array([1, 2, 3]), np.asarray(2))
        assert result.tolist() == [0, 1, 1]

    def test_integer_division_by_zero_raises(self) -> None:
        """Целочисленное деление на 0 пробрасывается как ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError, match="integer division by zero"):
            native_divide(np.array([1, 2]), np.array([1, 0]))

    def test_unsigned_division(self) -> None:
        result = truncating_divide(
            np.array([7, 9], dtype=np.uint8), np.array([2, 4], dtype=np.uint8)
        )
        assert result.tolist() == [3, 2]
        assert result.dtype == np.uint8

    def test_float_division(self) -> None:
        result = native_divide(np.array([1.0, 2.0, 3.0]), np.asarray(2.0))
        assert result.tolist() == [0.5, 1.0, 1.5]

    def test_float_division_by_zero_is_ieee(self) -> None:
        """float / 0.0 → inf, -inf, nan без исключения"""
        result = native_divide(np.array([1.0, -1.0, 0.0]), np.asarray(0.0))
        assert result[0] == np.inf
        assert result[1] == -np.inf
        assert np.isnan(result[2])

    def test_float_division_by_zero_emits_no_warning(self, recwarn) -> None:
        native_divide(np.array([1.0]), np.array([0.0]))
        assert len(recwarn) == 0
