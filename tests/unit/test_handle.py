"""
Тесты для дескриптора даты JSDate

Проверяет:
1. Инвариант time value (TimeClip или NaN)
2. is_valid как единственный источник истины о валидности
3. Сравнение, порядок и хеширование по числовому значению
4. Строковое представление (fromTime ...)
5. read_date для значений неизвестного типа
"""

import math

import pytest
from pydantic import ValidationError

from src.jsdate import INVALID_DATE, ForeignDateError, JSDate, is_valid, read_date


class TestJSDateModel:
    """Тесты модели JSDate"""

    def test_valid_value(self, sample_date: JSDate) -> None:
        assert sample_date.time_value == 1515155400000.0
        assert is_valid(sample_date)

    def test_nan_is_invalid(self) -> None:
        assert not is_valid(INVALID_DATE)
        assert math.isnan(INVALID_DATE.time_value)

    @pytest.mark.parametrize("value", [1.5, 8.64e15 + 1, float("inf"), float("-inf")])
    def test_unclipped_values_rejected(self, value: float) -> None:
        """Прямое создание с не прошедшим TimeClip значением запрещено"""
        with pytest.raises(ValidationError, match="not a clipped time value"):
            JSDate(time_value=value)

    def test_immutability(self, sample_date: JSDate) -> None:
        with pytest.raises(ValidationError):
            sample_date.time_value = 0.0


class TestJSDateComparison:
    """Тесты сравнения дат"""

    def test_equal_by_time_value(self) -> None:
        assert JSDate(time_value=1.0) == JSDate(time_value=1.0)
        assert JSDate(time_value=1.0) != JSDate(time_value=2.0)

    def test_invalid_never_equal(self) -> None:
        """NaN не равен ничему, в том числе себе"""
        assert INVALID_DATE != INVALID_DATE
        assert INVALID_DATE != JSDate(time_value=float("nan"))

    def test_ordering(self) -> None:
        early, late = JSDate(time_value=-1.0), JSDate(time_value=1.0)
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert sorted([late, early]) == [early, late]

    def test_invalid_not_ordered(self, sample_date: JSDate) -> None:
        assert not INVALID_DATE < sample_date
        assert not INVALID_DATE > sample_date

    def test_hash_consistent_with_eq(self) -> None:
        assert len({JSDate(time_value=5.0), JSDate(time_value=5.0)}) == 1

    def test_compare_with_other_type(self, sample_date: JSDate) -> None:
        assert sample_date != 1515155400000.0


class TestJSDateRepr:
    """Тесты строкового представления"""

    def test_repr(self, sample_date: JSDate) -> None:
        assert repr(sample_date) == "(fromTime 1515155400000.0)"
        assert str(sample_date) == "(fromTime 1515155400000.0)"

    def test_repr_invalid(self) -> None:
        assert repr(INVALID_DATE) == "(fromTime NaN)"


class TestReadDate:
    """Тесты read_date"""

    def test_returns_handle(self, sample_date: JSDate) -> None:
        assert read_date(sample_date) is sample_date

    def test_invalid_handle_is_still_a_date(self) -> None:
        assert read_date(INVALID_DATE) is INVALID_DATE

    @pytest.mark.parametrize("value", ["2018-01-05", 1515155400000, None, {"fromTime": 0}])
    def test_foreign_values_rejected(self, value) -> None:
        with pytest.raises(ForeignDateError, match="expected Date"):
            read_date(value)

    def test_foreign_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            read_date("x")
