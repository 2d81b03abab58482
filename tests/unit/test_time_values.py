"""
Тесты для арифметики time value

Проверяет:
1. Разложение time value на поля (год, месяц, день, время суток)
2. Сборку time value из компонентов с переносами (MakeDay/MakeTime)
3. TimeClip: границы диапазона, усечение, NaN
4. Эквивалентный год для вычисления смещения пояса
"""

import math

import pytest

from src.core.math.time_values import (
    MAX_TIME_VALUE,
    MS_PER_DAY,
    date_from_time,
    day,
    day_from_year,
    days_in_month,
    equivalent_time,
    equivalent_year,
    is_leap_year,
    make_date,
    make_day,
    make_time,
    month_from_time,
    split_time_value,
    time_clip,
    time_from_year,
    time_within_day,
    week_day,
    year_from_time,
)

# 2018-01-05T12:30:00.000Z
SAMPLE_MS = 1515155400000.0

# 2000-02-29T00:00:00.000Z
LEAP_DAY_MS = 951782400000.0


# =============================================================================
# DECOMPOSITION
# =============================================================================


class TestDecomposition:
    """Тесты разложения time value"""

    def test_epoch(self) -> None:
        """Эпоха: четверг 1970-01-01 00:00:00.000"""
        fields = split_time_value(0.0)
        assert (fields.year, fields.month, fields.date) == (1970, 0, 1)
        assert fields.weekday == 4
        assert (fields.hours, fields.minutes, fields.seconds, fields.milliseconds) == (0, 0, 0, 0)

    def test_sample(self) -> None:
        """2018-01-05T12:30Z раскладывается в пятницу 12:30"""
        fields = split_time_value(SAMPLE_MS)
        assert (fields.year, fields.month, fields.date) == (2018, 0, 5)
        assert fields.weekday == 5
        assert (fields.hours, fields.minutes) == (12, 30)

    def test_one_ms_before_epoch(self) -> None:
        """-1 мс: 1969-12-31T23:59:59.999, среда"""
        fields = split_time_value(-1.0)
        assert (fields.year, fields.month, fields.date) == (1969, 11, 31)
        assert (fields.hours, fields.minutes, fields.seconds, fields.milliseconds) == (
            23,
            59,
            59,
            999,
        )
        assert fields.weekday == 3

    def test_leap_day(self) -> None:
        """29 февраля 2000 и следующий за ним день"""
        assert month_from_time(LEAP_DAY_MS) == 1
        assert date_from_time(LEAP_DAY_MS) == 29
        assert month_from_time(LEAP_DAY_MS + MS_PER_DAY) == 2
        assert date_from_time(LEAP_DAY_MS + MS_PER_DAY) == 1

    def test_range_limits(self) -> None:
        """Границы диапазона хоста"""
        upper = split_time_value(MAX_TIME_VALUE)
        assert (upper.year, upper.month, upper.date) == (275760, 8, 13)

        lower = split_time_value(-MAX_TIME_VALUE)
        assert (lower.year, lower.month, lower.date) == (-271821, 3, 20)

    def test_non_finite_rejected(self) -> None:
        """NaN нельзя разложить"""
        with pytest.raises(ValueError):
            split_time_value(float("nan"))

    def test_day_and_time_within_day_negative(self) -> None:
        """Для отрицательных значений день округляется к -inf"""
        assert day(-1.0) == -1
        assert time_within_day(-1.0) == MS_PER_DAY - 1

    @pytest.mark.parametrize("year", [-271821, -1, 0, 1, 1600, 1900, 1969, 1970, 2000, 2018, 275760])
    def test_year_from_time_inverts_time_from_year(self, year: int) -> None:
        """YearFromTime(TimeFromYear(y)) == y и последняя мс предыдущего года"""
        start = time_from_year(year)
        assert year_from_time(start) == year
        assert year_from_time(start - 1) == year - 1


class TestCalendarRules:
    """Тесты правил григорианского календаря"""

    @pytest.mark.parametrize(
        "year, expected",
        [(2000, True), (1900, False), (2016, True), (2018, False), (0, True), (-4, True)],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Високосность по правилам 4/100/400"""
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        """Февраль 28/29, остальные месяцы по таблице"""
        assert days_in_month(2019, 1) == 28
        assert days_in_month(2020, 1) == 29
        assert days_in_month(2020, 3) == 30
        assert days_in_month(2020, 11) == 31

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Месяц вне [0, 11] отклоняется"""
        with pytest.raises(ValueError):
            days_in_month(2020, 12)

    def test_day_from_year(self) -> None:
        """1970 это день 0, 2018 начинается с дня 17532"""
        assert day_from_year(1970) == 0
        assert day_from_year(2018) == 17532


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestMakeTime:
    """Тесты MakeTime"""

    def test_basic(self) -> None:
        assert make_time(1, 1, 1, 1) == 3_661_001

    def test_fractions_truncated(self) -> None:
        """Дробные компоненты усекаются к нулю"""
        assert make_time(1.9, 0, 0, 0.7) == 3_600_000

    def test_overflow_kept(self) -> None:
        """25 часов не обрезаются: перенос делает MakeDate"""
        assert make_time(25, 0, 0, 0) == 25 * 3_600_000

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, bad: float) -> None:
        assert math.isnan(make_time(0, bad, 0, 0))


class TestMakeDay:
    """Тесты MakeDay"""

    def test_epoch(self) -> None:
        assert make_day(1970, 0, 1) == 0

    def test_sample(self) -> None:
        assert make_day(2018, 0, 5) == 17536

    def test_month_rollover(self) -> None:
        """Месяц 12 это январь следующего года, месяц -1 это декабрь предыдущего"""
        assert make_day(2018, 12, 1) == make_day(2019, 0, 1)
        assert make_day(2018, -1, 1) == make_day(2017, 11, 1)

    def test_day_rollover(self) -> None:
        """День 0 это последний день предыдущего месяца"""
        assert make_day(2018, 0, 0) == make_day(2017, 11, 31)
        assert make_day(2018, 1, 29) == make_day(2018, 2, 1)

    def test_non_finite(self) -> None:
        assert math.isnan(make_day(float("nan"), 0, 1))
        assert math.isnan(make_day(2018, float("inf"), 1))

    def test_component_limits(self) -> None:
        """Год за пределами ±1 000 000 сразу даёт NaN"""
        assert math.isnan(make_day(1e7, 0, 1))


class TestMakeDateAndTimeClip:
    """Тесты MakeDate и TimeClip"""

    def test_make_date(self) -> None:
        assert make_date(1, 0) == MS_PER_DAY
        assert make_date(17536, 45_000_000) == SAMPLE_MS

    def test_make_date_non_finite(self) -> None:
        assert math.isnan(make_date(float("nan"), 0))

    def test_clip_limits(self) -> None:
        """±8.64e15 включительно"""
        assert time_clip(MAX_TIME_VALUE) == MAX_TIME_VALUE
        assert time_clip(-MAX_TIME_VALUE) == -MAX_TIME_VALUE
        assert math.isnan(time_clip(MAX_TIME_VALUE + 1))
        assert math.isnan(time_clip(-MAX_TIME_VALUE - 1))

    def test_clip_truncates(self) -> None:
        assert time_clip(1.9) == 1.0
        assert time_clip(-1.9) == -1.0

    def test_clip_normalizes_negative_zero(self) -> None:
        """-0.5 усекается до +0"""
        result = time_clip(-0.5)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_clip_non_finite(self) -> None:
        assert math.isnan(time_clip(float("inf")))
        assert math.isnan(time_clip(float("nan")))


# =============================================================================
# EQUIVALENT YEAR
# =============================================================================


class TestEquivalentYear:
    """Тесты подбора эквивалентного года"""

    def test_recent_year(self) -> None:
        """2018 (невисокосный, 1 января понедельник) → 2001"""
        assert equivalent_year(2018) == 2001

    @pytest.mark.parametrize("year", [-271821, -1, 0, 1900, 2100, 10000, 275760])
    def test_same_calendar(self, year: int) -> None:
        """Эквивалентный год совпадает по високосности и дню недели 1 января"""
        candidate = equivalent_year(year)
        assert 2000 <= candidate <= 2027
        assert is_leap_year(candidate) == is_leap_year(year)
        assert week_day(time_from_year(candidate)) == week_day(time_from_year(year))

    def test_equivalent_time_keeps_position_in_year(self) -> None:
        """Месяц, день и время суток сохраняются"""
        original = split_time_value(MAX_TIME_VALUE)
        shifted = split_time_value(equivalent_time(MAX_TIME_VALUE))
        assert (shifted.month, shifted.date, shifted.weekday) == (
            original.month,
            original.date,
            original.weekday,
        )
