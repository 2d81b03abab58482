"""
Time Values: арифметика времени хост-платформы

Time value: число миллисекунд от 1970-01-01T00:00:00Z (float).
Реализует алгоритмы стандартного объекта даты хоста:
- Day / TimeWithinDay
- DayFromYear / YearFromTime / MonthFromTime / DateFromTime / WeekDay
- HourFromTime / MinFromTime / SecFromTime / msFromTime
- MakeTime / MakeDay / MakeDate / TimeClip

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой нечисловой или бесконечный компонент даёт NaN (Invalid Date)
2. TimeClip возвращает либо NaN, либо целое в [-8.64e15, 8.64e15]
3. Месяц везде 0-based (0 = январь), как у хоста
"""

import math
from dataclasses import dataclass
from typing import Final

from src.core.math.numerical_safeguards import (
    NAN,
    all_finite,
    floor_div,
    is_valid_float,
    positive_mod,
    to_integer,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MS_PER_SECOND: Final[int] = 1000
MS_PER_MINUTE: Final[int] = 60 * MS_PER_SECOND
MS_PER_HOUR: Final[int] = 60 * MS_PER_MINUTE
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR

# Предел TimeClip: ±100 000 000 дней от эпохи
MAX_TIME_VALUE: Final[float] = 8.64e15

# Пределы компонентов, за которыми MakeDay сразу возвращает NaN
# (любой такой год всё равно отсекается TimeClip)
MAX_COMPONENT_YEAR: Final[int] = 1_000_000
MAX_COMPONENT_MONTH: Final[int] = 10_000_000

# Кумулятивное число дней до начала месяца (невисокосный год)
_CUMULATIVE_DAYS: Final[tuple[int, ...]] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Диапазон лет для поиска эквивалентного года (без вековых исключений)
_EQUIVALENT_YEAR_BASE: Final[int] = 2000
_EQUIVALENT_YEAR_SPAN: Final[int] = 28


# =============================================================================
# РАЗЛОЖЕНИЕ TIME VALUE
# =============================================================================


@dataclass(frozen=True)
class TimeFields:
    """Поля календаря и времени суток для конечного time value."""

    year: int
    month: int  # 0-based
    date: int
    weekday: int  # 0 = воскресенье
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


def day(t: float) -> int:
    """Номер дня от эпохи."""
    return floor_div(t, MS_PER_DAY)


def time_within_day(t: float) -> float:
    """Миллисекунды от начала суток."""
    return positive_mod(t, MS_PER_DAY)


def is_leap_year(year: int) -> bool:
    """Високосный год по григорианскому календарю (пролептически)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """
    Число дней в месяце.

    Args:
        year: Год
        month: Месяц (0-based)

    Returns:
        28..31
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in [0, 11], got {month}")
    if month == 1 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def day_from_year(year: int) -> int:
    """Номер первого дня года от эпохи."""
    return (
        365 * (year - 1970)
        + (year - 1969) // 4
        - (year - 1901) // 100
        + (year - 1601) // 400
    )


def time_from_year(year: int) -> int:
    """Time value начала года."""
    return MS_PER_DAY * day_from_year(year)


def year_from_time(t: float) -> int:
    """
    Год, содержащий time value t.

    Оценка через среднюю длину года с последующей коррекцией.
    """
    year = math.floor(t / (MS_PER_DAY * 365.2425)) + 1970
    while time_from_year(year) > t:
        year -= 1
    while time_from_year(year + 1) <= t:
        year += 1
    return year


def _month_start(month: int, leap: bool) -> int:
    """День года (0-based), с которого начинается месяц."""
    offset = 1 if leap and month >= 2 else 0
    return _CUMULATIVE_DAYS[month] + offset


def day_within_year(t: float) -> int:
    return day(t) - day_from_year(year_from_time(t))


def month_from_time(t: float) -> int:
    """Месяц (0-based) для time value t."""
    leap = is_leap_year(year_from_time(t))
    day_of_year = day_within_year(t)
    for month in range(11, -1, -1):
        if day_of_year >= _month_start(month, leap):
            return month
    return 0


def date_from_time(t: float) -> int:
    """День месяца (1-based) для time value t."""
    leap = is_leap_year(year_from_time(t))
    return day_within_year(t) - _month_start(month_from_time(t), leap) + 1


def week_day(t: float) -> int:
    """День недели: 0 = воскресенье (01.01.1970 был четвергом)."""
    return (day(t) + 4) % 7


def hour_from_time(t: float) -> int:
    return floor_div(t, MS_PER_HOUR) % 24


def min_from_time(t: float) -> int:
    return floor_div(t, MS_PER_MINUTE) % 60


def sec_from_time(t: float) -> int:
    return floor_div(t, MS_PER_SECOND) % 60


def ms_from_time(t: float) -> int:
    return int(positive_mod(t, MS_PER_SECOND))


def split_time_value(t: float) -> TimeFields:
    """
    Разложение конечного time value на поля.

    Args:
        t: Time value (конечный)

    Returns:
        TimeFields

    Raises:
        ValueError: Если t NaN или Inf
    """
    if not is_valid_float(t):
        raise ValueError(f"time value must be finite, got {t}")

    return TimeFields(
        year=year_from_time(t),
        month=month_from_time(t),
        date=date_from_time(t),
        weekday=week_day(t),
        hours=hour_from_time(t),
        minutes=min_from_time(t),
        seconds=sec_from_time(t),
        milliseconds=ms_from_time(t),
    )


# =============================================================================
# СБОРКА TIME VALUE
# =============================================================================


def make_time(hour: float, minute: float, sec: float, ms: float) -> float:
    """
    Время суток в миллисекундах из компонентов.

    Компоненты усекаются к нулю; выход за пределы (например, 25 часов)
    переносится в следующие сутки.

    Returns:
        Миллисекунды или NaN, если хотя бы один компонент не конечен
    """
    if not all_finite(hour, minute, sec, ms):
        return NAN

    return (
        to_integer(hour) * MS_PER_HOUR
        + to_integer(minute) * MS_PER_MINUTE
        + to_integer(sec) * MS_PER_SECOND
        + to_integer(ms)
    )


def make_day(year: float, month: float, date: float) -> float:
    """
    Номер дня от эпохи из года, месяца (0-based) и дня месяца.

    Месяц вне [0, 11] переносится в соседние годы, день вне месяца
    переносится в соседние месяцы.

    Returns:
        Номер дня или NaN
    """
    if not all_finite(year, month, date):
        return NAN

    y = to_integer(year)
    m = to_integer(month)
    dt = to_integer(date)

    if abs(y) > MAX_COMPONENT_YEAR or abs(m) > MAX_COMPONENT_MONTH:
        return NAN

    year_index = int(y) + math.floor(m / 12)
    month_index = int(m) % 12

    first_day = day_from_year(year_index) + _month_start(month_index, is_leap_year(year_index))
    result = first_day + dt - 1

    return result if is_valid_float(result) else NAN


def make_date(day_number: float, time: float) -> float:
    """Time value из номера дня и времени суток."""
    if not all_finite(day_number, time):
        return NAN

    result = day_number * MS_PER_DAY + time
    return result if is_valid_float(result) else NAN


def time_clip(time: float) -> float:
    """
    Обрезка time value до допустимого диапазона хоста.

    Returns:
        Целое в [-8.64e15, 8.64e15] или NaN
    """
    if not is_valid_float(time):
        return NAN

    if abs(time) > MAX_TIME_VALUE:
        return NAN

    return to_integer(time)


# =============================================================================
# ЭКВИВАЛЕНТНЫЙ ГОД
# =============================================================================


def equivalent_year(year: int) -> int:
    """
    Год из [2000, 2027] с той же високосностью и тем же днём недели 1 января.

    Используется, когда платформа не может вычислить смещение часового
    пояса для слишком далёкого года.
    """
    leap = is_leap_year(year)
    first_weekday = week_day(time_from_year(year))

    for candidate in range(_EQUIVALENT_YEAR_BASE, _EQUIVALENT_YEAR_BASE + _EQUIVALENT_YEAR_SPAN):
        if is_leap_year(candidate) == leap and week_day(time_from_year(candidate)) == first_weekday:
            return candidate

    raise ValueError(f"No equivalent year found for {year}")


def equivalent_time(t: float) -> float:
    """Time value с тем же положением внутри эквивалентного года."""
    year = year_from_time(t)
    return t - time_from_year(year) + time_from_year(equivalent_year(year))
