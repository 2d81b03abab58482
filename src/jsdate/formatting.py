"""
Formatting: строковое представление даты хоста

- to_string / to_date_string / to_time_string: локальное время
  (текст не нормативен и зависит от окружения)
- to_utc_string: 'Fri, 05 Jan 2018 12:30:00 GMT'
- to_iso_string: '2018-01-05T12:30:00.000Z'
- to_json: ISO-строка или None

Невалидная дата даёт 'Invalid Date' во всех функциях, кроме
to_iso_string: там это InvalidDateError.
"""

from typing import Final, Optional

from src.core.math.time_values import MS_PER_MINUTE, TimeFields
from src.jsdate.accessors import local_fields, utc_fields
from src.jsdate.environment import HostEnvironment
from src.jsdate.errors import InvalidDateError
from src.jsdate.handle import JSDate, is_valid
from src.jsdate.parsing import DAY_NAMES, MONTH_NAMES

INVALID_DATE_TEXT: Final[str] = "Invalid Date"


# =============================================================================
# ФРАГМЕНТЫ
# =============================================================================


def _year_text(year: int) -> str:
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}"


def _iso_year_text(year: int) -> str:
    """Расширенный формат ±YYYYYY вне 0000..9999"""
    if 0 <= year <= 9999:
        return f"{year:04d}"
    sign = "+" if year > 0 else "-"
    return f"{sign}{abs(year):06d}"


def _clock_text(fields: TimeFields) -> str:
    return f"{fields.hours:02d}:{fields.minutes:02d}:{fields.seconds:02d}"


def _date_text(fields: TimeFields) -> str:
    return (
        f"{DAY_NAMES[fields.weekday]} {MONTH_NAMES[fields.month]} "
        f"{fields.date:02d} {_year_text(fields.year)}"
    )


def _zone_text(handle: JSDate, env: HostEnvironment) -> str:
    offset = round(env.zone.offset_ms(handle.time_value) / MS_PER_MINUTE)
    sign = "+" if offset >= 0 else "-"
    hours, minutes = divmod(abs(offset), 60)
    name = env.zone.zone_name(handle.time_value)
    return f"GMT{sign}{hours:02d}{minutes:02d} ({name})"


# =============================================================================
# ЛОКАЛЬНЫЕ ФОРМАТЫ
# =============================================================================


def to_string(handle: JSDate, env: HostEnvironment) -> str:
    """'Fri Jan 05 2018 13:30:00 GMT+0100 (Central European Standard Time)'"""
    fields = local_fields(handle, env)
    if fields is None:
        return INVALID_DATE_TEXT
    return f"{_date_text(fields)} {_clock_text(fields)} {_zone_text(handle, env)}"


def to_date_string(handle: JSDate, env: HostEnvironment) -> str:
    """'Fri Jan 05 2018'"""
    fields = local_fields(handle, env)
    if fields is None:
        return INVALID_DATE_TEXT
    return _date_text(fields)


def to_time_string(handle: JSDate, env: HostEnvironment) -> str:
    """'13:30:00 GMT+0100 (Central European Standard Time)'"""
    fields = local_fields(handle, env)
    if fields is None:
        return INVALID_DATE_TEXT
    return f"{_clock_text(fields)} {_zone_text(handle, env)}"


# =============================================================================
# ФИКСИРОВАННЫЕ ФОРМАТЫ
# =============================================================================


def to_utc_string(handle: JSDate) -> str:
    """'Fri, 05 Jan 2018 12:30:00 GMT' (RFC 7231 IMF-fixdate)"""
    fields = utc_fields(handle)
    if fields is None:
        return INVALID_DATE_TEXT
    return (
        f"{DAY_NAMES[fields.weekday]}, {fields.date:02d} {MONTH_NAMES[fields.month]} "
        f"{_year_text(fields.year)} {_clock_text(fields)} GMT"
    )


def to_iso_string(handle: JSDate) -> str:
    """
    ISO 8601 в UTC с миллисекундами.

    Returns:
        '2018-01-05T12:30:00.000Z'; годы вне 0000..9999 как '+275760-09-13T...'

    Raises:
        InvalidDateError: Если дата невалидна
    """
    fields = utc_fields(handle)
    if fields is None:
        raise InvalidDateError()
    return (
        f"{_iso_year_text(fields.year)}-{fields.month + 1:02d}-{fields.date:02d}"
        f"T{_clock_text(fields)}.{fields.milliseconds:03d}Z"
    )


def to_json(handle: JSDate) -> Optional[str]:
    """ISO-строка или None для невалидной даты."""
    if not is_valid(handle):
        return None
    return to_iso_string(handle)
