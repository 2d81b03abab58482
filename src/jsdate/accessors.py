"""
Accessors: чтение компонентов даты хоста

Два параллельных семейства с одинаковым набором полей:
- UTC (чистые функции): get_utc_full_year, get_utc_month, ...
- локальное время (требуют HostEnvironment): get_full_year, get_month, ...

Месяц 0-based, день недели 0 = воскресенье. Для невалидной даты все
аксессоры возвращают NaN; вызывающий код проверяет is_valid, если ему
нужно гарантированно пригодное число.
"""

from typing import Callable, Optional

from src.core.math.numerical_safeguards import NAN
from src.core.math.time_values import MS_PER_MINUTE, TimeFields, split_time_value
from src.jsdate.environment import HostEnvironment
from src.jsdate.handle import JSDate, is_valid


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def local_time(handle: JSDate, env: HostEnvironment) -> float:
    """Локальное время как time value (UTC + смещение пояса)."""
    if not is_valid(handle):
        return NAN
    return handle.time_value + env.zone.offset_ms(handle.time_value)


def utc_fields(handle: JSDate) -> Optional[TimeFields]:
    """Поля даты в UTC или None для невалидной даты."""
    if not is_valid(handle):
        return None
    return split_time_value(handle.time_value)


def local_fields(handle: JSDate, env: HostEnvironment) -> Optional[TimeFields]:
    """Поля даты в локальном поясе окружения или None для невалидной даты."""
    if not is_valid(handle):
        return None
    return split_time_value(local_time(handle, env))


def _read(fields: Optional[TimeFields], getter: Callable[[TimeFields], int]) -> float:
    if fields is None:
        return NAN
    return float(getter(fields))


# =============================================================================
# UTC
# =============================================================================


def get_time(handle: JSDate) -> float:
    """Миллисекунды от эпохи (не зависит от пояса)."""
    return handle.time_value


def get_utc_full_year(handle: JSDate) -> float:
    return _read(utc_fields(handle), lambda f: f.year)


def get_utc_month(handle: JSDate) -> float:
    """Месяц в UTC, 0-based."""
    return _read(utc_fields(handle), lambda f: f.month)


def get_utc_date(handle: JSDate) -> float:
    """День месяца в UTC."""
    return _read(utc_fields(handle), lambda f: f.date)


def get_utc_day(handle: JSDate) -> float:
    """День недели в UTC (0 = воскресенье)."""
    return _read(utc_fields(handle), lambda f: f.weekday)


def get_utc_hours(handle: JSDate) -> float:
    return _read(utc_fields(handle), lambda f: f.hours)


def get_utc_minutes(handle: JSDate) -> float:
    return _read(utc_fields(handle), lambda f: f.minutes)


def get_utc_seconds(handle: JSDate) -> float:
    return _read(utc_fields(handle), lambda f: f.seconds)


def get_utc_milliseconds(handle: JSDate) -> float:
    return _read(utc_fields(handle), lambda f: f.milliseconds)


# =============================================================================
# ЛОКАЛЬНОЕ ВРЕМЯ
# =============================================================================


def get_full_year(handle: JSDate, env: HostEnvironment) -> float:
    return _read(local_fields(handle, env), lambda f: f.year)


def get_month(handle: JSDate, env: HostEnvironment) -> float:
    """Месяц в локальном поясе, 0-based."""
    return _read(local_fields(handle, env), lambda f: f.month)


def get_date(handle: JSDate, env: HostEnvironment) -> float:
    """День месяца в локальном поясе."""
    return _read(local_fields(handle, env), lambda f: f.date)


def get_day(handle: JSDate, env: HostEnvironment) -> float:
    """День недели в локальном поясе (0 = воскресенье)."""
    return _read(local_fields(handle, env), lambda f: f.weekday)


def get_hours(handle: JSDate, env: HostEnvironment) -> float:
    return _read(local_fields(handle, env), lambda f: f.hours)


def get_minutes(handle: JSDate, env: HostEnvironment) -> float:
    return _read(local_fields(handle, env), lambda f: f.minutes)


def get_seconds(handle: JSDate, env: HostEnvironment) -> float:
    return _read(local_fields(handle, env), lambda f: f.seconds)


def get_milliseconds(handle: JSDate, env: HostEnvironment) -> float:
    return _read(local_fields(handle, env), lambda f: f.milliseconds)


def get_timezone_offset(handle: JSDate, env: HostEnvironment) -> float:
    """
    Смещение в минутах, которое нужно прибавить к локальному времени,
    чтобы получить UTC.

    Положительное западнее Гринвича (UTC-05:00 → 300).
    """
    if not is_valid(handle):
        return NAN
    return (handle.time_value - local_time(handle, env)) / MS_PER_MINUTE
