"""
Converters: дата хоста ↔ Instant / DateTime / Date / datetime

Все преобразования из даты хоста возвращают None ровно тогда, когда дата
невалидна. Преобразования в дату хоста тотальны.

Точность: миллисекунда. Микросекунды datetime.datetime при преобразовании
в дату хоста отбрасываются (усечение к началу миллисекунды).
"""

from datetime import datetime, timedelta, timezone
from typing import Final, Optional

from src.core.domain.calendar import Date, DateTime
from src.core.domain.instant import Instant
from src.jsdate.constructors import from_components, from_epoch_millis, from_time
from src.jsdate.handle import JSDate, is_valid

_PY_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS: Final[timedelta] = timedelta(milliseconds=1)


# =============================================================================
# INSTANT
# =============================================================================


def to_instant(handle: JSDate) -> Optional[Instant]:
    """
    Дата хоста → Instant.

    Returns:
        Instant или None для невалидной даты
    """
    if not is_valid(handle):
        return None
    return Instant(epoch_ms=int(handle.time_value))


def from_instant(instant: Instant) -> JSDate:
    """Instant → дата хоста (обратное к to_instant на валидных датах)."""
    return from_epoch_millis(instant)


# =============================================================================
# DATETIME / DATE
# =============================================================================


def to_date_time(handle: JSDate) -> Optional[DateTime]:
    """
    Дата хоста → DateTime (UTC).

    Returns:
        DateTime или None для невалидной даты
    """
    instant = to_instant(handle)
    if instant is None:
        return None
    return DateTime.from_instant(instant)


def from_date_time(value: DateTime) -> JSDate:
    """
    DateTime → дата хоста.

    Раскладывает DateTime на UTC-компоненты (месяц 1-based → 0-based)
    и вызывает from_components. Результат всегда валиден.
    """
    return from_components(
        value.date.year,
        value.date.month - 1,
        value.date.day,
        value.time.hour,
        value.time.minute,
        value.time.second,
        value.time.millisecond,
    )


def to_date(handle: JSDate) -> Optional[Date]:
    """Дата хоста → календарная дата (UTC), без времени суток."""
    date_time = to_date_time(handle)
    if date_time is None:
        return None
    return date_time.date


# =============================================================================
# PYTHON DATETIME
# =============================================================================


def to_py_datetime(handle: JSDate) -> Optional[datetime]:
    """
    Дата хоста → aware datetime в UTC.

    Returns:
        datetime или None, если дата невалидна или вне диапазона
        datetime.datetime (годы 1..9999)
    """
    if not is_valid(handle):
        return None
    try:
        return _PY_EPOCH + timedelta(milliseconds=handle.time_value)
    except OverflowError:
        return None


def from_py_datetime(value: datetime) -> JSDate:
    """
    Aware datetime → дата хоста.

    Микросекунды сверх целой миллисекунды отбрасываются.

    Raises:
        ValueError: Если value naive (без tzinfo)
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"datetime must be timezone-aware, got naive {value!r}")
    return from_time(float((value - _PY_EPOCH) // _ONE_MS))
