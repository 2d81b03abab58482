"""
Parsing: разбор строк в time value

Порядок попыток:
1. ISO 8601 в формате даты хоста (YYYY-MM-DDTHH:mm:ss.sssZ и сокращения,
   расширенные годы ±YYYYYY)
2. Формат вывода самого хоста (Fri Jan 05 2018 13:30:00 GMT+0100 (...))
3. RFC 2822 (email.utils.parsedate_tz)

Правила интерпретации пояса:
- ISO только с датой: UTC
- ISO с временем без смещения: локальное время
- RFC 2822 / формат хоста без пояса: локальное время
- RFC 2822 с '-0000': локальное время; с неизвестным именем пояса: NaN

Неразобранная строка даёт NaN, исключения наружу не выходят.
"""

import re
from email.utils import parsedate_tz
from typing import Optional

import structlog

from src.core.math.numerical_safeguards import NAN, is_valid_float
from src.core.math.time_values import (
    MS_PER_MINUTE,
    MS_PER_SECOND,
    days_in_month,
    make_date,
    make_day,
    make_time,
)
from src.jsdate.environment import LocalZone, local_offset_ms

logger = structlog.get_logger(__name__)


# =============================================================================
# ШАБЛОНЫ
# =============================================================================

_ISO_RE = re.compile(
    r"""
    ^(?P<year>[+-]\d{6}|\d{4})
    (?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?
    (?:T
        (?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?
        (?P<zone>Z|[+-]\d{2}:\d{2})?
    )?$
    """,
    re.VERBOSE | re.ASCII,
)

MONTH_NAMES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DAY_NAMES: tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_HOST_RE = re.compile(
    r"""
    ^(?:(?:Sun|Mon|Tue|Wed|Thu|Fri|Sat)[a-z]*,?\s+)?
    (?P<month>Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+
    (?P<day>\d{1,2}),?\s+
    (?P<year>-?\d{1,6})
    (?:\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?
    (?:\s+(?P<gmt>GMT|UTC|UT|Z)(?P<offset>[+-]\d{2}:?\d{2})?)?
    (?:\s+\([^)]*\))?$
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_COMMENT_RE = re.compile(r"\([^)]*\)")

# Пояс в конце строки RFC 2822: имя или ±HHMM
_RFC_ZONE_RE = re.compile(r"(?:^|[\s\d])(?P<zone>[A-Za-z]+|[+-]\d{4})$", re.ASCII)

_RFC_ZONE_NAMES: frozenset[str] = frozenset(
    {"UT", "UTC", "GMT", "Z", "EST", "EDT", "CST", "CDT", "MST", "MDT", "PST", "PDT"}
)

# RFC 2822: '-0000' означает, что смещение от UTC неизвестно
_UNKNOWN_OFFSET = "-0000"


# =============================================================================
# ОБЩИЕ ПРОВЕРКИ
# =============================================================================


def _valid_date(year: int, month: int, day: int) -> bool:
    """month 1-based"""
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month - 1)


def _valid_time(hour: int, minute: int, second: int, millisecond: int) -> bool:
    if hour == 24:
        return minute == 0 and second == 0 and millisecond == 0
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59


def _compose(
    year: int, month: int, day: int, hour: int, minute: int, second: int, millisecond: int
) -> float:
    """Time value без учёта пояса; month 1-based"""
    return make_date(make_day(year, month - 1, day), make_time(hour, minute, second, millisecond))


def _to_utc(local_t: float, zone: LocalZone) -> float:
    if not is_valid_float(local_t):
        return NAN
    return local_t - local_offset_ms(zone, local_t)


def _offset_minutes(text: str) -> Optional[int]:
    """'+01:00' / '+0100' → 60; None при недопустимом значении"""
    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        return None
    return sign * (hours * 60 + minutes)


# =============================================================================
# ISO 8601
# =============================================================================


def parse_iso(text: str, zone: LocalZone) -> Optional[float]:
    """
    Разбор строки формата даты хоста (подмножество ISO 8601).

    Returns:
        Time value, NaN для строки правильной формы с недопустимыми полями,
        None если строка не в этом формате
    """
    match = _ISO_RE.match(text)
    if match is None:
        return None

    if match["year"] == "-000000":
        return NAN

    year = int(match["year"])
    month = int(match["month"] or 1)
    day = int(match["day"] or 1)
    hour = int(match["hour"] or 0)
    minute = int(match["minute"] or 0)
    second = int(match["second"] or 0)
    millisecond = int((match["fraction"] or "0").ljust(3, "0")[:3])

    if not _valid_date(year, month, day) or not _valid_time(hour, minute, second, millisecond):
        return NAN

    t = _compose(year, month, day, hour, minute, second, millisecond)

    if match["hour"] is None:
        return t

    zone_text = match["zone"]
    if zone_text is None:
        return _to_utc(t, zone)
    if zone_text == "Z":
        return t

    offset = _offset_minutes(zone_text)
    if offset is None:
        return NAN
    return t - offset * MS_PER_MINUTE


# =============================================================================
# ФОРМАТ ХОСТА
# =============================================================================


def parse_host_format(text: str, zone: LocalZone) -> Optional[float]:
    """
    Разбор строк вида 'Fri Jan 05 2018 13:30:00 GMT+0100 (CET)'.

    Это формат to_string / to_date_string; без 'GMT' время локальное.
    """
    match = _HOST_RE.match(text)
    if match is None:
        return None

    year = int(match["year"])
    month = MONTH_NAMES.index(match["month"][:3].capitalize()) + 1
    day = int(match["day"])
    hour = int(match["hour"] or 0)
    minute = int(match["minute"] or 0)
    second = int(match["second"] or 0)

    if not _valid_date(year, month, day) or not _valid_time(hour, minute, second, 0):
        return NAN

    t = _compose(year, month, day, hour, minute, second, 0)

    if match["gmt"] is None:
        return _to_utc(t, zone)

    if match["offset"] is None:
        return t

    offset = _offset_minutes(match["offset"])
    if offset is None:
        return NAN
    return t - offset * MS_PER_MINUTE


# =============================================================================
# RFC 2822
# =============================================================================


def parse_rfc2822(text: str, zone: LocalZone) -> Optional[float]:
    """
    Разбор RFC 2822 ('Fri, 05 Jan 2018 12:30:00 GMT').

    Комментарии в скобках игнорируются. Двузначные годы расширяются
    по правилам email.utils (00-68 → 20xx, 69-99 → 19xx).

    Пояс определяется по последнему токену: без пояса и с '-0000' время
    локальное, неизвестное имя пояса даёт NaN.
    """
    stripped = _COMMENT_RE.sub(" ", text).strip()
    if not stripped or not stripped.isascii():
        return None

    try:
        parsed = parsedate_tz(stripped)
    except (ValueError, IndexError, TypeError):
        parsed = None
    if parsed is None:
        return None

    year, month, day, hour, minute, second = parsed[:6]

    if not _valid_date(year, month, day) or not _valid_time(hour, minute, second, 0):
        return NAN

    t = _compose(year, month, day, hour, minute, second, 0)

    # parsedate_tz возвращает смещение 0 и без пояса, и для неизвестного имени
    zone_match = _RFC_ZONE_RE.search(stripped)
    zone_token = zone_match["zone"].upper() if zone_match is not None else None

    if zone_token is None or zone_token == _UNKNOWN_OFFSET:
        return _to_utc(t, zone)

    if zone_token[0] in "+-":
        offset = _offset_minutes(zone_token)
        if offset is None:
            return NAN
        return t - offset * MS_PER_MINUTE

    if zone_token not in _RFC_ZONE_NAMES:
        return NAN
    return t - parsed[9] * MS_PER_SECOND


# =============================================================================
# ENTRY POINT
# =============================================================================


def parse_time_value(text: str, zone: LocalZone) -> float:
    """
    Разбор строки в time value (до TimeClip).

    Args:
        text: Строка с датой
        zone: Локальный пояс для строк без явного смещения

    Returns:
        Time value или NaN
    """
    if not isinstance(text, str):
        logger.debug("jsdate.parse_failed", reason="not_a_string", value_type=type(text).__name__)
        return NAN

    candidate = text.strip()
    for parser in (parse_iso, parse_host_format, parse_rfc2822):
        result = parser(candidate, zone)
        if result is not None:
            if not is_valid_float(result):
                logger.debug("jsdate.parse_failed", reason="field_out_of_range", text=text)
            return result

    logger.debug("jsdate.parse_failed", reason="unrecognized_format", text=text)
    return NAN
