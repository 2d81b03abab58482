"""
JSDate: адаптер объекта даты хоста

Дескриптор даты (JSDate), его конструкторы, аксессоры, строковые форматы,
преобразования в календарные типы и структурированная сериализация.
"""

from src.jsdate.accessors import (
    get_date,
    get_day,
    get_full_year,
    get_hours,
    get_milliseconds,
    get_minutes,
    get_month,
    get_seconds,
    get_time,
    get_timezone_offset,
    get_utc_date,
    get_utc_day,
    get_utc_full_year,
    get_utc_hours,
    get_utc_milliseconds,
    get_utc_minutes,
    get_utc_month,
    get_utc_seconds,
)
from src.jsdate.constructors import (
    DateComponents,
    from_components,
    from_components_local,
    from_epoch_millis,
    from_time,
    now,
    parse,
)
from src.jsdate.converters import (
    from_date_time,
    from_instant,
    from_py_datetime,
    to_date,
    to_date_time,
    to_instant,
    to_py_datetime,
)
from src.jsdate.environment import (
    Clock,
    FixedClock,
    FixedOffsetZone,
    HostEnvironment,
    LocalZone,
    SystemClock,
    SystemLocalZone,
    fixed_environment,
    system_environment,
)
from src.jsdate.errors import (
    DateDecodeError,
    ForeignDateError,
    InvalidDateError,
    JSDateError,
)
from src.jsdate.formatting import (
    INVALID_DATE_TEXT,
    to_date_string,
    to_iso_string,
    to_json,
    to_string,
    to_time_string,
    to_utc_string,
)
from src.jsdate.handle import INVALID_DATE, JSDate, is_valid, read_date
from src.jsdate.serialization import decode, decode_json, encode, encode_json

__all__ = [
    # Handle
    "JSDate",
    "INVALID_DATE",
    "is_valid",
    "read_date",
    # Constructors
    "DateComponents",
    "from_components",
    "from_components_local",
    "from_epoch_millis",
    "from_time",
    "parse",
    "now",
    # Accessors: UTC
    "get_time",
    "get_utc_full_year",
    "get_utc_month",
    "get_utc_date",
    "get_utc_day",
    "get_utc_hours",
    "get_utc_minutes",
    "get_utc_seconds",
    "get_utc_milliseconds",
    # Accessors: local
    "get_full_year",
    "get_month",
    "get_date",
    "get_day",
    "get_hours",
    "get_minutes",
    "get_seconds",
    "get_milliseconds",
    "get_timezone_offset",
    # Formatting
    "INVALID_DATE_TEXT",
    "to_string",
    "to_date_string",
    "to_time_string",
    "to_utc_string",
    "to_iso_string",
    "to_json",
    # Converters
    "to_instant",
    "from_instant",
    "to_date_time",
    "from_date_time",
    "to_date",
    "to_py_datetime",
    "from_py_datetime",
    # Serialization
    "encode",
    "decode",
    "encode_json",
    "decode_json",
    # Environment
    "Clock",
    "SystemClock",
    "FixedClock",
    "LocalZone",
    "SystemLocalZone",
    "FixedOffsetZone",
    "HostEnvironment",
    "system_environment",
    "fixed_environment",
    # Errors
    "JSDateError",
    "InvalidDateError",
    "DateDecodeError",
    "ForeignDateError",
]
