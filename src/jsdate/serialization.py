"""
Serialization: структурированная форма даты хоста

Дата сериализуется одним числовым полем: {"fromTime": <миллисекунды>}.
encode это get_time, decode это from_time после проверки контракта
contracts/schema/js_date.json.

Невалидная дата не сериализуется: encode выбрасывает InvalidDateError,
decode отвергает NaN и значения вне диапазона (DateDecodeError).
"""

import json
from typing import Any, Dict, Final

import structlog
from jsonschema import ValidationError

from src.core.contracts import JS_DATE_VALIDATOR
from src.core.math.numerical_safeguards import is_valid_float
from src.jsdate.accessors import get_time
from src.jsdate.constructors import from_time
from src.jsdate.errors import DateDecodeError, InvalidDateError
from src.jsdate.handle import JSDate, is_valid

logger = structlog.get_logger(__name__)

FROM_TIME_FIELD: Final[str] = "fromTime"


def encode(handle: JSDate) -> Dict[str, float]:
    """
    Дата хоста → {"fromTime": <number>}.

    Raises:
        InvalidDateError: Если дата невалидна
    """
    if not is_valid(handle):
        raise InvalidDateError("Cannot encode Invalid Date")
    return {FROM_TIME_FIELD: get_time(handle)}


def decode(data: Any) -> JSDate:
    """
    {"fromTime": <number>} → дата хоста.

    Raises:
        DateDecodeError: Если данные не соответствуют контракту
            или описывают невалидную дату
    """
    try:
        JS_DATE_VALIDATOR.validate(data)
    except ValidationError as e:
        logger.debug(
            "jsdate.decode_rejected",
            reason="schema",
            errors=JS_DATE_VALIDATOR.error_messages(data),
        )
        raise DateDecodeError(f"Invalid serialized date: {e.message}") from e

    value = data[FROM_TIME_FIELD]
    if not is_valid_float(value):
        logger.debug("jsdate.decode_rejected", reason="non_finite", value=value)
        raise DateDecodeError(f"{FROM_TIME_FIELD} must be finite, got {value}")

    handle = from_time(value)
    if not is_valid(handle):
        raise DateDecodeError(f"{FROM_TIME_FIELD} {value} is outside the date range")
    return handle


def encode_json(handle: JSDate) -> str:
    """Дата хоста → JSON-строка."""
    return json.dumps(encode(handle), allow_nan=False)


def decode_json(text: str) -> JSDate:
    """
    JSON-строка → дата хоста.

    Raises:
        DateDecodeError: Если строка не JSON или не соответствует контракту
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DateDecodeError(f"Invalid JSON: {e.msg}") from e
    return decode(data)
