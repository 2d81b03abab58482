"""
JSDate: непрозрачный дескриптор даты хоста

Immutable Pydantic модель вокруг одного числа, time value
(миллисекунды от 1970-01-01T00:00:00Z).

Состояния:
- валидное: целое в [-8.64e15, 8.64e15]
- невалидное (Invalid Date): NaN

Создаётся только конструкторами из src.jsdate.constructors; после создания
никогда не изменяется.
"""

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_valid_float
from src.core.math.time_values import time_clip
from src.jsdate.errors import ForeignDateError


class JSDate(BaseModel):
    """
    Дата хоста.

    Сравнение и порядок определяются числовым значением: невалидная дата
    не равна ничему, в том числе самой себе.
    """

    time_value: float = Field(..., description="Миллисекунды от эпохи (UTC) или NaN")

    model_config = {"frozen": True}

    @field_validator("time_value")
    @classmethod
    def validate_time_value(cls, v: float) -> float:
        """Проверка, что значение прошло TimeClip (или является NaN)"""
        if math.isnan(v):
            return v
        if time_clip(v) != v:
            raise ValueError(f"time_value {v} is not a clipped time value")
        return v + 0.0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self.time_value == other.time_value

    def __hash__(self) -> int:
        return hash(self.time_value)

    def __lt__(self, other: "JSDate") -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self.time_value < other.time_value

    def __le__(self, other: "JSDate") -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self.time_value <= other.time_value

    def __gt__(self, other: "JSDate") -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self.time_value > other.time_value

    def __ge__(self, other: "JSDate") -> bool:
        if not isinstance(other, JSDate):
            return NotImplemented
        return self.time_value >= other.time_value

    def __repr__(self) -> str:
        if math.isnan(self.time_value):
            return "(fromTime NaN)"
        return f"(fromTime {self.time_value!r})"

    __str__ = __repr__


INVALID_DATE = JSDate(time_value=float("nan"))


def is_valid(handle: JSDate) -> bool:
    """
    Единственный источник истины о валидности даты.

    Returns:
        True если дата представляет реальную точку во времени
    """
    return is_valid_float(handle.time_value)


def read_date(value: Any) -> JSDate:
    """
    Чтение значения неизвестного типа как даты хоста.

    Args:
        value: Произвольное значение

    Returns:
        value, если это JSDate (валидный или нет)

    Raises:
        ForeignDateError: Если value не является датой
    """
    if isinstance(value, JSDate):
        return value
    raise ForeignDateError(f"Type mismatch: expected Date, found {type(value).__name__}")
