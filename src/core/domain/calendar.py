"""
Calendar: календарные типы Date, Time, DateTime

Immutable Pydantic модели. Месяц здесь 1-based (1 = январь), в отличие
от 0-based месяца объекта даты хоста.

DateTime ограничен тем же диапазоном, что и Instant, поэтому преобразования
DateTime ↔ Instant тотальны в обе стороны. Точность: миллисекунда;
более мелких единиц в этих типах нет.
"""

from enum import IntEnum
from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.core.domain.instant import MAX_INSTANT_MS, MIN_INSTANT_MS, Instant
from src.core.math.time_values import (
    days_in_month,
    make_date,
    make_day,
    make_time,
    split_time_value,
    week_day,
)

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

MIN_YEAR: Final[int] = -271821
MAX_YEAR: Final[int] = 275760


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(IntEnum):
    """День недели в нумерации хоста (0 = воскресенье)"""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# =============================================================================
# MODELS
# =============================================================================


class Date(BaseModel):
    """
    Календарная дата (пролептический григорианский календарь).

    Immutable модель (frozen=True).
    """

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR, description="Год (астрономический, 0 = 1 до н.э.)")
    month: int = Field(..., ge=1, le=12, description="Месяц (1-based)")
    day: int = Field(..., ge=1, le=31, description="День месяца")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "Date":
        """Проверка, что день существует в месяце"""
        limit = days_in_month(self.year, self.month - 1)
        if self.day > limit:
            raise ValueError(
                f"day {self.day} out of range for {self.year}-{self.month:02d} (max {limit})"
            )
        return self

    def weekday(self) -> Weekday:
        """День недели даты."""
        day_number = make_day(self.year, self.month - 1, self.day)
        return Weekday(week_day(make_date(day_number, 0)))


class Time(BaseModel):
    """
    Время суток с точностью до миллисекунды.

    Immutable модель (frozen=True).
    """

    hour: int = Field(0, ge=0, le=23, description="Час")
    minute: int = Field(0, ge=0, le=59, description="Минута")
    second: int = Field(0, ge=0, le=59, description="Секунда")
    millisecond: int = Field(0, ge=0, le=999, description="Миллисекунда")

    model_config = {"frozen": True}


class DateTime(BaseModel):
    """
    Дата и время суток (UTC).

    Immutable модель (frozen=True). Всегда лежит в диапазоне Instant.
    """

    date: Date = Field(..., description="Календарная дата")
    time: Time = Field(default_factory=Time, description="Время суток")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_instant_range(self) -> "DateTime":
        """Проверка, что DateTime представим как Instant"""
        epoch_ms = _epoch_ms(self)
        if not MIN_INSTANT_MS <= epoch_ms <= MAX_INSTANT_MS:
            raise ValueError(
                f"DateTime {self.date.year}-{self.date.month:02d}-{self.date.day:02d} "
                f"is outside the instant range"
            )
        return self

    def to_instant(self) -> Instant:
        """Преобразование в Instant (тотальное)."""
        return Instant(epoch_ms=_epoch_ms(self))

    @classmethod
    def from_instant(cls, instant: Instant) -> "DateTime":
        """
        Преобразование Instant → DateTime (UTC).

        Args:
            instant: Точка во времени

        Returns:
            DateTime, для которого to_instant() == instant
        """
        fields = split_time_value(instant.as_float())
        return cls(
            date=Date(year=fields.year, month=fields.month + 1, day=fields.date),
            time=Time(
                hour=fields.hours,
                minute=fields.minutes,
                second=fields.seconds,
                millisecond=fields.milliseconds,
            ),
        )


def _epoch_ms(value: DateTime) -> int:
    day_number = make_day(value.date.year, value.date.month - 1, value.date.day)
    time = make_time(
        value.time.hour, value.time.minute, value.time.second, value.time.millisecond
    )
    return int(make_date(day_number, time))
