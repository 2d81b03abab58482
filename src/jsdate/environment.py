"""
Host Environment: часы и локальный часовой пояс

Операции, результат которых зависит от состояния машины (текущее время,
локальный часовой пояс), получают его только через явный HostEnvironment.
Скрытых обращений к datetime.now() или time.localtime() в адаптере нет.

- Clock: протокол часов (SystemClock, FixedClock)
- LocalZone: протокол локального пояса (SystemLocalZone, FixedOffsetZone)
- HostEnvironment: пара (clock, zone), передаваемая вызывающим кодом
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Final, Optional, Protocol

import structlog

from src.core.math.numerical_safeguards import validate_in_range
from src.core.math.time_values import MS_PER_DAY, MS_PER_MINUTE, equivalent_time

logger = structlog.get_logger(__name__)

# Смещение пояса строго меньше суток
MAX_OFFSET_MINUTES: Final[float] = 24 * 60 - 1


# =============================================================================
# CLOCK
# =============================================================================


class Clock(Protocol):
    """Источник текущего времени."""

    def now_ms(self) -> float:
        """Текущее время в миллисекундах от эпохи."""
        ...


class SystemClock:
    """Системные часы машины."""

    def now_ms(self) -> float:
        return float(time.time_ns() // 1_000_000)


@dataclass(frozen=True)
class FixedClock:
    """Часы, всегда показывающие одно и то же время (для тестов)."""

    epoch_ms: float

    def now_ms(self) -> float:
        return self.epoch_ms


# =============================================================================
# LOCAL ZONE
# =============================================================================


class LocalZone(Protocol):
    """
    Локальный часовой пояс хоста.

    offset_ms: local - UTC в миллисекундах (положительное восточнее Гринвича).
    """

    def offset_ms(self, utc_ms: float) -> float:
        """Смещение локального времени от UTC в момент utc_ms."""
        ...

    def zone_name(self, utc_ms: float) -> str:
        """Человекочитаемое имя пояса в момент utc_ms."""
        ...


class SystemLocalZone:
    """
    Локальный пояс операционной системы.

    Для моментов вне диапазона datetime платформы используется
    эквивалентный год (та же високосность и день недели 1 января).
    """

    def offset_ms(self, utc_ms: float) -> float:
        offset = self._localize(utc_ms).utcoffset()
        return offset.total_seconds() * 1000 if offset is not None else 0.0

    def zone_name(self, utc_ms: float) -> str:
        return self._localize(utc_ms).tzname() or ""

    def _localize(self, utc_ms: float) -> datetime:
        try:
            return datetime.fromtimestamp(utc_ms / 1000, tz=timezone.utc).astimezone()
        except (OverflowError, OSError, ValueError):
            logger.debug("jsdate.zone_fallback", utc_ms=utc_ms)
            shifted = equivalent_time(utc_ms)
            return datetime.fromtimestamp(shifted / 1000, tz=timezone.utc).astimezone()


@dataclass(frozen=True)
class FixedOffsetZone:
    """
    Пояс с постоянным смещением.

    Args:
        offset_minutes: Смещение local - UTC в минутах (+60 для UTC+01:00)
        name: Имя пояса; по умолчанию строится из смещения
    """

    offset_minutes: float = 0.0
    name: Optional[str] = None

    def __post_init__(self) -> None:
        validate_in_range(
            self.offset_minutes, "offset_minutes", -MAX_OFFSET_MINUTES, MAX_OFFSET_MINUTES
        )

    def offset_ms(self, utc_ms: float) -> float:
        return self.offset_minutes * MS_PER_MINUTE

    def zone_name(self, utc_ms: float) -> str:
        if self.name is not None:
            return self.name
        if self.offset_minutes == 0:
            return "Coordinated Universal Time"
        sign = "+" if self.offset_minutes > 0 else "-"
        hours, minutes = divmod(int(abs(self.offset_minutes)), 60)
        return f"GMT{sign}{hours:02d}:{minutes:02d}"


def local_offset_ms(zone: LocalZone, local_ms: float) -> float:
    """
    Смещение пояса для локального (wall clock) времени.

    Около перехода часов локальное время бывает пропущенным (весной)
    или повторяющимся (осенью). В обоих случаях используется смещение,
    действовавшее до перехода.

    Args:
        zone: Локальный пояс
        local_ms: Локальное время как time value

    Returns:
        Смещение local - UTC в миллисекундах
    """
    before = zone.offset_ms(local_ms - MS_PER_DAY)
    after = zone.offset_ms(local_ms + MS_PER_DAY)

    for candidate in (before, after):
        if zone.offset_ms(local_ms - candidate) == candidate:
            return candidate

    return before


# =============================================================================
# HOST ENVIRONMENT
# =============================================================================


@dataclass(frozen=True)
class HostEnvironment:
    """
    Внешнее состояние, от которого зависят недетерминированные операции.

    Передаётся явно в now(), parse(), from_components_local() и в
    локальные аксессоры.
    """

    clock: Clock = field(default_factory=SystemClock)
    zone: LocalZone = field(default_factory=SystemLocalZone)


def system_environment() -> HostEnvironment:
    """Окружение, привязанное к часам и поясу машины."""
    return HostEnvironment(clock=SystemClock(), zone=SystemLocalZone())


def fixed_environment(
    epoch_ms: float = 0.0,
    offset_minutes: float = 0.0,
    name: Optional[str] = None,
) -> HostEnvironment:
    """
    Полностью детерминированное окружение.

    Args:
        epoch_ms: Показание часов
        offset_minutes: Смещение пояса (local - UTC) в минутах
        name: Имя пояса

    Returns:
        HostEnvironment с FixedClock и FixedOffsetZone
    """
    return HostEnvironment(
        clock=FixedClock(epoch_ms=epoch_ms),
        zone=FixedOffsetZone(offset_minutes=offset_minutes, name=name),
    )
