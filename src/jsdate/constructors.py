"""
Constructors: создание дат хоста

- from_components: компоненты в UTC
- from_components_local: компоненты в локальном поясе (зависит от окружения)
- from_epoch_millis / from_time: из миллисекунд
- parse: из строки (зависит от окружения)
- now: текущее время (зависит от окружения)

Некорректный вход никогда не приводит к исключению: результатом является
невалидная дата.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union

from src.core.domain.instant import Instant
from src.core.math.numerical_safeguards import NAN, is_valid_float, to_number
from src.core.math.time_values import make_date, make_day, make_time, time_clip
from src.jsdate.environment import HostEnvironment, local_offset_ms
from src.jsdate.handle import JSDate
from src.jsdate.parsing import parse_time_value


# =============================================================================
# COMPONENTS
# =============================================================================


@dataclass(frozen=True)
class DateComponents:
    """
    Числовые компоненты даты.

    Месяц 0-based (0 = январь), как у объекта даты хоста.
    """

    year: float
    month: float
    day: float = 1
    hour: float = 0
    minute: float = 0
    second: float = 0
    millisecond: float = 0


def _components_time_value(
    year: Any,
    month: Any,
    day: Any,
    hour: Any,
    minute: Any,
    second: Any,
    millisecond: Any,
) -> float:
    """Time value (до TimeClip) из компонентов, без учёта пояса."""
    day_number = make_day(to_number(year), to_number(month), to_number(day))
    time = make_time(
        to_number(hour), to_number(minute), to_number(second), to_number(millisecond)
    )
    return make_date(day_number, time)


def from_components(
    year: float,
    month: float,
    day: float = 1,
    hour: float = 0,
    minute: float = 0,
    second: float = 0,
    millisecond: float = 0,
) -> JSDate:
    """
    Дата из компонентов, интерпретируемых как UTC.

    Выход за пределы поля переносится (месяц 12 это январь следующего
    года), дробные части усекаются. Год 0..99 используется как есть.

    Args:
        year: Год
        month: Месяц (0-based)
        day: День месяца
        hour, minute, second, millisecond: Время суток

    Returns:
        JSDate; невалидная, если хотя бы один компонент не конечен
        или результат вне диапазона хоста

    Examples:
        >>> from_components(2018, 0, 5, 12, 30)
        (fromTime 1515155400000.0)
    """
    t = _components_time_value(year, month, day, hour, minute, second, millisecond)
    return JSDate(time_value=time_clip(t))


def from_components_local(
    components: Union[DateComponents, Mapping[str, Any]],
    env: HostEnvironment,
) -> JSDate:
    """
    Дата из компонентов, интерпретируемых в локальном поясе окружения.

    Args:
        components: DateComponents или mapping с теми же ключами
        env: Окружение (используется env.zone)

    Returns:
        JSDate
    """
    if not isinstance(components, DateComponents):
        components = DateComponents(**components)

    local_t = _components_time_value(
        components.year,
        components.month,
        components.day,
        components.hour,
        components.minute,
        components.second,
        components.millisecond,
    )
    if not is_valid_float(local_t):
        return JSDate(time_value=NAN)

    return JSDate(time_value=time_clip(local_t - local_offset_ms(env.zone, local_t)))


# =============================================================================
# EPOCH MILLISECONDS
# =============================================================================


def from_epoch_millis(instant: Instant) -> JSDate:
    """Дата из Instant (всегда валидная)."""
    return JSDate(time_value=instant.as_float())


def from_time(ms: float) -> JSDate:
    """
    Дата из произвольного числа миллисекунд.

    Returns:
        JSDate; невалидная для NaN/Inf и значений вне ±8.64e15
    """
    return JSDate(time_value=time_clip(to_number(ms)))


# =============================================================================
# AMBIENT STATE
# =============================================================================


def parse(text: str, env: HostEnvironment) -> JSDate:
    """
    Разбор строки в дату.

    Гарантированно поддерживаются ISO 8601 (формат даты хоста) и RFC 2822;
    остальные форматы разбираются по мере возможности. Строки без явного
    смещения с временем суток интерпретируются в локальном поясе env.

    Returns:
        JSDate; невалидная, если строку разобрать не удалось
    """
    return JSDate(time_value=time_clip(parse_time_value(text, env.zone)))


def now(env: HostEnvironment) -> JSDate:
    """Текущее время по часам окружения."""
    return from_time(env.clock.now_ms())
