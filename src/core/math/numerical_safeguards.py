"""
Numerical Safeguards: числовые примитивы для time value

Модуль обеспечивает единообразную обработку чисел, поступающих на вход
конструкторов даты:
- NaN/Inf проверки (sentinel "not-a-number" для невалидных дат)
- Приведение произвольного числового значения к float
- Усечение к целому (ToIntegerOrInfinity хост-платформы)
- Целочисленное деление и остаток с округлением к -inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нечисловой вход никогда не приводит к исключению (возвращается NaN)
2. NaN пропагирует через все операции, кроме явных проверок
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Any, Final

# =============================================================================
# SENTINEL
# =============================================================================

# Значение "not-a-number", которое возвращают аксессоры невалидной даты
NAN: Final[float] = float("nan")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(*values: float) -> bool:
    """True если все значения конечны."""
    return all(math.isfinite(v) for v in values)


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def to_number(value: Any) -> float:
    """
    Приведение значения к float без исключений.

    Args:
        value: Произвольное значение (int, float, Fraction, ...)

    Returns:
        float-представление; NaN для нечисловых значений,
        ±Inf для целых, не помещающихся в float

    Examples:
        >>> to_number(5)
        5.0
        >>> to_number("5")
        nan
        >>> to_number(10**400)
        inf
    """
    if isinstance(value, float):
        return value

    if not isinstance(value, numbers.Real):
        return NAN

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def to_integer(value: float) -> float:
    """
    Усечение к нулю (ToIntegerOrInfinity для конечных значений).

    Результат остаётся float, чтобы арифметика шла по правилам IEEE 754.

    Args:
        value: Конечное значение

    Returns:
        Целая часть value как float

    Raises:
        ValueError: Если value NaN или Inf

    Examples:
        >>> to_integer(2.7)
        2.0
        >>> to_integer(-2.7)
        -2.0
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be finite, got {value}")

    # + 0.0 нормализует -0.0
    return float(math.trunc(value)) + 0.0


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ АРИФМЕТИКА
# =============================================================================


def floor_div(value: float, divisor: int) -> int:
    """
    Деление с округлением к -inf.

    Examples:
        >>> floor_div(-1.0, 1000)
        -1
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    # Целые значения делим точно: float-деление теряет -1 мс около 1e8 дней
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return value // divisor
    return math.floor(value / divisor)


def positive_mod(value: float, divisor: int) -> float:
    """
    Остаток со знаком делителя (всегда в [0, divisor)).

    Examples:
        >>> positive_mod(-1.0, 1000)
        999.0
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")
    return value % divisor


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
