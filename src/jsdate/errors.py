"""
Исключения адаптера даты.

Невалидная дата сама по себе не исключение (это значение с NaN внутри).
Исключения возникают только в трёх местах:
- ISO-форматирование невалидной даты (InvalidDateError)
- Десериализация некорректных данных (DateDecodeError)
- Чтение чужого значения, которое не является датой (ForeignDateError)
"""


class JSDateError(Exception):
    """Базовое исключение адаптера даты."""


class InvalidDateError(JSDateError, ValueError):
    """
    Операция требует валидную дату, а получена Invalid Date.

    Аналог RangeError("Invalid time value") хоста.
    """

    def __init__(self, message: str = "Invalid time value"):
        super().__init__(message)


class DateDecodeError(JSDateError, ValueError):
    """Сериализованные данные не описывают валидную дату."""


class ForeignDateError(JSDateError, TypeError):
    """Значение не является датой хоста."""
