"""
Domain models and value objects.

Contains calendar value types (Date, Time, DateTime) and Instant.
"""

from src.core.domain.calendar import (
    MAX_YEAR,
    MIN_YEAR,
    Date,
    DateTime,
    Time,
    Weekday,
)
from src.core.domain.instant import (
    EPOCH,
    MAX_INSTANT_MS,
    MIN_INSTANT_MS,
    Instant,
)

__all__ = [
    # Calendar module
    "MIN_YEAR",
    "MAX_YEAR",
    "Date",
    "Time",
    "DateTime",
    "Weekday",
    # Instant module
    "EPOCH",
    "MIN_INSTANT_MS",
    "MAX_INSTANT_MS",
    "Instant",
]
