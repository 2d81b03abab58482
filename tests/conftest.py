"""
Общие фикстуры: детерминированные окружения хоста.

Тесты никогда не обращаются к часам и поясу машины: каждая
недетерминированная операция получает фиксированное окружение.
"""

import pytest

from src.jsdate import HostEnvironment, JSDate, fixed_environment

# 2018-01-05T12:30:00.000Z (пятница)
SAMPLE_MS = 1515155400000.0


@pytest.fixture
def utc_env() -> HostEnvironment:
    """UTC, часы на SAMPLE_MS"""
    return fixed_environment(epoch_ms=SAMPLE_MS, offset_minutes=0)


@pytest.fixture
def cet_env() -> HostEnvironment:
    """UTC+01:00"""
    return fixed_environment(
        epoch_ms=SAMPLE_MS, offset_minutes=60, name="Central European Standard Time"
    )


@pytest.fixture
def est_env() -> HostEnvironment:
    """UTC-05:00"""
    return fixed_environment(
        epoch_ms=SAMPLE_MS, offset_minutes=-300, name="Eastern Standard Time"
    )


@pytest.fixture
def sample_date() -> JSDate:
    """2018-01-05T12:30:00.000Z"""
    return JSDate(time_value=SAMPLE_MS)
