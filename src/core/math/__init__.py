"""
Core math modules

Числовые примитивы и арифметика time value хост-платформы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    NAN,
    all_finite,
    floor_div,
    is_valid_float,
    positive_mod,
    to_integer,
    to_number,
    validate_in_range,
)

# Time Values
from src.core.math.time_values import (
    MAX_TIME_VALUE,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    TimeFields,
    date_from_time,
    day,
    day_from_year,
    days_in_month,
    days_in_year,
    equivalent_time,
    equivalent_year,
    hour_from_time,
    is_leap_year,
    make_date,
    make_day,
    make_time,
    min_from_time,
    month_from_time,
    ms_from_time,
    sec_from_time,
    split_time_value,
    time_clip,
    time_from_year,
    time_within_day,
    week_day,
    year_from_time,
)

__all__ = [
    # Numerical Safeguards
    "NAN",
    "all_finite",
    "floor_div",
    "is_valid_float",
    "positive_mod",
    "to_integer",
    "to_number",
    "validate_in_range",
    # Time Values: Constants
    "MAX_TIME_VALUE",
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "MS_PER_SECOND",
    # Time Values: Types
    "TimeFields",
    # Time Values: Decomposition
    "date_from_time",
    "day",
    "day_from_year",
    "days_in_month",
    "days_in_year",
    "hour_from_time",
    "is_leap_year",
    "min_from_time",
    "month_from_time",
    "ms_from_time",
    "sec_from_time",
    "split_time_value",
    "time_from_year",
    "time_within_day",
    "week_day",
    "year_from_time",
    # Time Values: Construction
    "make_date",
    "make_day",
    "make_time",
    "time_clip",
    # Time Values: Equivalent year
    "equivalent_time",
    "equivalent_year",
]
