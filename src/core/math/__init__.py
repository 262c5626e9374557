"""
Core math modules для redate

Календарные примитивы для расчёта относительных дат.
"""

# Calendar math
from src.core.math.calendar_math import (
    # Constants
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    FEBRUARY_INDEX,
    MONTHS_PER_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    # Functions
    days_in_month,
    is_leap_year,
    total_milliseconds,
)

__all__ = [
    # Calendar math — Constants
    "DAYS_IN_MONTH",
    "DAYS_PER_WEEK",
    "FEBRUARY_INDEX",
    "MONTHS_PER_YEAR",
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "MS_PER_SECOND",
    # Calendar math — Functions
    "days_in_month",
    "is_leap_year",
    "total_milliseconds",
]
