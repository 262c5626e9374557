"""
CalendarMath — Календарные примитивы (proleptic Gregorian)

Чистые функции без состояния:
- is_leap_year: проверка високосного года
- days_in_month: число дней в месяце (zero-based индекс месяца)
- total_milliseconds: точная конверсия timedelta → целые миллисекунды

Миллисекундные делители используются RelativeDifference для sub-day полей
(hours/minutes/seconds), которые НЕ согласуются с календарными полями.
"""

from datetime import timedelta
from typing import Final, Tuple

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MS_PER_SECOND: Final[int] = 1_000
MS_PER_MINUTE: Final[int] = 60_000
MS_PER_HOUR: Final[int] = 3_600_000
MS_PER_DAY: Final[int] = 86_400_000

DAYS_PER_WEEK: Final[int] = 7
MONTHS_PER_YEAR: Final[int] = 12

# Индекс февраля в zero-based нумерации месяцев
FEBRUARY_INDEX: Final[int] = 1

# Число дней в месяцах невисокосного года (январь = индекс 0)
DAYS_IN_MONTH: Final[Tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# =============================================================================
# КАЛЕНДАРЬ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Проверка високосного года по правилам григорианского календаря.

    Год високосный, если делится на 4, но не на 100, либо делится на 400.

    Args:
        year: Год (может быть любым целым, включая отрицательные)

    Returns:
        True если год високосный

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2012)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month_index: int) -> int:
    """
    Число дней в месяце.

    Args:
        year: Год (нужен только для февраля)
        month_index: Месяц в zero-based нумерации (0 = январь, 11 = декабрь)

    Returns:
        Число дней: значение из DAYS_IN_MONTH, 29 для февраля високосного года

    Raises:
        ValueError: Если month_index вне диапазона [0, 11]

    Examples:
        >>> days_in_month(2000, 1)
        29
        >>> days_in_month(1900, 1)
        28
        >>> days_in_month(2010, 2)
        31
    """
    if not 0 <= month_index < MONTHS_PER_YEAR:
        raise ValueError(f"month_index must be in [0, 11], got {month_index}")

    if month_index == FEBRUARY_INDEX and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month_index]


# =============================================================================
# МИЛЛИСЕКУНДЫ
# =============================================================================


def total_milliseconds(delta: timedelta) -> int:
    """
    Точная конверсия timedelta в целое число миллисекунд.

    Использует целочисленную арифметику (без float), поэтому результат
    детерминирован для любых длительностей. Микросекунды отбрасываются
    с округлением к минус бесконечности.

    Args:
        delta: Длительность (может быть отрицательной)

    Returns:
        Длительность в миллисекундах
    """
    return delta // timedelta(milliseconds=1)
