"""RelativeDifference — календарное разложение длительности между двумя Instant.

Алгоритм:
1. delta_ms = to - from_ (целые миллисекунды)
2. Sub-day поля по модулю фиксированных делителей:
   seconds = (delta_ms mod 60000) // 1000
   minutes = (delta_ms mod 3600000) // 60000
   hours   = (delta_ms mod 86400000) // 3600000
   Эти поля НЕ заимствуют из календарных и не согласуются с ними.
3. years = to.year - from.year, months = to.month - from.month,
   при months < 0: заём из years.
4. days = to.day - from.day, при days < 0: заём из months, к days
   добавляется длина месяца from_ (не to!). Если заём опустил months
   ниже нуля, заём повторяется из years (months остаётся в [0, 11]).
5. weeks, days = divmod(days, 7)

Календарные поля читаются в одной системе отсчёта (frame): по умолчанию
это offset момента to ("now"), поэтому результат не зависит от зоны, в
которой была записана исходная дата.

Отрицательная длительность (to < from_, дата в будущем): разложение
зажимается в ноль и рендерится как "just now".
"""

import logging
from datetime import datetime
from typing import Optional

from src.core.domain.breakdown import DifferenceBreakdown
from src.core.domain.instant import ensure_aware
from src.core.domain.offset import CalendarOffset
from src.core.math.calendar_math import (
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    days_in_month,
    total_milliseconds,
)

logger = logging.getLogger(__name__)


def relative_difference(
    from_: datetime,
    to: datetime,
    frame: Optional[CalendarOffset] = None,
) -> DifferenceBreakdown:
    """
    Разложение длительности от from_ до to.

    Args:
        from_: Исходный момент (дата из текста)
        to: Опорный момент ("now")
        frame: Смещение, в котором читаются календарные поля
            (default: offset момента to)

    Returns:
        DifferenceBreakdown; нулевой, если to < from_
    """
    from_ = ensure_aware(from_)
    to = ensure_aware(to)

    delta_ms = total_milliseconds(to - from_)
    if delta_ms < 0:
        logger.debug("future instant %s relative to %s, clamping to zero", from_, to)
        return DifferenceBreakdown.zero()

    # Sub-day поля: миллисекундная арифметика
    seconds = (delta_ms % MS_PER_MINUTE) // MS_PER_SECOND
    minutes = (delta_ms % MS_PER_HOUR) // MS_PER_MINUTE
    hours = (delta_ms % MS_PER_DAY) // MS_PER_HOUR

    # Календарные поля в единой системе отсчёта
    tz = frame.to_timezone() if frame is not None else to.tzinfo
    start = from_.astimezone(tz)
    end = to.astimezone(tz)

    years = end.year - start.year
    months = end.month - start.month
    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    days = end.day - start.day
    if days < 0:
        months -= 1
        days += days_in_month(start.year, start.month - 1)
        if months < 0:
            years -= 1
            months += MONTHS_PER_YEAR

    weeks, days = divmod(days, DAYS_PER_WEEK)

    return DifferenceBreakdown(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )
