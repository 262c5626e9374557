"""
Instant — хелперы для абсолютных моментов времени

Instant в системе — aware datetime.datetime. Naive значения допускаются
только на входе фасада и интерпретируются в заданном offset.
"""

from datetime import datetime
from typing import Optional

from src.core.domain.offset import CalendarOffset, default_local_offset


def ensure_aware(value: datetime, offset: Optional[CalendarOffset] = None) -> datetime:
    """
    Приведение datetime к aware.

    Args:
        value: Момент времени (aware или naive)
        offset: Смещение для naive значений (default: default_local_offset())

    Returns:
        value без изменений, если он aware; иначе value с tzinfo=offset
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    offset = offset or default_local_offset()
    return value.replace(tzinfo=offset.to_timezone())


def current_instant() -> datetime:
    """Текущий момент как aware datetime в локальной зоне окружения."""
    return datetime.now().astimezone()
