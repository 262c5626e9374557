"""
CalendarOffset — Фиксированное смещение от UTC

Используется при парсинге дат без явной зоны: ISO строка без designator
читается в default offset. Default offset по умолчанию — текущее локальное
смещение окружения, вычисленное ОДИН раз за процесс (lazy singleton),
либо явно переданное через конфигурацию парсера.

Immutable Pydantic модель.
"""

import re
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Zone designator: "Z", "+05", "+0530", "+05:30", "-08:00"
ZONE_DESIGNATOR_PATTERN: Final[re.Pattern] = re.compile(
    r"^\s*(?:(Z)|([+-])(\d{2})(?::?(\d{2}))?)\s*$"
)

MAX_OFFSET_HOURS: Final[int] = 23
MAX_OFFSET_MINUTES: Final[int] = 59


# =============================================================================
# CALENDAR OFFSET MODEL
# =============================================================================


class CalendarOffset(BaseModel):
    """
    Смещение от UTC как пара (часы, минуты) со знаком.

    Immutable модель (frozen=True). Знак хранится отдельно, чтобы
    корректно представлять смещения вида -00:30.
    """

    sign: int = Field(1, description="Знак смещения: +1 (восточнее UTC) или -1")
    hours: int = Field(0, ge=0, le=MAX_OFFSET_HOURS, description="Часы смещения")
    minutes: int = Field(0, ge=0, le=MAX_OFFSET_MINUTES, description="Минуты смещения")

    model_config = {"frozen": True}

    @field_validator("sign")
    @classmethod
    def validate_sign(cls, v: int) -> int:
        """Знак может быть только +1 или -1."""
        if v not in (1, -1):
            raise ValueError(f"sign must be +1 or -1, got {v}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def utc(cls) -> "CalendarOffset":
        """Нулевое смещение (UTC)."""
        return cls(sign=1, hours=0, minutes=0)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "CalendarOffset":
        """
        Конверсия timedelta → CalendarOffset.

        Секунды смещения отбрасываются (исторические LMT-зоны).

        Raises:
            ValueError: Если смещение по модулю >= 24 часов
        """
        total_seconds = int(delta.total_seconds())
        sign = -1 if total_seconds < 0 else 1
        hours, remainder = divmod(abs(total_seconds), 3600)
        minutes = remainder // 60
        if hours > MAX_OFFSET_HOURS:
            raise ValueError(f"UTC offset out of range: {delta}")
        return cls(sign=sign, hours=hours, minutes=minutes)

    @classmethod
    def local(cls, now: Optional[datetime] = None) -> "CalendarOffset":
        """
        Текущее локальное смещение окружения.

        Смещение берётся для момента "now" (а не для парсимой даты),
        поэтому при переходе на летнее время результат зависит от того,
        когда смещение вычислено.

        Args:
            now: Момент для вычисления (default: текущее локальное время)
        """
        if now is None:
            now = datetime.now().astimezone()
        elif now.tzinfo is None:
            now = now.astimezone()
        return cls.from_timedelta(now.utcoffset() or timedelta(0))

    @classmethod
    def parse(cls, text: str) -> Optional["CalendarOffset"]:
        """
        Парсинг zone designator: "Z", "±HH", "±HHMM", "±HH:MM".

        Returns:
            CalendarOffset или None, если строка не является designator
            или компоненты вне допустимого диапазона
        """
        m = ZONE_DESIGNATOR_PATTERN.match(text)
        if m is None:
            return None
        if m.group(1):
            return cls.utc()

        hours = int(m.group(3))
        minutes = int(m.group(4) or "0")
        if hours > MAX_OFFSET_HOURS or minutes > MAX_OFFSET_MINUTES:
            return None
        return cls(sign=-1 if m.group(2) == "-" else 1, hours=hours, minutes=minutes)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_timedelta(self) -> timedelta:
        """Смещение как timedelta (со знаком)."""
        return self.sign * timedelta(hours=self.hours, minutes=self.minutes)

    def to_timezone(self) -> timezone:
        """Смещение как datetime.timezone для aware datetime."""
        return timezone(self.to_timedelta())

    def __str__(self) -> str:
        return f"{'-' if self.sign < 0 else '+'}{self.hours:02d}:{self.minutes:02d}"


# =============================================================================
# PROCESS-WIDE DEFAULT
# =============================================================================


@lru_cache(maxsize=1)
def default_local_offset() -> CalendarOffset:
    """
    Локальное смещение, вычисленное один раз за процесс.

    Используется ISO парсером, если в конфигурации не задан default_offset.
    После первого вызова значение не пересчитывается (read-only).
    """
    return CalendarOffset.local()
