"""
DifferenceBreakdown — Разложение длительности между двумя Instant

Immutable Pydantic модель с семью полями:
years, months, weeks, days, hours, minutes, seconds.

Календарные поля (years/months/weeks/days) считаются с заёмом по календарю.
Sub-day поля (hours/minutes/seconds) считаются по модулю миллисекундной
длительности и НЕ согласованы с календарными полями: разложение может
одновременно содержать weeks=2 и hours=23, хотя эти часы не лежат
"внутри" последнего дня. Форматтер читает только одно доминирующее поле,
поэтому расхождение не видно в итоговой фразе.

Полная совместимость с JSON Schema (contracts/schema/difference_breakdown.json).
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class TimeUnit(str, Enum):
    """
    Единица разложения.

    Порядок объявления = приоритет выбора доминирующей единицы.
    """

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    @property
    def singular(self) -> str:
        """Единственное число: имя единицы без завершающей 's'."""
        return self.value[:-1]


# Единицы, для которых допустим "half" qualifier
HALF_CAPABLE_UNITS: Tuple[TimeUnit, ...] = (TimeUnit.YEARS, TimeUnit.MONTHS, TimeUnit.WEEKS)


# =============================================================================
# DIFFERENCE BREAKDOWN MODEL
# =============================================================================


class DifferenceBreakdown(BaseModel):
    """
    Структурное разложение длительности.

    Immutable модель (frozen=True). Создаётся заново на каждый расчёт,
    идентичности не имеет (равенство по значениям).

    Инварианты:
    - все поля >= 0
    - months ∈ [0, 11], days ∈ [0, 6] (после выделения weeks)
    - hours ∈ [0, 23], minutes ∈ [0, 59], seconds ∈ [0, 59]
    """

    # Календарные поля
    years: int = Field(0, ge=0, description="Полные календарные годы")
    months: int = Field(0, ge=0, le=11, description="Месяцы сверх полных лет")
    weeks: int = Field(0, ge=0, le=4, description="Недели внутри остатка дней")
    days: int = Field(0, ge=0, le=6, description="Дни сверх полных недель")

    # Sub-day поля (миллисекундная арифметика)
    hours: int = Field(0, ge=0, le=23, description="Часы (delta_ms mod сутки)")
    minutes: int = Field(0, ge=0, le=59, description="Минуты (delta_ms mod час)")
    seconds: int = Field(0, ge=0, le=59, description="Секунды (delta_ms mod минута)")

    model_config = {"frozen": True}

    @classmethod
    def zero(cls) -> "DifferenceBreakdown":
        """Нулевое разложение (рендерится как "just now")."""
        return cls()

    def value_of(self, unit: TimeUnit) -> int:
        """Значение поля для единицы."""
        return getattr(self, unit.value)

    def dominant_unit(self) -> Optional[TimeUnit]:
        """
        Доминирующая единица: первая ненулевая в порядке приоритета.

        Секунды никогда не доминируют: меньше минуты — это "just now".

        Returns:
            TimeUnit или None, если все поля от years до minutes нулевые
        """
        for unit in TimeUnit:
            if unit is TimeUnit.SECONDS:
                break
            if self.value_of(unit):
                return unit
        return None

    def is_zero(self) -> bool:
        """True если нет доминирующей единицы."""
        return self.dominant_unit() is None
