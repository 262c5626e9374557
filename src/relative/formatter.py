"""RelativePhraseFormatter — рендер DifferenceBreakdown в относительную фразу.

Выбор доминирующей единицы в строгом порядке приоритета:
years → months → weeks → days → hours → minutes → "just now".

Для years/months/weeks:
- "half" qualifier (только при include_half):
  years и months >= 6 | months и weeks >= 2 | weeks и days > 3
- value == 1 и не half → "a <singular> ago"
- иначе → "<value>[ and a half] <period> ago"

Для days/hours/minutes значение 1 имеет нерегулярную форму:
"yesterday", "an hour ago", "a minute ago".
"""

from dataclasses import dataclass
from typing import Dict, Final, Optional

from src.core.domain.breakdown import HALF_CAPABLE_UNITS, DifferenceBreakdown, TimeUnit


# =============================================================================
# PHRASES
# =============================================================================

JUST_NOW: Final[str] = "just now"
HALF_SUFFIX: Final[str] = " and a half"

# Нерегулярные формы для value == 1
SINGULAR_PHRASES: Final[Dict[TimeUnit, str]] = {
    TimeUnit.DAYS: "yesterday",
    TimeUnit.HOURS: "an hour ago",
    TimeUnit.MINUTES: "a minute ago",
}

# Порог половины: (доминирующая единица, следующая единица, порог, строгое сравнение)
HALF_THRESHOLDS: Final[Dict[TimeUnit, tuple]] = {
    TimeUnit.YEARS: (TimeUnit.MONTHS, 6, False),
    TimeUnit.MONTHS: (TimeUnit.WEEKS, 2, False),
    TimeUnit.WEEKS: (TimeUnit.DAYS, 3, True),
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatterConfig:
    """Конфигурация форматтера."""

    # Включать "and a half" для years/months/weeks
    include_half: bool = False


# =============================================================================
# FORMATTER
# =============================================================================


class RelativePhraseFormatter:
    """Форматтер относительных фраз (stateless)."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        """
        Args:
            config: Конфигурация форматтера (default: FormatterConfig())
        """
        self.config = config or FormatterConfig()

    def format(self, breakdown: DifferenceBreakdown, include_half: Optional[bool] = None) -> str:
        """
        Рендер разложения в фразу.

        Args:
            breakdown: Разложение длительности
            include_half: Переопределение config.include_half для вызова

        Returns:
            Фраза вида "3 weeks ago", "yesterday", "just now"
        """
        if include_half is None:
            include_half = self.config.include_half

        unit = breakdown.dominant_unit()
        if unit is None:
            return JUST_NOW

        value = breakdown.value_of(unit)

        if unit in HALF_CAPABLE_UNITS:
            half = include_half and self._is_half(breakdown, unit)
            if value == 1 and not half:
                return f"a {unit.singular} ago"
            return f"{value}{HALF_SUFFIX if half else ''} {unit.value} ago"

        if value == 1:
            return SINGULAR_PHRASES[unit]
        return f"{value} {unit.value} ago"

    @staticmethod
    def _is_half(breakdown: DifferenceBreakdown, unit: TimeUnit) -> bool:
        """Остаток доминирующей единицы больше половины следующей."""
        next_unit, threshold, strict = HALF_THRESHOLDS[unit]
        remainder = breakdown.value_of(next_unit)
        return remainder > threshold if strict else remainder >= threshold


def format_breakdown(breakdown: DifferenceBreakdown, include_half: bool = False) -> str:
    """Рендер разложения форматтером по умолчанию."""
    return RelativePhraseFormatter().format(breakdown, include_half=include_half)
