"""Relative — расчёт разложения и рендер относительных фраз.

- relative_difference: календарное разложение длительности
- RelativePhraseFormatter: выбор доминирующей единицы и рендер фразы
- Redater: фасад для адаптера отображения
"""

from .difference import relative_difference
from .formatter import (
    HALF_SUFFIX,
    JUST_NOW,
    FormatterConfig,
    RelativePhraseFormatter,
    format_breakdown,
)
from .redate import RedateConfig, Redater, redate

__all__ = [
    "relative_difference",
    "RelativePhraseFormatter",
    "FormatterConfig",
    "format_breakdown",
    "JUST_NOW",
    "HALF_SUFFIX",
    "Redater",
    "RedateConfig",
    "redate",
]
