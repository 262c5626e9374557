"""Redater — фасад для адаптера отображения.

Адаптер (DOM, шаблоны и т.п.) передаёт текст элемента и опорный момент
"now"; фасад возвращает фразу для замены либо None — оставить текст как есть.

Поток:
text → ParserChain → Instant → relative_difference(instant, now)
     → RelativePhraseFormatter → фраза

Фразы форматтера сами по себе не являются датами: повторный прогон
результата через фасад возвращает None, что защищает от двойной
трансформации одного и того же элемента.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from src.core.domain.instant import current_instant, ensure_aware
from src.core.domain.offset import CalendarOffset
from src.core.domain.redate_result import RedateResult
from src.parsers.chain import ParserChain, default_parsers
from src.relative.difference import relative_difference
from src.relative.formatter import FormatterConfig, RelativePhraseFormatter

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RedateConfig:
    """Конфигурация Redater."""

    # "2 and a half weeks ago" вместо "2 weeks ago"
    include_half: bool = False

    # Смещение для дат без зоны и для naive "now"
    # (None → локальное смещение, вычисленное один раз за процесс)
    default_offset: Optional[CalendarOffset] = None


# =============================================================================
# FUNCTIONS
# =============================================================================


def redate(from_: datetime, to: datetime, include_half: bool = False) -> str:
    """
    Относительная фраза для from_ относительно to.

    Args:
        from_: Абсолютный момент (дата из текста)
        to: Опорный момент ("now")
        include_half: Включать "and a half" для years/months/weeks

    Returns:
        Фраза вида "a year ago", "3 weeks ago", "just now"
    """
    breakdown = relative_difference(from_, to)
    return RelativePhraseFormatter().format(breakdown, include_half=include_half)


# =============================================================================
# REDATER
# =============================================================================


class Redater:
    """Фасад: текст элемента → относительная фраза."""

    def __init__(
        self,
        config: Optional[RedateConfig] = None,
        chain: Optional[ParserChain] = None,
    ):
        """
        Args:
            config: Конфигурация (default: RedateConfig())
            chain: Цепочка парсеров (default: default_parsers(config.default_offset))
        """
        self.config = config or RedateConfig()
        self.chain = chain or ParserChain(default_parsers(self.config.default_offset))
        self.formatter = RelativePhraseFormatter(
            FormatterConfig(include_half=self.config.include_half)
        )

    def process(self, text: str, now: Optional[datetime] = None) -> RedateResult:
        """
        Обработка одного текста.

        Args:
            text: Текст элемента
            now: Опорный момент (default: текущее локальное время)

        Returns:
            RedateResult; changed=False если дата не распознана
        """
        parsed = self.chain.parse(text)
        if not parsed.matched:
            return RedateResult.untouched(text)

        now = current_instant() if now is None else ensure_aware(now, self.config.default_offset)
        breakdown = relative_difference(parsed.instant, now)
        phrase = self.formatter.format(breakdown)

        return RedateResult(
            original_text=text,
            replacement=phrase,
            parser_name=parsed.parser_name,
            changed=True,
        )

    def redate_text(self, text: str, now: Optional[datetime] = None) -> Optional[str]:
        """Фраза для замены или None (оставить текст без изменений)."""
        return self.process(text, now).replacement

    def redate_many(
        self, items: Iterable[Tuple[str, Optional[datetime]]]
    ) -> List[RedateResult]:
        """
        Пакетная обработка пар (text, now) в исходном порядке.

        Args:
            items: Пары (текст элемента, опорный момент или None)

        Returns:
            Список RedateResult той же длины и в том же порядке
        """
        results = [self.process(text, now) for text, now in items]
        logger.debug(
            "redated %d of %d items", sum(1 for r in results if r.changed), len(results)
        )
        return results
