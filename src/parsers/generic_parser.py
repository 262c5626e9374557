"""Generic parser: даты в формате RFC 2822.

Делегирует стандартному парсеру платформы (email.utils.parsedate_to_datetime),
например "Tue, 16 Mar 2010 13:24:01 -0500" или "16 Mar 2010 13:24:01 GMT".

Строки без зоны (или с "-0000") читаются в default offset.
"""

import logging
from dataclasses import dataclass
from email.utils import parsedate_to_datetime
from typing import Optional

from src.core.domain.instant import ensure_aware
from src.core.domain.offset import CalendarOffset, default_local_offset
from src.core.domain.parse_result import ParseResult
from src.parsers.base import DateParser

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GenericParserConfig:
    """Конфигурация GenericParser."""

    # Смещение для строк без зоны (None → default_local_offset())
    default_offset: Optional[CalendarOffset] = None


# =============================================================================
# PARSER
# =============================================================================


class GenericParser(DateParser):
    """Парсер RFC 2822 строк через стандартную библиотеку."""

    name = "generic"

    def __init__(self, config: Optional[GenericParserConfig] = None):
        """
        Args:
            config: Конфигурация парсера (default: GenericParserConfig())
        """
        self.config = config or GenericParserConfig()
        self.default_offset = self.config.default_offset or default_local_offset()

    def parse(self, text: str) -> ParseResult:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError, OverflowError) as e:
            logger.debug("generic parser miss for %r: %s", text, e)
            return ParseResult.no_match(self.name)

        return ParseResult(instant=ensure_aware(parsed, self.default_offset), parser_name=self.name)
