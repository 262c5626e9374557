"""ISO parser: подмножество ISO-8601 (только calendar dates).

Week dates и ordinal dates НЕ поддерживаются.

Грамматика:
- пробелы в начале/конце допускаются
- год: 4 цифры (обязателен)
- месяц: 2 цифры, дефис опционален; день: 2 цифры, только если есть месяц
- время: 2 цифры часа, опционально минуты и секунды (двоеточия опциональны),
  перед временем допускается "T" (только если за ним следует час)
- зона (только при наличии времени): "Z" или ±HH[[:]MM]

Значения по умолчанию:
- месяц = 1, день = 1, время = 00:00:00, минуты/секунды = 00
- зона = default offset (локальное смещение, вычисленное один раз за процесс,
  либо явно заданное в IsoParserConfig)

Строка, не прошедшая валидацию целиком, отвергается ДО извлечения полей.
Структурно валидная строка с несуществующей датой (месяц 13, 31 апреля,
час 24) тоже даёт no_match.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Optional

from src.core.domain.offset import CalendarOffset, default_local_offset
from src.core.domain.parse_result import ParseResult
from src.parsers.base import DateParser

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

ISO_DATE_PATTERN: Final[re.Pattern] = re.compile(
    r"^\s*"
    r"(?P<year>\d{4})(?:-?(?P<month>\d{2})(?:-?(?P<day>\d{2}))?)?"
    r"(?:"
    r"\s*T?\s*"
    r"(?P<hour>\d{2})(?::?(?P<minute>\d{2})(?::?(?P<second>\d{2}))?)?"
    r"\s*(?P<zone>[+-]\d{2}(?::?\d{2})?|Z)?"
    r")?"
    r"\s*$"
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class IsoParserConfig:
    """Конфигурация IsoParser."""

    # Смещение для строк без зоны (None → default_local_offset())
    default_offset: Optional[CalendarOffset] = None


# =============================================================================
# PARSER
# =============================================================================


class IsoParser(DateParser):
    """Парсер ISO-8601 calendar dates."""

    name = "iso"

    def __init__(self, config: Optional[IsoParserConfig] = None):
        """
        Args:
            config: Конфигурация парсера (default: IsoParserConfig())
        """
        self.config = config or IsoParserConfig()
        self.default_offset = self.config.default_offset or default_local_offset()

    def parse(self, text: str) -> ParseResult:
        m = ISO_DATE_PATTERN.match(text)
        if m is None:
            return ParseResult.no_match(self.name)

        offset = self._resolve_offset(m.group("zone"))
        if offset is None:
            logger.debug("iso parser: zone out of range in %r", text)
            return ParseResult.no_match(self.name)

        try:
            instant = datetime(
                int(m.group("year")),
                int(m.group("month") or 1),
                int(m.group("day") or 1),
                int(m.group("hour") or 0),
                int(m.group("minute") or 0),
                int(m.group("second") or 0),
                tzinfo=offset.to_timezone(),
            )
        except ValueError as e:
            logger.debug("iso parser: invalid calendar fields in %r: %s", text, e)
            return ParseResult.no_match(self.name)

        return ParseResult(instant=instant, parser_name=self.name)

    def _resolve_offset(self, zone: Optional[str]) -> Optional[CalendarOffset]:
        """Zone designator → CalendarOffset; без designator → default offset."""
        if not zone:
            return self.default_offset
        return CalendarOffset.parse(zone)
