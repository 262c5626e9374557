"""ParserChain — упорядоченная fallback chain парсеров.

Парсеры пробуются в фиксированном порядке регистрации; первый совпавший
результат выигрывает. Если все парсеры не совпали, возвращается
ParseResult.no_match("chain"): адаптер должен оставить текст без изменений.

Порядок по умолчанию:
1. GenericParser (RFC 2822)
2. IsoParser (ISO-8601 calendar dates)
"""

import logging
from typing import Iterable, Optional, Tuple

from src.core.domain.offset import CalendarOffset
from src.core.domain.parse_result import ParseResult
from src.parsers.base import DateParser
from src.parsers.generic_parser import GenericParser, GenericParserConfig
from src.parsers.iso_parser import IsoParser, IsoParserConfig

logger = logging.getLogger(__name__)

CHAIN_NAME = "chain"


def default_parsers(default_offset: Optional[CalendarOffset] = None) -> Tuple[DateParser, ...]:
    """
    Набор парсеров по умолчанию в порядке приоритета.

    Args:
        default_offset: Смещение для дат без зоны (None → локальное смещение процесса)
    """
    return (
        GenericParser(GenericParserConfig(default_offset=default_offset)),
        IsoParser(IsoParserConfig(default_offset=default_offset)),
    )


class ParserChain:
    """Упорядоченный список стратегий парсинга."""

    def __init__(self, parsers: Optional[Iterable[DateParser]] = None):
        """
        Args:
            parsers: Парсеры в порядке приоритета (default: default_parsers())

        Raises:
            ValueError: Если список пуст или имена парсеров не уникальны
        """
        self.parsers: Tuple[DateParser, ...] = (
            tuple(parsers) if parsers is not None else default_parsers()
        )
        if not self.parsers:
            raise ValueError("ParserChain requires at least one parser")

        names = [p.name for p in self.parsers]
        if len(set(names)) != len(names):
            raise ValueError(f"Parser names must be unique, got {names}")

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parsers)

    def parse(self, text: str) -> ParseResult:
        """
        Прогон текста через цепочку.

        Returns:
            Первый совпавший ParseResult или ParseResult.no_match("chain")
        """
        for parser in self.parsers:
            result = parser.parse(text)
            if result.matched:
                logger.debug("%s parser matched %r -> %s", parser.name, text, result.instant)
                return result

        logger.debug("no parser matched %r (tried %s)", text, ", ".join(self.names))
        return ParseResult.no_match(CHAIN_NAME)
