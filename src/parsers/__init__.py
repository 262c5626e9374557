"""Parsers — упорядоченная fallback chain парсеров текстовых дат.

- GenericParser: RFC 2822 (стандартный парсер платформы)
- IsoParser: ISO-8601 calendar dates
- ParserChain: первый совпавший парсер выигрывает
"""

from .base import DateParser
from .chain import CHAIN_NAME, ParserChain, default_parsers
from .generic_parser import GenericParser, GenericParserConfig
from .iso_parser import ISO_DATE_PATTERN, IsoParser, IsoParserConfig

__all__ = [
    "DateParser",
    "GenericParser",
    "GenericParserConfig",
    "IsoParser",
    "IsoParserConfig",
    "ISO_DATE_PATTERN",
    "ParserChain",
    "CHAIN_NAME",
    "default_parsers",
]
