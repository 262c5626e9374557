"""
ParseResult — результат попытки парсинга строки даты

"No match" — обычное значение, а не ошибка: парсеры пробуются
последовательно как fallback chain.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ParseResult:
    """Результат парсинга."""

    instant: Optional[datetime]
    parser_name: str

    @property
    def matched(self) -> bool:
        return self.instant is not None

    @classmethod
    def no_match(cls, parser_name: str) -> "ParseResult":
        return cls(instant=None, parser_name=parser_name)
