"""DateParser — общий интерфейс стратегий парсинга дат.

Каждая стратегия:
- имеет уникальное имя (name)
- реализует parse(text) -> ParseResult
- НИКОГДА не бросает исключений на некорректный текст: несовпадение
  возвращается как ParseResult.no_match(name) и продвигает fallback chain
"""

from abc import ABC, abstractmethod

from src.core.domain.parse_result import ParseResult


class DateParser(ABC):
    """Стратегия парсинга текстового представления даты в Instant."""

    name: str = "abstract"

    @abstractmethod
    def parse(self, text: str) -> ParseResult:
        """Попытка распознать дату.

        Args:
            text: Исходный текст (как есть, без предварительной обработки)

        Returns:
            ParseResult с aware datetime или no_match
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
