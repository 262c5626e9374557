"""
RedateResult — результат обработки одного элемента адаптером

Immutable Pydantic модель. Если ни один парсер не распознал текст,
replacement=None и changed=False: адаптер обязан оставить исходный
текст без изменений.

Полная совместимость с JSON Schema (contracts/schema/redate_result.json).
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class RedateResult(BaseModel):
    """
    Результат redate для одного текста.

    Immutable модель (frozen=True).
    """

    original_text: str = Field(..., description="Исходный текст элемента")
    replacement: Optional[str] = Field(
        None, min_length=1, description="Относительная фраза или None (не изменять текст)"
    )
    parser_name: Optional[str] = Field(
        None, min_length=1, description="Имя парсера, распознавшего дату"
    )
    changed: bool = Field(..., description="Флаг замены текста")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_changed_consistency(self) -> "RedateResult":
        """changed=True тогда и только тогда, когда есть replacement."""
        if self.changed != (self.replacement is not None):
            raise ValueError(
                f"changed={self.changed} inconsistent with replacement={self.replacement!r}"
            )
        return self

    @classmethod
    def untouched(cls, original_text: str) -> "RedateResult":
        """Результат при полном отказе парсинга."""
        return cls(original_text=original_text, replacement=None, parser_name=None, changed=False)
