"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных (включая выход Pydantic моделей)
- Детекция нарушений required полей, типов и диапазонов
- Согласованность changed/replacement в redate_result
"""

from datetime import datetime, timezone

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    DifferenceBreakdownValidator,
    RedateResultValidator,
    SchemaLoader,
    validate_difference_breakdown,
    validate_redate_result,
)
from src.core.domain import CalendarOffset, DifferenceBreakdown, RedateResult
from src.relative import RedateConfig, Redater, relative_difference


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_breakdown():
    """Валидный difference_breakdown."""
    return {
        "years": 0,
        "months": 0,
        "weeks": 2,
        "days": 2,
        "hours": 10,
        "minutes": 35,
        "seconds": 59,
    }


@pytest.fixture
def valid_redate_result():
    """Валидный redate_result с заменой."""
    return {
        "original_text": "2010-03-16 13:24:01-0500",
        "replacement": "2 weeks ago",
        "parser_name": "iso",
        "changed": True,
    }


# =============================================================================
# ТЕСТЫ: SchemaLoader
# =============================================================================


class TestSchemaLoader:
    """Загрузка и кэширование схем"""

    @pytest.mark.parametrize("schema_name", ["difference_breakdown", "redate_result"])
    def test_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("redate_result") is loader.load_schema("redate_result")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# ТЕСТЫ: difference_breakdown
# =============================================================================


class TestDifferenceBreakdownContract:
    """Контракт DifferenceBreakdown"""

    def test_valid(self, valid_breakdown):
        validate_difference_breakdown(valid_breakdown)

    def test_model_dump_complies(self):
        """Выход relative_difference соответствует контракту"""
        breakdown = relative_difference(
            datetime(2010, 3, 16, 13, 24, 1, tzinfo=timezone.utc),
            datetime(2010, 4, 1, tzinfo=timezone.utc),
        )
        validate_difference_breakdown(breakdown.model_dump())

    def test_zero_complies(self):
        validate_difference_breakdown(DifferenceBreakdown.zero().model_dump())

    def test_missing_field(self, valid_breakdown):
        del valid_breakdown["weeks"]
        with pytest.raises(ValidationError):
            validate_difference_breakdown(valid_breakdown)

    @pytest.mark.parametrize(
        "field,value",
        [("months", 12), ("days", 7), ("hours", 24), ("minutes", -1), ("years", 1.5)],
    )
    def test_out_of_range(self, valid_breakdown, field, value):
        valid_breakdown[field] = value
        assert DifferenceBreakdownValidator().is_valid(valid_breakdown) is False

    def test_additional_property_rejected(self, valid_breakdown):
        valid_breakdown["millis"] = 5
        messages = DifferenceBreakdownValidator().error_messages(valid_breakdown)
        assert len(messages) == 1
        assert messages[0].startswith("$: ")
        assert "millis" in messages[0]

    def test_error_messages_sorted_by_path(self, valid_breakdown):
        valid_breakdown["seconds"] = 60
        valid_breakdown["hours"] = 24
        messages = DifferenceBreakdownValidator().error_messages(valid_breakdown)
        assert messages == [
            "$/hours: 24 is greater than the maximum of 23",
            "$/seconds: 60 is greater than the maximum of 59",
        ]

    def test_error_messages_empty_for_valid(self, valid_breakdown):
        assert DifferenceBreakdownValidator().error_messages(valid_breakdown) == []

    def test_model_instance_accepted(self):
        """Pydantic модель проверяется напрямую, без model_dump()"""
        breakdown = relative_difference(
            datetime(2009, 3, 16, tzinfo=timezone.utc),
            datetime(2010, 10, 1, tzinfo=timezone.utc),
        )
        validate_difference_breakdown(breakdown)
        assert DifferenceBreakdownValidator().is_valid(breakdown) is True


# =============================================================================
# ТЕСТЫ: redate_result
# =============================================================================


class TestRedateResultContract:
    """Контракт RedateResult"""

    def test_valid(self, valid_redate_result):
        validate_redate_result(valid_redate_result)

    def test_untouched_complies(self):
        validate_redate_result(RedateResult.untouched("n/a").model_dump())

    def test_redater_output_complies(self):
        """Выход Redater соответствует контракту"""
        redater = Redater(RedateConfig(default_offset=CalendarOffset.utc()))
        now = datetime(2010, 4, 1, tzinfo=timezone.utc)
        for result in redater.redate_many([("2010-03-16", now), ("garbage", now)]):
            validate_redate_result(result.model_dump())

    def test_changed_without_replacement(self, valid_redate_result):
        valid_redate_result["replacement"] = None
        with pytest.raises(ValidationError):
            validate_redate_result(valid_redate_result)

    def test_unchanged_with_replacement(self, valid_redate_result):
        valid_redate_result["changed"] = False
        assert RedateResultValidator().is_valid(valid_redate_result) is False

    def test_empty_replacement(self, valid_redate_result):
        valid_redate_result["replacement"] = ""
        assert RedateResultValidator().is_valid(valid_redate_result) is False

    def test_model_instance_accepted(self):
        redater = Redater(RedateConfig(default_offset=CalendarOffset.utc()))
        result = redater.process("2010-03-16", now=datetime(2010, 4, 1, tzinfo=timezone.utc))
        validate_redate_result(result)
        assert RedateResultValidator().error_messages(result) == []
