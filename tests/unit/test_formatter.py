"""Тесты для RelativePhraseFormatter

Покрытие:
- Приоритет доминирующей единицы
- Единственное число ("a year ago", "yesterday", "an hour ago", "a minute ago")
- Half qualifier: пороги и строгость сравнения
- Конфигурация include_half и переопределение на вызов
"""

import pytest

from src.core.domain import DifferenceBreakdown
from src.relative import (
    JUST_NOW,
    FormatterConfig,
    RelativePhraseFormatter,
    format_breakdown,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def formatter():
    """Форматтер по умолчанию (include_half=False)."""
    return RelativePhraseFormatter()


@pytest.fixture
def half_formatter():
    """Форматтер с include_half=True."""
    return RelativePhraseFormatter(FormatterConfig(include_half=True))


# =============================================================================
# ТЕСТЫ: базовые фразы
# =============================================================================


class TestBasicPhrases:
    """Фразы без half qualifier"""

    def test_two_weeks(self, formatter):
        assert formatter.format(DifferenceBreakdown(weeks=2)) == "2 weeks ago"

    def test_yesterday(self, formatter):
        assert formatter.format(DifferenceBreakdown(days=1)) == "yesterday"

    def test_days(self, formatter):
        assert formatter.format(DifferenceBreakdown(days=3)) == "3 days ago"

    def test_just_now(self, formatter):
        assert formatter.format(DifferenceBreakdown.zero()) == JUST_NOW == "just now"

    def test_seconds_only_is_just_now(self, formatter):
        assert formatter.format(DifferenceBreakdown(seconds=59)) == "just now"

    def test_an_hour(self, formatter):
        assert formatter.format(DifferenceBreakdown(hours=1)) == "an hour ago"

    def test_hours(self, formatter):
        assert formatter.format(DifferenceBreakdown(hours=5, minutes=59)) == "5 hours ago"

    def test_a_minute(self, formatter):
        assert formatter.format(DifferenceBreakdown(minutes=1, seconds=30)) == "a minute ago"

    def test_minutes(self, formatter):
        assert formatter.format(DifferenceBreakdown(minutes=59)) == "59 minutes ago"

    def test_months(self, formatter):
        assert formatter.format(DifferenceBreakdown(months=11, weeks=2)) == "11 months ago"

    def test_years(self, formatter):
        assert formatter.format(DifferenceBreakdown(years=28, months=3)) == "28 years ago"

    @pytest.mark.parametrize(
        "breakdown,expected",
        [
            (DifferenceBreakdown(years=1), "a year ago"),
            (DifferenceBreakdown(months=1), "a month ago"),
            (DifferenceBreakdown(weeks=1), "a week ago"),
        ],
    )
    def test_singular_forms(self, formatter, breakdown, expected):
        """Значение 1 без half → единственное число, а не "1 years ago"."""
        assert formatter.format(breakdown) == expected

    def test_priority_over_magnitude(self, formatter):
        """Годы доминируют даже при больших младших полях"""
        breakdown = DifferenceBreakdown(years=1, months=11, weeks=4, days=6, hours=23)
        assert formatter.format(breakdown) == "a year ago"

    def test_sub_day_fields_ignored_when_calendar_dominates(self, formatter):
        assert formatter.format(DifferenceBreakdown(weeks=2, hours=23)) == "2 weeks ago"


# =============================================================================
# ТЕСТЫ: half qualifier
# =============================================================================


class TestHalfQualifier:
    """Half qualifier для years/months/weeks"""

    def test_weeks_half(self, half_formatter):
        """weeks и days > 3 → половина"""
        assert half_formatter.format(DifferenceBreakdown(weeks=2, days=4)) == "2 and a half weeks ago"

    def test_weeks_half_threshold_is_strict(self, half_formatter):
        """days == 3 — ещё не половина"""
        assert half_formatter.format(DifferenceBreakdown(weeks=2, days=3)) == "2 weeks ago"

    def test_months_half(self, half_formatter):
        """months и weeks >= 2 → половина"""
        assert half_formatter.format(DifferenceBreakdown(months=3, weeks=2)) == "3 and a half months ago"

    def test_months_below_half(self, half_formatter):
        assert half_formatter.format(DifferenceBreakdown(months=3, weeks=1, days=6)) == "3 months ago"

    def test_years_half(self, half_formatter):
        """years и months >= 6 → половина"""
        assert half_formatter.format(DifferenceBreakdown(years=28, months=6)) == "28 and a half years ago"

    def test_years_below_half(self, half_formatter):
        assert half_formatter.format(DifferenceBreakdown(years=2, months=5, weeks=4)) == "2 years ago"

    @pytest.mark.parametrize(
        "breakdown,expected",
        [
            (DifferenceBreakdown(years=1, months=6), "1 and a half years ago"),
            (DifferenceBreakdown(months=1, weeks=3), "1 and a half months ago"),
            (DifferenceBreakdown(weeks=1, days=5), "1 and a half weeks ago"),
        ],
    )
    def test_half_overrides_singular(self, half_formatter, breakdown, expected):
        """Значение 1 с половиной рендерится числом"""
        assert half_formatter.format(breakdown) == expected

    def test_half_disabled_by_default(self, formatter):
        """Без include_half половина не добавляется"""
        assert formatter.format(DifferenceBreakdown(weeks=2, days=4)) == "2 weeks ago"
        assert formatter.format(DifferenceBreakdown(years=1, months=6)) == "a year ago"

    def test_half_not_applied_to_days(self, half_formatter):
        assert half_formatter.format(DifferenceBreakdown(days=6, hours=23)) == "6 days ago"
        assert half_formatter.format(DifferenceBreakdown(hours=1, minutes=45)) == "an hour ago"

    def test_call_override_disables_config(self, half_formatter):
        """include_half на вызове переопределяет конфигурацию"""
        breakdown = DifferenceBreakdown(weeks=2, days=4)
        assert half_formatter.format(breakdown, include_half=False) == "2 weeks ago"

    def test_call_override_enables_config(self, formatter):
        breakdown = DifferenceBreakdown(weeks=2, days=4)
        assert formatter.format(breakdown, include_half=True) == "2 and a half weeks ago"


# =============================================================================
# ТЕСТЫ: format_breakdown
# =============================================================================


def test_format_breakdown_defaults_to_no_half():
    assert format_breakdown(DifferenceBreakdown(weeks=2, days=4)) == "2 weeks ago"


def test_format_breakdown_with_half():
    breakdown = DifferenceBreakdown(weeks=2, days=4)
    assert format_breakdown(breakdown, include_half=True) == "2 and a half weeks ago"
