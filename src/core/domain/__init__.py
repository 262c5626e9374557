"""
Domain models and value objects.

Contains fundamental domain entities like DifferenceBreakdown, CalendarOffset,
ParseResult, RedateResult.
"""

from src.core.domain.breakdown import HALF_CAPABLE_UNITS, DifferenceBreakdown, TimeUnit
from src.core.domain.instant import current_instant, ensure_aware
from src.core.domain.offset import CalendarOffset, default_local_offset
from src.core.domain.parse_result import ParseResult
from src.core.domain.redate_result import RedateResult

__all__ = [
    # Breakdown model
    "DifferenceBreakdown",
    "TimeUnit",
    "HALF_CAPABLE_UNITS",
    # Offset model
    "CalendarOffset",
    "default_local_offset",
    # Instant helpers
    "current_instant",
    "ensure_aware",
    # Parse result
    "ParseResult",
    # Redate result
    "RedateResult",
]
