"""
Contract Validation Module

Модуль для валидации JSON контрактов (DifferenceBreakdown, RedateResult).
"""

from .validators import (
    ContractValidator,
    DifferenceBreakdownValidator,
    RedateResultValidator,
    SchemaLoader,
    validate_difference_breakdown,
    validate_redate_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DifferenceBreakdownValidator",
    "RedateResultValidator",
    # Functions
    "validate_difference_breakdown",
    "validate_redate_result",
]
