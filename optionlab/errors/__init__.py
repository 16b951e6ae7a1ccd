"""
optionlab Error Definitions

Error hierarchy for the pricing and strategy engine. Expected conditions
(an unknown strategy identifier, a partially filled leg) are recoverable;
only genuinely invalid numeric input is a hard failure.

Example:
    from optionlab.errors import InvalidInputError, UnknownStrategyError

    try:
        template = get_strategy(strategy_id)
    except UnknownStrategyError as e:
        logger.warning(f"Strategy lookup failed: {e}")
"""

from .base import OptionLabError
from .engine import ImpliedVolatilityError, InvalidInputError, UnknownStrategyError
from .validation import ErrorSeverity, ValidationIssue

__all__ = [
    "ErrorSeverity",
    "ImpliedVolatilityError",
    "InvalidInputError",
    "OptionLabError",
    "UnknownStrategyError",
    "ValidationIssue",
]
