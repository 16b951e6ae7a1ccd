"""Pricing and strategy errors."""

from __future__ import annotations

from typing import Any

from .base import OptionLabError


class InvalidInputError(OptionLabError, ValueError):
    """
    Raised when numeric input makes a closed-form formula undefined.

    Spot, strike and volatility must be strictly positive whenever time to
    expiration is positive. Callers are expected to validate before pricing;
    the at-expiration branch (T <= 0) never raises.
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if parameter:
            details["parameter"] = parameter
            details["value"] = value
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value


class UnknownStrategyError(OptionLabError, KeyError):
    """Raised when a strategy identifier is not in the template catalogue."""

    def __init__(
        self,
        strategy_id: str,
        available: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["strategy_id"] = strategy_id
        if available:
            details["available"] = available
        super().__init__(f"Unknown strategy: {strategy_id!r}", details)
        self.strategy_id = strategy_id


class ImpliedVolatilityError(OptionLabError):
    """Raised when a bracketing implied volatility solve cannot find a root."""

    def __init__(
        self,
        message: str,
        market_price: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if market_price is not None:
            details["market_price"] = market_price
        super().__init__(message, details)
