"""Type definitions for the strategy engine.

Contains the leg and template value types and the result containers
produced by the P&L and metrics functions.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any

from optionlab.errors import InvalidInputError

CONTRACT_MULTIPLIER = 100
"""Underlying units controlled by one option contract."""

UNBOUNDED = math.inf
"""Sentinel magnitude for a profit or loss that grows without limit."""


class Action(str, Enum):
    """Leg direction."""

    BUY = "Buy"
    SELL = "Sell"

    @classmethod
    def parse(cls, value: str | Action) -> Action:
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        aliases = {"buy": cls.BUY, "long": cls.BUY, "sell": cls.SELL, "short": cls.SELL}
        if normalized not in aliases:
            raise InvalidInputError(f"Unknown leg action: {value!r}", "action", value)
        return aliases[normalized]

    @property
    def sign(self) -> int:
        return 1 if self is Action.BUY else -1


class OptionType(str, Enum):
    """Option right."""

    CALL = "Call"
    PUT = "Put"

    @classmethod
    def parse(cls, value: str | OptionType) -> OptionType:
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "call":
            return cls.CALL
        if normalized == "put":
            return cls.PUT
        raise InvalidInputError(f"Unknown option type: {value!r}", "option_type", value)

    @property
    def is_call(self) -> bool:
        return self is OptionType.CALL


@dataclass(frozen=True)
class OptionLeg:
    """One position within a strategy.

    A leg is active only when strike, premium and quantity are all set.
    Strike or quantity of 0 counts as unset; a premium of 0 is a real price
    and only ``None`` means "not priced yet". Inactive legs contribute zero
    P&L and zero Greeks.

    Attributes:
        action: Buy or Sell
        option_type: Call or Put
        strike: Strike price
        premium: Price paid or received per unit of underlying
        quantity: Number of contracts
    """

    action: Action
    option_type: OptionType
    strike: float | None = None
    premium: float | None = None
    quantity: int | None = 1

    @property
    def is_active(self) -> bool:
        return bool(self.strike) and self.premium is not None and bool(self.quantity)

    @property
    def direction(self) -> int:
        """Return +1 for bought legs, -1 for sold legs."""
        return self.action.sign

    @property
    def is_call(self) -> bool:
        return self.option_type.is_call

    def with_strike(self, strike: float) -> OptionLeg:
        return replace(self, strike=strike)

    def with_premium(self, premium: float) -> OptionLeg:
        return replace(self, premium=premium)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OptionLeg:
        """Create a leg from a dictionary (``action``, ``type``/``optionType``, ...)."""
        if not isinstance(data, dict):
            raise InvalidInputError("Leg must be a JSON object", "leg", data)
        option_type = data.get("optionType", data.get("option_type", data.get("type")))
        if option_type is None or "action" not in data:
            raise InvalidInputError("Leg requires 'action' and 'type'", details={"leg": data})

        def _number(key: str, cast: type) -> Any:
            value = data.get(key)
            if value is None or value == "":
                return None
            try:
                number = float(value)
            except (TypeError, ValueError) as e:
                raise InvalidInputError(f"Invalid leg {key}: {value!r}", key, value) from e
            if cast is int:
                if not number.is_integer():
                    raise InvalidInputError(f"Leg {key} must be a whole number: {value!r}", key, value)
                return int(number)
            return number

        return cls(
            action=Action.parse(data["action"]),
            option_type=OptionType.parse(option_type),
            strike=_number("strike", float),
            premium=_number("premium", float),
            quantity=_number("quantity", int),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "type": self.option_type.value,
            "strike": self.strike,
            "premium": self.premium,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class LegShape:
    """Action and option type of a template leg, without prices."""

    action: Action
    option_type: OptionType
    strike_offset: float
    """Default strike as a fraction of spot (1.05 = 5% above)."""


@dataclass(frozen=True)
class StrategyTemplate:
    """Catalogue entry describing a named strategy.

    ``risk_level`` and ``complexity`` are informational only.
    """

    strategy_id: str
    name: str
    description: str
    risk_level: str
    complexity: str
    legs: tuple[LegShape, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.strategy_id,
            "name": self.name,
            "description": self.description,
            "riskLevel": self.risk_level,
            "complexity": self.complexity,
            "legs": [
                {"action": shape.action.value, "type": shape.option_type.value}
                for shape in self.legs
            ],
        }


@dataclass
class KeyMetrics:
    """Expiration-view summary of a strategy.

    Attributes:
        max_profit: Highest P&L, or UNBOUNDED when profit has no upper limit
        max_loss: Lowest P&L (negative for a loss), or -UNBOUNDED
        breakevens: Spot prices where P&L crosses zero, in ascending order
        net_cost: Premium outlay (positive = debit paid, negative = credit)
    """

    max_profit: float
    max_loss: float
    breakevens: list[float] = field(default_factory=list)
    net_cost: float = 0.0

    @property
    def has_unbounded_profit(self) -> bool:
        return math.isinf(self.max_profit)

    @property
    def has_unbounded_loss(self) -> bool:
        return math.isinf(self.max_loss)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class StrategyGreeks:
    """Position Greeks summed across active legs (rho is not aggregated)."""

    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass
class StrategyMetrics:
    """Key metrics and aggregate Greeks for one strategy calculation."""

    key_metrics: KeyMetrics
    greeks: StrategyGreeks

    @property
    def max_profit(self) -> float:
        return self.key_metrics.max_profit

    @property
    def max_loss(self) -> float:
        return self.key_metrics.max_loss

    @property
    def breakevens(self) -> list[float]:
        return self.key_metrics.breakevens

    @property
    def net_cost(self) -> float:
        return self.key_metrics.net_cost

    def to_dict(self) -> dict[str, Any]:
        return {**self.key_metrics.to_dict(), **self.greeks.to_dict()}
