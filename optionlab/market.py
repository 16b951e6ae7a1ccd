"""
Market Inputs

Per-calculation market snapshot consumed by the strategy engine, plus the
pure helpers that turn a data-provider quote into one:
- MarketParameters: spot, rate, volatility, time to expiration
- MarketQuote: {symbol, price, volatility?, timestamp} as returned by a
  provider adapter (fetching is the adapter's job, not ours)
- historical_volatility: annualized realized volatility from closes
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Sequence

import numpy as np

from optionlab.errors import InvalidInputError

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.0
TRADING_DAYS_PER_YEAR = 252
MAX_VOLATILITY = 5.0
"""Upper bound on a plausible annualized decimal volatility (500%)."""


@dataclass(frozen=True)
class MarketParameters:
    """Immutable market snapshot for one calculation.

    A time_to_expiration of zero or less means "at expiration". Volatility
    may be zero; pricing before expiration with zero volatility raises
    InvalidInputError from the pricing model.
    """

    spot: float
    """Current underlying price (> 0)."""

    risk_free_rate: float
    """Annualized risk-free rate as a decimal (0.05 = 5%)."""

    volatility: float
    """Annualized volatility as a decimal (0.25 = 25%)."""

    time_to_expiration: float
    """Time to expiration in years."""

    def __post_init__(self) -> None:
        if self.spot <= 0:
            raise InvalidInputError("Spot price must be positive", "spot", self.spot)
        if self.volatility < 0:
            raise InvalidInputError("Volatility cannot be negative", "volatility", self.volatility)

    @classmethod
    def from_days(
        cls,
        spot: float,
        days_to_expiration: float,
        volatility: float,
        risk_free_rate: float,
    ) -> MarketParameters:
        """Build parameters from calendar days to expiration (T = days / 365)."""
        return cls(
            spot=spot,
            risk_free_rate=risk_free_rate,
            volatility=volatility,
            time_to_expiration=days_to_expiration / DAYS_PER_YEAR,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MarketParameters:
        """Create parameters from a dictionary (camelCase keys).

        Accepts ``spot`` or ``currentPrice`` for the underlying price and
        either ``timeToExpiration`` (years) or ``daysToExpiration``.
        """
        if not isinstance(data, dict):
            raise InvalidInputError("Market must be a JSON object", "market", data)
        try:
            spot = float(data["spot"] if "spot" in data else data["currentPrice"])
            volatility = float(data["volatility"])
            rate = float(data["riskFreeRate"])
            if "timeToExpiration" in data:
                years = float(data["timeToExpiration"])
            else:
                years = float(data["daysToExpiration"]) / DAYS_PER_YEAR
        except KeyError as e:
            raise InvalidInputError(f"Missing market field: {e.args[0]}", str(e.args[0])) from e
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid market field: {e}") from e

        return cls(spot=spot, risk_free_rate=rate, volatility=volatility, time_to_expiration=years)

    def at_expiration(self) -> MarketParameters:
        """Copy of these parameters with time to expiration forced to 0."""
        return replace(self, time_to_expiration=0.0)

    def with_spot(self, spot: float) -> MarketParameters:
        return replace(self, spot=spot)

    @property
    def days_to_expiration(self) -> float:
        return self.time_to_expiration * DAYS_PER_YEAR

    def to_dict(self) -> dict[str, float]:
        return {
            "spot": self.spot,
            "riskFreeRate": self.risk_free_rate,
            "volatility": self.volatility,
            "timeToExpiration": self.time_to_expiration,
        }


@dataclass(frozen=True)
class MarketDefaults:
    """Fallbacks used when a quote does not carry every input."""

    volatility: float = 0.25
    risk_free_rate: float = 0.05
    days_to_expiration: int = 30


@dataclass(frozen=True)
class MarketQuote:
    """Quote record produced by a market-data provider adapter."""

    symbol: str
    price: float
    volatility: float | None = None
    """Annualized decimal volatility, if the provider could estimate one."""

    timestamp: datetime | None = None
    provider: str | None = None

    def __post_init__(self) -> None:
        if self.volatility is not None and not 0 <= self.volatility <= MAX_VOLATILITY:
            raise InvalidInputError(
                f"Quote volatility must be a decimal between 0 and {MAX_VOLATILITY}",
                "volatility",
                self.volatility,
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MarketQuote:
        """Parse a provider record.

        Providers report ``volatility`` in percent (28.53 means 28.53%); it is
        converted to a decimal here.
        """
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        volatility = data.get("volatility")
        return cls(
            symbol=str(data["symbol"]).upper(),
            price=float(data["price"]),
            volatility=float(volatility) / 100.0 if volatility is not None else None,
            timestamp=timestamp,
            provider=data.get("provider"),
        )


def historical_volatility(
    closes: Sequence[float] | np.ndarray,
    periods_per_year: int = TRADING_DAYS_PER_YEAR,
) -> float | None:
    """Annualized realized volatility from consecutive closing prices.

    Uses the population standard deviation of log returns scaled by
    sqrt(periods_per_year).

    Args:
        closes: Closing prices in chronological (or reverse) order
        periods_per_year: Sampling periods per year (252 trading days)

    Returns:
        Annualized volatility as a decimal, or None with fewer than 2 closes
    """
    prices = np.asarray(closes, dtype=float)
    if prices.size < 2:
        return None
    if np.any(prices <= 0):
        raise InvalidInputError("Closing prices must be positive", "closes")

    log_returns = np.diff(np.log(prices))
    return float(np.std(log_returns) * np.sqrt(periods_per_year))


def market_from_quote(
    quote: MarketQuote,
    days_to_expiration: float | None = None,
    risk_free_rate: float | None = None,
    defaults: MarketDefaults | None = None,
) -> MarketParameters:
    """Build MarketParameters from a provider quote.

    The quote supplies spot and, optionally, volatility; anything missing is
    taken from ``defaults``.
    """
    if defaults is None:
        defaults = MarketDefaults()

    volatility = quote.volatility
    if volatility is None:
        logger.debug(f"No volatility in quote for {quote.symbol}, using default {defaults.volatility}")
        volatility = defaults.volatility

    return MarketParameters.from_days(
        spot=quote.price,
        days_to_expiration=(
            days_to_expiration if days_to_expiration is not None else defaults.days_to_expiration
        ),
        volatility=volatility,
        risk_free_rate=risk_free_rate if risk_free_rate is not None else defaults.risk_free_rate,
    )
