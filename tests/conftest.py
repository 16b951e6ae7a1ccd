"""Shared pytest fixtures for optionlab tests."""

from __future__ import annotations

import pytest

from optionlab.market import MarketParameters
from optionlab.strategy import Action, OptionLeg, OptionType


@pytest.fixture
def market() -> MarketParameters:
    """At-the-money market: spot 100, 5% rate, 20% vol, 30 days to expiry."""
    return MarketParameters.from_days(spot=100.0, days_to_expiration=30, volatility=0.2, risk_free_rate=0.05)


@pytest.fixture
def expiration_market(market: MarketParameters) -> MarketParameters:
    """Same market viewed at expiration."""
    return market.at_expiration()


@pytest.fixture
def long_call() -> OptionLeg:
    """Long 100 call bought for 5."""
    return OptionLeg(Action.BUY, OptionType.CALL, strike=100.0, premium=5.0, quantity=1)


@pytest.fixture
def short_put() -> OptionLeg:
    """Short 95 put sold for 3."""
    return OptionLeg(Action.SELL, OptionType.PUT, strike=95.0, premium=3.0, quantity=1)


@pytest.fixture
def bull_call_spread() -> list[OptionLeg]:
    """Long 100 call at 6, short 110 call at 2 (net debit 4)."""
    return [
        OptionLeg(Action.BUY, OptionType.CALL, strike=100.0, premium=6.0, quantity=1),
        OptionLeg(Action.SELL, OptionType.CALL, strike=110.0, premium=2.0, quantity=1),
    ]


@pytest.fixture
def zero_volatility_market() -> MarketParameters:
    """30 days to expiry with no volatility."""
    return MarketParameters.from_days(spot=100.0, days_to_expiration=30, volatility=0.0, risk_free_rate=0.05)
