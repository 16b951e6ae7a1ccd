"""optionlab - Option Pricing & Strategy Analytics

This package provides:
- Black-Scholes pricing, Greeks and implied volatility (optionlab.pricing)
- Multi-leg strategy P&L, key metrics and aggregate Greeks (optionlab.strategy)
- Market parameter construction and realized volatility (optionlab.market)
- A JSON command-line runner (optionlab.runner)
"""

from __future__ import annotations

__version__ = "0.1.0"

from optionlab.errors import (
    ImpliedVolatilityError,
    InvalidInputError,
    OptionLabError,
    UnknownStrategyError,
)
from optionlab.market import MarketParameters, MarketQuote, historical_volatility, market_from_quote
from optionlab.pricing import OptionMetrics, compute_all_metrics, implied_volatility
from optionlab.strategy import (
    Action,
    OptionLeg,
    OptionType,
    analyze_strategy,
    apply_default_strikes,
    get_strategy,
    key_metrics,
    strategy_greeks,
    strategy_pl,
)

__all__ = [
    "Action",
    "ImpliedVolatilityError",
    "InvalidInputError",
    "MarketParameters",
    "MarketQuote",
    "OptionLabError",
    "OptionLeg",
    "OptionMetrics",
    "OptionType",
    "UnknownStrategyError",
    "analyze_strategy",
    "apply_default_strikes",
    "compute_all_metrics",
    "get_strategy",
    "historical_volatility",
    "implied_volatility",
    "key_metrics",
    "market_from_quote",
    "strategy_greeks",
    "strategy_pl",
]
