"""Options Strategy Engine

Composes per-leg Black-Scholes valuations into strategy-level analytics:
- Static template catalogue and default-strike rules
- Per-leg and aggregate P&L over a spot-price sweep
- Max profit/loss, breakevens and net cost at expiration
- Aggregate position Greeks

All functions are pure transformations of (legs, market parameters); no
state is retained between calls.

References:
- McMillan, L. G. (2012). Options as a Strategic Investment (5th ed.)
"""

from .metrics import (
    analyze_strategy,
    find_breakevens,
    key_metrics,
    net_call_quantity,
    net_cost,
    strategy_greeks,
    validate_legs,
)
from .pnl import leg_pl, leg_value, pl_profile, price_legs, strategy_pl, theoretical_premium
from .sweep import KEY_METRICS_SWEEP, PROFILE_SWEEP, SweepConfig, price_sweep
from .templates import TEMPLATES, StrategyId, apply_default_strikes, get_strategy, list_strategies
from .types import (
    CONTRACT_MULTIPLIER,
    UNBOUNDED,
    Action,
    KeyMetrics,
    LegShape,
    OptionLeg,
    OptionType,
    StrategyGreeks,
    StrategyMetrics,
    StrategyTemplate,
)

__all__ = [
    # Types
    "Action",
    "OptionType",
    "OptionLeg",
    "LegShape",
    "StrategyTemplate",
    "KeyMetrics",
    "StrategyGreeks",
    "StrategyMetrics",
    "CONTRACT_MULTIPLIER",
    "UNBOUNDED",
    # Templates
    "StrategyId",
    "TEMPLATES",
    "get_strategy",
    "list_strategies",
    "apply_default_strikes",
    # Sweep
    "SweepConfig",
    "KEY_METRICS_SWEEP",
    "PROFILE_SWEEP",
    "price_sweep",
    # P&L
    "leg_value",
    "leg_pl",
    "strategy_pl",
    "theoretical_premium",
    "price_legs",
    "pl_profile",
    # Metrics
    "find_breakevens",
    "net_cost",
    "net_call_quantity",
    "key_metrics",
    "strategy_greeks",
    "analyze_strategy",
    "validate_legs",
]
