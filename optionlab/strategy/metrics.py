"""Strategy Metrics

Summary analytics for a multi-leg strategy:
- Key metrics at expiration: max profit, max loss, breakevens, net cost
- Aggregate position Greeks at the current spot
- Leg validation report for partially filled strategies

Max profit/loss and breakevens are read off a finite sweep (50%-150% of
spot in 1% steps) evaluated at expiration. A finite sweep cannot see a
payoff that keeps growing past its edge, so by default net call exposure is
also checked analytically: beyond the highest strike the expiration P&L
slope is the net call quantity, so a net long call position has unbounded
profit and a net short call position has unbounded loss. Put payoffs are
bounded because spot cannot fall below zero.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

import numpy as np

from optionlab.errors import ErrorSeverity, ValidationIssue
from optionlab.market import MarketParameters
from optionlab.pricing import compute_all_metrics

from .pnl import strategy_pl
from .sweep import KEY_METRICS_SWEEP, SweepConfig, price_sweep
from .types import (
    CONTRACT_MULTIPLIER,
    UNBOUNDED,
    KeyMetrics,
    OptionLeg,
    StrategyGreeks,
    StrategyMetrics,
)

logger = logging.getLogger(__name__)


def find_breakevens(
    spots: Sequence[float] | np.ndarray,
    pls: Sequence[float] | np.ndarray,
) -> list[float]:
    """Locate zero crossings of a P&L series by linear interpolation.

    A crossing is any consecutive pair where the values have opposite signs
    or one of them is exactly zero. Pairs that are both zero (a flat
    break-even segment) are skipped, and a crossing that lands on a sample
    shared by two pairs is reported once.

    Args:
        spots: Ascending spot prices
        pls: P&L values aligned with ``spots``

    Returns:
        Breakeven spot prices in sweep order
    """
    breakevens: list[float] = []

    for i in range(len(pls) - 1):
        current = float(pls[i])
        following = float(pls[i + 1])

        if current == 0 and following == 0:
            continue

        if (current <= 0 <= following) or (current >= 0 >= following):
            ratio = abs(current) / (abs(current) + abs(following))
            breakeven = float(spots[i] + (spots[i + 1] - spots[i]) * ratio)

            if breakevens and math.isclose(breakeven, breakevens[-1], rel_tol=1e-9, abs_tol=1e-9):
                continue
            breakevens.append(breakeven)

    return breakevens


def net_cost(legs: Iterable[OptionLeg]) -> float:
    """Premium outlay to open the position.

    Positive for a net debit (premium paid), negative for a net credit.
    """
    return float(
        sum(
            leg.direction * leg.premium * leg.quantity * CONTRACT_MULTIPLIER
            for leg in legs
            if leg.is_active
        )
    )


def net_call_quantity(legs: Iterable[OptionLeg]) -> int:
    """Bought minus sold call contracts across active legs."""
    return sum(leg.direction * leg.quantity for leg in legs if leg.is_active and leg.is_call)


def key_metrics(
    legs: Sequence[OptionLeg],
    market: MarketParameters,
    detect_unbounded: bool = True,
    config: SweepConfig = KEY_METRICS_SWEEP,
) -> KeyMetrics:
    """Compute expiration-view metrics for a strategy.

    The P&L is always evaluated at expiration, whatever the caller's time to
    expiry, over a sweep centered on ``market.spot``.

    Args:
        legs: Strategy legs (inactive legs are ignored)
        market: Market parameters
        detect_unbounded: Replace sweep extremes with UNBOUNDED sentinels when
            net call exposure makes the payoff open-ended. When False the
            finite sweep max/min are reported as-is.
        config: Sweep bounds

    Returns:
        KeyMetrics with max profit, max loss (signed), breakevens and net cost
    """
    spots = price_sweep(market.spot, config)
    pls = strategy_pl(legs, spots, market.at_expiration())

    max_profit = float(np.max(pls))
    max_loss = float(np.min(pls))

    if detect_unbounded:
        net_calls = net_call_quantity(legs)
        if net_calls > 0:
            max_profit = UNBOUNDED
        elif net_calls < 0:
            max_loss = -UNBOUNDED

    metrics = KeyMetrics(
        max_profit=max_profit,
        max_loss=max_loss,
        breakevens=find_breakevens(spots, pls),
        net_cost=net_cost(legs),
    )
    logger.debug(
        f"Key metrics over {len(spots)} samples: max_profit={metrics.max_profit}, "
        f"max_loss={metrics.max_loss}, breakevens={metrics.breakevens}"
    )
    return metrics


def _zero_volatility_delta(leg: OptionLeg, market: MarketParameters) -> float:
    discounted_strike = leg.strike * math.exp(-market.risk_free_rate * market.time_to_expiration)
    if leg.is_call:
        return 1.0 if market.spot > discounted_strike else 0.0
    return -1.0 if market.spot < discounted_strike else 0.0


def strategy_greeks(legs: Iterable[OptionLeg], market: MarketParameters) -> StrategyGreeks:
    """Aggregate delta, gamma, theta and vega across active legs.

    Each leg is valued at its own strike against the current spot, signed +1
    for Buy and -1 for Sell, and scaled by quantity. Rho is computed per leg
    by the pricing model but intentionally not aggregated here.

    With zero volatility before expiration the payoff is deterministic:
    delta is a step at the discounted strike and gamma, theta and vega are 0.
    """
    totals = StrategyGreeks()

    for leg in legs:
        if not leg.is_active:
            continue

        multiplier = leg.direction * leg.quantity

        if market.volatility <= 0 and market.time_to_expiration > 0:
            totals.delta += _zero_volatility_delta(leg, market) * multiplier
            continue

        metrics = compute_all_metrics(
            market.spot,
            leg.strike,
            market.time_to_expiration,
            market.risk_free_rate,
            market.volatility,
            leg.is_call,
        )

        totals.delta += metrics.delta * multiplier
        totals.gamma += metrics.gamma * multiplier
        totals.theta += metrics.theta * multiplier
        totals.vega += metrics.vega * multiplier

    return totals


def analyze_strategy(
    legs: Sequence[OptionLeg],
    market: MarketParameters,
    detect_unbounded: bool = True,
) -> StrategyMetrics:
    """Key metrics and aggregate Greeks in one result."""
    return StrategyMetrics(
        key_metrics=key_metrics(legs, market, detect_unbounded=detect_unbounded),
        greeks=strategy_greeks(legs, market),
    )


def validate_legs(legs: Iterable[OptionLeg]) -> list[ValidationIssue]:
    """Report legs that will be skipped because they are incomplete.

    Incomplete legs are tolerated by every calculation, so issues are
    warnings only.
    """
    issues: list[ValidationIssue] = []

    for index, leg in enumerate(legs):
        if leg.is_active:
            continue

        missing = [
            name
            for name, present in (
                ("strike", bool(leg.strike)),
                ("premium", leg.premium is not None),
                ("quantity", bool(leg.quantity)),
            )
            if not present
        ]
        issues.append(
            ValidationIssue(
                severity=ErrorSeverity.WARNING,
                error_type="IncompleteLeg",
                message=f"Leg {index} is missing {', '.join(missing)} and contributes nothing",
                details={"leg_index": index, "missing": missing},
            )
        )

    return issues
