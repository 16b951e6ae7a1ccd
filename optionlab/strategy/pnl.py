"""Profit and Loss Curves

Per-leg and strategy P&L over a price sweep. Each sample values the leg's
option at the swept spot with the other market parameters held fixed:
intrinsic value at expiration, Black-Scholes theoretical price before it
(or the discounted-strike payoff when volatility is zero).

    Buy:  (value - premium) * quantity * 100
    Sell: (premium - value) * quantity * 100

Inactive legs (missing strike, premium or quantity) contribute zeros.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
import polars as pl

from optionlab.errors import InvalidInputError
from optionlab.market import MarketParameters
from optionlab.pricing import forward_intrinsic_value, intrinsic_value, option_price

from .sweep import PROFILE_SWEEP, SweepConfig, price_sweep
from .types import CONTRACT_MULTIPLIER, OptionLeg

logger = logging.getLogger(__name__)


def leg_value(leg: OptionLeg, spot: float, market: MarketParameters) -> float:
    """Value of one unit of the leg's option at ``spot``.

    Zero volatility before expiration is priced at its deterministic limit,
    the payoff against the discounted strike.
    """
    if market.time_to_expiration <= 0:
        return intrinsic_value(spot, leg.strike, leg.is_call)
    if market.volatility <= 0:
        return forward_intrinsic_value(
            spot, leg.strike, market.time_to_expiration, market.risk_free_rate, leg.is_call
        )
    return option_price(
        spot,
        leg.strike,
        market.time_to_expiration,
        market.risk_free_rate,
        market.volatility,
        leg.is_call,
    )


def leg_pl(
    leg: OptionLeg,
    spot_sweep: Sequence[float] | np.ndarray,
    market: MarketParameters,
) -> np.ndarray:
    """P&L of a single leg at every spot in the sweep.

    Args:
        leg: Option leg
        spot_sweep: Spot prices to evaluate
        market: Market parameters (its spot is ignored in favour of the sweep)

    Returns:
        Array aligned with ``spot_sweep``; all zeros for an inactive leg
    """
    spots = np.asarray(spot_sweep, dtype=float)
    if not leg.is_active:
        logger.debug(f"Skipping inactive leg: {leg}")
        return np.zeros(spots.shape)

    values = np.array([leg_value(leg, float(spot), market) for spot in spots], dtype=float)
    scale = leg.direction * leg.quantity * CONTRACT_MULTIPLIER
    return (values - leg.premium) * scale


def strategy_pl(
    legs: Iterable[OptionLeg],
    spot_sweep: Sequence[float] | np.ndarray,
    market: MarketParameters,
) -> np.ndarray:
    """Elementwise sum of leg P&L, aligned by sweep index.

    An empty or all-inactive leg set yields zeros.
    """
    spots = np.asarray(spot_sweep, dtype=float)
    total = np.zeros(spots.shape)
    for leg in legs:
        total += leg_pl(leg, spots, market)
    return total


def theoretical_premium(leg: OptionLeg, market: MarketParameters) -> float:
    """Black-Scholes price of the leg's option at the current spot.

    Raises:
        InvalidInputError: If the leg has no strike
    """
    if not leg.strike:
        raise InvalidInputError("Leg strike is required for pricing", "strike", leg.strike)
    return leg_value(leg, market.spot, market)


def price_legs(legs: Iterable[OptionLeg], market: MarketParameters) -> tuple[OptionLeg, ...]:
    """Fill in theoretical premiums for legs that have a strike but no premium."""
    priced = []
    for leg in legs:
        if leg.premium is None and leg.strike:
            leg = leg.with_premium(round(theoretical_premium(leg, market), 2))
        priced.append(leg)
    return tuple(priced)


def pl_profile(
    legs: Sequence[OptionLeg],
    market: MarketParameters,
    config: SweepConfig = PROFILE_SWEEP,
) -> pl.DataFrame:
    """P&L curves at expiration and at the current time to expiry.

    Args:
        legs: Strategy legs
        market: Market parameters; the sweep is centered on its spot
        config: Sweep bounds (70%-130% in 2% steps by default)

    Returns:
        DataFrame with columns ``spot``, ``pl_expiration``, ``pl_current``
    """
    spots = price_sweep(market.spot, config)
    return pl.DataFrame(
        {
            "spot": spots,
            "pl_expiration": strategy_pl(legs, spots, market.at_expiration()),
            "pl_current": strategy_pl(legs, spots, market),
        }
    )
