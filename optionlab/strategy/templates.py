"""Strategy Template Catalogue

Static, read-only catalogue of the supported strategies. Each template
lists its leg shapes in order together with the fixed percentage offset
from spot used to derive a default strike for that leg:

    long/short call      1.05
    long/short put       0.95
    long/short straddle  1.00, 1.00
    long/short strangle  1.05 (call), 0.95 (put)
    bull call spread     1.02 (buy), 1.08 (sell)
    bear call spread     1.02 (sell), 1.08 (buy)
    bull put spread      0.95 (sell), 0.90 (buy)
    bear put spread      0.95 (buy), 0.90 (sell)
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from types import MappingProxyType

from optionlab.errors import UnknownStrategyError

from .types import Action, LegShape, OptionLeg, OptionType, StrategyTemplate

logger = logging.getLogger(__name__)


class StrategyId(str, Enum):
    """Identifiers of the catalogued strategies."""

    LONG_CALL = "long-call"
    LONG_PUT = "long-put"
    SHORT_CALL = "short-call"
    SHORT_PUT = "short-put"
    LONG_STRADDLE = "long-straddle"
    SHORT_STRADDLE = "short-straddle"
    LONG_STRANGLE = "long-strangle"
    SHORT_STRANGLE = "short-strangle"
    BULL_CALL_SPREAD = "bull-call-spread"
    BEAR_CALL_SPREAD = "bear-call-spread"
    BULL_PUT_SPREAD = "bull-put-spread"
    BEAR_PUT_SPREAD = "bear-put-spread"


_BUY = Action.BUY
_SELL = Action.SELL
_CALL = OptionType.CALL
_PUT = OptionType.PUT


def _template(
    strategy_id: StrategyId,
    name: str,
    description: str,
    risk_level: str,
    complexity: str,
    *legs: tuple[Action, OptionType, float],
) -> StrategyTemplate:
    return StrategyTemplate(
        strategy_id=strategy_id.value,
        name=name,
        description=description,
        risk_level=risk_level,
        complexity=complexity,
        legs=tuple(LegShape(action, option_type, offset) for action, option_type, offset in legs),
    )


TEMPLATES: MappingProxyType[StrategyId, StrategyTemplate] = MappingProxyType(
    {
        StrategyId.LONG_CALL: _template(
            StrategyId.LONG_CALL,
            "Long Call",
            "Bullish strategy. Buy a call option expecting the stock price to rise "
            "above the strike price.",
            "Low",
            "Beginner",
            (_BUY, _CALL, 1.05),
        ),
        StrategyId.LONG_PUT: _template(
            StrategyId.LONG_PUT,
            "Long Put",
            "Bearish strategy. Buy a put option expecting the stock price to fall "
            "below the strike price.",
            "Low",
            "Beginner",
            (_BUY, _PUT, 0.95),
        ),
        StrategyId.SHORT_CALL: _template(
            StrategyId.SHORT_CALL,
            "Short Call",
            "Bearish strategy. Sell a call option expecting the stock price to stay "
            "below the strike price.",
            "High",
            "Intermediate",
            (_SELL, _CALL, 1.05),
        ),
        StrategyId.SHORT_PUT: _template(
            StrategyId.SHORT_PUT,
            "Short Put",
            "Bullish strategy. Sell a put option expecting the stock price to stay "
            "above the strike price.",
            "High",
            "Intermediate",
            (_SELL, _PUT, 0.95),
        ),
        StrategyId.LONG_STRADDLE: _template(
            StrategyId.LONG_STRADDLE,
            "Long Straddle",
            "Neutral strategy expecting high volatility. Buy both call and put at "
            "the same strike price.",
            "Medium",
            "Intermediate",
            (_BUY, _CALL, 1.0),
            (_BUY, _PUT, 1.0),
        ),
        StrategyId.SHORT_STRADDLE: _template(
            StrategyId.SHORT_STRADDLE,
            "Short Straddle",
            "Neutral strategy expecting low volatility. Sell both call and put at "
            "the same strike price.",
            "High",
            "Advanced",
            (_SELL, _CALL, 1.0),
            (_SELL, _PUT, 1.0),
        ),
        StrategyId.LONG_STRANGLE: _template(
            StrategyId.LONG_STRANGLE,
            "Long Strangle",
            "Neutral strategy expecting high volatility. Buy call and put at "
            "different strike prices.",
            "Medium",
            "Intermediate",
            (_BUY, _CALL, 1.05),
            (_BUY, _PUT, 0.95),
        ),
        StrategyId.SHORT_STRANGLE: _template(
            StrategyId.SHORT_STRANGLE,
            "Short Strangle",
            "Neutral strategy expecting low volatility. Sell call and put at "
            "different strike prices.",
            "High",
            "Advanced",
            (_SELL, _CALL, 1.05),
            (_SELL, _PUT, 0.95),
        ),
        StrategyId.BULL_CALL_SPREAD: _template(
            StrategyId.BULL_CALL_SPREAD,
            "Bull Call Spread",
            "Moderately bullish strategy. Buy lower strike call, sell higher strike call.",
            "Medium",
            "Intermediate",
            (_BUY, _CALL, 1.02),
            (_SELL, _CALL, 1.08),
        ),
        StrategyId.BEAR_CALL_SPREAD: _template(
            StrategyId.BEAR_CALL_SPREAD,
            "Bear Call Spread",
            "Moderately bearish strategy. Sell lower strike call, buy higher strike call.",
            "Medium",
            "Intermediate",
            (_SELL, _CALL, 1.02),
            (_BUY, _CALL, 1.08),
        ),
        StrategyId.BULL_PUT_SPREAD: _template(
            StrategyId.BULL_PUT_SPREAD,
            "Bull Put Spread",
            "Moderately bullish strategy. Sell higher strike put, buy lower strike put.",
            "Medium",
            "Intermediate",
            (_SELL, _PUT, 0.95),
            (_BUY, _PUT, 0.90),
        ),
        StrategyId.BEAR_PUT_SPREAD: _template(
            StrategyId.BEAR_PUT_SPREAD,
            "Bear Put Spread",
            "Moderately bearish strategy. Buy higher strike put, sell lower strike put.",
            "Medium",
            "Intermediate",
            (_BUY, _PUT, 0.95),
            (_SELL, _PUT, 0.90),
        ),
    }
)


def get_strategy(strategy_id: str | StrategyId) -> StrategyTemplate:
    """Look up a template by identifier.

    Args:
        strategy_id: Catalogue key such as "bull-call-spread"

    Returns:
        The matching StrategyTemplate

    Raises:
        UnknownStrategyError: If the identifier is not catalogued
    """
    try:
        key = StrategyId(strategy_id)
    except ValueError:
        raise UnknownStrategyError(
            str(strategy_id), available=[sid.value for sid in StrategyId]
        ) from None
    return TEMPLATES[key]


def list_strategies() -> list[StrategyTemplate]:
    """All catalogued templates in declaration order."""
    return list(TEMPLATES.values())


def round_strike(value: float) -> float:
    """Round to the nearest whole currency unit, halves rounding up."""
    return float(math.floor(value + 0.5))


def apply_default_strikes(
    template: StrategyTemplate | str | StrategyId,
    spot: float,
) -> tuple[OptionLeg, ...]:
    """Derive concrete legs with default strikes from a template.

    The template itself is never modified; new legs are returned with
    ``strike = round(spot * offset)``, premium unset and quantity 1.

    Args:
        template: Template or its identifier
        spot: Current underlying price

    Returns:
        One OptionLeg per template leg shape, in template order

    Raises:
        UnknownStrategyError: If an identifier is not catalogued
    """
    if not isinstance(template, StrategyTemplate):
        template = get_strategy(template)

    legs = tuple(
        OptionLeg(
            action=shape.action,
            option_type=shape.option_type,
            strike=round_strike(spot * shape.strike_offset),
            premium=None,
            quantity=1,
        )
        for shape in template.legs
    )
    logger.debug(
        f"Default strikes for {template.strategy_id} at spot {spot}: "
        f"{[leg.strike for leg in legs]}"
    )
    return legs
