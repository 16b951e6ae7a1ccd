"""
Strategy Analysis Runner

Command-line entry point that analyzes one strategy request and writes the
result as a single JSON object to stdout. Intended to be called by an API or
rendering layer as a subprocess.

Usage:
    python -m optionlab.runner --config '{"strategy": "bull-call-spread", "market": {...}}'
    python -m optionlab.runner --config-file request.json

Request:
    {
      "strategy": "long-straddle",            # optional when legs are given
      "legs": [{"action": "Buy", "type": "Call", "strike": 100,
                "premium": 5, "quantity": 1}],  # optional, defaults from strategy
      "market": {"spot": 100, "volatility": 0.25, "riskFreeRate": 0.05,
                 "daysToExpiration": 30},
      "includeProfile": false
    }

Output:
    {"type": "completed", "legs": [...], "metrics": {...}, "greeks": {...}, ...}
    {"type": "error", "message": "...", "details": {...}}

Unbounded profit or loss is written as the string "unlimited".
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from optionlab.errors import InvalidInputError, OptionLabError
from optionlab.market import MarketParameters
from optionlab.strategy import (
    OptionLeg,
    analyze_strategy,
    apply_default_strikes,
    get_strategy,
    pl_profile,
    price_legs,
    validate_legs,
)

logger = logging.getLogger(__name__)

UNLIMITED_LABEL = "unlimited"


@dataclass
class RunnerRequest:
    """Parsed analysis request."""

    market: MarketParameters
    legs: tuple[OptionLeg, ...]
    strategy_id: str | None = None
    include_profile: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RunnerRequest:
        """Create a request from a dictionary (camelCase keys).

        When ``legs`` is absent the strategy's default-strike legs are used,
        priced at their theoretical premium. An explicit empty ``legs`` list
        is a valid, empty strategy.
        """
        if not isinstance(data, dict):
            raise InvalidInputError("Request must be a JSON object", "request", data)
        if "market" not in data:
            raise InvalidInputError("Request requires a 'market' object", "market")

        market = MarketParameters.from_dict(data["market"])
        strategy_id = data.get("strategy")

        if data.get("legs") is not None:
            if not isinstance(data["legs"], list):
                raise InvalidInputError("Request 'legs' must be a list", "legs", data["legs"])
            legs = tuple(OptionLeg.from_dict(leg) for leg in data["legs"])
        elif strategy_id:
            legs = price_legs(apply_default_strikes(strategy_id, market.spot), market)
        else:
            raise InvalidInputError("Request requires 'strategy' or 'legs'")

        if strategy_id:
            # Validates the identifier even when explicit legs were supplied
            get_strategy(strategy_id)

        return cls(
            market=market,
            legs=legs,
            strategy_id=strategy_id,
            include_profile=bool(data.get("includeProfile", False)),
        )


def sanitize_for_json(obj: Any) -> Any:
    """Recursively sanitize values for JSON (inf -> "unlimited", nan -> None)."""
    if isinstance(obj, float):
        if math.isinf(obj):
            return UNLIMITED_LABEL
        if math.isnan(obj):
            return None
        return obj
    if isinstance(obj, dict):
        return {k: sanitize_for_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    return obj


def emit(event: dict[str, Any]) -> None:
    """Write JSON event to stdout."""
    print(json.dumps(sanitize_for_json(event)), flush=True)


def run_analysis(request: RunnerRequest) -> dict[str, Any]:
    """Analyze a request and build the completed event payload."""
    result = analyze_strategy(request.legs, request.market)

    event: dict[str, Any] = {
        "type": "completed",
        "strategy": request.strategy_id,
        "market": request.market.to_dict(),
        "legs": [leg.to_dict() for leg in request.legs],
        "metrics": {
            "maxProfit": result.max_profit,
            "maxLoss": result.max_loss,
            "breakevens": result.breakevens,
            "netCost": result.net_cost,
        },
        "greeks": result.greeks.to_dict(),
        "issues": [issue.to_dict() for issue in validate_legs(request.legs)],
    }

    if request.include_profile:
        profile = pl_profile(request.legs, request.market)
        event["profile"] = {
            "spot": profile["spot"].to_list(),
            "plExpiration": profile["pl_expiration"].to_list(),
            "plCurrent": profile["pl_current"].to_list(),
        }

    return event


def _load_config(args: argparse.Namespace) -> dict[str, Any]:
    if args.config_file:
        return json.loads(Path(args.config_file).read_text())
    return json.loads(args.config)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze an options strategy")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="JSON request string")
    source.add_argument("--config-file", help="Path to a JSON request file")
    args = parser.parse_args(argv)

    try:
        request = RunnerRequest.from_dict(_load_config(args))
        emit(run_analysis(request))
    except OptionLabError as e:
        logger.error(f"Analysis failed: {e}")
        emit({"type": "error", "message": e.message, "details": e.details})
        return 1
    except (json.JSONDecodeError, OSError) as e:
        logger.error(f"Could not read request: {e}")
        emit({"type": "error", "message": f"Could not read request: {e}"})
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
