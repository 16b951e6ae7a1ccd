"""Price sweep generation.

A sweep is the ordered set of candidate spot prices used as the X-axis of a
P&L curve and for breakeven/extremum search. Bounds and step are fractions
of the center price.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from optionlab.errors import InvalidInputError


@dataclass(frozen=True)
class SweepConfig:
    """Sweep bounds and step as fractions of the center price."""

    lower: float = 0.5
    upper: float = 1.5
    step: float = 0.01

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise InvalidInputError("Sweep step must be positive", "step", self.step)
        if self.lower <= 0 or self.upper < self.lower:
            raise InvalidInputError(
                "Sweep bounds must satisfy 0 < lower <= upper",
                details={"lower": self.lower, "upper": self.upper},
            )

    @property
    def num_points(self) -> int:
        return int(round((self.upper - self.lower) / self.step)) + 1


KEY_METRICS_SWEEP = SweepConfig(lower=0.5, upper=1.5, step=0.01)
"""50%-150% of spot in 1% steps, used for expiration metrics."""

PROFILE_SWEEP = SweepConfig(lower=0.7, upper=1.3, step=0.02)
"""70%-130% of spot in 2% steps, used for chart profiles."""


def price_sweep(center: float, config: SweepConfig = KEY_METRICS_SWEEP) -> np.ndarray:
    """Generate spot prices from ``center * lower`` to ``center * upper``.

    Args:
        center: Center price (usually current spot)
        config: Sweep bounds and step

    Returns:
        Ascending 1-D array of spot prices, endpoints included
    """
    if center <= 0:
        raise InvalidInputError("Sweep center must be positive", "center", center)

    fractions = config.lower + config.step * np.arange(config.num_points)
    return center * fractions
