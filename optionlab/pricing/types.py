"""Type definitions for single-option pricing.

Contains the result container shared by the pricing calculator and the
strategy engine.
"""

from dataclasses import asdict, dataclass


@dataclass
class OptionMetrics:
    """Theoretical price and Greeks for one option.

    Attributes:
        price: Option theoretical value
        delta: Rate of change of option price w.r.t. underlying price
        gamma: Rate of change of delta w.r.t. underlying price
        theta: Rate of change of option price w.r.t. time (per day)
        vega: Rate of change of option price w.r.t. volatility (per 1% change)
        rho: Rate of change of option price w.r.t. interest rate (per 1% change)
    """

    price: float
    delta: float
    gamma: float
    theta: float
    vega: float
    rho: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
