"""Black-Scholes Pricing Model

Closed-form valuation of European options on a non-dividend-paying
underlying:
- Call and put prices, intrinsic and time value
- Delta, gamma, theta (daily), vega (per vol point), rho (per rate point)
- Implied volatility (Newton-Raphson, Brent)

All functions are pure and take (S, K, T, r, sigma) in that order. T <= 0
is the at-expiration boundary: prices are intrinsic value, delta is a step
function and the other Greeks are 0.

References:
- Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
- Hull, J. C. (2018). Options, Futures, and Other Derivatives (10th ed.)
"""

from .calculator import compute_all_metrics
from .formulas import (
    call_price,
    d1,
    d2,
    forward_intrinsic_value,
    intrinsic_value,
    norm_cdf,
    norm_pdf,
    option_price,
    put_price,
    time_value,
)
from .greeks import (
    call_delta,
    call_gamma,
    call_rho,
    call_theta,
    call_vega,
    gamma,
    put_delta,
    put_gamma,
    put_rho,
    put_theta,
    put_vega,
    vega,
)
from .implied_volatility import (
    ImpliedVolatilitySolver,
    compute_implied_volatility,
    implied_volatility,
    implied_volatility_brent,
)
from .types import OptionMetrics

__all__ = [
    # Types
    "OptionMetrics",
    "ImpliedVolatilitySolver",
    # Distribution and parameters
    "norm_pdf",
    "norm_cdf",
    "d1",
    "d2",
    # Pricing
    "call_price",
    "put_price",
    "option_price",
    "intrinsic_value",
    "forward_intrinsic_value",
    "time_value",
    # Greeks
    "call_delta",
    "put_delta",
    "gamma",
    "call_gamma",
    "put_gamma",
    "call_theta",
    "put_theta",
    "vega",
    "call_vega",
    "put_vega",
    "call_rho",
    "put_rho",
    # Calculator
    "compute_all_metrics",
    # Implied volatility
    "implied_volatility",
    "implied_volatility_brent",
    "compute_implied_volatility",
]
