"""Convenience function for computing price and all Greeks at once."""

from .formulas import call_price, put_price
from .greeks import call_delta, call_rho, call_theta, gamma, put_delta, put_rho, put_theta, vega
from .types import OptionMetrics


def compute_all_metrics(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    is_call: bool = True,
) -> OptionMetrics:
    """Compute price and all five Greeks for a European option.

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (annualized)
        sigma: Volatility (annualized)
        is_call: True for a call, False for a put

    Returns:
        OptionMetrics with price, delta, gamma, theta, vega and rho
    """
    if is_call:
        price = call_price(S, K, T, r, sigma)
        delta = call_delta(S, K, T, r, sigma)
        theta = call_theta(S, K, T, r, sigma)
        rho = call_rho(S, K, T, r, sigma)
    else:
        price = put_price(S, K, T, r, sigma)
        delta = put_delta(S, K, T, r, sigma)
        theta = put_theta(S, K, T, r, sigma)
        rho = put_rho(S, K, T, r, sigma)

    return OptionMetrics(
        price=price,
        delta=delta,
        gamma=gamma(S, K, T, r, sigma),
        theta=theta,
        vega=vega(S, K, T, r, sigma),
        rho=rho,
    )
