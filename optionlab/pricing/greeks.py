"""Greeks calculations using the Black-Scholes model.

First-order Greeks plus gamma:
- Delta: Rate of change of option price w.r.t. underlying price
- Gamma: Rate of change of delta w.r.t. underlying price
- Theta: Rate of change of option price w.r.t. time (per calendar day)
- Vega: Rate of change of option price w.r.t. volatility (per 1 vol point)
- Rho: Rate of change of option price w.r.t. interest rate (per 1 rate point)

At expiration (T <= 0) delta is a step function of moneyness and every other
Greek is 0.
"""

from math import exp, sqrt

from .formulas import d1, norm_cdf, norm_pdf

# ============================================================================
# Delta
# ============================================================================


def call_delta(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate call option delta.

    Delta_call = N(d1)

    Ranges from 0 to 1. At expiration: 1 if S > K, else 0.

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (annualized)
        sigma: Volatility (annualized)

    Returns:
        Call delta
    """
    if T <= 0:
        return 1.0 if S > K else 0.0

    return float(norm_cdf(d1(S, K, T, r, sigma)))


def put_delta(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate put option delta.

    Delta_put = N(d1) - 1

    Ranges from -1 to 0. At expiration: -1 if S < K, else 0.
    """
    if T <= 0:
        return -1.0 if S < K else 0.0

    return float(norm_cdf(d1(S, K, T, r, sigma)) - 1)


# ============================================================================
# Gamma
# ============================================================================


def gamma(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate option gamma.

    Gamma = phi(d1) / (S * sigma * sqrt(T))

    Gamma is identical for calls and puts.
    """
    if T <= 0:
        return 0.0

    d1_val = d1(S, K, T, r, sigma)
    return float(norm_pdf(d1_val) / (S * sigma * sqrt(T)))


call_gamma = gamma
put_gamma = gamma


# ============================================================================
# Theta
# ============================================================================


def _theta_decay_term(S: float, d1_val: float, T: float, sigma: float) -> float:
    return -(S * norm_pdf(d1_val) * sigma) / (2 * sqrt(T))


def call_theta(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate call option theta (per calendar day).

    Theta_call = -[S*phi(d1)*sigma] / [2*sqrt(T)] - r*K*e^(-rT)*N(d2)

    Typically negative for a long call (value lost per day).
    """
    if T <= 0:
        return 0.0

    d1_val = d1(S, K, T, r, sigma)
    d2_val = d1_val - sigma * sqrt(T)

    term1 = _theta_decay_term(S, d1_val, T, sigma)
    term2 = -r * K * exp(-r * T) * norm_cdf(d2_val)

    return float((term1 + term2) / 365.0)


def put_theta(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate put option theta (per calendar day).

    Theta_put = -[S*phi(d1)*sigma] / [2*sqrt(T)] + r*K*e^(-rT)*N(-d2)
    """
    if T <= 0:
        return 0.0

    d1_val = d1(S, K, T, r, sigma)
    d2_val = d1_val - sigma * sqrt(T)

    term1 = _theta_decay_term(S, d1_val, T, sigma)
    term2 = r * K * exp(-r * T) * norm_cdf(-d2_val)

    return float((term1 + term2) / 365.0)


# ============================================================================
# Vega
# ============================================================================


def vega(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate option vega (per 1% change in volatility).

    nu = S * phi(d1) * sqrt(T)

    Identical for calls and puts. Multiply by 100 for the raw derivative
    with respect to sigma.
    """
    if T <= 0:
        return 0.0

    d1_val = d1(S, K, T, r, sigma)
    return float(S * norm_pdf(d1_val) * sqrt(T) / 100.0)


call_vega = vega
put_vega = vega


# ============================================================================
# Rho
# ============================================================================


def call_rho(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate call option rho (per 1% change in interest rate).

    rho_call = K * T * e^(-rT) * N(d2)
    """
    if T <= 0:
        return 0.0

    d2_val = d1(S, K, T, r, sigma) - sigma * sqrt(T)
    return float(K * T * exp(-r * T) * norm_cdf(d2_val) / 100.0)


def put_rho(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate put option rho (per 1% change in interest rate).

    rho_put = -K * T * e^(-rT) * N(-d2)
    """
    if T <= 0:
        return 0.0

    d2_val = d1(S, K, T, r, sigma) - sigma * sqrt(T)
    return float(-K * T * exp(-r * T) * norm_cdf(-d2_val) / 100.0)
