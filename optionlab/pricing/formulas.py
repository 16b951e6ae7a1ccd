"""Core Black-Scholes formulas.

Implements the fundamental Black-Scholes formulas for a non-dividend-paying
underlying:
- d1 and d2 parameters
- Normal distribution functions
- European call and put option pricing
- Intrinsic and time value

Mathematical foundations:
- S: Current underlying price
- K: Strike price
- T: Time to expiration (years); T <= 0 means "at expiration"
- r: Risk-free interest rate (annualized)
- sigma: Volatility (annualized)

At expiration the prices collapse to intrinsic value and d1/d2 are never
evaluated. Before expiration, S, K and sigma must be strictly positive;
d1 raises InvalidInputError otherwise instead of dividing by zero.

References:
- Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
"""

from math import exp, log, sqrt

from scipy import stats

from optionlab.errors import InvalidInputError


def validate_inputs(S: float, K: float, T: float, sigma: float) -> None:
    """Validate Black-Scholes input parameters for a pre-expiration valuation.

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        sigma: Volatility (annualized)

    Raises:
        InvalidInputError: If any parameter is invalid
    """
    if T <= 0:
        raise InvalidInputError("Time to expiration must be positive", "T", T)
    if sigma <= 0:
        raise InvalidInputError("Volatility must be positive", "sigma", sigma)
    if S <= 0:
        raise InvalidInputError("Underlying price must be positive", "S", S)
    if K <= 0:
        raise InvalidInputError("Strike price must be positive", "K", K)


def d1(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate d1 parameter for Black-Scholes formula.

    d1 = [ln(S/K) + (r + sigma^2/2)T] / (sigma * sqrt(T))

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (annualized)
        sigma: Volatility (annualized)

    Returns:
        d1 parameter

    Raises:
        InvalidInputError: If T, sigma, S or K is not positive
    """
    validate_inputs(S, K, T, sigma)
    return (log(S / K) + (r + 0.5 * sigma**2) * T) / (sigma * sqrt(T))


def d2(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate d2 parameter for Black-Scholes formula.

    d2 = d1 - sigma * sqrt(T)
    """
    return d1(S, K, T, r, sigma) - sigma * sqrt(T)


def norm_pdf(x: float) -> float:
    """Standard normal probability density function.

    phi(x) = (1/sqrt(2*pi)) * e^(-x^2/2)
    """
    return float(stats.norm.pdf(x))


def norm_cdf(x: float) -> float:
    """Standard normal cumulative distribution function.

    N(x) = integral from -inf to x of phi(t) dt

    Symmetric: N(-x) = 1 - N(x), and N(0) = 0.5.
    """
    return float(stats.norm.cdf(x))


def intrinsic_value(S: float, K: float, is_call: bool = True) -> float:
    """Payoff of the option if exercised immediately.

    Args:
        S: Current underlying price
        K: Strike price
        is_call: True for a call, False for a put

    Returns:
        max(S - K, 0) for calls, max(K - S, 0) for puts
    """
    if is_call:
        return float(max(S - K, 0.0))
    return float(max(K - S, 0.0))


def forward_intrinsic_value(S: float, K: float, T: float, r: float, is_call: bool = True) -> float:
    """Zero-volatility limit of the Black-Scholes price.

    With no volatility the underlying grows deterministically at r, so the
    option is worth its payoff against the discounted strike:
    max(S - K*e^(-rT), 0) for calls, max(K*e^(-rT) - S, 0) for puts.
    Equals intrinsic_value when T <= 0.
    """
    discounted_strike = K * exp(-r * max(T, 0.0))
    return intrinsic_value(S, discounted_strike, is_call)


def call_price(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate European call option price using Black-Scholes formula.

    C = S*N(d1) - K*e^(-rT)*N(d2)

    Args:
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (annualized)
        sigma: Volatility (annualized)

    Returns:
        Call option price, floored at 0. Intrinsic value when T <= 0.
    """
    if T <= 0:
        return intrinsic_value(S, K, is_call=True)

    d1_val = d1(S, K, T, r, sigma)
    d2_val = d1_val - sigma * sqrt(T)

    call = S * norm_cdf(d1_val) - K * exp(-r * T) * norm_cdf(d2_val)
    return float(max(call, 0.0))


def put_price(S: float, K: float, T: float, r: float, sigma: float) -> float:
    """Calculate European put option price using Black-Scholes formula.

    P = K*e^(-rT)*N(-d2) - S*N(-d1)

    Floored at 0; intrinsic value when T <= 0.
    """
    if T <= 0:
        return intrinsic_value(S, K, is_call=False)

    d1_val = d1(S, K, T, r, sigma)
    d2_val = d1_val - sigma * sqrt(T)

    put = K * exp(-r * T) * norm_cdf(-d2_val) - S * norm_cdf(-d1_val)
    return float(max(put, 0.0))


def option_price(S: float, K: float, T: float, r: float, sigma: float, is_call: bool = True) -> float:
    """Call or put price selected by ``is_call``."""
    if is_call:
        return call_price(S, K, T, r, sigma)
    return put_price(S, K, T, r, sigma)


def time_value(S: float, K: float, T: float, r: float, sigma: float, is_call: bool = True) -> float:
    """Theoretical price in excess of intrinsic value, floored at 0."""
    theoretical = option_price(S, K, T, r, sigma, is_call)
    return float(max(theoretical - intrinsic_value(S, K, is_call), 0.0))
