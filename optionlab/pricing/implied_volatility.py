"""Implied Volatility Computation

Solves for the volatility that makes the Black-Scholes price equal an
observed market price:
- Newton-Raphson (default): fast, best-effort, never raises on
  non-convergence and returns its last clamped estimate instead
- Brent's method: bracketing root search over the same volatility bounds,
  raises ImpliedVolatilityError when no root is bracketed

Mathematical formulation:
    Given market price P_market, find sigma such that:
    BS(S, K, T, r, sigma) = P_market
"""

import logging
from dataclasses import dataclass
from typing import Literal

from scipy.optimize import brentq

from optionlab.errors import ImpliedVolatilityError, InvalidInputError

from .formulas import option_price
from .greeks import vega

logger = logging.getLogger(__name__)


@dataclass
class ImpliedVolatilitySolver:
    """Configuration for implied volatility solver.

    Attributes:
        max_iterations: Maximum number of iterations
        tolerance: Convergence tolerance (absolute error in price, and the
            minimum usable raw vega for Newton-Raphson)
        initial_guess: Newton-Raphson starting volatility (30%)
        min_vol: Lower volatility bound (0.1%)
        max_vol: Upper volatility bound (500%)
        method: Solver method ("newton-raphson" or "brent")
    """

    max_iterations: int = 100
    tolerance: float = 1e-4
    initial_guess: float = 0.3
    min_vol: float = 0.001
    max_vol: float = 5.0
    method: Literal["newton-raphson", "brent"] = "newton-raphson"

    def clamp(self, sigma: float) -> float:
        return max(self.min_vol, min(sigma, self.max_vol))


def implied_volatility(
    market_price: float,
    S: float,
    K: float,
    T: float,
    r: float,
    is_call: bool = True,
    max_iterations: int | None = None,
    tolerance: float | None = None,
    config: ImpliedVolatilitySolver | None = None,
) -> float:
    """Calculate implied volatility using the Newton-Raphson method.

    Newton-Raphson iteration:
        sigma_(n+1) = sigma_n - [BS(sigma_n) - P_market] / vega_raw(sigma_n)

    where vega_raw is the unscaled derivative (per-point vega * 100). The
    estimate is clamped to [min_vol, max_vol] after every step. Iteration
    stops early when vega_raw is below tolerance (flat price curve) or the
    price difference is below tolerance.

    This is a best-effort solver: if the iteration cap is reached the last
    estimate is returned without any accuracy guarantee. Use
    implied_volatility_brent when a bracketed root is required.

    Args:
        market_price: Observed market price of the option
        S: Current underlying price
        K: Strike price
        T: Time to expiration (years)
        r: Risk-free rate (annualized)
        is_call: True for a call, False for a put
        max_iterations: Iteration cap (defaults to config, 100)
        tolerance: Price/vega tolerance (defaults to config, 1e-4)
        config: Solver configuration (optional)

    Returns:
        Implied volatility (annualized); 0.0 when T <= 0
    """
    if config is None:
        config = ImpliedVolatilitySolver()
    if max_iterations is None:
        max_iterations = config.max_iterations
    if tolerance is None:
        tolerance = config.tolerance

    if T <= 0:
        return 0.0

    sigma = config.initial_guess

    for iteration in range(max_iterations):
        theoretical_price = option_price(S, K, T, r, sigma, is_call)
        vega_raw = vega(S, K, T, r, sigma) * 100.0

        if abs(vega_raw) < tolerance:
            logger.warning(
                f"Vega too small ({vega_raw:.3e}) at iteration {iteration}, "
                f"returning sigma={sigma:.6f}"
            )
            return sigma

        price_diff = theoretical_price - market_price

        if abs(price_diff) < tolerance:
            logger.debug(f"IV converged after {iteration} iterations: sigma={sigma:.6f}")
            return sigma

        sigma = config.clamp(sigma - price_diff / vega_raw)

    logger.warning(
        f"IV did not converge after {max_iterations} iterations, "
        f"returning last estimate sigma={sigma:.6f}"
    )
    return sigma


def implied_volatility_brent(
    market_price: float,
    S: float,
    K: float,
    T: float,
    r: float,
    is_call: bool = True,
    config: ImpliedVolatilitySolver | None = None,
) -> float:
    """Calculate implied volatility using Brent's method.

    Wraps scipy.optimize.brentq over [min_vol, max_vol].

    Returns:
        Implied volatility (annualized)

    Raises:
        InvalidInputError: If T or market_price is not positive
        ImpliedVolatilityError: If the price is not bracketed by the bounds
    """
    if config is None:
        config = ImpliedVolatilitySolver()

    if T <= 0:
        raise InvalidInputError("Time to expiration must be positive", "T", T)
    if market_price <= 0:
        raise InvalidInputError("Market price must be positive", "market_price", market_price)

    def objective(sigma: float) -> float:
        return option_price(S, K, T, r, sigma, is_call) - market_price

    try:
        sigma = brentq(
            objective,
            config.min_vol,
            config.max_vol,
            xtol=config.tolerance,
            maxiter=config.max_iterations,
        )
    except (ValueError, RuntimeError) as e:
        raise ImpliedVolatilityError(
            f"Brent's method failed: {e}", market_price=market_price
        ) from e

    return float(sigma)


def compute_implied_volatility(
    market_price: float,
    S: float,
    K: float,
    T: float,
    r: float,
    is_call: bool = True,
    config: ImpliedVolatilitySolver | None = None,
) -> float:
    """Compute implied volatility with the method selected in ``config``."""
    if config is None:
        config = ImpliedVolatilitySolver()

    if config.method == "brent":
        return implied_volatility_brent(market_price, S, K, T, r, is_call, config)
    return implied_volatility(market_price, S, K, T, r, is_call, config=config)
