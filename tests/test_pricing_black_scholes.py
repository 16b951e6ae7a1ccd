"""Tests for Black-Scholes pricing and Greeks."""

from math import exp

import pytest

from optionlab.errors import InvalidInputError
from optionlab.pricing import (
    OptionMetrics,
    call_delta,
    call_gamma,
    call_price,
    call_rho,
    call_theta,
    call_vega,
    compute_all_metrics,
    d1,
    d2,
    forward_intrinsic_value,
    gamma,
    intrinsic_value,
    norm_cdf,
    norm_pdf,
    put_delta,
    put_gamma,
    put_price,
    put_rho,
    put_theta,
    put_vega,
    time_value,
    vega,
)


class TestNormalDistribution:
    """Test the standard normal helpers."""

    def test_cdf_at_zero(self) -> None:
        assert norm_cdf(0.0) == pytest.approx(0.5, abs=1e-12)

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 3.0])
    def test_cdf_symmetry(self, x: float) -> None:
        assert norm_cdf(-x) == pytest.approx(1 - norm_cdf(x), abs=1e-6)

    def test_pdf_peak(self) -> None:
        assert norm_pdf(0.0) == pytest.approx(0.3989423, abs=1e-6)
        assert norm_pdf(1.0) == pytest.approx(norm_pdf(-1.0))


class TestD1D2:
    """Test d1/d2 parameters and their boundary validation."""

    def test_atm_values(self) -> None:
        assert d1(100.0, 100.0, 1.0, 0.05, 0.2) == pytest.approx(0.35)
        assert d2(100.0, 100.0, 1.0, 0.05, 0.2) == pytest.approx(0.15)

    def test_zero_volatility_raises(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            d1(100.0, 100.0, 1.0, 0.05, 0.0)
        assert exc_info.value.parameter == "sigma"

    def test_expired_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            d1(100.0, 100.0, 0.0, 0.05, 0.2)

    def test_non_positive_spot_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            call_price(-1.0, 100.0, 1.0, 0.05, 0.2)


class TestBlackScholesPrice:
    """Test Black-Scholes option pricing."""

    def test_call_price_atm(self) -> None:
        assert call_price(100.0, 100.0, 1.0, 0.05, 0.2) == pytest.approx(10.4506, abs=1e-3)

    def test_put_price_atm(self) -> None:
        assert put_price(100.0, 100.0, 1.0, 0.05, 0.2) == pytest.approx(5.5735, abs=1e-3)

    @pytest.mark.parametrize(
        "S, K, T, r, sigma",
        [
            (100.0, 100.0, 1.0, 0.05, 0.2),
            (120.0, 100.0, 0.5, 0.03, 0.3),
            (80.0, 100.0, 0.25, 0.01, 0.5),
            (100.0, 90.0, 2.0, 0.0, 0.15),
        ],
    )
    def test_put_call_parity(self, S: float, K: float, T: float, r: float, sigma: float) -> None:
        parity = call_price(S, K, T, r, sigma) - put_price(S, K, T, r, sigma)
        assert parity == pytest.approx(S - K * exp(-r * T), abs=1e-8)

    def test_deep_otm_call_is_floored_at_zero(self) -> None:
        price = call_price(50.0, 100.0, 0.1, 0.05, 0.2)
        assert 0.0 <= price < 1e-6

    def test_deep_itm_call_near_intrinsic(self) -> None:
        price = call_price(150.0, 100.0, 0.1, 0.05, 0.2)
        assert 50.0 < price < 51.0


class TestAtExpiration:
    """T <= 0 collapses to intrinsic value and zero Greeks."""

    @pytest.mark.parametrize("S", [80.0, 100.0, 120.0])
    def test_prices_are_intrinsic(self, S: float) -> None:
        assert call_price(S, 100.0, 0.0, 0.05, 0.2) == max(S - 100.0, 0.0)
        assert put_price(S, 100.0, 0.0, 0.05, 0.2) == max(100.0 - S, 0.0)

    def test_negative_time_treated_as_expired(self) -> None:
        assert call_price(110.0, 100.0, -0.1, 0.05, 0.2) == 10.0

    def test_zero_volatility_is_fine_at_expiration(self) -> None:
        assert call_price(110.0, 100.0, 0.0, 0.05, 0.0) == 10.0
        assert put_delta(90.0, 100.0, 0.0, 0.05, 0.0) == -1.0

    def test_delta_is_step_function(self) -> None:
        assert call_delta(110.0, 100.0, 0.0, 0.05, 0.2) == 1.0
        assert call_delta(100.0, 100.0, 0.0, 0.05, 0.2) == 0.0
        assert call_delta(90.0, 100.0, 0.0, 0.05, 0.2) == 0.0
        assert put_delta(90.0, 100.0, 0.0, 0.05, 0.2) == -1.0
        assert put_delta(100.0, 100.0, 0.0, 0.05, 0.2) == 0.0
        assert put_delta(110.0, 100.0, 0.0, 0.05, 0.2) == 0.0

    def test_other_greeks_are_zero(self) -> None:
        args = (105.0, 100.0, 0.0, 0.05, 0.2)
        assert gamma(*args) == 0.0
        assert call_theta(*args) == 0.0
        assert put_theta(*args) == 0.0
        assert vega(*args) == 0.0
        assert call_rho(*args) == 0.0
        assert put_rho(*args) == 0.0


class TestGreeks:
    """Test Greeks against textbook values for S=K=100, T=1, r=5%, vol=20%."""

    args = (100.0, 100.0, 1.0, 0.05, 0.2)

    def test_delta(self) -> None:
        assert call_delta(*self.args) == pytest.approx(0.63683, abs=1e-4)
        assert put_delta(*self.args) == pytest.approx(0.63683 - 1, abs=1e-4)

    def test_gamma(self) -> None:
        assert gamma(*self.args) == pytest.approx(0.018762, abs=1e-5)

    def test_gamma_identical_for_call_and_put(self) -> None:
        for args in [self.args, (90.0, 100.0, 0.3, 0.02, 0.4), (130.0, 100.0, 2.0, 0.07, 0.25)]:
            assert call_gamma(*args) == put_gamma(*args)

    def test_theta_is_daily(self) -> None:
        assert call_theta(*self.args) == pytest.approx(-6.414 / 365, rel=1e-3)
        assert put_theta(*self.args) == pytest.approx(-1.658 / 365, rel=1e-2)

    def test_vega_per_vol_point(self) -> None:
        assert vega(*self.args) == pytest.approx(0.37524, abs=1e-4)
        assert call_vega(*self.args) == put_vega(*self.args)

    def test_rho_sign_flips(self) -> None:
        assert call_rho(*self.args) == pytest.approx(0.53232, abs=1e-4)
        assert put_rho(*self.args) == pytest.approx(-0.41890, abs=1e-4)


class TestValueDecomposition:
    """Test intrinsic and time value."""

    def test_intrinsic_value(self) -> None:
        assert intrinsic_value(110.0, 100.0, is_call=True) == 10.0
        assert intrinsic_value(110.0, 100.0, is_call=False) == 0.0
        assert intrinsic_value(90.0, 100.0, is_call=False) == 10.0

    def test_time_value_atm_is_whole_price(self) -> None:
        assert time_value(100.0, 100.0, 1.0, 0.05, 0.2) == pytest.approx(
            call_price(100.0, 100.0, 1.0, 0.05, 0.2)
        )

    def test_time_value_zero_at_expiration(self) -> None:
        assert time_value(120.0, 100.0, 0.0, 0.05, 0.2) == 0.0

    def test_time_value_never_negative(self) -> None:
        # Deep ITM European put can trade below intrinsic
        assert time_value(50.0, 100.0, 2.0, 0.1, 0.1, is_call=False) == 0.0


class TestComputeAllMetrics:
    """Test the bundled calculator."""

    def test_call_bundle(self) -> None:
        metrics = compute_all_metrics(100.0, 100.0, 1.0, 0.05, 0.2, is_call=True)

        assert isinstance(metrics, OptionMetrics)
        assert metrics.price == pytest.approx(call_price(100.0, 100.0, 1.0, 0.05, 0.2))
        assert metrics.delta == pytest.approx(call_delta(100.0, 100.0, 1.0, 0.05, 0.2))
        assert metrics.rho > 0

    def test_put_bundle(self) -> None:
        metrics = compute_all_metrics(100.0, 100.0, 1.0, 0.05, 0.2, is_call=False)

        assert metrics.price == pytest.approx(put_price(100.0, 100.0, 1.0, 0.05, 0.2))
        assert metrics.delta < 0
        assert metrics.rho < 0

    def test_to_dict_keys(self) -> None:
        metrics = compute_all_metrics(100.0, 100.0, 1.0, 0.05, 0.2)
        assert set(metrics.to_dict()) == {"price", "delta", "gamma", "theta", "vega", "rho"}


class TestForwardIntrinsicValue:
    """Zero-volatility limit of the model price."""

    def test_call_against_discounted_strike(self) -> None:
        assert forward_intrinsic_value(110.0, 100.0, 1.0, 0.05) == pytest.approx(110.0 - 100.0 * exp(-0.05))

    def test_put_against_discounted_strike(self) -> None:
        expected = 100.0 * exp(-0.05) - 90.0
        assert forward_intrinsic_value(90.0, 100.0, 1.0, 0.05, is_call=False) == pytest.approx(expected)

    def test_out_of_the_money_is_zero(self) -> None:
        assert forward_intrinsic_value(90.0, 100.0, 1.0, 0.05) == 0.0
        assert forward_intrinsic_value(110.0, 100.0, 1.0, 0.05, is_call=False) == 0.0

    def test_matches_intrinsic_at_expiration(self) -> None:
        assert forward_intrinsic_value(110.0, 100.0, 0.0, 0.05) == intrinsic_value(110.0, 100.0)
        assert forward_intrinsic_value(90.0, 100.0, -1.0, 0.05, is_call=False) == 10.0

    def test_is_the_low_volatility_limit(self) -> None:
        assert call_price(110.0, 100.0, 1.0, 0.05, 1e-4) == pytest.approx(
            forward_intrinsic_value(110.0, 100.0, 1.0, 0.05), abs=1e-6
        )
