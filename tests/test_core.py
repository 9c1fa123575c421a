"""Tests for OptionParameters / OptionPrices."""

import dataclasses
import math

import pytest
from bspricer import OptionParameters, OptionPrices, InvalidParameter, calculate_prices

OPT = OptionParameters(100.0, 105.0, 1.0, 0.05, 0.20)


def _unchecked(S, K, T, r, sigma):
    """Build an instance without running __post_init__."""
    p = object.__new__(OptionParameters)
    for name, value in zip(
        ("underlying_price", "strike_price", "time_to_expiration",
         "risk_free_rate", "volatility"),
        (S, K, T, r, sigma),
    ):
        object.__setattr__(p, name, value)
    return p


class TestConstruction:
    def test_valid(self):
        assert OPT.is_valid()
        assert OPT.underlying_price == 100.0
        assert OPT.volatility == 0.20

    @pytest.mark.parametrize("args, fragment", [
        ((0.0, 105.0, 1.0, 0.05, 0.2), "underlying price must be positive"),
        ((100.0, -5.0, 1.0, 0.05, 0.2), "strike price must be positive"),
        ((100.0, 105.0, 0.0, 0.05, 0.2), "time to expiration must be positive"),
        ((100.0, 105.0, 1.0, 0.05, 0.0), "volatility must be positive"),
        ((100.0, 105.0, 1.0, math.nan, 0.2), "risk free rate must be finite"),
        ((math.inf, 105.0, 1.0, 0.05, 0.2), "underlying price must be finite"),
    ])
    def test_rejects(self, args, fragment):
        with pytest.raises(InvalidParameter, match=fragment):
            OptionParameters(*args)

    @pytest.mark.parametrize("args", [
        ("100", 105.0, 1.0, 0.05, 0.2),
        (100.0, None, 1.0, 0.05, 0.2),
        (100.0, 105.0, True, 0.05, 0.2),
    ])
    def test_rejects_non_numbers(self, args):
        with pytest.raises(InvalidParameter, match="must be a real number"):
            OptionParameters(*args)

    def test_accepts_ints(self):
        assert OptionParameters(100, 105, 1, 0, 1).is_valid()

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            OptionParameters(100.0, 105.0, 1.0, 0.05, -0.1)

    @pytest.mark.parametrize("r", [-0.02, 0.0, 0.10])
    def test_rate_may_be_zero_or_negative(self, r):
        assert OptionParameters(100.0, 105.0, 1.0, r, 0.2).is_valid()

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            OPT.volatility = 0.3

    def test_value_equality(self):
        assert OPT == OptionParameters(100.0, 105.0, 1.0, 0.05, 0.20)
        assert OPT != OptionParameters(101.0, 105.0, 1.0, 0.05, 0.20)


class TestRevalidation:
    def test_is_valid_never_raises(self):
        bad = _unchecked(-1.0, 105.0, 1.0, 0.05, 0.2)
        assert bad.is_valid() is False

    def test_validate_raises(self):
        bad = _unchecked(100.0, 105.0, 1.0, 0.05, math.nan)
        with pytest.raises(InvalidParameter, match="volatility"):
            bad.validate()

    def test_engine_rejects_unchecked(self):
        bad = _unchecked(100.0, 105.0, -1.0, 0.05, 0.2)
        with pytest.raises(InvalidParameter):
            calculate_prices(bad)


class TestHelpers:
    def test_with_underlying(self):
        moved = OPT.with_underlying(80.0)
        assert moved.underlying_price == 80.0
        assert moved.strike_price == OPT.strike_price
        assert OPT.underlying_price == 100.0

    def test_with_underlying_validates(self):
        with pytest.raises(InvalidParameter):
            OPT.with_underlying(0.0)

    def test_try_create_ok(self):
        params, err = OptionParameters.try_create(100.0, 105.0, 1.0, 0.05, 0.2)
        assert err is None
        assert params == OPT

    def test_try_create_failure(self):
        params, err = OptionParameters.try_create(100.0, 105.0, 1.0, 0.05, 0.0)
        assert params is None
        assert "volatility must be positive" in err

    def test_prices_as_dict(self):
        d = calculate_prices(OPT).as_dict()
        assert len(d) == 10
        assert set(d) >= {"call_price", "put_price", "gamma", "vega"}
        assert isinstance(calculate_prices(OPT), OptionPrices)
