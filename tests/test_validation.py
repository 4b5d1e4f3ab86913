"""Tests for the model validation helpers."""

import dataclasses
import math
import numpy as np
import pytest

from bspricer import validate, price_and_greeks, InvalidParameters
from bspricer.validation import put_call_parity, cdf_accuracy, cross_check

OPT = validate(100.0, 105.0, 1.0, 0.05, 0.2)


class TestPutCallParity:
    def test_holds_for_engine_prices(self):
        result = put_call_parity(OPT)
        assert result["holds"]
        assert result["difference"] < 1e-10
        assert abs(result["rhs"] - (100.0 - 105.0 * np.exp(-0.05))) < 1e-12

    def test_uses_supplied_prices(self):
        prices = price_and_greeks(OPT)
        broken = dataclasses.replace(prices, call_price=prices.call_price + 1.0)
        result = put_call_parity(OPT, broken)
        assert not result["holds"]
        assert abs(result["difference"] - 1.0) < 1e-9

    def test_tolerance(self):
        prices = price_and_greeks(OPT)
        nudged = dataclasses.replace(prices, put_price=prices.put_price + 0.005)
        assert put_call_parity(OPT, nudged)["holds"]
        assert not put_call_parity(OPT, nudged, tolerance=0.001)["holds"]

    def test_rejects_corrupted_parameters(self):
        params = validate(100.0, 105.0, 1.0, 0.05, 0.2)
        object.__setattr__(params, "strike_price", -1.0)
        with pytest.raises(InvalidParameters):
            put_call_parity(params)


class TestCDFAccuracy:
    def test_within_bound(self):
        result = cdf_accuracy()
        assert result["max_abs_error"] < 1e-7
        assert result["mean_abs_error"] <= result["max_abs_error"]

    def test_custom_grid(self):
        result = cdf_accuracy([-1.0, 0.0, 1.0])
        assert result["argmax"] in (-1.0, 0.0, 1.0)
        assert result["max_abs_error"] < 1e-7


class TestCrossCheck:
    def test_engine_close_to_exact(self):
        result = cross_check(OPT)
        assert result["max_discrepancy"] < 2e-5
        assert abs(result["exact"]["call"] - 8.0214) < 1e-3
        assert result["engine"]["call"] == price_and_greeks(OPT).call_price

    def test_negative_rate(self):
        result = cross_check(validate(100.0, 95.0, 0.5, -0.005, 0.3))
        assert result["max_discrepancy"] < 2e-5


class TestExtremeInputs:
    EXTREME = validate(100.0, 105.0, 1.0, -800.0, 0.2)

    def test_parity_reports_instead_of_raising(self):
        result = put_call_parity(self.EXTREME)
        assert result["rhs"] == -math.inf
        assert math.isnan(result["difference"])
        assert result["holds"] is False

    def test_cross_check_reports_instead_of_raising(self):
        result = cross_check(self.EXTREME)
        assert math.isnan(result["exact"]["call"])
        assert result["exact"]["put"] == math.inf
