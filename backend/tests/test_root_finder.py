"""
Tests for the bounded bisection root-finder.

scipy's brentq serves as an independent reference solver.
"""

import logging

import pytest
from scipy.optimize import brentq

from moistair.config import DEFAULT_PRESSURE
from moistair.engine.properties import enthalpy, saturation_humidity_ratio
from moistair.engine.root_finder import bisect, bisect_with_info


class TestBisect:
    def test_cube_root(self):
        assert bisect(lambda x: x ** 3, 8.0, 0.0, 5.0, tol=1e-9, max_iter=200) == pytest.approx(2.0, abs=1e-8)

    def test_result_within_half_tolerance(self):
        result = bisect_with_info(lambda x: 2.0 * x + 1.0, 4.0, -10.0, 10.0, tol=0.01, max_iter=100)
        assert result.converged
        assert result.bracket_width <= 0.01
        assert abs(result.value - 1.5) <= 0.005

    def test_matches_brentq_on_enthalpy(self):
        W = 0.012
        h_target = 60.0
        expected = brentq(lambda T: enthalpy(T, W) - h_target, -50.0, 100.0, xtol=1e-12)
        actual = bisect(lambda T: enthalpy(T, W), h_target, -50.0, 100.0, tol=1e-9, max_iter=100)
        assert actual == pytest.approx(expected, abs=1e-8)

    def test_matches_brentq_on_saturated_enthalpy(self):
        def h_sat(T):
            return enthalpy(T, saturation_humidity_ratio(T, DEFAULT_PRESSURE))

        expected = brentq(lambda T: h_sat(T) - 75.0, -20.0, 60.0, xtol=1e-12)
        actual = bisect(h_sat, 75.0, -20.0, 60.0, tol=1e-6, max_iter=100)
        assert actual == pytest.approx(expected, abs=1e-5)


class TestIterationCap:
    def test_stops_at_cap_without_error(self):
        result = bisect_with_info(lambda x: x, 0.3, 0.0, 1.0, tol=1e-12, max_iter=3)
        # [0, 1] → [0, 0.5] → [0.25, 0.5] → [0.25, 0.375]
        assert result.iterations == 3
        assert not result.converged
        assert result.value == pytest.approx(0.3125)

    def test_cap_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="moistair.engine.root_finder"):
            bisect(lambda x: x, 0.3, 0.0, 1.0, tol=1e-12, max_iter=3)
        assert "iteration cap" in caplog.text

    def test_zero_iterations_when_bracket_already_tight(self):
        result = bisect_with_info(lambda x: x, 0.5, 1.0, 1.0005, tol=0.001, max_iter=50)
        assert result.iterations == 0
        assert result.value == pytest.approx(1.00025)


class TestTargetOutsideBracket:
    """No exception: the search degrades to the nearest bracket end."""

    def test_target_above(self):
        value = bisect(lambda x: x, 5.0, 0.0, 1.0, tol=1e-6, max_iter=100)
        assert value == pytest.approx(1.0, abs=1e-6)

    def test_target_below(self):
        value = bisect(lambda x: x, -5.0, 0.0, 1.0, tol=1e-6, max_iter=100)
        assert value == pytest.approx(0.0, abs=1e-6)
