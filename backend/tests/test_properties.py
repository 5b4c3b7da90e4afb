"""
Tests for the moist-air property relations.

Reference values are computed from the Magnus correlation and cross-checked
against ASHRAE Fundamentals SI tables (within the accuracy of the correlation).
"""

import math

import pytest

from moistair.config import DEFAULT_PRESSURE, MAGNUS_P_REF
from moistair.engine.properties import (
    density,
    dew_point_temperature,
    enthalpy,
    humidity_ratio_from_vapor_pressure,
    mass_flow_from_volumetric_flow,
    relative_humidity,
    saturation_humidity_ratio,
    saturation_pressure,
    temperature_from_saturation_pressure,
    vapor_pressure_from_humidity_ratio,
    volumetric_flow,
    wet_bulb_temperature,
)


def approx(value: float, rel_tol: float = 0.01, abs_tol: float = 0.1):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


# ---------------------------------------------------------------------------
# Saturation pressure
# ---------------------------------------------------------------------------

class TestSaturationPressure:
    def test_reference_at_zero(self):
        assert saturation_pressure(0.0) == pytest.approx(MAGNUS_P_REF)

    def test_twenty_degrees(self):
        # ASHRAE table: 2339 Pa; Magnus gives ~2335 Pa
        assert 2320.0 <= saturation_pressure(20.0) <= 2350.0

    def test_boiling_point_order_of_magnitude(self):
        # Magnus drifts at 100°C but stays near one atmosphere
        assert 95000.0 <= saturation_pressure(100.0) <= 106000.0

    def test_increases_with_temperature(self):
        temps = [-50.0, -20.0, 0.0, 10.0, 25.0, 50.0, 100.0, 200.0]
        values = [saturation_pressure(t) for t in temps]
        assert values == sorted(values)

    @pytest.mark.parametrize("T", [-45.0, -10.0, 0.0, 12.5, 37.0, 80.0, 150.0])
    def test_inverse_is_exact(self, T):
        assert temperature_from_saturation_pressure(saturation_pressure(T)) == pytest.approx(T, abs=1e-9)

    def test_inverse_of_zero_is_minus_infinity(self):
        assert temperature_from_saturation_pressure(0.0) == -math.inf

    def test_inverse_of_negative_is_nan(self):
        assert math.isnan(temperature_from_saturation_pressure(-1.0))


# ---------------------------------------------------------------------------
# Humidity ratio ↔ vapor pressure
# ---------------------------------------------------------------------------

class TestHumidityRatio:
    def test_dry_air(self):
        assert humidity_ratio_from_vapor_pressure(0.0, DEFAULT_PRESSURE) == 0.0

    def test_known_value(self):
        # 0.622 × 2000 / 99325
        assert humidity_ratio_from_vapor_pressure(2000.0, DEFAULT_PRESSURE) == pytest.approx(0.0125245, rel=1e-5)

    def test_unbounded_at_total_pressure(self):
        assert humidity_ratio_from_vapor_pressure(DEFAULT_PRESSURE, DEFAULT_PRESSURE) == math.inf
        assert humidity_ratio_from_vapor_pressure(2 * DEFAULT_PRESSURE, DEFAULT_PRESSURE) == math.inf

    @pytest.mark.parametrize("Pv", [10.0, 1500.0, 4000.0, 20000.0])
    def test_inverse(self, Pv):
        W = humidity_ratio_from_vapor_pressure(Pv, DEFAULT_PRESSURE)
        assert vapor_pressure_from_humidity_ratio(W, DEFAULT_PRESSURE) == pytest.approx(Pv, rel=1e-12)

    def test_saturation_humidity_ratio_at_25c(self):
        # ASHRAE: W_s(25°C) = 0.02016 kg/kg
        assert saturation_humidity_ratio(25.0, DEFAULT_PRESSURE) == pytest.approx(0.0200, abs=0.0005)

    def test_lower_pressure_holds_more_water(self):
        assert saturation_humidity_ratio(25.0, 84000.0) > saturation_humidity_ratio(25.0, DEFAULT_PRESSURE)


# ---------------------------------------------------------------------------
# Relative humidity
# ---------------------------------------------------------------------------

class TestRelativeHumidity:
    def test_saturated(self):
        assert relative_humidity(saturation_pressure(18.0), 18.0) == pytest.approx(100.0)

    def test_half(self):
        assert relative_humidity(0.5 * saturation_pressure(30.0), 30.0) == pytest.approx(50.0)

    def test_not_clamped(self):
        assert relative_humidity(1.2 * saturation_pressure(10.0), 10.0) == pytest.approx(120.0)


# ---------------------------------------------------------------------------
# Enthalpy, density, flows
# ---------------------------------------------------------------------------

class TestEnthalpy:
    def test_dry_air_at_zero(self):
        assert enthalpy(0.0, 0.0) == 0.0

    def test_known_value(self):
        # 1.006 × 20 + 0.01 × (2501 + 1.86 × 20)
        assert enthalpy(20.0, 0.01) == pytest.approx(45.502, abs=1e-9)

    def test_strictly_increasing_in_temperature(self):
        for W in [0.0, 0.005, 0.02, 0.05]:
            values = [enthalpy(T, W) for T in range(-50, 101)]
            assert all(b > a for a, b in zip(values, values[1:]))

    def test_strictly_increasing_in_humidity_ratio(self):
        values = [enthalpy(30.0, W / 1000.0) for W in range(0, 40)]
        assert all(b > a for a, b in zip(values, values[1:]))


class TestDensity:
    def test_dry_air_at_20c(self):
        # 101325 / (287.058 × 293.15)
        assert density(20.0, 0.0, DEFAULT_PRESSURE) == pytest.approx(1.2041, abs=1e-4)

    def test_moist_air_is_lighter(self):
        assert density(20.0, 0.012, DEFAULT_PRESSURE) < density(20.0, 0.0, DEFAULT_PRESSURE)

    def test_positive(self):
        assert density(-40.0, 0.0001, 70000.0) > 0


class TestFlows:
    def test_volumetric_flow(self):
        assert volumetric_flow(1.2, 1.2) == pytest.approx(3.6)

    def test_mass_flow_inverse(self):
        rho = 1.18
        V_dot = volumetric_flow(2.0, rho)
        assert mass_flow_from_volumetric_flow(V_dot, rho) == pytest.approx(2.0)


# ---------------------------------------------------------------------------
# Dew point and wet bulb
# ---------------------------------------------------------------------------

class TestDewPoint:
    def test_saturated_air_dew_point_equals_tdb(self):
        W_sat = saturation_humidity_ratio(15.0, DEFAULT_PRESSURE)
        assert dew_point_temperature(W_sat, DEFAULT_PRESSURE) == pytest.approx(15.0, abs=1e-9)

    def test_dry_air(self):
        assert dew_point_temperature(0.0, DEFAULT_PRESSURE) == -math.inf


class TestWetBulb:
    def test_saturated_air(self):
        W_sat = saturation_humidity_ratio(20.0, DEFAULT_PRESSURE)
        assert wet_bulb_temperature(20.0, W_sat, DEFAULT_PRESSURE) == approx(20.0, abs_tol=0.01)

    def test_between_dew_point_and_dry_bulb(self):
        W = 0.008
        Twb = wet_bulb_temperature(30.0, W, DEFAULT_PRESSURE)
        Tdp = dew_point_temperature(W, DEFAULT_PRESSURE)
        assert Tdp < Twb < 30.0

    def test_known_value(self):
        # 24°C / 50% RH → Twb ≈ 17.0°C
        W = humidity_ratio_from_vapor_pressure(0.5 * saturation_pressure(24.0), DEFAULT_PRESSURE)
        assert wet_bulb_temperature(24.0, W, DEFAULT_PRESSURE) == approx(17.0, abs_tol=0.5)

    def test_dry_air_does_not_fail(self):
        Twb = wet_bulb_temperature(25.0, 0.0, DEFAULT_PRESSURE)
        assert -50.0 <= Twb < 25.0
