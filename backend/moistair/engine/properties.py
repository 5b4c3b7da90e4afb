"""
Moist-air property relations (SI units).

Pure functions converting among saturation pressure, vapor pressure, humidity
ratio, relative humidity, enthalpy, density and flows. Temperatures in °C,
pressures in Pa, humidity ratio in kg_w/kg_da, enthalpy in kJ/kg_da.

Saturation pressure uses the Magnus correlation over liquid water
(Lawrence, 2005), valid from -50°C to +200°C. No domain checks are made here;
extrapolating outside that range is the caller's responsibility.
"""

import math

from moistair.config import (
    C_DA,
    FLOW_FACTOR,
    H_FG_0,
    H_FG_T,
    K_W,
    KELVIN_OFFSET,
    MAGNUS_A,
    MAGNUS_B,
    MAGNUS_P_REF,
    R_DA,
    R_MIX_FACTOR,
    TEMPERATURE_MAX_ITER,
    WET_BULB_DEW_POINT_MARGIN,
    WET_BULB_FLOOR,
    WET_BULB_TOL,
)
from moistair.engine.root_finder import bisect


def saturation_pressure(T: float) -> float:
    """Saturation vapor pressure over liquid water at T (°C), in Pa."""
    return MAGNUS_P_REF * math.exp((MAGNUS_A * T) / (MAGNUS_B + T))


def temperature_from_saturation_pressure(p_sat: float) -> float:
    """
    Exact inverse of saturation_pressure().

    Returns -inf for p_sat == 0 and NaN for negative pressures instead of
    raising, so callers can reject the result as a non-physical state.
    """
    if p_sat <= 0:
        return -math.inf if p_sat == 0 else math.nan
    ratio = math.log(p_sat / MAGNUS_P_REF)
    if ratio == MAGNUS_A:
        return math.inf
    return (MAGNUS_B * ratio) / (MAGNUS_A - ratio)


def humidity_ratio_from_vapor_pressure(Pv: float, P_total: float) -> float:
    """
    W = 0.622 × Pv / (P_total - Pv)

    Returns math.inf when Pv >= P_total (no dry air left).
    """
    if Pv >= P_total:
        return math.inf
    return K_W * Pv / (P_total - Pv)


def vapor_pressure_from_humidity_ratio(W: float, P_total: float) -> float:
    """Pv = P_total × W / (0.622 + W)"""
    return P_total * W / (K_W + W)


def relative_humidity(Pv: float, T: float) -> float:
    """Relative humidity in percent. Not clamped."""
    return 100.0 * Pv / saturation_pressure(T)


def saturation_humidity_ratio(T: float, P_total: float) -> float:
    """Maximum humidity ratio air can hold at T and P_total."""
    return humidity_ratio_from_vapor_pressure(saturation_pressure(T), P_total)


def enthalpy(T: float, W: float) -> float:
    """
    Specific enthalpy of moist air (ASHRAE Fundamentals, SI).

        h = c_da × T + W × (h_fg0 + h_fg_T × T)
    """
    return C_DA * T + W * (H_FG_0 + H_FG_T * T)


def density(T: float, W: float, P_total: float) -> float:
    """
    Moist-air density from the ideal-gas law with a humidity-weighted
    mixture gas constant:

        R_mix = R_da × (1 + 1.6078 W) / (1 + W)
        rho   = P_total / (R_mix × T_K)
    """
    T_K = T + KELVIN_OFFSET
    R_mix = R_DA * (1.0 + R_MIX_FACTOR * W) / (1.0 + W)
    return P_total / (R_mix * T_K)


def volumetric_flow(m_da: float, rho: float) -> float:
    """Volumetric flow (m³/h) from dry-air mass flow (kg/s) and density."""
    return (m_da / rho) * FLOW_FACTOR


def mass_flow_from_volumetric_flow(V_dot: float, rho: float) -> float:
    """Inverse of volumetric_flow()."""
    return (V_dot / FLOW_FACTOR) * rho


def dew_point_temperature(W: float, P_total: float) -> float:
    return temperature_from_saturation_pressure(
        vapor_pressure_from_humidity_ratio(W, P_total)
    )


def wet_bulb_temperature(Tdb: float, W: float, P_total: float) -> float:
    """
    Wet-bulb temperature by adiabatic saturation.

    Finds Twb where saturated air at Twb has the same enthalpy as the actual
    air. Enthalpy at saturation rises with temperature, so bisection applies.
    The bracket starts a few degrees below the dew point (never below -50°C)
    and ends at Tdb.
    """
    h_target = enthalpy(Tdb, W)
    T_dew = dew_point_temperature(W, P_total)
    # T_dew is -inf for perfectly dry air; max() keeps the floor
    T_low = max(T_dew - WET_BULB_DEW_POINT_MARGIN, WET_BULB_FLOOR)

    def saturated_enthalpy(T: float) -> float:
        return enthalpy(T, saturation_humidity_ratio(T, P_total))

    return bisect(
        saturated_enthalpy,
        h_target,
        T_low,
        Tdb,
        tol=WET_BULB_TOL,
        max_iter=TEMPERATURE_MAX_ITER,
    )
