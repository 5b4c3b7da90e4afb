"""
Core state resolver.

Given any supported pair of independent moist-air variables and a resolver
configuration (total pressure, reference dry-air mass flow), resolves the full
thermodynamic state.

Every strategy reduces its pair to (Tdb, W). From there all remaining
properties are derived the same way, so two different pairs describing the same
air produce the same state. Pairs without a closed-form inverse (Tdb+h,
Tdb+Twb, W+h) go through the bounded bisection in root_finder.
"""

import logging
import math
from typing import Callable, Optional, Union

import psychrolib

from moistair.config import (
    HUMIDITY_RATIO_MAX_ITER,
    HUMIDITY_RATIO_TOL,
    SUPPORTED_INPUT_PAIRS,
    TDB_SEARCH_MAX,
    TDB_SEARCH_MIN,
    TEMPERATURE_MAX_ITER,
    TEMPERATURE_TOL,
    VariableKind,
)
from moistair.engine import properties as props
from moistair.engine import validation
from moistair.engine.errors import (
    InputError,
    NonPhysicalStateError,
    UnsupportedPairError,
)
from moistair.engine.root_finder import bisect
from moistair.models.state import ResolverConfig, StateInput, ThermodynamicState

logger = logging.getLogger(__name__)

Kind = VariableKind
Inputs = dict[VariableKind, float]


def _w_search_upper_bound(Tdb: float, P_total: float) -> float:
    """Saturation humidity ratio at Tdb, the upper end of every W bracket."""
    W_sat = props.saturation_humidity_ratio(Tdb, P_total)
    if math.isinf(W_sat):
        raise NonPhysicalStateError(
            f"Saturation pressure at Tdb={Tdb}°C reaches the total pressure; "
            f"no finite humidity ratio bracket exists."
        )
    return W_sat


def _solve_w_for_enthalpy(Tdb: float, h_target: float, P_total: float) -> float:
    """Find W in [0, W_sat(Tdb)] such that enthalpy(Tdb, W) == h_target."""
    W_sat = _w_search_upper_bound(Tdb, P_total)

    h_min = props.enthalpy(Tdb, 0.0)
    h_max = props.enthalpy(Tdb, W_sat)
    if h_target < h_min or h_target > h_max:
        logger.warning(
            "Target enthalpy %.4f outside achievable range [%.4f, %.4f] at Tdb=%s; "
            "search stops at the bracket boundary",
            h_target, h_min, h_max, Tdb,
        )

    return bisect(
        lambda W: props.enthalpy(Tdb, W),
        h_target,
        0.0,
        W_sat,
        tol=HUMIDITY_RATIO_TOL,
        max_iter=HUMIDITY_RATIO_MAX_ITER,
    )


# ---------------------------------------------------------------------------
# Pair strategies: each returns (Tdb, W)
# ---------------------------------------------------------------------------

def _resolve_tdb_rh(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """Resolve from dry-bulb temperature and relative humidity."""
    Tdb, RH = inputs[Kind.Tdb], inputs[Kind.RH]
    validation.check_rh_input(RH)
    Pv = (RH / 100.0) * props.saturation_pressure(Tdb)
    W = props.humidity_ratio_from_vapor_pressure(Pv, P_total)
    return Tdb, W


def _resolve_tdb_w(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """Resolve from dry-bulb temperature and humidity ratio (kg/kg)."""
    Tdb, W = inputs[Kind.Tdb], inputs[Kind.W]
    validation.check_w_input(W)
    return Tdb, W


def _resolve_tdb_h(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """
    Resolve from dry-bulb temperature and specific enthalpy.

    Enthalpy is linear in W, but we use the bracketed search so the result is
    bounded by saturation: W is searched over [0, W_sat(Tdb)].
    """
    Tdb, h_target = inputs[Kind.Tdb], inputs[Kind.h]
    return Tdb, _solve_w_for_enthalpy(Tdb, h_target, P_total)


def _resolve_tdb_twb(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """
    Resolve from dry-bulb and wet-bulb temperatures.

    Adiabatic saturation: the air has the enthalpy of saturated air at Twb.
    """
    Tdb, Twb = inputs[Kind.Tdb], inputs[Kind.Twb]
    validation.check_wet_bulb_order(Tdb, Twb)
    W_sat_wb = _w_search_upper_bound(Twb, P_total)
    h_target = props.enthalpy(Twb, W_sat_wb)
    return Tdb, _solve_w_for_enthalpy(Tdb, h_target, P_total)


def _resolve_tdb_tdp(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """
    Resolve from dry-bulb and dew point temperatures.

    A dew point within the allowed slack above Tdb is read as saturated air:
    Tdp is capped at Tdb before computing Pv.
    """
    Tdb, Tdp = inputs[Kind.Tdb], inputs[Kind.Tdp]
    validation.check_dew_point_order(Tdb, Tdp)
    Pv = props.saturation_pressure(min(Tdp, Tdb))
    W = props.humidity_ratio_from_vapor_pressure(Pv, P_total)
    return Tdb, W


def _resolve_tdb_pv(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """Resolve from dry-bulb temperature and vapor pressure (Pa)."""
    Tdb, Pv = inputs[Kind.Tdb], inputs[Kind.Pv]
    W = props.humidity_ratio_from_vapor_pressure(Pv, P_total)
    return Tdb, W


def _resolve_w_h(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """
    Resolve from humidity ratio and enthalpy.

    For fixed W enthalpy rises with Tdb, so Tdb is bisected over [-50, 100]°C.
    """
    W, h_target = inputs[Kind.W], inputs[Kind.h]
    validation.check_w_input(W)
    h_min = props.enthalpy(TDB_SEARCH_MIN, W)
    h_max = props.enthalpy(TDB_SEARCH_MAX, W)
    if h_target < h_min or h_target > h_max:
        logger.warning(
            "Target enthalpy %.4f outside achievable range [%.4f, %.4f] at W=%s; "
            "search stops at the bracket boundary",
            h_target, h_min, h_max, W,
        )
    Tdb = bisect(
        lambda T: props.enthalpy(T, W),
        h_target,
        TDB_SEARCH_MIN,
        TDB_SEARCH_MAX,
        tol=TEMPERATURE_TOL,
        max_iter=TEMPERATURE_MAX_ITER,
    )
    return Tdb, W


def _resolve_rh_w(inputs: Inputs, P_total: float) -> tuple[float, float]:
    """
    Resolve from relative humidity and humidity ratio.

    W fixes Pv; RH = Pv / Ps(Tdb) fixes Ps(Tdb) = 100 × Pv / RH, and the
    Magnus correlation inverts exactly.
    """
    RH, W = inputs[Kind.RH], inputs[Kind.W]
    validation.check_rh_input(RH)
    validation.check_w_input(W)
    if RH == 0:
        raise InputError(
            "Relative humidity must be greater than 0% to resolve from RH and W."
        )
    Pv = props.vapor_pressure_from_humidity_ratio(W, P_total)
    p_sat_target = 100.0 * Pv / RH
    Tdb = props.temperature_from_saturation_pressure(p_sat_target)
    return Tdb, W


# Resolver dispatch table, keyed by the unordered pair of variable kinds
_RESOLVERS: dict[frozenset, Callable[[Inputs, float], tuple[float, float]]] = {
    frozenset({Kind.Tdb, Kind.RH}): _resolve_tdb_rh,
    frozenset({Kind.Tdb, Kind.W}): _resolve_tdb_w,
    frozenset({Kind.Tdb, Kind.h}): _resolve_tdb_h,
    frozenset({Kind.Tdb, Kind.Twb}): _resolve_tdb_twb,
    frozenset({Kind.Tdb, Kind.Tdp}): _resolve_tdb_tdp,
    frozenset({Kind.Tdb, Kind.Pv}): _resolve_tdb_pv,
    frozenset({Kind.W, Kind.h}): _resolve_w_h,
    frozenset({Kind.RH, Kind.W}): _resolve_rh_w,
}


def get_resolver(
    kind1: VariableKind, kind2: VariableKind
) -> Callable[[Inputs, float], tuple[float, float]]:
    """Look up the strategy for an unordered pair, or raise UnsupportedPairError."""
    resolver = _RESOLVERS.get(frozenset({kind1, kind2}))
    if resolver is None:
        supported = [f"({a.value}, {b.value})" for a, b in SUPPORTED_INPUT_PAIRS]
        raise UnsupportedPairError(
            f"Unsupported input pair: ({kind1.value}, {kind2.value}). "
            f"Supported pairs: {', '.join(supported)}"
        )
    return resolver


def _calc_all_from_tdb_w(Tdb: float, W: float, P_total: float) -> dict:
    """
    Given Tdb and W, calculate all other properties.

    This is the canonical resolution path: every pair strategy ends here.
    """
    validation.check_temperature(Tdb)
    validation.check_humidity_ratio(W)

    Pv = props.vapor_pressure_from_humidity_ratio(W, P_total)
    RH = validation.clamp_relative_humidity(props.relative_humidity(Pv, Tdb))

    return {
        "Tdb": Tdb,
        "W": W,
        "RH": RH,
        "h": props.enthalpy(Tdb, W),
        # Recomputed even when Twb was an input, so every pair agrees
        "Twb": props.wet_bulb_temperature(Tdb, W, P_total),
        "Tdp": props.temperature_from_saturation_pressure(Pv),
        "Pv": Pv,
        "rho": props.density(Tdb, W, P_total),
    }


def _resolve_flows(inputs: Inputs, rho: float, reference_mass_flow: float) -> tuple[float, float]:
    """
    Resolve (m_da, V_dot). Without a flow input the reference mass flow is
    used and V_dot derived; a V_dot input back-derives m_da through rho.
    """
    m_da = inputs.get(Kind.m_da, reference_mass_flow)
    if Kind.V_dot in inputs:
        V_dot = inputs[Kind.V_dot]
        m_da = props.mass_flow_from_volumetric_flow(V_dot, rho)
    else:
        V_dot = props.volumetric_flow(m_da, rho)
    return m_da, V_dot


def resolve_state(
    kind1: Union[VariableKind, str, None],
    value1: Optional[float],
    kind2: Union[VariableKind, str, None],
    value2: Optional[float],
    config: Optional[ResolverConfig] = None,
) -> ThermodynamicState:
    """
    Main entry point. Resolves a full state from two independent variables.

    Args:
        kind1, kind2: Variable identifiers (VariableKind or its string value)
        value1, value2: Values in the units of the matching variable
        config: Total pressure and reference mass flow; defaults to sea level
            and 1 kg/s

    Returns:
        ThermodynamicState with every property populated

    Raises:
        InputError: Missing/identical/unknown variables or out-of-range RH
        UnsupportedPairError: No strategy for this pair
        OrderingError: Twb or Tdp above Tdb
        NonPhysicalStateError: Resolved state is physically impossible
    """
    if config is None:
        config = ResolverConfig()

    k1 = validation.parse_kind(kind1, 1)
    k2 = validation.parse_kind(kind2, 2)
    validation.check_distinct(k1, k2)
    resolver = get_resolver(k1, k2)

    inputs: Inputs = {
        k1: validation.check_value(value1, k1),
        k2: validation.check_value(value2, k2),
    }
    for kind in (Kind.Tdb, Kind.Twb, Kind.Tdp):
        if kind in inputs:
            validation.check_temperature(inputs[kind], kind)
    P_total = config.total_pressure

    Tdb, W = resolver(inputs, P_total)
    state = _calc_all_from_tdb_w(Tdb, W, P_total)
    m_da, V_dot = _resolve_flows(inputs, state["rho"], config.reference_mass_flow)

    logger.debug(
        "Resolved %s=%s, %s=%s at P=%s Pa -> Tdb=%.4f, W=%.6f",
        k1.value, inputs[k1], k2.value, inputs[k2], P_total, Tdb, W,
    )

    return ThermodynamicState(
        m_da=m_da,
        V_dot=V_dot,
        P_total=P_total,
        **state,
    )


def resolve_state_from_input(data: StateInput) -> ThermodynamicState:
    """Resolve a StateInput request model."""
    return resolve_state(data.var1, data.val1, data.var2, data.val2, data.to_config())


def get_pressure_from_altitude(altitude: float) -> float:
    """
    Convert altitude to atmospheric pressure using psychrolib's standard
    atmosphere model.

    Args:
        altitude: Altitude in meters

    Returns:
        Atmospheric pressure in Pa
    """
    psychrolib.SetUnitSystem(psychrolib.SI)
    return psychrolib.GetStandardAtmPressure(altitude)
