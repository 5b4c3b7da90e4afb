"""
Physical-validity checks used by every resolution strategy.

Input checks run before any property is computed and raise InputError (or a
subclass). State checks run once (Tdb, W) is known and raise
NonPhysicalStateError.
"""

import math
from typing import Optional, Union

from moistair.config import (
    DEW_POINT_SLACK,
    MAGNUS_B,
    RH_REJECT_THRESHOLD,
    VariableKind,
)
from moistair.engine.errors import (
    InputError,
    NonPhysicalStateError,
    OrderingError,
)


def parse_kind(kind: Union[VariableKind, str, None], position: int) -> VariableKind:
    """Coerce a variable identifier to VariableKind."""
    if kind is None or kind == "":
        raise InputError("Select two variables and enter their values.")
    if isinstance(kind, VariableKind):
        return kind
    try:
        return VariableKind(kind)
    except ValueError:
        valid = ", ".join(k.value for k in VariableKind)
        raise InputError(
            f"Unknown variable '{kind}' for input {position}. Valid variables: {valid}"
        )


def check_value(value: Optional[float], kind: VariableKind) -> float:
    if value is None:
        raise InputError("Select two variables and enter their values.")
    value = float(value)
    if not math.isfinite(value):
        raise InputError(f"Value for {kind.value} must be a finite number, got {value}")
    return value


def check_distinct(kind1: VariableKind, kind2: VariableKind) -> None:
    if kind1 == kind2:
        raise InputError("The two independent variables must be different.")


def check_rh_input(RH: float) -> None:
    if RH < 0 or RH > 100:
        raise InputError(f"Relative humidity must be between 0 and 100%, got {RH}")


def check_w_input(W: float) -> None:
    if W < 0:
        raise NonPhysicalStateError(f"Humidity ratio cannot be negative, got {W}")


def check_wet_bulb_order(Tdb: float, Twb: float) -> None:
    if Twb > Tdb:
        raise OrderingError(
            f"Wet-bulb temperature ({Twb}°C) cannot exceed dry-bulb temperature ({Tdb}°C)."
        )


def check_dew_point_order(Tdb: float, Tdp: float) -> None:
    if Tdp > Tdb + DEW_POINT_SLACK:
        raise OrderingError(
            f"Dew point temperature ({Tdp}°C) cannot exceed dry-bulb temperature ({Tdb}°C)."
        )


def check_humidity_ratio(W: float) -> None:
    """Reject negative or unbounded humidity ratios (Pv >= P_total)."""
    if math.isinf(W):
        raise NonPhysicalStateError(
            "Vapor pressure reaches the total pressure; humidity ratio is unbounded."
        )
    if math.isnan(W) or W < 0:
        raise NonPhysicalStateError(f"Thermodynamically impossible state: W = {W}")


def check_temperature(T: float, kind: VariableKind = VariableKind.Tdb) -> None:
    """Reject temperatures the saturation-pressure relation cannot evaluate."""
    if not math.isfinite(T):
        raise NonPhysicalStateError(
            f"Cannot resolve {kind.value} for these inputs (physically impossible state)."
        )
    if T <= -MAGNUS_B:
        raise NonPhysicalStateError(
            f"{kind.value} = {T}°C is at or below {-MAGNUS_B}°C, where saturation "
            f"pressure is undefined."
        )


def clamp_relative_humidity(RH: float) -> float:
    """
    Reject supersaturated states and clamp floating-point overshoot.

    RH up to 100.5% is accepted and clamped to exactly 100; anything above
    that is supersaturated air.
    """
    if math.isnan(RH):
        raise NonPhysicalStateError("Relative humidity could not be computed.")
    if RH > RH_REJECT_THRESHOLD:
        raise NonPhysicalStateError(
            f"Supersaturated state (RH = {RH:.2f}%), not physical."
        )
    return min(RH, 100.0)
