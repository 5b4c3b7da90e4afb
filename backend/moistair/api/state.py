"""
API routes for state resolution.
"""

import logging

from fastapi import APIRouter, HTTPException

from moistair.config import (
    DEFAULT_ALTITUDE,
    PROPERTY_UNITS,
    SUPPORTED_INPUT_PAIRS,
    SUPPORTED_PRECISIONS,
    VARIABLE_INFO,
    VariableKind,
)
from moistair.engine.errors import PsychroError
from moistair.engine.formatting import check_precision, format_state
from moistair.engine.state_resolver import (
    get_pressure_from_altitude,
    resolve_state_from_input,
)
from moistair.models.state import StateInput, StateOutput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["state"])


@router.post("/state", response_model=StateOutput)
async def create_state(data: StateInput) -> StateOutput:
    """
    Resolve a full moist-air state from two independent variables.

    Accepts any supported input pair (Tdb+RH, Tdb+W, Tdb+h, Tdb+Twb, Tdb+Tdp,
    Tdb+Pv, W+h, RH+W) in either order.
    """
    try:
        check_precision(data.precision)
        state = resolve_state_from_input(data)
    except PsychroError as e:
        logger.info("Rejected state request (%s): %s", type(e).__name__, e)
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "error_type": type(e).__name__},
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "error_type": "ValueError"})
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")

    return StateOutput(
        input_pair=(data.var1, data.var2),
        input_values=(data.val1, data.val2),
        precision=data.precision,
        state=state,
        rows=format_state(state, data.precision),
    )


@router.get("/variables")
async def list_variables() -> dict:
    """Variable kinds with units and explanations, plus the supported pairs."""
    return {
        "variables": [
            {
                "key": kind.value,
                "unit": PROPERTY_UNITS[kind.value],
                **VARIABLE_INFO[kind.value],
            }
            for kind in VariableKind
        ],
        "supported_pairs": [[a.value, b.value] for a, b in SUPPORTED_INPUT_PAIRS],
        "precisions": list(SUPPORTED_PRECISIONS),
    }


@router.get("/pressure-from-altitude")
async def pressure_from_altitude(altitude: float = DEFAULT_ALTITUDE) -> dict:
    """
    Convert altitude to atmospheric pressure.

    Args:
        altitude: Altitude in meters

    Returns:
        Atmospheric pressure in Pa
    """
    try:
        pressure = get_pressure_from_altitude(altitude)
        return {"altitude": altitude, "pressure": round(pressure, 3)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
