"""
API routes for chart data generation.
"""

from fastapi import APIRouter, HTTPException, Query

from moistair.config import DEFAULT_PRESSURE
from moistair.engine.chart_generator import generate_chart_data
from moistair.engine.errors import PsychroError
from moistair.engine.state_resolver import resolve_state_from_input
from moistair.models.state import StateInput

router = APIRouter(prefix="/api/v1", tags=["chart-data"])


@router.get("/chart-data")
async def get_chart_data(
    total_pressure: float = Query(default=DEFAULT_PRESSURE, gt=0),
) -> dict:
    """
    Generate the chart background: saturation curve over -10…50°C at the
    given total pressure, plus axis ticks.
    """
    try:
        return generate_chart_data(total_pressure)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Chart data generation error: {str(e)}")


@router.post("/chart-data/state")
async def get_chart_data_for_state(data: StateInput) -> dict:
    """Resolve a state and return the chart background with its marker."""
    try:
        state = resolve_state_from_input(data)
    except PsychroError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "error_type": type(e).__name__},
        )

    try:
        return generate_chart_data(state=state)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Chart data generation error: {str(e)}")
