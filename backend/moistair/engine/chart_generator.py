"""
Chart data generator.

Produces what a front end needs to draw the psychrometric chart:
- Saturation curve (100% RH) over the display domain at the configured pressure
- Axis ticks for Tdb and W
- The resolved state point, when one is given

The curve is recomputed independently of the resolver and never feeds back
into resolution.
"""

import logging
from typing import Optional

import numpy as np

from moistair.config import CHART_RANGES, DEFAULT_PRESSURE
from moistair.engine.properties import saturation_humidity_ratio
from moistair.models.state import ThermodynamicState

logger = logging.getLogger(__name__)


def _get_tdb_range(step: float = CHART_RANGES["Tdb_step"]) -> np.ndarray:
    """Dry-bulb temperatures to sweep across, endpoints included."""
    return np.arange(CHART_RANGES["Tdb_min"], CHART_RANGES["Tdb_max"] + step / 2, step)


def generate_saturation_curve(pressure: float = DEFAULT_PRESSURE) -> list[dict]:
    """
    Generate the saturation curve (100% RH boundary).

    Returns list of {Tdb, W} points. Points above the chart's W maximum are
    left out so the curve stops at the top edge of the plot.
    """
    w_max = CHART_RANGES["W_max"]
    points = []
    skipped = 0

    for Tdb in _get_tdb_range():
        W = saturation_humidity_ratio(float(Tdb), pressure)
        if W > w_max:
            skipped += 1
            continue
        points.append({
            "Tdb": round(float(Tdb), 2),
            "W": round(W, 7),
        })

    if skipped:
        logger.debug(
            "Saturation curve at P=%s Pa: %d points above W_max=%s left out",
            pressure, skipped, w_max,
        )
    return points


def generate_axis_ticks() -> dict[str, list[float]]:
    """Grid/tick positions: every 5°C on Tdb, every 0.005 kg/kg on W."""
    r = CHART_RANGES
    tdb_ticks = np.arange(r["Tdb_min"], r["Tdb_max"] + r["Tdb_tick"] / 2, r["Tdb_tick"])
    w_ticks = np.arange(r["W_min"], r["W_max"] + r["W_tick"] / 2, r["W_tick"])
    return {
        "Tdb": [round(float(t), 2) for t in tdb_ticks],
        "W": [round(float(w), 4) for w in w_ticks],
    }


def state_marker(state: ThermodynamicState) -> dict:
    """Position of the state point and whether it falls inside the plot area."""
    r = CHART_RANGES
    in_range = (
        r["Tdb_min"] <= state.Tdb <= r["Tdb_max"]
        and r["W_min"] <= state.W <= r["W_max"]
    )
    if not in_range:
        logger.info(
            "State point (Tdb=%.2f, W=%.5f) lies outside the chart area", state.Tdb, state.W
        )
    return {
        "Tdb": round(state.Tdb, 4),
        "W": round(state.W, 7),
        "in_range": in_range,
    }


def generate_chart_data(
    pressure: float = DEFAULT_PRESSURE,
    state: Optional[ThermodynamicState] = None,
) -> dict:
    """
    Generate all chart data in one call.

    If a state is given, its own total pressure is used for the curve so the
    marker and the curve always agree.
    """
    if state is not None:
        pressure = state.P_total

    return {
        "pressure": pressure,
        "ranges": dict(CHART_RANGES),
        "saturation_curve": generate_saturation_curve(pressure),
        "ticks": generate_axis_ticks(),
        "state_point": state_marker(state) if state is not None else None,
    }
