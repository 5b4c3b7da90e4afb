"""
Result formatting for display.

Values are rendered with a fixed number of significant digits (4, 6 or 8),
switching to exponential notation for very small or very large magnitudes.
Non-finite values are rendered as "∞" / "-∞" so a dry-air dew point of -inf
shows up instead of crashing the table.
"""

import math
from typing import Optional

from moistair.config import PROPERTY_UNITS, SUPPORTED_PRECISIONS, VARIABLE_INFO
from moistair.models.state import FormattedRow, ThermodynamicState

MISSING = "–"

# Order of the rows in the results table
RESULT_KEYS = ["Tdb", "W", "RH", "h", "Twb", "Tdp", "rho", "m_da", "V_dot", "Pv"]


def check_precision(precision: int) -> int:
    if precision not in SUPPORTED_PRECISIONS:
        allowed = ", ".join(str(p) for p in SUPPORTED_PRECISIONS)
        raise ValueError(f"Precision must be one of {allowed}, got {precision}")
    return precision


def format_value(value: Optional[float], precision: int = 4) -> str:
    """
    Format a number with `precision` significant digits.

    Fixed notation is used for exponents from -6 up to precision - 1,
    exponential notation otherwise (e.g. 1.234e+9, 5.000e-7).
    """
    if value is None:
        return MISSING
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    # Round first in exponential form; rounding can bump the exponent (9.9996 → 10.00)
    mantissa, exp_str = f"{value:.{precision - 1}e}".split("e")
    exponent = int(exp_str)

    if exponent < -6 or exponent >= precision:
        sign = "+" if exponent >= 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"

    decimals = precision - 1 - exponent
    return f"{value:.{decimals}f}"


def format_state(state: ThermodynamicState, precision: int = 4) -> list[FormattedRow]:
    """Build the results table rows for a resolved state."""
    check_precision(precision)
    rows = []
    for key in RESULT_KEYS:
        rows.append(FormattedRow(
            key=key,
            label=VARIABLE_INFO[key]["name"],
            unit=PROPERTY_UNITS[key],
            value=format_value(getattr(state, key), precision),
        ))
    return rows
