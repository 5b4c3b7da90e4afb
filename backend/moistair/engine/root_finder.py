"""
Bounded bisection root-finder.

Every strategy that has no closed-form inverse (enthalpy → W, enthalpy → Tdb,
wet-bulb search) goes through bisect(). The function being searched must be
monotonically increasing over [lo, hi]: when f(mid) is below the target the
lower bound moves up, otherwise the upper bound moves down.

The iteration cap guarantees termination. No convergence error is ever raised;
the midpoint of the last bracket is returned and callers accept the residual
bracket width as the precision of the method.
"""

import logging
from typing import Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class BisectionResult(BaseModel):
    """Final estimate plus diagnostics of a bisection search."""

    value: float
    iterations: int
    bracket_width: float
    converged: bool


def bisect_with_info(
    func: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    tol: float,
    max_iter: int,
) -> BisectionResult:
    """
    Search [lo, hi] for x such that func(x) == target.

    Args:
        func: Monotonically increasing function of the search variable
        target: Value func should reach
        lo, hi: Bracket bounds
        tol: Absolute tolerance on the search variable (bracket width)
        max_iter: Hard cap on the number of halvings

    Returns:
        BisectionResult with the final midpoint and search diagnostics
    """
    iterations = 0
    while hi - lo > tol and iterations < max_iter:
        mid = (lo + hi) / 2.0
        if func(mid) < target:
            lo = mid
        else:
            hi = mid
        iterations += 1

    width = hi - lo
    converged = width <= tol
    if not converged:
        logger.debug(
            "Bisection stopped at iteration cap %d with bracket width %g (tol %g)",
            max_iter, width, tol,
        )

    return BisectionResult(
        value=(lo + hi) / 2.0,
        iterations=iterations,
        bracket_width=width,
        converged=converged,
    )


def bisect(
    func: Callable[[float], float],
    target: float,
    lo: float,
    hi: float,
    tol: float,
    max_iter: int,
) -> float:
    """Return the bisection estimate of x where func(x) == target."""
    return bisect_with_info(func, target, lo, hi, tol, max_iter).value
