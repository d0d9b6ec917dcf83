"""Steepness solver for midpoint-calibrated exponential curves.

An exponential slider curve ``(e^(K*t) - 1) / (e^K - 1)`` reaches half of its
range only when K is near zero. Picking K lets the slider center land on a
chosen "typical" value instead of the arithmetic mean of the range.
"""
import math

from networth.config import (
    SOLVER_INITIAL_K,
    SOLVER_MAX_ITERATIONS,
    SOLVER_STEP_TOLERANCE,
    SOLVER_DEGENERACY_TOLERANCE,
    K_MIN,
    K_MAX,
    RATIO_MIN,
    RATIO_MAX,
)

# math.exp overflows just above 709
_EXP_LIMIT = 700.0


def clamp_ratio(ratio: float) -> float:
    """Keep a midpoint ratio strictly inside (0, 1)."""
    return max(min(ratio, RATIO_MAX), RATIO_MIN)


def solve_k(ratio: float) -> float:
    """Find K such that ``(e^(K/2) - 1) / (e^K - 1) == ratio``.

    Newton-Raphson from K=6.0. Iteration stops early when the step is
    negligible, and returns the last K when the function or its derivative
    degenerates. Never raises.

    Args:
        ratio: Target midpoint as a fraction of the range, in (0, 1).

    Returns:
        Steepness constant clamped to [K_MIN, K_MAX].
    """
    k = SOLVER_INITIAL_K
    for _ in range(SOLVER_MAX_ITERATIONS):
        e_k = math.exp(k)
        e_half = math.exp(k * 0.5)
        denom = e_k - 1.0
        if abs(denom) < SOLVER_DEGENERACY_TOLERANCE:
            break

        f = (e_half - 1.0) / denom - ratio
        df = ((0.5 * e_half) * denom - (e_half - 1.0) * e_k) / (denom * denom)
        if abs(df) < SOLVER_DEGENERACY_TOLERANCE:
            break

        step = f / df
        k -= step
        if not math.isfinite(k) or abs(k) > _EXP_LIMIT:
            break
        if abs(step) < SOLVER_STEP_TOLERANCE:
            break

    return max(K_MIN, min(k, K_MAX))


def solve_k_for_midpoint(target_mid: float, max_value: float) -> float:
    """Steepness that puts ``target_mid`` at the center of ``[0, max_value]``."""
    if max_value <= 0:
        return K_MIN
    return solve_k(clamp_ratio(target_mid / max_value))
