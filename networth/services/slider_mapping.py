"""Slider transfer functions for the calculator inputs.

Each mapping turns a normalized slider position ``t`` in [0, 1] into a value
inside a bounded range and back. The curves are nonlinear so one linear
slider can reach widely scaled ranges while keeping a chosen "sweet spot" at
its center:

- Exponential: ``Max * (e^(K*t) - 1) / (e^K - 1)``, K calibrated so the center
  hits a target value (principal, months).
- Bezier growth: a quadratic easing over a log-scaled range (growth rate).
- Log1p: ``Min + (exp(t * ln1p(Max - Min)) - 1)`` (years).
- Linear: fixed-step mapping for the simplified growth-rate slider.

The module-level functions are pure. The mapper classes bundle one curve's
parameters with the same forward/inverse pair so callers can treat every
field alike.
"""
import math
from abc import ABC, abstractmethod

from networth.config import (
    GROWTH_MIN,
    GROWTH_MAX,
    GROWTH_TARGET_MID,
)
from networth.services.curve_solver import solve_k_for_midpoint

# Below this |A| the Bezier inverse is treated as linear
BEZIER_LINEAR_TOLERANCE = 1e-9


def _clamp_unit(t: float) -> float:
    return min(max(t, 0.0), 1.0)


# =============================================================================
# EXPONENTIAL
# =============================================================================

def exp_map(t: float, max_value: float, k: float) -> float:
    """Map a slider position onto ``[0, max_value]`` along an exponential curve."""
    denom = math.exp(k) - 1.0
    if denom == 0:
        return t * max_value
    return max_value * ((math.exp(k * t) - 1.0) / denom)


def inv_exp_map(v: float, max_value: float, k: float) -> float:
    """Slider position for a value; exact inverse of :func:`exp_map`."""
    denom = math.exp(k) - 1.0
    if denom == 0 or k == 0:
        return v / max_value
    x = (v / max_value) * denom + 1.0
    return math.log(x) / k


# =============================================================================
# BEZIER GROWTH
# =============================================================================

def growth_control(min_value: float = GROWTH_MIN, max_value: float = GROWTH_MAX,
                   target_mid: float = GROWTH_TARGET_MID) -> float:
    """Control value c so that t=0.5 lands on ``target_mid`` on the log scale.

    With ``g(t) = (1 - 2c)t^2 + 2ct`` the center gives ``g(0.5) = 0.25 + c/2``,
    so ``c = 2 * (g_mid - 0.25)``, clamped to [0, 1].
    """
    ln_min = math.log(min_value)
    ln_max = math.log(max_value)
    g_mid = (math.log(target_mid) - ln_min) / (ln_max - ln_min)
    return max(0.0, min(1.0, 2.0 * (g_mid - 0.25)))


def bezier_g(t: float, c: float) -> float:
    a = 1.0 - 2.0 * c
    b = 2.0 * c
    return a * t * t + b * t


def growth_map(t: float, min_value: float, max_value: float, c: float) -> float:
    """Map a slider position to a growth percentage in ``[min_value, max_value]``."""
    g = bezier_g(_clamp_unit(t), c)
    ln_min = math.log(min_value)
    ln_max = math.log(max_value)
    return math.exp(ln_min + g * (ln_max - ln_min))


def inv_growth_map(v: float, min_value: float, max_value: float, c: float) -> float:
    """Slider position for a growth percentage.

    Solves ``A t^2 + B t - g = 0`` for t. When both roots fall inside [0, 1]
    the ``+sqrt`` root wins; for c in [0, 1] it is the only root that can lie
    in range. Falls back to ``g`` itself when no root qualifies.
    """
    clamped = min(max(v, min_value), max_value)
    ln_min = math.log(min_value)
    ln_max = math.log(max_value)
    g = (math.log(clamped) - ln_min) / (ln_max - ln_min)

    a = 1.0 - 2.0 * c
    b = 2.0 * c
    if abs(a) < BEZIER_LINEAR_TOLERANCE:
        if b == 0:
            return _clamp_unit(g)
        return _clamp_unit(g / b)

    disc = max(0.0, b * b + 4.0 * a * g)
    sqrt_disc = math.sqrt(disc)
    t1 = (-b + sqrt_disc) / (2.0 * a)
    t2 = (-b - sqrt_disc) / (2.0 * a)
    for candidate in (t1, t2):
        if math.isfinite(candidate) and 0.0 <= candidate <= 1.0:
            return candidate
    return _clamp_unit(g)


# =============================================================================
# LOG1P (DURATION)
# =============================================================================

def duration_map(t: float, min_value: float, max_value: float) -> float:
    """Map a slider position to a duration along a log1p curve."""
    scaled = math.exp(_clamp_unit(t) * math.log1p(max_value - min_value)) - 1.0
    return min_value + scaled


def inv_duration_map(v: float, min_value: float, max_value: float) -> float:
    """Slider position for a duration; inverse of :func:`duration_map`."""
    span = math.log1p(max_value - min_value)
    if span == 0:
        return 0.0
    clamped = min(max(v, min_value), max_value)
    return math.log1p(clamped - min_value) / span


# =============================================================================
# SNAPPING
# =============================================================================

def snap_to_step(value: float, step: float) -> float:
    """Round ``value`` to the nearest multiple of ``step``."""
    if step <= 0:
        return value
    return round(value / step) * step


# =============================================================================
# MAPPER OBJECTS
# =============================================================================

class SliderMapper(ABC):
    """Forward/inverse pair between a slider position and a bounded value."""

    min_value = 0.0
    max_value = 1.0

    @abstractmethod
    def map(self, t: float) -> float:
        """Value for slider position ``t`` in [0, 1]."""
        pass

    @abstractmethod
    def inverse(self, v: float) -> float:
        """Slider position in [0, 1] for value ``v``."""
        pass


class ExponentialMapper(SliderMapper):
    """Exponential curve over ``[0, max_value]`` whose center is ``target_mid``.

    Attributes:
        max_value: Upper bound of the range.
        target_mid: Value reached at t=0.5.
        k: Steepness constant, solved once at construction.
    """

    def __init__(self, max_value: float, target_mid: float):
        self.min_value = 0.0
        self.max_value = float(max_value)
        self.target_mid = float(target_mid)
        self.k = solve_k_for_midpoint(self.target_mid, self.max_value)

    def map(self, t: float) -> float:
        return exp_map(_clamp_unit(t), self.max_value, self.k)

    def inverse(self, v: float) -> float:
        clamped = min(max(v, 0.0), self.max_value)
        return _clamp_unit(inv_exp_map(clamped, self.max_value, self.k))


class BezierGrowthMapper(SliderMapper):
    """Log-scaled growth-rate curve reshaped by a quadratic Bezier easing."""

    def __init__(self, min_value: float = GROWTH_MIN, max_value: float = GROWTH_MAX,
                 target_mid: float = GROWTH_TARGET_MID):
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self.target_mid = float(target_mid)
        self.c = growth_control(self.min_value, self.max_value, self.target_mid)

    def map(self, t: float) -> float:
        return growth_map(t, self.min_value, self.max_value, self.c)

    def inverse(self, v: float) -> float:
        return inv_growth_map(v, self.min_value, self.max_value, self.c)


class LogMapper(SliderMapper):
    """log1p curve over ``[min_value, max_value]``, used for years."""

    def __init__(self, min_value: float, max_value: float):
        self.min_value = float(min_value)
        self.max_value = float(max_value)

    def map(self, t: float) -> float:
        return duration_map(t, self.min_value, self.max_value)

    def inverse(self, v: float) -> float:
        return inv_duration_map(v, self.min_value, self.max_value)


class LinearMapper(SliderMapper):
    """Straight-line mapping, used by the simplified growth-rate slider."""

    def __init__(self, min_value: float, max_value: float):
        self.min_value = float(min_value)
        self.max_value = float(max_value)

    def map(self, t: float) -> float:
        return self.min_value + _clamp_unit(t) * (self.max_value - self.min_value)

    def inverse(self, v: float) -> float:
        span = self.max_value - self.min_value
        if span == 0:
            return 0.0
        return _clamp_unit((v - self.min_value) / span)
