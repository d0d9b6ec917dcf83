"""Compound growth engine for NetWorth Projector.

Pure functions; callers pass every input and nothing is remembered between
calls.

    future_value(principal, rate_percent, duration_years, mode)

    - rate_percent is annual, e.g. 7.0 for 7%
    - duration_years is fractional years (months / 12 for month inputs)
    - CompoundingMode.NONE is simple interest: principal * (1 + r*t)
    - otherwise principal * (1 + r/n) ** (n*t) with n periods per year
"""
import math

import pandas as pd

from networth.data_structures import CompoundingMode, DurationUnit
from networth.exceptions import InvalidInputError

PERIODS_PER_YEAR = {
    CompoundingMode.NONE: 0,
    CompoundingMode.MONTHLY: 12,
    CompoundingMode.QUARTERLY: 4,
    CompoundingMode.YEARLY: 1,
}


def periods_per_year(mode: CompoundingMode) -> int:
    """Number of compounding periods per year; 0 means simple interest."""
    return PERIODS_PER_YEAR[mode]


def to_years(duration: float, unit: DurationUnit) -> float:
    """Express a duration in years."""
    if unit == DurationUnit.MONTHS:
        return duration / 12.0
    return duration


def future_value(principal: float, rate_percent: float, duration_years: float,
                 mode: CompoundingMode = CompoundingMode.QUARTERLY) -> float:
    """Compute the value of ``principal`` after ``duration_years`` of growth.

    Args:
        principal: Present value, must not be negative.
        rate_percent: Annual growth rate in percent.
        duration_years: Horizon in years.
        mode: Compounding frequency.

    Returns:
        The future value in the same currency as ``principal``.

    Raises:
        InvalidInputError: If principal is negative.
    """
    if principal < 0:
        raise InvalidInputError("Principal cannot be negative", text=str(principal), field="principal")

    n = periods_per_year(mode)
    if n == 0:
        return principal * (1.0 + rate_percent * duration_years / 100.0)

    r = rate_percent / 100.0
    return principal * math.pow(1.0 + r / n, n * duration_years)


def projection_schedule(principal: float, rate_percent: float, duration_years: float,
                        mode: CompoundingMode = CompoundingMode.QUARTERLY) -> pd.DataFrame:
    """Year-by-year growth of ``principal``.

    One row per whole year up to the horizon, plus a final row for a
    fractional remainder. The last balance equals :func:`future_value`.

    Returns:
        DataFrame with columns ``year``, ``balance`` and ``growth`` (change
        since the previous row).
    """
    horizon = max(duration_years, 0.0)
    points = [float(y) for y in range(0, int(math.floor(horizon)) + 1)]
    if horizon > points[-1]:
        points.append(float(horizon))

    balances = [future_value(principal, rate_percent, y, mode) for y in points]
    df = pd.DataFrame({'year': points, 'balance': balances})
    df['growth'] = df['balance'].diff().fillna(0.0)
    return df
