"""Services package for NetWorth Projector.

This package contains the focused calculation services used by the
calculator state manager and views.
"""

from .curve_solver import solve_k, solve_k_for_midpoint
from .slider_mapping import (
    exp_map, inv_exp_map, growth_map, inv_growth_map, duration_map, inv_duration_map,
    ExponentialMapper, BezierGrowthMapper, LogMapper, LinearMapper,
)
from .currency_presenter import format_amount, convert_currency, parse_number
from .input_fields import PrincipalField, GrowthRateField, DurationField
from .exchange_rate_service import ExchangeRateService

__all__ = ['solve_k', 'solve_k_for_midpoint',
           'exp_map', 'inv_exp_map', 'growth_map', 'inv_growth_map', 'duration_map', 'inv_duration_map',
           'ExponentialMapper', 'BezierGrowthMapper', 'LogMapper', 'LinearMapper',
           'format_amount', 'convert_currency', 'parse_number',
           'PrincipalField', 'GrowthRateField', 'DurationField',
           'ExchangeRateService']
