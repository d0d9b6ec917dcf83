"""Centralized configuration for NetWorth Projector.

This module contains all curve parameters, default values, bounds and
user-facing messages used by the calculator.
"""

# =============================================================================
# APPLICATION
# =============================================================================

APP_NAME = "Net Worth Calculator"

# Default SQLite file holding the persisted settings
DEFAULT_DB_NAME = "networth.db"

# Duration input unit: "years" or "months"
DURATION_UNIT = "years"

# Growth slider curve: "bezier" (log-scaled, 0.1% - 50%) or "linear" (0% - 40%)
GROWTH_CURVE = "bezier"

# =============================================================================
# PRINCIPAL (CURRENT NET WORTH)
# =============================================================================

# Upper bound of the principal per input currency (INR is 100x USD)
PRINCIPAL_MAX = {
    "USD": 50_000_000,
    "INR": 5_000_000_000,
}

# Value the principal slider lands on at its center, for either currency
PRINCIPAL_TARGET_MID = 500_000

DEFAULT_PRINCIPAL = 500_000.0

# =============================================================================
# GROWTH RATE
# =============================================================================

GROWTH_MIN = 0.1
GROWTH_MAX = 50.0

# Percentage reached at slider center on the log scale
GROWTH_TARGET_MID = 8.0

# Simplified linear variant
LINEAR_GROWTH_MIN = 0.0
LINEAR_GROWTH_MAX = 40.0
LINEAR_GROWTH_STEP = 0.1

DEFAULT_GROWTH_RATE = 7.0

# =============================================================================
# DURATION
# =============================================================================

YEARS_MIN = 0.0
YEARS_MAX = 200.0

# Years snap to 30-day months
DAYS_PER_YEAR = 365.0
DAYS_PER_STEP = 30.0
YEARS_STEP = DAYS_PER_STEP / DAYS_PER_YEAR

MONTHS_MIN = 0
MONTHS_MAX = 2400
MONTHS_TARGET_MID = 120

DEFAULT_YEARS = 10.0
DEFAULT_MONTHS = 120

# =============================================================================
# COMPOUNDING
# =============================================================================

DEFAULT_COMPOUNDING = "quarterly"

# =============================================================================
# CURVE SOLVER
# =============================================================================

SOLVER_INITIAL_K = 6.0
SOLVER_MAX_ITERATIONS = 20
SOLVER_STEP_TOLERANCE = 1e-8
SOLVER_DEGENERACY_TOLERANCE = 1e-12

# Usable steepness range
K_MIN = 0.1
K_MAX = 50.0

# Midpoint ratios are kept strictly inside (0, 1)
RATIO_MIN = 0.000001
RATIO_MAX = 0.999999

# =============================================================================
# CURRENCY
# =============================================================================

DEFAULT_CURRENCY = "USD"

# INR per 1 USD
DEFAULT_EXCHANGE_RATE = 83.0

EXCHANGE_RATE_SETTING_KEY = "usd_to_inr_rate"

# =============================================================================
# MESSAGES
# =============================================================================

INVALID_PRINCIPAL_MESSAGE = "Please enter a valid current net worth."

INVALID_RATE_MESSAGE = "Please enter a positive exchange rate."

OUTPUT_PLACEHOLDER = "—"
