"""Per-field input rules for the calculator.

Each field knows how to turn a slider position or typed text into its
canonical value (map, clamp, snap), how to derive the slider position back
from that value, and how to render it as text.
"""
import math

from networth.config import (
    PRINCIPAL_MAX,
    PRINCIPAL_TARGET_MID,
    GROWTH_MIN,
    GROWTH_MAX,
    GROWTH_TARGET_MID,
    LINEAR_GROWTH_MIN,
    LINEAR_GROWTH_MAX,
    LINEAR_GROWTH_STEP,
    YEARS_MIN,
    YEARS_MAX,
    YEARS_STEP,
    MONTHS_MIN,
    MONTHS_MAX,
    MONTHS_TARGET_MID,
    INVALID_PRINCIPAL_MESSAGE,
)
from networth.data_structures import CurrencyCode, DurationUnit
from networth.exceptions import InvalidInputError
from networth.services.currency_presenter import (
    PLAIN,
    format_amount,
    format_decimal,
    parse_number,
    years_months_string,
)
from networth.services.slider_mapping import (
    BezierGrowthMapper,
    ExponentialMapper,
    LinearMapper,
    LogMapper,
    snap_to_step,
)


class InputField:
    """Base rules shared by all calculator fields."""

    name = "field"

    def __init__(self, mapper, min_value: float, max_value: float, step: float = 0.0):
        self.mapper = mapper
        self.min_value = min_value
        self.max_value = max_value
        self.step = step

    def clamp(self, value: float) -> float:
        return min(max(value, self.min_value), self.max_value)

    def snap(self, value: float) -> float:
        return snap_to_step(value, self.step)

    def normalize(self, value: float) -> float:
        """Clamp then snap, keeping the snapped value inside the bounds."""
        return self.clamp(self.snap(self.clamp(value)))

    def from_slider(self, t: float) -> float:
        """Canonical value for a slider position."""
        return self.normalize(self.mapper.map(t))

    def to_slider(self, value: float) -> float:
        """Slider position for a canonical value."""
        return self.mapper.inverse(value)

    def parse(self, text: str) -> float:
        """Parse, clamp and snap typed text.

        Raises:
            InvalidInputError: If the text is not a number.
        """
        return self.normalize(parse_number(text, field=self.name))

    def format(self, value: float) -> str:
        return format_decimal(value, 2)


class PrincipalField(InputField):
    """Current net worth: whole units on an exponential curve.

    The slider center sits on PRINCIPAL_TARGET_MID for either currency; only
    the upper bound changes with the currency.
    """

    name = "principal"

    def __init__(self, currency: CurrencyCode):
        max_value = float(PRINCIPAL_MAX[currency.value])
        super().__init__(ExponentialMapper(max_value, PRINCIPAL_TARGET_MID), 0.0, max_value)
        self.currency = currency

    def snap(self, value: float) -> float:
        return float(math.floor(value + 0.5))

    def parse(self, text: str) -> float:
        try:
            value = parse_number(text, field=self.name)
        except InvalidInputError:
            raise InvalidInputError(INVALID_PRINCIPAL_MESSAGE, text=text, field=self.name)
        if value < 0:
            raise InvalidInputError(INVALID_PRINCIPAL_MESSAGE, text=text, field=self.name)
        return self.normalize(value)

    def format(self, value: float) -> str:
        return format_amount(value, self.currency, decimals=0, style=PLAIN)


class GrowthRateField(InputField):
    """Annual growth rate in percent."""

    name = "growth_rate"

    def __init__(self, curve: str = "bezier"):
        if curve == "linear":
            super().__init__(LinearMapper(LINEAR_GROWTH_MIN, LINEAR_GROWTH_MAX),
                             LINEAR_GROWTH_MIN, LINEAR_GROWTH_MAX, LINEAR_GROWTH_STEP)
        else:
            super().__init__(BezierGrowthMapper(GROWTH_MIN, GROWTH_MAX, GROWTH_TARGET_MID),
                             GROWTH_MIN, GROWTH_MAX)
        self.curve = curve


class DurationField(InputField):
    """Time horizon in years (30-day steps) or whole months."""

    name = "duration"

    def __init__(self, unit: DurationUnit = DurationUnit.YEARS):
        if unit == DurationUnit.MONTHS:
            super().__init__(ExponentialMapper(MONTHS_MAX, MONTHS_TARGET_MID),
                             float(MONTHS_MIN), float(MONTHS_MAX), 1.0)
        else:
            super().__init__(LogMapper(YEARS_MIN, YEARS_MAX), YEARS_MIN, YEARS_MAX, YEARS_STEP)
        self.unit = unit

    def format(self, value: float) -> str:
        if self.unit == DurationUnit.MONTHS:
            return format_decimal(value, 0)
        return format_decimal(value, 2)

    def caption(self, value: float) -> str:
        """Human description of the duration, e.g. ``"1 year, 6 months"``."""
        years = value / 12.0 if self.unit == DurationUnit.MONTHS else value
        return years_months_string(years)

    def unit_label(self) -> str:
        return self.unit.value
