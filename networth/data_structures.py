from dataclasses import dataclass
from enum import Enum


class CurrencyCode(Enum):
    """Supported currencies. USD is the primary unit the exchange rate is quoted in."""
    USD = "USD"
    INR = "INR"

    @property
    def opposite(self) -> 'CurrencyCode':
        return CurrencyCode.INR if self is CurrencyCode.USD else CurrencyCode.USD


class CompoundingMode(Enum):
    NONE = "none"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class DurationUnit(Enum):
    YEARS = "years"
    MONTHS = "months"


class Field(Enum):
    """Calculator inputs that carry a canonical value, a slider and a text mirror."""
    PRINCIPAL = "principal"
    GROWTH_RATE = "growth_rate"
    DURATION = "duration"


class InputSource(Enum):
    """Which representation of a field produced the incoming value.

    TEXT commits typed text, SLIDER carries a normalized [0, 1] position and
    VALUE sets the canonical number directly. The other representations are
    always derived from the canonical value afterwards.
    """
    TEXT = "text"
    SLIDER = "slider"
    VALUE = "value"


@dataclass(frozen=True)
class NumberFormat:
    """How a number is rendered: grouping locale, precision and symbol."""
    locale: str = "en_US"
    decimals: int = 2
    symbol: str = ""
    use_grouping: bool = True


@dataclass
class CalculationOutput:
    """Result of pressing Calculate, ready for display."""
    future_value: float
    display_value: float
    display_currency: CurrencyCode
    text: str
