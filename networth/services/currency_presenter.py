"""Number and currency presentation for NetWorth Projector.

Every string the calculator shows goes through :func:`format_number` with a
:class:`NumberFormat` describing the grouping locale, the precision and an
optional currency symbol. Two grouping styles are supported:

- en_US: thousands groups (``1,234,567``)
- en_IN: last three digits, then groups of two (``12,34,567``)
"""
import math
from decimal import Decimal, ROUND_HALF_EVEN, InvalidOperation, localcontext

from dateutil.relativedelta import relativedelta

from networth.data_structures import CurrencyCode, NumberFormat
from networth.exceptions import InvalidInputError

CURRENCY_LOCALES = {
    CurrencyCode.USD: "en_US",
    CurrencyCode.INR: "en_IN",
}

CURRENCY_SYMBOLS = {
    CurrencyCode.USD: "$",
    CurrencyCode.INR: "₹",
}

PLAIN = "plain"
CURRENCY = "currency"


def group_digits(digits: str, locale: str = "en_US") -> str:
    """Insert grouping separators into a string of integer digits."""
    if len(digits) <= 3:
        return digits
    if locale == "en_IN":
        last_three = digits[-3:]
        rest = digits[:-3]
        groups = []
        while len(rest) > 2:
            groups.insert(0, rest[-2:])
            rest = rest[:-2]
        if rest:
            groups.insert(0, rest)
        return ",".join(groups) + "," + last_three
    return f"{int(digits):,}"


def format_number(value: float, fmt: NumberFormat) -> str:
    """Render ``value`` according to ``fmt``.

    Rounds half-to-even to ``fmt.decimals`` places, groups the integer part
    for ``fmt.locale`` and prefixes the symbol after any minus sign.
    """
    if not math.isfinite(value):
        return str(value)

    quantum = Decimal(1).scaleb(-fmt.decimals) if fmt.decimals > 0 else Decimal(1)
    with localcontext() as ctx:
        # wide enough for any finite float written out in full
        ctx.prec = 400
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_EVEN)
        negative = rounded < 0
        text = f"{rounded.copy_abs():f}"

    if "." in text:
        int_part, frac_part = text.split(".")
    else:
        int_part, frac_part = text, ""

    if fmt.use_grouping:
        int_part = group_digits(int_part, fmt.locale)

    body = int_part + ("." + frac_part if frac_part else "")
    sign = "-" if negative else ""
    return f"{sign}{fmt.symbol}{body}"


def number_format_for(currency: CurrencyCode, decimals: int = 0, style: str = PLAIN) -> NumberFormat:
    """Build the NumberFormat used for ``currency`` in a given style."""
    symbol = CURRENCY_SYMBOLS[currency] if style == CURRENCY else ""
    return NumberFormat(locale=CURRENCY_LOCALES[currency], decimals=decimals, symbol=symbol)


def format_amount(value: float, currency: CurrencyCode, decimals: int = 2, style: str = CURRENCY) -> str:
    """Format an amount for a currency.

    Args:
        value: Amount to format.
        currency: Currency deciding locale grouping and symbol.
        decimals: Fraction digits (2 for results, 0 for whole-amount inputs).
        style: ``"currency"`` for a symbol prefix or ``"plain"`` for digits only.

    Returns:
        The formatted string, e.g. ``"$1,234.50"`` or ``"12,34,567"``.
    """
    return format_number(value, number_format_for(currency, decimals, style))


def format_decimal(value: float, decimals: int = 2) -> str:
    """Plain en_US number, used for percentages, years and the exchange rate."""
    return format_number(value, NumberFormat(locale="en_US", decimals=decimals))


def convert_currency(value: float, from_currency: CurrencyCode, to_currency: CurrencyCode, rate: float) -> float:
    """Convert between USD and INR.

    Args:
        value: Amount in ``from_currency``.
        from_currency: Source currency.
        to_currency: Target currency.
        rate: INR per 1 USD.

    Returns:
        Amount in ``to_currency``.
    """
    if from_currency == to_currency:
        return value
    if from_currency == CurrencyCode.USD:
        return value * rate
    return value / rate


def parse_number(text: str, field: str = None) -> float:
    """Parse user-typed numeric text, tolerating grouping commas and spaces.

    A literal too large for a float comes back as +/-inf so callers clamp it
    like any other out-of-range value.

    Raises:
        InvalidInputError: If the text is empty, not a number, NaN or infinity.
    """
    if text is None:
        raise InvalidInputError("No value entered", text=text, field=field)
    stripped = text.replace(",", "").strip()
    for symbol in CURRENCY_SYMBOLS.values():
        stripped = stripped.replace(symbol, "")
    stripped = stripped.strip()
    if not stripped:
        raise InvalidInputError("No value entered", text=text, field=field)
    try:
        value = Decimal(stripped)
    except InvalidOperation:
        raise InvalidInputError(f"'{text}' is not a number", text=text, field=field)
    if not value.is_finite():
        raise InvalidInputError(f"'{text}' is not a number", text=text, field=field)
    return float(value)


def years_months_string(years: float) -> str:
    """Describe a fractional number of years as whole years and months."""
    total_months = int(round(years * 12))
    delta = relativedelta(months=total_months)
    y, m = delta.years, delta.months

    def plural(n, unit):
        return f"{n} {unit}{'' if n == 1 else 's'}"

    if y == 0 and m == 0:
        return "0 years"
    if m == 0:
        return plural(y, "year")
    if y == 0:
        return plural(m, "month")
    return f"{plural(y, 'year')}, {plural(m, 'month')}"
