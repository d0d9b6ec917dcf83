"""Exchange rate service for NetWorth Projector.

The USD to INR rate is the one value that survives between sessions. It is
stored as text in the settings table under ``EXCHANGE_RATE_SETTING_KEY``.
"""
import math

from networth.config import DEFAULT_EXCHANGE_RATE, EXCHANGE_RATE_SETTING_KEY
from networth.exceptions import InvalidExchangeRateError, InvalidInputError
from networth.services.currency_presenter import format_decimal, parse_number


class ExchangeRateService:
    """Reads and writes the persisted USD to INR rate.

    Attributes:
        db: DatabaseManager instance providing get_setting/set_setting.
        default_rate: Rate used when nothing valid is stored.
    """

    def __init__(self, db_manager, default_rate: float = DEFAULT_EXCHANGE_RATE):
        self.db = db_manager
        self.default_rate = default_rate

    def get_rate(self) -> float:
        """Current rate (INR per 1 USD), or the default if unset or corrupt."""
        stored = self.db.get_setting(EXCHANGE_RATE_SETTING_KEY)
        if stored is None:
            return self.default_rate
        try:
            rate = float(stored)
        except ValueError:
            print(f"Ignoring stored exchange rate {stored!r}, using default {self.default_rate}")
            return self.default_rate
        if not math.isfinite(rate) or rate <= 0:
            print(f"Ignoring stored exchange rate {stored!r}, using default {self.default_rate}")
            return self.default_rate
        return rate

    def set_rate(self, rate: float) -> float:
        """Persist a new rate.

        Raises:
            InvalidExchangeRateError: If the rate is not a positive finite number.
        """
        if rate is None or not math.isfinite(rate) or rate <= 0:
            raise InvalidExchangeRateError(rate)
        self.db.set_setting(EXCHANGE_RATE_SETTING_KEY, repr(float(rate)))
        return float(rate)

    def set_rate_from_text(self, text: str) -> float:
        """Parse typed text such as ``"89.50"`` and persist it.

        Raises:
            InvalidExchangeRateError: If the text is not a positive number.
        """
        try:
            rate = parse_number(text, field="exchange_rate")
        except InvalidInputError:
            raise InvalidExchangeRateError(text)
        return self.set_rate(rate)

    def reset_to_default(self) -> float:
        """Store the default rate again and return it."""
        return self.set_rate(self.default_rate)

    def format_rate(self, rate: float = None) -> str:
        """Two-decimal display of a rate (the current one by default)."""
        return format_decimal(self.get_rate() if rate is None else rate, 2)
