"""Custom exceptions for NetWorth Projector."""


class NetWorthError(Exception):
    """Base exception for all NetWorth Projector errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DatabaseError(NetWorthError):
    """Raised when a database operation fails."""
    pass


class TransactionError(DatabaseError):
    """Raised when a database transaction fails to complete."""
    pass


class InvalidInputError(NetWorthError):
    """Raised when user-entered text cannot be turned into a usable value."""

    def __init__(self, message: str, text: str = None, field: str = None):
        details = {}
        if text is not None:
            details['text'] = text
        if field:
            details['field'] = field
        super().__init__(message, details)
        self.text = text
        self.field = field


class InvalidExchangeRateError(InvalidInputError):
    """Raised when an exchange rate is missing, non-numeric or not positive."""

    def __init__(self, rate=None):
        message = "Exchange rate must be a positive number"
        if rate is not None:
            message = f"Invalid exchange rate '{rate}'"
        super().__init__(message, text=None if rate is None else str(rate), field="exchange_rate")
