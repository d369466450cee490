"""Error kinds raised by pricing and time value types.

All of them derive from `ValueError`, so callers that already guard numeric input
with `except ValueError` keep working.
"""

from __future__ import annotations

from typing import Any


class PricingError(ValueError):
    """Base class for all errors raised by this package."""


class InvalidDuration(PricingError):
    """Raised when a Duration would hold a negative number of seconds."""

    def __init__(self, seconds: Any):
        self.seconds = seconds
        super().__init__(f"Duration cannot be negative, but provided $seconds is: {seconds}")


class InvalidTimePeriod(PricingError):
    """Raised when a TimePeriod begins after it ends."""

    def __init__(self, begin: Any, end: Any):
        self.begin = begin
        self.end = end
        super().__init__(f"Cannot build TimePeriod because $begin ({begin}) comes after $end ({end})")


class InvalidScalar(PricingError):
    """Raised for non-finite scaling factors or scalings that would make a Duration negative."""

    def __init__(self, scalar: Any, reason: str | None = None):
        self.scalar = scalar
        self.reason = reason

        message = f"Invalid scalar: {scalar}"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class CurrencyMismatch(PricingError):
    """Raised when arithmetic is attempted across Prices of different currencies."""

    def __init__(self, currencies: list[Any], operation: str):
        self.currencies = currencies
        self.operation = operation
        listed = ", ".join(str(c) for c in currencies)
        super().__init__(f"Cannot {operation} prices of different currencies: {listed}")


class UnknownCurrency(PricingError):
    """Raised when a currency is missing from an exchange-rate table or the format registry."""

    def __init__(self, currency: Any, where: str):
        self.currency = currency
        self.where = where
        super().__init__(f"Currency '{currency}' not found in {where}")


class InvalidNumber(PricingError):
    """Raised for malformed numeric input to a Price, Duration or Timestamp builder."""

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        self.reason = reason

        message = f"Invalid number: {value!r}"
        if reason:
            message += f" - {reason}"

        super().__init__(message)
