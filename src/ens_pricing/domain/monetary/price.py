from __future__ import annotations

import logging
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Mapping, Sequence

from ens_pricing.config import get_settings
from ens_pricing.domain.monetary.currency import Currency, CurrencyFormat
from ens_pricing.domain.monetary.currency_registry import (
    currency_from_acronym,
    currency_from_symbol,
    get_currency_format,
    known_symbols,
)
from ens_pricing.domain.monetary.exchange_rates import ExchangeRates
from ens_pricing.errors import CurrencyMismatch, InvalidNumber
from ens_pricing.utils.numeric_tools import DecimalLike, as_decimal
from ens_pricing.utils.scaling import approx_scale_int, div_trunc

logger = logging.getLogger(__name__)

# Base context for conversions between display numbers and scaled integers; never installed globally
_PRICE_CONTEXT = Context(prec=100, rounding=ROUND_HALF_UP)


def _price_context(digits: int) -> Context:
    """Return a copy of `_PRICE_CONTEXT` holding at least $digits significant digits."""
    context = _PRICE_CONTEXT.copy()
    context.prec = max(_PRICE_CONTEXT.prec, digits)
    return context


class Price:
    """Represents a monetary amount as an exact integer of the currency's smallest unit.

    $value is scaled by `10 ** decimals` of $currency, e.g. `Price(10050, USD)` is $100.50.
    No rounding happens inside a Price; it only happens when converting from real numbers
    (`number_as_price`) and when displaying (`formatted_price`).
    """

    __slots__ = ("_value", "_currency")

    def __init__(self, value: int, currency: Currency):
        """Initialize Price with a scaled integer value and currency.

        Args:
            value (int): Amount in the smallest unit of $currency.
            currency (Currency): Currency of the amount.

        Raises:
            TypeError: If $currency is not a Currency.
            InvalidNumber: If $value is not an int.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        # Raise: value must already be scaled; conversions belong in `number_as_price`
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidNumber(value, "$value must be an int of scaled units; use `number_as_price` to convert")

        self._value = value
        self._currency = currency

    @classmethod
    def zero(cls, currency: Currency) -> Price:
        return cls(0, currency)

    @property
    def value(self) -> int:
        """Get the scaled integer value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def format(self) -> CurrencyFormat:
        return get_currency_format(self._currency)

    def _check_same_currency(self, other: Price, operation: str) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatch([self.currency, other.currency], operation)

    # Comparison operators (same currency required)
    def __eq__(self, other) -> bool:
        """Check equality with another Price (structural)."""
        if not isinstance(other, Price):
            return False
        return self.currency == other.currency and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.value, self.currency))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.value < other.value

    def __le__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.value <= other.value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.value > other.value

    def __ge__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        self._check_same_currency(other, "compare")
        return self.value >= other.value

    # Arithmetic operations
    def __add__(self, other):
        """Add two Prices of the same currency."""
        if not isinstance(other, Price):
            return NotImplemented
        return add_prices([self, other])

    def __sub__(self, other):
        """Subtract two Prices of the same currency."""
        if not isinstance(other, Price):
            return NotImplemented
        return subtract_prices(self, other)

    def __mul__(self, other):
        """Multiply Price by a number (returns Price)."""
        if isinstance(other, Price) or isinstance(other, bool) or not isinstance(other, (int, float, Decimal)):
            return NotImplemented  # Price * Price doesn't make sense
        return multiply_price_by_number(self, other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return Price(-self.value, self.currency)

    def __abs__(self):
        return Price(abs(self.value), self.currency)

    # String representations
    def __str__(self) -> str:
        """Return exact amount like '100.50 USD'."""
        amount = Decimal(self.value).scaleb(-self.format.decimals, context=_price_context(len(str(abs(self.value)))))
        return f"{amount:f} {self.currency.value}"

    def __repr__(self) -> str:
        """Return string like 'Price(10050, USD)'."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.value})"

    @classmethod
    def from_str(cls, value_str: str) -> Price:
        """Parse a Price from its display form.

        Accepted shapes: '1000.50 USD', '$1,000.50', '$1,000.50 USD', 'Ξ0.125 ETH'.
        The amount is rounded half-up to the currency's decimals.

        Args:
            value_str (str): String representation.

        Returns:
            Price: Parsed price.

        Raises:
            InvalidNumber: If the amount is malformed, the currency is missing, or
                symbol and acronym disagree.
            UnknownCurrency: If the acronym or symbol is not known.
        """
        value_str = value_str.strip()
        if not value_str:
            raise InvalidNumber(value_str, "price string cannot be empty")

        parts = value_str.split()
        if len(parts) > 2:
            raise InvalidNumber(value_str, "expected format '[symbol]amount [acronym]'")

        amount_part = parts[0]
        acronym_currency = currency_from_acronym(parts[1]) if len(parts) == 2 else None

        symbol_currency = None
        for symbol in known_symbols():
            if amount_part.startswith(symbol) and len(amount_part) > len(symbol):
                symbol_currency = currency_from_symbol(symbol)
                amount_part = amount_part[len(symbol) :]
                break

        # Raise: symbol and acronym must name the same currency
        if symbol_currency is not None and acronym_currency is not None and symbol_currency != acronym_currency:
            raise InvalidNumber(value_str, f"symbol currency {symbol_currency} differs from acronym currency {acronym_currency}")

        currency = acronym_currency or symbol_currency
        if currency is None:
            raise InvalidNumber(value_str, "missing currency symbol or acronym")

        return number_as_price(amount_part.replace(",", ""), currency)


def price_as_number(price: Price) -> float:
    """Return $price as a float in whole currency units.

    Lossy for very large values; meant for display and interop, never for further
    monetary computation.
    """
    return price.value / price.format.unit


def number_as_price(number: DecimalLike, currency: Currency) -> Price:
    """Convert a real number (or numeric string) in whole units to a Price.

    The number is read through its shortest decimal representation, so floats that
    print in scientific notation (e.g. `1e-07`) keep their digits. It is then rounded
    half-up to the currency's decimals and scaled to an exact integer.

    Args:
        number: Amount in whole currency units.
        currency: Currency of the result.

    Returns:
        Price: Exact scaled price.

    Raises:
        InvalidNumber: If $number is malformed, NaN or infinite.
        UnknownCurrency: If $currency has no format.
    """
    currency_format = get_currency_format(currency)
    decimal_value = as_decimal(number)

    # Raise: the scaled value must stay within the Decimal exponent range
    if decimal_value.adjusted() + currency_format.decimals > _PRICE_CONTEXT.Emax:
        raise InvalidNumber(number, f"too large to represent in {currency}")

    # Enough digits for the whole integer part plus every decimal of $currency
    context = _price_context(decimal_value.adjusted() + currency_format.decimals + 2)

    try:
        rounded = decimal_value.quantize(Decimal(1).scaleb(-currency_format.decimals), context=context)
        scaled = rounded.scaleb(currency_format.decimals, context=context)
    except InvalidOperation as e:
        raise InvalidNumber(number, f"too large to represent in {currency}") from e

    return Price(int(scaled), currency)


def add_prices(prices: Sequence[Price]) -> Price:
    """Sum Prices of one currency exactly.

    Raises:
        InvalidNumber: If $prices is empty.
        CurrencyMismatch: If the Prices do not all share one currency.
    """
    if not prices:
        raise InvalidNumber(prices, "cannot add an empty sequence of prices")

    currency = prices[0].currency
    if any(price.currency != currency for price in prices):
        raise CurrencyMismatch([price.currency for price in prices], "add")

    return Price(sum(price.value for price in prices), currency)


def subtract_prices(price1: Price, price2: Price) -> Price:
    """Return `price1 - price2`. The result may be negative.

    Raises:
        CurrencyMismatch: If the currencies differ.
    """
    if price1.currency != price2.currency:
        raise CurrencyMismatch([price1.currency, price2.currency], "subtract")

    return Price(price1.value - price2.value, price1.currency)


def multiply_price_by_number(price: Price, scalar: DecimalLike) -> Price:
    """Multiply $price by a real $scalar.

    $scalar is first converted to a Price of the same currency (rounded to its decimals),
    then the two scaled integers are multiplied and the product is divided back by
    `10 ** decimals`, truncating toward zero.

    Raises:
        InvalidNumber: If $scalar is malformed or not finite.
    """
    scalar_as_price = number_as_price(scalar, price.currency)
    return Price(div_trunc(price.value * scalar_as_price.value, price.format.unit), price.currency)


def approx_scale_price(price: Price, scale_factor: float, digits_of_precision: int | None = None) -> Price:
    """Scale $price by $scale_factor keeping $digits_of_precision guard digits.

    Args:
        price: Price to scale.
        scale_factor: Real factor.
        digits_of_precision: Guard digits of $scale_factor. None uses the configured default (20).

    Raises:
        InvalidScalar: If $scale_factor is not finite or $digits_of_precision is negative.
    """
    if digits_of_precision is None:
        digits_of_precision = get_settings().scale_digits

    return Price(approx_scale_int(price.value, scale_factor, digits_of_precision), price.currency)


def convert_currency_with_rates(from_price: Price, to_currency: Currency, exchange_rates: Mapping[Currency, float]) -> Price:
    """Convert $from_price to $to_currency using a snapshot of USD rates.

    `rate = rates[from] / rates[to]`; the price is converted to a float, multiplied by
    the rate and converted back with `number_as_price`.

    Raises:
        UnknownCurrency: If either currency is missing from $exchange_rates.
    """
    rates = exchange_rates if isinstance(exchange_rates, ExchangeRates) else ExchangeRates(exchange_rates)
    rate = rates.rate(from_price.currency, to_currency)

    if from_price.currency == to_currency:
        return from_price

    exchanged_value = price_as_number(from_price) * rate
    result = number_as_price(exchanged_value, to_currency)
    logger.debug(f"Converted {from_price!r} to {result!r} at rate {rate}")
    return result


def formatted_price(price: Price, with_prefix: bool = False, with_suffix: bool = False) -> str:
    """Render $price for display.

    Rules, in order:
    - Non-zero values that would display as zero, or that are at or below the currency's minimum
      display value, render as the underflow label (e.g. `<0.01`).
    - Zero renders as `0.` followed by display-decimals zeros (e.g. `0.00`).
    - Values above the maximum display value render as the overflow label.
    - Everything else renders with en-US grouping and exactly display-decimals fraction digits.

    Args:
        price: Price to render.
        with_prefix: Prepend the currency symbol (skipped when equal to the acronym suffix).
        with_suffix: Append the currency acronym separated by a single space.

    Returns:
        str: Display string like '$1,000.50' or '0.125 ETH'.
    """
    currency_format = price.format
    display_decimals = currency_format.display_decimals

    context = _price_context(len(str(abs(price.value))) + display_decimals)
    display_value = (
        Decimal(price.value)
        .scaleb(-currency_format.decimals, context=context)
        .quantize(Decimal(1).scaleb(-display_decimals), context=context)
    )

    if price.value != 0 and (display_value == 0 or price.value <= currency_format.min_display_value):
        formatted_amount = currency_format.underflow_label
    elif price.value == 0:
        formatted_amount = f"{Decimal(0):.{display_decimals}f}"
    elif display_value > currency_format.max_display_value:
        formatted_amount = currency_format.overflow_label
    else:
        formatted_amount = f"{display_value:,.{display_decimals}f}"

    prefix_unit = currency_format.symbol if with_prefix else ""
    suffix_unit = currency_format.acronym if with_suffix else ""

    price_display = prefix_unit + formatted_amount if prefix_unit and prefix_unit != suffix_unit else formatted_amount
    if suffix_unit:
        price_display += f" {suffix_unit}"
    return price_display
