"""Monetary domain package.

This package contains the closed Currency set with its precision and display rules,
the Price value type with exact scaled-integer arithmetic, and ExchangeRates snapshots
used for currency conversion.
"""

from ens_pricing.domain.monetary.currency import Currency, CurrencyFormat
from ens_pricing.domain.monetary.currency_registry import (
    PRICE_CURRENCY_FORMATS,
    get_currency_format,
    currency_from_acronym,
    currency_from_symbol,
)
from ens_pricing.domain.monetary.exchange_rates import ExchangeRates
from ens_pricing.domain.monetary.price import (
    Price,
    price_as_number,
    number_as_price,
    add_prices,
    subtract_prices,
    multiply_price_by_number,
    approx_scale_price,
    convert_currency_with_rates,
    formatted_price,
)

__all__ = [
    "Currency",
    "CurrencyFormat",
    "PRICE_CURRENCY_FORMATS",
    "get_currency_format",
    "currency_from_acronym",
    "currency_from_symbol",
    "ExchangeRates",
    "Price",
    "price_as_number",
    "number_as_price",
    "add_prices",
    "subtract_prices",
    "multiply_price_by_number",
    "approx_scale_price",
    "convert_currency_with_rates",
    "formatted_price",
]
