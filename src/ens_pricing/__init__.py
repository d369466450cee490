__version__ = "0.0.1"

from ens_pricing.domain.monetary import (
    Currency,
    ExchangeRates,
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
from ens_pricing.domain.time import Duration, Timestamp, TimePeriod, build_duration, build_timestamp, build_time_period
from ens_pricing.domain.premium import temporary_premium_price_at_timestamp

__all__ = [
    "Currency",
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
    "Duration",
    "Timestamp",
    "TimePeriod",
    "build_duration",
    "build_timestamp",
    "build_time_period",
    "temporary_premium_price_at_timestamp",
]
