from __future__ import annotations

from ens_pricing.domain.monetary.currency_registry import DAI, ETH, USD, USDC, WETH
from ens_pricing.domain.monetary.exchange_rates import ExchangeRates
from ens_pricing.domain.monetary.price import Price, number_as_price
from ens_pricing.domain.time.timestamp import Timestamp

# 2023-11-14 22:13:20 UTC
DEFAULT_NOW = Timestamp(1_700_000_000)


def create_usd_price(amount: str) -> Price:
    """Create a USD Price from a decimal string like "100.50"."""
    return number_as_price(amount, USD)


def create_eth_price(amount: str) -> Price:
    """Create an ETH Price from a decimal string like "0.125"."""
    return number_as_price(amount, ETH)


def create_exchange_rates() -> ExchangeRates:
    """Create a full exchange-rate snapshot with ETH at $2,000."""
    return ExchangeRates(
        {
            ETH: 2000.0,
            WETH: 2000.0,
            DAI: 0.99999703,
            USDC: 1.0,
            USD: 1.0,
        }
    )
