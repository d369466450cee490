from __future__ import annotations

import math
from types import MappingProxyType
from typing import Iterator, Mapping

from ens_pricing.domain.monetary.currency import Currency
from ens_pricing.errors import InvalidScalar, UnknownCurrency


class ExchangeRates(Mapping[Currency, float]):
    """Caller-supplied snapshot mapping each Currency to its rate in USD.

    Example: `{ETH: 1737.16, DAI: 0.99999703, USDC: 1, WETH: 1737.16, USD: 1}`.

    The snapshot is read-only and used for a single conversion; it is never cached.
    It does not have to cover every Currency, but converting from or to a missing
    currency raises `UnknownCurrency`.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[Currency, float]):
        """Initialize from a mapping of Currency to USD rate.

        Args:
            rates: USD-equivalent rate per currency.

        Raises:
            TypeError: If a key is not a Currency.
            InvalidScalar: If a rate is not a positive finite number.
        """
        validated: dict[Currency, float] = {}
        for currency, rate in rates.items():
            if not isinstance(currency, Currency):
                raise TypeError(f"Exchange-rate keys must be Currency instances, but provided key is: {currency!r}")

            # Raise: a rate must be usable as a divisor
            if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
                raise InvalidScalar(rate, f"rate of {currency} must be a positive finite number")

            validated[currency] = float(rate)

        self._rates = MappingProxyType(validated)

    def __getitem__(self, currency: Currency) -> float:
        try:
            return self._rates[currency]
        except KeyError as e:
            raise UnknownCurrency(currency, f"exchange rates {sorted(c.value for c in self._rates)}") from e

    # `Mapping` derives these from `__getitem__` raising KeyError, which ours does not
    def __contains__(self, currency: object) -> bool:
        return currency in self._rates

    def get(self, currency: Currency, default: float | None = None) -> float | None:
        return self._rates.get(currency, default)

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def rate(self, from_currency: Currency, to_currency: Currency) -> float:
        """Return how many units of $to_currency one unit of $from_currency is worth.

        Raises:
            UnknownCurrency: If either currency is missing from the snapshot.
        """
        return self[from_currency] / self[to_currency]

    def __repr__(self) -> str:
        rates = ", ".join(f"{c.value}: {r}" for c, r in self._rates.items())
        return f"{self.__class__.__name__}({{{rates}}})"
