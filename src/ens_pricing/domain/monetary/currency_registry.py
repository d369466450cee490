from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType

from bidict import bidict

from ens_pricing.domain.monetary.currency import Currency, CurrencyFormat
from ens_pricing.errors import UnknownCurrency

USD = Currency.USD
ETH = Currency.ETH
DAI = Currency.DAI
USDC = Currency.USDC
WETH = Currency.WETH

# Single source of truth for precision and display rules of every Currency
PRICE_CURRENCY_FORMATS: MappingProxyType[Currency, CurrencyFormat] = MappingProxyType(
    {
        # Fiat
        USD: CurrencyFormat(
            decimals=2,
            display_decimals=2,
            min_display_value=1,  # $0.01
            max_display_value=Decimal("999999999.99"),
            overflow_label="999,999,999.99+",
            symbol="$",
            acronym="USD",
        ),
        # Crypto
        ETH: CurrencyFormat(
            decimals=18,
            display_decimals=3,
            min_display_value=10**15,  # 0.001 ETH
            max_display_value=Decimal("999999.999"),
            overflow_label="999,999.999+",
            symbol="Ξ",
            acronym="ETH",
        ),
        WETH: CurrencyFormat(
            decimals=18,
            display_decimals=3,
            min_display_value=10**15,  # 0.001 WETH
            max_display_value=Decimal("999999.999"),
            overflow_label="999,999.999+",
            symbol="WETH",
            acronym="WETH",
        ),
        # Stablecoins
        DAI: CurrencyFormat(
            decimals=18,
            display_decimals=2,
            min_display_value=10**16,  # 0.01 DAI
            max_display_value=Decimal("999999999.99"),
            overflow_label="999,999,999.99+",
            symbol="DAI",
            acronym="DAI",
        ),
        USDC: CurrencyFormat(
            decimals=6,
            display_decimals=2,
            min_display_value=10**4,  # 0.01 USDC
            max_display_value=Decimal("999999999.99"),
            overflow_label="999,999,999.99+",
            symbol="USDC",
            acronym="USDC",
        ),
    }
)

# Check: every Currency member must have a format (fail at import, not at first use)
_missing = [c.value for c in Currency if c not in PRICE_CURRENCY_FORMATS]
if _missing:
    raise RuntimeError(f"Currencies without a CurrencyFormat in `PRICE_CURRENCY_FORMATS`: {_missing}")

# Two-way lookup tables between Currency and its display texts
_ACRONYMS: bidict[Currency, str] = bidict({currency: fmt.acronym for currency, fmt in PRICE_CURRENCY_FORMATS.items()})
_SYMBOLS: bidict[Currency, str] = bidict({currency: fmt.symbol for currency, fmt in PRICE_CURRENCY_FORMATS.items()})


def get_currency_format(currency: Currency) -> CurrencyFormat:
    """Return the CurrencyFormat of $currency.

    Raises:
        UnknownCurrency: If $currency is not a `Currency` member.
    """
    try:
        return PRICE_CURRENCY_FORMATS[currency]
    except (KeyError, TypeError) as e:
        raise UnknownCurrency(currency, "currency format registry") from e


def currency_from_acronym(acronym: str) -> Currency:
    """Look up a Currency by its acronym (case-insensitive), e.g. "usdc" -> USDC.

    Raises:
        UnknownCurrency: If no currency uses $acronym.
    """
    if not isinstance(acronym, str):
        raise TypeError(f"$acronym must be a string, but provided value is: {acronym}")

    try:
        return _ACRONYMS.inverse[acronym.strip().upper()]
    except KeyError as e:
        raise UnknownCurrency(acronym, f"acronyms {sorted(_ACRONYMS.inverse)}") from e


def currency_from_symbol(symbol: str) -> Currency:
    """Look up a Currency by its display symbol, e.g. "$" -> USD.

    Raises:
        UnknownCurrency: If no currency uses $symbol.
    """
    try:
        return _SYMBOLS.inverse[symbol]
    except KeyError as e:
        raise UnknownCurrency(symbol, f"symbols {sorted(_SYMBOLS.inverse)}") from e


def known_symbols() -> list[str]:
    """Return all display symbols, longest first (for prefix matching)."""
    return sorted(_SYMBOLS.inverse, key=len, reverse=True)
