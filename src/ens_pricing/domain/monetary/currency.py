from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Currency(Enum):
    """Closed set of currencies a Price can be denominated in.

    Adding a member requires adding its `CurrencyFormat` to
    `ens_pricing.domain.monetary.currency_registry.PRICE_CURRENCY_FORMATS`; the registry
    refuses to import otherwise.
    """

    USD = "USD"
    ETH = "ETH"
    DAI = "DAI"
    USDC = "USDC"
    WETH = "WETH"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CurrencyFormat:
    """Precision and display rules of one currency.

    Attributes:
        decimals (int): Number of decimal places of the scaled integer value (0-18).
        display_decimals (int): Fraction digits shown when displaying. Never above $decimals.
        min_display_value (int): Threshold in scaled units. Non-zero values at or below it
            (negative values included) are shown as `underflow_label`.
        max_display_value (Decimal): Largest value (in display units) displayed as a number.
            Larger values are shown as $overflow_label.
        overflow_label (str): Text shown instead of values above $max_display_value.
        symbol (str): Prefix shown before the amount (e.g. "$").
        acronym (str): Suffix shown after the amount (e.g. "USD").
    """

    decimals: int
    display_decimals: int
    min_display_value: int
    max_display_value: Decimal
    overflow_label: str
    symbol: str
    acronym: str

    def __post_init__(self) -> None:
        """Validate the format.

        Raises:
            ValueError: If any attribute is out of range.
        """
        if not isinstance(self.decimals, int) or self.decimals < 0 or self.decimals > 18:
            raise ValueError(f"$decimals must be an integer between 0 and 18, but provided value is: {self.decimals}")

        if not isinstance(self.display_decimals, int) or self.display_decimals < 0:
            raise ValueError(f"$display_decimals must be a non-negative integer, but provided value is: {self.display_decimals}")

        # Raise: cannot display more digits than the value carries
        if self.display_decimals > self.decimals:
            raise ValueError(f"$display_decimals ({self.display_decimals}) cannot exceed $decimals ({self.decimals})")

        if not isinstance(self.min_display_value, int) or self.min_display_value < 0:
            raise ValueError(f"$min_display_value must be a non-negative integer, but provided value is: {self.min_display_value}")

        if not isinstance(self.max_display_value, Decimal) or self.max_display_value <= 0:
            raise ValueError(f"$max_display_value must be a positive Decimal, but provided value is: {self.max_display_value}")

        if not self.symbol.strip() or not self.acronym.strip():
            raise ValueError(f"$symbol and $acronym must be non-empty, but provided values are: '{self.symbol}', '{self.acronym}'")

    @property
    def unit(self) -> int:
        """Number of scaled units in one whole unit of the currency (`10 ** decimals`)."""
        return 10**self.decimals

    @property
    def underflow_label(self) -> str:
        """Text shown instead of non-zero values too small to display, e.g. `"<0.01"`."""
        smallest = (Decimal(self.min_display_value).scaleb(-self.decimals)).quantize(Decimal(1).scaleb(-self.display_decimals))
        return f"<{smallest:,.{self.display_decimals}f}"
