"""Temporary premium of recently released .eth names."""

from ens_pricing.domain.premium.temporary_premium import (
    PREMIUM_START_PRICE,
    PREMIUM_DECAY,
    PREMIUM_OFFSET,
    PREMIUM_SCALE_DIGITS,
    release_timestamp,
    premium_period,
    is_in_premium_period,
    temporary_premium_price_at_timestamp,
)

__all__ = [
    "PREMIUM_START_PRICE",
    "PREMIUM_DECAY",
    "PREMIUM_OFFSET",
    "PREMIUM_SCALE_DIGITS",
    "release_timestamp",
    "premium_period",
    "is_in_premium_period",
    "temporary_premium_price_at_timestamp",
]
