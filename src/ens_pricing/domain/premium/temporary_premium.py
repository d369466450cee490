"""Temporary premium of recently released .eth names.

When a .eth name's grace period ends, the name is released and a temporary premium is
added to its registration price. The premium starts at `PREMIUM_START_PRICE` and halves
every day (continuous exponential decay), reaching exactly $0.00 after
`TEMPORARY_PREMIUM_DAYS` days.
"""

from __future__ import annotations

import logging

from ens_pricing.domain.monetary.currency_registry import USD
from ens_pricing.domain.monetary.price import Price, approx_scale_price, subtract_prices
from ens_pricing.domain.time.duration import GRACE_PERIOD, SECONDS_PER_DAY, TEMPORARY_PREMIUM_DAYS, TEMPORARY_PREMIUM_PERIOD, Duration
from ens_pricing.domain.time.time_period import TimePeriod, is_overlapping_timestamp
from ens_pricing.domain.time.timestamp import Timestamp, add_seconds, seconds_between

logger = logging.getLogger(__name__)

# At the moment a .eth name is released, this temporary premium is added to its price.
# NOTE: The premium actually charged subtracts `PREMIUM_OFFSET`.
PREMIUM_START_PRICE = Price(10_000_000_000, USD)  # $100,000,000.00

# The temporary premium drops exponentially by 50% each day
PREMIUM_DECAY = 0.5

# Guard digits used for every decay computation, including `PREMIUM_OFFSET`
PREMIUM_SCALE_DIGITS = 20

# Decaying `PREMIUM_START_PRICE` by `PREMIUM_DECAY` per day for `TEMPORARY_PREMIUM_DAYS` days
# leaves $47.68 instead of $0.00. Subtracting this offset from every decayed value makes the
# premium reach exactly $0.00 at the end of the window.
PREMIUM_OFFSET = approx_scale_price(PREMIUM_START_PRICE, PREMIUM_DECAY**TEMPORARY_PREMIUM_DAYS, PREMIUM_SCALE_DIGITS)


def release_timestamp(expiration_timestamp: Timestamp, grace_period: Duration = GRACE_PERIOD) -> Timestamp:
    """Return the instant a name expiring at $expiration_timestamp is released."""
    return add_seconds(expiration_timestamp, grace_period)


def premium_period(expiration_timestamp: Timestamp, grace_period: Duration = GRACE_PERIOD) -> TimePeriod:
    """Return the period from release until the premium reaches $0.00 (both inclusive)."""
    released = release_timestamp(expiration_timestamp, grace_period)
    return TimePeriod(released, add_seconds(released, TEMPORARY_PREMIUM_PERIOD))


def is_in_premium_period(at_timestamp: Timestamp, expiration_timestamp: Timestamp, grace_period: Duration = GRACE_PERIOD) -> bool:
    return is_overlapping_timestamp(premium_period(expiration_timestamp, grace_period), at_timestamp)


def temporary_premium_price_at_timestamp(
    at_timestamp: Timestamp,
    expiration_timestamp: Timestamp,
    grace_period: Duration = GRACE_PERIOD,
) -> Price:
    """Compute the temporary premium of a name at $at_timestamp.

    Regimes:
    - Before release (`at < expiration + grace_period`): $0.00.
    - From release on: `PREMIUM_START_PRICE * PREMIUM_DECAY ** fractional_days - PREMIUM_OFFSET`,
      where `fractional_days` is the real number of days since release.
    - The result is floored at $0.00, which it reaches exactly `TEMPORARY_PREMIUM_DAYS` after release.

    The result is monotonically non-increasing in $at_timestamp.

    Args:
        at_timestamp: Instant the premium is evaluated at.
        expiration_timestamp: Instant the name's registration expired.
        grace_period: Time between expiration and release.

    Returns:
        Price: Premium in USD.
    """
    released = release_timestamp(expiration_timestamp, grace_period)
    seconds_since_release = seconds_between(released, at_timestamp)

    if seconds_since_release < 0:
        # Not released yet as of $at_timestamp, so there is no premium
        logger.debug(f"No temporary premium at {at_timestamp}: release at {released} is {-seconds_since_release}s away")
        return Price.zero(USD)

    fractional_days_since_release = seconds_since_release / SECONDS_PER_DAY
    decay_factor = PREMIUM_DECAY**fractional_days_since_release

    decayed_price = approx_scale_price(PREMIUM_START_PRICE, decay_factor, PREMIUM_SCALE_DIGITS)
    offset_decayed_price = subtract_prices(decayed_price, PREMIUM_OFFSET)

    # The temporary premium can never be less than $0.00
    if offset_decayed_price.value < 0:
        return Price.zero(USD)

    return offset_decayed_price
