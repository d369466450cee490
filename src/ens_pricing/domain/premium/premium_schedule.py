from __future__ import annotations

# premium_schedule: Sample the temporary premium over its whole window into a pandas DataFrame.
# One row per step from release until the premium reaches $0.00, both ends included.

import logging

import pandas as pd

from ens_pricing.domain.monetary.price import formatted_price, price_as_number
from ens_pricing.domain.premium.temporary_premium import premium_period, temporary_premium_price_at_timestamp
from ens_pricing.domain.time.duration import GRACE_PERIOD, ONE_DAY, Duration
from ens_pricing.domain.time.timestamp import Timestamp
from ens_pricing.errors import InvalidDuration

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["timestamp", "dt", "seconds_since_release", "premium_value", "premium", "display"]


def premium_schedule(
    expiration_timestamp: Timestamp,
    step: Duration = ONE_DAY,
    grace_period: Duration = GRACE_PERIOD,
) -> pd.DataFrame:
    """Build a table of the temporary premium sampled every $step.

    Sampling starts at release and stops at the end of the premium period. The end is always
    included, even when the window length is not a multiple of $step.

    Args:
        expiration_timestamp: Instant the name's registration expired.
        step: Distance between samples. Must be positive.
        grace_period: Time between expiration and release.

    Returns:
        pd.DataFrame: Columns `timestamp` (int seconds), `dt` (UTC datetime),
        `seconds_since_release` (int), `premium_value` (int cents), `premium` (float USD)
        and `display` (formatted USD string).

    Raises:
        InvalidDuration: If $step is zero.
    """
    # Raise: a zero step would never reach the end of the window
    if step.seconds <= 0:
        raise InvalidDuration(step.seconds)

    period = premium_period(expiration_timestamp, grace_period)

    sample_times = list(range(period.begin.time, period.end.time, step.seconds))
    sample_times.append(period.end.time)

    rows = []
    for sample_time in sample_times:
        premium = temporary_premium_price_at_timestamp(Timestamp(sample_time), expiration_timestamp, grace_period)
        rows.append(
            {
                "timestamp": sample_time,
                "seconds_since_release": sample_time - period.begin.time,
                "premium_value": premium.value,
                "premium": price_as_number(premium),
                "display": formatted_price(premium, with_prefix=True),
            }
        )

    df = pd.DataFrame(rows)
    df.insert(1, "dt", pd.to_datetime(df["timestamp"], unit="s", utc=True))
    df = df[SCHEDULE_COLUMNS]

    logger.debug(f"Built premium schedule with {len(df)} row(s) for expiration {expiration_timestamp}, step {step}")
    return df
