"""Time value types: Duration, Timestamp and TimePeriod."""

from ens_pricing.domain.time.duration import (
    Duration,
    build_duration,
    scale_duration,
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
    ONE_DAY,
    GRACE_PERIOD,
    TEMPORARY_PREMIUM_DAYS,
    TEMPORARY_PREMIUM_PERIOD,
)
from ens_pricing.domain.time.timestamp import (
    Timestamp,
    TimestampMs,
    build_timestamp,
    build_timestamp_ms,
    ms_to_seconds,
    seconds_to_ms,
    now,
    now_ms,
    add_seconds,
    subtract_seconds,
    seconds_between,
)
from ens_pricing.domain.time.time_period import TimePeriod, build_time_period, is_overlapping_timestamp

__all__ = [
    "Duration",
    "build_duration",
    "scale_duration",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_YEAR",
    "ONE_DAY",
    "GRACE_PERIOD",
    "TEMPORARY_PREMIUM_DAYS",
    "TEMPORARY_PREMIUM_PERIOD",
    "Timestamp",
    "TimestampMs",
    "build_timestamp",
    "build_timestamp_ms",
    "ms_to_seconds",
    "seconds_to_ms",
    "now",
    "now_ms",
    "add_seconds",
    "subtract_seconds",
    "seconds_between",
    "TimePeriod",
    "build_time_period",
    "is_overlapping_timestamp",
]
