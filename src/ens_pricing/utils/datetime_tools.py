from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone, tzinfo

from ens_pricing.config import get_settings
from ens_pricing.domain.time.duration import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE, SECONDS_PER_WEEK
from ens_pricing.domain.time.timestamp import Timestamp, TimestampMs, build_timestamp, now as now_timestamp
from ens_pricing.utils.scaling import div_trunc

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MINUTES_PER_HOUR = SECONDS_PER_HOUR // SECONDS_PER_MINUTE
MINUTES_PER_DAY = SECONDS_PER_DAY // SECONDS_PER_MINUTE
MINUTES_PER_MONTH = 30 * MINUTES_PER_DAY


# region Conversion


def timestamp_to_datetime(timestamp: Timestamp) -> datetime:
    """Convert a Timestamp to a timezone-aware UTC datetime (works before the epoch too)."""
    return _UNIX_EPOCH + timedelta(seconds=timestamp.time)


def timestamp_ms_to_datetime(timestamp_ms: TimestampMs) -> datetime:
    """Convert a TimestampMs to a timezone-aware UTC datetime, keeping milliseconds."""
    return _UNIX_EPOCH + timedelta(milliseconds=timestamp_ms.time_ms)


def datetime_to_timestamp(dt: datetime) -> Timestamp:
    """Convert an aware datetime to a Timestamp, truncating sub-second precision toward zero.

    Raises:
        ValueError: If $dt is naive.
    """
    # Raise: a naive datetime has no defined instant
    if dt.tzinfo is None:
        raise ValueError(f"Cannot call `datetime_to_timestamp` because $dt ('{dt}') is naive. Provide an aware datetime.")

    delta = dt - _UNIX_EPOCH
    total_microseconds = (delta.days * SECONDS_PER_DAY + delta.seconds) * 1_000_000 + delta.microseconds
    return build_timestamp(div_trunc(total_microseconds, 1_000_000))


# endregion

# region Formatting


def _resolve_tz(tz: tzinfo | None) -> tzinfo:
    return tz if tz is not None else get_settings().display_zone


def _month_difference(earlier: datetime, later: datetime) -> int:
    """Whole calendar months from $earlier to $later (both aware, $earlier <= $later)."""
    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if months > 0 and (later.day, later.time()) < (earlier.day, earlier.time()):
        months -= 1
    return months


def _round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


def _distance_words(earlier: datetime, later: datetime) -> str:
    """Describe the distance between two datetimes, e.g. '3 days' or 'less than a minute'."""
    seconds = (later - earlier) // timedelta(seconds=1)
    minutes = _round_half_up(seconds / SECONDS_PER_MINUTE)

    if minutes < 1:
        return "less than a minute"
    if minutes < 45:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    if minutes < 90:
        return "1 hour"
    if minutes < MINUTES_PER_DAY:
        hours = _round_half_up(minutes / MINUTES_PER_HOUR)
        return f"{hours} hours"
    if minutes < 42 * MINUTES_PER_HOUR:
        return "1 day"
    if minutes < MINUTES_PER_MONTH:
        days = _round_half_up(minutes / MINUTES_PER_DAY)
        return f"{days} days"
    if minutes < 2 * MINUTES_PER_MONTH:
        months = _round_half_up(minutes / MINUTES_PER_MONTH)
        return "1 month" if months == 1 else f"{months} months"

    months = _month_difference(earlier, later)
    if months < 12:
        nearest_month = _round_half_up(minutes / MINUTES_PER_MONTH)
        return f"{nearest_month} months"

    years = months // 12
    months_into_year = months % 12
    if months_into_year < 9:
        return "1 year" if years == 1 else f"{years} years"
    return f"almost {years + 1} years"


def relative_timestamp(timestamp: Timestamp, add_suffix: bool = True, now: Timestamp | None = None) -> str:
    """Format the distance between $timestamp and now, e.g. '3 days ago' or 'in 2 hours'.

    "about" and "over" qualifiers are never emitted; "almost N years" is kept.

    Args:
        timestamp: The Timestamp to describe.
        add_suffix: Add 'ago' for past and 'in' for future timestamps.
        now: Reference instant. Reads the system clock when None.

    Returns:
        str: The formatted distance string.
    """
    reference = timestamp_to_datetime(now if now is not None else now_timestamp())
    target = timestamp_to_datetime(timestamp)

    is_future = target > reference
    words = _distance_words(*sorted((reference, target)))

    if not add_suffix:
        return words
    return f"in {words}" if is_future else f"{words} ago"


def get_short_timestamp_format(timestamp: Timestamp, tz: tzinfo | None = None) -> str:
    """Format $timestamp as a short date like '1 Jan 2024' in $tz (default: configured display tz)."""
    dt = timestamp_to_datetime(timestamp).astimezone(_resolve_tz(tz))
    return f"{dt.day} {dt:%b %Y}"


def get_timestamp_description(timestamp: Timestamp, show_as_distance: bool, with_suffix: bool = True, now: Timestamp | None = None) -> str:
    """Describe $timestamp either as distance to now or as a short date."""
    if show_as_distance:
        return relative_timestamp(timestamp, with_suffix, now=now)
    return get_short_timestamp_format(timestamp)


def get_formatted_timestamp(timestamp: Timestamp, tz: tzinfo | None = None) -> str:
    """Format $timestamp as local date and time like 'January 1, 2024 at 12:00 AM'."""
    dt = timestamp_to_datetime(timestamp).astimezone(_resolve_tz(tz))
    hour = dt.hour % 12 or 12
    return f"{dt:%B} {dt.day}, {dt.year} at {hour}:{dt:%M %p}"


def pretty_timestamp_diff_from_now(timestamp: Timestamp, now: Timestamp | None = None) -> str:
    """Describe how far in the future $timestamp is, in whole weeks, days or hours.

    Timestamps less than an hour ahead (or in the past) give 'less than an hour'.
    """
    reference = now if now is not None else now_timestamp()
    diff_seconds = timestamp.time - reference.time

    diff_weeks = diff_seconds // SECONDS_PER_WEEK if diff_seconds > 0 else 0
    diff_days = diff_seconds // SECONDS_PER_DAY if diff_seconds > 0 else 0
    diff_hours = diff_seconds // SECONDS_PER_HOUR if diff_seconds > 0 else 0

    if diff_weeks > 0:
        return f"{diff_weeks} week{'s' if diff_weeks > 1 else ''}"
    elif diff_days > 0:
        return f"{diff_days} day{'s' if diff_days > 1 else ''}"
    elif diff_hours > 0:
        return f"{diff_hours} hour{'s' if diff_hours > 1 else ''}"
    else:
        return "less than an hour"


# endregion
