from __future__ import annotations

import time
from dataclasses import dataclass
from functools import total_ordering

from ens_pricing.domain.time.duration import Duration
from ens_pricing.errors import InvalidNumber
from ens_pricing.utils.numeric_tools import IntLike, as_integral
from ens_pricing.utils.scaling import div_trunc

MILLISECONDS_PER_SECOND = 1000


@total_ordering
@dataclass(frozen=True)
class Timestamp:
    """A Unix timestamp measured in seconds.

    May be negative to represent an instant before the Unix epoch.
    """

    time: int

    def __post_init__(self) -> None:
        if isinstance(self.time, bool) or not isinstance(self.time, int):
            raise InvalidNumber(self.time, "$time must be an int; use `build_timestamp` to convert")

    def __lt__(self, other) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.time < other.time

    def __str__(self) -> str:
        return str(self.time)


@total_ordering
@dataclass(frozen=True)
class TimestampMs:
    """A Unix timestamp measured in milliseconds.

    May be negative to represent an instant before the Unix epoch.
    """

    time_ms: int

    def __post_init__(self) -> None:
        if isinstance(self.time_ms, bool) or not isinstance(self.time_ms, int):
            raise InvalidNumber(self.time_ms, "$time_ms must be an int; use `build_timestamp_ms` to convert")

    def __lt__(self, other) -> bool:
        if not isinstance(other, TimestampMs):
            return NotImplemented
        return self.time_ms < other.time_ms


def build_timestamp(seconds_since_unix_epoch: IntLike) -> Timestamp:
    """Build a Timestamp from whole seconds since the Unix epoch.

    Raises:
        InvalidNumber: If the input is malformed or not a whole number.
    """
    return Timestamp(as_integral(seconds_since_unix_epoch))


def build_timestamp_ms(milliseconds_since_unix_epoch: IntLike) -> TimestampMs:
    """Build a TimestampMs from whole milliseconds since the Unix epoch.

    Raises:
        InvalidNumber: If the input is malformed or not a whole number.
    """
    return TimestampMs(as_integral(milliseconds_since_unix_epoch))


def ms_to_seconds(timestamp_ms: TimestampMs) -> Timestamp:
    """Convert milliseconds to seconds, truncating toward zero.

    Examples:
        999 ms -> 0 s, 1999 ms -> 1 s, -1999 ms -> -1 s.
    """
    return Timestamp(div_trunc(timestamp_ms.time_ms, MILLISECONDS_PER_SECOND))


def seconds_to_ms(timestamp: Timestamp) -> TimestampMs:
    """Convert seconds to milliseconds (exact)."""
    return TimestampMs(timestamp.time * MILLISECONDS_PER_SECOND)


def now_ms() -> TimestampMs:
    """Read the system clock once and return the current time in milliseconds."""
    return TimestampMs(time.time_ns() // 1_000_000)


def now() -> Timestamp:
    """Read the system clock once and return the current time in seconds."""
    return ms_to_seconds(now_ms())


def add_seconds(timestamp: Timestamp, duration: Duration) -> Timestamp:
    return Timestamp(timestamp.time + duration.seconds)


def subtract_seconds(timestamp: Timestamp, duration: Duration) -> Timestamp:
    return Timestamp(timestamp.time - duration.seconds)


def seconds_between(begin: Timestamp, end: Timestamp) -> int:
    """Signed number of seconds from $begin to $end (negative when $end is earlier)."""
    return end.time - begin.time
