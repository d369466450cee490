from __future__ import annotations

from dataclasses import dataclass

from ens_pricing.domain.time.duration import Duration
from ens_pricing.domain.time.timestamp import Timestamp
from ens_pricing.errors import InvalidTimePeriod


@dataclass(frozen=True)
class TimePeriod:
    """Closed interval of time `[begin, end]`.

    `begin == end` represents a single instant.

    Attributes:
        begin (Timestamp): First instant of the period.
        end (Timestamp): Last instant of the period, guaranteed to be >= $begin.
    """

    begin: Timestamp
    end: Timestamp

    def __post_init__(self) -> None:
        """Validate ordering of the period bounds.

        Raises:
            TypeError: If $begin or $end is not a Timestamp.
            InvalidTimePeriod: If $begin comes after $end.
        """
        if not isinstance(self.begin, Timestamp) or not isinstance(self.end, Timestamp):
            raise TypeError(f"$begin and $end must be Timestamp instances, but provided values are: {self.begin!r}, {self.end!r}")

        if self.begin.time > self.end.time:
            raise InvalidTimePeriod(self.begin.time, self.end.time)

    @property
    def duration(self) -> Duration:
        return Duration(self.end.time - self.begin.time)


def build_time_period(begin: Timestamp, end: Timestamp) -> TimePeriod:
    """Build a TimePeriod from two Timestamps.

    Raises:
        InvalidTimePeriod: If $begin comes after $end.
    """
    return TimePeriod(begin, end)


def is_overlapping_timestamp(period: TimePeriod, timestamp: Timestamp) -> bool:
    """Return True if $timestamp falls within $period, both ends inclusive."""
    return period.begin.time <= timestamp.time <= period.end.time
