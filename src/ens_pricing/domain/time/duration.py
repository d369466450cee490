from __future__ import annotations

import math
from dataclasses import dataclass

from ens_pricing.errors import InvalidDuration, InvalidNumber, InvalidScalar
from ens_pricing.utils.numeric_tools import IntLike, as_integral
from ens_pricing.utils.scaling import scale_int_by_float

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE  # 3,600 seconds
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR  # 86,400 seconds
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY  # 604,800 seconds
SECONDS_PER_YEAR = SECONDS_PER_DAY * 3_652_425 // 10_000  # Average Gregorian year of 365.2425 days, 31,556,952 seconds


@dataclass(frozen=True)
class Duration:
    """A non-negative span of time measured in whole seconds.

    Attributes:
        seconds (int): Length of the span. Always >= 0.
    """

    seconds: int

    def __post_init__(self) -> None:
        """Validate the duration after initialization.

        Raises:
            InvalidNumber: If $seconds is not an int.
            InvalidDuration: If $seconds is negative.
        """
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise InvalidNumber(self.seconds, "$seconds must be an int; use `build_duration` to convert")

        if self.seconds < 0:
            raise InvalidDuration(self.seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return build_duration(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return build_duration(hours * SECONDS_PER_HOUR)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        return build_duration(days * SECONDS_PER_DAY)

    @property
    def milliseconds(self) -> int:
        return self.seconds * 1000

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds < other.seconds

    def __le__(self, other) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds <= other.seconds

    def __str__(self) -> str:
        return f"{self.seconds}s"


def build_duration(seconds: IntLike) -> Duration:
    """Build a Duration from a whole number of seconds.

    Args:
        seconds: Seconds as int, or an integral str / float / Decimal.

    Returns:
        Duration: The validated duration.

    Raises:
        InvalidNumber: If $seconds is malformed or not a whole number.
        InvalidDuration: If $seconds is negative.
    """
    return Duration(as_integral(seconds))


def scale_duration(duration: Duration, scalar: int | float) -> Duration:
    """Multiply $duration by $scalar.

    Integer scalars scale exactly. Float scalars are taken at their exact binary value and
    the resulting number of seconds is truncated toward zero.

    Args:
        duration: The duration to scale.
        scalar: Integer or real multiplier.

    Returns:
        Duration: New scaled duration.

    Raises:
        InvalidScalar: If $scalar is not a number, is not finite, or the result would be negative.
    """
    # Raise: only real numbers can scale a duration
    if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
        raise InvalidScalar(scalar, "must be an int or float")

    if isinstance(scalar, int):
        scaled_seconds = duration.seconds * scalar
    else:
        if not math.isfinite(scalar):
            raise InvalidScalar(scalar, "must be finite")
        scaled_seconds = scale_int_by_float(duration.seconds, scalar)

    # Raise: scaling must not produce a negative duration
    if scaled_seconds < 0:
        raise InvalidScalar(scalar, f"scaling {duration} would give a negative duration ({scaled_seconds}s)")

    return Duration(scaled_seconds)


ONE_HOUR = Duration(SECONDS_PER_HOUR)
ONE_DAY = Duration(SECONDS_PER_DAY)

# Window after a .eth name expires during which it is not yet released
GRACE_PERIOD = Duration.from_days(90)

# Days after release during which the temporary premium applies
TEMPORARY_PREMIUM_DAYS = 21
TEMPORARY_PREMIUM_PERIOD = Duration.from_days(TEMPORARY_PREMIUM_DAYS)
