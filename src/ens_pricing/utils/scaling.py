from __future__ import annotations

import math

from ens_pricing.errors import InvalidScalar

DEFAULT_DIGITS_OF_PRECISION = 20


def div_trunc(n: int, d: int) -> int:
    """
    Integer division of $n by $d, truncating toward zero.

    Python's `//` floors, which differs from truncation for negative results.

    Raises:
        ZeroDivisionError: If $d == 0.

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
        >>> div_trunc(7, -2)
        -3
    """
    quotient = abs(n) // abs(d)
    return quotient if (n >= 0) == (d > 0) else -quotient


def scale_int_by_float(value: int, factor: float) -> int:
    """Multiply $value by the exact binary value of $factor, truncating toward zero.

    Raises:
        InvalidScalar: If $factor is NaN or infinite.
    """
    if not math.isfinite(factor):
        raise InvalidScalar(factor, "must be finite")

    numerator, denominator = float(factor).as_integer_ratio()
    return div_trunc(value * numerator, denominator)


def approx_scale_int(value: int, factor: float, digits_of_precision: int = DEFAULT_DIGITS_OF_PRECISION) -> int:
    """Scale an arbitrary-precision integer by a real factor, rounding once at the end.

    $factor is truncated toward zero to $digits_of_precision decimal digits, which gives an
    integer numerator over `10 ** digits_of_precision`. $value is multiplied by that numerator
    using exact integer arithmetic and the product is divided back down, again truncating
    toward zero. $value itself never passes through a float, so the only error is the one
    introduced by truncating $factor.

    Args:
        value: Integer to scale. May be arbitrarily large or negative.
        factor: Real scale factor, typically in (0, 1] for decay but not restricted.
        digits_of_precision: Decimal digits of $factor to keep (guard digits).

    Returns:
        int: `trunc(value * trunc(factor * 10**k) / 10**k)` for `k = digits_of_precision`.

    Raises:
        InvalidScalar: If $factor is NaN or infinite, or $digits_of_precision < 0.

    Examples:
        >>> approx_scale_int(10_000_000_000, 1.0)
        10000000000
        >>> approx_scale_int(10_000_000_000, 0.5 ** 21)
        4768
    """
    # Raise: a negative digit count has no meaning
    if isinstance(digits_of_precision, bool) or not isinstance(digits_of_precision, int) or digits_of_precision < 0:
        raise InvalidScalar(digits_of_precision, "$digits_of_precision must be a non-negative integer")

    precision_multiplier = 10**digits_of_precision
    scaled_factor = scale_int_by_float(precision_multiplier, factor)

    return div_trunc(value * scaled_factor, precision_multiplier)
