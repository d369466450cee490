from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from ens_pricing.errors import InvalidNumber

# Use where optimal type is `int`, but other types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | float | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to a finite `Decimal`.

    Floats are converted via their shortest `repr` string, so a float printed in
    scientific notation (e.g. `1e-07`) keeps all of its digits and no binary noise
    is introduced.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidNumber: If $value is a bool, cannot be parsed, or is NaN / infinite.
    """
    # Raise: bool is an int subclass, but never a meaningful amount
    if isinstance(value, bool):
        raise InvalidNumber(value, "bool is not a number")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        text = value.strip().replace("_", "") if isinstance(value, str) else repr(value)
        try:
            result = Decimal(text)
        except (InvalidOperation, ValueError) as e:
            raise InvalidNumber(value, "cannot be converted to Decimal") from e
    else:
        raise InvalidNumber(value, f"unsupported type '{type(value).__name__}'")

    # Raise: NaN and infinities never describe an amount
    if not result.is_finite():
        raise InvalidNumber(value, "must be finite")

    return result


def as_integral(value: IntLike) -> int:
    """Converts input to `int`, refusing any fractional part.

    Args:
        value: Input value as `IntLike`. Strings may use `_` as digit separator.

    Returns:
        The exact integer value.

    Raises:
        InvalidNumber: If $value is malformed, non-finite or has a fractional part.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    decimal_value = as_decimal(value)
    if decimal_value != decimal_value.to_integral_value():
        raise InvalidNumber(value, "must be a whole number")

    return int(decimal_value)
