from __future__ import annotations

from decimal import Decimal
from numbers import Integral
from typing import TypeAlias

# Use where optimal type is `int`, but other integral types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | Integral

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def as_count(value: IntLike) -> int:
    """Converts an integral input to `int`.

    Booleans and non-integral numbers are rejected, so that `2.5` banknotes can never appear.

    Args:
        value: Input value as `IntLike`.

    Returns:
        Value converted to `int`.

    Raises:
        TypeError: If $value is not integral.
    """
    # Raise: $value must be a true integral number (bool is an int subclass, but never a count)
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"$value must be an integer, but provided value is: {value!r} (type '{type(value).__name__}')")

    return int(value)
