"""Numeric coercion helpers.

Field setters never reject input: anything that is not a usable number
collapses to a caller-supplied default.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any


def coerce_int(value: Any, default: int = 0) -> int:
    """Coerce a value to an int, falling back to ``default``.

    bools become 0/1, integral types (including numpy integers) pass
    through, and finite reals such as floats, ``Fraction`` and ``Decimal``
    truncate toward zero. Numeric strings are parsed. NaN, infinities,
    None and everything else return ``default``.

    Args:
        value: Value to coerce
        default: Result for non-numeric input

    Returns:
        Integer value

    Example:
        >>> coerce_int("12")
        12
        >>> coerce_int(3.9)
        3
        >>> coerce_int("abc")
        0
        >>> coerce_int(None, default=127)
        127
    """
    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default

    # numpy integer scalars register as Integral
    if isinstance(value, numbers.Integral):
        return int(value)

    # Decimal is not registered as Real
    if isinstance(value, Decimal):
        if not value.is_finite():
            return default
        return int(value)

    if isinstance(value, numbers.Real):
        try:
            if not math.isfinite(value):
                return default
        except OverflowError:
            # finite, just wider than a float (a huge Fraction)
            pass
        return int(value)

    return default


def is_numeric(value: Any) -> bool:
    """Return True if ``value`` would coerce without using the default."""
    sentinel = object()
    return coerce_int(value, default=sentinel) is not sentinel  # type: ignore[arg-type]


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))
