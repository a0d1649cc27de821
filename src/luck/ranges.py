"""Bounded integer and floating-point draws over any random source.

All upper bounds are exclusive and all lower bounds inclusive. A zero-width
range yields its lower bound without failing.
"""

from __future__ import annotations

import math

from .errors import InvalidRangeError
from .types import RandomSource


def _check_max(max_value: float, name: str = "max_value") -> None:
    if max_value < 0:
        raise InvalidRangeError(
            f"{name} must be greater than or equal to 0, got {max_value}",
            parameter=name,
        )


def _check_bounds(min_value: float, max_value: float) -> None:
    if min_value > max_value:
        raise InvalidRangeError(
            f"min_value must be less than or equal to max_value, got {min_value} > {max_value}",
            parameter="min_value",
        )


def int_below(source: RandomSource, max_value: int) -> int:
    """Return an int in ``[0, max_value)``, or 0 when ``max_value`` is 0."""

    _check_max(max_value)
    if max_value == 0:
        return 0
    return source.randrange(max_value)


def int_between(source: RandomSource, min_value: int, max_value: int) -> int:
    """Return an int in ``[min_value, max_value)``, or ``min_value`` when equal."""

    _check_bounds(min_value, max_value)
    if min_value == max_value:
        return min_value
    return min_value + source.randrange(max_value - min_value)


def _below_upper(value: float, min_value: float, max_value: float) -> float:
    # rounding can land the scaled draw on the exclusive upper bound
    if value >= max_value and min_value < max_value:
        return math.nextafter(max_value, min_value)
    return value


def float_below(source: RandomSource, max_value: float) -> float:
    """Return a float in ``[0, max_value)``, or 0.0 when ``max_value`` is 0."""

    _check_max(max_value)
    return _below_upper(source.random() * max_value, 0.0, max_value)


def float_between(source: RandomSource, min_value: float, max_value: float) -> float:
    """Return a float in ``[min_value, max_value)``."""

    _check_bounds(min_value, max_value)
    value = source.random() * (max_value - min_value) + min_value
    return _below_upper(value, min_value, max_value)


__all__ = ["float_below", "float_between", "int_below", "int_between"]
