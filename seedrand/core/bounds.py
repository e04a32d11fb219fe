"""
Bound Schema.

Responsibility boundaries:
- Defines the Range value accepted by draw_bounded().
- Validates and classifies scalar and range bounds before any draw happens.

Mutation constraints:
- Range and ResolvedBound are immutable.
"""

import math
import numbers
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union

from seedrand.core.errors import InvalidArgumentError
from seedrand.core.primitive import is_integer

Number = Union[int, float]


class BoundKind(Enum):
    ZERO = auto()
    NEGATIVE = auto()
    INTEGER = auto()
    FLOAT = auto()
    INT_RANGE = auto()
    FLOAT_RANGE = auto()


@dataclass(frozen=True)
class Range:
    """
    Inclusive range between two endpoints, given in either order.
    """
    first: Number
    last: Number

    def __post_init__(self) -> None:
        for endpoint in (self.first, self.last):
            _check_number(endpoint)


@dataclass(frozen=True)
class ResolvedBound:
    """
    A validated bound. For scalar kinds `low` is the zero of the bound's type
    and `high` the bound itself; for range kinds low <= high.
    """
    kind: BoundKind
    low: Number
    high: Number


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_number(value: Any) -> None:
    if not _is_number(value):
        raise InvalidArgumentError(f"Bound must be numeric, got {value!r}.")
    if not is_integer(value) and not math.isfinite(value):
        raise InvalidArgumentError(f"Bound must be finite, got {value!r}.")


def _check_float_sized(value: int) -> None:
    """Integers are scaled by a float draw, so they must fit in a float."""
    try:
        float(value)
    except OverflowError:
        raise InvalidArgumentError(f"Bound {value!r} is too large to sample.") from None


def _is_whole(value: Number) -> bool:
    return is_integer(value) or float(value).is_integer()


def resolve_range(first: Any, last: Any) -> ResolvedBound:
    """
    Normalize two endpoints into an integer or float range.

    Two integers form an integer range and two floats a float range. Mixed
    endpoints form an integer range only when both are whole numbers.
    """
    _check_number(first)
    _check_number(last)

    low, high = min(first, last), max(first, last)

    both_integers = is_integer(low) and is_integer(high)
    mixed_whole = is_integer(low) != is_integer(high) and _is_whole(low) and _is_whole(high)

    if both_integers or mixed_whole:
        low, high = int(low), int(high)
        _check_float_sized(high - low + 1)
        return ResolvedBound(BoundKind.INT_RANGE, low, high)

    for endpoint in (low, high):
        if is_integer(endpoint):
            _check_float_sized(endpoint)
    return ResolvedBound(BoundKind.FLOAT_RANGE, float(low), float(high))


def resolve_bound(bound: Any) -> ResolvedBound:
    """
    Classify a bound accepted by draw_bounded().

    Args:
        bound: An int, a float, a Range, a 2-element tuple/list, or a
            Python range with step 1 or -1 (interpreted by membership).

    Returns:
        The ResolvedBound describing how to sample.

    Raises:
        InvalidArgumentError: For non-numeric, non-finite or malformed bounds,
            and for positive integer bounds or integer range widths larger
            than the largest float.
    """
    if isinstance(bound, Range):
        return resolve_range(bound.first, bound.last)

    if isinstance(bound, range):
        if abs(bound.step) != 1 or len(bound) == 0:
            raise InvalidArgumentError(f"Range must be non-empty with step 1 or -1, got {bound!r}.")
        return resolve_range(bound[0], bound[-1])

    if isinstance(bound, (tuple, list)):
        if len(bound) != 2:
            raise InvalidArgumentError(f"Range must have exactly two endpoints, got {bound!r}.")
        return resolve_range(bound[0], bound[1])

    _check_number(bound)

    if is_integer(bound):
        value = int(bound)
        zero: Number = 0
        kind = BoundKind.INTEGER
    else:
        value = float(bound)
        zero = 0.0
        kind = BoundKind.FLOAT

    if value == 0:
        return ResolvedBound(BoundKind.ZERO, zero, zero)
    if value < 0:
        return ResolvedBound(BoundKind.NEGATIVE, zero, value)
    if kind is BoundKind.INTEGER:
        _check_float_sized(value)
    return ResolvedBound(kind, zero, value)
