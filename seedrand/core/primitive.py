"""
Reference Pseudo-Random Primitive.

Responsibility boundaries:
- Implements the Wichmann-Hill three-component generator as pure functions.
- Never holds state: every call takes a Seed and returns the advanced Seed.

Mutation constraints:
- Seeds are plain immutable tuples; backends own the variable holding them.
"""

import numbers
from typing import Any, Tuple

from seedrand.core.errors import InvalidArgumentError

Seed = Tuple[int, int, int]

PRIME1 = 30269
PRIME2 = 30307
PRIME3 = 30323

DEFAULT_SEED: Seed = (3172, 9814, 20125)


def is_integer(value: Any) -> bool:
    """True for integral numbers, excluding bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_seed(value: Any) -> Seed:
    """
    Check that `value` is a 3-sequence of integers.

    Args:
        value: Candidate seed (tuple, list or other sequence).

    Returns:
        The seed as a tuple of plain ints.

    Raises:
        InvalidArgumentError: If the value is not exactly three integers.
    """
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentError(f"Seed must be three integers, got {value!r}.")
    try:
        components = tuple(value)
    except TypeError:
        raise InvalidArgumentError(f"Seed must be three integers, got {value!r}.") from None

    if len(components) != 3 or not all(is_integer(c) for c in components):
        raise InvalidArgumentError(f"Seed must be three integers, got {value!r}.")
    return tuple(int(c) for c in components)


def normalize_seed(a: int, b: int, c: int) -> Seed:
    """
    Map arbitrary integers onto a usable seed.

    Zero components, and components that share a factor with their prime,
    would lock a lane of the generator at zero.
    """
    return (
        abs(a) % (PRIME1 - 1) + 1,
        abs(b) % (PRIME2 - 1) + 1,
        abs(c) % (PRIME3 - 1) + 1,
    )


def uniform_s(seed: Seed) -> Tuple[float, Seed]:
    """Advance `seed` once and return a float in [0.0, 1.0) with the new seed."""
    a1, a2, a3 = seed
    b1 = (a1 * 171) % PRIME1
    b2 = (a2 * 172) % PRIME2
    b3 = (a3 * 170) % PRIME3
    r = b1 / PRIME1 + b2 / PRIME2 + b3 / PRIME3
    return r - int(r), (b1, b2, b3)


def uniform_int_s(n: int, seed: Seed) -> Tuple[int, Seed]:
    """Native integer draw in [1, n], consuming exactly one step."""
    value, seed = uniform_s(seed)
    return int(value * n) + 1, seed
