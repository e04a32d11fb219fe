"""
Core Sampler.

Responsibility boundaries:
- Shapes raw uniform draws into integers, floats, range-bounded values and bytes.
- Written once against the Generator capability; backends only supply draws.

Mutation constraints:
- Never touches Seed state directly. Every draw goes through the generator,
  and all validation happens before the first draw.

Rejection policy:
- A positive float bound F redraws while unit * F >= F, which floating point
  rounding allows when the unit draw is close to 1.0.
- A float range redraws while the interpolated value falls outside [low, high].
- Both loops are unbounded unless the generator's config sets max_rejections;
  the rejection after the cap-th one raises RejectionLimitError.
"""

from typing import TYPE_CHECKING, Any, Optional

from seedrand.core.bounds import BoundKind, Number, ResolvedBound, resolve_bound
from seedrand.core.errors import InvalidArgumentError, RejectionLimitError
from seedrand.core.primitive import is_integer
from seedrand.utils.logger import AuditLogger

if TYPE_CHECKING:
    from seedrand.core.generator import Generator

BYTE_MIN = 0
BYTE_MAX = 255

_audit = AuditLogger("sampler")


def draw_bounded(gen: "Generator", bound: Any) -> Number:
    """
    Draw a value constrained by `bound`.

    Args:
        gen: Generator supplying the raw draws.
        bound: int, float or range (see resolve_bound).

    Returns:
        An int in [0, bound) for a positive int, a float in [0.0, bound) for a
        positive float, a member of the range for ranges, and zero for zero
        or negative bounds.
    """
    return sample(gen, resolve_bound(bound))


def sample(gen: "Generator", resolved: ResolvedBound) -> Number:
    """Draw from an already validated bound."""
    kind = resolved.kind

    if kind in (BoundKind.ZERO, BoundKind.NEGATIVE):
        return resolved.low

    if kind is BoundKind.INTEGER:
        return gen.draw_native(resolved.high) - 1

    if kind is BoundKind.FLOAT:
        return _draw_below(gen, resolved.high)

    if resolved.low == resolved.high:
        return resolved.low

    if kind is BoundKind.INT_RANGE:
        return draw_int_range(gen, resolved.low, resolved.high)

    return _draw_between(gen, resolved.low, resolved.high)


def draw_int_range(gen: "Generator", low: int, high: int) -> int:
    """Uniform integer in [low, high] inclusive; expects low <= high."""
    if low == high:
        return low
    if low == 1:
        return gen.draw_native(high)
    return low + gen.draw_native(high - low + 1) - 1


def draw_bytes(gen: "Generator", size: Any) -> bytes:
    """
    Draw `size` independent bytes, in draw order.

    Raises:
        InvalidArgumentError: If size is not a non-negative integer.
    """
    if not is_integer(size) or size < 0:
        raise InvalidArgumentError(f"Byte count must be a non-negative integer, got {size!r}.")
    return bytes(draw_int_range(gen, BYTE_MIN, BYTE_MAX) for _ in range(size))


def _rejection_cap(gen: "Generator") -> Optional[int]:
    config = getattr(gen, "config", None)
    return None if config is None else config.max_rejections


def _note_rejection(gen: "Generator", bound: Any, value: float, attempt: int) -> None:
    _audit.log_event("draw_rejected", {"bound": bound, "value": value, "attempt": attempt})
    cap = _rejection_cap(gen)
    if cap is not None and attempt > cap:
        raise RejectionLimitError(f"Gave up after {attempt} rejected draws for bound {bound!r}.")


def _draw_below(gen: "Generator", bound: float) -> float:
    attempt = 0
    while True:
        value = gen.draw_unit() * bound
        if value < bound:
            return value
        attempt += 1
        _note_rejection(gen, bound, value, attempt)


def _draw_between(gen: "Generator", low: float, high: float) -> float:
    attempt = 0
    while True:
        unit = gen.draw_unit()
        # stays finite even when high - low overflows
        value = low * (1.0 - unit) + high * unit
        if low <= value <= high:
            return value
        attempt += 1
        _note_rejection(gen, (low, high), value, attempt)
