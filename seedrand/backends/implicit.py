"""
Implicit (Shared) Backend and convenience API.

Responsibility boundaries:
- Keeps one Seed per thread of control in thread-local storage.
- Exposes module-level seed/draw functions over a single shared generator.

Mutation constraints:
- The Seed is only replaced by seed()/srand() and by draws on the owning thread.
- Unseeded threads start from the configured default seed on their first draw.
- Not guarded by a lock: each thread only ever sees its own scope.
"""

import threading
from typing import Any, Optional

from seedrand.config.config import DEFAULT_CONFIG, GeneratorConfig
from seedrand.core.bounds import Number
from seedrand.core.errors import InvalidArgumentError
from seedrand.core.generator import Generator
from seedrand.core.primitive import Seed, normalize_seed, uniform_int_s, uniform_s, validate_seed
from seedrand.utils.logger import AuditLogger


class ImplicitGenerator(Generator):
    """
    Generator backed by ambient, per-thread Seed state.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        super().__init__(config)
        self._local = threading.local()
        self._audit = AuditLogger("implicit")

    @property
    def current_seed(self) -> Optional[Seed]:
        """The calling thread's Seed, or None while unseeded."""
        return getattr(self._local, "seed", None)

    def set_seed(self, seed: Seed, normalize: bool = True) -> Optional[Seed]:
        """
        Replace the calling thread's Seed.

        Args:
            seed: Three integers.
            normalize: Run the integers through normalize_seed() first; the
                default seed is stored as-is.

        Returns:
            The previous Seed, or None if the thread was unseeded.
        """
        a, b, c = validate_seed(seed)
        previous = self.current_seed
        self._local.seed = normalize_seed(a, b, c) if normalize else (a, b, c)
        self._audit.log_event("seed_set", {"seed": self._local.seed, "thread": threading.get_ident()})
        return previous

    def draw_unit(self) -> float:
        value, self._local.seed = uniform_s(self._state())
        return value

    def draw_native(self, n: int) -> int:
        value, self._local.seed = uniform_int_s(n, self._state())
        return value

    def _state(self) -> Seed:
        seed = self.current_seed
        if seed is None:
            seed = self.config.default_seed
        return seed


_shared = ImplicitGenerator(DEFAULT_CONFIG)


def shared_generator() -> ImplicitGenerator:
    """Return the generator behind the module-level functions."""
    return _shared


def default_seed() -> Seed:
    """Return the fixed baseline Seed without touching any state."""
    return _shared.config.default_seed


def seed(*args: Any) -> Optional[Seed]:
    """
    Seed the calling thread's ambient generator.

    seed() uses the default seed, seed((a, b, c)) and seed(a, b, c) use the
    given integers.

    Returns:
        The previous Seed, or None if the thread was unseeded.

    Raises:
        InvalidArgumentError: For wrong arity or non-integer components.
    """
    if not args:
        return _shared.set_seed(default_seed(), normalize=False)
    if len(args) == 1:
        return _shared.set_seed(args[0])
    if len(args) == 3:
        return _shared.set_seed(args)
    raise InvalidArgumentError(f"seed() takes 0, 1 or 3 arguments, got {len(args)}.")


def srand(*args: Any) -> Optional[Seed]:
    """
    Like seed(), except that no arguments means a fresh new_seed().

    new_seed() draws from the ambient generator before the reseed, so the
    returned previous Seed is the state after those three draws.
    """
    if not args:
        return _shared.set_seed(new_seed())
    return seed(*args)


def new_seed() -> Seed:
    """Derive a fresh Seed from three draws of the ambient generator."""
    a, b, c = _shared.config.new_seed_bounds
    return (_shared.draw_bounded(a), _shared.draw_bounded(b), _shared.draw_bounded(c))


def current_seed() -> Optional[Seed]:
    return _shared.current_seed


def draw_unit() -> float:
    return _shared.draw_unit()


def draw_bounded(bound: Any) -> Number:
    return _shared.draw_bounded(bound)


def draw_bytes(size: int) -> bytes:
    return _shared.draw_bytes(size)


def rand(bound: Any = None) -> Number:
    """draw_unit() without a bound, draw_bounded(bound) otherwise."""
    return _shared.rand(bound)


random = rand
