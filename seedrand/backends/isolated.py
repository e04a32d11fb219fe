"""
Isolated (Instance) Backend.

Responsibility boundaries:
- Each IsolatedGenerator owns a private Seed that no other instance can see.
- Serializes draws per instance so concurrent callers observe a linear
  sequence of Seed updates.
- Emits exactly one stop signal per instance.

Mutation constraints:
- The Seed lives in _GeneratorState and is only touched while holding its lock.
- running -> stopped is one-way; a stopped instance refuses every operation.
"""

import itertools
import threading
import weakref
from typing import Any, Callable, Optional

from seedrand.backends import implicit
from seedrand.config.config import GeneratorConfig
from seedrand.core.errors import InvalidStateError
from seedrand.core.generator import Generator
from seedrand.core.primitive import Seed, normalize_seed, uniform_int_s, uniform_s, validate_seed
from seedrand.utils.logger import AuditLogger

StopCallback = Callable[[str], None]

_ids = itertools.count(1)


class _GeneratorState:
    """
    Mutable state strictly owned by one IsolatedGenerator.
    Kept apart from the handle so the finalizer can stop it without
    holding a reference to the handle itself.
    """

    def __init__(self, generator_id: str, seed: Seed, on_stop: Optional[StopCallback], audit: AuditLogger):
        self.generator_id = generator_id
        self._seed = seed
        self._on_stop = on_stop
        self._audit = audit
        self._lock = threading.Lock()
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def check_running(self) -> None:
        if self._stopped:
            raise InvalidStateError(f"Generator {self.generator_id} has been stopped.")

    def uniform(self) -> float:
        with self._lock:
            self.check_running()
            value, self._seed = uniform_s(self._seed)
            return value

    def uniform_int(self, n: int) -> int:
        with self._lock:
            self.check_running()
            value, self._seed = uniform_int_s(n, self._seed)
            return value

    def shutdown(self, reason: str) -> bool:
        """
        Move to the stopped state and emit the stop signal.

        Returns:
            True if this call stopped the generator, False if it was already stopped.
        """
        with self._lock:
            if self._stopped:
                return False
            self._stopped = True

        self._audit.log_event("generator_stopped", {"generator_id": self.generator_id, "reason": reason})
        if self._on_stop is not None:
            self._on_stop(self.generator_id)
        return True


class IsolatedGenerator(Generator):
    """
    Independently seeded generator, safe to share between threads.
    """

    def __init__(
        self,
        seed: Optional[Any] = None,
        config: Optional[GeneratorConfig] = None,
        on_stop: Optional[StopCallback] = None,
    ):
        """
        Start a generator with its own Seed.

        Args:
            seed: Three integers; a fresh implicit.new_seed() when omitted.
            config: Sampling and lifecycle settings.
            on_stop: Called once with the generator id when it stops.

        Raises:
            InvalidArgumentError: If seed is not three integers.
        """
        super().__init__(config)
        if seed is None:
            seed = implicit.new_seed()
        a, b, c = validate_seed(seed)

        audit = AuditLogger("isolated")
        self._state = _GeneratorState(f"gen-{next(_ids)}", normalize_seed(a, b, c), on_stop, audit)
        audit.log_event("generator_started", {"generator_id": self._state.generator_id})

        self._finalizer: Optional[weakref.finalize] = None
        if self.config.auto_stop:
            self._finalizer = weakref.finalize(self, self._state.shutdown, "finalized")
            self._finalizer.atexit = False

    @property
    def generator_id(self) -> str:
        return self._state.generator_id

    @property
    def stopped(self) -> bool:
        return self._state.stopped

    def draw_unit(self) -> float:
        return self._state.uniform()

    def draw_native(self, n: int) -> int:
        return self._state.uniform_int(n)

    def stop(self) -> bool:
        """
        Stop the generator. Later operations raise InvalidStateError.

        Returns:
            True on the first call, False if it was already stopped.
        """
        if self._finalizer is not None:
            self._finalizer.detach()
        return self._state.shutdown("stopped")

    def _ensure_usable(self) -> None:
        self._state.check_running()

    def __enter__(self) -> "IsolatedGenerator":
        self._ensure_usable()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    def __repr__(self) -> str:
        status = "stopped" if self.stopped else "running"
        return f"IsolatedGenerator(id={self.generator_id}, status={status})"


def new(seed: Optional[Any] = None, config: Optional[GeneratorConfig] = None) -> IsolatedGenerator:
    """Create an IsolatedGenerator; see IsolatedGenerator.__init__."""
    return IsolatedGenerator(seed, config)


def stop(handle: IsolatedGenerator) -> bool:
    """Stop `handle`; see IsolatedGenerator.stop."""
    return handle.stop()
