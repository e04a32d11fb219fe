"""
Generator Capability.

Responsibility boundaries:
- The single point of polymorphism between the Core Sampler and its backends.
- Backends implement draw_unit() and may override draw_native() with a
  primitive that samples [1, n] directly.

Mutation constraints:
- Only backends mutate Seed state, and only inside draw_unit()/draw_native().
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from seedrand.config.config import DEFAULT_CONFIG, GeneratorConfig
from seedrand.core import sampler
from seedrand.core.bounds import Number


class Generator(ABC):
    """
    Abstract source of uniform draws with the shared sampling algorithm attached.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    @abstractmethod
    def draw_unit(self) -> float:
        """
        Return the next uniform float in [0.0, 1.0), advancing the Seed.
        """
        pass

    def draw_native(self, n: int) -> int:
        """
        Return a uniform integer in [1, n] using exactly one draw.

        Args:
            n: Positive upper bound.
        """
        self._ensure_usable()
        return int(self.draw_unit() * n) + 1

    def draw_bounded(self, bound: Any) -> Number:
        """Draw a value constrained by an int, float or range bound."""
        self._ensure_usable()
        return sampler.draw_bounded(self, bound)

    def draw_bytes(self, size: int) -> bytes:
        """Draw `size` uniform bytes."""
        self._ensure_usable()
        return sampler.draw_bytes(self, size)

    def rand(self, bound: Any = None) -> Number:
        """draw_unit() without a bound, draw_bounded(bound) otherwise."""
        if bound is None:
            self._ensure_usable()
            return self.draw_unit()
        return self.draw_bounded(bound)

    random = rand

    def _ensure_usable(self) -> None:
        """Hook for backends with a lifecycle; raise to refuse the operation."""
        pass
