"""
Configuration Utility.

Responsibility boundaries:
- Holds sampling policy and generator lifecycle settings.
- Must be passed to generators explicitly; the implicit backend uses DEFAULT_CONFIG.

Mutation constraints:
- Frozen after initialization so a generator's policy cannot drift mid-run.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from seedrand.core.errors import InvalidArgumentError
from seedrand.core.primitive import DEFAULT_SEED, Seed, is_integer, validate_seed

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Immutable container for generator settings.
    """
    default_seed: Seed = DEFAULT_SEED
    # Exclusive upper bounds of the three components produced by new_seed()
    new_seed_bounds: Tuple[int, int, int] = (9999, 9999, 99999)
    # Rejections tolerated per draw; None means rejection loops are unbounded
    max_rejections: Optional[int] = None
    auto_stop: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_seed", validate_seed(self.default_seed))

        bounds = validate_seed(self.new_seed_bounds)
        if any(b <= 0 for b in bounds):
            raise InvalidArgumentError(f"new_seed_bounds must be positive, got {bounds}.")
        object.__setattr__(self, "new_seed_bounds", bounds)

        if self.max_rejections is not None:
            if not is_integer(self.max_rejections) or self.max_rejections <= 0:
                raise InvalidArgumentError(
                    f"max_rejections must be a positive integer or None, got {self.max_rejections!r}."
                )

        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise InvalidArgumentError(f"Unknown log level {self.log_level!r}.")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GeneratorConfig":
        """
        Build a config from SEEDRAND_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            A validated GeneratorConfig; unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        raw_cap = env.get("SEEDRAND_MAX_REJECTIONS")
        if raw_cap:
            try:
                kwargs["max_rejections"] = int(raw_cap)
            except ValueError:
                raise InvalidArgumentError(
                    f"SEEDRAND_MAX_REJECTIONS must be an integer, got {raw_cap!r}."
                ) from None

        if env.get("SEEDRAND_NO_FINALIZER"):
            kwargs["auto_stop"] = False

        if env.get("SEEDRAND_LOG_LEVEL"):
            kwargs["log_level"] = env["SEEDRAND_LOG_LEVEL"]

        return cls(**kwargs)


DEFAULT_CONFIG = GeneratorConfig()
