"""
Error kinds raised by the sampling layer.

Responsibility boundaries:
- Every failure surfaces synchronously to the caller of the failing operation.
- Validation errors are raised before any draw is consumed.
"""


class SeedRandError(Exception):
    pass


class InvalidArgumentError(SeedRandError, ValueError):
    """Malformed seed, byte count or bound."""
    pass


class InvalidStateError(SeedRandError, RuntimeError):
    """Operation attempted on a stopped generator."""
    pass


class RejectionLimitError(SeedRandError, RuntimeError):
    """A rejection loop exceeded the configured cap."""
    pass
