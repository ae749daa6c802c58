"""Error classes for the hybrid StableSwap simulator.

Every failure is surfaced to the caller as one of these kinds. The math is
deterministic, so retrying a failed call with the same arguments reproduces
the same error.
"""


class HybridSwapError(Exception):
    """Base error for simulator operations."""

    pass


class InvalidInput(HybridSwapError, ValueError):
    """Zero or out-of-range arguments that make a computation ill-posed."""

    pass


class NonConvergence(HybridSwapError):
    """Newton-Raphson iteration did not reach tolerance within the iteration cap."""

    pass


class ArithmeticOverflow(HybridSwapError, ArithmeticError):
    """An intermediate value left the representable integer range."""

    pass


class DegenerateState(HybridSwapError):
    """Derived state is internally inconsistent (e.g. a solved balance implies negative output)."""

    pass


class PoolPaused(HybridSwapError):
    """The pool is paused; the on-chain program would reject the operation."""

    pass
