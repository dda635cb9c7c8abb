class AxisInvariantError(ValueError):
    """Raised when an axis would break one of its structural invariants.

    An axis is a strictly increasing, non-empty sequence of ticks. The
    construction checks are gated by
    :attr:`quant_pde.config.AxisConfig.check_monotone`, so their errors are
    raised in debug runs only; optimized runs (``python -O``) skip them.
    :class:`AxisRefinementError` is raised in every build mode.
    """


class EmptyAxisError(AxisInvariantError):
    """Raised when an axis is constructed from an empty tick list."""


class NonMonotonicAxisError(AxisInvariantError):
    """Raised when two adjacent ticks are not strictly increasing.

    Attributes
    ----------
    index : int
        Position ``i`` of the first offending pair ``(x[i], x[i+1])``.
    """

    def __init__(self, message: str, *, index: int) -> None:
        super().__init__(message)
        self.index = index


class AxisRefinementError(AxisInvariantError):
    """Raised when refining an axis that has no adjacent pair of ticks."""


class NonFiniteAxisError(AxisInvariantError):
    """Raised when a tick is NaN or infinite."""
