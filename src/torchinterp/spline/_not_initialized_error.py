from ._spline_error import SplineError


class NotInitializedError(SplineError, RuntimeError):
    """Raised when an interpolation is queried before it was initialized."""

    pass
