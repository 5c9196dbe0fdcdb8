from ._spline_error import SplineError


class InvalidArgumentError(SplineError, ValueError):
    """Raised for breakpoints or coefficients that cannot define a spline.

    Covers missing inputs, fewer than two breakpoints, and a coefficient
    count other than four per interval.
    """

    pass
