"""Differentiable piecewise cubic spline evaluation for PyTorch tensors.

This module evaluates splines whose per-interval cubic coefficients were
produced by a fitting algorithm, with full autograd support.

Interpolation
-------------
SplineInterpolation
    Third-degree spline interpolation (initialize, interpolate,
    differentiate, integrate).
spline_interpolation
    Create an initialized SplineInterpolation from breakpoints and
    coefficients.

Piecewise Cubics
----------------
piecewise_cubic
    Validate breakpoints and coefficients into a PiecewiseCubic.
piecewise_cubic_locate
    Find the interval containing each query point.
piecewise_cubic_evaluate
    Evaluate a piecewise cubic at query points.
piecewise_cubic_derivatives
    Value, first and second derivative at query points.
piecewise_cubic_integral
    Definite integral from the first breakpoint to query points.
piecewise_cubic_derivative
    Derivative of a piecewise cubic as a new piecewise cubic.

Data Types
----------
PiecewiseCubic
    Breakpoints and local cubic coefficients.
InterpolationCapabilities
    Static capability descriptor of an interpolation method.

Exceptions
----------
SplineError
    Base exception for spline operations.
InvalidArgumentError
    Breakpoints or coefficients cannot define a spline.
NotInitializedError
    Interpolation queried before initialization.
"""

from ._capabilities import InterpolationCapabilities
from ._invalid_argument_error import InvalidArgumentError
from ._not_initialized_error import NotInitializedError
from ._piecewise_cubic import (
    PiecewiseCubic,
    SplineInterpolation,
    piecewise_cubic,
    piecewise_cubic_derivative,
    piecewise_cubic_derivatives,
    piecewise_cubic_evaluate,
    piecewise_cubic_integral,
    piecewise_cubic_locate,
    spline_interpolation,
)
from ._spline_error import SplineError

__all__ = [
    "InterpolationCapabilities",
    "InvalidArgumentError",
    "NotInitializedError",
    "PiecewiseCubic",
    "SplineError",
    "SplineInterpolation",
    "piecewise_cubic",
    "piecewise_cubic_derivative",
    "piecewise_cubic_derivatives",
    "piecewise_cubic_evaluate",
    "piecewise_cubic_integral",
    "piecewise_cubic_locate",
    "spline_interpolation",
]
