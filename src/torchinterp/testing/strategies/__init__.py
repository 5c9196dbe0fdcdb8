"""Hypothesis strategies for spline testing."""

from ._breakpoints import breakpoints
from ._piecewise_cubics import piecewise_cubics
from ._positive_real_numbers import positive_real_numbers
from ._real_numbers import real_numbers

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "real_numbers",
    # Spline strategies
    "breakpoints",
    "piecewise_cubics",
]
