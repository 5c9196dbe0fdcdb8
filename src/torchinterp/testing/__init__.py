"""Testing utilities for torchinterp operators.

Example usage:

    import hypothesis

    from torchinterp.testing import piecewise_cubics

    @hypothesis.given(piecewise_cubics())
    def test_something(data):
        breakpoints, coefficients = data
"""

from .strategies import (
    breakpoints,
    piecewise_cubics,
    positive_real_numbers,
    real_numbers,
)

__all__ = [
    # Numeric strategies
    "positive_real_numbers",
    "real_numbers",
    # Spline strategies
    "breakpoints",
    "piecewise_cubics",
]
