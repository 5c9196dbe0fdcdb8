from ._piecewise_cubic import PiecewiseCubic, piecewise_cubic
from ._piecewise_cubic_derivative import piecewise_cubic_derivative
from ._piecewise_cubic_derivatives import piecewise_cubic_derivatives
from ._piecewise_cubic_evaluate import piecewise_cubic_evaluate
from ._piecewise_cubic_integral import piecewise_cubic_integral
from ._piecewise_cubic_locate import piecewise_cubic_locate
from ._spline_interpolation import SplineInterpolation, spline_interpolation

__all__ = [
    "PiecewiseCubic",
    "SplineInterpolation",
    "piecewise_cubic",
    "piecewise_cubic_derivative",
    "piecewise_cubic_derivatives",
    "piecewise_cubic_evaluate",
    "piecewise_cubic_integral",
    "piecewise_cubic_locate",
    "spline_interpolation",
]
