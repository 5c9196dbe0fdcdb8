from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ._piecewise_cubic_locate import _segments_at

if TYPE_CHECKING:
    from ._piecewise_cubic import PiecewiseCubic


def piecewise_cubic_evaluate(
    spline: PiecewiseCubic,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a piecewise cubic at query points.

    Parameters
    ----------
    spline : PiecewiseCubic
        Spline to evaluate
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *value_shape)

    Notes
    -----
    Points outside [breakpoints[0], breakpoints[-1]] are extrapolated with
    the polynomial of the first or last segment. No error is raised.
    """
    _, segment, dx, query_shape, value_shape = _segments_at(spline, t)

    a = segment[:, 0]
    b = segment[:, 1]
    c = segment[:, 2]
    d = segment[:, 3]

    # Horner's method: y = a + dx*(b + dx*(c + dx*d))
    y = a + dx * (b + dx * (c + dx * d))

    return y.reshape((*query_shape, *value_shape))
