from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

from torch import Tensor

from ._piecewise_cubic_locate import _segments_at

if TYPE_CHECKING:
    from ._piecewise_cubic import PiecewiseCubic


def piecewise_cubic_derivatives(
    spline: PiecewiseCubic,
    t: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Evaluate a piecewise cubic and its first two derivatives.

    Parameters
    ----------
    spline : PiecewiseCubic
        Spline to differentiate
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    value : Tensor
        Interpolated values, shape (*query_shape, *value_shape)
    first : Tensor
        First derivative with respect to t, same shape as value
    second : Tensor
        Second derivative with respect to t, same shape as value

    Notes
    -----
    For y = a + b*dx + c*dx^2 + d*dx^3 with dx = t - breakpoints[i]:
    - y'  = b + 2c*dx + 3d*dx^2
    - y'' = 2c + 6d*dx
    dx is a shift of t, so derivatives in dx equal derivatives in t.
    """
    _, segment, dx, query_shape, value_shape = _segments_at(spline, t)

    a = segment[:, 0]
    b = segment[:, 1]
    c = segment[:, 2]
    d = segment[:, 3]

    value = a + dx * (b + dx * (c + dx * d))
    first = b + 2 * dx * c + 3 * dx * dx * d
    second = 2 * c + 6 * dx * d

    shape = (*query_shape, *value_shape)

    return value.reshape(shape), first.reshape(shape), second.reshape(shape)
