from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._piecewise_cubic_locate import _segments_at

if TYPE_CHECKING:
    from ._piecewise_cubic import PiecewiseCubic


def _antiderivative(coeffs: Tensor, dx: Tensor) -> Tensor:
    """F(dx) = a*dx + (b/2)*dx^2 + (c/3)*dx^3 + (d/4)*dx^4, with F(0) = 0."""
    a = coeffs[:, 0]
    b = coeffs[:, 1]
    c = coeffs[:, 2]
    d = coeffs[:, 3]

    return dx * (a + dx * (b / 2 + dx * (c / 3 + dx * d / 4)))


def piecewise_cubic_integral(
    spline: PiecewiseCubic,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Integrate a piecewise cubic from its first breakpoint up to t.

    Parameters
    ----------
    spline : PiecewiseCubic
        Spline to integrate
    t : float or Tensor
        Upper integration bounds, shape (*query_shape) or scalar

    Returns
    -------
    integral : Tensor
        Definite integrals over [breakpoints[0], t], shape
        (*query_shape, *value_shape). Negative orientation for
        t < breakpoints[0].

    Notes
    -----
    Every segment left of the one containing t contributes its full
    integral F_i(w_i), w_i = breakpoints[i+1] - breakpoints[i]; the segment
    containing t contributes F(t - breakpoints[i]). The prefix over complete
    segments is recomputed on each call, so the cost is O(n_segments).

    The integral between two points a and b is
    ``piecewise_cubic_integral(spline, b) - piecewise_cubic_integral(spline, a)``.
    """
    knots = spline.breakpoints
    coeffs = spline.coefficients
    value_shape = coeffs.shape[2:]

    widths = knots[1:] - knots[:-1]
    widths = widths.reshape(-1, *([1] * len(value_shape)))

    # Integral of each complete segment, then exclusive prefix sum
    full = _antiderivative(coeffs, widths)
    prefix = torch.cat(
        [torch.zeros_like(full[:1]), torch.cumsum(full[:-1], dim=0)], dim=0
    )

    segment_idx, segment, dx, query_shape, _ = _segments_at(spline, t)

    integral = prefix[segment_idx] + _antiderivative(segment, dx)

    return integral.reshape((*query_shape, *value_shape))
