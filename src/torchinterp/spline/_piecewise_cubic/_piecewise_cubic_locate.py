from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._piecewise_cubic import PiecewiseCubic


def piecewise_cubic_locate(
    spline: PiecewiseCubic,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Find the interval index of each query point.

    Parameters
    ----------
    spline : PiecewiseCubic
        Spline whose breakpoints are searched
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    index : Tensor
        Interval indices, same shape as t, dtype long, in [0, n_segments - 1]

    Notes
    -----
    Interval i is the half-open [breakpoints[i], breakpoints[i+1]), so a
    breakpoint always belongs to the interval on its right. Only the interior
    breakpoints are searched: points below breakpoints[0] map to interval 0
    and points at or above breakpoints[-2] map to the last interval. This is
    the same index a bisection over breakpoints[0:-1] returns, found in
    O(log n) per point.
    """
    knots = spline.breakpoints

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)

    query_shape = t.shape

    interior = knots[1:-1]
    if interior.numel() == 0:
        # Single segment: everything maps to it
        return torch.zeros(query_shape, dtype=torch.long, device=knots.device)

    # Compare in the wider dtype so no query rounds onto a breakpoint
    search_dtype = torch.promote_types(t.dtype, interior.dtype)
    t_flat = t.detach().reshape(-1).to(search_dtype)
    interior = interior.detach().to(search_dtype)

    # searchsorted(right=True) counts interior breakpoints <= t
    segment_idx = torch.searchsorted(interior, t_flat, right=True)

    return segment_idx.reshape(query_shape)


def _segments_at(
    spline: PiecewiseCubic,
    t: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor, torch.Size, torch.Size]:
    """Gather segment coefficients and local coordinates for query points.

    Returns (segment_idx, coefficients, dx, query_shape, value_shape) where
    segment_idx has shape (n_query,), coefficients has shape
    (n_query, 4, *value_shape) and dx broadcasts against coefficients[:, k].
    """
    knots = spline.breakpoints
    coeffs = spline.coefficients

    if not isinstance(t, Tensor):
        t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)

    query_shape = t.shape
    value_shape = coeffs.shape[2:]

    segment_idx = piecewise_cubic_locate(spline, t).reshape(-1)

    # Local coordinate relative to the segment's left breakpoint
    dx = t.reshape(-1) - knots[segment_idx]
    dx = dx.reshape(-1, *([1] * len(value_shape)))

    return segment_idx, coeffs[segment_idx], dx, query_shape, value_shape
