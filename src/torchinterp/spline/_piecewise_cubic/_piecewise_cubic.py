"""Piecewise cubic polynomial on ordered breakpoints."""

import warnings
from typing import Optional

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._invalid_argument_error import InvalidArgumentError

# Above this many segments a float16/bfloat16 prefix integral loses most of
# its significant digits.
_REDUCED_PRECISION_SEGMENT_THRESHOLD = 256


@tensorclass
class PiecewiseCubic:
    """Piecewise cubic polynomial.

    Attributes
    ----------
    breakpoints : Tensor
        Interval boundaries, shape (n_breakpoints,). Expected to be strictly
        increasing; the ordering is trusted and never checked.
    coefficients : Tensor
        Polynomial coefficients, shape (n_segments, 4, *value_shape) with
        n_segments = n_breakpoints - 1. For segment i the polynomial is:
        a[i] + b[i]*(t-breakpoints[i]) + c[i]*(t-breakpoints[i])^2
        + d[i]*(t-breakpoints[i])^3
        where coefficients[i] = [a, b, c, d].
    """

    breakpoints: Tensor
    coefficients: Tensor


def piecewise_cubic(
    breakpoints,
    coefficients,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> PiecewiseCubic:
    """Create a piecewise cubic from breakpoints and local coefficients.

    Parameters
    ----------
    breakpoints : array_like
        Interval boundaries t[0] < t[1] < ... < t[N-1], shape (N,), N >= 2.
    coefficients : array_like
        Either a flat sequence of 4*(N-1) values, grouped as (a, b, c, d) per
        interval, or a tensor of shape (N-1, 4, *value_shape).
    dtype : torch.dtype, optional
        Floating dtype of the stored spline. Defaults to the promoted dtype
        of both inputs (the default float dtype for integer inputs).
    device : torch.device, optional
        Device of the stored spline.

    Returns
    -------
    PiecewiseCubic
        A spline owning copies of both inputs.

    Raises
    ------
    InvalidArgumentError
        If an input is None, breakpoints are not one-dimensional, fewer than
        two breakpoints are given, or the coefficients do not hold exactly
        four values per interval, or dtype is not a floating point dtype.

    Notes
    -----
    Breakpoint ordering is not validated. Queries outside
    [breakpoints[0], breakpoints[-1]] are extrapolated with the first or last
    interval's polynomial.

    Examples
    --------
    >>> spline = piecewise_cubic([0.0, 1.0, 2.0], [1, 0, 0, 0, 2, 0, 0, 0])
    >>> spline.coefficients.shape
    torch.Size([2, 4])
    """
    if breakpoints is None:
        raise InvalidArgumentError("breakpoints must not be None")
    if coefficients is None:
        raise InvalidArgumentError("coefficients must not be None")

    breakpoints = torch.as_tensor(breakpoints, device=device)
    coefficients = torch.as_tensor(coefficients, device=device)

    if breakpoints.dim() != 1:
        raise InvalidArgumentError(
            f"breakpoints must be one-dimensional, got shape "
            f"{tuple(breakpoints.shape)}"
        )

    n = breakpoints.shape[0]
    if n == 0:
        raise InvalidArgumentError("breakpoints must not be empty")
    if n < 2:
        raise InvalidArgumentError(
            f"Need at least 2 breakpoints to define an interval, got {n}"
        )

    n_segments = n - 1

    if coefficients.dim() == 1:
        if coefficients.shape[0] != 4 * n_segments:
            raise InvalidArgumentError(
                f"Expected 4 * (n_breakpoints - 1) = {4 * n_segments} "
                f"coefficients, got {coefficients.shape[0]}"
            )
        coefficients = coefficients.reshape(n_segments, 4)
    elif coefficients.dim() == 0 or tuple(coefficients.shape[:2]) != (
        n_segments,
        4,
    ):
        raise InvalidArgumentError(
            f"coefficients must have shape ({4 * n_segments},) or "
            f"({n_segments}, 4, *value_shape), got "
            f"{tuple(coefficients.shape)}"
        )

    if dtype is None:
        dtype = torch.promote_types(breakpoints.dtype, coefficients.dtype)
        if not dtype.is_floating_point:
            dtype = torch.get_default_dtype()
    elif not dtype.is_floating_point:
        raise InvalidArgumentError(
            f"dtype must be a floating point dtype, got {dtype}"
        )

    if (
        dtype in (torch.float16, torch.bfloat16)
        and n_segments > _REDUCED_PRECISION_SEGMENT_THRESHOLD
    ):
        warnings.warn(
            f"{n_segments} segments with {dtype} may accumulate significant "
            f"rounding error in integrals. Consider using float32 or float64.",
            RuntimeWarning,
            stacklevel=2,
        )

    return PiecewiseCubic(
        breakpoints=breakpoints.to(dtype=dtype).clone(),
        coefficients=coefficients.to(dtype=dtype).clone(),
        batch_size=[],
    )
