import torch

from .._invalid_argument_error import InvalidArgumentError
from ._piecewise_cubic import PiecewiseCubic


def piecewise_cubic_derivative(
    spline: PiecewiseCubic,
    order: int = 1,
) -> PiecewiseCubic:
    """
    Compute the derivative of a piecewise cubic as a new piecewise cubic.

    Parameters
    ----------
    spline : PiecewiseCubic
        Input spline
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative : PiecewiseCubic
        Spline on the same breakpoints. The first derivative is quadratic,
        the second linear and the third constant on each segment; unused
        higher coefficients are zero.

    Raises
    ------
    InvalidArgumentError
        If order is not 1, 2, or 3.

    Notes
    -----
    For y = a + b*dx + c*dx^2 + d*dx^3:
    - order 1: [b, 2c, 3d, 0]
    - order 2: [2c, 6d, 0, 0]
    - order 3: [6d, 0, 0, 0]
    """
    if order not in (1, 2, 3):
        raise InvalidArgumentError(
            f"Derivative order must be 1, 2, or 3, got {order}"
        )

    coeffs = spline.coefficients

    b = coeffs[:, 1]
    c = coeffs[:, 2]
    d = coeffs[:, 3]
    zero = torch.zeros_like(d)

    if order == 1:
        new_coeffs = [b, 2 * c, 3 * d, zero]
    elif order == 2:
        new_coeffs = [2 * c, 6 * d, zero, zero]
    else:
        new_coeffs = [6 * d, zero, zero, zero]

    return PiecewiseCubic(
        breakpoints=spline.breakpoints.clone(),
        coefficients=torch.stack(new_coeffs, dim=1),
        batch_size=[],
    )
