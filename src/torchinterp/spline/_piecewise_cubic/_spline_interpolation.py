"""Third-degree spline interpolation over precomputed coefficients."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from .._capabilities import InterpolationCapabilities
from .._not_initialized_error import NotInitializedError
from ._piecewise_cubic import PiecewiseCubic, piecewise_cubic
from ._piecewise_cubic_derivatives import piecewise_cubic_derivatives
from ._piecewise_cubic_evaluate import piecewise_cubic_evaluate
from ._piecewise_cubic_integral import piecewise_cubic_integral


class SplineInterpolation:
    """Third-degree spline interpolation.

    Evaluates, differentiates and integrates a piecewise cubic whose
    coefficients were computed elsewhere (natural, clamped, Akima, Hermite
    or any other fit producing local (a, b, c, d) tuples).

    Query contract: breakpoint ordering is never validated, and points
    outside [breakpoints[0], breakpoints[-1]] are silently extrapolated with
    the first or last interval's polynomial.

    The stored spline is replaced in a single assignment by
    :meth:`initialize`, and is never mutated afterwards, so queries from
    several threads need no locking once initialization has returned.

    Examples
    --------
    >>> interpolation = SplineInterpolation()
    >>> interpolation.initialize([0.0, 1.0, 2.0], [1, 0, 0, 0, 2, 0, 0, 0])
    >>> interpolation.interpolate(1.5)
    tensor(2.)
    >>> interpolation.integrate(2.0)
    tensor(3.)
    """

    capabilities = InterpolationCapabilities(
        differentiation=True,
        integration=True,
    )

    def __init__(self):
        self._spline: Optional[PiecewiseCubic] = None

    @property
    def supports_differentiation(self) -> bool:
        return self.capabilities.differentiation

    @property
    def supports_integration(self) -> bool:
        return self.capabilities.integration

    @property
    def is_initialized(self) -> bool:
        return self._spline is not None

    @property
    def spline(self) -> PiecewiseCubic:
        """The spline being queried.

        Raises
        ------
        NotInitializedError
            If :meth:`initialize` has not completed successfully yet.
        """
        if self._spline is None:
            raise NotInitializedError(
                "SplineInterpolation must be initialized before it is queried"
            )
        return self._spline

    def initialize(
        self,
        breakpoints,
        coefficients,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> None:
        """Initialize with breakpoints and spline coefficients.

        Parameters
        ----------
        breakpoints : array_like
            Points t, shape (N,), N >= 2.
        coefficients : array_like
            Spline coefficients, 4*(N-1) values or shape
            (N-1, 4, *value_shape).
        dtype : torch.dtype, optional
            Floating dtype of the stored spline.
        device : torch.device, optional
            Device of the stored spline.

        Raises
        ------
        InvalidArgumentError
            If the inputs cannot define a spline. Any previously initialized
            state is kept.
        """
        self._spline = piecewise_cubic(
            breakpoints,
            coefficients,
            dtype=dtype,
            device=device,
        )

    def interpolate(self, t: Union[float, Tensor]) -> Tensor:
        """Interpolate at t."""
        return piecewise_cubic_evaluate(self.spline, t)

    def differentiate(
        self,
        t: Union[float, Tensor],
    ) -> Tuple[Tensor, Tensor, Tensor]:
        """Interpolated value, first and second derivative at t."""
        return piecewise_cubic_derivatives(self.spline, t)

    def integrate(self, t: Union[float, Tensor]) -> Tensor:
        """Definite integral over [breakpoints[0], t]."""
        return piecewise_cubic_integral(self.spline, t)

    def __call__(self, t: Union[float, Tensor]) -> Tensor:
        return self.interpolate(t)


def spline_interpolation(
    breakpoints,
    coefficients,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> SplineInterpolation:
    """Create an initialized spline interpolation.

    This is a convenience function equivalent to constructing a
    :class:`SplineInterpolation` and calling
    :meth:`SplineInterpolation.initialize`.

    Parameters
    ----------
    breakpoints : array_like
        Points t, shape (N,). Must be strictly increasing (not checked).
    coefficients : array_like
        Spline coefficients, 4*(N-1) values or shape (N-1, 4, *value_shape).
    dtype : torch.dtype, optional
        Floating dtype of the stored spline.
    device : torch.device, optional
        Device of the stored spline.

    Returns
    -------
    SplineInterpolation
        Interpolation ready to be queried.

    Examples
    --------
    >>> f = spline_interpolation([0.0, 1.0], [0.0, 1.0, 0.0, 0.0])
    >>> f(torch.tensor([0.25, 0.5]))
    tensor([0.2500, 0.5000])
    """
    interpolation = SplineInterpolation()
    interpolation.initialize(
        breakpoints,
        coefficients,
        dtype=dtype,
        device=device,
    )
    return interpolation
