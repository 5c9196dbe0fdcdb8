from dataclasses import dataclass


@dataclass(frozen=True)
class InterpolationCapabilities:
    """Static description of what an interpolation method can compute.

    Attributes
    ----------
    differentiation : bool
        Whether first and second derivatives are available.
    integration : bool
        Whether the definite integral from the first breakpoint is available.
    """

    differentiation: bool
    integration: bool
