import hypothesis.strategies
import torch

from ._positive_real_numbers import positive_real_numbers
from ._real_numbers import real_numbers


@hypothesis.strategies.composite
def breakpoints(
    draw: hypothesis.strategies.DrawFn,
    min_size: int = 2,
    max_size: int = 10,
    min_width: float = 1e-1,
    max_width: float = 2.0,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Strategy for strictly increasing breakpoint tensors.

    Built as a start point plus a cumulative sum of positive widths, so
    consecutive breakpoints are at least ``min_width`` apart.
    """
    n = draw(
        hypothesis.strategies.integers(min_value=min_size, max_value=max_size)
    )
    start = draw(real_numbers())
    widths = draw(
        hypothesis.strategies.lists(
            positive_real_numbers(min_width, max_width),
            min_size=n - 1,
            max_size=n - 1,
        )
    )
    steps = torch.tensor([start, *widths], dtype=dtype)
    return torch.cumsum(steps, dim=0)
