"""Benchmark piecewise cubic queries.

Compares point evaluation (O(log n) interval search) with the definite
integral (O(n) prefix accumulation) across different segment counts.
"""

import time

import torch

from torchinterp.spline import (
    piecewise_cubic,
    piecewise_cubic_derivatives,
    piecewise_cubic_evaluate,
    piecewise_cubic_integral,
)


def benchmark_query(
    n_segments: int,
    n_queries: int = 1024,
    n_iterations: int = 100,
    device: str = "cpu",
    method: str = "evaluate",
) -> float:
    """Benchmark one query operation at given segment count.

    Parameters
    ----------
    n_segments : int
        Number of spline segments.
    n_queries : int
        Number of query points per call.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'evaluate', 'derivatives', or 'integral'.

    Returns
    -------
    float
        Average time per call in milliseconds.
    """
    knots = torch.linspace(
        0, 1, n_segments + 1, device=device, dtype=torch.float64
    )
    coeffs = torch.randn(n_segments, 4, device=device, dtype=torch.float64)
    spline = piecewise_cubic(knots, coeffs)
    t = torch.rand(n_queries, device=device, dtype=torch.float64)

    if method == "evaluate":
        query_fn = piecewise_cubic_evaluate
    elif method == "derivatives":
        query_fn = piecewise_cubic_derivatives
    elif method == "integral":
        query_fn = piecewise_cubic_integral
    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        _ = query_fn(spline, t)

    # Synchronize before timing (important for CUDA)
    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = query_fn(spline, t)

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run query benchmarks across segment counts."""
    segment_counts = [8, 64, 512, 4096, 32768, 262144]

    print("Piecewise Cubic Query Benchmark")
    print("=" * 70)
    print(
        f"{'Segments':>10} {'Evaluate (ms)':>16} {'Derivs (ms)':>14} "
        f"{'Integral (ms)':>16}"
    )
    print("-" * 70)

    for n_segments in segment_counts:
        timings = []
        for method in ("evaluate", "derivatives", "integral"):
            try:
                timings.append(benchmark_query(n_segments, method=method))
            except RuntimeError as e:
                timings.append(float("nan"))
                print(f"{method} failed for {n_segments} segments: {e}")

        ms_evaluate, ms_derivatives, ms_integral = timings
        print(
            f"{n_segments:>10} {ms_evaluate:>16.4f} {ms_derivatives:>14.4f} "
            f"{ms_integral:>16.4f}"
        )

    print()
    print("Notes:")
    print("- Evaluate and derivatives search interior breakpoints, O(log n)")
    print("- Integral rebuilds the prefix over all segments, O(n)")


if __name__ == "__main__":
    main()
