"""Benchmarks for spline interpolation functions.

This module benchmarks the torchspline engines (natural, quadratic,
parametric, Catmull-Rom) and the tridiagonal solver behind them.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch

from torchspline import (
    TridiagonalSystem,
    catmull_rom_spline,
    natural_spline,
    parametric_cubic_spline,
    quadratic_spline,
    solve_tridiagonal,
)


_UNITS = ((1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms"))


def time_call(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    repeats: int = 10,
    **kwargs: Any,
) -> np.ndarray:
    """Wall-clock seconds of ``repeats`` calls of ``func`` after ``warmup`` calls."""
    for _ in range(warmup):
        func(*args, **kwargs)

    elapsed = np.empty(repeats)
    for i in range(repeats):
        start = time.perf_counter()
        func(*args, **kwargs)
        elapsed[i] = time.perf_counter() - start

    return elapsed


def format_seconds(seconds: float) -> str:
    for limit, scale, unit in _UNITS:
        if seconds < limit:
            return f"{seconds * scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def report(name: str, elapsed: np.ndarray) -> None:
    """Print the median and best time of a run."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  median {format_seconds(float(np.median(elapsed)))}, "
        f"best {format_seconds(float(elapsed.min()))}"
    )


def generate_points(
    num_points: int,
    seed: int | None = None,
) -> torch.Tensor:
    """Random points with strictly increasing x, shape (num_points, 2)."""
    if seed is not None:
        torch.manual_seed(seed)

    x = torch.cumsum(0.1 + torch.rand(num_points, dtype=torch.float64), dim=0)
    y = torch.sin(x) + 0.1 * torch.randn(num_points, dtype=torch.float64)

    return torch.stack([x, y], dim=-1)


def generate_contour(num_points: int) -> torch.Tensor:
    """Closed star-shaped contour with the first point repeated at the end."""
    angles = [2 * math.pi * k / num_points for k in range(num_points)]
    vertices = []
    for a in angles:
        r = 1.0 + 0.3 * math.cos(5 * a)
        vertices.append([r * math.cos(a), r * math.sin(a)])
    return torch.tensor(vertices + vertices[:1], dtype=torch.float64)


class BenchSplines:
    """Benchmarks for spline interpolation functions."""

    def __init__(self, warmup: int = 3, repeats: int = 10):
        self.warmup = warmup
        self.repeats = repeats

    def _bench(self, func: Callable, *args: Any, **kwargs: Any) -> np.ndarray:
        return time_call(
            func, *args, warmup=self.warmup, repeats=self.repeats, **kwargs
        )

    def bench_natural(
        self, num_points: int = 1000, num_queries: int = 10000
    ) -> None:
        """Benchmark natural cubic spline fit and evaluation."""
        points = generate_points(num_points, seed=42)
        query = torch.linspace(
            points[0, 0].item(), points[-1, 0].item(), num_queries,
            dtype=torch.float64,
        )

        elapsed = self._bench(natural_spline, points, query)

        report(
            f"Natural (points={num_points}, queries={num_queries})", elapsed
        )

    def bench_quadratic(
        self, num_points: int = 1000, num_queries: int = 10000
    ) -> None:
        """Benchmark shape-preserving quadratic spline."""
        points = generate_points(num_points, seed=42)
        query = torch.linspace(
            points[0, 0].item(), points[-1, 0].item(), num_queries,
            dtype=torch.float64,
        )

        elapsed = self._bench(quadratic_spline, points, query)

        report(
            f"Quadratic (points={num_points}, queries={num_queries})", elapsed
        )

    def bench_parametric(
        self, num_points: int = 500, sample_count: int = 10000
    ) -> None:
        """Benchmark closed arc-length parametric spline."""
        contour = generate_contour(num_points)

        elapsed = self._bench(
            parametric_cubic_spline, contour, closed=True, sample_count=sample_count
        )

        report(
            f"Parametric (points={num_points}, samples={sample_count})", elapsed
        )

    def bench_catmull_rom(
        self, num_points: int = 1000, num_queries: int = 100000
    ) -> None:
        """Benchmark Catmull-Rom evaluation at (interval, t) pairs."""
        points = generate_points(num_points, seed=42)
        interval = torch.randint(0, num_points - 1, (num_queries,))
        t = torch.rand(num_queries, dtype=torch.float64)

        elapsed = self._bench(catmull_rom_spline, points, interval, t)

        report(
            f"Catmull-Rom (points={num_points}, queries={num_queries})", elapsed
        )

    def bench_tridiagonal(self, n: int = 1000, cyclic: bool = True) -> None:
        """Benchmark the symmetric tridiagonal solver."""
        torch.manual_seed(42)
        off = torch.rand(n, dtype=torch.float64)
        system = TridiagonalSystem(
            lower=torch.roll(off, 1),
            diag=4 * torch.ones(n, dtype=torch.float64),
            upper=off,
            cyclic=cyclic,
            batch_size=[],
        )
        rhs = torch.randn(n, 2, dtype=torch.float64)

        elapsed = self._bench(solve_tridiagonal, system, rhs)

        report(f"Tridiagonal (n={n}, cyclic={cyclic})", elapsed)

    def run_all(self) -> None:
        """Run all spline benchmarks."""
        print("=" * 60)
        print("SPLINE BENCHMARKS")
        print("=" * 60)

        self.bench_natural()
        self.bench_quadratic()
        self.bench_parametric()
        self.bench_catmull_rom()
        self.bench_tridiagonal()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Point Count Scaling (Natural) ---")
        for num_points in [100, 1000, 10000]:
            self.bench_natural(num_points=num_points)

        print("\n--- Query Count Scaling (Quadratic) ---")
        for num_queries in [1000, 10000, 100000]:
            self.bench_quadratic(num_queries=num_queries)


if __name__ == "__main__":
    bench = BenchSplines(warmup=3, repeats=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
