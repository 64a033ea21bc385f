"""Benchmarks for the pad operator.

Times torchpad's pad for each boundary mode and compares it against
``torch.nn.functional.pad`` and ``numpy.pad`` where they implement the same
thing.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch
import torch.nn.functional as F

from torchpad.pad import pad

_TORCH_MODES = {"constant": "constant", "edge": "replicate", "reflect": "reflect"}


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Dictionary with timing statistics ('mean', 'std', 'min', 'max') in
        seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    times: dict[str, dict[str, float]],
) -> None:
    """Print benchmark comparison results for multiple implementations."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_name = min(times.keys(), key=lambda k: times[k]["mean"])
    fastest_time = times[fastest_name]["mean"]

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}{suffix}"
        )


class BenchPad:
    """Benchmarks for the pad operator."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_mode(
        self,
        mode: str,
        shape: tuple[int, ...] = (8, 64, 128, 128),
        width: int = 3,
    ) -> None:
        """Pad the two trailing axes of an NCHW batch by ``width``."""
        x = torch.randn(*shape)
        x_np = x.numpy()
        pads = [width, width, width, width]
        pad_width = [(0, 0)] * (len(shape) - 2) + [(width, width)] * 2

        times = {
            "torchpad": self._bench(
                pad, x, pads, mode=mode, axes=[-2, -1]
            ),
            "torch.nn.functional": self._bench(
                F.pad, x, (width, width, width, width), mode=_TORCH_MODES[mode]
            ),
            "numpy": self._bench(np.pad, x_np, pad_width, mode=mode),
        }
        print_comparison(f"{mode} (shape={shape}, width={width})", times)

    def bench_crop(self, shape: tuple[int, ...] = (8, 64, 128, 128)) -> None:
        """Mixed cropping and padding on every axis."""
        x = torch.randn(*shape)
        pads = [0, -1, 2, -3, 0, 1, -2, 3]
        times = {
            mode: self._bench(pad, x, pads, mode=mode)
            for mode in ("constant", "edge", "reflect")
        }
        print_comparison(f"crop and pad (shape={shape})", times)

    def run_all(self) -> None:
        print("=" * 60)
        print("PAD BENCHMARKS")
        print("=" * 60)

        for mode in ("constant", "edge", "reflect"):
            self.bench_mode(mode)

        self.bench_crop()

    def run_scaling(self) -> None:
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Pad Width Scaling (reflect) ---")
        for width in [1, 4, 16, 64]:
            self.bench_mode("reflect", width=width)

        print("\n--- Input Size Scaling (constant) ---")
        for side in [32, 64, 128, 256]:
            self.bench_mode("constant", shape=(8, 16, side, side))


if __name__ == "__main__":
    bench = BenchPad(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
