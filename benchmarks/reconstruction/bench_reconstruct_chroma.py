"""Benchmarks for the chroma reconstruction pipelines.

Times each layout on random planes and reports the cost per output pixel.
The 4:4:4 path visits pixels one at a time and is benchmarked on much
smaller planes than the upsampling paths.
"""

from __future__ import annotations

import time
from typing import Callable, Tuple

import numpy as np
import torch

from torchchroma.plane import Plane
from torchchroma.reconstruction import diffuse_444, upsample_420, upsample_422

Planes = Tuple[Plane, Plane, Plane]


def random_planes(
    width: int,
    height: int,
    scale_x: float,
    scale_y: float,
) -> Planes:
    """Random luma and chroma planes for a ``width x height`` frame."""
    chroma_width = max(1, int(width * scale_x))
    chroma_height = max(1, int(height * scale_y))

    luma = torch.rand(height, width) * 255
    cb = torch.rand(chroma_height, chroma_width) * 384 - 64
    cr = torch.rand(chroma_height, chroma_width) * 384 - 64

    return Plane(luma), Plane(cb, scale_x, scale_y), Plane(cr, scale_x, scale_y)


def time_pipeline(
    pipeline: Callable[[Plane, Plane, Plane], Tuple[Plane, Plane]],
    planes: Planes,
    repeats: int = 5,
) -> dict[str, float]:
    """Time ``pipeline`` on fresh copies of ``planes``.

    Every run gets its own copies since :func:`diffuse_444` accumulates
    the diffused error in its chroma inputs.

    Returns
    -------
    dict
        ``median`` and ``best`` wall time in seconds, and ``per_pixel``
        (median divided by the output pixel count).
    """
    elapsed = []

    for _ in range(repeats + 1):
        copies = tuple(
            Plane(plane.samples.clone(), plane.scale_x, plane.scale_y)
            for plane in planes
        )

        start = time.perf_counter()
        cb_out, _ = pipeline(*copies)
        elapsed.append(time.perf_counter() - start)

    # The first run warms up the allocator.
    elapsed = np.asarray(elapsed[1:])
    median = float(np.median(elapsed))

    return {
        "median": median,
        "best": float(elapsed.min()),
        "per_pixel": median / (cb_out.width * cb_out.height),
    }


class BenchReconstructChroma:
    """Benchmark suite for the three layouts."""

    sizes_444 = [(8, 8), (16, 16), (32, 32)]
    sizes_subsampled = [(64, 64), (256, 256), (1024, 1024)]

    def bench_diffuse_444(self) -> dict[str, dict[str, float]]:
        return {
            f"{width}x{height}": time_pipeline(
                diffuse_444, random_planes(width, height, 1.0, 1.0)
            )
            for width, height in self.sizes_444
        }

    def bench_upsample_422(self) -> dict[str, dict[str, float]]:
        return {
            f"{width}x{height}": time_pipeline(
                upsample_422, random_planes(width, height, 0.5, 1.0)
            )
            for width, height in self.sizes_subsampled
        }

    def bench_upsample_420(self) -> dict[str, dict[str, float]]:
        return {
            f"{width}x{height}": time_pipeline(
                upsample_420, random_planes(width, height, 0.5, 0.5)
            )
            for width, height in self.sizes_subsampled
        }

    def run_all(self) -> dict[str, dict[str, dict[str, float]]]:
        return {
            "diffuse_444": self.bench_diffuse_444(),
            "upsample_422": self.bench_upsample_422(),
            "upsample_420": self.bench_upsample_420(),
        }


if __name__ == "__main__":
    torch.manual_seed(0)
    for name, results in BenchReconstructChroma().run_all().items():
        print(name)
        for size, stats in results.items():
            print(
                f"  {size:>10}: {stats['median'] * 1e3:9.3f} ms"
                f"  {stats['per_pixel'] * 1e9:9.1f} ns/pixel"
            )
