"""Benchmarks for chroma reconstruction."""

from .bench_reconstruct_chroma import BenchReconstructChroma

__all__ = [
    "BenchReconstructChroma",
]
