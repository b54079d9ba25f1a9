"""Luma-guided chroma interpolation."""

from torchchroma.interpolation._adaptive_supersample import (
    adaptive_supersample,
    supersample_weights,
)

__all__ = [
    "adaptive_supersample",
    "supersample_weights",
]
