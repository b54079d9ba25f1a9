"""torchchroma: gamut-aware chroma reconstruction for YCbCr planes."""

from . import (
    gamut,
    interpolation,
    plane,
    reconstruction,
)
from ._exceptions import InvalidInputError
from .reconstruction import reconstruct_chroma

__all__ = [
    "InvalidInputError",
    "gamut",
    "interpolation",
    "plane",
    "reconstruct_chroma",
    "reconstruction",
]

__version__ = "0.1.0"
