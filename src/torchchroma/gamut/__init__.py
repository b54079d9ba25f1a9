"""Gamut math for 8-bit BT.601 YCbCr."""

from torchchroma.gamut._clamp_chroma import (
    chroma_bounds,
    clamp_chroma,
    clamp_chroma_scalar,
)
from torchchroma.gamut._clamp_chroma_pair import clamp_chroma_pair
from torchchroma.gamut._gamut_distortion import gamut_distortion
from torchchroma.gamut._ycbcr_to_rgb import ycbcr_to_rgb

__all__ = [
    "chroma_bounds",
    "clamp_chroma",
    "clamp_chroma_pair",
    "clamp_chroma_scalar",
    "gamut_distortion",
    "ycbcr_to_rgb",
]
