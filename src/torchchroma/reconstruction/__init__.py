"""Chroma reconstruction pipelines for 4:4:4, 4:2:2 and 4:2:0 layouts."""

from torchchroma.reconstruction._diffuse_444 import diffuse_444
from torchchroma.reconstruction._reconstruct_chroma import reconstruct_chroma
from torchchroma.reconstruction._subsampling import ChromaSubsampling
from torchchroma.reconstruction._upsample import (
    upsample_420,
    upsample_422,
    upsample_horizontal,
)

__all__ = [
    "ChromaSubsampling",
    "diffuse_444",
    "reconstruct_chroma",
    "upsample_420",
    "upsample_422",
    "upsample_horizontal",
]
