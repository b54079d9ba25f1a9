"""Hypothesis strategies for chroma reconstruction testing."""

from ._components import components
from ._legal_ycbcr import legal_ycbcr
from ._sample_values import chroma_values, luma_values

__all__ = [
    "chroma_values",
    "components",
    "legal_ycbcr",
    "luma_values",
]
