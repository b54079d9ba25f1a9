"""Chroma subsampling layouts."""

from __future__ import annotations

import enum
from typing import Optional, Tuple


class ChromaSubsampling(enum.Enum):
    """Supported chroma layouts.

    Each member carries its conventional tag and the ``(scale_x, scale_y)``
    of both chroma planes relative to a full-resolution luma plane.
    """

    YUV444 = ("4:4:4", (1.0, 1.0))
    YUV422 = ("4:2:2", (0.5, 1.0))
    YUV420 = ("4:2:0", (0.5, 0.5))

    def __init__(self, tag: str, chroma_scale: Tuple[float, float]):
        self.tag = tag
        self.chroma_scale = chroma_scale

    @classmethod
    def detect(cls, luma, cb, cr) -> Optional["ChromaSubsampling"]:
        """Layout of three planes or component records, or ``None``.

        Scale factors must match exactly; luma must be at full resolution
        and both chroma planes must share the layout's scale.
        """
        if (luma.scale_x, luma.scale_y) != (1.0, 1.0):
            return None

        for layout in cls:
            if (cb.scale_x, cb.scale_y) == layout.chroma_scale and (
                cr.scale_x,
                cr.scale_y,
            ) == layout.chroma_scale:
                return layout

        return None
