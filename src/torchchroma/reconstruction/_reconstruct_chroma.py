"""Chroma reconstruction entry point."""

import logging
from typing import Any, Tuple

from torchchroma.plane import Component, Plane, as_component
from torchchroma.reconstruction._diffuse_444 import diffuse_444
from torchchroma.reconstruction._subsampling import ChromaSubsampling
from torchchroma.reconstruction._upsample import upsample_420, upsample_422

logger = logging.getLogger(__name__)

_PIPELINES = {
    ChromaSubsampling.YUV444: diffuse_444,
    ChromaSubsampling.YUV422: upsample_422,
    ChromaSubsampling.YUV420: upsample_420,
}


def reconstruct_chroma(luma: Any, cb: Any, cr: Any) -> Tuple[Any, Any]:
    """Rebuild gamut-correct chroma at luma resolution.

    Parameters
    ----------
    luma : Component or Mapping
        Decoded luma record (``scale_x == scale_y == 1``).
    cb, cr : Component or Mapping
        Decoded chroma records. Records may use ``scale_x``/``scale_y`` or
        the decoder-style ``scaleX``/``scaleY`` keys; see
        :func:`~torchchroma.plane.as_component`.

    Returns
    -------
    tuple
        Corrected ``(cb, cr)`` as :class:`~torchchroma.plane.Component`
        records with unit scale factors: the chroma size for 4:4:4, the luma
        size for 4:2:2 and 4:2:0. For any other layout the two chroma records
        are returned with their scale factors and samples as given.

    Raises
    ------
    InvalidInputError
        If a record is malformed (missing fields, empty or ragged rows,
        non-positive scale factors).

    Examples
    --------
    >>> luma = Component(1.0, 1.0, [[100.0, 100.0]])
    >>> chroma = Component(0.5, 1.0, [[128.0]])
    >>> cb, cr = reconstruct_chroma(luma, chroma, chroma)
    >>> len(cb.lines[0])
    2
    """
    luma_component = as_component(luma)
    cb_component = as_component(cb)
    cr_component = as_component(cr)

    layout = ChromaSubsampling.detect(luma_component, cb_component, cr_component)

    if layout is None:
        logger.warning(
            "not supported: luma %sx%s, cb %sx%s, cr %sx%s",
            luma_component.scale_x,
            luma_component.scale_y,
            cb_component.scale_x,
            cb_component.scale_y,
            cr_component.scale_x,
            cr_component.scale_y,
        )

        return cb_component, cr_component

    logger.info(layout.tag)

    cb_out, cr_out = _PIPELINES[layout](
        Plane.from_component(luma_component),
        Plane.from_component(cb_component),
        Plane.from_component(cr_component),
    )

    return cb_out.to_component(), cr_out.to_component()
