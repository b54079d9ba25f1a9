"""Luma-guided chroma upsampling for 4:2:2 and 4:2:0."""

from typing import Tuple

import torch
from torch import Tensor

from torchchroma.gamut import clamp_chroma_pair
from torchchroma.interpolation import adaptive_supersample
from torchchroma.plane import Plane


def _interleave(left: Tensor, right: Tensor, width: int, height: int) -> Tensor:
    rows, columns = left.shape
    merged = torch.stack((left, right), dim=-1).reshape(rows, 2 * columns)

    output = torch.zeros(height, width, dtype=torch.float32)

    rows = min(rows, height)
    columns = min(2 * columns, width)

    output[:rows, :columns] = merged[:rows, :columns]

    return output


def upsample_horizontal(
    luma: Plane,
    cb: Plane,
    cr: Plane,
    width: int,
    height: int,
) -> Tuple[Tensor, Tensor]:
    r"""Double the chroma resolution along the last axis.

    Chroma column ``x`` of row ``y`` covers luma columns ``2x`` and
    ``2x + 1``. It is split with
    :func:`~torchchroma.interpolation.adaptive_supersample`, fed luma
    columns ``2x - 2`` through ``2x + 3`` and chroma columns ``x - 1``
    through ``x + 1`` of the same row, and the two halves are corrected with
    :func:`~torchchroma.gamut.clamp_chroma_pair` against the luma at
    ``2x`` and ``2x + 1``.

    Parameters
    ----------
    luma : Plane
        Luma, read with zero padding.
    cb, cr : Plane
        Chroma with half the horizontal luma resolution.
    width, height : int
        Output size. Output samples not covered by a chroma sample stay zero
        and samples falling outside are dropped.

    Returns
    -------
    tuple of Tensor
        ``float32`` Cb and Cr of shape ``(height, width)``.

    Notes
    -----
    Every output pixel depends only on the inputs, so the whole pass is
    evaluated at once.
    """
    rows = torch.arange(cb.height)
    columns = torch.arange(cb.width)

    luma = Plane(luma.take(rows, dim=0))
    cr = Plane(cr.take(rows, dim=0))

    l1, l2, l3, l4, l5, l6 = (
        luma.take(2 * columns + offset).double() for offset in range(-2, 4)
    )
    b1, b2, b3 = (cb.take(columns + offset).double() for offset in (-1, 0, 1))
    r1, r2, r3 = (cr.take(columns + offset).double() for offset in (-1, 0, 1))

    bl, br, rl, rr = adaptive_supersample(
        l1, l2, l3, l4, l5, l6, b1, b2, b3, r1, r2, r3
    )
    bl, rl, br, rr = clamp_chroma_pair(l3, bl, rl, l4, br, rr)

    return (
        _interleave(bl, br, width, height),
        _interleave(rl, rr, width, height),
    )


def upsample_422(luma: Plane, cb: Plane, cr: Plane) -> Tuple[Plane, Plane]:
    """Upsample 4:2:2 chroma to luma resolution.

    Returns
    -------
    tuple of Plane
        Cb and Cr with the size of ``luma`` and unit scale factors.
    """
    cb_out, cr_out = upsample_horizontal(luma, cb, cr, luma.width, luma.height)

    return Plane(cb_out), Plane(cr_out)


def upsample_420(luma: Plane, cb: Plane, cr: Plane) -> Tuple[Plane, Plane]:
    """Upsample 4:2:0 chroma to luma resolution.

    Stage one averages horizontal luma pairs down to the chroma width and
    upsamples the chroma vertically against that luma. Stage two upsamples
    the result horizontally against the full luma. Both stages go through
    :func:`upsample_horizontal`; the vertical pass runs on transposed planes.

    Returns
    -------
    tuple of Plane
        Cb and Cr with the size of ``luma`` and unit scale factors.
    """
    columns = torch.arange(cb.width)

    left = luma.take(2 * columns).double()
    right = luma.take(2 * columns + 1).double()

    half_luma = Plane(((left + right) / 2).t().contiguous())

    cb_half, cr_half = upsample_horizontal(
        half_luma,
        Plane(cb.samples.t().contiguous()),
        Plane(cr.samples.t().contiguous()),
        width=luma.height,
        height=cb.width,
    )

    cb_half = Plane(cb_half.t().contiguous(), scale_x=0.5)
    cr_half = Plane(cr_half.t().contiguous(), scale_x=0.5)

    return upsample_422(luma, cb_half, cr_half)
