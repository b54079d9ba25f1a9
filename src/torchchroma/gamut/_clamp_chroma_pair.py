"""Joint gamut clamp for two chroma samples sharing one source sample."""

from typing import Tuple, Union

import torch
from torch import Tensor

from torchchroma._promote import promote
from torchchroma.gamut._clamp_chroma import clamp_chroma
from torchchroma.gamut._gamut_distortion import gamut_distortion


def _clamp_then_diffuse(
    y_first: Tensor,
    cb_first: Tensor,
    cr_first: Tensor,
    y_second: Tensor,
    cb_total: Tensor,
    cr_total: Tensor,
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    cb_first, cr_first = clamp_chroma(y_first, cb_first, cr_first)

    # The second sample takes whatever keeps the sums unchanged, then gets
    # its own clamp because compressed input need not be consistent.
    cb_second, cr_second = clamp_chroma(
        y_second,
        cb_total - cb_first,
        cr_total - cr_first,
    )

    return cb_first, cr_first, cb_second, cr_second


def clamp_chroma_pair(
    y0: Union[Tensor, float],
    cb0: Union[Tensor, float],
    cr0: Union[Tensor, float],
    y1: Union[Tensor, float],
    cb1: Union[Tensor, float],
    cr1: Union[Tensor, float],
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    r"""Clamp two neighbouring chroma samples while conserving their sums.

    The sample with the larger :func:`gamut_distortion` has the least
    freedom, so it is clamped first with :func:`clamp_chroma`. The other
    sample absorbs the residual,

    .. math::
        C_{other}' = (C_0 + C_1) - C_{first}'

    and is then clamped on its own. The second clamp may break the
    conservation of :math:`C_0 + C_1`.

    Parameters
    ----------
    y0, cb0, cr0 : Tensor or float
        Luma and chroma of the first sample.
    y1, cb1, cr1 : Tensor or float
        Luma and chroma of the second sample.

    Returns
    -------
    tuple of Tensor
        ``(cb0, cr0, cb1, cr1)`` after correction.

    Notes
    -----
    On equal distortion the second sample (index 1) is clamped first.
    """
    y0, cb0, cr0, y1, cb1, cr1 = promote(y0, cb0, cr0, y1, cb1, cr1)

    cb_total = cb0 + cb1
    cr_total = cr0 + cr1

    first0 = gamut_distortion(y0, cb0, cr0) > gamut_distortion(y1, cb1, cr1)

    a_cb0, a_cr0, a_cb1, a_cr1 = _clamp_then_diffuse(
        y0, cb0, cr0, y1, cb_total, cr_total
    )
    b_cb1, b_cr1, b_cb0, b_cr0 = _clamp_then_diffuse(
        y1, cb1, cr1, y0, cb_total, cr_total
    )

    return (
        torch.where(first0, a_cb0, b_cb0),
        torch.where(first0, a_cr0, b_cr0),
        torch.where(first0, a_cb1, b_cb1),
        torch.where(first0, a_cr1, b_cr1),
    )
