"""Edge-aware 2x chroma supersampling."""

from typing import Tuple, Union

import torch
from torch import Tensor

from torchchroma._promote import promote

Sample = Union[Tensor, float]


def supersample_weights(
    l1: Sample,
    l2: Sample,
    l3: Sample,
    l4: Sample,
    l5: Sample,
    l6: Sample,
) -> Tuple[Tensor, Tensor, Tensor]:
    r"""Blend weights of :func:`adaptive_supersample` from six luma samples.

    With the luma steps :math:`a = |L_1 - L_2| + 1`, ..., :math:`e = |L_5 - L_6| + 1`
    (the ``+ 1`` keeps every denominator positive):

    .. math::
        k_{12} &= \frac{c^2}{(a + c)(b + c)} \\
        k_{32} &= \frac{c^2}{(c + d)(c + e)} \\
        k_{13} &= \frac{a}{a + e}

    Parameters
    ----------
    l1, l2, l3, l4, l5, l6 : Tensor or float
        Consecutive luma samples along one axis. ``l3`` and ``l4`` sit at the
        two output positions covered by the centre chroma sample.

    Returns
    -------
    tuple of Tensor
        ``(k12, k32, k13)``. A flat luma run gives ``(0.25, 0.25, 0.5)``.
    """
    l1, l2, l3, l4, l5, l6 = promote(l1, l2, l3, l4, l5, l6)

    a = torch.abs(l1 - l2) + 1
    b = torch.abs(l2 - l3) + 1
    c = torch.abs(l3 - l4) + 1
    d = torch.abs(l4 - l5) + 1
    e = torch.abs(l5 - l6) + 1

    c2 = c * c

    k12 = c2 / ((a + c) * (b + c))
    k32 = c2 / ((c + d) * (c + e))
    k13 = a / (a + e)

    return k12, k32, k13


def _blend(
    k12: Tensor,
    k32: Tensor,
    k13: Tensor,
    p1: Tensor,
    p2: Tensor,
    p3: Tensor,
) -> Tuple[Tensor, Tensor]:
    # Towards neighbour 1, or away from it for the far side.
    from1_l = (1 - k12) * p2 + k12 * p1
    from1_r = (1 - k12) * p2 + k12 * (p2 + p2 - p1)

    # Same for neighbour 3.
    from3_l = (1 - k32) * p2 + k32 * (p2 + p2 - p3)
    from3_r = (1 - k32) * p2 + k32 * p3

    left = (1 - k13) * from1_l + k13 * from3_l
    right = (1 - k13) * from1_r + k13 * from3_r

    return left, right


def adaptive_supersample(
    l1: Sample,
    l2: Sample,
    l3: Sample,
    l4: Sample,
    l5: Sample,
    l6: Sample,
    b1: Sample,
    b2: Sample,
    b3: Sample,
    r1: Sample,
    r2: Sample,
    r3: Sample,
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    r"""Split one chroma sample into two, guided by the luma.

    The centre chroma sample (``b2``, ``r2``) covers the luma positions
    ``l3`` and ``l4``. Two directional estimates are made for each output
    position: one pulling towards neighbour 1 (and extrapolating away from
    it on the far side), one doing the same with neighbour 3. The strength
    of each pull is :math:`k_{12}` or :math:`k_{32}` from
    :func:`supersample_weights`: large when the luma is smooth around the
    neighbour compared with the step between ``l3`` and ``l4``, small near
    an edge. The two estimates are mixed by :math:`k_{13}`, favouring the
    side with the smoother luma.

    .. math::
        B_l = (1 - k_{13})\left[(1 - k_{12}) B_2 + k_{12} B_1\right]
            + k_{13}\left[(1 - k_{32}) B_2 + k_{32} (2 B_2 - B_3)\right]

    and symmetrically for :math:`B_r`, :math:`R_l`, :math:`R_r`.

    Parameters
    ----------
    l1, l2, l3, l4, l5, l6 : Tensor or float
        Consecutive luma samples along the axis being upsampled.
    b1, b2, b3 : Tensor or float
        Consecutive Cb samples centred on ``b2``.
    r1, r2, r3 : Tensor or float
        Consecutive Cr samples centred on ``r2``.

    Returns
    -------
    tuple of Tensor
        ``(bl, br, rl, rr)``: Cb and Cr at the ``l3`` and ``l4`` positions.

    Examples
    --------
    On flat luma with equal neighbours the centre sample is replicated:

    >>> adaptive_supersample(*[50.0] * 6, 10.0, 20.0, 10.0, 1.0, 2.0, 1.0)
    (tensor(20., dtype=torch.float64), tensor(20., dtype=torch.float64), tensor(2., dtype=torch.float64), tensor(2., dtype=torch.float64))
    """
    k12, k32, k13 = supersample_weights(l1, l2, l3, l4, l5, l6)
    b1, b2, b3, r1, r2, r3 = promote(b1, b2, b3, r1, r2, r3)

    bl, br = _blend(k12, k32, k13, b1, b2, b3)
    rl, rr = _blend(k12, k32, k13, r1, r2, r3)

    return bl, br, rl, rr
