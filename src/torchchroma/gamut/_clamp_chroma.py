"""Gamut clamp for a single luma-paired chroma sample."""

from typing import Tuple, Union

import torch
from torch import Tensor

from torchchroma._promote import promote
from torchchroma.gamut._constants import (
    KB2,
    KB3,
    KR2,
    KR3,
    RGB_MAX,
    RGB_MIN,
    SHIFT,
)


def _clamp(lower: Tensor, value: Tensor, upper: Tensor) -> Tensor:
    # Lower bound wins when the bounds cross.
    return torch.where(
        value < lower,
        lower,
        torch.where(value > upper, upper, value),
    )


def chroma_bounds(
    y: Union[Tensor, float],
) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
    r"""Per-luma chroma box implied by the blue and red range constraints.

    Mathematical Definition
    -----------------------
    Solving :math:`0 \le Y + 1.772 (C_b - 128) \le 255` and the analogous
    red constraint for the chroma sample gives

    .. math::
        \max(0, 128 - Y / 1.772) \le\ &C_b \le 128 + (255 - Y) / 1.772 \\
        \max(0, 128 - Y / 1.402) \le\ &C_r \le \min(255, 128 + (255 - Y) / 1.402)

    The upper Cb bound is deliberately left uncapped.

    Parameters
    ----------
    y : Tensor or float
        Luma samples on the 0..255 scale.

    Returns
    -------
    tuple of Tensor
        ``(min_cb, max_cb, min_cr, max_cr)``, each shaped like ``y``.
    """
    (y,) = promote(y)

    min_cb = torch.clamp(SHIFT - y / KB2, min=RGB_MIN)
    max_cb = SHIFT + (RGB_MAX - y) / KB2

    min_cr = torch.clamp(SHIFT - y / KR2, min=RGB_MIN)
    max_cr = torch.clamp(SHIFT + (RGB_MAX - y) / KR2, max=RGB_MAX)

    return min_cb, max_cb, min_cr, max_cr


def clamp_chroma(
    y: Union[Tensor, float],
    cb: Union[Tensor, float],
    cr: Union[Tensor, float],
) -> Tuple[Tensor, Tensor]:
    r"""Move a chroma pair into the RGB gamut for the given luma.

    The pair is first clamped into the box given by :func:`chroma_bounds`,
    which settles the blue and red channels. The green channel then bounds
    the weighted sum

    .. math::
        Y + (k_{b3} + k_{r3}) \cdot 128 - 255
        \le k_{b3} C_b + k_{r3} C_r \le
        Y + (k_{b3} + k_{r3}) \cdot 128

    When the sum is too large both samples slide towards their box minima,
    when it is too small towards their box maxima. Each sample moves in
    proportion to the room it has left in that direction, by the single
    factor :math:`x` that puts the sum exactly on the violated bound:

    .. math::
        C' = C_{base} + C_{free} \cdot x

    Parameters
    ----------
    y : Tensor or float
        Luma samples on the 0..255 scale.
    cb : Tensor or float
        Blue-difference chroma samples (zero chroma at 128).
    cr : Tensor or float
        Red-difference chroma samples (zero chroma at 128).

    Returns
    -------
    tuple of Tensor
        ``(cb, cr)`` after correction. Samples that already map into
        ``[0, 255]`` RGB are returned unchanged.

    Examples
    --------
    >>> cb, cr = clamp_chroma(100.0, 200.0, 200.0)
    >>> r, g, b = ycbcr_to_rgb(100.0, cb, cr)

    Notes
    -----
    - :math:`x` is clamped to ``[0, 1]`` so the result never leaves the box,
      even where the green bound cannot be met inside it.
    - If the remaining room is zero in both samples no further correction is
      possible and the box-clamped pair is returned.
    - NaN samples propagate.

    See Also
    --------
    chroma_bounds : The box used for the first step.
    clamp_chroma_pair : Joint clamp of two neighbouring samples.
    """
    y, cb, cr = promote(y, cb, cr)
    y, cb, cr = torch.broadcast_tensors(y, cb, cr)

    min_cb, max_cb, min_cr, max_cr = chroma_bounds(y)

    cb = _clamp(min_cb, cb, max_cb)
    cr = _clamp(min_cr, cr, max_cr)

    total = KB3 * cb + KR3 * cr
    upper = y + (KB3 + KR3) * SHIFT - RGB_MIN
    lower = y + (KB3 + KR3) * SHIFT - RGB_MAX

    high = total > upper
    low = ~high & (total < lower)

    base_cb = torch.where(high, min_cb, cb)
    base_cr = torch.where(high, min_cr, cr)
    free_cb = torch.where(high, cb - min_cb, max_cb - cb)
    free_cr = torch.where(high, cr - min_cr, max_cr - cr)
    bound = torch.where(high, upper, lower)

    denominator = KB3 * free_cb + KR3 * free_cr
    degenerate = denominator == 0

    x = (bound - KB3 * base_cb - KR3 * base_cr) / torch.where(
        degenerate, torch.ones_like(denominator), denominator
    )
    x = torch.clamp(x, 0.0, 1.0)

    correct = (high | low) & ~degenerate

    cb = torch.where(correct, base_cb + free_cb * x, cb)
    cr = torch.where(correct, base_cr + free_cr * x, cr)

    return cb, cr


def clamp_chroma_scalar(y: float, cb: float, cr: float) -> Tuple[float, float]:
    """:func:`clamp_chroma` for one sample, on Python floats.

    Performs the same float64 operations in the same order as
    ``clamp_chroma(y, cb, cr)``. Used by loops that visit one pixel
    at a time, where per-call tensor overhead dominates.
    """
    min_cb = max(SHIFT - y / KB2, RGB_MIN)
    max_cb = SHIFT + (RGB_MAX - y) / KB2

    min_cr = max(SHIFT - y / KR2, RGB_MIN)
    max_cr = min(SHIFT + (RGB_MAX - y) / KR2, RGB_MAX)

    if cb < min_cb:
        cb = min_cb
    elif cb > max_cb:
        cb = max_cb

    if cr < min_cr:
        cr = min_cr
    elif cr > max_cr:
        cr = max_cr

    total = KB3 * cb + KR3 * cr
    upper = y + (KB3 + KR3) * SHIFT - RGB_MIN
    lower = y + (KB3 + KR3) * SHIFT - RGB_MAX

    if total > upper:
        base_cb, base_cr = min_cb, min_cr
        free_cb, free_cr = cb - min_cb, cr - min_cr
        bound = upper
    elif total < lower:
        base_cb, base_cr = cb, cr
        free_cb, free_cr = max_cb - cb, max_cr - cr
        bound = lower
    else:
        return cb, cr

    denominator = KB3 * free_cb + KR3 * free_cr

    if denominator == 0:
        return cb, cr

    x = (bound - KB3 * base_cb - KR3 * base_cr) / denominator
    x = min(max(x, 0.0), 1.0)

    return base_cb + free_cb * x, base_cr + free_cr * x
