"""Forward 8-bit YCbCr to RGB transform."""

from typing import Tuple, Union

import torch
from torch import Tensor

from torchchroma._promote import promote
from torchchroma.gamut._constants import KB2, KB3, KR2, KR3, SHIFT


def ycbcr_to_rgb(
    y: Union[Tensor, float],
    cb: Union[Tensor, float],
    cr: Union[Tensor, float],
) -> Tuple[Tensor, Tensor, Tensor]:
    r"""Convert 8-bit YCbCr samples to unclamped RGB (ITU-R BT.601).

    Mathematical Definition
    -----------------------
    .. math::
        R &= Y + 1.402 (C_r - 128) \\
        G &= Y - 0.3441363 (C_b - 128) - 0.71413636 (C_r - 128) \\
        B &= Y + 1.772 (C_b - 128)

    Parameters
    ----------
    y, cb, cr : Tensor or float
        Luma and chroma samples on the 0..255 scale. Broadcastable.

    Returns
    -------
    tuple of Tensor
        ``(r, g, b)`` in the broadcast shape of the inputs. Values are not
        clamped and may fall outside ``[0, 255]``.

    Examples
    --------
    >>> ycbcr_to_rgb(100.0, 128.0, 128.0)
    (tensor(100., dtype=torch.float64), tensor(100., dtype=torch.float64), tensor(100., dtype=torch.float64))
    """
    y, cb, cr = promote(y, cb, cr)
    y, cb, cr = torch.broadcast_tensors(y, cb, cr)

    r = y + KR2 * (cr - SHIFT)
    g = y - KB3 * (cb - SHIFT) - KR3 * (cr - SHIFT)
    b = y + KB2 * (cb - SHIFT)

    return r, g, b
