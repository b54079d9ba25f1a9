"""Out-of-gamut distortion measure."""

from typing import Union

import torch
from torch import Tensor

from torchchroma.gamut._constants import RGB_MAX, RGB_MIN
from torchchroma.gamut._ycbcr_to_rgb import ycbcr_to_rgb


def gamut_distortion(
    y: Union[Tensor, float],
    cb: Union[Tensor, float],
    cr: Union[Tensor, float],
) -> Tensor:
    r"""Total RGB excursion of a YCbCr sample outside ``[0, 255]``.

    .. math::
        D = \sum_{c \in \{R, G, B\}} \left| c - \mathrm{clamp}(c, 0, 255) \right|

    Only meaningful as a ranking between samples; zero for samples inside
    the gamut.

    Parameters
    ----------
    y, cb, cr : Tensor or float
        Samples on the 0..255 scale. Broadcastable.

    Returns
    -------
    Tensor
        Non-negative distortion with the broadcast shape of the inputs.
    """
    distortion = None

    for channel in ycbcr_to_rgb(y, cb, cr):
        excursion = torch.abs(channel - torch.clamp(channel, RGB_MIN, RGB_MAX))
        distortion = excursion if distortion is None else distortion + excursion

    return distortion
