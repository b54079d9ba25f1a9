"""Argument promotion shared by the elementwise operators."""

from functools import reduce
from typing import Tuple, Union

import torch
from torch import Tensor


def promote(*values: Union[Tensor, float]) -> Tuple[Tensor, ...]:
    """Convert arguments to tensors of a common floating dtype.

    The dtype is promoted from the tensor arguments only; Python numbers
    follow it. Without floating tensors the result is ``float64``.
    """
    dtypes = [value.dtype for value in values if isinstance(value, Tensor)]

    dtype = reduce(torch.promote_types, dtypes) if dtypes else torch.float64

    if not dtype.is_floating_point:
        dtype = torch.float64

    return tuple(
        value.to(dtype)
        if isinstance(value, Tensor)
        else torch.tensor(value, dtype=dtype)
        for value in values
    )
