"""Zero-padded sample planes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import torch
from torch import Tensor

from torchchroma._exceptions import InvalidInputError
from torchchroma.plane._component import Component, as_component


@dataclass
class Plane:
    """Rectangular grid of single-precision samples.

    Reads outside ``[0, width) x [0, height)`` return zero and writes outside
    are discarded, so neighbourhood lookups at the image border behave as if
    the plane were surrounded by zeros.

    Parameters
    ----------
    samples : Tensor
        Samples with shape ``(height, width)``. Stored as ``float32``.
    scale_x : float
        Horizontal sampling density relative to luma. Default 1.0.
    scale_y : float
        Vertical sampling density relative to luma. Default 1.0.

    Examples
    --------
    >>> plane = Plane.zeros(2, 1)
    >>> plane.write(1, 0, 3.0)
    >>> plane.read(1, 0), plane.read(5, 0)
    (3.0, 0.0)
    >>> plane.to_component().lines
    [[0.0, 3.0]]
    """

    samples: Tensor
    scale_x: float = 1.0
    scale_y: float = 1.0

    def __post_init__(self):
        if not isinstance(self.samples, Tensor) or self.samples.dim() != 2:
            raise InvalidInputError("Plane: samples must be a 2-D tensor")

        self.samples = self.samples.to(torch.float32)

    @classmethod
    def zeros(
        cls,
        width: int,
        height: int,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> "Plane":
        """All-zero plane of the given size."""
        if width < 0 or height < 0:
            raise InvalidInputError(
                f"Plane.zeros: size must be non-negative, got {width}x{height}"
            )

        return cls(
            torch.zeros(height, width, dtype=torch.float32),
            scale_x=scale_x,
            scale_y=scale_y,
        )

    @classmethod
    def from_component(cls, record: Any) -> "Plane":
        """Build a plane from a row-based component record."""
        component = as_component(record)

        return cls(
            torch.tensor(component.lines, dtype=torch.float32),
            scale_x=component.scale_x,
            scale_y=component.scale_y,
        )

    @property
    def width(self) -> int:
        return self.samples.shape[1]

    @property
    def height(self) -> int:
        return self.samples.shape[0]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def read(self, x: int, y: int) -> float:
        """Sample at ``(x, y)``, or ``0.0`` outside the plane."""
        if self.contains(x, y):
            return self.samples[y, x].item()

        return 0.0

    def write(self, x: int, y: int, value: float) -> None:
        """Store ``value`` at ``(x, y)``; ignored outside the plane."""
        if self.contains(x, y):
            self.samples[y, x] = value

    def take(self, index: Tensor, dim: int = -1) -> Tensor:
        """Gather rows or columns at integer coordinates with zero padding.

        Parameters
        ----------
        index : Tensor
            1-D integer coordinates along ``dim``. Entries may fall outside
            the plane.
        dim : int
            ``-1`` (or ``1``) gathers columns, ``0`` (or ``-2``) gathers rows.

        Returns
        -------
        Tensor
            ``float32`` samples. The size along ``dim`` is ``len(index)``;
            out-of-range coordinates yield zeros.
        """
        size = self.samples.shape[dim]

        if size == 0:
            shape = list(self.samples.shape)
            shape[dim] = index.numel()
            return self.samples.new_zeros(shape)

        valid = (index >= 0) & (index < size)
        gathered = self.samples.index_select(dim, index.clamp(0, size - 1))

        if dim in (0, -2):
            valid = valid.unsqueeze(1)

        return torch.where(valid, gathered, torch.zeros_like(gathered))

    def to_component(self) -> Component:
        """Convert back to a row-based component record."""
        return Component(
            scale_x=self.scale_x,
            scale_y=self.scale_y,
            lines=self.samples.tolist(),
        )
