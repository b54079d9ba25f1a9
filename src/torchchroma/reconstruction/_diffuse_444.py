"""Gamut correction with error diffusion for full-resolution chroma."""

from typing import Tuple

from torchchroma.gamut import clamp_chroma_scalar
from torchchroma.plane import Plane

# (dx, dy, weight) of the diffusion kernel; every target lies after the
# current pixel in row-major order.
DIFFUSION_KERNEL = (
    (1, 0, 1 / 2),
    (-1, 1, 1 / 4),
    (0, 1, 1 / 4),
)


def _diffuse(plane: Plane, x: int, y: int, error: float) -> None:
    for dx, dy, weight in DIFFUSION_KERNEL:
        plane.write(x + dx, y + dy, plane.read(x + dx, y + dy) + error * weight)


def diffuse_444(luma: Plane, cb: Plane, cr: Plane) -> Tuple[Plane, Plane]:
    r"""Clamp 4:4:4 chroma into the RGB gamut, diffusing the residual.

    Every chroma pair is clamped with
    :func:`~torchchroma.gamut.clamp_chroma_scalar` and the residual
    ``original - clamped`` of each channel is spread over pixels not yet
    visited:

    .. math::
        \begin{array}{ccc}
             & \ast & 1/2 \\
        1/4 & 1/4 &
        \end{array}

    Parameters
    ----------
    luma : Plane
        Full-resolution luma. Read with zero padding where it is smaller
        than the chroma planes.
    cb, cr : Plane
        Full-resolution chroma. **Modified in place**: they accumulate the
        diffused error and must not be shared with other callers.

    Returns
    -------
    tuple of Plane
        Corrected ``(cb, cr)`` with the size of the input chroma and unit
        scale factors.

    Notes
    -----
    Pixels are visited row by row, left to right, top to bottom. Each pixel
    reads values perturbed by its predecessors, so the order is part of the
    result and the loop cannot be reordered or parallelised.
    """
    width = cb.width
    height = cb.height

    cb_out = Plane.zeros(width, height)
    cr_out = Plane.zeros(width, height)

    for y in range(height):
        for x in range(width):
            luma_value = luma.read(x, y)
            cb_value = cb.read(x, y)
            cr_value = cr.read(x, y)

            clamped_cb, clamped_cr = clamp_chroma_scalar(luma_value, cb_value, cr_value)

            cb_out.write(x, y, clamped_cb)
            cr_out.write(x, y, clamped_cr)

            _diffuse(cb, x, y, cb_value - clamped_cb)
            _diffuse(cr, x, y, cr_value - clamped_cr)

    return cb_out, cr_out
