"""Row-based component records exchanged with decoders."""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, List, NamedTuple

from torchchroma._exceptions import InvalidInputError


class Component(NamedTuple):
    """A decoded image component in row-based form.

    Parameters
    ----------
    scale_x : float
        Horizontal sampling density relative to luma. Luma itself is ``1.0``;
        horizontally subsampled chroma is ``0.5``.
    scale_y : float
        Vertical sampling density relative to luma.
    lines : list of list of float
        Samples, one list per row (y-major, x-minor). All rows have the same
        length.
    """

    scale_x: float
    scale_y: float
    lines: List[List[float]]


def _field(record: Any, *names: str) -> Any:
    for name in names:
        if isinstance(record, Mapping):
            if name in record:
                return record[name]
        elif hasattr(record, name):
            return getattr(record, name)

    raise InvalidInputError(
        f"as_component: record is missing required field {names[0]!r}"
    )


def _scale(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"as_component: {name} must be a real number, got {type(value).__name__}"
        )

    value = float(value)

    if not math.isfinite(value) or value <= 0.0:
        raise InvalidInputError(
            f"as_component: {name} must be positive and finite, got {value}"
        )

    return value


def as_component(record: Any) -> Component:
    """Normalize and validate a component record.

    Accepts a :class:`Component`, any object exposing ``scale_x``,
    ``scale_y`` and ``lines`` attributes, or a mapping keyed either by
    ``scale_x``/``scale_y`` or by the decoder-style ``scaleX``/``scaleY``.

    Parameters
    ----------
    record : Component, object or Mapping
        The record to normalize.

    Returns
    -------
    Component
        A validated record. Sample values are left untouched (NaN and
        infinity pass through).

    Raises
    ------
    InvalidInputError
        If a field is missing, a scale factor is not a positive finite
        number, ``lines`` is empty, the first row is empty, rows are ragged
        or a sample is not a real number.
    """
    scale_x = _scale(_field(record, "scale_x", "scaleX"), "scale_x")
    scale_y = _scale(_field(record, "scale_y", "scaleY"), "scale_y")
    lines = _field(record, "lines")

    if isinstance(lines, (str, bytes)) or not hasattr(lines, "__len__"):
        raise InvalidInputError(
            f"as_component: lines must be a sequence of rows, got {type(lines).__name__}"
        )

    if len(lines) == 0:
        raise InvalidInputError("as_component: lines must contain at least one row")

    width = len(lines[0])

    if width == 0:
        raise InvalidInputError("as_component: rows must contain at least one sample")

    rows = []

    for y, line in enumerate(lines):
        if len(line) != width:
            raise InvalidInputError(
                f"as_component: row {y} has {len(line)} samples, expected {width}"
            )

        row = []

        for sample in line:
            if isinstance(sample, bool) or not isinstance(sample, Real):
                raise InvalidInputError(
                    f"as_component: row {y} contains a non-numeric sample {sample!r}"
                )

            row.append(float(sample))

        rows.append(row)

    return Component(scale_x=scale_x, scale_y=scale_y, lines=rows)
