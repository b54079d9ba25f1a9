"""Sample planes and the row-based component records they convert to."""

from torchchroma.plane._component import Component, as_component
from torchchroma.plane._plane import Plane

__all__ = [
    "Component",
    "Plane",
    "as_component",
]
