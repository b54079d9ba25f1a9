"""Testing helpers for torchchroma."""

from torchchroma.testing import strategies

__all__ = [
    "strategies",
]
