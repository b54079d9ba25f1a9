"""Exceptions raised by torchchroma."""


class InvalidInputError(ValueError):
    """Malformed plane or component record passed to torchchroma."""

    pass
