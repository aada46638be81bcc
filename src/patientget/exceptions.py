r"""Exceptions raised by patientget.

Only argument validation produces a patientget-specific exception.
Transport failures are the ``httpx.RequestError`` subclasses raised by the
underlying transport, and they are re-raised unchanged.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when a client, an option or a request receives an invalid
    argument.

    It is raised synchronously, at construction time for options and at
    call time for ``Client.get``, and it is never retried.

    Example:
        ```pycon
        >>> from patientget.exceptions import InvalidArgumentError
        >>> raise InvalidArgumentError("delay must be >= 0, got -1.0")
        Traceback (most recent call last):
        ...
        patientget.exceptions.InvalidArgumentError: delay must be >= 0, got -1.0

        ```
    """
