r"""Argument validation for the client, its options and its
strategies.

Every helper raises ``InvalidArgumentError`` so that invalid
configuration is rejected when a client is built, never while a request
is in flight.
"""

from __future__ import annotations

__all__ = ["validate_delay", "validate_retries", "validate_transport", "validate_url"]

import math
from datetime import timedelta
from typing import Any

from patientget.exceptions import InvalidArgumentError


def validate_delay(delay: float | timedelta) -> float:
    """Validate a delay and convert it to seconds.

    Args:
        delay: The delay in seconds, or a ``timedelta``.

    Returns:
        The delay in seconds as a float.

    Raises:
        InvalidArgumentError: If the delay is not a number or a
            ``timedelta``, or if it is infinite, NaN or negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from patientget.core.validation import validate_delay
        >>> validate_delay(2)
        2.0
        >>> validate_delay(timedelta(milliseconds=250))
        0.25

        ```
    """
    if isinstance(delay, timedelta):
        delay = delay.total_seconds()
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        msg = f"delay must be a number of seconds or a timedelta, got {delay!r}"
        raise InvalidArgumentError(msg)
    if not math.isfinite(delay):
        msg = f"delay must be a finite number of seconds, got {delay}"
        raise InvalidArgumentError(msg)
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise InvalidArgumentError(msg)
    return float(delay)


def validate_retries(retries: int) -> int:
    """Validate the number of additional attempts.

    Args:
        retries: Number of attempts after the first one. ``0`` means a
            single attempt.

    Returns:
        The validated retry count.

    Raises:
        InvalidArgumentError: If ``retries`` is not an integer or is
            negative.
    """
    if isinstance(retries, bool) or not isinstance(retries, int):
        msg = f"retries must be an integer, got {retries!r}"
        raise InvalidArgumentError(msg)
    if retries < 0:
        msg = f"retries must be >= 0, got {retries}"
        raise InvalidArgumentError(msg)
    return retries


def validate_transport(transport: Any) -> None:
    """Validate a transport supplied by the caller.

    Raises:
        InvalidArgumentError: If the transport is ``None``.
    """
    if transport is None:
        msg = "transport is required, got None"
        raise InvalidArgumentError(msg)


def validate_url(url: Any) -> None:
    """Validate the URL passed to ``Client.get``.

    The URL itself is parsed by httpx, so only its presence is checked.

    Raises:
        InvalidArgumentError: If the URL is ``None``.
    """
    if url is None:
        msg = "url cannot be None"
        raise InvalidArgumentError(msg)
