r"""Construction options for ``Client``.

An option is a callable applied to the ``Client`` being built. Options
run in the order they are given, and the first one that raises aborts
construction.
"""

from __future__ import annotations

__all__ = ["Option", "with_client", "with_retry"]

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from patientget.core.validation import validate_delay, validate_retries, validate_transport
from patientget.execution import RetryExecution

if TYPE_CHECKING:
    from datetime import timedelta

    from patientget.callbacks import RetryObserver
    from patientget.client import Client
    from patientget.execution import Transport

logger: logging.Logger = logging.getLogger(__name__)

Option = Callable[["Client"], None]


def with_retry(
    retries: int,
    delay: float | timedelta,
    *,
    on_retry: RetryObserver | None = None,
) -> Option:
    r"""Install a ``RetryExecution`` strategy on the client.

    Args:
        retries: Number of attempts after the first one. Must be >= 0.
        delay: Fixed delay in seconds, or a ``timedelta``, between
            attempts. Must be >= 0.
        on_retry: Optional observer notified of every failed attempt
            that is followed by another one. Failures are logged at INFO
            level when it is not given.

    Returns:
        The option to pass to ``Client``.

    Raises:
        InvalidArgumentError: When the option is applied, if ``retries``
            or ``delay`` is negative.

    Example:
        ```pycon
        >>> from patientget import Client, with_retry
        >>> with Client(with_retry(3, 0.5)) as client:
        ...     client.strategy
        ...
        RetryExecution(retries=3, backoff_strategy=ConstantBackoff(delay=0.5))

        ```
    """

    def option(client: Client) -> None:
        strategy = RetryExecution(
            retries=validate_retries(retries),
            delay=validate_delay(delay),
            on_retry=on_retry,
        )
        logger.debug(f"Using {strategy!r}")
        client._use_strategy(strategy)

    return option


def with_client(transport: Transport) -> Option:
    r"""Replace the client's transport.

    The transport stays owned by the caller: closing the ``Client`` does
    not close it.

    Args:
        transport: Any object with an httpx-compatible ``send`` method,
            typically an ``httpx.Client``.

    Returns:
        The option to pass to ``Client``.

    Raises:
        InvalidArgumentError: When the option is applied, if
            ``transport`` is ``None``.

    Example:
        ```pycon
        >>> import httpx
        >>> from patientget import Client, with_client
        >>> with httpx.Client() as http_client:
        ...     client = Client(with_client(http_client))
        ...     client.transport is http_client
        ...
        True

        ```
    """

    def option(client: Client) -> None:
        validate_transport(transport)
        client._use_transport(transport)

    return option
