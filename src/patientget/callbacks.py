r"""Retry observer types.

``RetryExecution`` does not log by itself. Each time an attempt fails and
another one follows, it hands a ``RetryInfo`` to its ``on_retry``
observer. The default observer, ``log_retry``, writes an INFO record;
any other callable can be plugged in for metrics or tests.

Example:
    ```pycon
    >>> from patientget import Client, with_retry
    >>> from patientget.callbacks import RetryInfo
    >>> def print_retry(info: RetryInfo) -> None:
    ...     print(f"attempt {info.attempt} failed: {info.error}")
    ...
    >>> client = Client(with_retry(3, 0.5, on_retry=print_retry))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["RetryInfo", "RetryObserver", "log_retry"]

import logging
from collections.abc import Callable
from dataclasses import dataclass

from patientget.utils.structured_logging import log_structured

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryInfo:
    """Information passed to the ``on_retry`` observer.

    Attributes:
        url: The requested URL.
        method: The HTTP method, always ``"GET"`` for requests built by
            ``Client``.
        attempt: The attempt that just failed (1-indexed).
        max_retries: The configured number of retries.
        wait_time: The delay in seconds before the next attempt.
        error: The transport exception raised by the failed attempt.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    error: Exception


RetryObserver = Callable[[RetryInfo], None]


def log_retry(info: RetryInfo) -> None:
    """Default retry observer: log the failure at INFO level.

    Args:
        info: The failed attempt.
    """
    log_structured(
        logger,
        logging.INFO,
        f"failed to execute request: {info.error}. Retrying "
        f"(attempt {info.attempt}/{info.max_retries + 1}, waiting {info.wait_time:.2f}s)",
        url=info.url,
        method=info.method,
        attempt=info.attempt,
        max_retries=info.max_retries,
        wait_time=info.wait_time,
        error_type=type(info.error).__name__,
    )
