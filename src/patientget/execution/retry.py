r"""Retry execution strategy with a delay between attempts.

Only transport failures are retried. A response is returned as soon as
one attempt completes, whatever its status code.
"""

from __future__ import annotations

__all__ = ["RetryExecution"]

import logging
import time
from typing import TYPE_CHECKING

from patientget.backoff import ConstantBackoff
from patientget.callbacks import RetryInfo, log_retry
from patientget.core.config import DEFAULT_DELAY, DEFAULT_RETRIES, TRANSPORT_ERRORS
from patientget.core.validation import validate_retries
from patientget.execution.base import BaseExecutionStrategy

if TYPE_CHECKING:
    from datetime import timedelta

    import httpx

    from patientget.backoff import BaseBackoffStrategy
    from patientget.callbacks import RetryObserver
    from patientget.execution.base import Transport

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecution(BaseExecutionStrategy):
    r"""Send the request up to ``retries + 1`` times.

    Each attempt calls ``transport.send(request)``:

    - if it returns, the response is returned immediately;
    - if it raises a transport error (``httpx.RequestError``) and retries
      remain, ``on_retry`` is notified and the calling thread sleeps for
      the backoff delay before the next attempt;
    - if it raises a transport error and no retries remain, that error is
      re-raised unchanged.

    Every transport error is retried the same way, whether it is a
    timeout, a refused connection or a protocol error. Any other exception
    propagates at once. No delay happens before the first attempt or after
    the last one.

    Args:
        retries: Number of attempts after the first one (default: 0).
            ``0`` behaves like ``SingleExecution``.
        delay: Delay in seconds, or a ``timedelta``, between attempts.
            Ignored when ``backoff_strategy`` is given.
        backoff_strategy: Strategy computing the delay for each retry.
            Defaults to ``ConstantBackoff(delay)``.
        on_retry: Observer notified before each delay. Defaults to
            ``log_retry``, which logs at INFO level.

    Raises:
        InvalidArgumentError: If ``retries`` or ``delay`` is negative.

    Example:
        ```pycon
        >>> import httpx
        >>> from patientget.execution import RetryExecution
        >>> strategy = RetryExecution(retries=2, delay=0.01)
        >>> strategy
        RetryExecution(retries=2, backoff_strategy=ConstantBackoff(delay=0.01))
        >>> transport = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(204)))
        >>> strategy.execute(transport, httpx.Request("GET", "https://example.com")).status_code
        204

        ```
    """

    def __init__(
        self,
        retries: int = DEFAULT_RETRIES,
        delay: float | timedelta = DEFAULT_DELAY,
        *,
        backoff_strategy: BaseBackoffStrategy | None = None,
        on_retry: RetryObserver | None = None,
    ) -> None:
        self._retries = validate_retries(retries)
        self._backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ConstantBackoff(delay)
        )
        self._on_retry: RetryObserver = on_retry if on_retry is not None else log_retry

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retries={self._retries}, "
            f"backoff_strategy={self._backoff_strategy!r})"
        )

    @property
    def retries(self) -> int:
        return self._retries

    @property
    def backoff_strategy(self) -> BaseBackoffStrategy:
        return self._backoff_strategy

    def execute(self, transport: Transport, request: httpx.Request) -> httpx.Response:
        remaining = self._retries
        while True:
            attempt = self._retries - remaining + 1
            try:
                response = transport.send(request)
            except TRANSPORT_ERRORS as exc:
                logger.debug(
                    f"{request.method} request to {request.url} encountered "
                    f"{type(exc).__name__} on attempt {attempt}/{self._retries + 1}: {exc}"
                )
                if remaining == 0:
                    raise
                self._wait(request, attempt=attempt, error=exc)
                remaining -= 1
            else:
                if attempt > 1:
                    logger.debug(
                        f"{request.method} request to {request.url} succeeded on attempt "
                        f"{attempt}/{self._retries + 1}"
                    )
                return response

    def _wait(self, request: httpx.Request, attempt: int, error: Exception) -> None:
        r"""Notify the observer then sleep before the next attempt.

        Args:
            request: The request being retried.
            attempt: The attempt that just failed (1-indexed).
            error: The transport error raised by that attempt.
        """
        wait_time = self._backoff_strategy.calculate(attempt - 1)
        self._on_retry(
            RetryInfo(
                url=str(request.url),
                method=request.method,
                attempt=attempt,
                max_retries=self._retries,
                wait_time=wait_time,
                error=error,
            )
        )
        time.sleep(wait_time)
