r"""Execution strategy abstraction and transport protocol."""

from __future__ import annotations

__all__ = ["BaseExecutionStrategy", "Transport"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import httpx


class Transport(Protocol):
    """Anything able to send an ``httpx.Request``.

    ``httpx.Client`` satisfies this protocol, so does any object exposing
    a compatible ``send`` method.

    Only ``httpx.RequestError`` subclasses raised by ``send`` are treated
    as transport failures and retried by ``RetryExecution``. A custom
    transport must raise them (e.g. ``httpx.ConnectError``) for its
    failures to be retried; any other exception, ``OSError`` included,
    propagates on the first attempt.
    """

    def send(self, request: httpx.Request) -> httpx.Response: ...


class BaseExecutionStrategy(ABC):
    """Abstract base class for execution strategies.

    An execution strategy decides how many times, and with which delay, a
    request is sent through a transport. Strategies hold no state that
    changes between calls, so one instance can serve concurrent requests.
    """

    @abstractmethod
    def execute(self, transport: Transport, request: httpx.Request) -> httpx.Response:
        """Send ``request`` through ``transport``.

        Args:
            transport: The transport used for every attempt.
            request: The request to send. Every attempt reuses this object.

        Returns:
            The response of the successful attempt. HTTP error statuses
            are returned, not raised.

        Raises:
            httpx.RequestError: The failure of the last attempt.
        """
