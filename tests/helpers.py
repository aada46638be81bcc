r"""Shared test helpers for transports and transport failures."""

from __future__ import annotations

__all__ = [
    "TEST_URL",
    "create_mock_http_client",
    "create_mock_transport_with_side_effect",
    "create_transport_errors",
]

from typing import TYPE_CHECKING
from unittest.mock import Mock

import httpx

from patientget.execution import Transport

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_URL = "https://api.example.com/data"


def create_mock_transport_with_side_effect(
    side_effect: list[httpx.Response | Exception],
) -> Mock:
    """Create a mock transport whose ``send`` returns or raises the
    given items in order.

    Example:
        >>> transport = create_mock_transport_with_side_effect(
        ...     [httpx.ConnectError("refused"), Mock(spec=httpx.Response, status_code=200)]
        ... )
        >>> # First send raises ConnectError, second returns the response
    """
    return Mock(spec=Transport, send=Mock(side_effect=side_effect))


def create_transport_errors(count: int) -> list[httpx.RequestError]:
    """Create ``count`` distinct transport errors.

    Distinct messages make it possible to check which one was re-raised.
    """
    return [httpx.ConnectError(f"connection refused #{i + 1}") for i in range(count)]


def create_mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    """Create a real ``httpx.Client`` backed by ``httpx.MockTransport``.

    Args:
        handler: Function called with every request sent by the client.
            It may return a response or raise an ``httpx.RequestError``.
    """
    return httpx.Client(transport=httpx.MockTransport(handler))
