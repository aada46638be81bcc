r"""Default configuration for the patientget client.

This module holds the constants shared by the client, the options and
the execution strategies, and the factory for the default transport.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_HEADERS",
    "DEFAULT_RETRIES",
    "DEFAULT_TIMEOUT",
    "TRANSPORT_ERRORS",
    "create_default_transport",
]

import logging
from types import MappingProxyType

import httpx

logger: logging.Logger = logging.getLogger(__name__)

# Timeout in seconds applied by the default transport
DEFAULT_TIMEOUT = 10.0

# A client without options performs a single attempt
DEFAULT_RETRIES = 0
DEFAULT_DELAY = 0.0

# Headers set on every GET request, not configurable
DEFAULT_HEADERS: MappingProxyType[str, str] = MappingProxyType(
    {"Cache-Control": "no-cache", "Accept-Charset": "utf-8"}
)

# Exceptions a transport raises when an attempt fails before a response
# is received. RetryExecution retries all of them the same way.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (httpx.RequestError,)


def create_default_transport(timeout: float | httpx.Timeout = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create the transport used when no ``with_client`` option is given.

    Connections are never kept alive between requests.

    Args:
        timeout: Timeout applied to every request sent by the transport.

    Returns:
        A new ``httpx.Client`` owned by the caller.

    Example:
        ```pycon
        >>> from patientget.core.config import create_default_transport
        >>> transport = create_default_transport()
        >>> transport.timeout.read
        10.0
        >>> transport.close()

        ```
    """
    logger.debug(f"Creating default transport (timeout={timeout}, keep-alive disabled)")
    return httpx.Client(
        timeout=timeout,
        limits=httpx.Limits(max_keepalive_connections=0),
    )
