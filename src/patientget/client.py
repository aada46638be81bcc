r"""HTTP client delegating request execution to a configurable
strategy."""

from __future__ import annotations

__all__ = ["Client"]

import logging
from typing import TYPE_CHECKING

import httpx

from patientget.core.config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, create_default_transport
from patientget.core.validation import validate_url
from patientget.execution import SingleExecution

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    from patientget.execution import BaseExecutionStrategy, Transport
    from patientget.options import Option

logger: logging.Logger = logging.getLogger(__name__)


class Client:
    r"""HTTP client issuing GET requests through an execution strategy.

    Without options, the client sends each request once through a default
    ``httpx.Client`` that does not keep connections alive. Options change
    the transport (``with_client``) or the strategy (``with_retry``).

    If an option raises, the exception propagates from the constructor and
    no client is returned. Options configure the client through the
    ``_use_transport`` and ``_use_strategy`` hooks, which are reserved for
    ``patientget.options`` and are not meant to be called afterwards.

    The client can be used as a context manager. On exit it closes the
    default transport it created; a transport supplied through
    ``with_client`` is left open for its owner to close.

    Args:
        *options: Options applied in order to the client being built.
        timeout: Timeout of the default transport. Ignored when a
            transport is supplied with ``with_client``.

    Example:
        ```pycon
        >>> from patientget import Client, with_retry
        >>> with Client(with_retry(retries=2, delay=0.01)) as client:  # doctest: +SKIP
        ...     response = client.get("https://api.example.com/data")
        ...

        ```
    """

    def __init__(self, *options: Option, timeout: float | httpx.Timeout = DEFAULT_TIMEOUT) -> None:
        self._transport: Transport | None = None
        self._owns_transport = False
        self._strategy: BaseExecutionStrategy = SingleExecution()

        for option in options:
            option(self)

        if self._transport is None:
            self._transport = create_default_transport(timeout)
            self._owns_transport = True

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(transport={self._transport!r}, "
            f"strategy={self._strategy!r})"
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def transport(self) -> Transport:
        """The transport every attempt is sent through."""
        return self._transport

    @property
    def strategy(self) -> BaseExecutionStrategy:
        """The execution strategy applied to every request."""
        return self._strategy

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def get(self, url: httpx.URL | str) -> httpx.Response:
        r"""Send a GET request through the configured strategy.

        The request carries the ``Cache-Control: no-cache`` and
        ``Accept-Charset: utf-8`` headers.

        Args:
            url: The URL to request.

        Returns:
            The response returned by the strategy. HTTP error statuses are
            returned as ordinary responses.

        Raises:
            InvalidArgumentError: If ``url`` is ``None``. The transport is
                not used in that case.
            httpx.RequestError: If the strategy gives up on a transport
                failure.
        """
        validate_url(url)
        request = self._build_request(url)
        logger.debug(f"Executing GET {request.url} with {self._strategy!r}")
        return self._strategy.execute(self._transport, request)

    def _build_request(self, url: httpx.URL | str) -> httpx.Request:
        # httpx.Client only applies its timeout and default headers to
        # requests it builds itself
        if isinstance(self._transport, httpx.Client):
            return self._transport.build_request("GET", url, headers=dict(DEFAULT_HEADERS))
        return httpx.Request("GET", url, headers=dict(DEFAULT_HEADERS))

    def _use_transport(self, transport: Transport) -> None:
        # Construction hook for options, see patientget.options
        self._transport = transport
        self._owns_transport = False

    def _use_strategy(self, strategy: BaseExecutionStrategy) -> None:
        # Construction hook for options, see patientget.options
        self._strategy = strategy
