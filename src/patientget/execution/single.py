r"""Single-attempt execution strategy."""

from __future__ import annotations

__all__ = ["SingleExecution"]

from typing import TYPE_CHECKING

from patientget.execution.base import BaseExecutionStrategy

if TYPE_CHECKING:
    import httpx

    from patientget.execution.base import Transport


class SingleExecution(BaseExecutionStrategy):
    """Send the request exactly once.

    The transport result is returned, or its exception raised, verbatim.
    This is the strategy of a ``Client`` built without ``with_retry``.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def execute(self, transport: Transport, request: httpx.Request) -> httpx.Response:
        return transport.send(request)
