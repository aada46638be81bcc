r"""patientget - HTTP GET client with a pluggable execution strategy.

The client builds each GET request with fixed default headers and hands it
to an execution strategy together with the transport. The default strategy
sends the request once; ``with_retry`` installs a strategy that retries
transport failures with a fixed delay between attempts.

Example:
    ```pycon
    >>> from patientget import Client, with_retry
    >>> with Client(with_retry(retries=3, delay=0.5)) as client:  # doctest: +SKIP
    ...     response = client.get("https://api.example.com/data")
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseExecutionStrategy",
    "Client",
    "InvalidArgumentError",
    "RetryExecution",
    "RetryInfo",
    "SingleExecution",
    "__version__",
    "with_client",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from patientget.callbacks import RetryInfo
from patientget.client import Client
from patientget.exceptions import InvalidArgumentError
from patientget.execution import BaseExecutionStrategy, RetryExecution, SingleExecution
from patientget.options import with_client, with_retry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
