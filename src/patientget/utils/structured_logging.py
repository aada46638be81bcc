r"""Structured logging helpers for machine-readable log output.

patientget logs through the standard ``logging`` module. Records emitted
on retries carry extra fields (``url``, ``attempt``, ``wait_time``, ...)
which ``StructuredFormatter`` renders as one JSON object per line. The
formatter is opt-in:

```python
import logging
from patientget.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())
logger = logging.getLogger("patientget")
logger.addHandler(handler)
logger.setLevel(logging.INFO)
```
"""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

import json
import logging
import time
from typing import Any

# Attributes present on every LogRecord; anything else came from ``extra``
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for log records.

    The output always contains ``timestamp``, ``level``, ``logger``,
    ``message``, ``module``, ``function`` and ``line``. Fields passed via
    ``extra`` are added as is, and ``exception`` is added when the record
    carries exception info.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from patientget.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("retrying", extra={"attempt": 1})
        >>> json.loads(stream.getvalue())["attempt"]
        1

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        """Format the record timestamp as ISO 8601 UTC with
        milliseconds."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log ``message`` with ``extra`` attached as structured fields.

    Args:
        logger: Logger to use.
        level: Log level, e.g. ``logging.INFO``.
        message: Human-readable message.
        **extra: Structured fields added to the record.
    """
    logger.log(level, message, extra=extra)
