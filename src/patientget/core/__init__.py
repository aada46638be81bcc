r"""Configuration defaults and argument validation shared across
patientget."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_HEADERS",
    "DEFAULT_RETRIES",
    "DEFAULT_TIMEOUT",
    "TRANSPORT_ERRORS",
    "create_default_transport",
    "validate_delay",
    "validate_retries",
    "validate_transport",
    "validate_url",
]

from patientget.core.config import (
    DEFAULT_DELAY,
    DEFAULT_HEADERS,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    TRANSPORT_ERRORS,
    create_default_transport,
)
from patientget.core.validation import (
    validate_delay,
    validate_retries,
    validate_transport,
    validate_url,
)
