r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from typing import TYPE_CHECKING

from patientget.backoff.base import BaseBackoffStrategy
from patientget.core.validation import validate_delay

if TYPE_CHECKING:
    from datetime import timedelta


class ConstantBackoff(BaseBackoffStrategy):
    """Fixed delay between attempts.

    Args:
        delay: The delay in seconds, or a ``timedelta``, used between every
            pair of attempts (default: 0.0).

    Raises:
        InvalidArgumentError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from patientget.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=0.5)
        >>> backoff.calculate(0)
        0.5
        >>> backoff.calculate(7)
        0.5
        >>> ConstantBackoff(timedelta(milliseconds=10)).delay
        0.01

        ```
    """

    def __init__(self, delay: float | timedelta = 0.0) -> None:
        self.delay = validate_delay(delay)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
