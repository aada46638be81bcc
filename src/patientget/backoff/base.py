r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy tells the retry loop how long to wait after a
    failed attempt, given the index of the retry that is about to happen.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Return the delay in seconds before the given retry.

        Args:
            attempt: The retry index (0-indexed). ``attempt=0`` is the
                wait between the first and the second attempt.

        Returns:
            The delay in seconds. Never negative.
        """
