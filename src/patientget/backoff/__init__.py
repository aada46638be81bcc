r"""Backoff strategies used to compute the delay between attempts."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff"]

from patientget.backoff.base import BaseBackoffStrategy
from patientget.backoff.constant import ConstantBackoff
