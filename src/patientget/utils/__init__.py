r"""Utility helpers for patientget."""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

from patientget.utils.structured_logging import StructuredFormatter, log_structured
