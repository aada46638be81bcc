r"""Execution strategies deciding how a request is sent through a
transport.

Public API:
    - BaseExecutionStrategy: Abstract strategy interface
    - SingleExecution: One attempt, no retry
    - RetryExecution: Bounded retries with a delay between attempts
    - Transport: Protocol of the objects a strategy sends requests through
"""

from __future__ import annotations

__all__ = ["BaseExecutionStrategy", "RetryExecution", "SingleExecution", "Transport"]

from patientget.execution.base import BaseExecutionStrategy, Transport
from patientget.execution.retry import RetryExecution
from patientget.execution.single import SingleExecution
