"""Error types raised by the workflow orchestrator.

Two kinds matter to callers:

- :class:`ConfigurationError` is detected before any step runs (bad YAML,
  unknown agent or tool, missing credentials).
- :class:`ExecutionError` wraps a model-service failure during a step. The
  provider's original exception is chained as ``__cause__``.
"""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for orchestrator errors."""


class ConfigurationError(WorkflowError):
    """The workflow or its runtime configuration cannot be used."""


class ExecutionError(WorkflowError):
    """A model-client call failed while executing an agent step."""

    def __init__(self, message: str, *, agent_id: str | None = None) -> None:
        super().__init__(message)
        self.agent_id = agent_id
