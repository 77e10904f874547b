"""Agent Workflow Orchestrator.

Runs a YAML-declared workflow of named agents against a language-model
service:
- sequential steps that each see every earlier output
- parallel fan-out steps joined by a barrier and summarized by an aggregator
- a sliding-window rate limiter on every outbound model call
"""

__version__ = "0.1.0"

from agent_workflow.core.config import OrchestratorConfig
from agent_workflow.errors import ConfigurationError, ExecutionError, WorkflowError

__all__ = [
    "__version__",
    "ConfigurationError",
    "ExecutionError",
    "OrchestratorConfig",
    "WorkflowError",
]
