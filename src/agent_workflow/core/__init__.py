"""Core package initialization."""

from agent_workflow.core.config import LLMConfig, OrchestratorConfig, RateLimitConfig

__all__ = [
    "LLMConfig",
    "OrchestratorConfig",
    "RateLimitConfig",
]
