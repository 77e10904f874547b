"""LLM package initialization."""

from agent_workflow.llm.factory import LLMFactory
from agent_workflow.llm.provider import GenerateRequest, LLMProvider
from agent_workflow.llm.rate_limiter import RateLimiter, RateLimiterStats

__all__ = [
    "GenerateRequest",
    "LLMFactory",
    "LLMProvider",
    "RateLimiter",
    "RateLimiterStats",
]
