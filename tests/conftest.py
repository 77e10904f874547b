"""Test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from agent_workflow.agents.agent import Agent
from agent_workflow.agents.registry import AgentRegistry
from agent_workflow.core.config import LLMConfig, OrchestratorConfig, RateLimitConfig
from agent_workflow.llm.rate_limiter import RateLimiter
from tests.support import FakeClock, make_agent


@pytest.fixture
def agents() -> list[Agent]:
    """Agents used across executor tests."""
    return [make_agent(agent_id) for agent_id in ("A", "B", "C", "D", "B1", "B2", "B3", "AGG")]


@pytest.fixture
def registry(agents: list[Agent]) -> AgentRegistry:
    return AgentRegistry(agents)


@pytest.fixture
def rate_limiter() -> RateLimiter:
    """A limiter generous enough never to delay a test."""
    return RateLimiter(max_requests=1000, window_ms=60_000)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def workflow_file(tmp_path: Path) -> Path:
    """A small mixed workflow file."""
    path = tmp_path / "workflow.yaml"
    path.write_text(
        "\n".join(
            [
                "agents:",
                "  - id: planner",
                "    role: Planner",
                "    goal: Break the request into parts.",
                "  - id: optimist",
                "    role: Optimist",
                "    goal: Argue for the idea.",
                "    tools: [python]",
                "  - id: skeptic",
                "    role: Skeptic",
                "    goal: Argue against the idea.",
                "  - id: editor",
                "    role: Editor",
                "    goal: Merge the arguments.",
                "workflow:",
                "  steps:",
                "    - agent: planner",
                "    - branches: [optimist, skeptic]",
                "      then:",
                "        agent: editor",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def orchestrator_config() -> OrchestratorConfig:
    """Provide a test orchestrator configuration."""
    return OrchestratorConfig(
        log_level="DEBUG",
        debug=True,
        llm=LLMConfig(provider="mock"),
        rate_limit=RateLimitConfig(max_requests=100, window_ms=1000, buffer_ms=0),
    )
