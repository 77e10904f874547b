"""Lookup of agents declared in a workflow file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from agent_workflow.agents.agent import Agent
from agent_workflow.errors import ConfigurationError

if TYPE_CHECKING:
    from agent_workflow.workflow.schema import WorkflowConfig

logger = logging.getLogger(__name__)


class AgentRegistry:
    """Agents keyed by id, in declaration order."""

    def __init__(self, agents: Iterable[Agent]) -> None:
        self._agents: dict[str, Agent] = {}
        for agent in agents:
            if agent.id in self._agents:
                raise ConfigurationError(f"Duplicate agent id: {agent.id}")
            self._agents[agent.id] = agent

        logger.debug("Agent registry built", extra={"agent_ids": list(self._agents)})

    @classmethod
    def from_config(cls, config: WorkflowConfig) -> AgentRegistry:
        return cls(config.agents)

    def get_agent(self, agent_id: str) -> Agent:
        try:
            return self._agents[agent_id]
        except KeyError:
            raise ConfigurationError(f"Agent not found: {agent_id}") from None

    def ids(self) -> list[str]:
        return list(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __len__(self) -> int:
        return len(self._agents)
