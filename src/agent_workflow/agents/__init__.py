"""Agents package initialization."""

from agent_workflow.agents.agent import Agent
from agent_workflow.agents.registry import AgentRegistry

__all__ = [
    "Agent",
    "AgentRegistry",
]
