"""Prompt construction for agent steps.

``build_prompt`` is a pure function of the agent and the context it is given:
identical inputs produce byte-identical prompts, and the context is never
modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from agent_workflow.agents.agent import Agent
from agent_workflow.context.store import TimelineEntry
from agent_workflow.llm.provider import GenerateRequest

logger = logging.getLogger(__name__)


class ContextReader(Protocol):
    """Read surface of the context used for prompts."""

    @property
    def user_input(self) -> str: ...

    def previous_outputs(self) -> tuple[TimelineEntry, ...]: ...


@dataclass(frozen=True, slots=True)
class Prompt:
    system: str
    user: str

    def to_request(self, temperature: float = 0.2) -> GenerateRequest:
        return GenerateRequest(system=self.system, user=self.user, temperature=temperature)


def build_system_prompt(agent: Agent) -> str:
    return (
        f"You are acting as: {agent.role}\n"
        "\n"
        "Your goal:\n"
        f"{agent.goal}\n"
        "\n"
        "Follow the goal strictly. Be concise, clear, and relevant."
    )


def build_user_prompt(context: ContextReader) -> str:
    parts = [f"User input:\n{context.user_input}\n"]

    previous = context.previous_outputs()
    if previous:
        parts.append("\nPrevious agent outputs:\n")
        for entry in previous:
            parts.append(f"\n--- {entry.role} ({entry.agent_id}) ---\n{entry.output}\n")

    return "".join(parts).strip()


def build_prompt(agent: Agent, context: ContextReader) -> Prompt:
    """Build the system/user prompt pair for one agent invocation."""
    system = build_system_prompt(agent)
    user = build_user_prompt(context)

    logger.debug(
        "Prompt built",
        extra={
            "agent_id": agent.id,
            "system_length": len(system),
            "user_length": len(user),
            "previous_output_count": len(context.previous_outputs()),
        },
    )
    return Prompt(system=system, user=user)
