"""Pydantic models for workflow files.

A workflow file declares the agents and an ordered list of steps::

    agents:
      - id: researcher
        role: Researcher
        goal: Collect the key facts.
    workflow:
      steps:
        - agent: researcher
        - branches: [optimist, skeptic]
          then:
            agent: editor

Two single-shape forms are accepted as well and normalized into ``steps``:
``{type: sequential, steps: [...]}`` and
``{type: parallel, branches: [...], then: {agent: ...}}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from agent_workflow.agents.agent import Agent


class AgentRef(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    agent: str = Field(min_length=1)


class SequentialStep(BaseModel):
    """Run one agent after everything before it has been recorded."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    agent: str = Field(min_length=1)


class ParallelStep(BaseModel):
    """Fan out to every branch agent, join, then run one aggregator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    branches: tuple[str, ...] = Field(min_length=1)
    then: AgentRef


WorkflowStep = SequentialStep | ParallelStep


class WorkflowDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    steps: tuple[WorkflowStep, ...] = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _normalize_typed_form(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "type" not in data:
            return data

        kind = data["type"]
        if kind == "sequential":
            return {"steps": data.get("steps", [])}
        if kind == "parallel":
            return {"steps": [{"branches": data.get("branches", []), "then": data.get("then")}]}
        raise ValueError(f"Unknown workflow type: {kind!r} (expected 'sequential' or 'parallel')")


class WorkflowConfig(BaseModel):
    """Root of a workflow file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    agents: tuple[Agent, ...] = Field(min_length=1)
    workflow: WorkflowDefinition
