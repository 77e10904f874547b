"""Agent definition."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Agent(BaseModel):
    """A named role with a goal and optional declared tool capabilities.

    Immutable for the lifetime of a run.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique agent identifier")
    role: str = Field(min_length=1, description="Role the model is asked to act as")
    goal: str = Field(min_length=1, description="What the agent should produce")
    tools: tuple[str, ...] = Field(
        default=(),
        description="Declared tool capability names, in invocation order",
    )
