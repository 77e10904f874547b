"""Prompt package initialization."""

from agent_workflow.prompt.builder import Prompt, build_prompt

__all__ = [
    "Prompt",
    "build_prompt",
]
