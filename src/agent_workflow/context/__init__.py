"""Context package initialization."""

from agent_workflow.context.store import ContextSnapshot, ContextStore, TimelineEntry

__all__ = [
    "ContextSnapshot",
    "ContextStore",
    "TimelineEntry",
]
