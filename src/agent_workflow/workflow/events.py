from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class ExecutionEventType(str, Enum):
    WORKFLOW_STARTED = "workflow_started"
    AGENT_STARTED = "agent_started"
    AGENT_COMPLETED = "agent_completed"
    AGENT_FAILED = "agent_failed"
    PARALLEL_STARTED = "parallel_started"
    PARALLEL_COMPLETED = "parallel_completed"
    AGGREGATOR_STARTED = "aggregator_started"
    WORKFLOW_COMPLETED = "workflow_completed"
    WORKFLOW_FAILED = "workflow_failed"


@dataclass(frozen=True, slots=True)
class ExecutionEvent:
    """A progress notification emitted by the executors.

    Executors never depend on how events are rendered.
    """

    type: ExecutionEventType
    payload: dict[str, object] = field(default_factory=dict)


class ReportingSink(Protocol):
    def emit(self, event: ExecutionEvent) -> None: ...


class NullSink:
    """Discards every event."""

    def emit(self, event: ExecutionEvent) -> None:
        _ = event


@dataclass
class RecordingSink:
    """Keeps every event in order; handy for tests and post-run inspection."""

    events: list[ExecutionEvent] = field(default_factory=list)

    def emit(self, event: ExecutionEvent) -> None:
        self.events.append(event)

    def types(self) -> list[ExecutionEventType]:
        return [event.type for event in self.events]
