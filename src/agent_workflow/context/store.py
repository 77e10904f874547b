"""Shared context accumulated over one workflow run.

The store is append-only: every completed agent invocation adds exactly one
:class:`TimelineEntry` and sets ``outputs[agent_id]``. Nothing is ever removed.
Prompt construction reads an immutable :class:`ContextSnapshot` rather than the
live store.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimelineEntry:
    """One completed agent invocation.

    Timestamps are epoch milliseconds.
    """

    agent_id: str
    role: str
    output: str
    started_at: int
    ended_at: int

    def __post_init__(self) -> None:
        if self.ended_at < self.started_at:
            raise ValueError(
                f"Timeline entry for {self.agent_id!r} ends before it starts "
                f"({self.ended_at} < {self.started_at})"
            )

    @property
    def duration_ms(self) -> int:
        return self.ended_at - self.started_at


@dataclass(frozen=True, slots=True)
class ContextSnapshot:
    """Read-only view of the context at a point in time."""

    user_input: str
    outputs: Mapping[str, str]
    timeline: tuple[TimelineEntry, ...]

    def previous_outputs(self) -> tuple[TimelineEntry, ...]:
        return self.timeline


class ContextStore:
    """Single point of truth for a run's accumulated state.

    Owned by the orchestrator for the duration of one run and never shared
    across runs. Only the executors write to it, and never two at once.
    """

    def __init__(self, user_input: str) -> None:
        self._user_input = user_input
        self._outputs: dict[str, str] = {}
        self._timeline: list[TimelineEntry] = []

    @property
    def user_input(self) -> str:
        return self._user_input

    @property
    def outputs(self) -> Mapping[str, str]:
        return MappingProxyType(self._outputs)

    @property
    def timeline(self) -> tuple[TimelineEntry, ...]:
        return tuple(self._timeline)

    def __len__(self) -> int:
        return len(self._timeline)

    def record_output(
        self,
        agent_id: str,
        role: str,
        output: str,
        started_at: int,
        ended_at: int,
    ) -> TimelineEntry:
        """Append a timeline entry and publish the agent's output."""
        entry = TimelineEntry(
            agent_id=agent_id,
            role=role,
            output=output,
            started_at=started_at,
            ended_at=ended_at,
        )
        self._append(entry)
        return entry

    def record_entries(self, entries: Iterable[TimelineEntry]) -> None:
        """Apply already-built entries in the given order.

        Used to merge parallel branch results after the join.
        """
        for entry in entries:
            self._append(entry)

    def previous_outputs(self) -> tuple[TimelineEntry, ...]:
        """All entries recorded before this call, in timeline order."""
        return tuple(self._timeline)

    def snapshot(self) -> ContextSnapshot:
        return ContextSnapshot(
            user_input=self._user_input,
            outputs=MappingProxyType(dict(self._outputs)),
            timeline=tuple(self._timeline),
        )

    def final_output(self) -> str | None:
        if not self._timeline:
            return None
        return self._timeline[-1].output

    def _append(self, entry: TimelineEntry) -> None:
        self._timeline.append(entry)
        self._outputs[entry.agent_id] = entry.output
        logger.debug(
            "Output recorded",
            extra={
                "agent_id": entry.agent_id,
                "output_length": len(entry.output),
                "timeline_length": len(self._timeline),
            },
        )
