"""Parallel executor.

One parallel step is a fan-out over its branch agents, a hard join, a merge of
the branch results into the context, and a single aggregator call.

Every branch prompt is built from the same pre-fan-out snapshot and each branch
writes into its own indexed slot. The slots are merged into the context in
declaration order only after all branches succeed, so the timeline order never
depends on which call finished first.

If any branch fails the whole step fails. Siblings still in flight are not
cancelled; their results are discarded.
"""

from __future__ import annotations

import asyncio
import logging
import time

from agent_workflow.agents.agent import Agent
from agent_workflow.agents.registry import AgentRegistry
from agent_workflow.context.store import ContextSnapshot, ContextStore, TimelineEntry
from agent_workflow.errors import ExecutionError
from agent_workflow.llm.provider import LLMProvider
from agent_workflow.llm.rate_limiter import RateLimiter
from agent_workflow.workflow.events import (
    ExecutionEvent,
    ExecutionEventType,
    NullSink,
    ReportingSink,
)
from agent_workflow.workflow.invocation import DEFAULT_TEMPERATURE, invoke_agent
from agent_workflow.workflow.schema import ParallelStep

logger = logging.getLogger(__name__)


async def _fan_out(
    agents: list[Agent],
    snapshot: ContextSnapshot,
    *,
    llm: LLMProvider,
    rate_limiter: RateLimiter,
    temperature: float,
) -> list[TimelineEntry]:
    slots: list[TimelineEntry | None] = [None] * len(agents)

    async def _run_branch(index: int, agent: Agent) -> None:
        slots[index] = await invoke_agent(
            agent, snapshot, llm=llm, rate_limiter=rate_limiter, temperature=temperature
        )

    tasks: list[asyncio.Task[None]] = []
    for index, agent in enumerate(agents):
        task = asyncio.create_task(_run_branch(index, agent), name=f"branch:{agent.id}")
        task.add_done_callback(_retrieve_late_failure)
        tasks.append(task)

    # No return_exceptions: the first failure fails the join and the remaining
    # tasks keep running; their outcome is only logged.
    await asyncio.gather(*tasks)

    entries: list[TimelineEntry] = []
    for agent, slot in zip(agents, slots):
        if slot is None:
            raise RuntimeError(f"Branch {agent.id!r} finished without a result")
        entries.append(slot)
    return entries


def _retrieve_late_failure(task: asyncio.Task[None]) -> None:
    # Marks the exception as retrieved for branches that fail after the join
    # has already failed.
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(
            "Branch task finished with an error",
            extra={"task": task.get_name(), "error_type": type(error).__name__},
        )


async def run_parallel_step(
    step: ParallelStep,
    *,
    registry: AgentRegistry,
    context: ContextStore,
    llm: LLMProvider,
    rate_limiter: RateLimiter,
    reporter: ReportingSink | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> None:
    """Execute one parallel step against ``context``.

    On success the timeline grows by ``len(step.branches) + 1`` entries and the
    aggregator's entry is last.

    Raises:
        ConfigurationError: If a branch or the aggregator names an unknown agent.
        ExecutionError: If any branch or the aggregator fails.
    """
    sink = reporter or NullSink()

    branch_agents = [registry.get_agent(agent_id) for agent_id in step.branches]
    aggregator = registry.get_agent(step.then.agent)

    logger.info(
        "Running parallel step",
        extra={"branches": list(step.branches), "aggregator": aggregator.id},
    )
    sink.emit(
        ExecutionEvent(
            type=ExecutionEventType.PARALLEL_STARTED,
            payload={"branches": list(step.branches)},
        )
    )

    started = time.monotonic()
    try:
        entries = await _fan_out(
            branch_agents,
            context.snapshot(),
            llm=llm,
            rate_limiter=rate_limiter,
            temperature=temperature,
        )
    except ExecutionError as e:
        logger.error(
            "Parallel branch failed, abandoning step",
            extra={"agent_id": e.agent_id, "branches": list(step.branches)},
        )
        sink.emit(
            ExecutionEvent(
                type=ExecutionEventType.AGENT_FAILED,
                payload={"agent_id": e.agent_id, "error": str(e)},
            )
        )
        raise
    duration_ms = int((time.monotonic() - started) * 1000)

    context.record_entries(entries)

    sink.emit(
        ExecutionEvent(
            type=ExecutionEventType.PARALLEL_COMPLETED,
            payload={"count": len(entries), "duration_ms": duration_ms},
        )
    )
    for entry in entries:
        sink.emit(
            ExecutionEvent(type=ExecutionEventType.AGENT_COMPLETED, payload={"entry": entry})
        )

    sink.emit(
        ExecutionEvent(
            type=ExecutionEventType.AGGREGATOR_STARTED,
            payload={"agent_id": aggregator.id, "role": aggregator.role},
        )
    )
    try:
        final = await invoke_agent(
            aggregator,
            context.snapshot(),
            llm=llm,
            rate_limiter=rate_limiter,
            temperature=temperature,
        )
    except ExecutionError as e:
        sink.emit(
            ExecutionEvent(
                type=ExecutionEventType.AGENT_FAILED,
                payload={"agent_id": aggregator.id, "role": aggregator.role, "error": str(e)},
            )
        )
        raise

    context.record_entries((final,))
    sink.emit(ExecutionEvent(type=ExecutionEventType.AGENT_COMPLETED, payload={"entry": final}))
