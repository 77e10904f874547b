"""Sequential executor.

Runs an ordered list of single-agent steps with full serialization: step
``i + 1`` starts only after step ``i``'s output has been recorded. The first
failure stops the run; entries recorded for earlier steps are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from agent_workflow.agents.registry import AgentRegistry
from agent_workflow.context.store import ContextStore
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
from agent_workflow.workflow.schema import SequentialStep

logger = logging.getLogger(__name__)


async def run_sequential_steps(
    steps: Sequence[SequentialStep],
    *,
    registry: AgentRegistry,
    context: ContextStore,
    llm: LLMProvider,
    rate_limiter: RateLimiter,
    reporter: ReportingSink | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> None:
    """Execute ``steps`` in declared order against ``context``.

    Raises:
        ConfigurationError: If a step names an unknown agent.
        ExecutionError: If a model call fails; later steps are not run.
    """
    sink = reporter or NullSink()
    total = len(steps)

    for index, step in enumerate(steps, start=1):
        agent = registry.get_agent(step.agent)

        logger.info(
            "Running sequential step",
            extra={"agent_id": agent.id, "step": index, "total_steps": total},
        )
        sink.emit(
            ExecutionEvent(
                type=ExecutionEventType.AGENT_STARTED,
                payload={"agent_id": agent.id, "role": agent.role, "step": index, "total": total},
            )
        )

        try:
            entry = await invoke_agent(
                agent,
                context.snapshot(),
                llm=llm,
                rate_limiter=rate_limiter,
                temperature=temperature,
            )
        except ExecutionError as e:
            sink.emit(
                ExecutionEvent(
                    type=ExecutionEventType.AGENT_FAILED,
                    payload={"agent_id": agent.id, "role": agent.role, "error": str(e)},
                )
            )
            raise

        context.record_output(
            entry.agent_id, entry.role, entry.output, entry.started_at, entry.ended_at
        )
        sink.emit(
            ExecutionEvent(type=ExecutionEventType.AGENT_COMPLETED, payload={"entry": entry})
        )
