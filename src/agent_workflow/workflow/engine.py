"""Top-level workflow run: dispatches each declared step to its executor."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator, Sequence

from agent_workflow.agents.registry import AgentRegistry
from agent_workflow.context.store import ContextStore
from agent_workflow.errors import ConfigurationError, WorkflowError
from agent_workflow.llm.provider import LLMProvider
from agent_workflow.llm.rate_limiter import RateLimiter
from agent_workflow.workflow.events import (
    ExecutionEvent,
    ExecutionEventType,
    NullSink,
    ReportingSink,
)
from agent_workflow.workflow.invocation import DEFAULT_TEMPERATURE
from agent_workflow.workflow.loader import validate_semantics
from agent_workflow.workflow.parallel import run_parallel_step
from agent_workflow.workflow.schema import ParallelStep, SequentialStep, WorkflowConfig, WorkflowStep
from agent_workflow.workflow.sequential import run_sequential_steps

logger = logging.getLogger(__name__)


def group_steps(
    steps: Sequence[WorkflowStep],
) -> Iterator[list[SequentialStep] | ParallelStep]:
    """Yield runs of consecutive sequential steps and single parallel steps."""
    pending: list[SequentialStep] = []
    for step in steps:
        if isinstance(step, SequentialStep):
            pending.append(step)
            continue
        if pending:
            yield pending
            pending = []
        yield step
    if pending:
        yield pending


def check_references(config: WorkflowConfig, registry: AgentRegistry) -> None:
    """Fail before anything runs if a step names an agent the run cannot resolve.

    Raises:
        ConfigurationError: On a bad reference, duplicate id or unknown tool.
    """
    validate_semantics(config)
    for step in config.workflow.steps:
        agent_ids = (
            [*step.branches, step.then.agent] if isinstance(step, ParallelStep) else [step.agent]
        )
        for agent_id in agent_ids:
            if agent_id not in registry:
                raise ConfigurationError(f"Agent not found: {agent_id}")


async def run_workflow(
    config: WorkflowConfig,
    *,
    registry: AgentRegistry,
    context: ContextStore,
    llm: LLMProvider,
    rate_limiter: RateLimiter,
    reporter: ReportingSink | None = None,
    temperature: float = DEFAULT_TEMPERATURE,
) -> ContextStore:
    """Run every step of ``config`` in order and return the filled context.

    Every agent reference is checked before the first step starts, so a
    configuration error never leaves a partly filled context behind.

    Raises:
        ConfigurationError: If the workflow cannot be resolved.
        ExecutionError: If a model call fails.
    """
    check_references(config, registry)

    sink = reporter or NullSink()
    steps = config.workflow.steps

    logger.info("Workflow started", extra={"steps": len(steps), "provider": llm.name})
    sink.emit(
        ExecutionEvent(
            type=ExecutionEventType.WORKFLOW_STARTED,
            payload={"user_input": context.user_input, "steps": len(steps)},
        )
    )

    started = time.monotonic()
    try:
        for group in group_steps(steps):
            if isinstance(group, ParallelStep):
                await run_parallel_step(
                    group,
                    registry=registry,
                    context=context,
                    llm=llm,
                    rate_limiter=rate_limiter,
                    reporter=sink,
                    temperature=temperature,
                )
            else:
                await run_sequential_steps(
                    group,
                    registry=registry,
                    context=context,
                    llm=llm,
                    rate_limiter=rate_limiter,
                    reporter=sink,
                    temperature=temperature,
                )
    except WorkflowError as e:
        agent_id = getattr(e, "agent_id", None)
        logger.error(
            "Workflow failed",
            extra={"agent_id": agent_id, "completed_agents": len(context)},
        )
        sink.emit(
            ExecutionEvent(
                type=ExecutionEventType.WORKFLOW_FAILED,
                payload={"agent_id": agent_id, "error": str(e)},
            )
        )
        raise

    duration_ms = int((time.monotonic() - started) * 1000)
    logger.info(
        "Workflow completed",
        extra={"agents": len(context), "duration_ms": duration_ms},
    )
    sink.emit(
        ExecutionEvent(
            type=ExecutionEventType.WORKFLOW_COMPLETED,
            payload={"agent_count": len(context), "duration_ms": duration_ms},
        )
    )
    return context
