"""A single agent invocation, shared by both executors."""

from __future__ import annotations

import logging
import time

from agent_workflow.agents.agent import Agent
from agent_workflow.context.store import ContextSnapshot, TimelineEntry
from agent_workflow.errors import ExecutionError
from agent_workflow.llm.provider import LLMProvider
from agent_workflow.llm.rate_limiter import RateLimiter
from agent_workflow.prompt.builder import build_prompt

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.2


async def invoke_agent(
    agent: Agent,
    snapshot: ContextSnapshot,
    *,
    llm: LLMProvider,
    rate_limiter: RateLimiter,
    temperature: float = DEFAULT_TEMPERATURE,
) -> TimelineEntry:
    """Build the prompt, wait for admission, call the model.

    The returned entry is not recorded anywhere; the caller decides when to
    merge it into the context.

    Timestamps cover the model call only, not the time spent waiting for a
    rate-limit slot.

    Raises:
        ExecutionError: If the model call fails. The provider's exception is
            chained as ``__cause__``.
    """
    request = build_prompt(agent, snapshot).to_request(temperature)

    await rate_limiter.acquire_slot()

    started_at = int(time.time() * 1000)
    started = time.monotonic()
    try:
        output = await llm.generate(request)
    except ExecutionError:
        raise
    except Exception as e:
        logger.error(
            "Agent invocation failed",
            extra={"agent_id": agent.id, "error_type": type(e).__name__},
        )
        raise ExecutionError(f"Agent {agent.id!r} failed: {e}", agent_id=agent.id) from e

    ended_at = started_at + int((time.monotonic() - started) * 1000)

    logger.info(
        "Agent invocation completed",
        extra={
            "agent_id": agent.id,
            "duration_ms": ended_at - started_at,
            "output_length": len(output),
        },
    )
    return TimelineEntry(
        agent_id=agent.id,
        role=agent.role,
        output=output,
        started_at=started_at,
        ended_at=ended_at,
    )
