"""Offline provider that returns deterministic canned responses.

Useful for demos and for exercising a workflow file without an API key.
"""

import asyncio
import logging
from collections.abc import Iterable

from agent_workflow.llm.provider import GenerateRequest, LLMProvider

logger = logging.getLogger(__name__)

_ROLE_PREFIX = "You are acting as:"


class MockProvider(LLMProvider):
    """Echo-style provider; no network access.

    The response names the acting role (taken from the system prompt) and the
    number of previous agent outputs visible in the user prompt. Roles listed in
    ``fail_roles`` raise instead of answering.
    """

    name = "mock"

    def __init__(self, delay_seconds: float = 0.0, fail_roles: Iterable[str] = ()) -> None:
        self.delay_seconds = delay_seconds
        self.fail_roles = frozenset(fail_roles)

    async def generate(self, request: GenerateRequest) -> str:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        role = _role_from_system_prompt(request.system)
        if role in self.fail_roles:
            raise RuntimeError(f"Mock failure for role {role!r}")

        seen = request.user.count("\n--- ")
        first_line = request.user.split("\n", 2)[1] if "\n" in request.user else request.user

        logger.debug("Mock completion", extra={"role": role, "previous_outputs": seen})
        return f"[{role}] Mock response to: {first_line} (previous outputs: {seen})"


def _role_from_system_prompt(system: str) -> str:
    for line in system.splitlines():
        if line.startswith(_ROLE_PREFIX):
            return line[len(_ROLE_PREFIX) :].strip()
    return "agent"
