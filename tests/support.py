"""Test doubles shared by the unit tests."""

from __future__ import annotations

import asyncio

from agent_workflow.agents.agent import Agent
from agent_workflow.llm.provider import GenerateRequest, LLMProvider

_ROLE_PREFIX = "You are acting as: "


class FakeClock:
    """Millisecond clock that only moves when something sleeps on it."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now_ms = start_ms
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now_ms

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now_ms += seconds * 1000
        await asyncio.sleep(0)


class ScriptedProvider(LLMProvider):
    """Answers by agent role, which :func:`make_agent` sets equal to the id."""

    name = "scripted"

    def __init__(
        self,
        responses: dict[str, str] | None = None,
        failures: dict[str, Exception] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.failures = failures or {}
        self.delays = delays or {}
        self.requests: dict[str, GenerateRequest] = {}
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def generate(self, request: GenerateRequest) -> str:
        role = request.system.splitlines()[0].removeprefix(_ROLE_PREFIX)
        self.calls.append(role)
        self.requests[role] = request

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(role, 0.0))
            if role in self.failures:
                raise self.failures[role]
            self.completed.append(role)
            return self.responses.get(role, f"output of {role}")
        finally:
            self.in_flight -= 1


class BarrierProvider(LLMProvider):
    """Every call waits until ``parties`` calls are in flight at once.

    Fails with ``TimeoutError`` if the calls are not actually concurrent.
    """

    name = "barrier"

    def __init__(self, parties: int, timeout: float = 1.0) -> None:
        self.parties = parties
        self.timeout = timeout
        self._arrived = 0
        self._all_arrived = asyncio.Event()

    async def generate(self, request: GenerateRequest) -> str:
        role = request.system.splitlines()[0].removeprefix(_ROLE_PREFIX)
        if self._arrived < self.parties:
            self._arrived += 1
            if self._arrived == self.parties:
                self._all_arrived.set()
            await asyncio.wait_for(self._all_arrived.wait(), timeout=self.timeout)
        return f"output of {role}"


def make_agent(agent_id: str, *, tools: tuple[str, ...] = ()) -> Agent:
    return Agent(id=agent_id, role=agent_id, goal=f"Goal of {agent_id}", tools=tools)
