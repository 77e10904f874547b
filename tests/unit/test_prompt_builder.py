"""Unit tests for prompt construction."""

from __future__ import annotations

from agent_workflow.agents.agent import Agent
from agent_workflow.context.store import ContextStore
from agent_workflow.prompt.builder import build_prompt


def _agent() -> Agent:
    return Agent(id="critic", role="Critic", goal="Find weaknesses.", tools=("python",))


def test_prompt_without_previous_outputs() -> None:
    prompt = build_prompt(_agent(), ContextStore("Launch a bakery").snapshot())

    assert prompt.system == (
        "You are acting as: Critic\n"
        "\n"
        "Your goal:\n"
        "Find weaknesses.\n"
        "\n"
        "Follow the goal strictly. Be concise, clear, and relevant."
    )
    assert prompt.user == "User input:\nLaunch a bakery"


def test_prompt_lists_previous_outputs_in_order() -> None:
    context = ContextStore("Launch a bakery")
    context.record_output("planner", "Planner", "Step 1", 0, 1)
    context.record_output("writer", "Writer", "Draft", 1, 2)

    prompt = build_prompt(_agent(), context.snapshot())

    assert prompt.user == (
        "User input:\nLaunch a bakery\n"
        "\n"
        "Previous agent outputs:\n"
        "\n"
        "--- Planner (planner) ---\n"
        "Step 1\n"
        "\n"
        "--- Writer (writer) ---\n"
        "Draft"
    )


def test_prompt_is_deterministic_and_does_not_touch_context() -> None:
    context = ContextStore("X")
    context.record_output("A", "Role A", "a", 0, 0)
    snapshot = context.snapshot()

    first = build_prompt(_agent(), snapshot)
    second = build_prompt(_agent(), snapshot)

    assert first == second
    assert first.system.encode() == second.system.encode()
    assert first.user.encode() == second.user.encode()
    assert len(context.timeline) == 1


def test_to_request_carries_temperature() -> None:
    request = build_prompt(_agent(), ContextStore("X").snapshot()).to_request(0.7)

    assert request.temperature == 0.7
    assert request.to_messages()[0]["role"] == "system"
    assert request.to_messages()[1] == {"role": "user", "content": request.user}
