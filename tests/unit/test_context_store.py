"""Unit tests for the shared context store."""

from __future__ import annotations

import pytest

from agent_workflow.context.store import ContextStore, TimelineEntry


def test_record_output_sets_output_and_appends_entry() -> None:
    context = ContextStore("X")

    entry = context.record_output("A", "Analyst", "Y", started_at=10, ended_at=25)

    assert context.outputs == {"A": "Y"}
    assert context.timeline == (entry,)
    assert entry.agent_id == "A"
    assert entry.duration_ms == 15


def test_previous_outputs_returns_entries_in_timeline_order() -> None:
    context = ContextStore("X")
    context.record_output("A", "First", "1", 0, 1)
    context.record_output("B", "Second", "2", 1, 2)

    previous = context.previous_outputs()

    assert [entry.agent_id for entry in previous] == ["A", "B"]
    # Reading never removes anything.
    assert len(context.previous_outputs()) == 2


def test_outputs_view_is_read_only() -> None:
    context = ContextStore("X")
    context.record_output("A", "Role", "out", 0, 0)

    with pytest.raises(TypeError):
        context.outputs["A"] = "changed"  # type: ignore[index]


def test_snapshot_is_not_affected_by_later_writes() -> None:
    context = ContextStore("X")
    context.record_output("A", "Role", "out", 0, 0)

    snapshot = context.snapshot()
    context.record_output("B", "Role", "later", 1, 1)

    assert snapshot.user_input == "X"
    assert list(snapshot.outputs) == ["A"]
    assert [e.agent_id for e in snapshot.previous_outputs()] == ["A"]


def test_record_entries_applies_in_given_order() -> None:
    context = ContextStore("X")
    entries = [
        TimelineEntry(agent_id="B2", role="r", output="second", started_at=0, ended_at=5),
        TimelineEntry(agent_id="B1", role="r", output="first", started_at=0, ended_at=9),
    ]

    context.record_entries(entries)

    assert [e.agent_id for e in context.timeline] == ["B2", "B1"]
    assert set(context.outputs) == {e.agent_id for e in context.timeline}


def test_rerun_agent_keeps_both_entries_and_latest_output() -> None:
    context = ContextStore("X")
    context.record_output("A", "Role", "draft", 0, 1)
    context.record_output("A", "Role", "final", 2, 3)

    assert len(context.timeline) == 2
    assert context.outputs == {"A": "final"}
    assert set(context.outputs) == {e.agent_id for e in context.timeline}


def test_timeline_entry_rejects_end_before_start() -> None:
    with pytest.raises(ValueError):
        TimelineEntry(agent_id="A", role="r", output="", started_at=10, ended_at=9)


def test_final_output() -> None:
    context = ContextStore("X")
    assert context.final_output() is None

    context.record_output("A", "Role", "one", 0, 0)
    context.record_output("B", "Role", "two", 0, 0)

    assert context.final_output() == "two"
