"""Unit tests for the plain-text run diagrams."""

from agent_workflow.context.store import ContextStore
from agent_workflow.reporter.graphs import (
    build_context_graph,
    build_execution_graph,
    build_timing_graph,
)


def _context() -> ContextStore:
    context = ContextStore("Plan a trip")
    context.record_output("planner", "Planner", "Day 1: arrive", 1_000, 2_500)
    context.record_output("editor", "Editor", "Final plan", 2_500, 3_000)
    return context


def test_context_graph_lists_outputs_and_timeline() -> None:
    graph = build_context_graph(_context().snapshot())

    assert graph.startswith("CONTEXT FLOW")
    assert ' │   └─ "Plan a trip"' in graph
    assert " │   ├─ planner" in graph
    assert " │   └─ editor" in graph
    assert "     └─ editor" in graph


def test_context_graph_for_empty_store() -> None:
    graph = build_context_graph(ContextStore("x").snapshot())

    assert " │   └─ (empty)" in graph
    assert "     └─ (empty)" in graph


def test_execution_graph_boxes_have_equal_width() -> None:
    graph = build_execution_graph(_context().timeline)

    box_lines = [line for line in graph.splitlines() if line[:1] in "┌│└"]
    assert box_lines
    assert len({len(line) for line in box_lines}) == 1
    assert "Duration : 1.50s" in graph
    assert "Output   : 13 chars" in graph
    assert graph.count("▼") == 1


def test_timing_graph_bars() -> None:
    graph = build_timing_graph(_context().timeline)

    assert "[planner   ] ######" in graph
    assert "1.50s" in graph
    assert "0.50s" in graph


def test_empty_timeline() -> None:
    assert "No execution data available." in build_execution_graph(())
    assert "No timing data available." in build_timing_graph(())
