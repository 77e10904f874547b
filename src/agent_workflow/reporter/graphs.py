"""Plain-text diagrams of a finished run.

All functions are pure and return strings, so they can be printed, logged or
written to a file.
"""

from __future__ import annotations

from collections.abc import Sequence

from agent_workflow.context.store import ContextSnapshot, TimelineEntry

_WIDTH = 60
_BOX_INNER = 46


def build_context_graph(context: ContextSnapshot) -> str:
    """Tree view of what the context holds."""
    lines = ["CONTEXT FLOW", "=" * _WIDTH, ""]

    lines.append("ContextStore")
    lines.append(" ├─ userInput")
    lines.append(f' │   └─ "{context.user_input}"')
    lines.append(" │")
    lines.append(" ├─ outputs")

    output_keys = list(context.outputs)
    if not output_keys:
        lines.append(" │   └─ (empty)")
    for index, agent_id in enumerate(output_keys):
        branch = "└" if index == len(output_keys) - 1 else "├"
        lines.append(f" │   {branch}─ {agent_id}")

    lines.append(" │")
    lines.append(" └─ timeline")

    if not context.timeline:
        lines.append("     └─ (empty)")
    for index, entry in enumerate(context.timeline):
        branch = "└" if index == len(context.timeline) - 1 else "├"
        lines.append(f"     {branch}─ {entry.agent_id}")

    lines.append("")
    lines.append("Data Flow Summary:")
    lines.append("ContextStore ──▶ Agent (implicit)")
    lines.append("Agent        ──▶ ContextStore.outputs (explicit)")

    return "\n".join(lines)


def build_execution_graph(timeline: Sequence[TimelineEntry]) -> str:
    """One box per timeline entry, top to bottom."""
    if not timeline:
        return "EXECUTION FLOW\n" + "=" * 30 + "\nNo execution data available."

    lines = ["EXECUTION FLOW", "=" * _WIDTH, ""]

    for index, entry in enumerate(timeline):
        lines.append("┌" + "─" * _BOX_INNER + "┐")
        lines.append(_box_line(f"{entry.agent_id:<12} ({entry.role})"))
        lines.append("│ " + "-" * (_BOX_INNER - 2) + " │")
        lines.append(_box_line(f"Duration : {entry.duration_ms / 1000:.2f}s"))
        lines.append(_box_line(f"Output   : {len(entry.output)} chars"))
        lines.append("└" + "─" * _BOX_INNER + "┘")

        if index < len(timeline) - 1:
            lines.append(" " * 16 + "│")
            lines.append(" " * 16 + "▼")

    return "\n".join(lines)


def build_timing_graph(timeline: Sequence[TimelineEntry]) -> str:
    """Horizontal bar per entry; one ``#`` per quarter second, capped at 40."""
    if not timeline:
        return "LLM TIMING\n" + "=" * 30 + "\nNo timing data available."

    lines = ["LLM TIMING", "=" * _WIDTH, ""]
    for entry in timeline:
        seconds = entry.duration_ms / 1000
        bar = "#" * min(round(seconds * 4), 40)
        lines.append(f"[{entry.agent_id:<10}] {bar:<40} {seconds:.2f}s")

    return "\n".join(lines)


def _box_line(text: str) -> str:
    return f"│ {text}".ljust(_BOX_INNER + 1) + "│"
