"""Presentation of workflow runs: live console output and text diagrams."""

from agent_workflow.reporter.console import ConsoleReporter
from agent_workflow.reporter.graphs import (
    build_context_graph,
    build_execution_graph,
    build_timing_graph,
)

__all__ = [
    "ConsoleReporter",
    "build_context_graph",
    "build_execution_graph",
    "build_timing_graph",
]
