"""CLI entrypoint for the agent workflow orchestrator."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from agent_workflow import __version__
from agent_workflow.context.store import ContextStore
from agent_workflow.core.config import OrchestratorConfig
from agent_workflow.core.orchestrator import Orchestrator
from agent_workflow.errors import ConfigurationError, ExecutionError
from agent_workflow.logging import configure_logging
from agent_workflow.reporter.console import ConsoleReporter
from agent_workflow.reporter.graphs import (
    build_context_graph,
    build_execution_graph,
    build_timing_graph,
)
from agent_workflow.tools.invoker import TOOL_DESCRIPTIONS
from agent_workflow.workflow.events import NullSink, ReportingSink
from agent_workflow.workflow.loader import load_workflow_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agent-workflow",
        description="Run a YAML-declared workflow of LLM agents",
    )
    parser.add_argument("--version", action="version", version=f"agent-workflow {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Execute a workflow for one user input")
    run.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the workflow YAML file",
    )
    run.add_argument("--input", dest="user_input", required=True, help="User input text")
    run.add_argument(
        "--provider",
        choices=["gemini", "openai", "mock"],
        default=None,
        help="Override the LLM provider from the environment",
    )
    run.add_argument(
        "--graphs",
        action="store_true",
        help="Print context, execution and timing diagrams after the run",
    )
    run.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final output",
    )

    validate = subparsers.add_parser("validate", help="Validate a workflow file without running it")
    validate.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the workflow YAML file",
    )

    subparsers.add_parser("tools", help="List the available tool capabilities")

    return parser


def _run(args: argparse.Namespace, settings: OrchestratorConfig, console: Console) -> int:
    workflow = load_workflow_config(args.config)
    orchestrator = Orchestrator(settings)

    reporter = ConsoleReporter(console)
    sink: ReportingSink = NullSink() if args.quiet else reporter
    context = ContextStore(args.user_input)

    try:
        asyncio.run(orchestrator.run(workflow, args.user_input, context=context, reporter=sink))
    except ExecutionError as e:
        logger.error(
            "Workflow execution failed",
            extra={"agent_id": e.agent_id, "completed_agents": len(context)},
        )
        reporter.print_error(e, "Execution Error")
        reporter.print_execution_summary(context)
        return 1

    if args.quiet:
        console.print(context.final_output() or "", markup=False, highlight=False)
    else:
        reporter.print_final_output(context)

    if args.graphs:
        snapshot = context.snapshot()
        for graph in (
            build_execution_graph(snapshot.timeline),
            build_context_graph(snapshot),
            build_timing_graph(snapshot.timeline),
        ):
            console.print()
            console.print(graph, markup=False, highlight=False)

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = OrchestratorConfig()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    if getattr(args, "provider", None):
        settings.llm = settings.llm.model_copy(update={"provider": args.provider})

    configure_logging(settings.log_level, debug=settings.debug)
    console = Console()

    try:
        if args.command == "run":
            return _run(args, settings, console)

        if args.command == "validate":
            workflow = load_workflow_config(args.config)
            print(
                f"Workflow OK: {len(workflow.agents)} agents, "
                f"{len(workflow.workflow.steps)} steps"
            )
            return 0

        if args.command == "tools":
            for tool, description in TOOL_DESCRIPTIONS.items():
                print(f"{tool.value:<12} {description}")
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except ConfigurationError as e:
        logger.error("Configuration error", extra={"error": str(e)})
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
