#!/usr/bin/env python3
"""Programmatic workflow run example.

This demonstrates using the orchestrator components directly:

* load settings from `.env`
* load and validate `workflow.yaml`
* run it once, printing progress with the console reporter

Runs offline with ``--provider mock``.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Sequence

from agent_workflow.core.config import OrchestratorConfig
from agent_workflow.core.orchestrator import Orchestrator
from agent_workflow.errors import ExecutionError
from agent_workflow.logging import configure_logging
from agent_workflow.reporter.console import ConsoleReporter
from agent_workflow.workflow.loader import load_workflow_config


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the example workflow.")
    parser.add_argument("input", help="User input for the workflow")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(__file__).with_name("workflow.yaml"),
        help="Workflow file (defaults to the one next to this script)",
    )
    parser.add_argument("--provider", choices=["gemini", "openai", "mock"], default=None)
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    settings = OrchestratorConfig()
    if args.provider:
        settings.llm = settings.llm.model_copy(update={"provider": args.provider})
    configure_logging(settings.log_level)

    workflow = load_workflow_config(args.config)
    reporter = ConsoleReporter(show_outputs=False)
    orchestrator = Orchestrator(settings)

    try:
        context = await orchestrator.run(workflow, args.input, reporter=reporter)
    except ExecutionError as exc:
        print(f"Agent {exc.agent_id} failed: {exc.__cause__}")
        return 1

    reporter.print_final_output(context)
    print(f"Rate limiter: {orchestrator.rate_limiter.stats()}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    return asyncio.run(_run(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
