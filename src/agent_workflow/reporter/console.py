"""Rich-based terminal rendering of workflow progress."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from agent_workflow.context.store import ContextStore, TimelineEntry
from agent_workflow.workflow.events import ExecutionEvent, ExecutionEventType


class ConsoleReporter:
    """Renders execution events as they are emitted.

    Args:
        console: Target console; defaults to stdout.
        show_outputs: Print each agent's output when it completes.
    """

    def __init__(self, console: Console | None = None, *, show_outputs: bool = True) -> None:
        self.console = console or Console()
        self.show_outputs = show_outputs

    def emit(self, event: ExecutionEvent) -> None:
        payload = event.payload

        if event.type is ExecutionEventType.WORKFLOW_STARTED:
            self.console.print(Rule("[bold cyan]🚀 Starting Workflow Execution"))
            if payload.get("user_input"):
                self.console.print(f"[dim]User Input:[/dim] {escape(str(payload['user_input']))}")
            self.console.print()

        elif event.type is ExecutionEventType.AGENT_STARTED:
            self.console.print(
                f"[yellow]▶[/yellow] [bold]{escape(str(payload['role']))}[/bold] "
                f"[bright_black]({escape(str(payload['agent_id']))})[/bright_black]"
            )
            self.console.print("[bright_black]  Executing...[/bright_black]")

        elif event.type is ExecutionEventType.AGENT_COMPLETED:
            entry = payload["entry"]
            assert isinstance(entry, TimelineEntry)
            self._print_agent_complete(entry)

        elif event.type is ExecutionEventType.PARALLEL_STARTED:
            branches = payload["branches"]
            assert isinstance(branches, list)
            self.console.print(
                f"[magenta]⚡[/magenta] [bold]Parallel Execution[/bold] "
                f"[bright_black]({len(branches)} branches)[/bright_black]"
            )
            self.console.print(
                f"[bright_black]  Running: {escape(', '.join(branches))}[/bright_black]"
            )
            self.console.print()

        elif event.type is ExecutionEventType.PARALLEL_COMPLETED:
            self.console.print(
                f"[green]✓[/green] [bold]Parallel branches completed[/bold] "
                f"[bright_black]({payload['count']} agents in {payload['duration_ms']}ms)"
                "[/bright_black]"
            )
            self.console.print()

        elif event.type is ExecutionEventType.AGGREGATOR_STARTED:
            self.console.print(
                f"[blue]◆[/blue] [bold]Aggregator: {escape(str(payload['role']))}[/bold] "
                f"[bright_black]({escape(str(payload['agent_id']))})[/bright_black]"
            )
            self.console.print("[bright_black]  Consolidating results...[/bright_black]")

        elif event.type is ExecutionEventType.AGENT_FAILED:
            agent_id = escape(str(payload.get("agent_id") or "agent"))
            self.console.print(f"[bold red]✗[/bold red] [bold]{agent_id}[/bold] failed")

        elif event.type is ExecutionEventType.WORKFLOW_COMPLETED:
            self.console.print(
                f"[bright_black]{payload['agent_count']} agents in "
                f"{payload['duration_ms']}ms[/bright_black]"
            )

    def _print_agent_complete(self, entry: TimelineEntry) -> None:
        self.console.print(
            f"[green]✓[/green] [bold]{escape(entry.role)}[/bold] "
            f"[bright_black]completed in {entry.duration_ms}ms[/bright_black]"
        )
        if self.show_outputs:
            self.console.print()
            self.console.print("[dim]Output:[/dim]")
            self.console.print(Text(_indent(entry.output)))
        self.console.print()

    def print_final_output(self, context: ContextStore) -> None:
        final = context.final_output()
        self.console.print()
        self.console.print(
            Panel(
                Text(final) if final is not None else Text("No output generated.", style="dim"),
                title="✨ Final Output",
                title_align="left",
                border_style="green",
            )
        )
        self.print_execution_summary(context)

    def print_execution_summary(self, context: ContextStore) -> None:
        timeline = context.timeline
        self.console.print(Rule("Execution Summary", style="bright_black"))

        if not timeline:
            self.console.print("No agents executed.")
            return

        total_ms = timeline[-1].ended_at - timeline[0].started_at
        self.console.print(f"[dim]Total Agents:[/dim] {len(timeline)}")
        self.console.print(f"[dim]Total Time:[/dim] {total_ms}ms")

        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Agent")
        table.add_column("Role")
        table.add_column("Duration", justify="right")
        for index, entry in enumerate(timeline, start=1):
            table.add_row(
                str(index), escape(entry.agent_id), escape(entry.role), f"{entry.duration_ms}ms"
            )
        self.console.print(table)

    def print_error(self, error: BaseException, kind: str) -> None:
        self.console.print()
        self.console.print(f"[bold red]❌ {kind}[/bold red]")
        self.console.print(Text(str(error)))


def _indent(output: str) -> str:
    return "\n".join(f"  {line}" for line in output.split("\n"))
