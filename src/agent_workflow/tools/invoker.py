"""Tool capability layer.

Tools are capability indicators attached to agents. Each name maps to a fixed,
simulated implementation; names are resolved once, when the workflow file is
validated. Invocation is deterministic and follows declaration order.

The layer is not wired into prompt construction.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from agent_workflow.context.store import ContextSnapshot
from agent_workflow.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    SQL = "sql"
    SHELL = "shell"
    HTTP = "http"
    RUST = "rust"
    JAVA = "java"
    CPP = "cpp"


@dataclass(frozen=True, slots=True)
class ToolInvocationContext:
    """What a tool may look at: the user input and earlier agent outputs."""

    user_input: str
    previous_outputs: tuple[tuple[str, str, str], ...] = ()

    @classmethod
    def from_snapshot(cls, snapshot: ContextSnapshot) -> ToolInvocationContext:
        return cls(
            user_input=snapshot.user_input,
            previous_outputs=tuple(
                (entry.agent_id, entry.role, entry.output) for entry in snapshot.timeline
            ),
        )


@dataclass(frozen=True, slots=True)
class ToolResult:
    tool_name: ToolName
    output: str
    executed_at: int
    duration_ms: int


def _python(ctx: ToolInvocationContext) -> str:
    return (
        "[Python Analysis]\n"
        f"- Input tokens analyzed: {len(ctx.user_input)}\n"
        f"- Previous outputs processed: {len(ctx.previous_outputs)}\n"
        "- Data processing capability: READY\n"
        "- Statistical analysis: ENABLED"
    )


def _javascript(ctx: ToolInvocationContext) -> str:
    state = "POPULATED" if ctx.previous_outputs else "INITIAL"
    return (
        "[JavaScript Runtime]\n"
        f"- Execution timestamp: {int(time.time() * 1000)}\n"
        f"- Context state: {state}\n"
        "- Computation engine: ACTIVE\n"
        "- Logic processing: READY"
    )


def _sql(ctx: ToolInvocationContext) -> str:
    return (
        "[SQL Query Engine]\n"
        f"- Available data rows: {len(ctx.previous_outputs)}\n"
        "- Query optimizer: ENABLED\n"
        "- Index status: READY\n"
        "- Aggregation functions: AVAILABLE"
    )


def _shell(_ctx: ToolInvocationContext) -> str:
    return (
        "[Shell Executor]\n"
        "- Environment: INITIALIZED\n"
        "- Working directory: /workspace\n"
        "- Command processor: READY\n"
        "- Exit code handling: ENABLED"
    )


def _http(_ctx: ToolInvocationContext) -> str:
    return (
        "[HTTP Client]\n"
        "- Protocol: HTTP/1.1\n"
        "- Connection pool: READY\n"
        "- Request builder: INITIALIZED\n"
        "- Response parser: ACTIVE"
    )


def _rust(_ctx: ToolInvocationContext) -> str:
    return (
        "[Rust Compiler]\n"
        "- Memory safety: GUARANTEED\n"
        "- Zero-cost abstractions: ENABLED\n"
        "- Ownership checker: ACTIVE\n"
        "- Performance mode: OPTIMIZED"
    )


def _java(_ctx: ToolInvocationContext) -> str:
    return (
        "[Java Virtual Machine]\n"
        "- JVM version: 17 LTS\n"
        "- Garbage collector: G1GC\n"
        "- Class loader: READY\n"
        "- Thread pool: INITIALIZED"
    )


def _cpp(_ctx: ToolInvocationContext) -> str:
    return (
        "[C++ Runtime]\n"
        "- Compiler: GCC 11.0\n"
        "- Optimization level: O3\n"
        "- Standard library: LOADED\n"
        "- Template engine: ACTIVE"
    )


TOOL_DESCRIPTIONS: dict[ToolName, str] = {
    ToolName.PYTHON: "Python-style data processing and analysis",
    ToolName.JAVASCRIPT: "JavaScript-style computation and logic",
    ToolName.SQL: "SQL-style data querying and aggregation",
    ToolName.SHELL: "Shell-style command execution",
    ToolName.HTTP: "HTTP-style request handling",
    ToolName.RUST: "Rust-style safe computation",
    ToolName.JAVA: "Java-style object-oriented processing",
    ToolName.CPP: "C++ high-performance computation",
}

_IMPLEMENTATIONS: dict[ToolName, Callable[[ToolInvocationContext], str]] = {
    ToolName.PYTHON: _python,
    ToolName.JAVASCRIPT: _javascript,
    ToolName.SQL: _sql,
    ToolName.SHELL: _shell,
    ToolName.HTTP: _http,
    ToolName.RUST: _rust,
    ToolName.JAVA: _java,
    ToolName.CPP: _cpp,
}


def resolve_tools(names: Iterable[str]) -> list[ToolName]:
    """Map declared names onto the closed tool set.

    Raises:
        ConfigurationError: If a name is not a known tool.
    """
    resolved: list[ToolName] = []
    for name in names:
        try:
            resolved.append(ToolName(name))
        except ValueError:
            available = ", ".join(t.value for t in ToolName)
            raise ConfigurationError(
                f"Unknown tool: {name!r} (available: {available})"
            ) from None
    return resolved


class ToolInvoker:
    """Runs resolved tools in declaration order."""

    def invoke_tools(
        self, tools: Sequence[ToolName], context: ToolInvocationContext
    ) -> list[ToolResult]:
        results: list[ToolResult] = []
        for tool in tools:
            started = time.monotonic()
            executed_at = int(time.time() * 1000)
            output = _IMPLEMENTATIONS[tool](context)
            duration_ms = int((time.monotonic() - started) * 1000)

            logger.debug("Tool invoked", extra={"tool": tool.value, "duration_ms": duration_ms})
            results.append(
                ToolResult(
                    tool_name=tool,
                    output=output,
                    executed_at=executed_at,
                    duration_ms=duration_ms,
                )
            )
        return results

    @staticmethod
    def format_tool_results(results: Sequence[ToolResult]) -> str:
        """Render tool results as a block suitable for an agent prompt."""
        if not results:
            return ""

        sections = [f"## Tool: {r.tool_name.value}\n{r.output}" for r in results]
        body = "\n\n".join(sections)
        return f"\n\n=== TOOL OUTPUTS ===\n\n{body}\n\n=== END TOOL OUTPUTS ===\n"

    @staticmethod
    def available_tools() -> list[str]:
        return [tool.value for tool in ToolName]
