"""Tool capability package."""

from agent_workflow.tools.invoker import (
    TOOL_DESCRIPTIONS,
    ToolInvocationContext,
    ToolInvoker,
    ToolName,
    ToolResult,
    resolve_tools,
)

__all__ = [
    "TOOL_DESCRIPTIONS",
    "ToolInvocationContext",
    "ToolInvoker",
    "ToolName",
    "ToolResult",
    "resolve_tools",
]
