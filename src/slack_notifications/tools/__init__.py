"""MCP tools: catalogue, argument models, handlers, and dispatch.

Public API:
    TOOLS -- static tool definitions for tools/list
    dispatch(context, name, arguments) -> ToolResult
"""

from slack_notifications.tools.catalogue import TOOLS
from slack_notifications.tools.dispatcher import dispatch
from slack_notifications.tools.envelope import ServerContext, ToolResult

__all__ = [
    "TOOLS",
    "ServerContext",
    "ToolResult",
    "dispatch",
]
