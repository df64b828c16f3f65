"""MCP stdio server exposing the Slack tools.

Startup reads settings once, configures logging to stderr, and exits with
status 1 when SLACK_BOT_TOKEN is missing. SLACK_BUILD_CHANNEL_ID is
optional; tools that need it return an error result when it is absent.
"""

import asyncio
import logging
import sys
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from slack_notifications import __version__
from slack_notifications.config import get_settings
from slack_notifications.logging_config import configure_logging
from slack_notifications.slack.client import create_slack_client
from slack_notifications.tools import TOOLS, ServerContext, dispatch

logger = logging.getLogger(__name__)

SERVER_NAME = "slack-notifications"


def build_server(context: ServerContext) -> Server:
    """Create the MCP server with tools/list and tools/call handlers bound to context."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return TOOLS

    # Arguments are validated and clamped by the dispatcher, not the SDK.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        logger.info("Tool call %s", name)
        logger.debug("Tool call %s arguments: %s", name, arguments)
        result = await dispatch(context, name, arguments)
        return result.to_call_tool_result()

    return server


async def serve(context: ServerContext) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    server = build_server(context)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Slack Notifications MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.slack_bot_token:
        logger.critical("SLACK_BOT_TOKEN environment variable is required")
        sys.exit(1)
    if settings.default_channel_id is None:
        logger.warning("SLACK_BUILD_CHANNEL_ID not set; check_build_status will be unavailable")

    context = ServerContext(
        client=create_slack_client(settings),
        default_channel_id=settings.default_channel_id,
    )
    try:
        asyncio.run(serve(context))
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
