"""Tool call routing.

``dispatch`` is the only entry point for tool invocations. It never raises:
unknown tools, invalid arguments, Slack API failures and unexpected
exceptions all come back as error results so the server keeps serving.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError
from slack_sdk.errors import SlackApiError

from slack_notifications.slack.client import slack_error_code
from slack_notifications.tools import handlers
from slack_notifications.tools.arguments import (
    CheckBuildStatusArgs,
    GetChannelMessagesArgs,
    ListChannelsArgs,
    SearchMessagesArgs,
    SendMessageArgs,
    ToolArguments,
)
from slack_notifications.tools.envelope import ServerContext, ToolResult

logger = logging.getLogger(__name__)

ToolHandler = Callable[[ServerContext, Any], Awaitable[ToolResult]]

TOOL_HANDLERS: dict[str, tuple[type[ToolArguments], ToolHandler]] = {
    "check_build_status": (CheckBuildStatusArgs, handlers.check_build_status),
    "get_channel_messages": (GetChannelMessagesArgs, handlers.get_channel_messages),
    "search_messages": (SearchMessagesArgs, handlers.search_messages),
    "send_message": (SendMessageArgs, handlers.send_message),
    "list_channels": (ListChannelsArgs, handlers.list_channels),
}


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


async def dispatch(
    context: ServerContext, name: str, arguments: dict[str, Any] | None
) -> ToolResult:
    """Validate arguments, run the named tool, and wrap the outcome.

    Args:
        context: Shared server context (Slack client, default channel).
        name: Tool name from the tools/call request.
        arguments: Raw JSON arguments, may be None.

    Returns:
        A ToolResult; ``is_error`` is set for every failure path.
    """
    entry = TOOL_HANDLERS.get(name)
    if entry is None:
        logger.warning("Unknown tool requested: %s", name)
        return ToolResult.error(f"Unknown tool: {name}")

    model, handler = entry
    try:
        args = model.model_validate(arguments or {})
    except ValidationError as exc:
        logger.info("Invalid arguments for %s: %s", name, exc.error_count())
        return ToolResult.error(
            f"Error: invalid arguments for {name}: {_describe_validation_error(exc)}"
        )

    try:
        result = await handler(context, args)
    except SlackApiError as exc:
        logger.warning(
            "Slack API call failed in %s: %s", name, slack_error_code(exc)
        )
        return ToolResult.error(f"Slack API error: {exc}")
    except Exception as exc:
        logger.exception("Unhandled exception in tool %s", name)
        return ToolResult.error(f"Slack API error: {exc}")

    if result.is_error:
        logger.info("Tool %s returned error: %s", name, result.text)
    return result
