"""Tool handlers: one coroutine per tool.

Each handler receives the server context and its validated arguments and
returns a ToolResult. Validation failures are returned as error results
before Slack is called. Unexpected Slack errors propagate to the
dispatcher, which turns them into error results.
"""

import logging

from slack_sdk.errors import SlackApiError

from slack_notifications import builds
from slack_notifications.parsing.normalizer import MAX_TEXT_LENGTH, slack_ts_to_iso, truncate
from slack_notifications.slack.client import slack_error_code
from slack_notifications.tools.arguments import (
    CheckBuildStatusArgs,
    GetChannelMessagesArgs,
    ListChannelsArgs,
    SearchMessagesArgs,
    SendMessageArgs,
)
from slack_notifications.tools.envelope import ServerContext, ToolResult

logger = logging.getLogger(__name__)

MAX_TOPIC_LENGTH = 100
CHANNEL_TYPES = "public_channel,private_channel"

BUILD_CHANNEL_NOT_CONFIGURED = (
    "Error: SLACK_BUILD_CHANNEL_ID not configured. Please set it in your MCP config."
)
NO_CHANNEL = "Error: No channel_id provided and SLACK_BUILD_CHANNEL_ID not configured."
MISSING_SEARCH_SCOPE = (
    "Error: Bot token missing 'search:read' scope. Add it in your Slack App settings."
)


async def check_build_status(context: ServerContext, args: CheckBuildStatusArgs) -> ToolResult:
    """Latest build notifications from the configured build channel."""
    channel_id = context.default_channel_id
    if not channel_id:
        return ToolResult.error(BUILD_CHANNEL_NOT_CONFIGURED)

    result = await builds.check_build_status(
        context.client, channel_id, args.limit, workflow=args.workflow
    )
    if isinstance(result, str):
        return ToolResult.message(result)
    return ToolResult.ok(result)


async def get_channel_messages(
    context: ServerContext, args: GetChannelMessagesArgs
) -> ToolResult:
    channel_id = context.resolve_channel(args.channel_id)
    if not channel_id:
        return ToolResult.error(NO_CHANNEL)

    result = await context.client.conversations_history(channel=channel_id, limit=args.limit)
    messages = [
        {
            "timestamp": slack_ts_to_iso(msg.get("ts", "")),
            "user": msg.get("user"),
            "text": truncate(msg.get("text"), MAX_TEXT_LENGTH),
            "bot_id": msg.get("bot_id"),
        }
        for msg in result.get("messages") or []
    ]
    return ToolResult.ok({"messages": messages})


async def search_messages(context: ServerContext, args: SearchMessagesArgs) -> ToolResult:
    """Full-text search. Requires the search:read scope on the token."""
    if not args.query:
        return ToolResult.error("Error: query parameter is required")

    try:
        result = await context.client.search_messages(
            query=args.query,
            count=args.limit,
            sort="timestamp",
            sort_dir="desc",
        )
    except SlackApiError as exc:
        if slack_error_code(exc) == "missing_scope":
            logger.warning("search.messages rejected: token lacks search:read scope")
            return ToolResult.error(MISSING_SEARCH_SCOPE)
        raise

    found = result.get("messages") or {}
    matches = [
        {
            "timestamp": slack_ts_to_iso(match.get("ts", "")),
            "channel": (match.get("channel") or {}).get("name"),
            "text": truncate(match.get("text"), MAX_TEXT_LENGTH),
            "user": match.get("user"),
        }
        for match in found.get("matches") or []
    ]
    return ToolResult.ok({"results": matches, "total": found.get("total") or 0})


async def send_message(context: ServerContext, args: SendMessageArgs) -> ToolResult:
    channel_id = context.resolve_channel(args.channel_id)
    if not channel_id:
        return ToolResult.error(NO_CHANNEL)
    if not args.text:
        return ToolResult.error("Error: text parameter is required")

    result = await context.client.chat_postMessage(channel=channel_id, text=args.text)
    logger.info("Posted message to %s (ts=%s)", result.get("channel"), result.get("ts"))
    return ToolResult.ok(
        {
            "success": result.get("ok"),
            "timestamp": result.get("ts"),
            "channel": result.get("channel"),
        }
    )


async def list_channels(context: ServerContext, args: ListChannelsArgs) -> ToolResult:
    result = await context.client.conversations_list(types=CHANNEL_TYPES, limit=args.limit)
    channels = [
        {
            "id": ch.get("id"),
            "name": ch.get("name"),
            "is_private": ch.get("is_private"),
            "is_member": ch.get("is_member"),
            "topic": truncate((ch.get("topic") or {}).get("value"), MAX_TOPIC_LENGTH),
        }
        for ch in result.get("channels") or []
    ]
    return ToolResult.ok({"channels": channels})
