"""Tests for tool dispatch and the uniform error envelope.

dispatch() must never raise: every failure path comes back as a ToolResult
with is_error set, so the server stays up for the next request.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
from slack_sdk.errors import SlackApiError

from slack_notifications.tools.dispatcher import dispatch


def _make_slack_api_error(error_code: str) -> SlackApiError:
    """Build a SlackApiError with a mock response carrying the given error code."""
    resp = MagicMock()
    resp.get = MagicMock(
        side_effect=lambda key, default="": error_code if key == "error" else default,
    )
    resp.__getitem__ = MagicMock(
        side_effect=lambda key: error_code if key == "error" else None,
    )
    return SlackApiError(message=f"slack error: {error_code}", response=resp)


async def test_unknown_tool(context):
    result = await dispatch(context, "delete_workspace", {})

    assert result.is_error is True
    assert result.text == "Unknown tool: delete_workspace"


async def test_routes_to_handler(context, slack_client: AsyncMock):
    slack_client.conversations_list.return_value = {"channels": [{"id": "C1", "name": "builds"}]}

    result = await dispatch(context, "list_channels", {"limit": 5})

    assert result.is_error is False
    assert json.loads(result.text)["channels"][0]["id"] == "C1"
    slack_client.conversations_list.assert_awaited_once_with(
        types="public_channel,private_channel", limit=5
    )


async def test_none_arguments_use_defaults(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {"messages": []}

    await dispatch(context, "get_channel_messages", None)

    slack_client.conversations_history.assert_awaited_once_with(channel="C0BUILDS01", limit=10)


async def test_limit_is_clamped_not_rejected(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {"messages": []}

    result = await dispatch(context, "get_channel_messages", {"limit": 10_000})

    assert result.is_error is False
    slack_client.conversations_history.assert_awaited_once_with(channel="C0BUILDS01", limit=100)


async def test_invalid_argument_type(context, slack_client: AsyncMock):
    result = await dispatch(context, "list_channels", {"limit": {"bad": True}})

    assert result.is_error is True
    assert "invalid arguments for list_channels" in result.text
    assert "limit" in result.text
    slack_client.conversations_list.assert_not_called()


async def test_missing_required_argument(context, slack_client: AsyncMock):
    result = await dispatch(context, "search_messages", {})

    assert result.is_error is True
    assert result.text == "Error: query parameter is required"
    slack_client.search_messages.assert_not_called()


async def test_check_build_status_without_channel_is_soft_error(unconfigured_context):
    result = await dispatch(unconfigured_context, "check_build_status", {"limit": 3})

    assert result.is_error is True
    assert "SLACK_BUILD_CHANNEL_ID" in result.text


async def test_slack_api_error_becomes_envelope(context, slack_client: AsyncMock):
    slack_client.chat_postMessage.side_effect = _make_slack_api_error("channel_not_found")

    result = await dispatch(context, "send_message", {"text": "hello"})

    assert result.is_error is True
    assert result.text.startswith("Slack API error: ")
    assert "channel_not_found" in result.text


async def test_network_failure_becomes_envelope(context, slack_client: AsyncMock):
    slack_client.conversations_history.side_effect = aiohttp.ClientConnectionError("connection reset")

    result = await dispatch(context, "check_build_status", {})

    assert result.is_error is True
    assert result.text == "Slack API error: connection reset"


async def test_dispatch_keeps_serving_after_failure(context, slack_client: AsyncMock):
    slack_client.conversations_list.side_effect = [
        RuntimeError("boom"),
        {"channels": []},
    ]

    first = await dispatch(context, "list_channels", {})
    second = await dispatch(context, "list_channels", {})

    assert first.is_error is True
    assert second.is_error is False
    assert json.loads(second.text) == {"channels": []}
