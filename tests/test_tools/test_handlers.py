"""Tests for the individual tool handlers against a mocked Slack client."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from slack_notifications.tools import handlers
from slack_notifications.tools.arguments import (
    CheckBuildStatusArgs,
    GetChannelMessagesArgs,
    ListChannelsArgs,
    SearchMessagesArgs,
    SendMessageArgs,
)

BUILD_CHANNEL = "C0BUILDS01"  # matches the context fixture


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


# -- check_build_status --


async def test_check_build_status_requires_build_channel(unconfigured_context, slack_client):
    result = await handlers.check_build_status(unconfigured_context, CheckBuildStatusArgs())

    assert result.is_error is True
    assert "SLACK_BUILD_CHANNEL_ID not configured" in result.text
    slack_client.conversations_history.assert_not_called()


async def test_check_build_status_returns_builds(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {
        "messages": [{"ts": "1700000000.123456", "text": "Nutri-E build succeeded"}],
    }

    result = await handlers.check_build_status(context, CheckBuildStatusArgs(limit=2))

    slack_client.conversations_history.assert_awaited_once_with(channel=BUILD_CHANNEL, limit=2)
    payload = json.loads(result.text)
    assert payload["count"] == 1
    assert payload["builds"][0]["timestamp"] == "2023-11-14T22:13:20.123Z"
    assert payload["builds"][0]["status"] == "succeeded"


async def test_check_build_status_empty_channel_message(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {"messages": []}

    result = await handlers.check_build_status(context, CheckBuildStatusArgs())

    assert result.is_error is False
    assert result.text == "No build messages found in the channel."


# -- get_channel_messages --


async def test_get_channel_messages_uses_explicit_channel(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {
        "messages": [
            {"ts": "1700000000.123456", "user": "U1", "text": "x" * 800},
            {"ts": "1700000001.000000", "bot_id": "B1", "text": "Build failed"},
        ]
    }

    result = await handlers.get_channel_messages(
        context, GetChannelMessagesArgs(channel_id="C_OTHER", limit=2)
    )

    slack_client.conversations_history.assert_awaited_once_with(channel="C_OTHER", limit=2)
    messages = json.loads(result.text)["messages"]
    assert messages[0] == {
        "timestamp": "2023-11-14T22:13:20.123Z",
        "user": "U1",
        "text": "x" * 500,
        "bot_id": None,
    }
    assert messages[1]["bot_id"] == "B1"


async def test_get_channel_messages_defaults_to_build_channel(context, slack_client: AsyncMock):
    slack_client.conversations_history.return_value = {"messages": []}

    await handlers.get_channel_messages(context, GetChannelMessagesArgs())

    slack_client.conversations_history.assert_awaited_once_with(channel=BUILD_CHANNEL, limit=10)


async def test_get_channel_messages_without_any_channel(unconfigured_context, slack_client):
    result = await handlers.get_channel_messages(unconfigured_context, GetChannelMessagesArgs())

    assert result.is_error is True
    assert "No channel_id provided" in result.text
    slack_client.conversations_history.assert_not_called()


# -- search_messages --


async def test_search_requires_query(context, slack_client: AsyncMock):
    result = await handlers.search_messages(context, SearchMessagesArgs())

    assert result.is_error is True
    assert result.text == "Error: query parameter is required"
    slack_client.search_messages.assert_not_called()


async def test_search_returns_matches(context, slack_client: AsyncMock):
    slack_client.search_messages.return_value = {
        "messages": {
            "total": 42,
            "matches": [
                {
                    "ts": "1700000000.123456",
                    "channel": {"id": "C1", "name": "builds"},
                    "text": "Nutri-E build failed",
                    "user": "U1",
                }
            ],
        }
    }

    result = await handlers.search_messages(
        context, SearchMessagesArgs(query="build failed", limit=3)
    )

    slack_client.search_messages.assert_awaited_once_with(
        query="build failed", count=3, sort="timestamp", sort_dir="desc"
    )
    payload = json.loads(result.text)
    assert payload["total"] == 42
    assert payload["results"] == [
        {
            "timestamp": "2023-11-14T22:13:20.123Z",
            "channel": "builds",
            "text": "Nutri-E build failed",
            "user": "U1",
        }
    ]


async def test_search_without_results(context, slack_client: AsyncMock):
    slack_client.search_messages.return_value = {"ok": True}

    result = await handlers.search_messages(context, SearchMessagesArgs(query="nothing"))

    assert json.loads(result.text) == {"results": [], "total": 0}


async def test_search_missing_scope_is_explained(context, slack_client: AsyncMock):
    slack_client.search_messages.side_effect = _make_slack_api_error("missing_scope")

    result = await handlers.search_messages(context, SearchMessagesArgs(query="build"))

    assert result.is_error is True
    assert "search:read" in result.text


async def test_search_other_slack_errors_propagate(context, slack_client: AsyncMock):
    error = _make_slack_api_error("invalid_auth")
    slack_client.search_messages.side_effect = error

    with pytest.raises(SlackApiError):
        await handlers.search_messages(context, SearchMessagesArgs(query="build"))


# -- send_message --


async def test_send_message_posts_to_build_channel(context, slack_client: AsyncMock):
    slack_client.chat_postMessage.return_value = {
        "ok": True,
        "ts": "1700000000.123456",
        "channel": BUILD_CHANNEL,
    }

    result = await handlers.send_message(context, SendMessageArgs(text="Deploying now"))

    slack_client.chat_postMessage.assert_awaited_once_with(
        channel=BUILD_CHANNEL, text="Deploying now"
    )
    assert json.loads(result.text) == {
        "success": True,
        "timestamp": "1700000000.123456",
        "channel": BUILD_CHANNEL,
    }


async def test_send_message_requires_text(context, slack_client: AsyncMock):
    result = await handlers.send_message(context, SendMessageArgs(channel_id="C1"))

    assert result.is_error is True
    assert result.text == "Error: text parameter is required"
    slack_client.chat_postMessage.assert_not_called()


async def test_send_message_without_any_channel(unconfigured_context, slack_client):
    result = await handlers.send_message(unconfigured_context, SendMessageArgs(text="hi"))

    assert result.is_error is True
    slack_client.chat_postMessage.assert_not_called()


# -- list_channels --


async def test_list_channels(context, slack_client: AsyncMock):
    slack_client.conversations_list.return_value = {
        "channels": [
            {
                "id": "C1",
                "name": "builds",
                "is_private": False,
                "is_member": True,
                "topic": {"value": "t" * 150},
            },
            {"id": "C2", "name": "secret", "is_private": True, "is_member": False},
        ]
    }

    result = await handlers.list_channels(context, ListChannelsArgs(limit=500))

    slack_client.conversations_list.assert_awaited_once_with(
        types="public_channel,private_channel", limit=200
    )
    channels = json.loads(result.text)["channels"]
    assert channels[0]["topic"] == "t" * 100
    assert channels[1] == {
        "id": "C2",
        "name": "secret",
        "is_private": True,
        "is_member": False,
        "topic": None,
    }
