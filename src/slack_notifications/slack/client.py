"""Async Slack client construction.

The client is created once in ``main()`` from the startup settings and
handed to the tool handlers through ``ServerContext``. Auth, rate limiting
and transport concerns stay inside slack_sdk.
"""

from slack_sdk.web.async_client import AsyncWebClient

from slack_notifications.config import Settings


def create_slack_client(settings: Settings) -> AsyncWebClient:
    """Return an AsyncWebClient authenticated with the bot token from settings."""
    return AsyncWebClient(token=settings.slack_bot_token)


def slack_error_code(exc: Exception) -> str:
    """Return the Slack ``error`` code carried by a SlackApiError, or ""."""
    response = getattr(exc, "response", None)
    return response.get("error", "") if response else ""
