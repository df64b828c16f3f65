"""Slack Web API access."""

from slack_notifications.slack.client import create_slack_client, slack_error_code

__all__ = [
    "create_slack_client",
    "slack_error_code",
]
