"""Data models for Slack input and parsed build notifications."""

from slack_notifications.models.build import (
    AttachmentSummary,
    BuildStatus,
    Duration,
    ParsedBuild,
)
from slack_notifications.models.slack import Attachment, RawMessage

__all__ = [
    "Attachment",
    "RawMessage",
    "AttachmentSummary",
    "BuildStatus",
    "Duration",
    "ParsedBuild",
]
