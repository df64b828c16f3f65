"""Heuristic parsing of CI build notifications.

Public API:
    parse_build_message(message) -> ParsedBuild
        Classifies status and extracts workflow and duration from one
        Slack message. Never raises on unexpected text.
"""

from slack_notifications.parsing.duration import extract_duration
from slack_notifications.parsing.normalizer import (
    parse_build_message,
    slack_ts_to_iso,
    truncate,
)
from slack_notifications.parsing.status import classify_status
from slack_notifications.parsing.workflow import extract_workflow

__all__ = [
    "classify_status",
    "extract_duration",
    "extract_workflow",
    "parse_build_message",
    "slack_ts_to_iso",
    "truncate",
]
