"""Raw Slack message -> ParsedBuild normalization."""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from slack_notifications.models.build import AttachmentSummary, ParsedBuild
from slack_notifications.models.slack import Attachment, RawMessage
from slack_notifications.parsing.duration import extract_duration
from slack_notifications.parsing.status import classify_status
from slack_notifications.parsing.workflow import extract_workflow

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 500
MAX_ATTACHMENT_TEXT_LENGTH = 200

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate(value: str | None, length: int) -> str | None:
    """Return the first ``length`` characters of value. None passes through."""
    return value[:length] if value is not None else None


def slack_ts_to_iso(ts: str) -> str | None:
    """Convert a Slack ``ts`` ("1700000000.123456") to ISO-8601 UTC.

    Precision is milliseconds: the microsecond digits past the third are
    dropped, so "1700000000.123456" becomes "2023-11-14T22:13:20.123Z".
    Returns None when ts is not a finite number.
    """
    try:
        seconds = Decimal(ts.strip())
    except (AttributeError, InvalidOperation):
        logger.debug("Unparseable Slack timestamp: %r", ts)
        return None
    if not seconds.is_finite():
        logger.debug("Non-finite Slack timestamp: %r", ts)
        return None

    millis = int((seconds * 1000).to_integral_value(rounding=ROUND_DOWN))
    try:
        moment = _EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        logger.debug("Slack timestamp out of range: %r", ts)
        return None
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def attachment_text(attachments: Sequence[Attachment | AttachmentSummary] | None) -> str:
    """Join attachments as "title text" pairs separated by spaces."""
    if not attachments:
        return ""
    return " ".join(f"{a.title or ''} {a.text or ''}" for a in attachments)


def searchable_text(text: str, attachments: Sequence[Attachment] | None) -> str:
    """Body text followed by every attachment's title and text."""
    return f"{text} {attachment_text(attachments)}"


def summarize_attachments(attachments: Sequence[Attachment] | None) -> list[AttachmentSummary] | None:
    if attachments is None:
        return None
    return [
        AttachmentSummary(
            title=a.title,
            text=truncate(a.text, MAX_ATTACHMENT_TEXT_LENGTH),
            color=a.color,
        )
        for a in attachments
    ]


def parse_build_message(message: RawMessage) -> ParsedBuild:
    """Build a ParsedBuild from one Slack message.

    Status is classified from the body alone. Workflow and duration are
    searched in the body plus attachment titles and texts, since CI bots
    often put the workflow name in the attachment title.

    Never raises on unexpected text: fields that cannot be extracted fall
    back to UNKNOWN / None.
    """
    text = message.text
    combined = searchable_text(text, message.attachments)

    return ParsedBuild(
        timestamp=slack_ts_to_iso(message.ts),
        status=classify_status(text),
        workflow=extract_workflow(combined, message.attachments),
        duration=extract_duration(combined),
        text=text[:MAX_TEXT_LENGTH],
        attachments=summarize_attachments(message.attachments),
    )
