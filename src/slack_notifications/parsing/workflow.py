"""Workflow name extraction for CI notifications.

The extractors run in declared order and the first non-empty result wins.
The capitalized-words rule is a heuristic and can pick up unrelated leading
phrases such as "Release Notes build".
"""

import re
from collections.abc import Callable, Sequence

from slack_notifications.models.slack import Attachment

# "Workflow: Nutri-E" -- name ends at a newline, comma, or a trailing
# "build"/"workflow" word
EXPLICIT_WORKFLOW_PATTERN = re.compile(
    r"workflow[:\s]+([^\n\r,]+?)(?=\s+(?:build|workflow)\b|[\n\r,]|$)",
    re.IGNORECASE,
)

# "Cuti-E Admin build succeeded" -- leading Capitalized words before the keyword
LEADING_NAME_PATTERN = re.compile(
    r"^([A-Z][a-zA-Z0-9-]+(?:\s+[A-Z][a-zA-Z0-9-]+)*)\s+(?i:build|workflow)"
)

MAX_TITLE_LENGTH = 50


def _from_pattern(pattern: re.Pattern[str]) -> Callable[[str, Sequence[Attachment]], str | None]:
    def extract(text: str, _attachments: Sequence[Attachment]) -> str | None:
        match = pattern.search(text)
        return match.group(1).strip() if match else None

    return extract


def _from_first_attachment_title(_text: str, attachments: Sequence[Attachment]) -> str | None:
    if not attachments:
        return None
    title = attachments[0].title
    if title and len(title) < MAX_TITLE_LENGTH:
        return title
    return None


WORKFLOW_EXTRACTORS: tuple[Callable[[str, Sequence[Attachment]], str | None], ...] = (
    _from_pattern(EXPLICIT_WORKFLOW_PATTERN),
    _from_pattern(LEADING_NAME_PATTERN),
    _from_first_attachment_title,
)


def extract_workflow(text: str, attachments: Sequence[Attachment] | None = None) -> str | None:
    """Return the workflow name for a notification, or None.

    Args:
        text: Message body combined with attachment titles and texts.
        attachments: The message's attachments, used for the title fallback.
    """
    for extractor in WORKFLOW_EXTRACTORS:
        workflow = extractor(text, attachments or ())
        if workflow:
            return workflow
    return None
