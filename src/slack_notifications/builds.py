"""Build status lookup: fetch, parse, filter and limit build notifications.

When a workflow filter is given, more messages are fetched than requested
(up to 4x, capped at 100) since most of a shared build channel will belong
to other workflows. Results keep Slack's newest-first order.
"""

import logging
from collections.abc import Iterable

from slack_sdk.web.async_client import AsyncWebClient

from slack_notifications.models.build import ParsedBuild
from slack_notifications.models.slack import RawMessage
from slack_notifications.parsing.normalizer import attachment_text, parse_build_message

logger = logging.getLogger(__name__)

OVERFETCH_FACTOR = 4
MAX_FETCH = 100

NO_BUILDS_MESSAGE = "No build messages found in the channel."


def fetch_limit(limit: int, workflow_filter: str | None) -> int:
    """Number of raw messages to request for ``limit`` results."""
    if workflow_filter:
        return min(limit * OVERFETCH_FACTOR, MAX_FETCH)
    return limit


def matches_workflow(build: ParsedBuild, workflow_filter: str) -> bool:
    """Case-insensitive substring match on workflow, text, or attachments."""
    needle = workflow_filter.lower()
    haystacks = (
        (build.workflow or "").lower(),
        build.text.lower(),
        attachment_text(build.attachments).lower(),
    )
    return any(needle in haystack for haystack in haystacks)


def filter_builds(
    builds: Iterable[ParsedBuild], workflow_filter: str | None, limit: int
) -> list[ParsedBuild]:
    """Apply the optional workflow filter, then keep the first ``limit`` builds."""
    if workflow_filter:
        builds = [b for b in builds if matches_workflow(b, workflow_filter)]
    return list(builds)[:limit]


async def check_build_status(
    client: AsyncWebClient,
    channel_id: str,
    limit: int,
    workflow: str | None = None,
) -> dict | str:
    """Fetch recent build notifications from a channel and parse them.

    Args:
        client: Slack client.
        channel_id: Build notification channel.
        limit: Maximum number of builds to return (already clamped).
        workflow: Optional case-insensitive workflow name filter.

    Returns:
        Dict with keys: builds, filter, count. Returns a plain message
        string when the channel has no messages at all.
    """
    result = await client.conversations_history(
        channel=channel_id,
        limit=fetch_limit(limit, workflow),
    )
    raw_messages = result.get("messages") or []
    if not raw_messages:
        return NO_BUILDS_MESSAGE

    parsed = [parse_build_message(RawMessage.model_validate(m)) for m in raw_messages]
    builds = filter_builds(parsed, workflow, limit)

    logger.info(
        "Parsed %d build message(s) from %s, returning %d (filter=%r)",
        len(parsed),
        channel_id,
        len(builds),
        workflow,
    )

    return {
        "builds": [b.model_dump(mode="json", by_alias=True) for b in builds],
        "filter": {"workflow": workflow} if workflow else None,
        "count": len(builds),
    }
