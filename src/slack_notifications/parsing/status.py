"""Keyword-based build status classification."""

from slack_notifications.models.build import BuildStatus

# Checked in order, first group with a hit wins. A message saying both
# "started" and "failed" is a failure, so failed must precede running.
STATUS_KEYWORDS: tuple[tuple[BuildStatus, tuple[str, ...]], ...] = (
    (BuildStatus.SUCCEEDED, ("succeeded", "success")),
    (BuildStatus.FAILED, ("failed", "failure")),
    (BuildStatus.RUNNING, ("started", "running")),
    (BuildStatus.CANCELLED, ("cancelled", "canceled")),
)


def classify_status(text: str) -> BuildStatus:
    """Classify message text into a build status. Defaults to UNKNOWN."""
    lowered = text.lower()
    for status, keywords in STATUS_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return status
    return BuildStatus.UNKNOWN
