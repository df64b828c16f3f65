"""Elapsed-time extraction from CI notification text.

Xcode Cloud and similar CI bots phrase durations in a handful of ways
("Duration: 4 min 12 sec", "took 3 minutes", "completed in 5 minutes 30
seconds", "12:45"). Each pattern captures minutes in group 1 and seconds in
group 2; either group may be missing.
"""

import re

from slack_notifications.models.build import Duration

_MINUTES = r"(?:min(?:ute)?s?)"
_SECONDS = r"(?:sec(?:ond)?s?)"
_TAIL = rf"\s*{_MINUTES}?(?:\s*(\d+)\s*{_SECONDS}?)?"

# Priority order, first pattern matching anywhere in the text wins
DURATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"duration[:\s]+(\d+){_TAIL}", re.IGNORECASE),
    re.compile(rf"took\s+(\d+){_TAIL}", re.IGNORECASE),
    re.compile(rf"completed\s+in\s+(\d+){_TAIL}", re.IGNORECASE),
    re.compile(rf"(\d+)\s*{_MINUTES}\s*(?:(\d+)\s*{_SECONDS}?)?", re.IGNORECASE),
    re.compile(r"(\d+):(\d+)\s*(?:min)?", re.IGNORECASE),  # MM:SS
)


def _to_int(group: str | None) -> int:
    return int(group) if group else 0


def extract_duration(text: str) -> Duration | None:
    """Return the first duration found in text, or None.

    Args:
        text: Message body combined with attachment titles and texts.
    """
    for pattern in DURATION_PATTERNS:
        match = pattern.search(text)
        if match:
            return Duration.from_parts(_to_int(match.group(1)), _to_int(match.group(2)))
    return None
