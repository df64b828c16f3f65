"""Parsed build notification models and the build status enum."""

from enum import Enum

from pydantic import BaseModel, Field


class BuildStatus(str, Enum):
    """Outcome of a CI run as inferred from the notification text."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    RUNNING = "running"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class Duration(BaseModel):
    """Elapsed build time scraped from message text."""

    minutes: int
    seconds: int
    total_seconds: int = Field(serialization_alias="totalSeconds")
    formatted: str  # "5m 30s", or "45s" when under a minute

    @classmethod
    def from_parts(cls, minutes: int, seconds: int) -> "Duration":
        formatted = f"{minutes}m {seconds}s" if minutes > 0 else f"{seconds}s"
        return cls(
            minutes=minutes,
            seconds=seconds,
            total_seconds=minutes * 60 + seconds,
            formatted=formatted,
        )


class AttachmentSummary(BaseModel):
    """Attachment as echoed back to the agent, text truncated."""

    title: str | None = None
    text: str | None = None  # At most 200 characters
    color: str | None = None


class ParsedBuild(BaseModel):
    """One build notification after normalization. Never persisted."""

    timestamp: str | None  # ISO-8601 UTC, millisecond precision
    status: BuildStatus
    workflow: str | None = None
    duration: Duration | None = None
    text: str  # At most 500 characters
    attachments: list[AttachmentSummary] | None = None
