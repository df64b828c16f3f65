"""Slack message models as returned by the Web API (read-only input)."""

from pydantic import BaseModel, ConfigDict, field_validator


class Attachment(BaseModel):
    """Legacy rich attachment on a Slack message. Only the fields we read."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    text: str | None = None
    color: str | None = None  # e.g., "good", "danger", "#36a64f"


class RawMessage(BaseModel):
    """A channel history message with the fields the build parser uses."""

    model_config = ConfigDict(extra="ignore")

    ts: str = ""  # Slack message ts, e.g., "1700000000.123456"
    text: str = ""
    attachments: list[Attachment] | None = None
    user: str | None = None
    bot_id: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value: object) -> object:
        return "" if value is None else value
