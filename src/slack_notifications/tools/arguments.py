"""Argument models for each tool.

Numeric limits are clamped rather than rejected: missing or non-positive
values take the tool default, fractions are truncated, and anything above
the tool maximum becomes the maximum.
"""

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


def clamp_limit(value: object, *, default: int, maximum: int) -> object:
    """Clamp a raw ``limit`` argument into ``1..maximum``.

    Values that are not numbers (or numeric strings) are returned unchanged
    so that pydantic reports them as invalid.
    """
    if value is None:
        return default
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if math.isnan(value) or value < 1:
        return default
    if value >= maximum:
        return maximum
    return int(value)


class ToolArguments(BaseModel):
    """Base for tool arguments. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class LimitedArguments(ToolArguments):
    """Arguments with a clamped ``limit``."""

    default_limit: ClassVar[int] = 10
    max_limit: ClassVar[int] = 100

    limit: int = Field(default=None, validate_default=True)

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp_limit(cls, value: object) -> object:
        return clamp_limit(value, default=cls.default_limit, maximum=cls.max_limit)


class CheckBuildStatusArgs(LimitedArguments):
    default_limit: ClassVar[int] = 5
    max_limit: ClassVar[int] = 20

    workflow: str | None = None


class GetChannelMessagesArgs(LimitedArguments):
    default_limit: ClassVar[int] = 10
    max_limit: ClassVar[int] = 100

    channel_id: str | None = None


class SearchMessagesArgs(LimitedArguments):
    default_limit: ClassVar[int] = 10
    max_limit: ClassVar[int] = 100

    query: str | None = None  # Required, checked by the handler


class SendMessageArgs(ToolArguments):
    channel_id: str | None = None
    text: str | None = None  # Required, checked by the handler


class ListChannelsArgs(LimitedArguments):
    default_limit: ClassVar[int] = 50
    max_limit: ClassVar[int] = 200
