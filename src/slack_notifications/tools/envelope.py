"""Uniform tool response envelope and per-process server context."""

import json
from dataclasses import dataclass
from typing import Any

from mcp import types
from slack_sdk.web.async_client import AsyncWebClient


@dataclass(frozen=True)
class ServerContext:
    """Read-only state shared by every tool call, built once at startup."""

    client: AsyncWebClient
    default_channel_id: str | None = None

    def resolve_channel(self, channel_id: str | None) -> str | None:
        """Explicit channel if given, else the configured build channel."""
        return channel_id or self.default_channel_id


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call: text content plus an error flag.

    Every tool call ends in exactly one ToolResult, success or not, so the
    agent always receives a well-formed response.
    """

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, payload: dict[str, Any]) -> "ToolResult":
        """Successful result carrying a JSON document."""
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False, default=str))

    @classmethod
    def message(cls, text: str) -> "ToolResult":
        """Successful result carrying a plain message."""
        return cls(text=text)

    @classmethod
    def error(cls, text: str) -> "ToolResult":
        return cls(text=text, is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )
