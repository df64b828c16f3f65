"""MCP server exposing Slack channels and CI build notifications to AI agents."""

__version__ = "1.1.0"
