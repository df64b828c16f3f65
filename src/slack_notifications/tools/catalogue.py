"""Static tool catalogue advertised on tools/list."""

from mcp import types

TOOLS: list[types.Tool] = [
    types.Tool(
        name="check_build_status",
        description=(
            "Get the latest Xcode Cloud build status from Slack notifications. "
            "Returns recent build messages including status, workflow name, "
            "duration, and timestamp."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": "Number of recent build messages to retrieve (default: 5, max: 20)",
                    "default": 5,
                },
                "workflow": {
                    "type": "string",
                    "description": (
                        "Filter by workflow name (e.g., 'Cuti-E-Admin', 'Nutri-E'). "
                        "Case-insensitive partial match."
                    ),
                },
            },
            "required": [],
        },
    ),
    types.Tool(
        name="get_channel_messages",
        description="Read recent messages from a specific Slack channel",
        inputSchema={
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": (
                        "Slack channel ID (e.g., C01234567). "
                        "If not provided, uses the build channel."
                    ),
                },
                "limit": {
                    "type": "number",
                    "description": "Number of messages to retrieve (default: 10, max: 100)",
                    "default": 10,
                },
            },
            "required": [],
        },
    ),
    types.Tool(
        name="search_messages",
        description="Search for messages in Slack containing specific text",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (e.g., 'build failed', 'Cuti-E-Admin')",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results (default: 10, max: 100)",
                    "default": 10,
                },
            },
            "required": ["query"],
        },
    ),
    types.Tool(
        name="send_message",
        description="Send a message to a Slack channel",
        inputSchema={
            "type": "object",
            "properties": {
                "channel_id": {
                    "type": "string",
                    "description": "Slack channel ID. If not provided, uses the build channel.",
                },
                "text": {
                    "type": "string",
                    "description": "Message text to send",
                },
            },
            "required": ["text"],
        },
    ),
    types.Tool(
        name="list_channels",
        description="List available Slack channels the bot has access to",
        inputSchema={
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": "Maximum number of channels to list (default: 50, max: 200)",
                    "default": 50,
                },
            },
            "required": [],
        },
    ),
]
