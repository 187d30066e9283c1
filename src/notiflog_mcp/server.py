"""
MCP Server for Notiflog.

Exposes the notification log as tools for MCP clients.
"""

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from notiflog.capture import on_notification_posted
from notiflog.db import LogStore
from notiflog.surfacing import load_logs

logger = logging.getLogger(__name__)

# Create MCP server
server = Server("notiflog")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="notiflog_post",
            description="Log a posted notification. Missing title is stored as 'Unknown', missing text as empty.",
            inputSchema={
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Notification title (optional)",
                    },
                    "text": {
                        "type": "string",
                        "description": "Notification body (optional)",
                    },
                },
            },
        ),
        Tool(
            name="notiflog_list",
            description="List every logged notification, newest first.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="notiflog_stats",
            description="Get the number of logged notifications.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "notiflog_post":
            return await tool_post(arguments)
        elif name == "notiflog_list":
            return await tool_list(arguments)
        elif name == "notiflog_stats":
            return await tool_stats(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]
    except Exception as e:
        logger.error("Tool %s failed: %s", name, e)
        return [TextContent(type="text", text=f"Error: {e}")]


async def tool_post(args: dict) -> list[TextContent]:
    """Log a notification."""
    payload = {}
    for key in ("title", "text"):
        value = args.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            return [TextContent(type="text", text=f"Error: {key} must be a string")]
        payload[key] = value

    if not on_notification_posted({"notification": payload}):
        return [TextContent(type="text", text="Skipped.")]
    return [TextContent(type="text", text="Logged.")]


async def tool_list(args: dict) -> list[TextContent]:
    """List logged notifications (plain text)."""
    entries = load_logs()
    if not entries:
        return [TextContent(type="text", text="No notifications logged.")]

    lines = [f"{e.id}  {e.time}  {e.title}: {e.text}" for e in entries]
    return [TextContent(type="text", text="\n".join(lines))]


async def tool_stats(args: dict) -> list[TextContent]:
    """Count logged notifications."""
    store = LogStore()
    return [TextContent(type="text", text=f"{store.count()} notifications logged.")]


async def main():
    """Run the MCP server."""
    from notiflog.config import setup_logging

    setup_logging()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
