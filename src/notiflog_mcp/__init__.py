"""MCP server exposing the notification log."""
