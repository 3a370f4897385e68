"""MCP adapter for the FantasyPros public sports-data API."""

__version__ = "0.1.0"
