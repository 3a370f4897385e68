"""FantasyPros MCP Server - Exposes the FantasyPros public API as MCP tools.

Gives MCP clients (Claude Desktop, IDE assistants, ...) access to sports news,
player data, consensus rankings and projections. Every tool is a thin
passthrough: arguments are validated, one GET is issued and the JSON body is
returned pretty-printed.

Usage:
    # Run directly
    uv run fantasypros-mcp

    # Or via Python
    uv run python -m fantasypros_mcp.mcp_server
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    METHOD_NOT_FOUND,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)
from pydantic import ValidationError

from . import __version__
from .client import FantasyProsClient
from .config import Settings
from .exceptions import FantasyProsConfigError, FantasyProsError
from .tools import get_tool_spec, list_tool_definitions

log = logging.getLogger(__name__)

SERVER_NAME = "fantasypros-server"


def format_validation_error(tool_name: str, exc: ValidationError) -> str:
    """Flatten pydantic errors into one line per offending field."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(parts)


def unknown_tool_error(name: str) -> McpError:
    return McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))


def text_result(text: str, *, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


class ToolDispatcher:
    """Routes a tool call to its request builder and shapes the result."""

    def __init__(self, client: FantasyProsClient) -> None:
        self.client = client

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> CallToolResult:
        spec = get_tool_spec(name)
        if spec is None:
            raise unknown_tool_error(name)

        try:
            args = spec.args_model.model_validate(dict(arguments or {}))
        except ValidationError as e:
            log.info("Rejected %s call: %d invalid field(s)", name, e.error_count())
            return text_result(format_validation_error(name, e), is_error=True)

        request = spec.builder(args)
        log.debug("Tool %s -> GET %s", name, request.path)

        try:
            payload = await self.client.get_json(request)
        except FantasyProsError as e:
            log.warning("Tool %s failed: %s", name, e)
            message = str(e) or type(e).__name__
            return text_result(f"FantasyPros API error: {message}", is_error=True)
        except Exception:
            log.exception("Unexpected error in tool %s", name)
            raise

        return text_result(json.dumps(payload, indent=2))


def create_server(client: FantasyProsClient) -> Server:
    """Build an MCP server whose handlers share ``client``."""
    server: Server = Server(SERVER_NAME, version=__version__)
    dispatcher = ToolDispatcher(client)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available FantasyPros tools."""
        return list_tool_definitions()

    # arguments are validated by the per-tool models only
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls."""
        return await dispatcher.dispatch(name, arguments)

    # unknown names must surface as a JSON-RPC error, not an isError result
    wrapped = server.request_handlers[CallToolRequest]

    async def handle_call_tool(req: CallToolRequest) -> ServerResult:
        if get_tool_spec(req.params.name) is None:
            raise unknown_tool_error(req.params.name)
        return await wrapped(req)

    server.request_handlers[CallToolRequest] = handle_call_tool
    return server


async def run_server(settings: Settings) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    log.info("Starting FantasyPros MCP Server against %s", settings.base_url)
    async with FantasyProsClient(settings) as client:
        server = create_server(client)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Entry point for the MCP server."""
    load_dotenv()
    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )

    try:
        settings = Settings.from_env()
    except FantasyProsConfigError as e:
        log.error("%s", e)
        raise SystemExit(1) from e
    logging.getLogger().setLevel(settings.log_level)

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        log.info("Interrupted, FantasyPros MCP Server stopped")


if __name__ == "__main__":
    main()
