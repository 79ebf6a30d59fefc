from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .api_client import ElectionsAPIClient
from .config import Settings, get_settings
from .dispatcher import ToolDispatcher
from .tools import ToolRegistry, election_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "dane-county-elections-mcp"


def create_server_with_registry(
    settings: Optional[Settings] = None,
    api_client: Optional[ElectionsAPIClient] = None,
) -> Tuple[Server, ToolRegistry, ToolDispatcher]:
    """
    Create the MCP server together with the registry and dispatcher backing it.

    The HTTP transport reuses the registry and dispatcher directly.
    """
    settings = settings or get_settings()
    api_client = api_client or ElectionsAPIClient(settings)

    registry = ToolRegistry()
    election_tools.register_tools(registry, api_client=api_client)
    dispatcher = ToolDispatcher(registry)

    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.list_tools()

    # Argument checks live in the dispatcher so every transport reports them the same way.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.call(name, arguments)

    return server, registry, dispatcher


def create_server(
    settings: Optional[Settings] = None,
    api_client: Optional[ElectionsAPIClient] = None,
) -> Server:
    """
    Create and configure the MCP server with all registered tools.
    """
    server, _, _ = create_server_with_registry(settings, api_client)
    return server


async def run_stdio_server(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.warning("Dane County Elections MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{settings.log_level}'")
    # stdout carries the MCP protocol; diagnostics go to stderr.
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def main() -> None:
    """
    Entrypoint for running the MCP server.

    Supports two transport modes:
    - stdio: For direct process-to-process communication (default)
    - http: JSON-RPC over HTTP behind a reverse proxy
    """
    try:
        settings = get_settings()
        configure_logging(settings)

        if settings.transport == "http":
            from .http_server import run_http_server

            anyio.run(run_http_server, settings.server_host, settings.server_port)
        else:
            server = create_server(settings)
            anyio.run(run_stdio_server, server)
    except Exception:
        # No-op when logging is already configured.
        logging.basicConfig(format=_LOG_FORMAT, stream=sys.stderr)
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
