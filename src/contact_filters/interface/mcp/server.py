"""MCP server factory."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from ...config.runtime import get_settings
from .tools import register_filter_tools


def create_server(name: str | None = None) -> FastMCP:
    """Build and return a FastMCP server with the filter tools registered."""
    server = FastMCP(name or get_settings().mcp_server_name)
    register_filter_tools(server)
    return server


def run_server() -> None:
    """Run the MCP server using stdio transport."""
    from ...observability import configure_logging

    configure_logging(get_settings().log_level)
    create_server().run(transport="stdio")


if __name__ == "__main__":
    run_server()
