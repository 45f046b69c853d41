"""MCP tool surface for the filter engine."""

from .server import create_server

__all__ = ["create_server"]
