"""Outer surfaces: validation, CLI and MCP tools."""
