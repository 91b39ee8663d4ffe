"""MCP server for FusionKit docs."""

from fusionkit_docs.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
