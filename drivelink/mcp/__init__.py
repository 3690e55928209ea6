"""drivelink MCP - Model Context Protocol server for the Drive connector.

This module provides an MCP server that exposes Drive API methods
to LLM clients.
"""

from .server import mcp, run_server

__all__ = ["mcp", "run_server"]
