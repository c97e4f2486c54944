"""
Backlog MCP Server Package

An MCP (Model Context Protocol) server that exposes Backlog's
recently viewed projects as a tool for AI agents.
"""

from backlog_mcp_server.server import BacklogMCPServer
from backlog_mcp_server.config import AuthConfig, BacklogServerConfig

__all__ = [
    'AuthConfig',
    'BacklogMCPServer',
    'BacklogServerConfig',
]
