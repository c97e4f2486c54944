"""
Backlog API client.
"""

from backlog_mcp_server.client.async_client import AsyncBacklogClient

__all__ = ["AsyncBacklogClient"]
