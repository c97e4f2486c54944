"""
Backlog MCP Server - Main server implementation.

Exposes Backlog's recently-viewed-projects call as an MCP tool, plus a
static greeting resource, over the stdio transport.
"""

import asyncio
import logging
import os
import sys
from typing import Callable, Mapping, Optional

from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server

from backlog_mcp_server.client import AsyncBacklogClient
from backlog_mcp_server.config import AuthConfig, BacklogServerConfig
from backlog_mcp_server.errors import ConfigurationError
from backlog_mcp_server.resources import register_resources
from backlog_mcp_server.tools import register_all_tools

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., AsyncBacklogClient]


class BacklogMCPServer:
    """
    MCP Server for Backlog.

    Handlers read credentials from ``environ`` on every call, so the server
    itself holds no per-request state.
    """

    def __init__(
        self,
        config: Optional[BacklogServerConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        """
        Initialize the Backlog MCP Server.

        Args:
            config: Server configuration. If None, loads from environment.
            environ: Environment mapping read by the handlers (default: os.environ)
            client_factory: Builds an API client from (auth, timeout=...)
        """
        self.config = config or BacklogServerConfig.from_env()
        self.environ = environ if environ is not None else os.environ
        self.client_factory = client_factory or AsyncBacklogClient

        self.server = Server(
            self.config.server_name,
            version=self.config.server_version,
        )
        self._register_handlers()

        logger.info(
            f"Backlog MCP Server initialized: {self.config.server_name} v{self.config.server_version}"
        )

    def _register_handlers(self) -> None:
        """Register resource and tool handlers with the MCP server."""
        resource_count = register_resources(self.server, self)
        tool_count = register_all_tools(self.server, self)
        logger.info(f"Registered {resource_count} resource(s) and {tool_count} tool(s)")

    def create_client(self, auth: AuthConfig) -> AsyncBacklogClient:
        """Create a fresh API client for one tool invocation."""
        return self.client_factory(auth, timeout=self.config.request_timeout)

    async def run(self) -> None:
        """Run with stdio transport (for Claude Desktop and similar clients)"""
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Backlog MCP Server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def run_server(config: Optional[BacklogServerConfig] = None) -> None:
    """
    Run the Backlog MCP Server.

    Raises:
        ConfigurationError: Backlog credentials are missing
    """
    server_config = config or BacklogServerConfig.from_env()
    server_config.validate()

    configure_logging(server_config.log_level)
    server = BacklogMCPServer(config=server_config)

    logger.info(f"Starting Backlog MCP Server for {server_config.space_url}")
    asyncio.run(server.run())


def main() -> None:
    """Console entry point; exits with status 1 on startup failure."""
    load_dotenv()

    try:
        config = BacklogServerConfig.from_env()
        config.validate()
    except ConfigurationError as e:
        print(f"Server initialization error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        run_server(config)
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        print(f"Server error: {e}", file=sys.stderr)
        sys.exit(1)
