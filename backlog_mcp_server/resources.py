"""
Static resources exposed by the Backlog MCP Server.
"""

import logging
from typing import List, Mapping

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource
from pydantic import AnyUrl

from backlog_mcp_server.config import SAMPLE_ENV
from backlog_mcp_server.errors import ConfigurationError, NotFoundError

logger = logging.getLogger(__name__)

GREETING_URI = "simple://greeting"
GREETING_MIME_TYPE = "text/plain"


def list_resources() -> List[Resource]:
    """Catalog of readable resources."""
    return [
        Resource(
            uri=GREETING_URI,
            mimeType=GREETING_MIME_TYPE,
            name="Greeting",
            description="A simple greeting message",
        )
    ]


def read_resource(uri: str, environ: Mapping[str, str]) -> str:
    """
    Read a resource's text.

    Raises:
        ConfigurationError: SAMPLE_ENV is not set
        NotFoundError: ``uri`` is not a known resource
    """
    if uri != GREETING_URI:
        raise NotFoundError(uri)

    sample_env = environ.get(SAMPLE_ENV)
    if not sample_env:
        raise ConfigurationError(
            f"{SAMPLE_ENV} environment variable is not set",
            details={"missing": [SAMPLE_ENV]},
        )

    return (
        "Hello! Welcome to the Backlog MCP server.\n"
        f"{SAMPLE_ENV}: {sample_env}"
    )


def register_resources(server, context) -> int:
    """
    Register the resource handlers with the MCP server.

    Args:
        server: The MCP Server instance
        context: BacklogMCPServer providing the environment mapping
    """

    @server.list_resources()
    async def handle_list_resources() -> List[Resource]:
        return list_resources()

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
        logger.info(f"Reading resource: {uri}")
        text = read_resource(str(uri), context.environ)
        return [ReadResourceContents(content=text, mime_type=GREETING_MIME_TYPE)]

    return len(list_resources())
