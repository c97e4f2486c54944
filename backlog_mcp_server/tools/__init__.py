"""
Backlog Tools for MCP Server.

These tools expose Backlog API calls to AI agents.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from mcp.types import TextContent, Tool

from backlog_mcp_server.config import AuthConfig
from backlog_mcp_server.errors import UnknownToolError

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 20
MAX_COUNT = 100

ORDER_ASC = "asc"
ORDER_DESC = "desc"


def list_tools() -> List[Tool]:
    """Catalog of callable tools."""
    # No minimum/maximum on count: out-of-range values fall back to the default
    return [
        Tool(
            name="list_recent_projects",
            description="List the Backlog projects the current user viewed most recently.",
            inputSchema={
                "type": "object",
                "properties": {
                    "count": {
                        "type": "number",
                        "description": "Number of projects to return (1-100, default 20)",
                    },
                    "order": {
                        "type": "string",
                        "enum": [ORDER_ASC, ORDER_DESC],
                        "description": "Sort order (asc or desc, default desc)",
                    },
                },
                "required": [],
            },
        ),
    ]


def resolve_count(value: Any) -> Union[int, float]:
    """
    Resolve the ``count`` argument.

    Numbers (or numeric strings) in (0, 100] pass through, whole values as
    int; anything else, including an absent value, becomes the default of 20.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_COUNT
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_COUNT
    if not 0 < number <= MAX_COUNT:
        return DEFAULT_COUNT
    return int(number) if number.is_integer() else number


def resolve_order(value: Any) -> str:
    """Only the literal "asc" sorts ascending."""
    return ORDER_ASC if value == ORDER_ASC else ORDER_DESC


def format_tool_response(title: str, data: Any) -> List[TextContent]:
    """Wrap ``data`` in a titled text envelope with pretty-printed JSON."""
    return [
        TextContent(
            type="text",
            text=f"# {title}\n\n{json.dumps(data, indent=2, ensure_ascii=False)}",
        )
    ]


# --- Handlers ---

async def _handle_list_recent_projects(context, args: Dict[str, Any]) -> List[TextContent]:
    """Handle list_recent_projects tool"""
    count = resolve_count(args.get("count"))
    order = resolve_order(args.get("order"))

    auth = AuthConfig.from_environ(context.environ)

    logger.info(f"Fetching recently viewed projects (count={count}, order={order})")
    async with context.create_client(auth) as client:
        projects = await client.get_recently_viewed_projects(count=count, order=order)
    if isinstance(projects, list):
        logger.info(f"Fetched {len(projects)} recently viewed project(s)")

    return format_tool_response("Recently Viewed Projects", projects)


ToolHandler = Callable[[Any, Dict[str, Any]], Awaitable[List[TextContent]]]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    "list_recent_projects": _handle_list_recent_projects,
}


async def call_tool(
    context,
    name: str,
    arguments: Optional[Dict[str, Any]],
) -> List[TextContent]:
    """
    Route a tool call to its handler.

    Raises:
        UnknownToolError: ``name`` is not a registered tool
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)
    return await handler(context, arguments or {})


def register_all_tools(server, context) -> int:
    """
    Register the tool handlers with the MCP server.

    Args:
        server: The MCP Server instance
        context: BacklogMCPServer providing the environment and client factory
    """

    @server.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return list_tools()

    # Arguments are resolved leniently by the handlers, not rejected by schema
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        logger.info(f"[ROUTER] Routing tool call: {name}")
        try:
            return await call_tool(context, name, arguments)
        except Exception as e:
            logger.error(f"[ROUTER] Error calling tool '{name}': {e}")
            raise

    return len(TOOL_HANDLERS)
