"""
Error handling for the Backlog MCP Server.

Every failure raised by a handler derives from BacklogMCPError. The MCP SDK
converts raised exceptions into protocol-level error responses, so handlers
never catch these themselves.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Error codes for different types of errors"""
    CONFIGURATION_ERROR = "CONFIG_001"
    NOT_FOUND_ERROR = "NOT_FOUND_001"
    UNKNOWN_TOOL_ERROR = "TOOL_001"
    API_ERROR = "API_001"
    TRANSPORT_ERROR = "TRANSPORT_001"
    UNKNOWN_ERROR = "UNKNOWN_001"


class BacklogMCPError(Exception):
    """Base exception for the Backlog MCP Server"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary"""
        return {
            'error_code': self.error_code.value,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(BacklogMCPError):
    """A required environment value is missing"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class NotFoundError(BacklogMCPError):
    """Unknown resource URI"""

    def __init__(self, uri: str):
        super().__init__(
            f"Unknown resource: {uri}",
            ErrorCode.NOT_FOUND_ERROR,
            {"uri": uri},
        )
        self.uri = uri


class UnknownToolError(BacklogMCPError):
    """Unknown tool name"""

    def __init__(self, tool_name: str):
        super().__init__(
            f"Unknown tool: {tool_name}",
            ErrorCode.UNKNOWN_TOOL_ERROR,
            {"tool": tool_name},
        )
        self.tool_name = tool_name


class ApiError(BacklogMCPError):
    """
    Backlog answered with a non-success HTTP status.

    ``message`` and ``code`` come from the first entry of the response's
    ``errors`` array when Backlog sent one.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.status_code = status_code
        super().__init__(
            message,
            ErrorCode.API_ERROR,
            {"code": code, "status_code": status_code},
        )

    def __str__(self) -> str:
        return f"Backlog API Error: {self.message} (Code: {self.code})"


class TransportError(BacklogMCPError):
    """Network failure or an unparseable response body"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, details)
