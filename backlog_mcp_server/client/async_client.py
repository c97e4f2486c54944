# Backlog Async Client
"""
Async client for the Backlog API v2.

Authentication is the space's API key, sent as the ``apiKey`` query
parameter on every request. All calls are plain GETs without a body.
Response bodies are returned exactly as decoded, never reshaped.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from backlog_mcp_server.config import AuthConfig
from backlog_mcp_server.errors import ApiError, TransportError
from backlog_mcp_server.models import (
    BacklogErrorResponse,
    Project,
    RecentlyViewedProject,
    Space,
    User,
)

logger = logging.getLogger(__name__)


class AsyncBacklogClient:
    """
    Async client for one Backlog space.

    Usage:
        async with AsyncBacklogClient(auth) as client:
            projects = await client.get_recently_viewed_projects(count=20)
    """

    def __init__(
        self,
        auth: AuthConfig,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize async client.

        Args:
            auth: API key and space URL
            timeout: Request timeout in seconds (None keeps httpx's default)
            transport: Custom httpx transport for the underlying HTTP client
        """
        self.auth = auth
        self.base_url = f"{auth.space_url.rstrip('/')}/api/v2"
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "AsyncBacklogClient":
        """Enter async context."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get HTTP client, creating one if needed."""
        if self._client is None:
            kwargs: Dict[str, Any] = {"headers": {"Accept": "application/json"}}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            if self.transport is not None:
                kwargs["transport"] = self.transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make a GET request against the Backlog API.

        Args:
            path: API path below /api/v2
            params: Extra query parameters

        Returns:
            Decoded JSON body

        Raises:
            ApiError: On a non-success HTTP status
            TransportError: On network failure or an invalid JSON body
        """
        query: Dict[str, Any] = {"apiKey": self.auth.api_key}
        if params:
            query.update(params)

        client = self._get_client()
        try:
            response = await client.get(self._url(path), params=query)
        except httpx.RequestError as e:
            logger.error(f"Error in Backlog API request to {path}: {e}")
            raise TransportError(
                f"Request to Backlog failed: {e}",
                details={"path": path},
            ) from e

        if not response.is_success:
            raise self._api_error(path, response)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Backlog API request to {path}: {e}")
            raise TransportError(
                f"Backlog returned an invalid JSON body: {e}",
                details={"path": path, "status_code": response.status_code},
            ) from e

    @staticmethod
    def _api_error(path: str, response: httpx.Response) -> ApiError:
        """Build an ApiError from Backlog's ``errors`` array, if any."""
        try:
            detail = BacklogErrorResponse.model_validate(response.json()).first
        except (ValueError, ValidationError):
            # Non-JSON or unexpected error body: fall back to the generic message
            detail = None

        message = detail.message if detail and detail.message else "Unknown error"
        code = detail.code if detail else None
        logger.error(
            f"Backlog API request to {path} failed with status {response.status_code}: "
            f"{message} (Code: {code})"
        )
        return ApiError(message, code=code, status_code=response.status_code)

    # ==================== Users ====================

    async def get_recently_viewed_projects(
        self,
        order: Optional[str] = None,
        offset: Optional[int] = None,
        count: Optional[Union[int, float]] = None,
    ) -> List[RecentlyViewedProject]:
        """
        Get the projects the current user viewed most recently.

        Args:
            order: "asc" or "desc"
            offset: Number of entries to skip
            count: Number of entries to return (1-100)

        Returns:
            Entries in the order Backlog returned them
        """
        params: Dict[str, Any] = {}
        if order:
            params["order"] = order
        if offset is not None:
            params["offset"] = offset
        if count is not None:
            params["count"] = count

        return await self._request("/users/myself/recentlyViewedProjects", params=params)

    async def get_myself(self) -> User:
        """Get the user that owns the API key."""
        return await self._request("/users/myself")

    # ==================== Projects ====================

    async def get_project(self, project_id: Union[int, str]) -> Project:
        """
        Get project by ID or project key.

        Args:
            project_id: Numeric ID or key (e.g. "DEV")
        """
        return await self._request(f"/projects/{project_id}")

    # ==================== Space ====================

    async def get_space(self) -> Space:
        """Get information about the space."""
        return await self._request("/space")
