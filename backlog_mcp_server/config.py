"""
Backlog MCP Server Configuration

Manages server identity, Backlog credentials and logging settings.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from backlog_mcp_server.errors import ConfigurationError

API_KEY_ENV = "BACKLOG_API_KEY"
SPACE_URL_ENV = "BACKLOG_SPACE_URL"
SAMPLE_ENV = "SAMPLE_ENV"


@dataclass(frozen=True)
class AuthConfig:
    """Credentials for one Backlog space."""

    api_key: str
    space_url: str

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "AuthConfig":
        """
        Build credentials from an environment mapping.

        Raises:
            ConfigurationError: If either credential is missing or empty
        """
        api_key = environ.get(API_KEY_ENV)
        space_url = environ.get(SPACE_URL_ENV)
        if not api_key or not space_url:
            missing = [
                name for name, value in ((API_KEY_ENV, api_key), (SPACE_URL_ENV, space_url))
                if not value
            ]
            raise ConfigurationError(
                f"{API_KEY_ENV} and {SPACE_URL_ENV} environment variables are required",
                details={"missing": missing},
            )
        return cls(api_key=api_key, space_url=space_url)


def _timeout_from_env() -> Optional[float]:
    raw = os.getenv("BACKLOG_REQUEST_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(
            f"BACKLOG_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None


@dataclass
class BacklogServerConfig:
    """Configuration for the Backlog MCP Server."""

    # Server identity
    server_name: str = "mcp-backlog-server"
    server_version: str = "0.1.0"

    # Backlog credentials
    api_key: str = ""
    space_url: str = ""

    # None keeps httpx's default timeout
    request_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BacklogServerConfig":
        """Create config from environment variables."""
        return cls(
            server_name=os.getenv("BACKLOG_MCP_SERVER_NAME", "mcp-backlog-server"),
            api_key=os.getenv(API_KEY_ENV, ""),
            space_url=os.getenv(SPACE_URL_ENV, ""),
            request_timeout=_timeout_from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """Validate configuration."""
        AuthConfig.from_environ({
            API_KEY_ENV: self.api_key,
            SPACE_URL_ENV: self.space_url,
        })

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be positive")
