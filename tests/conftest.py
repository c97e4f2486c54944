"""
Pytest configuration and fixtures for all tests.

This file ensures the project root is in the Python path
so that imports work correctly for all test modules.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import pytest for fixtures
import pytest
import httpx

from backlog_mcp_server.client import AsyncBacklogClient
from backlog_mcp_server.config import AuthConfig

SPACE_URL = "https://example.backlog.com"
API_KEY = "test-api-key"


@pytest.fixture
def auth():
    """Credentials for a fake Backlog space."""
    return AuthConfig(api_key=API_KEY, space_url=SPACE_URL)


@pytest.fixture
def backlog_environ():
    """Environment mapping with both Backlog credentials set."""
    return {
        "BACKLOG_API_KEY": API_KEY,
        "BACKLOG_SPACE_URL": SPACE_URL,
    }


@pytest.fixture
def recorded_requests():
    """Requests seen by the stub Backlog transport."""
    return []


@pytest.fixture
def created_clients():
    """API clients built by the stub factory."""
    return []


@pytest.fixture
def backlog_stub(recorded_requests, created_clients):
    """
    Build a client factory whose HTTP traffic goes to a stub handler.

    Usage:
        factory = backlog_stub(lambda request: httpx.Response(200, json=[]))
    """
    def make_factory(handler):
        def record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        def factory(auth, timeout=None):
            client = AsyncBacklogClient(
                auth, timeout=timeout, transport=httpx.MockTransport(record)
            )
            created_clients.append(client)
            return client

        return factory

    return make_factory
