"""
Unit tests for the greeting resource.
"""

import pytest

from backlog_mcp_server.errors import ConfigurationError, NotFoundError
from backlog_mcp_server.resources import GREETING_URI, list_resources, read_resource


class TestListResources:

    def test_single_greeting_resource(self):
        resources = list_resources()

        assert len(resources) == 1
        assert str(resources[0].uri) == GREETING_URI == "simple://greeting"
        assert resources[0].mimeType == "text/plain"
        assert resources[0].name == "Greeting"


class TestReadResource:

    def test_interpolates_sample_env(self):
        text = read_resource("simple://greeting", {"SAMPLE_ENV": "hello"})

        assert "hello" in text
        assert text.endswith("SAMPLE_ENV: hello")

    @pytest.mark.parametrize("environ", [{}, {"SAMPLE_ENV": ""}])
    def test_missing_sample_env(self, environ):
        with pytest.raises(ConfigurationError) as exc_info:
            read_resource("simple://greeting", environ)

        assert "SAMPLE_ENV" in str(exc_info.value)

    def test_unknown_uri(self):
        with pytest.raises(NotFoundError) as exc_info:
            read_resource("simple://nope", {"SAMPLE_ENV": "hello"})

        assert "simple://nope" in str(exc_info.value)
        assert exc_info.value.to_dict() == {
            "error_code": "NOT_FOUND_001",
            "message": "Unknown resource: simple://nope",
            "details": {"uri": "simple://nope"},
        }
