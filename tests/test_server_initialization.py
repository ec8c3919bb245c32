"""
Unit tests for server initialization and tool registration.
"""

import json
import pytest
from unittest.mock import Mock, patch

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fakes import FakeWeb
from podcast_resolver import server
from podcast_resolver.config import ServerConfig


class TestInitializeServer:

    def test_builds_components(self):
        config = ServerConfig()
        with patch("podcast_resolver.server.ServerConfig.from_environment", return_value=config), \
             patch("podcast_resolver.server.HTTPClientManager") as mock_client_cls, \
             patch("podcast_resolver.server.PodcastResolver") as mock_resolver_cls:
            result = server.initialize_server()

        mock_client_cls.assert_called_once_with(config)
        mock_resolver_cls.assert_called_once_with(mock_client_cls.return_value, config)
        assert result == (config, mock_client_cls.return_value, mock_resolver_cls.return_value)

    def test_invalid_configuration_exits(self):
        with patch(
            "podcast_resolver.server.ServerConfig.from_environment",
            side_effect=ValueError("max_episodes must be positive")
        ):
            with pytest.raises(SystemExit) as exc_info:
                server.initialize_server()

        assert exc_info.value.code == 1


def test_get_server_returns_fastmcp_instance():
    assert server.get_server() is server.mcp


def test_shutdown_closes_http_client():
    http_client = Mock()
    server.set_components(ServerConfig(), http_client, Mock())

    server.shutdown_server()

    http_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_debug_rss_route_uses_shared_client():
    web = FakeWeb()
    server.set_components(ServerConfig(), web.client(), Mock())

    response = await server.debug_rss_route(Mock())

    assert response.status_code == 200
    reports = json.loads(response.body)
    assert len(reports) == 10
    assert {r["status"] for r in reports} == {"transport_error"}
