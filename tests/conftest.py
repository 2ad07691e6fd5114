"""Pytest configuration and fixtures for minds-mcp tests."""

import pytest
from mcp.server.fastmcp import FastMCP

from fakes import API_KEY, BASE_URL, FakeMindsAPI
from minds_mcp.client import MindsClient
from minds_mcp.core.config import MindsConfig
from minds_mcp.server import create_server


@pytest.fixture
def config() -> MindsConfig:
    """A configuration pointing at the fake API."""
    return MindsConfig(base_url=BASE_URL, api_key=API_KEY)


@pytest.fixture
def api() -> FakeMindsAPI:
    """A fake Minds API answering 200 with an empty JSON object."""
    return FakeMindsAPI(json_body={})


@pytest.fixture
def client(config: MindsConfig, api: FakeMindsAPI) -> MindsClient:
    """A MindsClient wired to the fake API."""
    return MindsClient(config, transport=api.transport)


@pytest.fixture
def server(config: MindsConfig, api: FakeMindsAPI) -> FastMCP:
    """A FastMCP server whose tools talk to the fake API."""
    return create_server(config, transport=api.transport)

