"""Fake Minds API and MCP session helpers shared by the tests."""

import json
from typing import Any, Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import CallToolResult

BASE_URL = "https://minds.test"
API_KEY = "mdb_test_token"


class FakeMindsAPI:
    """Stand-in for the Minds API that records every request it receives.

    Answers each request with the configured status and body, or raises
    ``error`` to simulate a transport failure.
    """

    def __init__(
        self,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        error: Optional[Exception] = None,
    ):
        self.status = status
        self.json_body = json_body
        self.text = text
        self.error = error
        self.requests: list[httpx.Request] = []

    def respond(
        self,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
    ) -> "FakeMindsAPI":
        """Change the canned response."""
        self.status = status
        self.json_body = json_body
        self.text = text
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        if self.json_body is not None:
            return httpx.Response(self.status, json=self.json_body)
        return httpx.Response(self.status)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_body(self) -> Any:
        return json.loads(self.last.content) if self.last.content else None

    @property
    def last_path(self) -> str:
        """Path plus query string of the last request."""
        url = self.last.url
        query = url.query.decode()
        return url.path + (f"?{query}" if query else "")


async def call_tool(server: FastMCP, name: str, arguments: Optional[dict] = None) -> CallToolResult:
    """Call a tool through a real in-memory MCP client session."""
    async with create_connected_server_and_client_session(server._mcp_server) as session:
        return await session.call_tool(name, arguments or {})


def result_text(result: CallToolResult) -> str:
    """Text of the single content block of a tool result."""
    assert len(result.content) == 1
    return result.content[0].text
