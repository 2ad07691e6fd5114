"""Query result tools: paginated results and CSV export."""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from minds_mcp.client import API_PREFIX, MindsClient
from minds_mcp.payloads import query_string
from minds_mcp.responses import format_failure, format_success, format_text
from minds_mcp.utils.exceptions import MindsError


def item_path(conversation_id: str, message_id: str) -> str:
    """Path of one message within a conversation."""
    return f"{API_PREFIX}/conversations/{conversation_id}/items/{message_id}"


def register(mcp: FastMCP, client: MindsClient) -> None:
    """Register the query result tools on ``mcp``."""

    @mcp.tool()
    async def get_query_result(
        conversation_id: Annotated[str, Field(description="Conversation UUID")],
        message_id: Annotated[str, Field(description="Message UUID")],
        limit: Annotated[
            Optional[int], Field(ge=1, le=1000, description="Max rows (1-1000, default 100)")
        ] = None,
        offset: Annotated[Optional[int], Field(ge=0, description="Rows to skip (default 0)")] = None,
    ) -> CallToolResult:
        """Get paginated results from a previous query (by conversation and message ID)"""
        qs = query_string(limit=limit, offset=offset)
        try:
            return format_success(
                await client.request("GET", f"{item_path(conversation_id, message_id)}/result{qs}")
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def export_query_csv(
        conversation_id: Annotated[str, Field(description="Conversation UUID")],
        message_id: Annotated[str, Field(description="Message UUID")],
    ) -> CallToolResult:
        """Export query results as CSV"""
        # CSV goes back untouched: no JSON parsing, no error body inspection.
        try:
            return format_text(
                await client.request_text(f"{item_path(conversation_id, message_id)}/export")
            )
        except MindsError as e:
            return format_failure(e)
