"""Data catalog tools: inspect, refresh and annotate datasource metadata."""

from typing import Annotated, Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from minds_mcp.client import API_PREFIX, MindsClient
from minds_mcp.payloads import Payload, query_string
from minds_mcp.responses import format_failure, format_success
from minds_mcp.utils.exceptions import MindsError

RefreshMode = Literal["missing_only", "all", "force"]


def catalog_path(datasource: str) -> str:
    """Path of a datasource's catalog."""
    return f"{API_PREFIX}/datasources/{datasource}/catalog"


def register(mcp: FastMCP, client: MindsClient) -> None:
    """Register the data catalog tools on ``mcp``."""

    @mcp.tool()
    async def get_catalog(
        datasource: Annotated[str, Field(description="Datasource name")],
        mind: Annotated[
            Optional[str], Field(description="Filter to tables used by a specific Mind")
        ] = None,
    ) -> CallToolResult:
        """Get the data catalog for a datasource: tables, columns, types, and statistics"""
        qs = query_string(mind=mind or None)
        try:
            return format_success(await client.request("GET", f"{catalog_path(datasource)}{qs}"))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def refresh_catalog(
        datasource: Annotated[str, Field(description="Datasource name")],
        mode: Annotated[
            RefreshMode,
            Field(
                description="missing_only = only uncataloged tables, all = re-catalog existing, force = full rebuild"
            ),
        ],
        table_names: Annotated[
            Optional[list[str]], Field(description="Specific tables to refresh (omit for all)")
        ] = None,
    ) -> CallToolResult:
        """Refresh the data catalog for a datasource"""
        body = Payload(mode=mode).put("table_names", table_names)
        try:
            return format_success(
                await client.request("POST", f"{catalog_path(datasource)}/refresh", body)
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def load_catalog_tables(
        datasource: Annotated[str, Field(description="Datasource name")],
        table_names: Annotated[list[str], Field(description="Tables to load")],
    ) -> CallToolResult:
        """Load specific tables into the data catalog"""
        try:
            return format_success(
                await client.request(
                    "POST", f"{catalog_path(datasource)}/tables", Payload(table_names=table_names)
                )
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def update_table_description(
        datasource: Annotated[str, Field(description="Datasource name")],
        table: Annotated[str, Field(description="Table name")],
        description: Annotated[str, Field(description="New description")],
    ) -> CallToolResult:
        """Update the description of a table in the data catalog"""
        try:
            return format_success(
                await client.request(
                    "PATCH",
                    f"{catalog_path(datasource)}/tables/{table}",
                    Payload(description=description),
                )
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def update_column_description(
        datasource: Annotated[str, Field(description="Datasource name")],
        table: Annotated[str, Field(description="Table name")],
        column: Annotated[str, Field(description="Column name")],
        description: Annotated[str, Field(description="New description")],
    ) -> CallToolResult:
        """Update the description of a column in the data catalog"""
        try:
            return format_success(
                await client.request(
                    "PATCH",
                    f"{catalog_path(datasource)}/tables/{table}/columns/{column}",
                    Payload(description=description),
                )
            )
        except MindsError as e:
            return format_failure(e)
