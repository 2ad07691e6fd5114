"""Datasource tools: list, inspect, create, update and delete connections."""

from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from minds_mcp.client import API_PREFIX, MindsClient
from minds_mcp.payloads import Payload, query_string
from minds_mcp.responses import format_failure, format_success
from minds_mcp.utils.exceptions import MindsError

ENGINES = (
    "postgres, mysql, mariadb, mssql, mongodb, snowflake, bigquery, redshift, "
    "databricks, clickhouse, s3, dynamodb, elasticsearch, one_drive, teradata"
)


def register(mcp: FastMCP, client: MindsClient) -> None:
    """Register the datasource tools on ``mcp``."""

    @mcp.tool()
    async def list_datasources() -> CallToolResult:
        """List all datasources in your Minds account"""
        try:
            return format_success(await client.request("GET", f"{API_PREFIX}/datasources"))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def get_datasource(
        name: Annotated[str, Field(description="Datasource name")],
        check_connection: Annotated[
            Optional[bool], Field(description="Verify the connection is alive")
        ] = None,
    ) -> CallToolResult:
        """Get details of a datasource, optionally checking its connection status"""
        qs = query_string(check_connection=True if check_connection else None)
        try:
            return format_success(
                await client.request("GET", f"{API_PREFIX}/datasources/{name}{qs}")
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def create_datasource(
        name: Annotated[str, Field(description="Unique datasource name")],
        engine: Annotated[str, Field(description=f"Database engine: {ENGINES}")],
        connection_data: Annotated[
            dict[str, Any],
            Field(description="Connection parameters (host, port, user, password, database, schema, etc.)"),
        ],
        description: Annotated[
            Optional[str], Field(description="Human-readable description of the data")
        ] = None,
        tables: Annotated[
            Optional[list[str]], Field(description="Restrict access to specific tables")
        ] = None,
    ) -> CallToolResult:
        """Create a new datasource connection (postgres, mysql, snowflake, bigquery, mongodb, s3, redshift, clickhouse, etc.)"""
        body = (
            Payload(name=name, engine=engine, connection_data=connection_data)
            .put_nonempty("description", description)
            .put("tables", tables)
        )
        try:
            return format_success(await client.request("POST", f"{API_PREFIX}/datasources", body))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def update_datasource(
        name: Annotated[str, Field(description="Datasource name to update")],
        description: Annotated[Optional[str], Field(description="New description")] = None,
        connection_data: Annotated[
            Optional[dict[str, Any]], Field(description="Updated connection parameters")
        ] = None,
        tables: Annotated[Optional[list[str]], Field(description="Updated table list")] = None,
    ) -> CallToolResult:
        """Update a datasource's description, connection parameters, or tables"""
        body = (
            Payload()
            .put("description", description)
            .put("connection_data", connection_data)
            .put("tables", tables)
        )
        try:
            return format_success(
                await client.request("PATCH", f"{API_PREFIX}/datasources/{name}", body)
            )
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def delete_datasource(
        name: Annotated[str, Field(description="Datasource name to delete")],
    ) -> CallToolResult:
        """Delete a datasource"""
        try:
            await client.request("DELETE", f"{API_PREFIX}/datasources/{name}")
            return format_success({"deleted": True, "name": name})
        except MindsError as e:
            return format_failure(e)
