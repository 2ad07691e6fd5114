"""Mind tools: list, inspect, create, update and delete Minds."""

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from minds_mcp.client import API_PREFIX, MindsClient
from minds_mcp.payloads import (
    DatasourceRef,
    Payload,
    dump_datasources,
    mind_body,
    mind_parameters,
)
from minds_mcp.responses import format_failure, format_success
from minds_mcp.utils.exceptions import MindsError


def register(mcp: FastMCP, client: MindsClient) -> None:
    """Register the Mind management tools on ``mcp``."""

    @mcp.tool()
    async def list_minds() -> CallToolResult:
        """List all Minds in your account"""
        try:
            return format_success(await client.request("GET", f"{API_PREFIX}/minds"))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def get_mind(
        name: Annotated[str, Field(description="Mind name")],
    ) -> CallToolResult:
        """Get details of a specific Mind"""
        try:
            return format_success(await client.request("GET", f"{API_PREFIX}/minds/{name}"))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def create_mind(
        name: Annotated[str, Field(description="Unique Mind name")],
        datasources: Annotated[
            list[DatasourceRef],
            Field(description="Datasources to attach: string names or {name, tables} objects"),
        ],
        system_prompt: Annotated[
            Optional[str], Field(description="Custom system prompt for the Mind")
        ] = None,
        allow_direct_queries: Annotated[
            Optional[bool], Field(description="Allow direct SQL queries through this Mind")
        ] = None,
    ) -> CallToolResult:
        """Create a new Mind connected to one or more datasources"""
        body = Payload(name=name, datasources=dump_datasources(datasources)).put_nonempty(
            "parameters", mind_parameters(system_prompt, allow_direct_queries)
        )
        try:
            return format_success(await client.request("POST", f"{API_PREFIX}/minds", body))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def update_mind(
        name: Annotated[str, Field(description="Mind name to update")],
        new_name: Annotated[Optional[str], Field(description="Rename the Mind")] = None,
        datasources: Annotated[
            Optional[list[DatasourceRef]], Field(description="Updated datasource list")
        ] = None,
        system_prompt: Annotated[Optional[str], Field(description="Updated system prompt")] = None,
        allow_direct_queries: Annotated[
            Optional[bool], Field(description="Allow direct SQL queries through this Mind")
        ] = None,
    ) -> CallToolResult:
        """Update a Mind's name, datasources, or parameters"""
        body = mind_body(
            name=new_name,
            datasources=datasources,
            system_prompt=system_prompt,
            allow_direct_queries=allow_direct_queries,
        )
        try:
            return format_success(await client.request("PUT", f"{API_PREFIX}/minds/{name}", body))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def delete_mind(
        name: Annotated[str, Field(description="Mind name to delete")],
    ) -> CallToolResult:
        """Delete a Mind"""
        try:
            await client.request("DELETE", f"{API_PREFIX}/minds/{name}")
            return format_success({"deleted": True, "name": name})
        except MindsError as e:
            return format_failure(e)
