"""MCP Server for Minds - Exposes the Minds REST API as MCP tools.

Every tool validates its arguments, performs one request against the
Minds API and returns the JSON response (or the error) to the caller.

Usage:
    minds-mcp serve

Claude Code settings.json:
    {
        "mcpServers": {
            "minds": {
                "command": "minds-mcp",
                "args": ["serve"],
                "env": {"MINDS_API_KEY": "..."}
            }
        }
    }
"""

import logging
from typing import Optional

import httpx
from mcp.server.fastmcp import FastMCP

from minds_mcp.client import MindsClient
from minds_mcp.core.config import MindsConfig
from minds_mcp.tools import TOOL_GROUPS
from minds_mcp.ui import setup_logging

logger = logging.getLogger(__name__)

SERVER_NAME = "minds"


def create_server(
    config: MindsConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Build a FastMCP server with every Minds tool registered.

    Args:
        config: minds-mcp configuration
        transport: Optional httpx transport for the API client

    Returns:
        Configured FastMCP instance
    """
    mcp = FastMCP(SERVER_NAME, log_level=config.log_level)
    client = MindsClient(config, transport=transport)
    for group in TOOL_GROUPS:
        group.register(mcp, client)
    return mcp


def run_server(config: MindsConfig) -> None:
    """Run the MCP server with stdio transport."""
    setup_logging(config.log_level)
    if not config.has_api_key:
        logger.warning("MINDS_API_KEY is not set; every Minds API call will be rejected")
    logger.info("Serving Minds tools for %s over stdio", config.base_url)
    create_server(config).run()
