"""MCP tool groups for the Minds API.

Each module exposes ``register(mcp, client)``.
"""

from minds_mcp.tools import catalog, chat, datasources, minds, results

TOOL_GROUPS = (datasources, minds, chat, results, catalog)

__all__ = ["TOOL_GROUPS", "catalog", "chat", "datasources", "minds", "results"]
