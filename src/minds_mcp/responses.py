"""Tool response envelopes."""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def format_text(text: str) -> CallToolResult:
    """Wrap plain text in a successful tool result."""
    return CallToolResult(content=[TextContent(type="text", text=text)])


def format_success(data: Any) -> CallToolResult:
    """Wrap an API result as pretty-printed JSON."""
    return format_text(json.dumps(data, indent=2, ensure_ascii=False))


def format_failure(error: BaseException) -> CallToolResult:
    """Wrap a caught error in an error result."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {error}")],
        isError=True,
    )
