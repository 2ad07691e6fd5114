"""Question-answering tools: Chat Completions and Responses APIs."""

import json
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from minds_mcp.client import API_PREFIX, MindsClient
from minds_mcp.payloads import ChatMessage, Payload, sql_query_tool
from minds_mcp.responses import format_failure, format_success, format_text
from minds_mcp.utils.exceptions import MindsError


def extract_answer(data: Any) -> str:
    """Pull ``choices[0].message.content`` out of a completion.

    Falls back to the whole response as compact JSON when it is missing.
    """
    try:
        answer = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        answer = None
    if answer and isinstance(answer, str):
        return answer
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def register(mcp: FastMCP, client: MindsClient) -> None:
    """Register the chat and query tools on ``mcp``."""

    @mcp.tool()
    async def ask_mind(
        mind: Annotated[str, Field(description="Mind name to query")],
        question: Annotated[str, Field(description="Natural language question")],
        history: Annotated[
            Optional[list[ChatMessage]],
            Field(description="Previous messages for multi-turn conversation"),
        ] = None,
    ) -> CallToolResult:
        """Ask a question to a Mind using the Chat Completions API (OpenAI-compatible). Returns a natural-language answer based on connected data."""
        messages = [message.model_dump() for message in history or []]
        messages.append({"role": "user", "content": question})
        body = Payload(model=mind, messages=messages, stream=False)
        try:
            data = await client.request("POST", f"{API_PREFIX}/chat/completions", body)
            if data is None:
                raise MindsError(f"POST {API_PREFIX}/chat/completions returned an empty response")
            return format_text(extract_answer(data))
        except MindsError as e:
            return format_failure(e)

    @mcp.tool()
    async def query_mind(
        mind: Annotated[str, Field(description="Mind name")],
        question: Annotated[str, Field(description="Natural language question or instruction")],
        conversation_id: Annotated[
            Optional[str], Field(description="Conversation ID to continue a previous thread")
        ] = None,
        sql_query: Annotated[
            Optional[str],
            Field(description="Direct SQL SELECT query to run (Mind must have allow_direct_queries enabled)"),
        ] = None,
        max_inline_rows: Annotated[
            Optional[int],
            Field(ge=1, le=10000, description="Max rows to return inline (1-10000, default 10000)"),
        ] = None,
    ) -> CallToolResult:
        """Query a Mind using the Responses API, with optional SQL query tool and conversation context"""
        body = Payload(model=mind, input=question, stream=False).put_nonempty(
            "conversation", conversation_id
        )
        if sql_query:
            body["tools"] = [sql_query_tool(sql_query, max_inline_rows)]
        try:
            return format_success(await client.request("POST", f"{API_PREFIX}/responses", body))
        except MindsError as e:
            return format_failure(e)
