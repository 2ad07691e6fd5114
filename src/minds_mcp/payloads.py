"""Request bodies, query strings and argument models for Minds API calls."""

from typing import Any, Literal, Optional, Union
from urllib.parse import quote, urlencode

from pydantic import BaseModel, Field


class DatasourceTables(BaseModel):
    """A datasource attached to a Mind, restricted to some of its tables."""

    name: str = Field(description="Datasource name")
    tables: Optional[list[str]] = Field(
        default=None, description="Tables the Mind may use (omit for all)"
    )


# A datasource is attached either by bare name or by name with a table list.
DatasourceRef = Union[str, DatasourceTables]


class ChatMessage(BaseModel):
    """One earlier turn of a multi-turn conversation."""

    role: Literal["user", "assistant", "system"]
    content: str


class Payload(dict):
    """JSON object builder that only keeps values that were supplied.

    Example:
        Payload(mode="all").put("table_names", None)  # -> {"mode": "all"}
    """

    def put(self, key: str, value: Any) -> "Payload":
        """Set ``key`` unless ``value`` is None."""
        if value is not None:
            self[key] = value
        return self

    def put_nonempty(self, key: str, value: Any) -> "Payload":
        """Set ``key`` unless ``value`` is None, an empty string or an empty mapping."""
        if value:
            self[key] = value
        return self


def dump_datasources(datasources: list[DatasourceRef]) -> list[Union[str, dict[str, Any]]]:
    """Serialize datasource references into the API's mixed list form."""
    return [
        ref if isinstance(ref, str) else ref.model_dump(exclude_none=True)
        for ref in datasources
    ]


def mind_parameters(
    system_prompt: Optional[str] = None,
    allow_direct_queries: Optional[bool] = None,
) -> Payload:
    """The Mind ``parameters`` object, holding only the supplied keys.

    An empty ``system_prompt`` counts as not supplied.
    """
    return (
        Payload()
        .put_nonempty("system_prompt", system_prompt)
        .put("allow_direct_queries", allow_direct_queries)
    )


def mind_body(
    name: Optional[str] = None,
    datasources: Optional[list[DatasourceRef]] = None,
    system_prompt: Optional[str] = None,
    allow_direct_queries: Optional[bool] = None,
) -> Payload:
    """Body for updating a Mind.

    An empty ``name`` is left out. ``parameters`` is only present when at
    least one of its keys is set.
    """
    return (
        Payload()
        .put_nonempty("name", name)
        .put("datasources", dump_datasources(datasources) if datasources is not None else None)
        .put_nonempty("parameters", mind_parameters(system_prompt, allow_direct_queries))
    )


def sql_query_tool(query: str, max_inline_rows: Optional[int] = None) -> Payload:
    """The ``sql_query`` tool entry for the Responses API."""
    return Payload(type="sql_query", query=query).put("max_inline_rows", max_inline_rows)


def query_string(**params: Any) -> str:
    """Encode supplied params as ``?a=1&b=2``, or ``""`` when none are set.

    Booleans are rendered the way the API expects them (``true``/``false``).
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))
    if not pairs:
        return ""
    return "?" + urlencode(pairs, quote_via=quote)
