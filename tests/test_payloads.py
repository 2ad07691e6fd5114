"""Tests for request body and query string builders."""

from minds_mcp.payloads import (
    DatasourceTables,
    Payload,
    dump_datasources,
    mind_body,
    mind_parameters,
    query_string,
    sql_query_tool,
)


class TestPayload:
    def test_put_skips_none(self):
        assert Payload(mode="all").put("table_names", None) == {"mode": "all"}

    def test_put_keeps_falsy_values(self):
        body = Payload().put("allow_direct_queries", False).put("tables", []).put("description", "")
        assert body == {"allow_direct_queries": False, "tables": [], "description": ""}

    def test_put_nonempty(self):
        assert Payload().put_nonempty("description", "") == {}
        assert Payload().put_nonempty("description", "Sales") == {"description": "Sales"}
        assert Payload().put_nonempty("parameters", {}) == {}
        assert Payload().put_nonempty("parameters", {"a": 1}) == {"parameters": {"a": 1}}


class TestMindBody:
    def test_no_parameters_key_when_unset(self):
        body = mind_body(name="sales", datasources=["pg"])
        assert body == {"name": "sales", "datasources": ["pg"]}

    def test_parameters_contain_only_supplied_keys(self):
        assert mind_body(name="m", datasources=[], system_prompt="Be brief")["parameters"] == {
            "system_prompt": "Be brief"
        }
        assert mind_body(name="m", datasources=[], allow_direct_queries=False)["parameters"] == {
            "allow_direct_queries": False
        }

    def test_mixed_datasource_references(self):
        refs = ["pg", DatasourceTables(name="sf", tables=["orders"]), DatasourceTables(name="bq")]
        assert dump_datasources(refs) == ["pg", {"name": "sf", "tables": ["orders"]}, {"name": "bq"}]

    def test_empty_update(self):
        assert mind_body() == {}
        assert mind_body(name="", system_prompt="") == {}

    def test_mind_parameters(self):
        assert mind_parameters() == {}
        assert mind_parameters("p", True) == {"system_prompt": "p", "allow_direct_queries": True}


def test_sql_query_tool():
    assert sql_query_tool("SELECT 1") == {"type": "sql_query", "query": "SELECT 1"}
    assert sql_query_tool("SELECT 1", 50) == {
        "type": "sql_query",
        "query": "SELECT 1",
        "max_inline_rows": 50,
    }


class TestQueryString:
    def test_empty(self):
        assert query_string() == ""
        assert query_string(limit=None, offset=None) == ""

    def test_keeps_order_and_skips_none(self):
        assert query_string(limit=10, offset=None) == "?limit=10"
        assert query_string(limit=10, offset=0) == "?limit=10&offset=0"

    def test_booleans(self):
        assert query_string(check_connection=True) == "?check_connection=true"

    def test_values_are_encoded(self):
        assert query_string(mind="sales team/2") == "?mind=sales%20team%2F2"
