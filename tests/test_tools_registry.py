"""Tool registry tests — the six election tools and their schemas.

Tests cover:
    - Exactly six descriptors with the expected names
    - Required parameter sets per tool
    - Duplicate registration rejected
    - Unknown lookups raise UnknownToolError
"""

import pytest
from mcp import types

from dane_elections_mcp.errors import UnknownToolError
from dane_elections_mcp.tools import ToolRegistry
from dane_elections_mcp.tools.election_tools import build_path


EXPECTED_REQUIRED = {
    "list_elections": set(),
    "get_election": {"electionid"},
    "get_last_published": {"electionid"},
    "get_races": {"electionid"},
    "get_election_results": {"electionid"},
    "get_precinct_results": {"electionid", "racenumber"},
}


def test_registry_lists_six_tools(registry):
    names = [tool.name for tool in registry.list_tools()]
    assert len(names) == 6
    assert set(names) == set(EXPECTED_REQUIRED)


def test_required_parameters_match_catalog(registry):
    for tool in registry.list_tools():
        assert set(tool.inputSchema.get("required", [])) == EXPECTED_REQUIRED[tool.name]
        assert set(registry.get(tool.name).required) == EXPECTED_REQUIRED[tool.name]


def test_every_tool_has_description_and_object_schema(registry):
    for tool in registry.list_tools():
        assert tool.description
        assert tool.inputSchema["type"] == "object"
        for prop in tool.inputSchema["properties"].values():
            assert prop["type"] == "string"
            assert prop["description"]


def test_get_election_results_declares_optional_racenumber(registry):
    schema = registry.get("get_election_results").spec.inputSchema
    assert "racenumber" in schema["properties"]
    assert "racenumber" not in schema["required"]


def test_listing_is_stable_across_calls(registry):
    first = [t.name for t in registry.list_tools()]
    registry.get("get_races")
    second = [t.name for t in registry.list_tools()]
    assert first == second


def test_duplicate_registration_rejected():
    registry = ToolRegistry()
    tool = types.Tool(name="get_races", description="x", inputSchema={"type": "object"})

    async def handler(arguments):
        return {}

    registry.add_tool(tool, handler)
    with pytest.raises(ValueError, match="already registered"):
        registry.add_tool(tool, handler)
    assert len(registry) == 1


def test_unknown_tool_lookup_raises(registry):
    with pytest.raises(UnknownToolError) as exc_info:
        registry.get_handler("delete_election")
    assert str(exc_info.value) == "Unknown tool: delete_election"
    assert "delete_election" not in registry


def test_build_path_election_results_with_and_without_race():
    assert build_path("get_election_results", {"electionid": "2024-general"}) == (
        "/api/v1/elections/electionresults/2024-general"
    )
    assert build_path("get_election_results", {"electionid": "2024-general", "racenumber": ""}) == (
        "/api/v1/elections/electionresults/2024-general"
    )
    assert build_path("get_election_results", {"electionid": "2024-general", "racenumber": "5"}) == (
        "/api/v1/elections/electionresults/2024-general/5"
    )
