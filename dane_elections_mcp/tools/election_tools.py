from __future__ import annotations

from typing import Any, Callable, Dict, List

from mcp import types

from ..api_client import ElectionsAPIClient
from . import ToolHandler, ToolRegistry, is_present

PathBuilder = Callable[[Dict[str, Any]], str]

_API_PREFIX = "/api/v1/elections"

_ELECTION_ID: Dict[str, Any] = {
    "type": "string",
    "description": "The unique identifier for the election",
}


def _schema(properties: Dict[str, Any], required: List[str]) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _election_results_path(arguments: Dict[str, Any]) -> str:
    path = f"{_API_PREFIX}/electionresults/{arguments['electionid']}"
    racenumber = arguments.get("racenumber")
    # An empty racenumber means "all races".
    if is_present(racenumber):
        path += f"/{racenumber}"
    return path


# name -> (description, input schema, path builder)
ELECTION_TOOLS: Dict[str, Dict[str, Any]] = {
    "list_elections": {
        "description": "Get a list of all available elections in Dane County",
        "schema": _schema({}, []),
        "path": lambda args: f"{_API_PREFIX}/list",
    },
    "get_election": {
        "description": "Get detailed information about a specific election by its ID",
        "schema": _schema({"electionid": _ELECTION_ID}, ["electionid"]),
        "path": lambda args: f"{_API_PREFIX}/election/{args['electionid']}",
    },
    "get_last_published": {
        "description": "Get the last published timestamp for a specific election",
        "schema": _schema({"electionid": _ELECTION_ID}, ["electionid"]),
        "path": lambda args: f"{_API_PREFIX}/lastpublished/{args['electionid']}",
    },
    "get_races": {
        "description": "Get all races for a specific election",
        "schema": _schema({"electionid": _ELECTION_ID}, ["electionid"]),
        "path": lambda args: f"{_API_PREFIX}/races/{args['electionid']}",
    },
    "get_election_results": {
        "description": (
            "Get results for all races in an election, or for a specific race "
            "if racenumber is provided"
        ),
        "schema": _schema(
            {
                "electionid": _ELECTION_ID,
                "racenumber": {
                    "type": "string",
                    "description": "Optional: The race number to get specific race results",
                },
            },
            ["electionid"],
        ),
        "path": _election_results_path,
    },
    "get_precinct_results": {
        "description": "Get precinct-level results for a specific race in an election",
        "schema": _schema(
            {
                "electionid": _ELECTION_ID,
                "racenumber": {
                    "type": "string",
                    "description": "The race number to get precinct results for",
                },
            },
            ["electionid", "racenumber"],
        ),
        "path": lambda args: (
            f"{_API_PREFIX}/precinctresults/{args['electionid']}/{args['racenumber']}"
        ),
    },
}


def build_path(name: str, arguments: Dict[str, Any]) -> str:
    """Build the relative API path for tool `name`. Arguments must already be validated."""
    return ELECTION_TOOLS[name]["path"](arguments)


def _make_handler(api_client: ElectionsAPIClient, path_builder: PathBuilder) -> ToolHandler:
    async def handler(arguments: Dict[str, Any]) -> Any:
        return await api_client.get(path_builder(arguments))

    return handler


def register_tools(registry: ToolRegistry, api_client: ElectionsAPIClient) -> None:
    for name, meta in ELECTION_TOOLS.items():
        registry.add_tool(
            types.Tool(
                name=name,
                description=meta["description"],
                inputSchema=meta["schema"],
            ),
            _make_handler(api_client, meta["path"]),
        )
