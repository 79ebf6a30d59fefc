"""
Tool registration utilities.

Each module in this package exposes a `register_tools(registry, ...)` function
that adds its tools to the central registry used by the MCP server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Tuple

from mcp import types

from ..errors import UnknownToolError


ToolHandler = Callable[[Dict[str, Any]], Awaitable[Any]]


def is_present(value: Any) -> bool:
    """An argument counts as given unless it is None, "", False or 0."""
    return value is not None and value != "" and value is not False and value != 0


@dataclass(frozen=True)
class RegisteredTool:
    spec: types.Tool
    handler: ToolHandler

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(self.spec.inputSchema.get("required", ()))


class ToolRegistry:
    """
    In-memory registry mapping MCP tool names to their specifications and handlers.

    Tools are registered once at startup; the catalog is read-only afterwards.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, RegisteredTool] = {}

    def add_tool(self, tool: types.Tool, handler: ToolHandler) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = RegisteredTool(spec=tool, handler=handler)

    def list_tools(self) -> List[types.Tool]:
        return [rt.spec for rt in self._tools.values()]

    def get(self, name: str) -> RegisteredTool:
        if name not in self._tools:
            raise UnknownToolError(name)
        return self._tools[name]

    def get_handler(self, name: str) -> ToolHandler:
        return self.get(name).handler

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
