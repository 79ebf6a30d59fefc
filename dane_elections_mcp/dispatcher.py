from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

from mcp import types

from .errors import ElectionsMCPError, ToolValidationError
from .tools import ToolRegistry, is_present

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    content = types.TextContent(type="text", text=text)
    return types.CallToolResult(content=[content], isError=is_error)


class ToolDispatcher:
    """
    Routes an (operation name, arguments) pair to exactly one registered
    handler and wraps the outcome in an MCP `CallToolResult`.

    Failures never escape `call()`: they come back as a text block of the
    form "Error: <message>" with `isError` set.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        """Validate and run a single tool call, returning the raw JSON result."""
        tool = self._registry.get(name)
        args: Dict[str, Any] = dict(arguments or {})

        missing = [param for param in tool.required if not is_present(args.get(param))]
        if missing:
            raise ToolValidationError(missing)

        return await tool.handler(args)

    async def call(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> types.CallToolResult:
        logger.debug("Tool call %s args=%s", name, arguments)
        try:
            result = await self.dispatch(name, arguments)
        except ElectionsMCPError as e:
            logger.warning("Tool %s failed: %s", name, e)
            return text_result(f"Error: {e}", is_error=True)
        except Exception as e:
            logger.exception("Unexpected error executing tool %s", name)
            return text_result(f"Error: {str(e) or 'Unknown error occurred'}", is_error=True)

        return text_result(json.dumps(result, indent=2, ensure_ascii=False))
