from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field


class JsonRpcRequest(BaseModel):
    """
    A single JSON-RPC 2.0 request as accepted by the HTTP transport.
    """

    jsonrpc: Literal["2.0"]
    method: str = Field(min_length=1)
    id: Optional[Union[int, str]] = None
    params: Optional[Dict[str, Any]] = None


class ToolCallParams(BaseModel):
    """Params of a `tools/call` request."""

    name: str = Field(min_length=1, description="Registered tool name.")
    arguments: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Tool arguments; omitted arguments are treated as empty.",
    )
