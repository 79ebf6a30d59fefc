from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Union

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from mcp import types
from pydantic import ValidationError

from . import __version__
from .api_client import ElectionsAPIClient
from .config import Settings
from .dispatcher import ToolDispatcher
from .main import SERVER_NAME, create_server_with_registry
from .models import JsonRpcRequest, ToolCallParams
from .tools import ToolRegistry

logger = logging.getLogger(__name__)

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

MessageId = Optional[Union[int, str]]


def _rpc_result(message_id: MessageId, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "result": result}


def _rpc_error(message_id: MessageId, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "error": {"code": code, "message": message}}


def create_http_app(
    settings: Optional[Settings] = None,
    api_client: Optional[ElectionsAPIClient] = None,
) -> FastAPI:
    """
    Create a FastAPI app that serves the MCP tools over plain HTTP.

    Each POST to `/mcp` carries one JSON-RPC 2.0 request and gets one JSON
    response back. Tool failures are returned as `isError` results, exactly
    like the stdio transport; only malformed requests get JSON-RPC errors.
    """
    app = FastAPI(
        title="Dane County Elections MCP",
        version=__version__,
        description="MCP tools for the Dane County elections API",
    )

    _, registry, dispatcher = create_server_with_registry(settings, api_client)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": SERVER_NAME}

    @app.get("/")
    async def root():
        return {
            "service": SERVER_NAME,
            "version": __version__,
            "protocol": "mcp",
            "transport": "http",
            "endpoints": {
                "health": "/health",
                "mcp": "/mcp",
            },
        }

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> JSONResponse:
        body = await request.body()
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return JSONResponse(_rpc_error(None, PARSE_ERROR, f"Parse error: {e}"), status_code=400)

        try:
            message = JsonRpcRequest.model_validate(payload)
        except ValidationError as e:
            message_id = payload.get("id") if isinstance(payload, dict) else None
            return JSONResponse(
                _rpc_error(message_id, INVALID_REQUEST, f"Invalid Request: {e.errors()[0]['msg']}"),
                status_code=400,
            )

        response = await handle_mcp_request(registry, dispatcher, message)
        return JSONResponse(response)

    return app


async def handle_mcp_request(
    registry: ToolRegistry,
    dispatcher: ToolDispatcher,
    message: JsonRpcRequest,
) -> Dict[str, Any]:
    """
    Route one JSON-RPC request to the registry or dispatcher.
    """
    method = message.method
    params = message.params or {}

    if method == "initialize":
        return _rpc_result(
            message.id,
            {
                "protocolVersion": types.LATEST_PROTOCOL_VERSION,
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
            },
        )

    if method == "tools/list":
        tools = registry.list_tools()
        return _rpc_result(
            message.id,
            {"tools": [tool.model_dump(mode="json", by_alias=True, exclude_none=True) for tool in tools]},
        )

    if method == "tools/call":
        try:
            call = ToolCallParams.model_validate(params)
        except ValidationError:
            return _rpc_error(message.id, INVALID_PARAMS, "Invalid params: 'name' is required")

        result = await dispatcher.call(call.name, call.arguments)
        return _rpc_result(
            message.id,
            result.model_dump(mode="json", by_alias=True, exclude_none=True),
        )

    return _rpc_error(message.id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def run_http_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the HTTP server using uvicorn."""
    import uvicorn

    app = create_http_app()
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level="info",
        access_log=True,
    )
    server = uvicorn.Server(config)
    logger.warning("Dane County Elections MCP Server running on http://%s:%s", host, port)
    await server.serve()
