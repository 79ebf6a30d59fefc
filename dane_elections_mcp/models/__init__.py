from .rpc import JsonRpcRequest, ToolCallParams

__all__ = ["JsonRpcRequest", "ToolCallParams"]
