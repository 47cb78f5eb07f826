"""Generic JSON-RPC 1.0 transport."""

from elementsrpc.jsonrpc.client import Client
from elementsrpc.jsonrpc.protocol import (
    JSONRPC_VERSION,
    RpcRequest,
    RpcResponse,
    next_request_id,
    parse_response,
)

__all__ = [
    "Client",
    "JSONRPC_VERSION",
    "RpcRequest",
    "RpcResponse",
    "next_request_id",
    "parse_response",
]
