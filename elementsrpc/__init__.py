"""
elementsrpc - async JSON-RPC client for Elements/Bitcoin nodes.
"""

from loguru import logger

from elementsrpc.config import RpcConfig, load_config, load_node_conf
from elementsrpc.elements import Client
from elementsrpc.jsonrpc import Client as JsonRpcClient
from elementsrpc.utils.exceptions import (
    ElementsRpcError,
    ErrorKind,
    HttpStatusError,
    InvalidArgumentError,
    InvalidResponseError,
    ResponseParseError,
    RpcError,
    TransportError,
)

__version__ = "0.1.0"

# Library is silent until the application opts in with logger.enable("elementsrpc").
logger.disable("elementsrpc")

__all__ = [
    "Client",
    "JsonRpcClient",
    "RpcConfig",
    "load_config",
    "load_node_conf",
    "ElementsRpcError",
    "ErrorKind",
    "HttpStatusError",
    "InvalidArgumentError",
    "InvalidResponseError",
    "ResponseParseError",
    "RpcError",
    "TransportError",
    "__version__",
]
