"""Utility functions for elementsrpc."""

from elementsrpc.utils.exceptions import (
    ElementsRpcError,
    InvalidArgumentError,
    TransportError,
    ResponseParseError,
    RpcError,
    HttpStatusError,
    InvalidResponseError,
    ErrorKind,
    sanitize_error_message,
    format_error,
)

__all__ = [
    "ElementsRpcError",
    "InvalidArgumentError",
    "TransportError",
    "ResponseParseError",
    "RpcError",
    "HttpStatusError",
    "InvalidResponseError",
    "ErrorKind",
    "sanitize_error_message",
    "format_error",
]
