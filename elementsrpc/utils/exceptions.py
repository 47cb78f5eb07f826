"""
Exception hierarchy for elementsrpc.

Provides:
- One exception class per failure kind, each with a stable error code
- Error kinds shared by the transport, the facade and the CLI
- Safe error message formatting (credentials never leak into logs)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Failure kinds a call can settle with."""
    INVALID_ARGUMENT = "invalid_argument"
    TRANSPORT_ERROR = "transport_error"
    RESPONSE_PARSE_ERROR = "response_parse_error"
    RPC_ERROR = "rpc_error"
    HTTP_STATUS_ERROR = "http_status_error"
    INVALID_RESPONSE = "invalid_response"


class ElementsRpcError(Exception):
    """Base exception for all elementsrpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        kind: ErrorKind = ErrorKind.TRANSPORT_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "kind": self.kind.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidArgumentError(ElementsRpcError):
    """Client-side precondition failed; nothing was sent."""

    def __init__(self, message: str, operation: str | None = None, parameter: str | None = None):
        details: dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if parameter:
            details["parameter"] = parameter
        super().__init__(message, code="INVALID_ARGUMENT", kind=ErrorKind.INVALID_ARGUMENT, details=details)


class TransportError(ElementsRpcError):
    """Connection, TLS or timeout failure."""

    def __init__(self, message: str, cause: BaseException | None = None, timeout: bool = False):
        super().__init__(
            message,
            code="TRANSPORT_TIMEOUT" if timeout else "TRANSPORT_ERROR",
            kind=ErrorKind.TRANSPORT_ERROR,
            details={
                "cause": type(cause).__name__ if cause is not None else None,
                "timeout": timeout,
            },
        )
        self.cause = cause
        self.timeout = timeout


class ResponseParseError(ElementsRpcError):
    """The response body was not valid JSON."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message,
            code="RESPONSE_PARSE_ERROR",
            kind=ErrorKind.RESPONSE_PARSE_ERROR,
            details={"status_code": status_code},
        )
        self.status_code = status_code


class RpcError(ElementsRpcError):
    """The node answered with an error object."""

    def __init__(self, message: str, rpc_code: int | None = None, status_code: int | None = None):
        super().__init__(
            message,
            code="RPC_ERROR",
            kind=ErrorKind.RPC_ERROR,
            details={"rpc_code": rpc_code, "status_code": status_code},
        )
        self.rpc_code = rpc_code
        self.status_code = status_code


class HttpStatusError(ElementsRpcError):
    """Envelope without result or error, delivered with a non-200 status."""

    def __init__(self, status_code: int):
        super().__init__(
            f"Server Error. Status Code: {status_code}",
            code="HTTP_STATUS_ERROR",
            kind=ErrorKind.HTTP_STATUS_ERROR,
            details={"status_code": status_code},
        )
        self.status_code = status_code


class InvalidResponseError(ElementsRpcError):
    """Envelope without result or error, delivered with status 200."""

    def __init__(self, status_code: int | None = 200):
        super().__init__(
            "The JSON response is invalid.",
            code="INVALID_RESPONSE",
            kind=ErrorKind.INVALID_RESPONSE,
            details={"status_code": status_code},
        )
        self.status_code = status_code


_SENSITIVE_PATTERNS = [
    re.compile(r"(?<=://)[^/@\s:]+:[^/@\s]+(?=@)"),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"(?<=rpcpassword=)\S+", re.IGNORECASE),
    re.compile(r"__cookie__:[a-fA-F0-9]+"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def format_error(exc: Exception, include_details: bool = False) -> str:
    """Format an exception for display."""
    if isinstance(exc, ElementsRpcError):
        message = sanitize_error_message(exc.message)
        if include_details:
            return f"Error [{exc.code}] ({exc.kind.value}): {message}"
        return f"Error [{exc.code}]: {message}"
    return f"Error: {sanitize_error_message(str(exc))}"
