"""
JSON-RPC 1.0 envelope.

Request framing and response classification shared by the transport and its
tests. A well-formed reply carries exactly one of ``result`` / ``error``.
"""

from __future__ import annotations

import itertools
import json
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from elementsrpc.utils.exceptions import (
    HttpStatusError,
    InvalidResponseError,
    ResponseParseError,
    RpcError,
)

JSONRPC_VERSION = "1.0"
UNKNOWN_SERVER_ERROR = "Unknown server error"

# Time-derived and unique within the process; next() on a count is atomic.
_request_ids = itertools.count(int(time.time() * 1000))


def next_request_id() -> int:
    return next(_request_ids)


def _encode_default(obj: Any) -> Any:
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise ValueError(f"Out of range decimal value: {obj}")
        if obj == obj.to_integral_value():
            return int(obj)
        return float(round(obj, 8))
    if isinstance(obj, (tuple, set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(value: Any) -> str:
    """Serialize a value the way request bodies are serialized."""
    return json.dumps(value, default=_encode_default, separators=(",", ":"), allow_nan=False)


@dataclass(frozen=True)
class RpcRequest:
    method: str
    params: list[Any] | None = None
    id: int = field(default_factory=next_request_id)
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "id": self.id,
            "method": self.method,
            "params": list(self.params) if self.params is not None else None,
        }

    def to_json(self) -> str:
        return dumps(self.to_dict())

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")

    @classmethod
    def from_json(cls, data: str | bytes) -> RpcRequest:
        d = json.loads(data)
        return cls(
            method=d["method"],
            params=d.get("params"),
            id=d.get("id"),
            jsonrpc=d.get("jsonrpc", JSONRPC_VERSION),
        )


@dataclass
class RpcResponse:
    result: Any = None
    error: Any = None
    id: Any = None
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.result, "error": self.error, "id": self.id}

    @classmethod
    def from_json(
        cls,
        data: str | bytes,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> RpcResponse:
        return parse_response(data, status_code, headers)


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
        return UNKNOWN_SERVER_ERROR
    if isinstance(error, str) and error:
        return error
    return UNKNOWN_SERVER_ERROR


def _error_code(error: Any) -> int | None:
    if isinstance(error, dict):
        code = error.get("code")
        if isinstance(code, int) and not isinstance(code, bool):
            return code
    return None


def parse_response(
    body: str | bytes,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> RpcResponse:
    """
    Decode and classify a reply body.

    Order of checks: JSON decoding, a non-null ``error``, a present ``result``.
    An envelope with neither is an HTTP status error when the status is not
    200, otherwise an invalid response.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseParseError(
            f"Unable to parse the JSON response. {e}",
            status_code=status_code,
        ) from e

    if isinstance(data, dict):
        error = data.get("error")
        if error is not None:
            raise RpcError(_error_message(error), rpc_code=_error_code(error), status_code=status_code)
        if "result" in data:
            return RpcResponse(
                result=data["result"],
                error=None,
                id=data.get("id"),
                status_code=status_code,
                headers=dict(headers or {}),
            )

    if status_code != 200:
        raise HttpStatusError(status_code)
    raise InvalidResponseError(status_code)
