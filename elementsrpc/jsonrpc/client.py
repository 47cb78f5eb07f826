"""Async JSON-RPC 1.0 transport over HTTP(S)."""

from __future__ import annotations

import ssl
import time
from typing import Any, Mapping, Sequence

import httpx
from loguru import logger

from elementsrpc.config.schema import RpcConfig
from elementsrpc.jsonrpc.protocol import RpcRequest, RpcResponse, parse_response
from elementsrpc.utils.exceptions import (
    ElementsRpcError,
    InvalidArgumentError,
    TransportError,
    sanitize_error_message,
)


class Client:
    """
    Performs one JSON-RPC call per invocation against a single node.

    Configuration is fixed at construction. Every call opens and closes its
    own connection, so concurrent calls share nothing but the config.
    """

    def __init__(
        self,
        config: RpcConfig | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> None:
        if isinstance(config, RpcConfig):
            if options:
                config = RpcConfig.from_options(config.model_dump(), **options)
        else:
            config = RpcConfig.from_options(config, **options)
        self._config = config
        self._transport = transport

    @property
    def config(self) -> RpcConfig:
        return self._config

    def _verify(self) -> ssl.SSLContext | bool:
        cfg = self._config
        if not cfg.ssl:
            return True
        if not cfg.ssl_strict:
            return False
        if not cfg.ssl_ca:
            return True
        if "-----BEGIN" in cfg.ssl_ca:
            return ssl.create_default_context(cadata=cfg.ssl_ca)
        return ssl.create_default_context(cafile=cfg.ssl_ca)

    def _auth(self) -> httpx.BasicAuth | None:
        cfg = self._config
        if cfg.has_credentials:
            return httpx.BasicAuth(cfg.user or "", cfg.password or "")
        return None

    def _url(self, path: str) -> str:
        path = path or "/"
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._config.base_url}{path}"

    def build_request(self, method: str, params: Sequence[Any] | None = None) -> RpcRequest:
        return RpcRequest(method=method, params=list(params) if params is not None else None)

    async def call(self, method: str, params: Sequence[Any] | None = None, path: str = "/") -> Any:
        """Call ``method`` and return the decoded ``result``."""
        response = await self.call_raw(method, params, path)
        return response.result

    async def call_raw(self, method: str, params: Sequence[Any] | None = None, path: str = "/") -> RpcResponse:
        """
        Call ``method`` and return the full reply, headers included.

        Raises:
            InvalidArgumentError: params cannot be encoded as JSON.
            TransportError: connection, TLS or timeout failure.
            ResponseParseError: the body was not JSON.
            RpcError: the node returned an error object.
            HttpStatusError: neither result nor error, status other than 200.
            InvalidResponseError: neither result nor error, status 200.
        """
        cfg = self._config
        request = self.build_request(method, params)
        try:
            body = request.to_bytes()
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise InvalidArgumentError(
                f"Parameters for '{method}' cannot be encoded as JSON: {exc}",
                operation=method,
            ) from exc
        headers = {
            "Host": cfg.host,
            "Content-Type": "text/plain",
            "Content-Length": str(len(body)),
        }
        url = self._url(path)
        started = time.monotonic()
        logger.debug(f"rpc {method} id={request.id} -> {url}")

        try:
            client_kwargs: dict[str, Any] = {
                "timeout": httpx.Timeout(cfg.timeout_seconds),
                "auth": self._auth(),
            }
            if self._transport is not None:
                client_kwargs["transport"] = self._transport
            else:
                client_kwargs["verify"] = self._verify()
            async with httpx.AsyncClient(**client_kwargs) as client:
                resp = await client.request(cfg.method, url, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            logger.debug(f"rpc {method} id={request.id} timed out after {cfg.timeout}ms")
            raise TransportError(
                f"Request '{method}' timed out after {cfg.timeout}ms",
                cause=exc,
                timeout=True,
            ) from exc
        except (httpx.HTTPError, ssl.SSLError, OSError) as exc:
            message = sanitize_error_message(str(exc)) or type(exc).__name__
            logger.debug(f"rpc {method} id={request.id} transport failure: {message}")
            raise TransportError(f"Request '{method}' failed: {message}", cause=exc) from exc

        elapsed_ms = (time.monotonic() - started) * 1000
        logger.debug(f"rpc {method} id={request.id} <- {resp.status_code} in {elapsed_ms:.1f}ms")
        try:
            return parse_response(resp.content, resp.status_code, dict(resp.headers))
        except ElementsRpcError as exc:
            logger.debug(f"rpc {method} id={request.id} failed: {exc}")
            raise
