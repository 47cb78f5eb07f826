"""
Elements node client.

One async method per node procedure, generated from the catalogue. Every
method binds its arguments against the procedure's parameter schema and
forwards them to the JSON-RPC transport as a positional list.
"""

from __future__ import annotations

import inspect
from typing import Any, Mapping

import httpx
from rich.console import Console

from elementsrpc.config.schema import RpcConfig
from elementsrpc.elements.catalogue import CATALOGUE, RpcProcedure, find_procedure
from elementsrpc.elements.params import bind_params
from elementsrpc.jsonrpc.client import Client as JsonRpcClient
from elementsrpc.utils.exceptions import InvalidArgumentError


class Client:
    """Facade over :class:`elementsrpc.jsonrpc.Client` for an Elements node."""

    def __init__(
        self,
        config: RpcConfig | Mapping[str, Any] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> None:
        self._rpc = JsonRpcClient(config, transport=transport, **options)

    @property
    def rpc(self) -> JsonRpcClient:
        return self._rpc

    @property
    def config(self) -> RpcConfig:
        return self._rpc.config

    @staticmethod
    def procedure(operation: str) -> RpcProcedure:
        procedure = find_procedure(operation)
        if procedure is None:
            raise InvalidArgumentError(f"Unknown operation: {operation}", operation=operation)
        return procedure

    def build_params(self, operation: str, *args: Any, **kwargs: Any) -> list[Any] | None:
        """Validate arguments for ``operation`` and return the wire parameters."""
        procedure = self.procedure(operation)
        return bind_params(procedure.name, procedure.params, args, kwargs)

    async def invoke(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call any catalogued procedure by name.

        ``operation`` may be the Python name (``get_block_hash``), the
        camelCase name (``getBlockHash``) or the wire name (``getblockhash``).
        """
        procedure = self.procedure(operation)
        params = bind_params(procedure.name, procedure.params, args, kwargs)
        return await self._rpc.call(procedure.wire_name, params)

    async def help(self, command: Any = None) -> Any:
        """List all commands, or get help for a specified command."""
        if command is not None and not isinstance(command, str):
            raise InvalidArgumentError(
                f"The command '{command}' is invalid; must be a string.",
                operation="help",
                parameter="command",
            )
        return await self.invoke("help", command)

    async def print_help(self, command: str | None = None, console: Console | None = None) -> None:
        """Print help for all commands, or for a specified command."""
        text = await self.help(command)
        (console or Console()).print(text, markup=False, highlight=False)


def _make_operation(procedure: RpcProcedure):
    async def operation(self: Client, *args: Any, **kwargs: Any) -> Any:
        return await self.invoke(procedure.name, *args, **kwargs)

    parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for param in procedure.params:
        parameters.append(
            inspect.Parameter(
                param.name,
                inspect.Parameter.POSITIONAL_OR_KEYWORD,
                default=inspect.Parameter.empty if param.required else None,
            )
        )
    operation.__name__ = procedure.name
    operation.__qualname__ = f"{Client.__name__}.{procedure.name}"
    operation.__signature__ = inspect.Signature(parameters)
    operation.__doc__ = f"{procedure.summary}\n\nCalls ``{procedure.wire_name}``."
    return operation


for _procedure in CATALOGUE:
    if not hasattr(Client, _procedure.name):
        setattr(Client, _procedure.name, _make_operation(_procedure))
del _procedure
