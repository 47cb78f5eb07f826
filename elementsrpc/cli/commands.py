"""CLI commands for elementsrpc.

Single entry point: global connection options on the callback, then
``call`` (raw transport), ``invoke`` (catalogued operation), ``methods`` and
``help``.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Coroutine

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from elementsrpc import __version__
from elementsrpc.config.loader import load_config, load_node_conf
from elementsrpc.config.schema import RpcConfig
from elementsrpc.elements.catalogue import GROUPS, iter_procedures
from elementsrpc.elements.client import Client
from elementsrpc.jsonrpc.client import Client as JsonRpcClient
from elementsrpc.utils.exceptions import ElementsRpcError, format_error, sanitize_error_message
from elementsrpc.cli.shared.logging_utils import enable_verbose_logging

app = typer.Typer(
    name="elements-rpc",
    help="elements-rpc - JSON-RPC client for Elements/Bitcoin nodes",
    no_args_is_help=True,
)

console = Console()


@dataclass
class CliState:
    config_path: Path | None = None
    conf_path: Path | None = None
    network: str | None = None
    overrides: dict[str, Any] | None = None


def parse_value(raw: str) -> Any:
    """Parse CLI input value as JSON if possible; fallback to string."""
    text = raw.strip()
    if text == "":
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def build_config(state: CliState) -> RpcConfig:
    """Resolve the connection config: file source first, then CLI overrides."""
    if state.conf_path is not None:
        base = load_node_conf(state.conf_path, network=state.network)
    else:
        base = load_config(state.config_path)
    return RpcConfig.from_options(base.model_dump(), **(state.overrides or {}))


def make_rpc_client(config: RpcConfig) -> JsonRpcClient:
    return JsonRpcClient(config)


def make_client(config: RpcConfig) -> Client:
    return Client(config)


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        state = CliState()
        ctx.obj = state
    return state


def _fail(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def _run(ctx: typer.Context, factory) -> Any:
    """Resolve config, build the coroutine and run it, mapping errors to exit 1."""
    try:
        config = build_config(_state(ctx))
        coro: Coroutine[Any, Any, Any] = factory(config)
        return asyncio.run(coro)
    except ElementsRpcError as e:
        _fail(format_error(e))
    except ValueError as e:
        _fail(f"Error: {sanitize_error_message(str(e))}")


def _print_result(result: Any) -> None:
    if isinstance(result, str):
        console.print(result, markup=False, highlight=False)
        return
    console.print_json(data=result, default=str)


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="JSON config file (default ~/.elementsrpc/config.json)"),
    conf: Path | None = typer.Option(None, "--conf", help="Node conf file (elements.conf / bitcoin.conf)"),
    network: str | None = typer.Option(None, "--network", help="Network section of the node conf, e.g. regtest"),
    host: str | None = typer.Option(None, "--host", help="Node host"),
    port: int | None = typer.Option(None, "--port", help="Node RPC port"),
    user: str | None = typer.Option(None, "--user", help="RPC user"),
    password: str | None = typer.Option(None, "--password", help="RPC password"),
    ssl: bool | None = typer.Option(None, "--ssl/--no-ssl", help="Use HTTPS"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate verification"),
    timeout: int | None = typer.Option(None, "--timeout", help="Request timeout in milliseconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr and ~/.elementsrpc/logs"),
) -> None:
    """Connection options shared by all commands."""
    overrides: dict[str, Any] = {
        "host": host,
        "port": port,
        "user": user,
        "password": password,
        "ssl": ssl,
        "timeout": timeout,
    }
    if insecure:
        overrides["ssl_strict"] = False
    ctx.obj = CliState(
        config_path=config,
        conf_path=conf,
        network=network,
        overrides={k: v for k, v in overrides.items() if v is not None},
    )
    if verbose:
        enable_verbose_logging("cli")


@app.command("call")
def call_command(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="Wire method name, e.g. getblockcount"),
    params: list[str] | None = typer.Argument(None, help="Positional params; JSON values or plain strings"),
    path: str = typer.Option("/", "--path", help="HTTP path, e.g. /wallet/name"),
) -> None:
    """Send a raw JSON-RPC call and print the result."""
    values = [parse_value(p) for p in params] if params else None
    result = _run(ctx, lambda cfg: make_rpc_client(cfg).call(method, values, path))
    _print_result(result)


@app.command("invoke")
def invoke_command(
    ctx: typer.Context,
    operation: str = typer.Argument(..., help="Operation name, e.g. get_block_hash or getblockhash"),
    args: list[str] | None = typer.Argument(None, help="Arguments; JSON values or plain strings"),
) -> None:
    """Call a catalogued operation with argument validation."""
    values = [parse_value(a) for a in args] if args else []
    result = _run(ctx, lambda cfg: make_client(cfg).invoke(operation, *values))
    _print_result(result)


@app.command("help")
def help_command(
    ctx: typer.Context,
    command: str | None = typer.Argument(None, help="Node command to describe"),
) -> None:
    """Show the node's help text."""
    result = _run(ctx, lambda cfg: make_client(cfg).help(command))
    _print_result(result)


@app.command("methods")
def methods_command(
    group: str | None = typer.Option(None, "--group", "-g", help=f"One of: {', '.join(GROUPS)}"),
) -> None:
    """List catalogued operations."""
    if group is not None and group not in GROUPS:
        raise typer.BadParameter(f"Unknown group: {group}. Expected one of: {', '.join(GROUPS)}")
    table = Table(title="Node operations")
    table.add_column("Operation", style="cyan")
    table.add_column("Wire name")
    table.add_column("Group", style="dim")
    table.add_column("Parameters")
    for proc in iter_procedures([group] if group else None):
        table.add_row(
            proc.name,
            proc.wire_name,
            proc.group,
            ", ".join(p.describe() for p in proc.params) or "-",
        )
    console.print(table)


@app.command("version")
def version_command() -> None:
    """Show version."""
    console.print(f"elements-rpc v{__version__}")
