"""Tests for the elements-rpc command line."""

import json

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from elementsrpc import __version__
from elementsrpc.cli import commands
from elementsrpc.elements.client import Client
from elementsrpc.jsonrpc.client import Client as JsonRpcClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(commands, "console", Console(width=200))


@pytest.fixture
def node(fake_node, monkeypatch):
    def handler(request: httpx.Request, body: dict) -> httpx.Response:
        if body["method"] == "getblockhash" and body["params"] == [-1]:
            return httpx.Response(
                500, json={"result": None, "error": {"code": -8, "message": "Block height out of range"}, "id": body["id"]}
            )
        if body["method"] == "help":
            return httpx.Response(200, json={"result": "getblockcount\nReturns the number of blocks.", "error": None, "id": body["id"]})
        return httpx.Response(200, json={"result": {"echo": body["params"]}, "error": None, "id": body["id"]})

    fake = fake_node(handler)
    fake.configs = []

    def make_rpc_client(config):
        fake.configs.append(config)
        return JsonRpcClient(config, transport=fake.transport())

    def make_client(config):
        fake.configs.append(config)
        return Client(config, transport=fake.transport())

    monkeypatch.setattr(commands, "make_rpc_client", make_rpc_client)
    monkeypatch.setattr(commands, "make_client", make_client)
    return fake


def test_version() -> None:
    result = runner.invoke(commands.app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_call_parses_json_params(node) -> None:
    result = runner.invoke(commands.app, ["call", "getblock", "00ab", "true", "--path", "/wallet/w1"])
    assert result.exit_code == 0, result.output
    assert node.bodies[0]["method"] == "getblock"
    assert node.bodies[0]["params"] == ["00ab", True]
    assert node.requests[0].url.path == "/wallet/w1"
    assert json.loads(result.output) == {"echo": ["00ab", True]}


def test_call_without_params_sends_null(node) -> None:
    result = runner.invoke(commands.app, ["call", "getblockcount"])
    assert result.exit_code == 0, result.output
    assert node.bodies[0]["params"] is None


def test_connection_options_override_config(node, tmp_path) -> None:
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"host": "filehost", "port": 7041, "user": "alice"}))
    result = runner.invoke(
        commands.app,
        ["--config", str(config_file), "--port", "18884", "--password", "pw", "--insecure", "call", "getblockcount"],
    )
    assert result.exit_code == 0, result.output
    cfg = node.configs[0]
    assert (cfg.host, cfg.port, cfg.user, cfg.password) == ("filehost", 18884, "alice", "pw")
    assert cfg.ssl_strict is False
    assert node.requests[0].url.host == "filehost"


def test_node_conf_option(node, tmp_path) -> None:
    conf = tmp_path / "elements.conf"
    conf.write_text("[regtest]\nrpcport=18884\nrpcpassword=x\n")
    result = runner.invoke(commands.app, ["--conf", str(conf), "--network", "regtest", "call", "getblockcount"])
    assert result.exit_code == 0, result.output
    assert node.configs[0].port == 18884


def test_invoke_validates_and_forwards(node) -> None:
    result = runner.invoke(commands.app, ["invoke", "getBlockHash", "10"])
    assert result.exit_code == 0, result.output
    assert node.bodies[0]["method"] == "getblockhash"
    assert node.bodies[0]["params"] == [10]


def test_invoke_rejects_bad_argument(node) -> None:
    result = runner.invoke(commands.app, ["invoke", "get_block_hash", "ten"])
    assert result.exit_code == 1
    assert "INVALID_ARGUMENT" in result.output
    assert node.requests == []


def test_rpc_error_exits_with_message(node) -> None:
    result = runner.invoke(commands.app, ["call", "getblockhash", "--", "-1"])
    assert result.exit_code == 1
    assert "Block height out of range" in result.output


def test_bad_config_file_exits(node, tmp_path) -> None:
    config_file = tmp_path / "cfg.json"
    config_file.write_text("{broken")
    result = runner.invoke(commands.app, ["--config", str(config_file), "call", "getblockcount"])
    assert result.exit_code == 1
    assert "Failed to load config" in result.output


def test_help_prints_plain_text(node) -> None:
    result = runner.invoke(commands.app, ["help", "getblockcount"])
    assert result.exit_code == 0, result.output
    assert "Returns the number of blocks." in result.output
    assert node.bodies[0]["params"] == ["getblockcount"]


def test_methods_lists_catalogue() -> None:
    result = runner.invoke(commands.app, ["methods", "--group", "util"])
    assert result.exit_code == 0, result.output
    assert "validateaddress" in result.output
    assert "getblockhash" not in result.output


def test_methods_unknown_group() -> None:
    result = runner.invoke(commands.app, ["methods", "-g", "lightning"])
    assert result.exit_code != 0


@pytest.mark.parametrize(
    "raw, expected",
    [("10", 10), ("true", True), ('{"a": 1}', {"a": 1}), ("00ab", "00ab"), ("", ""), ("null", None)],
)
def test_parse_value(raw: str, expected) -> None:
    assert commands.parse_value(raw) == expected
