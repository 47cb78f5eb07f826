"""Tests for the Elements node facade."""

import inspect
import io
from decimal import Decimal

import httpx
import pytest
from rich.console import Console

from elementsrpc.elements.catalogue import CATALOGUE
from elementsrpc.elements.client import Client
from elementsrpc.utils.exceptions import InvalidArgumentError, RpcError


def _echo(request: httpx.Request, body: dict) -> httpx.Response:
    return httpx.Response(200, json={"result": {"method": body["method"], "params": body["params"]}, "error": None, "id": body["id"]})


@pytest.fixture
def node(fake_node):
    return fake_node(_echo)


@pytest.fixture
def client(node) -> Client:
    return Client(transport=node.transport())


def test_every_procedure_is_a_coroutine_method() -> None:
    for proc in CATALOGUE:
        method = getattr(Client, proc.name)
        assert inspect.iscoroutinefunction(method), proc.name


@pytest.mark.asyncio
async def test_help_with_command(client: Client, node) -> None:
    await client.help("blockhash")
    assert node.bodies[0]["method"] == "help"
    assert node.bodies[0]["params"] == ["blockhash"]


@pytest.mark.asyncio
async def test_help_without_command_sends_null(client: Client, node) -> None:
    await client.help()
    assert node.bodies[0]["params"] is None


@pytest.mark.asyncio
async def test_help_rejects_non_string_without_sending(client: Client, node) -> None:
    with pytest.raises(InvalidArgumentError) as err:
        await client.help(42)
    assert err.value.message == "The command '42' is invalid; must be a string."
    assert node.requests == []


@pytest.mark.asyncio
async def test_print_help_writes_node_text(fake_node) -> None:
    text = "getblockhash height\n[returns hash]"
    node = fake_node(lambda request, body: httpx.Response(200, json={"result": text, "error": None, "id": body["id"]}))
    out = io.StringIO()
    await Client(transport=node.transport()).print_help("getblockhash", console=Console(file=out, width=120))
    assert "[returns hash]" in out.getvalue()


@pytest.mark.asyncio
async def test_get_block_forwards_arguments(client: Client, node) -> None:
    assert await client.get_block("00ab") == {"method": "getblock", "params": ["00ab"]}
    await client.get_block("00ab", False)
    await client.get_block(blockhash="00ab", verbose=True)
    assert [b["params"] for b in node.bodies[1:]] == [["00ab", False], ["00ab", True]]


@pytest.mark.asyncio
async def test_get_block_requires_hash(client: Client, node) -> None:
    with pytest.raises(InvalidArgumentError, match="blockhash"):
        await client.get_block()
    assert node.requests == []


@pytest.mark.asyncio
async def test_no_argument_operation(client: Client, node) -> None:
    result = await client.get_block_count()
    assert result == {"method": "getblockcount", "params": None}


@pytest.mark.asyncio
async def test_interior_optional_sent_as_null(client: Client, node) -> None:
    await client.get_balance(None, 6)
    assert node.bodies[0]["params"] == [None, 6]


@pytest.mark.asyncio
async def test_numeric_argument_rejects_bool(client: Client, node) -> None:
    with pytest.raises(InvalidArgumentError):
        await client.get_block_hash(True)
    assert node.requests == []


@pytest.mark.asyncio
async def test_decimal_amount_is_sent_as_number(client: Client, node) -> None:
    await client.send_to_address("2dZRkPX3hrPtuBrmMkbGtxTxsuYYgAaFrXZ", Decimal("0.5"))
    assert node.bodies[0]["method"] == "sendtoaddress"
    assert node.bodies[0]["params"] == ["2dZRkPX3hrPtuBrmMkbGtxTxsuYYgAaFrXZ", 0.5]


@pytest.mark.asyncio
async def test_invoke_accepts_any_spelling(client: Client, node) -> None:
    await client.invoke("getBlockHash", 10)
    await client.invoke("getblockhash", height=11)
    await client.invoke("get_block_hash", 12)
    assert [b["method"] for b in node.bodies] == ["getblockhash"] * 3
    assert [b["params"] for b in node.bodies] == [[10], [11], [12]]


@pytest.mark.asyncio
async def test_invoke_unknown_operation(client: Client, node) -> None:
    with pytest.raises(InvalidArgumentError, match="Unknown operation: get_everything"):
        await client.invoke("get_everything")
    assert node.requests == []


def test_build_params_without_sending() -> None:
    client = Client()
    assert client.build_params("wallet_passphrase", "secret", 60) == ["secret", 60]
    assert client.build_params("list_unspent") is None


@pytest.mark.asyncio
async def test_node_errors_propagate(fake_node) -> None:
    node = fake_node(
        lambda request, body: httpx.Response(
            500, json={"result": None, "error": {"code": -5, "message": "Block not found"}, "id": body["id"]}
        )
    )
    with pytest.raises(RpcError, match="Block not found"):
        await Client(transport=node.transport()).get_block("ff")


def test_generated_method_signature_and_doc() -> None:
    sig = inspect.signature(Client.get_block)
    assert list(sig.parameters) == ["self", "blockhash", "verbose"]
    assert sig.parameters["blockhash"].default is inspect.Parameter.empty
    assert sig.parameters["verbose"].default is None
    assert "getblock" in Client.get_block.__doc__
    assert Client.get_block.__name__ == "get_block"


def test_facade_shares_transport_config() -> None:
    client = Client({"host": "10.0.0.2", "sslStrict": False})
    assert client.config.host == "10.0.0.2"
    assert client.config.ssl_strict is False
    assert client.rpc.config is client.config


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", [Decimal("Infinity"), float("nan"), "NaN"])
async def test_non_finite_amount_rejected_before_sending(client: Client, node, amount) -> None:
    with pytest.raises(InvalidArgumentError, match="amount"):
        await client.send_to_address("2dZRkPX3hrPtuBrmMkbGtxTxsuYYgAaFrXZ", amount)
    assert node.requests == []
