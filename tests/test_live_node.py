"""Smoke tests against a running node (ELEMENTS_RPC_LIVE=1)."""

import pytest

from elementsrpc import Client

pytestmark = pytest.mark.live_node


@pytest.mark.asyncio
async def test_get_block_count_and_hash() -> None:
    client = Client()
    count = await client.get_block_count()
    assert isinstance(count, int)
    block_hash = await client.get_block_hash(count)
    assert isinstance(block_hash, str) and len(block_hash) == 64


@pytest.mark.asyncio
async def test_help_lists_commands() -> None:
    text = await Client().help()
    assert "getblockcount" in text
