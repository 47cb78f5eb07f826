"""Pytest hooks and fixtures."""

import json
import os

import httpx
import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "live_node: requires a reachable Elements node (skipped unless ELEMENTS_RPC_LIVE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip live_node tests unless a node is explicitly available."""
    if os.environ.get("ELEMENTS_RPC_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a running Elements node (set ELEMENTS_RPC_LIVE=1)")
    for item in items:
        if "live_node" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch, request):
    """Keep user config files and ELEMENTS_RPC_* variables out of unit tests."""
    if "live_node" in request.keywords:
        return
    monkeypatch.setenv("HOME", str(tmp_path))
    for key in list(os.environ):
        if key.upper().startswith("ELEMENTS_RPC_"):
            monkeypatch.delenv(key, raising=False)


def _null_result(request, body):
    return httpx.Response(200, json={"result": None, "error": None, "id": body["id"]})


class FakeNode:
    """Records requests and answers them through a handler."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        self._handler = handler or _null_result

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content)
        response = self._handler(request, body)
        if hasattr(response, "__await__"):
            response = await response
        return response

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_node():
    """Factory: fake_node(handler) -> FakeNode."""
    return FakeNode
