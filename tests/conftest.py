"""Pytest fixtures: RaiClient wired to an in-process httpx.MockTransport."""

import json
from typing import Any, Callable

import httpx
import pytest

from raiclient import HttpRpcTransport, RaiClient

NODE_ADDRESS = "http://[::1]:7076"
WALLET_ADDRESS = "xrb_3t6k35gi95xu6tergt6p69ck76ogmitsa8mnijtpxm9fkcm736xtoncuohr3"


class FakeNode:
    """Records every request and answers with whatever `reply` returns."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.reply: Callable[[dict[str, Any]], httpx.Response] = lambda body: httpx.Response(200, json={})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(json.loads(request.content))

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def node() -> FakeNode:
    return FakeNode()


@pytest.fixture
def make_client(node: FakeNode):
    def factory(decode_responses: bool = True) -> RaiClient:
        transport = HttpRpcTransport(transport=httpx.MockTransport(node.handler))
        return RaiClient(NODE_ADDRESS, decode_responses, transport=transport)

    return factory
