"""
RaiClient: RPC client for a RaiBlocks/Nano node.
One generic call(action, params); the public methods (account_balance, block_count, ...)
are generated from the method table in raiclient.rpc.actions.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping

from loguru import logger

from raiclient.core.config import ClientConfig
from raiclient.rpc.actions import ACTIONS, ActionSpec
from raiclient.rpc.protocol import RpcTransport
from raiclient.rpc.request import RequestDescriptor, build_request
from raiclient.rpc.transport import HttpRpcTransport


class RaiClient:
    """
    Facade: client.account_balance(account) -> awaitable node response.
    Every call is independent: a fresh request, its own connection, one result or one error.

        client = RaiClient("http://[::1]:7076")
        balance = await client.account_balance("xrb_3t6k35gi95xu6tergt6p69ck76ogmitsa8mnijtpxm9fkcm736xtoncuohr3")
    """

    def __init__(
        self,
        node_address: str,
        decode_responses: bool = True,
        *,
        timeout: float | None = None,
        transport: RpcTransport | None = None,
    ) -> None:
        self._config = ClientConfig(node_address=node_address, decode_responses=decode_responses, timeout=timeout)
        self._transport = transport if transport is not None else HttpRpcTransport(timeout=timeout)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: RpcTransport | None = None) -> RaiClient:
        return cls(
            config.node_address,
            config.decode_responses,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def node_address(self) -> str:
        return self._config.node_address

    @property
    def decode_responses(self) -> bool:
        return self._config.decode_responses

    def build_request(self, action: str, params: Mapping[str, Any] | None = None) -> RequestDescriptor:
        """Request for `action` against this client's node. Raises SerializationError."""
        return build_request(self._config.node_address, action, params)

    async def call(self, action: str, params: Mapping[str, Any] | None = None) -> Any:
        """
        Send any RPC action. Resolves with parsed JSON (or raw text when decode_responses is False).
        Raises SerializationError, NetworkError, TransportError or DecodeError.
        """
        descriptor = self.build_request(action, params)
        logger.debug("rpc {} -> {}", action, descriptor.url)
        return await self._transport.send(descriptor, self._config.decode_responses)

    def __repr__(self) -> str:
        return f"RaiClient({self._config.node_address!r}, decode_responses={self._config.decode_responses})"


def _make_action_method(spec: ActionSpec) -> Callable[..., Any]:
    sig = spec.signature()

    async def method(self: RaiClient, *args: Any, **kwargs: Any) -> Any:
        bound = sig.bind(self, *args, **kwargs)
        bound.apply_defaults()
        return await self.call(spec.action, spec.to_params(bound.arguments))

    method.__name__ = spec.method
    method.__qualname__ = f"RaiClient.{spec.method}"
    method.__doc__ = spec.doc
    method.__signature__ = sig  # type: ignore[attr-defined]
    return method


for _spec in ACTIONS:
    setattr(RaiClient, _spec.method, _make_action_method(_spec))
del _spec
