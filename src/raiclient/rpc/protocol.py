"""RPC protocols: error taxonomy and the transport contract used by RaiClient."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from raiclient.rpc.request import RequestDescriptor


class RpcError(Exception):
    """RPC call failed. Base of every error the client raises."""

    code = "RPC_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code or self.code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class SerializationError(RpcError):
    """Parameters could not be encoded to JSON. Raised before any network I/O."""

    code = "SERIALIZATION_ERROR"


class NetworkError(RpcError):
    """Node unreachable: connection refused, DNS failure, reset, bad URL."""

    code = "NETWORK_ERROR"


class TransportError(RpcError):
    """Node answered with a status code outside 200-299."""

    code = "HTTP_STATUS_ERROR"

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Failed to fetch URL. Status code: {status_code}")


class DecodeError(RpcError):
    """Node reachable, but the body is not valid JSON while decoding was requested."""

    code = "DECODE_ERROR"

    def __init__(self, message: str, body: str) -> None:
        self.body = body
        super().__init__(message)


@runtime_checkable
class RpcTransport(Protocol):
    """RPC transport: send one request, get one result. Default is HttpRpcTransport."""

    async def send(self, descriptor: RequestDescriptor, decode: bool) -> Any:
        ...
