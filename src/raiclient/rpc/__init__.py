from raiclient.rpc.actions import ACTIONS, ACTIONS_BY_METHOD, ActionSpec, Param
from raiclient.rpc.protocol import (
    DecodeError,
    NetworkError,
    RpcError,
    RpcTransport,
    SerializationError,
    TransportError,
)
from raiclient.rpc.request import RequestDescriptor, build_request
from raiclient.rpc.transport import HttpRpcTransport

__all__ = [
    "ACTIONS",
    "ACTIONS_BY_METHOD",
    "ActionSpec",
    "Param",
    "RpcError",
    "SerializationError",
    "NetworkError",
    "TransportError",
    "DecodeError",
    "RpcTransport",
    "RequestDescriptor",
    "build_request",
    "HttpRpcTransport",
]
