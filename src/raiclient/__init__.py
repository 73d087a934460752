"""
raiclient — asyncio RPC client for RaiBlocks/Nano nodes.
client = RaiClient("http://[::1]:7076"); await client.block_count()
"""
from loguru import logger

from raiclient.client import RaiClient
from raiclient.core import ClientConfig
from raiclient.rpc import (
    DecodeError,
    HttpRpcTransport,
    NetworkError,
    RequestDescriptor,
    RpcError,
    SerializationError,
    TransportError,
)

# Library: silent unless the application opts in with logger.enable("raiclient").
logger.disable("raiclient")

__all__ = [
    "RaiClient",
    "ClientConfig",
    "HttpRpcTransport",
    "RequestDescriptor",
    "RpcError",
    "SerializationError",
    "NetworkError",
    "TransportError",
    "DecodeError",
]
