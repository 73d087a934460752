"""Request building: action + params -> (url, JSON body). No I/O."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RequestDescriptor:
    """Target URL and serialized body of one RPC call."""

    url: str
    body: str


def build_request(
    node_address: str,
    action: str,
    params: Mapping[str, Any] | None = None,
) -> RequestDescriptor:
    """
    Build the request for `action`. The body always starts with the action key;
    params are merged at the top level after it. Every action shares one endpoint.
    """
    from raiclient.rpc.protocol import SerializationError

    payload: dict[str, Any] = {"action": action}
    if params is not None:
        payload.update(params)
    try:
        body = json.dumps(payload, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode params for {action!r}: {e}") from e
    return RequestDescriptor(url=node_address + "/", body=body)
