"""Single config object: one per client, immutable after construction."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


@dataclass(frozen=True)
class ClientConfig:
    """
    node_address: full URL of the node (scheme, host, optional port), e.g. http://[::1]:7076.
    decode_responses: resolve calls with parsed JSON (True) or the raw response text (False).
    timeout: seconds per request; None waits forever.
    """

    node_address: str
    decode_responses: bool = True
    timeout: float | None = None

    @staticmethod
    def load_from_env(prefix: str = "RAI_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for ClientConfig(**...)."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result

    @classmethod
    def from_env(cls, prefix: str = "RAI_", **defaults: Any) -> ClientConfig:
        """
        RAI_NODE_ADDRESS, RAI_DECODE_RESPONSES, RAI_TIMEOUT -> ClientConfig.
        Unknown RAI_* variables are ignored; a missing node address is an error.
        """
        raw = cls.load_from_env(prefix, **defaults)
        node_address = raw.get("node_address")
        if not node_address:
            raise ValueError(f"{prefix}NODE_ADDRESS is not set")
        decode = raw.get("decode_responses", True)
        if isinstance(decode, str):
            decode = _parse_bool(f"{prefix}DECODE_RESPONSES", decode)
        timeout = raw.get("timeout")
        if isinstance(timeout, str):
            timeout = float(timeout) if timeout.strip() else None
        return cls(node_address=str(node_address).strip(), decode_responses=decode, timeout=timeout)
