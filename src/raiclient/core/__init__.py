from raiclient.core.config import ClientConfig

__all__ = [
    "ClientConfig",
]
