"""HTTP + JSON transport out of the box: one POST per call over httpx."""
from __future__ import annotations

import codecs
import json
from typing import Any

import httpx
from loguru import logger

from raiclient.rpc.protocol import DecodeError, NetworkError, TransportError
from raiclient.rpc.request import RequestDescriptor

_HEADERS = {"Content-Type": "application/json"}


def _codec_name(charset: str | None) -> str:
    """Charset from the Content-Type header, utf-8 when absent or unknown to Python."""
    if charset:
        try:
            return codecs.lookup(charset).name
        except LookupError:
            logger.debug("unknown response charset {!r}, using utf-8", charset)
    return "utf-8"


class HttpRpcTransport:
    """
    POSTs the descriptor body to its URL and returns the response text or parsed JSON.
    Every send() opens and closes its own AsyncClient; nothing is shared between calls.
    `transport` is passed to httpx.AsyncClient (e.g. httpx.MockTransport in tests).
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def send(self, descriptor: RequestDescriptor, decode: bool = True) -> Any:
        logger.debug("POST {} {}", descriptor.url, descriptor.body)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                async with client.stream(
                    "POST",
                    descriptor.url,
                    content=descriptor.body.encode(),
                    headers=_HEADERS,
                ) as response:
                    chunks = [chunk async for chunk in response.aiter_bytes()]
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Request to {} failed: {}", descriptor.url, e)
            raise NetworkError(f"cannot reach {descriptor.url}: {e}") from e

        if not 200 <= response.status_code <= 299:
            logger.warning("{} answered with status {}", descriptor.url, response.status_code)
            raise TransportError(response.status_code)

        raw = b"".join(chunks)
        encoding = _codec_name(response.charset_encoding)
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"response from {descriptor.url} is not valid {encoding} text: {e}",
                raw.decode(encoding, errors="replace"),
            ) from e
        if not decode:
            return text
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"response from {descriptor.url} is not valid JSON: {e}", text) from e
