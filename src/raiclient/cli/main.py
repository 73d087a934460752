"""
CLI for poking a node: list actions, call one, or print the request it would send.
Node address comes from --node or RAI_NODE_ADDRESS.
"""
from __future__ import annotations

import asyncio
import json
import os
import sys
from dataclasses import replace
from typing import Any, Optional

import typer
from loguru import logger

from raiclient.client import RaiClient
from raiclient.core.config import ClientConfig
from raiclient.rpc.actions import ACTIONS
from raiclient.rpc.protocol import RpcError

app = typer.Typer(help="raiclient CLI: call RaiBlocks/Nano node RPC actions.")


def _parse_value(raw: str) -> Any:
    """JSON when it parses (numbers, booleans, lists), plain string otherwise."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _parse_params(pairs: list[str]) -> dict[str, Any] | None:
    if not pairs:
        return None
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {pair!r}", param_hint="--param")
        params[key] = _parse_value(value)
    return params


def _config(node: str | None, raw: bool, timeout: float | None) -> ClientConfig:
    """Environment first, command-line options win."""
    config = ClientConfig.from_env(**({"node_address": node} if node else {}))
    overrides: dict[str, Any] = {}
    if node:
        overrides["node_address"] = node
    if timeout is not None:
        overrides["timeout"] = timeout
    if raw:
        overrides["decode_responses"] = False
    return replace(config, **overrides)


@app.command("actions")
def list_actions() -> None:
    """List every RPC action with its parameters (* = needs enable_control on the node)."""
    for spec in ACTIONS:
        parts = []
        for p in spec.params:
            parts.append(p.name if p.required else f"{p.name}={json.dumps(p.default)}")
        mark = "*" if spec.control else " "
        typer.echo(f"{mark} {spec.action}({', '.join(parts)})")


@app.command()
def call(
    action: str = typer.Argument(..., help="RPC action, e.g. block_count"),
    param: list[str] = typer.Option([], "--param", "-p", help="Action parameter as key=value (repeatable)"),
    node: Optional[str] = typer.Option(None, "--node", "-n", help="Node URL, e.g. http://[::1]:7076"),
    raw: bool = typer.Option(False, "--raw", help="Print the response text as received"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the request instead of sending it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr"),
) -> None:
    """Call one RPC action and print the node's response."""
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("raiclient")
    params = _parse_params(param)
    try:
        client = RaiClient.from_config(_config(node, raw, timeout))
    except ValueError as e:
        if node or os.environ.get("RAI_NODE_ADDRESS"):
            typer.echo(f"Invalid configuration: {e}", err=True)
        else:
            typer.echo(f"{e}. Use --node or set RAI_NODE_ADDRESS.", err=True)
        raise typer.Exit(1)

    try:
        if dry_run:
            req = client.build_request(action, params)
            typer.echo(req.url)
            typer.echo(req.body)
            return
        result = asyncio.run(client.call(action, params))
    except RpcError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if isinstance(result, str):
        typer.echo(result)
    else:
        typer.echo(json.dumps(result, indent=2))


def main() -> None:
    """Entry point for the raiclient console command."""
    app()


if __name__ == "__main__":
    main()
