import asyncio
import inspect

import httpx
import pytest

from raiclient import ClientConfig, DecodeError, RaiClient, SerializationError, TransportError
from raiclient.rpc.actions import ACTIONS, ACTIONS_BY_METHOD, DEFAULT_PENDING_THRESHOLD

from conftest import NODE_ADDRESS, WALLET_ADDRESS


def test_client_defaults() -> None:
    client = RaiClient("xrbNodeAddress")
    assert client.node_address == "xrbNodeAddress"
    assert client.decode_responses is True
    assert client.config == ClientConfig("xrbNodeAddress")


def test_client_with_decode_flag() -> None:
    assert RaiClient("xrbNodeAddress", True).decode_responses is True
    assert RaiClient("xrbNodeAddress", False).decode_responses is False


def test_config_is_immutable() -> None:
    client = RaiClient("xrbNodeAddress")
    with pytest.raises(AttributeError):
        client.config.node_address = "other"  # type: ignore[misc]


def test_from_config() -> None:
    client = RaiClient.from_config(ClientConfig("http://n:1", decode_responses=False, timeout=2.5))
    assert client.node_address == "http://n:1"
    assert client.decode_responses is False
    assert client.config.timeout == 2.5


def test_every_action_becomes_a_coroutine_method() -> None:
    client = RaiClient("xrbNodeAddress")
    for spec in ACTIONS:
        method = getattr(client, spec.method)
        assert inspect.iscoroutinefunction(method), spec.method
        assert list(inspect.signature(method).parameters) == [p.name for p in spec.params]
    assert len(ACTIONS_BY_METHOD) == len(ACTIONS)


def test_generated_signatures_keep_defaults() -> None:
    sig = inspect.signature(RaiClient.accounts_pending)
    assert sig.parameters["count"].default == 1
    assert sig.parameters["threshold"].default == DEFAULT_PENDING_THRESHOLD
    assert sig.parameters["source"].default is False
    assert sig.parameters["accounts"].default is inspect.Parameter.empty
    assert RaiClient.account_balance.__doc__


@pytest.mark.asyncio
async def test_block_count_sends_only_action(node, make_client) -> None:
    node.reply = lambda body: httpx.Response(200, json={"count": "1000", "unchecked": "10"})
    result = await make_client().block_count()
    assert result == {"count": "1000", "unchecked": "10"}
    assert node.requests[0].content == b'{"action":"block_count"}'
    assert str(node.requests[0].url) == NODE_ADDRESS + "/"


@pytest.mark.asyncio
async def test_account_balance_body(node, make_client) -> None:
    await make_client().account_balance("xrbWalletAddress")
    assert node.requests[0].content == b'{"action":"account_balance","account":"xrbWalletAddress"}'


@pytest.mark.asyncio
async def test_defaults_are_applied(node, make_client) -> None:
    client = make_client()
    await client.account_info(WALLET_ADDRESS)
    await client.account_info(WALLET_ADDRESS, True, weight=True)
    await client.accounts_pending([WALLET_ADDRESS])
    await client.account_create("wallet-id")
    assert node.bodies == [
        {"action": "account_info", "account": WALLET_ADDRESS,
         "representative": False, "weight": False, "pending": False},
        {"action": "account_info", "account": WALLET_ADDRESS,
         "representative": True, "weight": True, "pending": False},
        {"action": "accounts_pending", "accounts": [WALLET_ADDRESS],
         "count": 1, "threshold": 1000000000000000000000000, "source": False},
        {"action": "account_create", "wallet": "wallet-id", "work": True},
    ]


@pytest.mark.asyncio
async def test_unset_none_optionals_are_omitted(node, make_client) -> None:
    client = make_client()
    await client.republish("HASH")
    await client.republish("HASH", 2, sources=3, destinations=4)
    assert node.bodies == [
        {"action": "republish", "hash": "HASH", "count": 1},
        {"action": "republish", "hash": "HASH", "count": 2, "sources": 3, "destinations": 4},
    ]


@pytest.mark.asyncio
async def test_list_defaults_are_not_shared(node, make_client) -> None:
    client = make_client()
    await client.account_move("w", "src")
    await client.account_move("w", "src", ["a1"])
    assert node.bodies[0]["accounts"] == []
    assert node.bodies[1]["accounts"] == ["a1"]


@pytest.mark.asyncio
async def test_representatives_and_accounts_create_send_their_params(node, make_client) -> None:
    client = make_client()
    await client.representatives(5, sorting=True)
    await client.accounts_create("w", 2)
    assert node.bodies == [
        {"action": "representatives", "count": 5, "sorting": True},
        {"action": "accounts_create", "wallet": "w", "count": 2, "work": False},
    ]


@pytest.mark.asyncio
async def test_send_action_is_a_client_method(node, make_client) -> None:
    node.reply = lambda body: httpx.Response(200, json={"block": "000D1BAE"})
    result = await make_client().send("w", "src", "dst", "1000000")
    assert result == {"block": "000D1BAE"}
    assert node.bodies[0] == {
        "action": "send", "wallet": "w", "source": "src",
        "destination": "dst", "amount": "1000000", "work": False,
    }


@pytest.mark.asyncio
async def test_missing_or_unknown_arguments_raise_type_error(node, make_client) -> None:
    client = make_client()
    with pytest.raises(TypeError):
        await client.account_balance()
    with pytest.raises(TypeError):
        await client.block_count(1)
    with pytest.raises(TypeError):
        await client.account_history("a", colour="red")
    assert node.requests == []


@pytest.mark.asyncio
async def test_raw_mode_returns_text(node, make_client) -> None:
    node.reply = lambda body: httpx.Response(200, text='{"balance":"1","pending":"0"}')
    result = await make_client(decode_responses=False).account_balance(WALLET_ADDRESS)
    assert result == '{"balance":"1","pending":"0"}'
    assert '"balance"' in result and '"pending"' in result


@pytest.mark.asyncio
async def test_application_error_payload_is_a_success(node, make_client) -> None:
    node.reply = lambda body: httpx.Response(200, json={"error": "Bad account number"})
    assert await make_client().account_balance("nope") == {"error": "Bad account number"}


@pytest.mark.asyncio
async def test_errors_reach_the_caller(node, make_client) -> None:
    client = make_client()
    node.reply = lambda body: httpx.Response(500, text="boom")
    with pytest.raises(TransportError) as exc_info:
        await client.block_count()
    assert exc_info.value.status_code == 500

    node.reply = lambda body: httpx.Response(200, text="boom")
    with pytest.raises(DecodeError):
        await client.block_count()


@pytest.mark.asyncio
async def test_generic_call(node, make_client) -> None:
    await make_client().call("version")
    await make_client().call("account_weight", {"account": WALLET_ADDRESS})
    assert node.bodies == [
        {"action": "version"},
        {"action": "account_weight", "account": WALLET_ADDRESS},
    ]


@pytest.mark.asyncio
async def test_concurrent_calls_resolve_independently(node, make_client) -> None:
    client = make_client()
    node.reply = lambda body: httpx.Response(200, json={"echo": body["action"], "account": body.get("account")})
    results = await asyncio.gather(
        client.account_balance("a1"),
        client.block_count(),
        client.account_weight("a2"),
    )
    assert results == [
        {"echo": "account_balance", "account": "a1"},
        {"echo": "block_count", "account": None},
        {"echo": "account_weight", "account": "a2"},
    ]


@pytest.mark.asyncio
async def test_unencodable_params_fail_before_any_request(node, make_client) -> None:
    block: dict = {"type": "send"}
    block["previous"] = block
    with pytest.raises(SerializationError):
        await make_client().process(block)
    with pytest.raises(SerializationError):
        await make_client().call("process", {"block": object()})
    assert node.requests == []


@pytest.mark.asyncio
async def test_receive_minimum_set_sends_amount(node, make_client) -> None:
    await make_client().receive_minimum_set("1000000000000000000000000")
    assert node.bodies == [{"action": "receive_minimum_set", "amount": "1000000000000000000000000"}]
    assert list(inspect.signature(RaiClient.accounts_create).parameters) == ["self", "wallet", "count", "work"]
