"""
Method table: public method name -> RPC action -> parameters and defaults.
RaiClient turns every ActionSpec into a coroutine method with a matching signature.
Protocol reference: https://github.com/clemahieu/raiblocks/wiki/RPC-protocol
"""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

REQUIRED: Any = inspect.Parameter.empty

# 10^24 raw, i.e. 1 Mrai.
DEFAULT_PENDING_THRESHOLD = 1000000000000000000000000


@dataclass(frozen=True)
class Param:
    """One action parameter. A default of None means: omit from the body while unset."""

    name: str
    default: Any = REQUIRED

    @property
    def required(self) -> bool:
        return self.default is REQUIRED


@dataclass(frozen=True)
class ActionSpec:
    method: str
    action: str
    params: tuple[Param, ...] = ()
    doc: str = ""
    control: bool = False  # node must run with enable_control

    def signature(self) -> inspect.Signature:
        parameters = [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        for p in self.params:
            parameters.append(
                inspect.Parameter(p.name, inspect.Parameter.POSITIONAL_OR_KEYWORD, default=p.default)
            )
        return inspect.Signature(parameters)

    def to_params(self, bound: dict[str, Any]) -> dict[str, Any] | None:
        """Bound arguments -> body params. None when the action takes no parameters."""
        if not self.params:
            return None
        out: dict[str, Any] = {}
        for p in self.params:
            value = bound[p.name]
            if value is None and p.default is None:
                continue
            if isinstance(value, list):
                value = list(value)
            out[p.name] = value
        return out


def _a(method: str, *params: Param | str, doc: str = "", control: bool = False) -> ActionSpec:
    ps = tuple(p if isinstance(p, Param) else Param(p) for p in params)
    return ActionSpec(method=method, action=method, params=ps, doc=doc, control=control)


ACTIONS: tuple[ActionSpec, ...] = (
    _a("account_balance", "account",
       doc="Returns how many RAW is owned and how many have not yet been received by account."),
    _a("account_block_count", "account", doc="Get number of blocks for a specific account."),
    _a("account_info", "account", Param("representative", False), Param("weight", False), Param("pending", False),
       doc="Returns frontier, open block, change representative block, balance, "
           "last modified timestamp and block count for account."),
    _a("account_create", "wallet", Param("work", True), control=True,
       doc="Creates a new account, inserting the next deterministic key in wallet."),
    _a("account_get", "key", doc="Get account number for the public key."),
    _a("account_history", "account", Param("count", 1), doc="Reports send/receive information for an account."),
    _a("account_list", "wallet", doc="Lists all the accounts inside wallet."),
    _a("account_move", "wallet", "source", Param("accounts", []), control=True,
       doc="Moves accounts from source to wallet."),
    _a("account_key", "account", doc="Get the public key for account."),
    _a("account_remove", "wallet", "account", control=True, doc="Remove account from wallet."),
    _a("account_representative", "account", doc="Returns the representative for account."),
    _a("account_representative_set", "wallet", "account", "representative", Param("work", False), control=True,
       doc="Sets the representative for account in wallet."),
    _a("account_weight", "account", doc="Returns the voting weight for account."),
    _a("accounts_balances", "accounts",
       doc="Returns how many RAW is owned and how many have not yet been received by accounts list."),
    _a("accounts_create", "wallet", Param("count", 1), Param("work", False), control=True,
       doc="Creates new accounts, inserting next deterministic keys in wallet up to count."),
    _a("accounts_frontiers", "accounts",
       doc="Returns pairs of account and block hash representing the head block for accounts list."),
    _a("accounts_pending", "accounts", Param("count", 1), Param("threshold", DEFAULT_PENDING_THRESHOLD),
       Param("source", False),
       doc="Returns pending block hashes for accounts, with amount >= threshold."),
    _a("available_supply", doc="Returns how many rai are in the public supply."),
    _a("block", "hash", doc="Retrieves a json representation of block."),
    _a("blocks", "hashes", doc="Retrieves json representations of blocks."),
    _a("blocks_info", "hashes", Param("source", False), Param("pending", False),
       doc="Retrieves json representations of blocks with transaction amount and block account."),
    _a("block_account", "hash", doc="Returns the account containing block."),
    _a("block_count", doc="Reports the number of blocks in the ledger and unchecked synchronizing blocks."),
    _a("block_count_type", doc="Reports the number of blocks in the ledger by type."),
    _a("block_create", "type", "key", "account", "representative", "source", control=True,
       doc="Creates a json representation of a new block signed with key."),
    _a("bootstrap", "address", "port", doc="Initialize bootstrap to specific IP address and port."),
    _a("bootstrap_any", doc="Initialize multi-connection bootstrap to random peers."),
    _a("chain", "block", Param("count", 1),
       doc="Returns block hashes in the account chain starting at block up to count."),
    _a("delegators", "account", doc="Returns delegator accounts and balances for representative account."),
    _a("delegators_count", "account", doc="Get number of delegators for a specific representative account."),
    _a("deterministic_key", "seed", "index", doc="Derive deterministic keypair from seed based on index."),
    _a("frontiers", "account", Param("count", 1),
       doc="Returns pairs of account and head block hash starting at account up to count."),
    _a("frontiers_count", doc="Reports the number of accounts in the ledger."),
    _a("history", "hash", Param("count", 1), doc="Reports send/receive information for a chain of blocks."),
    _a("mrai_from_raw", "amount", doc="Divide a raw amount down by the Mrai ratio."),
    _a("mrai_to_raw", "amount", doc="Multiply an Mrai amount by the Mrai ratio."),
    _a("krai_from_raw", "amount", doc="Divide a raw amount down by the krai ratio."),
    _a("krai_to_raw", "amount", doc="Multiply a krai amount by the krai ratio."),
    _a("rai_from_raw", "amount", doc="Divide a raw amount down by the rai ratio."),
    _a("rai_to_raw", "amount", doc="Multiply a rai amount by the rai ratio."),
    _a("keepalive", "address", "port", control=True,
       doc="Tells the node to send a keepalive packet to address:port."),
    _a("key_create", doc="Generates an adhoc random keypair."),
    _a("key_expand", "key", doc="Derive public key and account number from private key."),
    _a("ledger", "account", Param("count", 1), Param("representative", False), Param("weight", False),
       Param("pending", False), Param("sorting", False), control=True,
       doc="Returns account info from the local database starting at account up to count."),
    _a("payment_init", "wallet",
       doc="Marks all accounts in wallet as available for being used as a payment session."),
    _a("payment_begin", "wallet", doc="Begin a new payment session; returns an account with 0 balance."),
    _a("payment_wait", "account", "amount", "timeout",
       doc="Wait for payment of amount to arrive in account or until timeout milliseconds elapse."),
    _a("payment_end", "account", "wallet", doc="End a payment session, marking the account available again."),
    _a("process", "block", doc="Publish block to the network."),
    _a("receive", "wallet", "account", "block", doc="Receive pending block for account in wallet."),
    _a("receive_minimum", control=True, doc="Returns receive minimum for node."),
    _a("receive_minimum_set", "amount", control=True,
       doc="Set amount as new receive minimum for node until restart."),
    _a("representatives", Param("count", 1), Param("sorting", False),
       doc="Returns pairs of representative and its voting weight."),
    _a("wallet_representative", "wallet", doc="Returns the default representative for wallet."),
    _a("wallet_representative_set", "wallet", "representative", control=True,
       doc="Sets the default representative for wallet."),
    _a("republish", "hash", Param("count", 1), Param("sources", None), Param("destinations", None),
       doc="Rebroadcast blocks starting at hash to the network."),
    _a("search_pending", "wallet", control=True,
       doc="Tells the node to look for pending blocks for any account in wallet."),
    _a("search_pending_all", control=True,
       doc="Tells the node to look for pending blocks for any account in all available wallets."),
    _a("send", "wallet", "source", "destination", "amount", Param("work", False), control=True,
       doc="Send amount from source in wallet to destination."),
    _a("stop", control=True, doc="Method to safely shutdown node."),
)

ACTIONS_BY_METHOD: dict[str, ActionSpec] = {spec.method: spec for spec in ACTIONS}
