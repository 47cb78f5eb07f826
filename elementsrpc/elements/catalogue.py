"""
Static catalogue of node procedures.

Each entry maps a Python operation name to its wire method name and the
ordered parameter schema. The wire name is always the operation name in
lowercase with separators removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from elementsrpc.elements.params import (
    AMOUNT,
    ARRAY,
    BOOLEAN,
    NUMERIC,
    OBJECT,
    STRING,
    RpcParam,
    opt,
    req,
)

GROUPS = (
    "general",
    "blockchain",
    "generating",
    "mining",
    "network",
    "rawtransactions",
    "util",
    "wallet",
)


@dataclass(frozen=True)
class RpcProcedure:
    name: str
    group: str
    params: tuple[RpcParam, ...] = ()
    summary: str = ""

    @property
    def wire_name(self) -> str:
        return wire_name_for(self.name)

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.params if p.required)

    def signature_text(self) -> str:
        return f"{self.name}({', '.join(p.describe() for p in self.params)})"


def wire_name_for(name: str) -> str:
    """``get_block_hash`` / ``getBlockHash`` -> ``getblockhash``."""
    return name.replace("_", "").replace("-", "").lower()


def _p(name: str, group: str, summary: str, *params: RpcParam) -> RpcProcedure:
    return RpcProcedure(name=name, group=group, params=tuple(params), summary=summary)


CATALOGUE: tuple[RpcProcedure, ...] = (
    # general
    _p("help", "general", "List all commands, or get help for a specified command.",
       opt("command", STRING)),
    _p("stop", "general", "Stop the node."),
    _p("get_info", "general", "DEPRECATED. Returns an object containing various state info.",
       opt("assetlabel", STRING)),
    _p("get_memory_info", "general", "Returns an object containing information about memory usage."),

    # blockchain
    _p("get_best_block_hash", "blockchain", "Returns the hash of the best (tip) block in the longest blockchain."),
    _p("get_block", "blockchain", "Returns block data as hex or, when verbose, as an object.",
       req("blockhash", STRING), opt("verbose", BOOLEAN)),
    _p("get_block_chain_info", "blockchain", "Returns an object containing various state info regarding blockchain processing."),
    _p("get_block_count", "blockchain", "Returns the number of blocks in the longest blockchain."),
    _p("get_block_hash", "blockchain", "Returns hash of block in best-block-chain at height provided.",
       req("height", NUMERIC)),
    _p("get_block_header", "blockchain", "Returns block header data as hex or, when verbose, as an object.",
       req("hash", STRING), opt("verbose", BOOLEAN)),
    _p("get_chain_tips", "blockchain", "Return information about all known tips in the block tree."),
    _p("get_difficulty", "blockchain", "Returns the proof-of-work difficulty as a multiple of the minimum difficulty."),
    _p("get_mempool_ancestors", "blockchain", "Returns all in-mempool ancestors of a mempool transaction.",
       req("txid", STRING), opt("verbose", BOOLEAN)),
    _p("get_mempool_descendants", "blockchain", "Returns all in-mempool descendants of a mempool transaction.",
       req("txid", STRING), opt("verbose", BOOLEAN)),
    _p("get_mempool_entry", "blockchain", "Returns mempool data for given transaction.",
       req("txid", STRING)),
    _p("get_mempool_info", "blockchain", "Returns details on the active state of the TX memory pool."),
    _p("get_raw_mempool", "blockchain", "Returns all transaction ids in memory pool.",
       opt("verbose", BOOLEAN)),
    _p("get_tx_out", "blockchain", "Returns details about an unspent transaction output.",
       req("txid", STRING), req("n", NUMERIC), opt("include_mempool", BOOLEAN)),
    _p("get_tx_out_proof", "blockchain", "Returns a hex-encoded proof that the txids were included in a block.",
       req("txids", ARRAY), opt("blockhash", STRING)),
    _p("get_tx_out_set_info", "blockchain", "Returns statistics about the unspent transaction output set."),
    _p("precious_block", "blockchain", "Treats a block as if it were received before others with the same work.",
       req("blockhash", STRING)),
    _p("prune_block_chain", "blockchain", "Prune the block chain up to the given height.",
       req("height", NUMERIC)),
    _p("verify_chain", "blockchain", "Verifies blockchain database.",
       opt("checklevel", NUMERIC), opt("nblocks", NUMERIC)),
    _p("verify_tx_out_proof", "blockchain", "Verifies that a proof points to a transaction in a block.",
       req("proof", STRING)),
    _p("reconsider_block", "blockchain", "Removes invalidity status of a block and its descendants.",
       req("blockhash", STRING)),
    _p("invalidate_block", "blockchain", "Permanently marks a block as invalid.",
       req("blockhash", STRING)),
    _p("wait_for_new_block", "blockchain", "Waits for a new block and returns its height and hash.",
       opt("timeout", NUMERIC)),
    _p("wait_for_block", "blockchain", "Waits for a specific block and returns its height and hash.",
       req("blockhash", STRING), opt("timeout", NUMERIC)),
    _p("wait_for_block_height", "blockchain", "Waits for (at least) block height and returns the tip.",
       req("height", NUMERIC), opt("timeout", NUMERIC)),

    # generating
    _p("combine_block_sigs", "generating", "Merges signatures on a block proposal.",
       req("blockhex", STRING), req("signatures", ARRAY)),
    _p("generate", "generating", "Mine blocks immediately to an address in the wallet.",
       req("nblocks", NUMERIC), opt("maxtries", NUMERIC)),
    _p("get_new_block_hex", "generating", "Gets hex serialisation of a proposed, unsigned block.",
       opt("min_tx_age", NUMERIC)),

    # mining
    _p("get_block_template", "mining", "Returns data needed to construct a block to work on.",
       opt("template_request", OBJECT)),
    _p("get_mining_info", "mining", "Returns a json object containing mining-related information."),
    _p("get_network_hash_ps", "mining", "Returns the estimated network hashes per second.",
       opt("nblocks", NUMERIC), opt("height", NUMERIC)),
    _p("prioritise_transaction", "mining", "Accepts the transaction into mined blocks at a higher (or lower) priority.",
       req("txid", STRING), req("priority_delta", NUMERIC), req("fee_delta", NUMERIC)),
    _p("submit_block", "mining", "Attempts to submit new block to network.",
       req("hexdata", STRING), opt("parameters", OBJECT)),
    _p("test_proposed_block", "mining", "Checks a block proposal for validity.",
       req("blockhex", STRING)),

    # network
    _p("add_node", "network", "Attempts to add or remove a node from the addnode list.",
       req("node", STRING), req("command", STRING)),
    _p("clear_banned", "network", "Clear all banned IPs."),
    _p("disconnect_node", "network", "Immediately disconnects from the specified node.",
       req("address", STRING)),
    _p("get_added_node_info", "network", "Returns information about the given added node, or all added nodes.",
       opt("node", STRING)),
    _p("get_connection_count", "network", "Returns the number of connections to other nodes."),
    _p("get_net_totals", "network", "Returns information about network traffic."),
    _p("get_network_info", "network", "Returns an object containing various state info regarding P2P networking."),
    _p("get_peer_info", "network", "Returns data about each connected network node."),
    _p("list_banned", "network", "List all banned IPs/Subnets."),
    _p("ping", "network", "Requests that a ping be sent to all other nodes."),
    _p("set_ban", "network", "Attempts to add or remove an IP/Subnet from the banned list.",
       req("subnet", STRING), req("command", STRING), opt("bantime", NUMERIC), opt("absolute", BOOLEAN)),
    _p("set_network_active", "network", "Disable/enable all p2p network activity.",
       req("state", BOOLEAN)),

    # rawtransactions
    _p("blind_raw_transaction", "rawtransactions", "Blinds the outputs of a raw transaction.",
       req("hexstring", STRING), opt("ignoreblindfail", BOOLEAN), opt("assetcommitments", ARRAY),
       opt("totalblinder", STRING)),
    _p("create_raw_transaction", "rawtransactions", "Create a transaction spending the given inputs and creating new outputs.",
       req("inputs", ARRAY), req("outputs", OBJECT), opt("locktime", NUMERIC), opt("output_assets", OBJECT)),
    _p("decode_raw_transaction", "rawtransactions", "Return a JSON object representing the serialized transaction.",
       req("hexstring", STRING)),
    _p("decode_script", "rawtransactions", "Decode a hex-encoded script.",
       req("hexstring", STRING)),
    _p("fund_raw_transaction", "rawtransactions", "Add inputs to a transaction until it has enough in value to meet its out value.",
       req("hexstring", STRING), opt("options", OBJECT)),
    _p("get_raw_transaction", "rawtransactions", "Return the raw transaction data.",
       req("txid", STRING), opt("verbose", BOOLEAN)),
    _p("raw_blind_raw_transaction", "rawtransactions", "Blinds the outputs of a raw transaction using explicit input blinders.",
       req("hexstring", STRING), req("inputblinders", ARRAY), req("inputamounts", ARRAY),
       req("inputassets", ARRAY), req("inputassetblinders", ARRAY), opt("totalblinder", STRING),
       opt("ignoreblindfail", BOOLEAN)),
    _p("send_raw_transaction", "rawtransactions", "Submits raw transaction (serialized, hex-encoded) to local node and network.",
       req("hexstring", STRING), opt("allowhighfees", BOOLEAN), opt("allowblindfails", BOOLEAN)),
    _p("sign_raw_transaction", "rawtransactions", "Sign inputs for raw transaction (serialized, hex-encoded).",
       req("hexstring", STRING), opt("prevtxs", ARRAY), opt("privkeys", ARRAY), opt("sighashtype", STRING)),

    # util
    _p("create_blinded_address", "util", "Creates a blinded address using the provided blinding key.",
       req("address", STRING), req("blinding_key", STRING)),
    _p("create_multi_sig", "util", "Creates a multi-signature address with n signature of m keys required.",
       req("nrequired", NUMERIC), req("keys", ARRAY)),
    _p("estimate_fee", "util", "Estimates the approximate fee per kilobyte needed for confirmation.",
       req("nblocks", NUMERIC)),
    _p("estimate_priority", "util", "Estimates the approximate priority a zero-fee transaction needs.",
       req("nblocks", NUMERIC)),
    _p("estimate_smart_fee", "util", "Estimates the approximate fee per kilobyte needed for confirmation.",
       req("nblocks", NUMERIC)),
    _p("estimate_smart_priority", "util", "Estimates the approximate priority a zero-fee transaction needs.",
       req("nblocks", NUMERIC)),
    _p("sign_message_with_priv_key", "util", "Sign a message with the private key of an address.",
       req("privkey", STRING), req("message", STRING)),
    _p("validate_address", "util", "Return information about the given address.",
       req("address", STRING)),
    _p("verify_message", "util", "Verify a signed message.",
       req("address", STRING), req("signature", STRING), req("message", STRING)),

    # wallet
    _p("abandon_transaction", "wallet", "Mark in-wallet transaction as abandoned.",
       req("txid", STRING)),
    _p("add_multi_sig_address", "wallet", "Add a nrequired-to-sign multisignature address to the wallet.",
       req("nrequired", NUMERIC), req("keys", ARRAY), opt("account", STRING)),
    _p("add_witness_address", "wallet", "Add a witness address for a script (with pubkey or redeemscript known).",
       req("address", STRING)),
    _p("backup_wallet", "wallet", "Safely copies current wallet file to destination.",
       req("destination", STRING)),
    _p("claim_pegin", "wallet", "Claim coins from the main chain by creating a pegin transaction.",
       req("bitcoin_tx", STRING), req("txoutproof", STRING), opt("sidechain_address", STRING)),
    _p("destroy_amount", "wallet", "Destroy an amount of a given asset.",
       req("asset", STRING), req("amount", AMOUNT), opt("comment", STRING)),
    _p("dump_asset_labels", "wallet", "Lists all known asset id/label pairs in this wallet."),
    _p("dump_blinding_key", "wallet", "Dumps the private blinding key for a confidential address.",
       req("address", STRING)),
    _p("dump_issuance_blinding_key", "wallet", "Dumps the private blinding key for an asset issuance.",
       req("txid", STRING), req("vin", NUMERIC)),
    _p("dump_priv_key", "wallet", "Reveals the private key corresponding to an address.",
       req("address", STRING)),
    _p("dump_wallet", "wallet", "Dumps all wallet keys in a human-readable format.",
       req("filename", STRING)),
    _p("encrypt_wallet", "wallet", "Encrypts the wallet with a passphrase.",
       req("passphrase", STRING)),
    _p("get_account", "wallet", "DEPRECATED. Returns the account associated with the given address.",
       req("address", STRING)),
    _p("get_account_address", "wallet", "DEPRECATED. Returns the current address for receiving payments to this account.",
       req("account", STRING)),
    _p("get_addresses_by_account", "wallet", "DEPRECATED. Returns the list of addresses for the given account.",
       req("account", STRING)),
    _p("get_balance", "wallet", "Returns the server's total available balance.",
       opt("account", STRING), opt("minconf", NUMERIC), opt("include_watchonly", BOOLEAN),
       opt("assetlabel", STRING)),
    _p("get_new_address", "wallet", "Returns a new address for receiving payments.",
       opt("account", STRING)),
    _p("get_pegin_address", "wallet", "Returns a main chain address and sidechain claim script for peg-in.",
       opt("account", STRING)),
    _p("get_raw_change_address", "wallet", "Returns a new address for receiving change."),
    _p("get_received_by_account", "wallet", "DEPRECATED. Returns the total amount received by addresses in an account.",
       req("account", STRING), opt("minconf", NUMERIC)),
    _p("get_received_by_address", "wallet", "Returns the total amount received by the given address.",
       req("address", STRING), opt("minconf", NUMERIC), opt("assetlabel", STRING)),
    _p("get_transaction", "wallet", "Get detailed information about in-wallet transaction.",
       req("txid", STRING), opt("include_watchonly", BOOLEAN), opt("assetlabel", STRING)),
    _p("get_unconfirmed_balance", "wallet", "Returns the server's total unconfirmed balance.",
       opt("asset", STRING)),
    _p("get_wallet_info", "wallet", "Returns an object containing various wallet state info."),
    _p("import_address", "wallet", "Adds a script or address that can be watched as if it were in the wallet.",
       req("address", STRING), opt("label", STRING), opt("rescan", BOOLEAN), opt("p2sh", BOOLEAN)),
    _p("import_blinding_key", "wallet", "Imports a private blinding key for a confidential address.",
       req("address", STRING), req("hexkey", STRING)),
    _p("import_issuance_blinding_key", "wallet", "Imports a private blinding key for an asset issuance.",
       req("txid", STRING), req("vin", NUMERIC), req("blindingkey", STRING)),
    _p("import_multi", "wallet", "Import addresses/scripts, rescanning all imports in one go.",
       req("requests", ARRAY), opt("options", OBJECT)),
    _p("import_priv_key", "wallet", "Adds a private key to the wallet.",
       req("privkey", STRING), opt("label", STRING), opt("rescan", BOOLEAN)),
    _p("import_pruned_funds", "wallet", "Imports funds without rescan.",
       req("rawtransaction", STRING), req("txoutproof", STRING)),
    _p("import_pub_key", "wallet", "Adds a public key that can be watched as if it were in the wallet.",
       req("pubkey", STRING), opt("label", STRING), opt("rescan", BOOLEAN)),
    _p("import_wallet", "wallet", "Imports keys from a wallet dump file.",
       req("filename", STRING)),
    _p("issue_asset", "wallet", "Create an asset.",
       req("assetamount", AMOUNT), req("tokenamount", AMOUNT), opt("blind", BOOLEAN)),
    _p("keypool_refill", "wallet", "Fills the keypool.",
       opt("newsize", NUMERIC)),
    _p("list_accounts", "wallet", "DEPRECATED. Returns an object that has account names as keys and balances as values.",
       opt("minconf", NUMERIC), opt("include_watchonly", BOOLEAN)),
    _p("list_address_groupings", "wallet", "Lists groups of addresses which have had their common ownership made public."),
    _p("list_issuances", "wallet", "List all issuances known to the wallet, optionally for one asset.",
       opt("asset", STRING)),
    _p("list_lock_unspent", "wallet", "Returns list of temporarily unspendable outputs."),
    _p("list_received_by_account", "wallet", "DEPRECATED. List balances by account.",
       opt("minconf", NUMERIC), opt("include_empty", BOOLEAN), opt("include_watchonly", BOOLEAN)),
    _p("list_received_by_address", "wallet", "List balances by receiving address.",
       opt("minconf", NUMERIC), opt("include_empty", BOOLEAN), opt("include_watchonly", BOOLEAN),
       opt("assetlabel", STRING)),
    _p("list_since_block", "wallet", "Get all transactions in blocks since the given block.",
       opt("blockhash", STRING), opt("target_confirmations", NUMERIC), opt("include_watchonly", BOOLEAN)),
    _p("list_transactions", "wallet", "Returns up to count most recent transactions.",
       opt("account", STRING), opt("count", NUMERIC), opt("skip", NUMERIC), opt("include_watchonly", BOOLEAN)),
    _p("list_unspent", "wallet", "Returns array of unspent transaction outputs.",
       opt("minconf", NUMERIC), opt("maxconf", NUMERIC), opt("addresses", ARRAY),
       opt("include_unsafe", BOOLEAN), opt("asset", STRING)),
    _p("lock_unspent", "wallet", "Updates list of temporarily unspendable outputs.",
       req("unlock", BOOLEAN), opt("transactions", ARRAY)),
    _p("reissue_asset", "wallet", "Create more of an already issued asset.",
       req("asset", STRING), req("assetamount", AMOUNT)),
    _p("remove_pruned_funds", "wallet", "Deletes the specified transaction from the wallet.",
       req("txid", STRING)),
    _p("send_many", "wallet", "Send multiple times.",
       req("fromaccount", STRING), req("amounts", OBJECT), opt("minconf", NUMERIC), opt("comment", STRING),
       opt("subtractfeefrom", ARRAY), opt("output_assets", OBJECT), opt("ignoreblindfail", BOOLEAN)),
    _p("send_to_address", "wallet", "Send an amount to a given address.",
       req("address", STRING), req("amount", AMOUNT), opt("comment", STRING), opt("comment_to", STRING),
       opt("subtractfeefromamount", BOOLEAN), opt("assetlabel", STRING), opt("ignoreblindfail", BOOLEAN)),
    _p("send_to_main_chain", "wallet", "Sends sidechain funds to the given main chain address.",
       req("address", STRING), req("amount", AMOUNT)),
    _p("set_account", "wallet", "DEPRECATED. Sets the account associated with the given address.",
       req("address", STRING), req("account", STRING)),
    _p("set_tx_fee", "wallet", "Set the transaction fee per kB.",
       req("amount", AMOUNT)),
    _p("sign_block", "wallet", "Signs a block proposal.",
       req("blockhex", STRING)),
    _p("sign_message", "wallet", "Sign a message with the private key of an address.",
       req("address", STRING), req("message", STRING)),
    _p("wallet_lock", "wallet", "Removes the wallet encryption key from memory, locking the wallet."),
    _p("wallet_passphrase", "wallet", "Stores the wallet decryption key in memory for timeout seconds.",
       req("passphrase", STRING), req("timeout", NUMERIC)),
    _p("wallet_passphrase_change", "wallet", "Changes the wallet passphrase.",
       req("oldpassphrase", STRING), req("newpassphrase", STRING)),
)

_BY_WIRE_NAME: dict[str, RpcProcedure] = {p.wire_name: p for p in CATALOGUE}


def find_procedure(name: str) -> RpcProcedure | None:
    """Look up by operation name, camelCase name or wire name."""
    return _BY_WIRE_NAME.get(wire_name_for(name))


def procedures_in(group: str) -> list[RpcProcedure]:
    if group not in GROUPS:
        raise ValueError(f"Unknown group: {group}. Expected one of: {', '.join(GROUPS)}")
    return [p for p in CATALOGUE if p.group == group]


def iter_procedures(groups: Iterable[str] | None = None) -> Iterable[RpcProcedure]:
    wanted = set(groups) if groups else set(GROUPS)
    return (p for p in CATALOGUE if p.group in wanted)
