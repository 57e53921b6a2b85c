"""Catalog of every option the node daemon recognizes in its config file.

The catalog is built once at import time and never mutated. Entries
produced by the parser hold references to these records, so there is a
single source for defaults, kinds and descriptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueKind(str, Enum):
    """Display hint for an option value.

    Values are always stored as strings; the kind only decides how the
    interface edits them (toggle for booleans, free text otherwise).
    """

    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOAT = "Float"
    TEXT = "Text"
    PATH = "Path"
    ADDRESS = "Address"


class Category(str, Enum):
    """Functional group an option belongs to."""

    CORE = "Core"
    NETWORK = "Network"
    RPC = "RPC"
    WALLET = "Wallet"
    DEBUGGING = "Debugging"
    MINING = "Mining"
    RELAY = "Relay"
    ZMQ = "ZMQ"


@dataclass(frozen=True)
class OptionSchema:
    """Immutable description of one known option."""

    key: str
    default: str
    kind: ValueKind
    category: Category
    description: str


def _options(
    category: Category, rows: list[tuple[str, str, ValueKind, str]]
) -> list[OptionSchema]:
    return [
        OptionSchema(key, default, kind, category, description)
        for key, default, kind, description in rows
    ]


_B = ValueKind.BOOLEAN
_I = ValueKind.INTEGER
_F = ValueKind.FLOAT
_T = ValueKind.TEXT
_P = ValueKind.PATH
_A = ValueKind.ADDRESS

_CATALOG: tuple[OptionSchema, ...] = tuple(
    _options(
        Category.CORE,
        [
            ("datadir", "", _P, "Specify data directory"),
            ("blocksdir", "", _P, "Specify blocks directory"),
            ("pid", "", _P, "Specify pid file"),
            ("debuglogfile", "", _P, "Specify debug log file"),
            ("settings", "", _P, "Specify settings file"),
            ("includeconf", "", _P, "Include additional config file"),
            ("loadblock", "", _P, "Import blocks from external file"),
            ("txindex", "0", _B, "Maintain full transaction index"),
            ("blockfilterindex", "", _T, "Maintain compact block filter index"),
            ("coinstatsindex", "0", _B, "Maintain coinstats index"),
            ("prune", "0", _I, "Reduce storage by pruning old blocks"),
            ("dbcache", "450", _I, "Database cache size in MiB"),
            ("maxmempool", "300", _I, "Maximum mempool size in MiB"),
            ("maxorphantx", "100", _I, "Maximum orphan transactions"),
            ("mempoolexpiry", "336", _I, "Mempool expiry in hours"),
            ("par", "0", _I, "Script verification threads"),
            (
                "blockreconstructionextratxn",
                "100",
                _I,
                "Extra transactions for block reconstruction",
            ),
            ("blocksonly", "0", _B, "Reject transactions from network peers"),
            ("persistmempool", "1", _B, "Save mempool on shutdown"),
            ("reindex", "0", _B, "Rebuild chain state and block index"),
            ("reindex-chainstate", "0", _B, "Rebuild chain state from blocks"),
            ("sysperms", "0", _B, "Create files with system default permissions"),
            ("daemon", "0", _B, "Run in background as daemon"),
            ("daemonwait", "0", _B, "Wait for initialization before backgrounding"),
            ("alertnotify", "", _T, "Command to execute on alert"),
            ("blocknotify", "", _T, "Command to execute on new block"),
            ("startupnotify", "", _T, "Command to execute on startup"),
            ("shutdownnotify", "", _T, "Command to execute before shutdown"),
            ("assumevalid", "", _T, "Assume blocks are valid up to this hash"),
        ],
    )
    + _options(
        Category.NETWORK,
        [
            ("chain", "main", _T, "Chain to use (main, test, signet, regtest)"),
            ("testnet", "0", _B, "Use testnet"),
            ("regtest", "0", _B, "Use regtest"),
            ("signet", "0", _B, "Use signet"),
            ("signetchallenge", "", _T, "Signet challenge script"),
            ("signetseednode", "", _T, "Signet seed node"),
            ("listen", "1", _B, "Accept incoming connections"),
            ("bind", "", _A, "Bind to address"),
            ("whitebind", "", _A, "Bind with whitelist permissions"),
            ("port", "8333", _I, "Listen on port"),
            ("maxconnections", "125", _I, "Maximum peer connections"),
            ("maxreceivebuffer", "5000", _I, "Maximum receive buffer per connection"),
            ("maxsendbuffer", "1000", _I, "Maximum send buffer per connection"),
            ("maxuploadtarget", "0", _I, "Maximum upload target in MiB per day"),
            ("timeout", "5000", _I, "Connection timeout in milliseconds"),
            ("peertimeout", "60", _I, "Inactive peer timeout in seconds"),
            ("maxtimeadjustment", "4200", _I, "Maximum time adjustment in seconds"),
            ("bantime", "86400", _I, "Ban duration in seconds"),
            ("discover", "1", _B, "Discover own IP address"),
            ("dns", "1", _B, "Allow DNS lookups"),
            ("dnsseed", "1", _B, "Query DNS seeds"),
            ("fixedseeds", "1", _B, "Use fixed seeds if DNS fails"),
            ("forcednsseed", "0", _B, "Always query DNS seeds"),
            ("seednode", "", _A, "Connect to seed node for addresses"),
            ("addnode", "", _A, "Add node to connect to"),
            ("connect", "", _A, "Connect only to specified node"),
            ("onlynet", "", _T, "Only connect to network type"),
            ("networkactive", "1", _B, "Enable network activity"),
            ("v2transport", "1", _B, "Support v2 encrypted transport"),
            ("proxy", "", _A, "SOCKS5 proxy"),
            ("proxyrandomize", "1", _B, "Randomize proxy credentials"),
            ("onion", "", _A, "SOCKS5 proxy for Tor"),
            ("listenonion", "1", _B, "Create Tor onion service"),
            ("torcontrol", "127.0.0.1:9051", _A, "Tor control port"),
            ("torpassword", "", _T, "Tor control password"),
            ("i2psam", "", _A, "I2P SAM proxy"),
            ("i2pacceptincoming", "1", _B, "Accept incoming I2P connections"),
            ("cjdnsreachable", "0", _B, "CJDNS reachable"),
            ("whitelist", "", _T, "Whitelist peers"),
            ("peerblockfilters", "0", _B, "Serve compact block filters"),
            ("peerbloomfilters", "0", _B, "Support bloom filters"),
            ("permitbaremultisig", "1", _B, "Relay bare multisig"),
            ("externalip", "", _A, "Specify external IP"),
            ("upnp", "0", _B, "Use UPnP for port mapping"),
            ("natpmp", "0", _B, "Use NAT-PMP for port mapping"),
            ("asmap", "", _P, "ASN mapping file"),
        ],
    )
    + _options(
        Category.RPC,
        [
            ("server", "0", _B, "Accept RPC commands"),
            ("rpcuser", "", _T, "RPC username"),
            ("rpcpassword", "", _T, "RPC password"),
            ("rpcauth", "", _T, "RPC auth credentials"),
            ("rpccookiefile", "", _P, "RPC cookie file location"),
            ("rpccookieperms", "", _T, "RPC cookie file permissions"),
            ("rpcport", "8332", _I, "RPC port"),
            ("rpcbind", "", _A, "RPC bind address"),
            ("rpcallowip", "", _T, "Allow RPC from IP"),
            ("rpcthreads", "4", _I, "RPC worker threads"),
            ("rpcworkqueue", "16", _I, "RPC work queue depth"),
            ("rpcservertimeout", "30", _I, "RPC HTTP server timeout in seconds"),
            ("rpcserialversion", "1", _I, "RPC serialization version"),
            ("rpcwhitelist", "", _T, "RPC method whitelist"),
            ("rpcwhitelistdefault", "1", _B, "Default RPC whitelist behavior"),
            ("rest", "0", _B, "Enable REST interface"),
        ],
    )
    + _options(
        Category.WALLET,
        [
            ("disablewallet", "0", _B, "Disable wallet"),
            ("wallet", "", _P, "Wallet to load"),
            ("walletdir", "", _P, "Wallet directory"),
            ("addresstype", "bech32", _T, "Default address type"),
            ("changetype", "", _T, "Change address type"),
            ("fallbackfee", "0.00", _F, "Fallback fee rate"),
            ("discardfee", "0.0001", _F, "Discard fee threshold"),
            ("mintxfee", "0.00001", _F, "Minimum transaction fee"),
            ("paytxfee", "0.00", _F, "Transaction fee rate"),
            ("consolidatefeerate", "0.0001", _F, "Consolidation fee rate"),
            ("maxapsfee", "0.00", _F, "Max fee for partial spend avoidance"),
            ("txconfirmtarget", "6", _I, "Confirmation target blocks"),
            ("spendzeroconfchange", "1", _B, "Spend unconfirmed change"),
            ("walletrbf", "0", _B, "Enable wallet RBF"),
            ("avoidpartialspends", "0", _B, "Avoid partial spends"),
            ("keypool", "1000", _I, "Keypool size"),
            ("signer", "", _T, "External signer command"),
            ("walletbroadcast", "1", _B, "Broadcast wallet transactions"),
            ("walletnotify", "", _T, "Command on wallet transaction"),
        ],
    )
    + _options(
        Category.DEBUGGING,
        [
            ("debug", "", _T, "Debug categories"),
            ("debugexclude", "", _T, "Exclude debug categories"),
            ("logips", "0", _B, "Log IP addresses"),
            ("logsourcelocations", "0", _B, "Log source locations"),
            ("logthreadnames", "0", _B, "Log thread names"),
            ("logtimestamps", "1", _B, "Log timestamps"),
            ("shrinkdebugfile", "1", _B, "Shrink debug.log on startup"),
            ("printtoconsole", "0", _B, "Print to console"),
            ("uacomment", "", _T, "User agent comment"),
            ("maxtxfee", "0.10", _F, "Maximum transaction fee"),
        ],
    )
    + _options(
        Category.MINING,
        [
            ("blockmaxweight", "3996000", _I, "Maximum block weight"),
            ("blockmintxfee", "0.00001", _F, "Minimum block transaction fee"),
        ],
    )
    + _options(
        Category.RELAY,
        [
            ("minrelaytxfee", "0.00001", _F, "Minimum relay fee"),
            ("incrementalrelayfee", "0.00001", _F, "Fee rate increment for replacement"),
            ("dustrelayfee", "0.00003", _F, "Dust threshold fee rate"),
            ("mempoolfullrbf", "1", _B, "Accept replacements without signaling"),
            ("datacarrier", "1", _B, "Relay OP_RETURN transactions"),
            ("datacarriersize", "83", _I, "Maximum OP_RETURN size"),
            ("bytespersigop", "20", _I, "Bytes per sigop"),
            ("whitelistforcerelay", "0", _B, "Force relay from whitelist"),
            ("whitelistrelay", "1", _B, "Relay from whitelist"),
        ],
    )
    + _options(
        Category.ZMQ,
        [
            ("zmqpubhashblock", "", _A, "ZMQ hash block publisher"),
            ("zmqpubhashtx", "", _A, "ZMQ hash tx publisher"),
            ("zmqpubrawblock", "", _A, "ZMQ raw block publisher"),
            ("zmqpubrawtx", "", _A, "ZMQ raw tx publisher"),
            ("zmqpubsequence", "", _A, "ZMQ sequence publisher"),
            ("zmqpubhashblockhwm", "1000", _I, "ZMQ hash block high water mark"),
            ("zmqpubhashtxhwm", "1000", _I, "ZMQ hash tx high water mark"),
            ("zmqpubrawblockhwm", "1000", _I, "ZMQ raw block high water mark"),
            ("zmqpubrawtxhwm", "1000", _I, "ZMQ raw tx high water mark"),
            ("zmqpubsequencehwm", "1000", _I, "ZMQ sequence high water mark"),
        ],
    )
)

_BY_KEY: dict[str, OptionSchema] = {schema.key: schema for schema in _CATALOG}


def all_schemas() -> tuple[OptionSchema, ...]:
    """Return every known option in catalog order."""
    return _CATALOG


def schema_for(key: str) -> OptionSchema | None:
    """Return the catalog record for ``key``, or None for unknown keys."""
    return _BY_KEY.get(key)
