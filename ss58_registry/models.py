"""Registry data models — network entries and the ordered registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ss58_registry.naming import symbol_name


class StandardAccount(Enum):
    """Default key scheme of a network's standard account."""

    SR25519 = "Sr25519"
    ED25519 = "Ed25519"
    SECP256K1 = "secp256k1"
    ANY25519 = "*25519"  # Either Sr25519 or Ed25519


# Two top bits of the 16-bit prefix are reserved by the SS58 prefix encoding.
MAX_PREFIX = 16383
# Prefixes above this need the two-byte encoding.
MAX_SIMPLE_PREFIX = 63


@dataclass(frozen=True)
class NetworkEntry:
    """A single network in the SS58 registry."""

    prefix: int
    network: str
    display_name: str
    symbols: tuple[str, ...] = ()
    decimals: tuple[int, ...] = ()
    # If the standard account is None the network is reserved.
    standard_account: str | None = None
    website: str | None = None
    is_reserved: bool | None = None
    is_testnet: bool | None = None

    @property
    def reserved(self) -> bool:
        if self.is_reserved is not None:
            return self.is_reserved
        return self.standard_account is None

    @property
    def testnet(self) -> bool:
        return bool(self.is_testnet)

    @property
    def symbol_name(self) -> str:
        return symbol_name(self.network)

    @property
    def description(self) -> str:
        if self.website:
            return f"{self.display_name} - <{self.website}>"
        return self.display_name

    @property
    def tokens(self) -> list[tuple[str, int]]:
        return list(zip(self.symbols, self.decimals))

    def to_dict(self) -> dict:
        """Serialize using the wire field names, in document order."""
        data = {
            "prefix": self.prefix,
            "network": self.network,
            "displayName": self.display_name,
            "symbols": list(self.symbols),
            "decimals": list(self.decimals),
            "standardAccount": self.standard_account,
            "website": self.website,
        }
        if self.is_reserved is not None:
            data["isReserved"] = self.is_reserved
        if self.is_testnet is not None:
            data["isTestnet"] = self.is_testnet
        return data

    @classmethod
    def from_dict(cls, data: dict) -> NetworkEntry:
        """Build an entry from an already shape-checked wire dict."""
        return cls(
            prefix=data["prefix"],
            network=data["network"],
            display_name=data["displayName"],
            symbols=tuple(data.get("symbols") or ()),
            decimals=tuple(data.get("decimals") or ()),
            standard_account=data.get("standardAccount"),
            website=data.get("website"),
            is_reserved=data.get("isReserved"),
            is_testnet=data.get("isTestnet"),
        )


@dataclass(frozen=True)
class Registry:
    """The ordered, immutable collection of network entries.

    Order is the order of the source document and becomes the declaration
    order of generated enumerations.
    """

    entries: tuple[NetworkEntry, ...] = ()

    def __iter__(self) -> Iterator[NetworkEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def by_prefix(self) -> dict[int, NetworkEntry]:
        return {e.prefix: e for e in self.entries}

    def by_network(self) -> dict[str, NetworkEntry]:
        return {e.network: e for e in self.entries}

    def get(self, prefix: int) -> NetworkEntry | None:
        """Return the first entry registered under *prefix*."""
        return next((e for e in self.entries if e.prefix == prefix), None)

    def find(self, network: str) -> NetworkEntry | None:
        return next((e for e in self.entries if e.network == network), None)

    def to_list(self) -> list[dict]:
        return [e.to_dict() for e in self.entries]

    @classmethod
    def from_list(cls, items: list[dict]) -> Registry:
        return cls(entries=tuple(NetworkEntry.from_dict(item) for item in items))
