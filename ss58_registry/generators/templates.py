"""Template text shared by the generators."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# License header, rendered as comments in each target's syntax
# ---------------------------------------------------------------------------

DEFAULT_LICENSE_HEADER = """\
Copyright (C) 2021-2022 Parity Technologies (UK) Ltd.
SPDX-License-Identifier: Apache-2.0

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

\thttp://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""


def render_header(text: str, comment: str) -> str:
    """Render *text* as a block of line comments starting with *comment*.

    Returns an empty string for an empty header; otherwise the block ends
    with a newline.
    """
    if not text.strip():
        return ""
    lines = []
    for line in text.strip("\n").split("\n"):
        lines.append(f"{comment} {line}" if line else comment)
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Type declaration for the JS bundle
# ---------------------------------------------------------------------------

DEFAULT_TYPE_TEMPLATE = """\
export interface RegistryEntry {
\tdecimals: number[];
\tdisplayName: string;
\tnetwork: string;
\tprefix: number;
\tstandardAccount: '*25519' | 'Ed25519' | 'Sr25519' | 'secp256k1' | null;
\tsymbols: string[];
\twebsite: string | null;
\tisReserved?: boolean;
\tisTestnet?: boolean;
}

export type Registry = RegistryEntry[];
"""

TYPE_DEFAULT_EXPORT = """
declare const _default: Registry;

export default _default;
"""


# ---------------------------------------------------------------------------
# Enum table module
# ---------------------------------------------------------------------------

ENUM_MODULE_TEMPLATE = '''\
{header}"""Known SS58 address formats.

Generated from the SS58 registry ({count} networks). Do not edit by hand.
"""

from __future__ import annotations

from bisect import bisect_left
from enum import IntEnum
from typing import NamedTuple, Optional


class KnownNetwork(NamedTuple):
    prefix: int
    network: str
    display_name: str
    symbols: tuple
    decimals: tuple
    standard_account: Optional[str]
    website: Optional[str]
    is_reserved: bool
    is_testnet: bool


class Ss58AddressFormatRegistry(IntEnum):
    """A known address (sub)format/network ID for SS58."""

{members}


# All known networks, in declaration order.
NETWORKS = (
{networks}
)

# Names of all networks, in declaration order.
ALL_NAMES = (
{names}
)

# (prefix, index into NETWORKS), sorted by prefix.
PREFIX_TO_INDEX = (
{prefix_to_index}
)

# Prefixes reserved for future use.
RESERVED_PREFIXES = frozenset({reserved})


def from_name(name: str) -> Ss58AddressFormatRegistry:
    """Return the address format of the network called *name*.

    Raises:
        ValueError: if no known network has that name.
    """
    try:
        index = ALL_NAMES.index(name)
    except ValueError:
        raise ValueError(f"unknown network {{name!r}}") from None
    return Ss58AddressFormatRegistry(NETWORKS[index].prefix)


def from_prefix(prefix: int) -> Optional[KnownNetwork]:
    """Return the network registered under *prefix*, or None for a custom prefix."""
    i = bisect_left(PREFIX_TO_INDEX, (prefix,))
    if i < len(PREFIX_TO_INDEX) and PREFIX_TO_INDEX[i][0] == prefix:
        return NETWORKS[PREFIX_TO_INDEX[i][1]]
    return None


def name_of(prefix: int) -> str:
    """Network name of *prefix*, or the prefix itself when it is custom."""
    network = from_prefix(prefix)
    return network.network if network is not None else str(prefix)


def is_custom(prefix: int) -> bool:
    return from_prefix(prefix) is None


def is_reserved(prefix: int) -> bool:
    return prefix in RESERVED_PREFIXES


def tokens(prefix: int) -> tuple:
    """(symbol, decimals) pairs of the network at *prefix*; empty when custom."""
    network = from_prefix(prefix)
    if network is None:
        return ()
    return tuple(zip(network.symbols, network.decimals))
'''
