"""Symbol naming — turn a network identifier into a generated symbol name."""

from __future__ import annotations

import keyword
import unicodedata
import re

SYMBOL_SUFFIX = "Account"

# Runs of anything that cannot appear inside an identifier word (``-``, ``.``, ``_``, ...).
_SEPARATOR_RE = re.compile(r"[\W_]+")


def symbol_name(network: str) -> str:
    """Return the generated symbol for *network*.

    The network is split on non-alphanumeric characters, each part gets its
    first letter upper-cased (the rest is kept as written) and the parts are
    joined with an ``Account`` suffix::

        polkadot          -> PolkadotAccount
        sora_kusama_para  -> SoraKusamaParaAccount
        BareSr25519       -> BareSr25519Account
    """
    parts = [p for p in _SEPARATOR_RE.split(network) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) + SYMBOL_SUFFIX


def identifier_problem(name: str) -> str | None:
    """Explain why *name* is not usable as a generated identifier, or return None."""
    if not name:
        return "empty identifier"
    if keyword.iskeyword(name):
        return f"'{name}' is a reserved keyword"
    if not name.isidentifier():
        if not name[0].isidentifier():
            return f"'{name}' starts with '{name[0]}' which is not valid at the start"
        bad = next(ch for ch in name if not ("a" + ch).isidentifier())
        return f"invalid char '{bad}' in '{name}'"
    return None


def identifier_key(name: str) -> str:
    """The form under which Python compares *name* as an identifier (NFKC)."""
    return unicodedata.normalize("NFKC", name)
