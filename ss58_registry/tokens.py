"""Token amounts — human-readable formatting of a network's token quantities."""

from __future__ import annotations

from dataclasses import dataclass

from ss58_registry.errors import UnknownTokenError
from ss58_registry.models import NetworkEntry


@dataclass(frozen=True, order=True)
class Token:
    """A given amount of a token, in its smallest unit.

    ``str()`` gives ``"1_000,000 I❤U"``: the whole part with ``_`` thousands
    separators, then ``,`` and three fractional digits. ``repr()`` adds the
    raw amount: ``"1000,000 I❤U (100_000_000_000)"``.
    """

    name: str
    decimals: int
    amount: int

    def _split(self) -> tuple[int, int]:
        multiplier = 10**self.decimals
        whole = self.amount // multiplier
        fraction = self.amount % multiplier * 1000 // multiplier
        return whole, fraction

    def __str__(self) -> str:
        whole, fraction = self._split()
        return f"{whole:_},{fraction:03} {self.name}"

    def __repr__(self) -> str:
        whole, fraction = self._split()
        return f"{whole},{fraction:03} {self.name} ({self.amount:_})"


def create_token(entry: NetworkEntry, amount: int, symbol: str | None = None) -> Token:
    """Create *amount* of one of *entry*'s tokens, with its symbol and decimals filled in.

    Defaults to the entry's first (primary) token.
    """
    tokens = dict(entry.tokens)
    if not tokens:
        raise UnknownTokenError(f"network '{entry.network}' has no tokens")
    if symbol is None:
        symbol = entry.symbols[0]
    if symbol not in tokens:
        raise UnknownTokenError(f"network '{entry.network}' has no token '{symbol}'")
    return Token(name=symbol, decimals=tokens[symbol], amount=amount)
