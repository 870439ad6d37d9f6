"""Enum table generator — a standalone Python module with one enum member per network.

Declaration order equals registry order. The module's lookups (``from_prefix``,
``name_of``, ``tokens``) binary-search ``PREFIX_TO_INDEX`` into ``NETWORKS``
and rely on that. ``RESERVED_PREFIXES`` lists every reserved prefix of the
registry, including entries the reserved policy left out of the tables.
"""

from __future__ import annotations

from ss58_registry.generators.targets import OutputFile, ReservedPolicy, TargetSpec
from ss58_registry.generators.templates import ENUM_MODULE_TEMPLATE, render_header
from ss58_registry.models import NetworkEntry, Registry


def emit_enum_table(registry: Registry, target: TargetSpec) -> set[OutputFile]:
    entries = select_entries(registry, ReservedPolicy(target.reserved))

    header = render_header(target.license_header, "#")
    content = ENUM_MODULE_TEMPLATE.format(
        header=f"{header}\n" if header else "",
        count=len(entries),
        members=_render_members(entries),
        networks="\n".join(f"    {_render_network(e)}," for e in entries),
        names="\n".join(f"    {e.network!r}," for e in entries),
        prefix_to_index="\n".join(f"    {pair!r}," for pair in prefix_to_index(entries)),
        reserved=_render_set(sorted(e.prefix for e in registry if e.reserved)),
    )
    return {OutputFile(target.module_name, content)}


def select_entries(registry: Registry, policy: ReservedPolicy) -> list[NetworkEntry]:
    """Entries that get a declaration, in registry order."""
    if policy is ReservedPolicy.EXCLUDE:
        return [e for e in registry if not e.reserved]
    return list(registry)


def prefix_to_index(entries: list[NetworkEntry]) -> list[tuple[int, int]]:
    """(prefix, declaration index) pairs sorted by prefix, for binary search."""
    return sorted((e.prefix, i) for i, e in enumerate(entries))


def _render_members(entries: list[NetworkEntry]) -> str:
    if not entries:
        return "    pass"
    blocks = []
    for entry in entries:
        blocks.append(f"    #: {_one_line(entry.description)}\n    {entry.symbol_name} = {entry.prefix}")
    return "\n".join(blocks)


def _render_network(entry: NetworkEntry) -> str:
    fields = [
        f"prefix={entry.prefix!r}",
        f"network={entry.network!r}",
        f"display_name={entry.display_name!r}",
        f"symbols={tuple(entry.symbols)!r}",
        f"decimals={tuple(entry.decimals)!r}",
        f"standard_account={entry.standard_account!r}",
        f"website={entry.website!r}",
        f"is_reserved={entry.reserved!r}",
        f"is_testnet={entry.testnet!r}",
    ]
    return f"KnownNetwork({', '.join(fields)})"


def _render_set(values: list[int]) -> str:
    if not values:
        return "()"
    return "{" + ", ".join(str(v) for v in values) + "}"


def _one_line(text: str) -> str:
    return " ".join(text.split())
