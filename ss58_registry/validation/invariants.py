"""Invariant validator — cross-record rules for the SS58 registry.

Goes beyond the shape check to rules that span records:
- Prefixes are pairwise distinct and within the encodable range
- Networks are pairwise distinct, free of whitespace and map to distinct identifiers
- Every symbol has a decimals entry
- Standard accounts are one of the known key schemes

Every violation is collected; a run reports all problems at once.
This is gate 2 of 2.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from ss58_registry.errors import ValidationError
from ss58_registry.models import MAX_PREFIX, Registry, StandardAccount
from ss58_registry.naming import identifier_key, identifier_problem

logger = logging.getLogger(__name__)

KNOWN_ACCOUNT_TYPES = tuple(a.value for a in StandardAccount)


@dataclass(frozen=True)
class ValidationIssue:
    """A single violated invariant."""

    code: str  # Machine-readable issue code
    message: str
    path: str = ""  # e.g. "registry[3].decimals"
    networks: tuple[str, ...] = ()
    prefixes: tuple[int, ...] = ()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class ValidationResult:
    """Result of checking every invariant on a registry."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    def codes(self) -> set[str]:
        return {i.code for i in self.issues}

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {len(self.issues)} violation(s)"


@dataclass(frozen=True)
class ValidatedRegistry:
    """A registry that passed every invariant.

    Only :func:`validate` builds these; generators accept one as proof that
    validation already ran.
    """

    registry: Registry


def validate(registry: Registry) -> ValidatedRegistry:
    """Check every invariant and return the proof-of-validation wrapper.

    Raises:
        ValidationError: with every violation found.
    """
    result = check_registry(registry)
    if not result.passed:
        logger.debug("Registry failed validation: %s", result.summary())
        raise ValidationError(result.issues)
    logger.debug("Registry of %d entries passed validation", len(registry))
    return ValidatedRegistry(registry)


def check_registry(registry: Registry) -> ValidationResult:
    """Run every invariant check on *registry* without raising."""
    result = ValidationResult()

    _check_unique_prefixes(registry, result)
    _check_unique_networks(registry, result)
    _check_network_whitespace(registry, result)
    _check_symbol_decimals(registry, result)
    _check_prefix_range(registry, result)
    _check_account_types(registry, result)
    _check_identifiers(registry, result)
    _check_unique_identifiers(registry, result)
    _check_reserved_flags(registry, result)

    return result


def _check_unique_prefixes(registry: Registry, result: ValidationResult):
    groups: dict[int, list[int]] = defaultdict(list)
    for i, entry in enumerate(registry):
        groups[entry.prefix].append(i)

    for prefix, indexes in groups.items():
        if len(indexes) < 2:
            continue
        networks = tuple(registry.entries[i].network for i in indexes)
        result.issues.append(
            ValidationIssue(
                code="DUPLICATE_PREFIX",
                message=(
                    f"prefixes must be unique but prefix {prefix} is used by "
                    f"{', '.join(repr(n) for n in networks)}"
                ),
                path=", ".join(f"registry[{i}].prefix" for i in indexes),
                networks=networks,
                prefixes=(prefix,),
            )
        )


def _check_unique_networks(registry: Registry, result: ValidationResult):
    groups: dict[str, list[int]] = defaultdict(list)
    for i, entry in enumerate(registry):
        groups[entry.network].append(i)

    for network, indexes in groups.items():
        if len(indexes) < 2:
            continue
        prefixes = tuple(registry.entries[i].prefix for i in indexes)
        result.issues.append(
            ValidationIssue(
                code="DUPLICATE_NETWORK",
                message=(
                    f"networks must be unique but '{network}' is used by prefixes "
                    f"{', '.join(str(p) for p in prefixes)}"
                ),
                path=", ".join(f"registry[{i}].network" for i in indexes),
                networks=(network,) * len(indexes),
                prefixes=prefixes,
            )
        )


def _check_network_whitespace(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        if any(ch.isspace() for ch in entry.network):
            result.issues.append(
                ValidationIssue(
                    code="NETWORK_WHITESPACE",
                    message=f"network can not have whitespace: '{entry.network}' (prefix {entry.prefix})",
                    path=f"registry[{i}].network",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )


def _check_symbol_decimals(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        if len(entry.symbols) != len(entry.decimals):
            result.issues.append(
                ValidationIssue(
                    code="SYMBOL_DECIMAL_MISMATCH",
                    message=(
                        f"decimals must be specified for each symbol: '{entry.network}' "
                        f"(prefix {entry.prefix}) has {len(entry.symbols)} symbol(s) "
                        f"and {len(entry.decimals)} decimals value(s)"
                    ),
                    path=f"registry[{i}].decimals",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )


def _check_prefix_range(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        if not 0 <= entry.prefix <= MAX_PREFIX:
            result.issues.append(
                ValidationIssue(
                    code="PREFIX_OUT_OF_RANGE",
                    message=(
                        f"prefix {entry.prefix} of '{entry.network}' is outside the "
                        f"encodable range 0..{MAX_PREFIX}"
                    ),
                    path=f"registry[{i}].prefix",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )


def _check_account_types(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        account = entry.standard_account
        if account is not None and account not in KNOWN_ACCOUNT_TYPES:
            result.issues.append(
                ValidationIssue(
                    code="UNKNOWN_ACCOUNT_TYPE",
                    message=(
                        f"unknown sig type '{account}' in standardAccount of '{entry.network}': "
                        f"expected one of {', '.join(KNOWN_ACCOUNT_TYPES)}"
                    ),
                    path=f"registry[{i}].standardAccount",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )


def _check_identifiers(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        problem = identifier_problem(entry.symbol_name)
        if problem:
            result.issues.append(
                ValidationIssue(
                    code="INVALID_IDENTIFIER",
                    message=f"network not valid: {problem} for '{entry.network}' (prefix {entry.prefix})",
                    path=f"registry[{i}].network",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )


def _check_unique_identifiers(registry: Registry, result: ValidationResult):
    groups: dict[str, list[int]] = defaultdict(list)
    for i, entry in enumerate(registry):
        groups[identifier_key(entry.symbol_name)].append(i)

    for name, indexes in groups.items():
        networks = tuple(registry.entries[i].network for i in indexes)
        # Identical networks are already reported as DUPLICATE_NETWORK.
        if len(set(networks)) < 2:
            continue
        result.issues.append(
            ValidationIssue(
                code="DUPLICATE_IDENTIFIER",
                message=(
                    f"networks {', '.join(repr(n) for n in networks)} all generate "
                    f"the symbol '{name}'"
                ),
                path=", ".join(f"registry[{i}].network" for i in indexes),
                networks=networks,
                prefixes=tuple(registry.entries[i].prefix for i in indexes),
            )
        )


def _check_reserved_flags(registry: Registry, result: ValidationResult):
    for i, entry in enumerate(registry):
        if entry.standard_account is None and entry.is_reserved is False:
            result.issues.append(
                ValidationIssue(
                    code="RESERVED_WITHOUT_ACCOUNT",
                    message=(
                        f"'{entry.network}' (prefix {entry.prefix}) has no standardAccount "
                        f"but is flagged isReserved: false; only reserved entries may omit it"
                    ),
                    path=f"registry[{i}].standardAccount",
                    networks=(entry.network,),
                    prefixes=(entry.prefix,),
                )
            )
