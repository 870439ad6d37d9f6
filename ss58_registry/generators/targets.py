"""Target descriptions and generated file records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from ss58_registry.errors import UnknownTargetError
from ss58_registry.generators.templates import DEFAULT_LICENSE_HEADER


class TargetKind(Enum):
    """Artifact kinds this generator can emit."""

    ENUM_TABLE = "enum-table"
    JSON_BUNDLE = "json-bundle"
    TYPE_DECLARATION = "type-declaration"
    PACKAGE_MANIFEST_PATCH = "package-manifest-patch"

    @classmethod
    def parse(cls, value: TargetKind | str) -> TargetKind:
        """Resolve a kind from its string value.

        Raises:
            UnknownTargetError: if *value* names no supported kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTargetError(str(value)) from None


class ReservedPolicy(Enum):
    """What the enum table does with reserved entries."""

    INCLUDE = "include"  # Emit them like any other entry
    EXCLUDE = "exclude"  # Leave them out of every table


@dataclass(frozen=True)
class TargetSpec:
    """One artifact to generate, plus the inputs that artifact needs."""

    kind: TargetKind | str
    license_header: str = DEFAULT_LICENSE_HEADER
    # enum-table
    module_name: str = "known_networks.py"
    reserved: ReservedPolicy = ReservedPolicy.INCLUDE
    # type-declaration; None uses the built-in template
    type_template: str | None = None
    # package-manifest-patch
    manifest: Mapping[str, Any] | None = None
    overrides: Mapping[str, Any] | None = None  # None uses DEFAULT_OVERRIDES


@dataclass(frozen=True)
class OutputFile:
    """A generated file: a path relative to the output directory and its text."""

    path: str
    content: str
