"""Generator — turns a validated registry into the files of one target."""

from __future__ import annotations

import logging
from dataclasses import replace

from ss58_registry.generators.enum_table import emit_enum_table
from ss58_registry.generators.json_bundle import emit_json_bundle
from ss58_registry.generators.manifest_patch import emit_manifest_patch
from ss58_registry.generators.targets import OutputFile, TargetKind, TargetSpec
from ss58_registry.generators.type_declaration import emit_type_declaration
from ss58_registry.models import Registry
from ss58_registry.validation.invariants import ValidatedRegistry, validate

logger = logging.getLogger(__name__)


def generate(registry: ValidatedRegistry | Registry, target: TargetSpec) -> frozenset[OutputFile]:
    """Generate the files of *target* from *registry*.

    Args:
        registry: A :class:`ValidatedRegistry`, or a plain :class:`Registry`
            which is validated first.
        target: The artifact to emit.

    Returns:
        The generated files. Nothing is written to disk.

    Raises:
        UnknownTargetError: if the target kind is not supported.
        ValidationError: if a plain registry fails validation.
    """
    kind = TargetKind.parse(target.kind)
    if not isinstance(registry, ValidatedRegistry):
        registry = validate(registry)
    target = replace(target, kind=kind)

    if kind is TargetKind.ENUM_TABLE:
        files = emit_enum_table(registry.registry, target)
    elif kind is TargetKind.JSON_BUNDLE:
        files = emit_json_bundle(registry.registry, target)
    elif kind is TargetKind.TYPE_DECLARATION:
        files = emit_type_declaration(target)
    else:
        files = emit_manifest_patch(target)

    logger.debug("Target %s produced %s", kind.value, ", ".join(sorted(f.path for f in files)))
    return frozenset(files)
