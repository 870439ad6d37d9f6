"""Package manifest patch — turn the source ``package.json`` into the published one.

The override rules map a key either to a new value or to :data:`REMOVE`.
Applying them is pure: the input manifest is never modified.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Mapping

from ss58_registry.errors import MissingTargetInputError
from ss58_registry.generators.targets import OutputFile, TargetSpec

MANIFEST_FILE = "package.json"


class _Remove:
    """Sentinel: delete the key from the manifest."""

    def __repr__(self) -> str:
        return "REMOVE"

    def __deepcopy__(self, memo):
        return self


REMOVE = _Remove()

# Published package layout: dual ESM/CJS entry points plus the type declaration.
DEFAULT_OVERRIDES: dict[str, Any] = {
    "exports": {
        ".": {
            "types": "./index.d.ts",
            "require": "./index.cjs",
            "default": "./index.js",
        }
    },
    "main": "index.cjs",
    "module": "index.js",
    "types": "index.d.ts",
    "type": "module",
    "scripts": REMOVE,
    "devDependencies": REMOVE,
}


def apply_overrides(manifest: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *manifest* with every override rule applied.

    Keys mapped to :data:`REMOVE` are deleted (a no-op when absent). Keys
    mapped to a value are set; a key that already existed moves to the end,
    as it is removed and re-added. All other keys pass through unchanged.
    """
    result = copy.deepcopy(dict(manifest))
    for key, value in overrides.items():
        result.pop(key, None)
        if value is not REMOVE:
            result[key] = copy.deepcopy(value)
    return result


def emit_manifest_patch(target: TargetSpec) -> set[OutputFile]:
    if target.manifest is None:
        raise MissingTargetInputError("package-manifest-patch target requires an input manifest")
    overrides = DEFAULT_OVERRIDES if target.overrides is None else target.overrides
    patched = apply_overrides(target.manifest, overrides)
    return {OutputFile(MANIFEST_FILE, json.dumps(patched, indent=2, ensure_ascii=False) + "\n")}
