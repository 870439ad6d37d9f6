"""JSON bundle generator — the registry as JSON plus ES module and CommonJS wrappers.

JSON is valid JavaScript, so the JS modules embed the serialized document
as-is instead of rewriting quotes and keys.
"""

from __future__ import annotations

import json

from ss58_registry.generators.targets import OutputFile, TargetSpec
from ss58_registry.generators.templates import render_header
from ss58_registry.models import Registry
from ss58_registry.store import parse_registry

JSON_FILE = "index.json"
ESM_FILE = "index.js"
CJS_FILE = "index.cjs"


def emit_json_bundle(registry: Registry, target: TargetSpec) -> set[OutputFile]:
    code = dump_registry(registry)
    header = render_header(target.license_header, "//")
    prelude = f"{header}\n" if header else ""

    return {
        OutputFile(JSON_FILE, f"{code}\n"),
        OutputFile(ESM_FILE, f"{prelude}export default {code};\n"),
        OutputFile(CJS_FILE, f"{prelude}module.exports = {code};\n"),
    }


def dump_registry(registry: Registry) -> str:
    """Serialize the entry list with wire field names, tab indented."""
    return json.dumps(registry.to_list(), indent="\t", ensure_ascii=False)


def parse_bundle(text: str) -> Registry:
    """Read an emitted ``index.json`` back into a :class:`Registry`."""
    return parse_registry({"registry": json.loads(text)}, source=JSON_FILE)
