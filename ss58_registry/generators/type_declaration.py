"""Type declaration generator — ``index.d.ts`` for static consumers of the JS bundle.

The declaration describes the entry shape, not the data: it is the same for
every valid registry.
"""

from __future__ import annotations

from ss58_registry.generators.targets import OutputFile, TargetSpec
from ss58_registry.generators.templates import (
    DEFAULT_TYPE_TEMPLATE,
    TYPE_DEFAULT_EXPORT,
    render_header,
)

TYPES_FILE = "index.d.ts"


def emit_type_declaration(target: TargetSpec) -> set[OutputFile]:
    template = target.type_template if target.type_template is not None else DEFAULT_TYPE_TEMPLATE
    header = render_header(target.license_header, "//")
    prelude = f"{header}\n" if header else ""
    return {OutputFile(TYPES_FILE, f"{prelude}{template}{TYPE_DEFAULT_EXPORT}")}
