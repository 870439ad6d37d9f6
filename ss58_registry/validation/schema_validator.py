"""Shape validator — structural validation against the registry JSON Schema.

This is gate 1 of 2. It checks that a parsed document is a sequence of
records of the entry shape before any cross-record invariant is checked.
"""

from __future__ import annotations

import re

from ss58_registry.validation.schema import get_schema


def validate_shape(data, schema: dict | None = None) -> list[str]:
    """Validate a parsed registry document against the JSON Schema.

    Args:
        data: The full parsed JSON/YAML document (with top-level 'registry' key).
        schema: Schema to check against; defaults to the registry schema.

    Returns:
        List of error messages. Empty list means the shape is valid.
    """
    issues: list[str] = []
    _validate_node(data, schema or get_schema(), "", issues)
    return issues


def _validate_node(data, schema: dict, path: str, issues: list[str]):
    """Recursively validate data against a JSON Schema node."""
    schema_type = schema.get("type")
    where = path or "/"

    if schema_type and not _type_matches(data, schema_type):
        expected = " or ".join(schema_type) if isinstance(schema_type, list) else schema_type
        issues.append(f"{where}: expected type '{expected}', got {_type_name(data)}")
        return  # Don't recurse into wrong types

    if "enum" in schema and data not in schema["enum"]:
        issues.append(f"{where}: value '{data}' not in allowed values {schema['enum']}")

    if isinstance(data, str):
        min_len = schema.get("minLength", 0)
        if len(data) < min_len:
            issues.append(f"{where}: string too short (min {min_len}, got {len(data)})")
        if "pattern" in schema and not re.match(schema["pattern"], data):
            issues.append(f"{where}: string '{data}' does not match pattern '{schema['pattern']}'")

    if isinstance(data, int) and not isinstance(data, bool):
        if "minimum" in schema and data < schema["minimum"]:
            issues.append(f"{where}: {data} is below the minimum {schema['minimum']}")
        if "maximum" in schema and data > schema["maximum"]:
            issues.append(f"{where}: {data} is above the maximum {schema['maximum']}")

    if isinstance(data, dict):
        for req in schema.get("required", []):
            if req not in data:
                issues.append(f"{where}: missing required property '{req}'")

        props = schema.get("properties", {})
        extra = schema.get("additionalProperties", True)
        for key, value in data.items():
            if key in props:
                _validate_node(value, props[key], f"{path}.{key}", issues)
            elif extra is False:
                issues.append(f"{where}: unknown property '{key}'")
            elif isinstance(extra, dict):
                _validate_node(value, extra, f"{path}.{key}", issues)

    if isinstance(data, list):
        min_items = schema.get("minItems", 0)
        if len(data) < min_items:
            issues.append(f"{where}: array too short (min {min_items}, got {len(data)})")

        items_schema = schema.get("items")
        if items_schema:
            for i, item in enumerate(data):
                _validate_node(item, items_schema, f"{path}[{i}]", issues)


def _type_matches(data, schema_type) -> bool:
    """Check if data matches the expected JSON Schema type (or any of a list of types)."""
    if isinstance(schema_type, list):
        return any(_type_matches(data, t) for t in schema_type)

    type_map = {
        "string": str,
        "integer": int,
        "number": (int, float),
        "boolean": bool,
        "array": list,
        "object": dict,
        "null": type(None),
    }
    expected = type_map.get(schema_type)
    if expected is None:
        return True  # Unknown type, don't block
    # bool is a subclass of int, but true/false are never prefixes or decimals
    if schema_type in ("integer", "number") and isinstance(data, bool):
        return False
    return isinstance(data, expected)


def _type_name(data) -> str:
    if data is None:
        return "null"
    return type(data).__name__
