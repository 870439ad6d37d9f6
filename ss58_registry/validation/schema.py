"""JSON Schema for the SS58 registry document.

This is the structural contract of the store: the document shape, the
required entry fields and their types. It is checked when the store is
loaded, before any cross-record invariant is looked at.
"""

from ss58_registry.models import StandardAccount
from ss58_registry.validation import REGISTRY_FORMAT_VERSION

NETWORK_ENTRY_SCHEMA: dict = {
    "type": "object",
    "required": ["prefix", "network", "displayName", "symbols", "decimals"],
    "additionalProperties": False,
    "properties": {
        "prefix": {
            "type": "integer",
            "minimum": 0,
            "maximum": 65535,
            "description": "The address prefix. Must be an integer and unique.",
        },
        "network": {
            "type": "string",
            "minLength": 1,
            "description": (
                "Unique identifier for the network that will use this prefix, "
                "string, no spaces."
            ),
        },
        "displayName": {
            "type": "string",
            "minLength": 1,
            "description": "The name of the network, in a format friendly for display.",
        },
        "symbols": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Symbols of any tokens the chain uses, ordered by instance.",
        },
        "decimals": {
            "type": "array",
            "items": {"type": "integer", "minimum": 0},
            "description": "Decimals of each token in 'symbols', same length as 'symbols'.",
        },
        "standardAccount": {
            "type": ["string", "null"],
            "description": (
                "Signing curve for standard account: one of "
                + ", ".join(a.value for a in StandardAccount)
                + ". Null for reserved prefixes."
            ),
        },
        "website": {
            "type": ["string", "null"],
            "description": "A website or Github repo associated with the network.",
        },
        "isReserved": {"type": "boolean"},
        "isTestnet": {"type": "boolean"},
    },
}

REGISTRY_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": f"https://github.com/paritytech/ss58-registry/schema/v{REGISTRY_FORMAT_VERSION}",
    "title": "SS58 Registry",
    "description": "Known SS58 address-format network prefixes.",
    "type": "object",
    "required": ["registry"],
    "additionalProperties": False,
    "properties": {
        "specification": {
            "type": "string",
            "description": "Link to the SS58 address format specification.",
        },
        "schema": {
            "type": "object",
            "description": "Human-readable documentation of each entry field.",
            "additionalProperties": {"type": "string"},
        },
        "registry": {
            "type": "array",
            "items": NETWORK_ENTRY_SCHEMA,
        },
    },
}


def get_schema() -> dict:
    """Return the canonical JSON Schema for the registry document."""
    return REGISTRY_SCHEMA
