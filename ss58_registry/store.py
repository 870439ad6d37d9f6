"""Registry store — read the canonical registry document.

The store only checks that the document has the entry shape; the
cross-record invariants are checked by :mod:`ss58_registry.validation.invariants`.
JSON documents are the canonical form; YAML documents are accepted too so
fields can carry ``#`` comments.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from ss58_registry.errors import MalformedRegistryError
from ss58_registry.models import Registry
from ss58_registry.validation.schema_validator import validate_shape

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_registry(path: str | Path) -> Registry:
    """Load and shape-check the registry document at *path*.

    Raises:
        MalformedRegistryError: if the file is missing or unreadable, does
            not parse, or does not match the registry schema.
    """
    path = Path(path)
    if not path.exists():
        raise MalformedRegistryError(str(path), [f"File not found: {path}"])

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.load(f, Loader=_UniqueKeyLoader)
            else:
                data = json.load(f, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise MalformedRegistryError(str(path), [f"Invalid JSON: {e}"]) from e
    except yaml.YAMLError as e:
        raise MalformedRegistryError(str(path), [f"Invalid YAML: {e}"]) from e
    except _DuplicateKeyError as e:
        raise MalformedRegistryError(str(path), [str(e)]) from e
    except UnicodeDecodeError as e:
        raise MalformedRegistryError(str(path), [f"Not UTF-8 text: {e}"]) from e
    except OSError as e:
        raise MalformedRegistryError(str(path), [f"Cannot read: {e}"]) from e

    registry = parse_registry(data, source=str(path))
    logger.debug("Loaded %d registry entries from %s", len(registry), path)
    return registry


def parse_registry(data, source: str = "<registry>") -> Registry:
    """Shape-check an already parsed document and build the :class:`Registry`."""
    issues = validate_shape(data)
    if issues:
        raise MalformedRegistryError(source, issues)
    return Registry.from_list(data["registry"])


class _DuplicateKeyError(ValueError):
    pass


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict:
    result: dict = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKeyError(f"Duplicate key '{key}' in object")
        result[key] = value
    return result


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate mapping keys, like the JSON reader."""


def _construct_unique_mapping(loader: yaml.SafeLoader, node: yaml.MappingNode, deep: bool = False) -> dict:
    seen = set()
    for key_node, _ in node.value:
        # Merge keys ("<<") may legitimately repeat.
        if not isinstance(key_node, yaml.ScalarNode) or key_node.tag == "tag:yaml.org,2002:merge":
            continue
        key = loader.construct_object(key_node, deep=deep)
        if key in seen:
            raise _DuplicateKeyError(f"Duplicate key '{key}' in object")
        seen.add(key)
    return loader.construct_mapping(node, deep=deep)


_UniqueKeyLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_unique_mapping)
