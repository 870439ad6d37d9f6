"""Tests for loading the registry document."""

import json
from pathlib import Path

import pytest

from ss58_registry.errors import MalformedRegistryError
from ss58_registry.store import load_registry, parse_registry
from ss58_registry.validation.invariants import check_registry

REPO_REGISTRY = Path(__file__).resolve().parent.parent / "ss58-registry.json"


def _make_entry(**overrides) -> dict:
    entry = {
        "prefix": 0,
        "network": "polkadot",
        "displayName": "Polkadot Relay Chain",
        "symbols": ["DOT"],
        "decimals": [10],
        "standardAccount": "*25519",
        "website": "https://polkadot.network",
    }
    entry.update(overrides)
    return entry


def _write_json(tmp_path: Path, data, name: str = "registry.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_json(tmp_path):
    path = _write_json(
        tmp_path,
        {"registry": [_make_entry(), _make_entry(prefix=2, network="kusama", symbols=["KSM"], decimals=[12])]},
    )
    registry = load_registry(path)
    assert [e.network for e in registry] == ["polkadot", "kusama"]
    assert registry.get(2).tokens == [("KSM", 12)]


def test_load_yaml_with_comments(tmp_path):
    path = tmp_path / "registry.yaml"
    path.write_text(
        "registry:\n"
        "  # The relay chain\n"
        "  - prefix: 0\n"
        "    network: polkadot\n"
        "    displayName: Polkadot Relay Chain\n"
        "    symbols: [DOT]\n"
        "    decimals: [10]\n"
        "    standardAccount: '*25519'\n"
        "    website: https://polkadot.network\n",
        encoding="utf-8",
    )
    registry = load_registry(path)
    assert registry.find("polkadot").standard_account == "*25519"


def test_missing_file(tmp_path):
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(tmp_path / "nope.json")
    assert "File not found" in exc.value.issues[0]


def test_invalid_json(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text('{"registry": [', encoding="utf-8")
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    assert exc.value.issues[0].startswith("Invalid JSON")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "registry.yml"
    path.write_text("registry: [\n", encoding="utf-8")
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    assert exc.value.issues[0].startswith("Invalid YAML")


def test_duplicate_keys_are_rejected(tmp_path):
    path = tmp_path / "registry.json"
    path.write_text(
        '{"registry": [{"prefix": 0, "prefix": 1, "network": "polkadot", '
        '"displayName": "Polkadot", "symbols": [], "decimals": []}]}',
        encoding="utf-8",
    )
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    assert exc.value.issues == ["Duplicate key 'prefix' in object"]


def test_wrong_shape_reports_every_issue(tmp_path):
    path = _write_json(tmp_path, {"registry": [_make_entry(prefix="0"), _make_entry(decimals=None)]})
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    assert len(exc.value.issues) == 2
    assert exc.value.path == str(path)


def test_malformed_error_is_a_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_registry(tmp_path / "missing.json")


def test_directory_is_malformed(tmp_path):
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(tmp_path)
    assert exc.value.issues[0].startswith("Cannot read")


def test_yaml_duplicate_keys_are_rejected(tmp_path):
    path = tmp_path / "registry.yaml"
    path.write_text(
        "registry:\n"
        "  - prefix: 0\n"
        "    prefix: 7\n"
        "    network: polkadot\n"
        "    displayName: Polkadot\n"
        "    symbols: []\n"
        "    decimals: []\n",
        encoding="utf-8",
    )
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    assert exc.value.issues == ["Duplicate key 'prefix' in object"]


def test_yaml_merge_keys_are_not_duplicates(tmp_path):
    path = tmp_path / "registry.yaml"
    path.write_text(
        "base: &base\n"
        "  symbols: []\n"
        "  decimals: []\n"
        "  standardAccount: '*25519'\n"
        "registry:\n"
        "  - <<: *base\n"
        "    prefix: 42\n"
        "    network: substrate\n"
        "    displayName: Substrate\n",
        encoding="utf-8",
    )
    with pytest.raises(MalformedRegistryError) as exc:
        load_registry(path)
    # Only the unknown top-level key is reported, not a duplicate.
    assert exc.value.issues == ["/: unknown property 'base'"]


def test_parse_registry_keeps_document_order():
    registry = parse_registry({"registry": [_make_entry(prefix=5, network="astar"), _make_entry()]})
    assert [e.prefix for e in registry] == [5, 0]


def test_load_does_not_check_invariants(tmp_path):
    path = _write_json(tmp_path, {"registry": [_make_entry(), _make_entry(network="other")]})
    registry = load_registry(path)
    assert len(registry) == 2
    assert "DUPLICATE_PREFIX" in check_registry(registry).codes()


def test_shipped_registry_is_valid():
    registry = load_registry(REPO_REGISTRY)
    assert len(registry) > 0
    result = check_registry(registry)
    assert result.passed, result.issues
    assert registry.get(0).network == "polkadot"
    assert registry.get(2).network == "kusama"
