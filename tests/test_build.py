"""Tests for the build driver."""

import json
from dataclasses import replace
from pathlib import Path

import pytest

from ss58_registry.build import build, target_spec
from ss58_registry.config import BuildConfig, load_config
from ss58_registry.errors import ConfigError, MalformedRegistryError, ValidationError
from ss58_registry.generators.targets import TargetKind

REPO_CONFIG = Path(__file__).resolve().parent.parent / "ss58build.yaml"

MANIFEST = {
    "name": "@substrate/ss58-registry",
    "version": "1.0.0",
    "scripts": {"build": "ss58-registry build"},
}


def _make_entry(prefix: int, network: str) -> dict:
    return {
        "prefix": prefix,
        "network": network,
        "displayName": network.title(),
        "symbols": [],
        "decimals": [],
        "standardAccount": "*25519",
        "website": None,
    }


def _make_config(tmp_path: Path, *entries: dict) -> BuildConfig:
    """Write a registry and a manifest under *tmp_path* and return a config using them."""
    registry = tmp_path / "ss58-registry.json"
    registry.write_text(json.dumps({"registry": list(entries)}), encoding="utf-8")
    manifest = tmp_path / "package.json"
    manifest.write_text(json.dumps(MANIFEST), encoding="utf-8")
    return BuildConfig(
        registry_path=registry,
        output_dir=tmp_path / "dist",
        manifest_path=manifest,
    )


def test_build_writes_every_target(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"), _make_entry(2, "kusama"))
    result = build(config)

    assert result.written
    written = sorted(p.name for p in config.output_dir.iterdir())
    assert written == ["index.cjs", "index.d.ts", "index.js", "index.json", "known_networks.py", "package.json"]

    manifest = json.loads((config.output_dir / "package.json").read_text(encoding="utf-8"))
    assert manifest["main"] == "index.cjs"
    assert "scripts" not in manifest
    assert "wrote 6 generated file(s)" in result.summary()


def test_build_selected_targets(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    result = build(config, targets=[TargetKind.TYPE_DECLARATION])
    assert [f.path for f in result.files] == ["index.d.ts"]
    assert sorted(p.name for p in config.output_dir.iterdir()) == ["index.d.ts"]


def test_invalid_registry_writes_nothing(tmp_path):
    config = _make_config(tmp_path, _make_entry(5, "a"), _make_entry(5, "b"))
    with pytest.raises(ValidationError):
        build(config)
    assert not config.output_dir.exists()


def test_malformed_registry_writes_nothing(tmp_path):
    config = _make_config(tmp_path)
    config.registry_path.write_text("not json", encoding="utf-8")
    with pytest.raises(MalformedRegistryError):
        build(config)
    assert not config.output_dir.exists()


def test_dry_run_writes_nothing(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    result = build(config, dry_run=True)
    assert not result.written
    assert len(result.files) == 6
    assert not config.output_dir.exists()
    assert result.summary().startswith("would write")


def test_missing_manifest_path(tmp_path):
    config = replace(_make_config(tmp_path, _make_entry(0, "polkadot")), manifest_path=None)
    with pytest.raises(ConfigError, match="needs a 'manifest' path"):
        build(config)
    assert not config.output_dir.exists()


def test_missing_manifest_file(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    config.manifest_path.unlink()
    with pytest.raises(ConfigError, match="manifest file was not found"):
        build(config)


def test_manifest_must_be_object(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    config.manifest_path.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a JSON object"):
        target_spec(config, TargetKind.PACKAGE_MANIFEST_PATCH)


def test_type_template_is_read(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    template = tmp_path / "types.d.ts"
    template.write_text("export type Registry = unknown[];\n", encoding="utf-8")
    config.type_template_path = template
    spec = target_spec(config, TargetKind.TYPE_DECLARATION)
    assert spec.type_template == "export type Registry = unknown[];\n"


def test_duplicate_output_path(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    config.enum_module = "index.js"
    with pytest.raises(ConfigError, match="both generate 'index.js'"):
        build(config)
    assert not config.output_dir.exists()


def test_copy_files(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    readme = tmp_path / "README.md"
    readme.write_text("# Registry\n", encoding="utf-8")
    config.copy_files = [readme]

    result = build(config)
    assert result.copied == [readme]
    assert (config.output_dir / "README.md").read_text(encoding="utf-8") == "# Registry\n"


def test_missing_copy_file(tmp_path):
    config = _make_config(tmp_path, _make_entry(0, "polkadot"))
    config.copy_files = [tmp_path / "CHANGELOG.md"]
    with pytest.raises(ConfigError, match="not found"):
        build(config)
    assert not config.output_dir.exists()


def test_shipped_config_builds(tmp_path):
    config = load_config(REPO_CONFIG)
    config.output_dir = tmp_path / "npm_dist"
    result = build(config)

    names = {p.name for p in config.output_dir.iterdir()}
    assert {"index.json", "index.d.ts", "package.json", "README.md", "CHANGELOG.md", "LICENSE"} <= names

    bundle = json.loads((config.output_dir / "index.json").read_text(encoding="utf-8"))
    source = json.loads(config.registry_path.read_text(encoding="utf-8"))
    assert bundle == source["registry"]
    assert result.written
