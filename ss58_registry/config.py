"""Build configuration — which targets to generate, from which inputs, into where.

Loaded from a YAML file (``ss58build.yaml`` by default). Relative paths are
resolved against the directory holding the config file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ss58_registry.errors import ConfigError, UnknownTargetError
from ss58_registry.generators.manifest_patch import DEFAULT_OVERRIDES, REMOVE
from ss58_registry.generators.targets import ReservedPolicy, TargetKind
from ss58_registry.generators.templates import DEFAULT_LICENSE_HEADER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ss58build.yaml"

_KNOWN_KEYS = {
    "registry",
    "output_dir",
    "manifest",
    "type_template",
    "license_header",
    "targets",
    "enum_module",
    "reserved_entries",
    "manifest_overrides",
    "copy_files",
}


@dataclass
class BuildConfig:
    """Inputs and options for one build."""

    registry_path: Path = Path("ss58-registry.json")
    output_dir: Path = Path("npm_dist")
    manifest_path: Path | None = None
    type_template_path: Path | None = None
    license_header: str = DEFAULT_LICENSE_HEADER
    targets: list[TargetKind] = field(default_factory=lambda: list(TargetKind))
    enum_module: str = "known_networks.py"
    reserved: ReservedPolicy = ReservedPolicy.INCLUDE
    manifest_overrides: dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_OVERRIDES))
    copy_files: list[Path] = field(default_factory=list)


def load_config(path: str | Path) -> BuildConfig:
    """Load a build config from a YAML file.

    A ``null`` value in ``manifest_overrides`` removes that key from the
    published manifest.

    Raises:
        ConfigError: if the file is missing, is not valid YAML, or has
            unknown keys or values.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{path}: unknown config key(s): {', '.join(unknown)}")

    base = path.parent
    config = BuildConfig()

    if "registry" in data:
        config.registry_path = _resolve(base, data["registry"])
    if "output_dir" in data:
        config.output_dir = _resolve(base, data["output_dir"])
    if data.get("manifest"):
        config.manifest_path = _resolve(base, data["manifest"])
    if data.get("type_template"):
        config.type_template_path = _resolve(base, data["type_template"])
    if "license_header" in data:
        config.license_header = str(data["license_header"] or "")
    if "enum_module" in data:
        config.enum_module = str(data["enum_module"])

    if "targets" in data:
        try:
            config.targets = [TargetKind.parse(t) for t in data["targets"] or []]
        except UnknownTargetError as e:
            raise ConfigError(f"{path}: {e}") from e

    if "reserved_entries" in data:
        try:
            config.reserved = ReservedPolicy(data["reserved_entries"])
        except ValueError as e:
            allowed = ", ".join(p.value for p in ReservedPolicy)
            raise ConfigError(
                f"{path}: reserved_entries must be one of {allowed}, got {data['reserved_entries']!r}"
            ) from e

    if "manifest_overrides" in data:
        overrides = data["manifest_overrides"] or {}
        if not isinstance(overrides, dict):
            raise ConfigError(f"{path}: manifest_overrides must be a mapping")
        config.manifest_overrides = {
            key: REMOVE if value is None else value for key, value in overrides.items()
        }

    config.copy_files = [_resolve(base, p) for p in data.get("copy_files") or []]

    logger.debug("Loaded build config from %s", path)
    return config


def _resolve(base: Path, value) -> Path:
    p = Path(str(value))
    return p if p.is_absolute() else base / p
