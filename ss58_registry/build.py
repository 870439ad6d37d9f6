"""Build driver — generate every configured target and write it to the output directory.

All inputs are read and every target generated before the first file is
written, so a failing registry or a missing input leaves the output
directory untouched.
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path

from ss58_registry.config import BuildConfig
from ss58_registry.errors import ConfigError
from ss58_registry.generators import OutputFile, TargetKind, TargetSpec, generate
from ss58_registry.store import load_registry
from ss58_registry.validation.invariants import validate

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """What a build produced."""

    output_dir: Path
    files: list[OutputFile] = field(default_factory=list)
    copied: list[Path] = field(default_factory=list)
    written: bool = False

    def summary(self) -> str:
        action = "wrote" if self.written else "would write"
        return (
            f"{action} {len(self.files)} generated file(s) and "
            f"{len(self.copied)} copied file(s) to {self.output_dir}"
        )


def build(
    config: BuildConfig,
    targets: list[TargetKind] | None = None,
    dry_run: bool = False,
) -> BuildResult:
    """Run a full build.

    Args:
        config: Build inputs and options.
        targets: Targets to generate; defaults to ``config.targets``.
        dry_run: Generate everything but write nothing.

    Raises:
        MalformedRegistryError: if the registry does not load.
        ValidationError: if the registry violates an invariant.
        ConfigError: if an input file is missing or two targets clash.
    """
    kinds = [TargetKind.parse(t) for t in (config.targets if targets is None else targets)]

    registry = validate(load_registry(config.registry_path))

    files: dict[str, OutputFile] = {}
    for kind in kinds:
        spec = target_spec(config, kind)
        for output in sorted(generate(registry, spec), key=lambda f: f.path):
            if output.path in files:
                raise ConfigError(f"Two targets both generate '{output.path}'")
            files[output.path] = output

    missing = [p for p in config.copy_files if not p.is_file()]
    if missing:
        raise ConfigError(f"File(s) to copy not found: {', '.join(str(p) for p in missing)}")

    result = BuildResult(
        output_dir=config.output_dir,
        files=list(files.values()),
        copied=list(config.copy_files),
    )
    if dry_run:
        logger.info("Dry run: %s", result.summary())
        return result

    config.output_dir.mkdir(parents=True, exist_ok=True)
    for output in result.files:
        _write(config.output_dir / output.path, output.content)
    for source in result.copied:
        shutil.copyfile(source, config.output_dir / source.name)
        logger.debug("Copied %s", source)

    result.written = True
    logger.info("Build complete: %s", result.summary())
    return result


def target_spec(config: BuildConfig, kind: TargetKind) -> TargetSpec:
    """Build the :class:`TargetSpec` for *kind*, reading any input files it needs."""
    spec = TargetSpec(
        kind=kind,
        license_header=config.license_header,
        module_name=config.enum_module,
        reserved=config.reserved,
        overrides=config.manifest_overrides,
    )

    if kind is TargetKind.TYPE_DECLARATION and config.type_template_path is not None:
        template = _read_input(config.type_template_path, "type template")
        return replace(spec, type_template=template)

    if kind is TargetKind.PACKAGE_MANIFEST_PATCH:
        if config.manifest_path is None:
            raise ConfigError("The package-manifest-patch target needs a 'manifest' path")
        text = _read_input(config.manifest_path, "manifest")
        try:
            manifest = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in manifest {config.manifest_path}: {e}") from e
        if not isinstance(manifest, dict):
            raise ConfigError(f"Manifest {config.manifest_path} must be a JSON object")
        return replace(spec, manifest=manifest)

    return spec


def _read_input(path: Path, what: str) -> str:
    if not path.is_file():
        raise ConfigError(f"The {what} file was not found: {path}")
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.debug("Wrote %s", path)
