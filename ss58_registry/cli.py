"""ss58-registry CLI — validate the registry and build its published artifacts."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ss58_registry import __version__
from ss58_registry.errors import ConfigError, MalformedRegistryError, ValidationError
from ss58_registry.generators.targets import TargetKind

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EXIT_INVALID = 1
EXIT_MALFORMED = 2
EXIT_CONFIG = 3

TARGET_CHOICE = click.Choice([k.value for k in TargetKind])


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """ss58-registry — the SS58 address-format registry.

    Validate the registry document and generate its derived artifacts:
    the enum table, the JSON bundle, the type declaration and the
    published package manifest.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# ── Validate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("registry_path", type=click.Path(dir_okay=False))
def validate(registry_path: str):
    """Validate a registry document: its shape, then every invariant."""
    from ss58_registry.validation.invariants import check_registry

    console.print(f"\n[bold blue]SS58[/] — Validating: {escape(registry_path)}\n")

    registry = _load_or_exit(registry_path)
    console.print(f"  [green]v[/] Shape validation passed ({len(registry)} entries)")

    result = check_registry(registry)
    if not result.passed:
        _report_violations(result.issues)
        sys.exit(EXIT_INVALID)

    console.print("  [green]v[/] Invariant validation passed")
    console.print("\n[green]Valid![/]")


# ── Generate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("registry_path", type=click.Path(dir_okay=False))
@click.option("--target", "-t", "kind", required=True, type=TARGET_CHOICE, help="Artifact kind")
@click.option("--exclude-reserved", is_flag=True, help="Leave reserved entries out of the enum table")
@click.option("--manifest", "-m", default=None, type=click.Path(dir_okay=False), help="Input package.json")
def generate(registry_path: str, kind: str, exclude_reserved: bool, manifest: str | None):
    """Generate one target and print its file(s) to stdout."""
    from ss58_registry.build import target_spec
    from ss58_registry.config import BuildConfig
    from ss58_registry.generators import ReservedPolicy
    from ss58_registry.generators import generate as generate_target
    from ss58_registry.validation.invariants import validate as validate_registry

    registry = _load_or_exit(registry_path)
    try:
        validated = validate_registry(registry)
    except ValidationError as e:
        _report_violations(e.violations)
        sys.exit(EXIT_INVALID)

    config = BuildConfig(reserved=ReservedPolicy.EXCLUDE if exclude_reserved else ReservedPolicy.INCLUDE)
    if manifest:
        config.manifest_path = Path(manifest)

    try:
        spec = target_spec(config, TargetKind(kind))
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/] {escape(str(e))}")
        sys.exit(EXIT_CONFIG)

    files = sorted(generate_target(validated, spec), key=lambda f: f.path)
    for output in files:
        if len(files) > 1:
            click.echo(f"// ==> {output.path} <==")
        click.echo(output.content, nl=False)


# ── Build ────────────────────────────────────────────────────────────


@main.command()
@click.option("--config", "-c", "config_path", default=None, help="Build config (default: ss58build.yaml if present)")
@click.option("--registry", "-r", "registry_path", default=None, help="Override the registry path")
@click.option("--output", "-o", default=None, help="Override the output directory")
@click.option("--target", "-t", "kinds", multiple=True, type=TARGET_CHOICE, help="Only build these targets")
@click.option("--dry-run", is_flag=True, help="Generate but do not write anything")
def build(config_path: str | None, registry_path: str | None, output: str | None, kinds: tuple, dry_run: bool):
    """Validate the registry and write every configured artifact."""
    from ss58_registry.build import build as run_build
    from ss58_registry.config import DEFAULT_CONFIG_FILE, BuildConfig, load_config

    try:
        if config_path:
            config = load_config(config_path)
        elif Path(DEFAULT_CONFIG_FILE).exists():
            config = load_config(DEFAULT_CONFIG_FILE)
        else:
            config = BuildConfig()
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/] {escape(str(e))}")
        sys.exit(EXIT_CONFIG)

    if registry_path:
        config.registry_path = Path(registry_path)
    if output:
        config.output_dir = Path(output)

    console.print(f"\n[bold blue]SS58[/] — Building from: {escape(str(config.registry_path))}\n")

    try:
        result = run_build(config, targets=[TargetKind(k) for k in kinds] or None, dry_run=dry_run)
    except MalformedRegistryError as e:
        _report_malformed(e)
        sys.exit(EXIT_MALFORMED)
    except ValidationError as e:
        _report_violations(e.violations)
        sys.exit(EXIT_INVALID)
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/] {escape(str(e))}")
        sys.exit(EXIT_CONFIG)

    table = Table(title=f"Generated files ({len(result.files)})")
    table.add_column("File", style="cyan")
    table.add_column("Bytes", justify="right")
    for f in result.files:
        table.add_row(escape(f.path), str(len(f.content.encode("utf-8"))))
    for p in result.copied:
        table.add_row(escape(p.name), "copied")
    console.print(table)

    console.print(Panel(escape(result.summary()), title="Build Result"))


# ── List ─────────────────────────────────────────────────────────────


@main.command(name="list")
@click.argument("registry_path", type=click.Path(dir_okay=False))
@click.option("--reserved/--no-reserved", default=True, help="Include reserved entries")
def list_entries(registry_path: str, reserved: bool):
    """List the networks in a registry document."""
    registry = _load_or_exit(registry_path)
    entries = [e for e in registry if reserved or not e.reserved]

    if not entries:
        console.print("[yellow]Registry is empty.[/]")
        return

    table = Table(title=f"SS58 Registry ({len(entries)} networks)")
    table.add_column("Prefix", justify="right", style="green")
    table.add_column("Network", style="cyan")
    table.add_column("Display Name")
    table.add_column("Tokens")
    table.add_column("Account")

    for entry in entries:
        tokens = ", ".join(f"{s} ({d})" for s, d in entry.tokens)
        account = escape(entry.standard_account) if entry.standard_account else "[dim]none[/]"
        table.add_row(
            str(entry.prefix),
            escape(entry.network),
            escape(entry.display_name[:50]),
            escape(tokens),
            account,
        )

    console.print(table)


# ── Schema ───────────────────────────────────────────────────────────


@main.command(name="schema")
def dump_schema():
    """Print the JSON Schema of the registry document."""
    import json

    from ss58_registry.validation.schema import get_schema

    click.echo(json.dumps(get_schema(), indent=2))


# ── Helpers ──────────────────────────────────────────────────────────


def _load_or_exit(registry_path: str):
    from ss58_registry.store import load_registry

    try:
        return load_registry(registry_path)
    except MalformedRegistryError as e:
        _report_malformed(e)
        sys.exit(EXIT_MALFORMED)


def _report_malformed(error: MalformedRegistryError):
    err_console.print(f"[red]Malformed registry:[/] {escape(error.path)}")
    for issue in error.issues:
        err_console.print(f"  [red]x[/] {escape(issue)}")


def _report_violations(violations):
    err_console.print(f"[red]Validation FAILED ({len(violations)} violation(s)):[/]")
    for issue in violations:
        err_console.print(f"  [red]x[/] {escape(str(issue))}")


if __name__ == "__main__":
    main()
