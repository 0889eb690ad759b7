"""Config management commands."""

from __future__ import annotations

import sys
from dataclasses import asdict, fields
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ..config import (
    GinatraConfig,
    find_config_path,
    get_default_config_yaml,
    load_config,
    save_config_value,
    validate_config,
)

console = Console()

DEFAULT_FILENAME = "ginatra.yaml"

config_option = click.option("--config", "-c", "config_path", default=None, help="Config file path")


def _resolve_path(config_path: str | None) -> Path | None:
    if config_path:
        return Path(config_path)
    return find_config_path()


@click.group("config")
def config():
    """Manage the ginatra.yaml settings used by the view helpers."""


@config.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config file")
def init(force):
    """Write a commented ginatra.yaml to the current directory."""
    target = Path.cwd() / DEFAULT_FILENAME

    if target.exists() and not force:
        console.print(f"[yellow]{DEFAULT_FILENAME} already exists[/yellow] (use --force to replace it)")
        return

    target.write_text(get_default_config_yaml(), encoding="utf-8")
    console.print(f"[green]Wrote[/green] {target}")


@config.command()
@config_option
def show(config_path):
    """Show every setting, marking the ones that differ from the defaults."""
    cfg = asdict(load_config(config_path))
    defaults = asdict(GinatraConfig())

    path = _resolve_path(config_path)
    table = Table(title=f"ginatra settings ({path or 'defaults'})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for f in fields(GinatraConfig):
        value = cfg[f.name]
        source = "default" if value == defaults[f.name] else "file"
        table.add_row(f.name, repr(value), source)

    console.print(table)


@config.command()
@click.argument("key", type=click.Choice([f.name for f in fields(GinatraConfig)]))
@config_option
def get(key, config_path):
    """Print the effective value of KEY."""
    click.echo(getattr(load_config(config_path), key))


@config.command("set")
@click.argument("key", type=click.Choice([f.name for f in fields(GinatraConfig)]))
@click.argument("value")
@config_option
def set_value(key, value, config_path):
    """Store VALUE for KEY in the config file."""
    path = _resolve_path(config_path)

    if path is None or not path.exists():
        console.print("[red]No config file found.[/red] Run 'ginatra config init' first.")
        sys.exit(1)

    try:
        save_config_value(path, key, value)
    except ValueError as e:
        console.print(f"[red]Invalid value:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]{key}[/green] = {getattr(load_config(path), key)!r}")


@config.command()
@config_option
def validate(config_path):
    """Check the config file for unknown keys and non-integer sizes."""
    path = _resolve_path(config_path)

    if path is None:
        console.print("[yellow]No config file found, defaults apply.[/yellow]")
        return

    if not path.exists():
        console.print(f"[red]Config file not found:[/red] {path}")
        sys.exit(1)

    errors = validate_config(path)

    if not errors:
        console.print(f"[green]Config is valid:[/green] {path}")
    else:
        console.print(f"[red]Config has {len(errors)} error(s):[/red] {path}")
        for err in errors:
            console.print(f"  [red]-[/red] {err}")
        sys.exit(1)
