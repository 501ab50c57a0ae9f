"""
Command-Line Interface

Inspect the configuration tables will be rendered with.

Commands:
    datatables-config show    - Resolved options, one table per group
    datatables-config groups  - Resolved group names
    datatables-config keys    - Every recognised configuration key

Usage:
    # Options of every group for French users
    datatables-config show --locale fr_FR

    # Options of one group, bundle read from an external directory
    datatables-config show --group myTables --config-dir /etc/myapp/datatables
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from datatables_config.config.settings import DatatablesSettings
from datatables_config.exceptions import ConfigurationError
from datatables_config.types.configuration import ConfigurationKey
from datatables_config.types.table import ResolvedConfiguration

__all__ = ["main", "app"]

app = typer.Typer(
    name="datatables-config",
    help="Inspect resolved data table configurations",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve(locale: Optional[str], config_dir: Optional[Path]) -> ResolvedConfiguration:
    from datatables_config.api.convenience import resolve_configurations

    settings = DatatablesSettings()
    if config_dir is not None:
        settings = settings.with_overrides(external_configuration_path=str(config_dir))

    try:
        return resolve_configurations(locale, settings=settings)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1) from e


@app.command()
def show(
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale, e.g. fr_FR"),
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Only show this group"),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir", "-c",
        help="Directory holding the user bundle",
    ),
) -> None:
    """Show the resolved options of each group."""
    resolved = _resolve(locale, config_dir)

    groups = sorted(resolved.groups)
    if group is not None:
        if group not in resolved.groups:
            console.print(f"[red]Unknown group '{group}'. Available: {', '.join(groups)}[/]")
            raise typer.Exit(1)
        groups = [group]

    for name in groups:
        table = Table(title=f"Group: {name}")
        table.add_column("Option", style="cyan")
        table.add_column("Value", style="green")

        conf = resolved.configurations[name]
        for key, value in sorted(conf.items(), key=lambda item: item[0].value):
            table.add_row(key.value, escape(value))

        console.print(table)

    if resolved.locale_resolver:
        console.print(f"Locale resolver: {resolved.locale_resolver}")


@app.command()
def groups(
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Locale, e.g. fr_FR"),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir", "-c",
        help="Directory holding the user bundle",
    ),
) -> None:
    """List the resolved group names."""
    resolved = _resolve(locale, config_dir)
    for name in sorted(resolved.groups):
        console.print(name)


@app.command()
def keys() -> None:
    """List every recognised configuration key."""
    for key in ConfigurationKey:
        console.print(key.value)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
