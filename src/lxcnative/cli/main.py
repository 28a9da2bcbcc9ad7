"""CLI entry point for lxc-native-import.

Invoked as::

    lxc-native [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m lxcnative.cli.main

Commands
--------
import      Import an LXC config and dump the definition as JSON or YAML
inspect     Import an LXC config and print a summary of its mounts
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from lxcnative.domain.nodes import DomainDefinition

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read an LXC config file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _import_or_exit(source: str, path: str) -> "DomainDefinition":
    """Import LXC config text, printing the error and exiting on failure."""
    from lxcnative import LxcImportError, parse

    try:
        return parse(source)
    except LxcImportError as exc:
        err_console.print(
            f"[red]Import error[/red] in {escape(path)}: {escape(str(exc))}",
            highlight=False,
        )
        sys.exit(1)


def _format_size(size_bytes: int) -> str:
    if not size_bytes:
        return "-"
    for unit, factor in (("GiB", 1024**3), ("MiB", 1024**2), ("KiB", 1024)):
        if size_bytes % factor == 0:
            return f"{size_bytes // factor} {unit}"
    return f"{size_bytes} B"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="lxc-native-import")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Convert LXC native configuration into container definitions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from lxcnative import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]lxc-native-import[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# import command
# ---------------------------------------------------------------------------


@cli.command(name="import")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Definition output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def import_command(file: str, output_format: str, output: str | None) -> None:
    """Import an LXC config file and dump the container definition.

    FILE is the path to the LXC configuration file.
    """
    from lxcnative.domain import DefinitionSerializer

    source = _read_source(file)
    definition = _import_or_exit(source, file)

    serializer = DefinitionSerializer()

    if output_format.lower() == "json":
        text = serializer.to_json(definition, indent=2)
        lang = "json"
    else:
        text = serializer.to_yaml(definition)
        lang = "yaml"

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Definition written to[/green] {escape(output)}")
    else:
        syntax = Syntax(text, lang)
        console.print(syntax)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("file", type=click.Path(exists=False))
def inspect_command(file: str) -> None:
    """Import an LXC config file and summarize the result.

    FILE is the path to the LXC configuration file.
    """
    source = _read_source(file)
    definition = _import_or_exit(source, file)

    table = Table(title=f"Filesystems: {escape(definition.name)}", show_lines=True)
    table.add_column("Kind", style="bold", min_width=6)
    table.add_column("Source")
    table.add_column("Destination")
    table.add_column("Mode", min_width=4)
    table.add_column("Size", justify="right")

    for fs in definition.filesystems:
        table.add_row(
            fs.kind.name.lower(),
            escape(fs.source or "-"),
            escape(fs.destination),
            "ro" if fs.read_only else "rw",
            _format_size(fs.size_bytes),
        )

    console.print(table)

    features = ", ".join(sorted(f.name.lower() for f in definition.features)) or "none"
    console.print(f"\n[bold]Name:[/bold] {escape(definition.name)}")
    console.print(f"[bold]Memory:[/bold] {definition.max_memory_kib} KiB")
    console.print(f"[bold]Features:[/bold] {features}")


if __name__ == "__main__":
    cli()
