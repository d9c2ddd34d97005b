"""sshconfig CLI."""

import json
import logging
import shlex
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from sshconfig.config import (
    DisplayConfig,
    SSHConfigToolConfig,
    get_config_template,
    load_config_or_default,
)
from sshconfig.parser import parse_ssh_config
from sshconfig.types import HostEntry

app = typer.Typer(help="sshconfig - Read host entries from an SSH client config")
console = Console()

logger = logging.getLogger(__name__)

CONFIG_FILE = "sshconfig.yaml"


def setup_logging(verbose: bool = False):
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def get_config(config_file: Path) -> SSHConfigToolConfig:
    """Load tool configuration, exiting on invalid files."""
    try:
        return load_config_or_default(config_file)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Error:[/red] Invalid config {config_file}: {escape(str(e))}")
        raise typer.Exit(1)


def load_entries(path: str | None, config: SSHConfigToolConfig) -> list[HostEntry]:
    """Parse the requested SSH config, exiting on I/O errors."""
    ssh_config = path or config.ssh_config
    try:
        return parse_ssh_config(ssh_config)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {ssh_config}: {escape(str(e))}")
        raise typer.Exit(1)


def find_entry(entries: list[HostEntry], name: str) -> HostEntry:
    """Find the last entry with the given block name."""
    for entry in reversed(entries):
        if entry.name == name:
            return entry
    console.print(f"[red]Error:[/red] Host {escape(name)} not found.")
    raise typer.Exit(1)


def print_plain(entries: list[HostEntry], display: DisplayConfig) -> None:
    for entry in entries:
        port = entry.port if entry.port is not None else display.default_port
        identity_file = entry.identity_file or display.default_identity_file
        for line in (
            f"name: {entry.name}",
            f"host: {entry.host}",
            f"user: {entry.user}",
            f"port: {port}",
            f"identity file: {identity_file}",
        ):
            console.print(line, markup=False, highlight=False, soft_wrap=True)


def print_table(entries: list[HostEntry], display: DisplayConfig) -> None:
    table = Table()
    table.add_column("Name")
    table.add_column("Host")
    table.add_column("User")
    table.add_column("Port")
    table.add_column("Identity file")

    for entry in entries:
        port = entry.port if entry.port is not None else display.default_port
        table.add_row(
            Text(entry.name),
            Text(entry.host),
            Text(entry.user),
            str(port),
            Text(entry.identity_file or display.default_identity_file),
        )
    console.print(table)


def print_json(entries: list[HostEntry]) -> None:
    console.print_json(json.dumps([entry.model_dump() for entry in entries]))


@app.command()
def show(
    path: str | None = typer.Argument(None, help="SSH config file (default from config)"),
    output: str | None = typer.Option(None, "--format", "-f", help="Output: plain, table or json"),
    config_file: Path = typer.Option(Path(CONFIG_FILE), "--config", "-c", help="Tool config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Print every host entry in an SSH config."""
    setup_logging(verbose)
    config = get_config(config_file)
    output = output or config.display.format

    if output not in ("plain", "table", "json"):
        console.print(f"[red]Error:[/red] Unknown format: {escape(output)}")
        raise typer.Exit(1)

    entries = load_entries(path, config)
    logger.debug(f"Loaded {len(entries)} entries")

    if output == "json":
        print_json(entries)
    elif output == "table":
        print_table(entries, config.display)
    else:
        print_plain(entries, config.display)


@app.command()
def get(
    name: str = typer.Argument(..., help="Text after 'Host' of the block to print"),
    path: str | None = typer.Argument(None, help="SSH config file (default from config)"),
    config_file: Path = typer.Option(Path(CONFIG_FILE), "--config", "-c", help="Tool config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Print a single host entry."""
    setup_logging(verbose)
    config = get_config(config_file)
    entry = find_entry(load_entries(path, config), name)
    print_plain([entry], config.display)


@app.command()
def args(
    name: str = typer.Argument(..., help="Text after 'Host' of the block to connect to"),
    path: str | None = typer.Argument(None, help="SSH config file (default from config)"),
    config_file: Path = typer.Option(Path(CONFIG_FILE), "--config", "-c", help="Tool config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """Print the ssh command for a host entry."""
    setup_logging(verbose)
    config = get_config(config_file)
    entry = find_entry(load_entries(path, config), name)
    command = shlex.join(["ssh", *entry.to_ssh_args()])
    console.print(command, markup=False, highlight=False, soft_wrap=True)


@app.command()
def init():
    """Write a configuration template to the current directory."""
    config_file = Path(CONFIG_FILE)

    if config_file.exists():
        console.print(f"[yellow]Warning:[/yellow] {CONFIG_FILE} already exists.")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit(0)

    config_file.write_text(get_config_template())
    console.print(f"[green]Wrote {CONFIG_FILE}.[/green]")


if __name__ == "__main__":
    app()
