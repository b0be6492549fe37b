"""Command-line interface for the equipment registry."""

import json
from dataclasses import asdict, replace

import click
from rich.console import Console
from rich.table import Table

from equipment_registry.config import RegistryConfig
from equipment_registry.main import run

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="equipment-registry")
def cli() -> None:
    """Track equipment records over HTTP."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: $EQUIPMENT_REGISTRY_HOST).")
@click.option(
    "--port",
    type=int,
    default=None,
    help="Bind port (default: $EQUIPMENT_REGISTRY_PORT).",
)
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve_cmd(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP server."""
    config = RegistryConfig.from_env()
    if host is not None:
        config = replace(config, host=host)
    if port is not None:
        config = replace(config, port=port)
    if reload:
        config = replace(config, debug=True)
    run(config)


@cli.command("show-config")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def show_config_cmd(output_format: str) -> None:
    """Show configuration resolved from the environment."""
    config = RegistryConfig.from_env()
    if output_format == "json":
        click.echo(json.dumps(asdict(config), indent=2))
        return

    table = Table(title="Equipment registry configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in asdict(config).items():
        table.add_row(key, str(value))
    Console().print(table)


def main() -> None:
    """CLI entry point used by the `equipment-registry` console script."""
    cli()
