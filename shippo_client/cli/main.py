"""Shippo CLI: command-line access to the Shippo API.

Usage:
    shippo parcels create parcel.yaml   Create a parcel from a params file
    shippo addresses get <id>           Show one address
    shippo shipments rates <id>         List rates for a shipment
    shippo track usps <number>          Show tracking status and history
    shippo check parcels parcel.yaml    Validate params without sending
"""

import logging
import sys
from collections.abc import Callable
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from shippo_client.cli.output import format_collection, format_entity, format_track
from shippo_client.cli.params import load_params
from shippo_client.client import ShippoClient
from shippo_client.config import ShippoConfig, load_config
from shippo_client.errors.domain import InvalidAttributeError
from shippo_client.errors.formatter import (
    ShippoClientError,
    format_error,
    format_error_summary,
)
from shippo_client.http.request import (
    CreateAddress,
    CreateParcel,
    CreateShipment,
    CreateTransaction,
)
from shippo_client.utils.redaction import mask_token

_log = logging.getLogger(__name__)

app = typer.Typer(
    name="shippo",
    help="Shippo shipping API client",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")

console = Console()

BUILDERS = {
    "addresses": CreateAddress,
    "parcels": CreateParcel,
    "shipments": CreateShipment,
    "transactions": CreateTransaction,
}

# --- Global state ---
_config_path: str | None = None
_token: str | None = None
_log_level: str | None = None


def configure_logging(level: str, fmt: str) -> None:
    """Send log records to stderr so --json output stays parseable."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@app.callback()
def main(
    config: Optional[str] = typer.Option(
        None, "--config", help="Path to shippo.yaml config file"
    ),
    token: Optional[str] = typer.Option(
        None, "--token", help="Access token (overrides config)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="debug, info, warning or error"
    ),
):
    """Shippo CLI: addresses, parcels, shipments, transactions and tracking."""
    global _config_path, _token, _log_level
    _config_path = config
    _token = token
    _log_level = log_level


def _load_config_or_exit() -> ShippoConfig:
    try:
        cfg = load_config(config_path=_config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Config file not found:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]Config validation failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_log_level or cfg.logging.level, cfg.logging.format)
    if _token:
        cfg.api.access_token = _token
    return cfg


def _run(action: Callable[[ShippoClient], str]) -> None:
    """Run one API action and print its output, exiting 1 on any error."""
    cfg = _load_config_or_exit()
    try:
        with ShippoClient.from_config(cfg) as client:
            output = action(client)
    except (ShippoClientError, InvalidAttributeError) as e:
        _log.debug("Command failed", exc_info=True)
        console.print(f"[red]{escape(format_error(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    # Pre-rendered text
    console.print(output.rstrip("\n"), markup=False, highlight=False, soft_wrap=True)


def _load_params_or_exit(path: str) -> dict[str, Any]:
    try:
        return load_params(path)
    except ShippoClientError as e:
        console.print(f"[red]{escape(format_error(e))}[/red]")
        raise typer.Exit(1)


def _add_resource_commands(name: str, title: str, help_text: str) -> typer.Typer:
    """Register create/get/validate/list commands for one resource."""
    resource_app = typer.Typer(help=help_text)
    app.add_typer(resource_app, name=name)

    def resource(client: ShippoClient):
        return getattr(client, name)()

    @resource_app.command("create")
    def create(
        params_file: str = typer.Argument(help="JSON or YAML file with parameters"),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ):
        """Create an object from a parameters file."""
        params = _load_params_or_exit(params_file)
        _run(lambda c: format_entity(resource(c).create(params), title, json_output))

    @resource_app.command("get")
    def get(
        object_id: str = typer.Argument(help="Object ID"),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ):
        """Show one object."""
        _run(lambda c: format_entity(resource(c).retrieve(object_id), title, json_output))

    @resource_app.command("validate")
    def validate(
        object_id: str = typer.Argument(help="Object ID"),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ):
        """Ask the service to validate a stored object."""
        _run(lambda c: format_entity(resource(c).validate(object_id), title, json_output))

    @resource_app.command("list")
    def list_(
        page: Optional[int] = typer.Option(None, "--page", help="Page number"),
        results: Optional[int] = typer.Option(None, "--results", help="Page size"),
        json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    ):
        """List objects, one page at a time."""
        _run(lambda c: format_collection(
            resource(c).get_list(page=page, results=results), name, json_output,
        ))

    return resource_app


_add_resource_commands("addresses", "Address", "Manage addresses")
_add_resource_commands("parcels", "Parcel", "Manage parcels")
shipments_app = _add_resource_commands("shipments", "Shipment", "Manage shipments")
_add_resource_commands("transactions", "Transaction", "Purchase and inspect labels")


@shipments_app.command("rates")
def shipment_rates(
    object_id: str = typer.Argument(help="Shipment object ID"),
    currency: Optional[str] = typer.Option(None, "--currency", help="Convert amounts, e.g. EUR"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List the rates generated for a shipment."""
    _run(lambda c: format_collection(
        c.shipments().get_rates(object_id, currency=currency), "rates", json_output,
    ))


@app.command()
def track(
    carrier: str = typer.Argument(help="Carrier token, e.g. usps"),
    tracking_number: str = typer.Argument(help="Tracking number"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show tracking status and history for a package."""
    _run(lambda c: format_track(
        c.tracking().get_status(carrier, tracking_number), json_output,
    ))


@app.command()
def check(
    resource: str = typer.Argument(help="addresses, parcels, shipments or transactions"),
    params_file: str = typer.Argument(help="JSON or YAML file with parameters"),
):
    """Validate a parameters file locally without calling the API."""
    builder_class = BUILDERS.get(resource)
    if builder_class is None:
        console.print(f"[red]Unknown resource:[/red] {escape(resource)}")
        raise typer.Exit(1)
    builder = builder_class(_load_params_or_exit(params_file))
    errors = builder.validation_errors()
    if errors:
        console.print(f"[red]{escape(format_error_summary(errors))}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Parameters are valid.[/green] {len(builder.to_dict())} field(s) to send.")


# --- Config commands ---


@config_app.command("show")
def config_show():
    """Display resolved configuration (token masked)."""
    cfg = _load_config_or_exit()
    token = cfg.api.access_token
    console.print("[bold]API:[/bold]")
    console.print(f"  api_base: {cfg.api.api_base}")
    console.print(f"  timeout: {cfg.api.timeout}")
    console.print(f"  access_token: {mask_token(token) if token else '[yellow]not set[/yellow]'}")
    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  level: {cfg.logging.level}")


@config_app.command("validate")
def config_validate(
    config: Optional[str] = typer.Option(None, "--config", help="Config file path"),
):
    """Validate a config file without calling the API."""
    global _config_path
    if config:
        _config_path = config
    cfg = _load_config_or_exit()
    console.print("[green]Config is valid.[/green]")
    console.print(f"  Access token: {'set' if cfg.api.access_token else 'not set'}")


if __name__ == "__main__":
    app()
