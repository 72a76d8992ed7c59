"""CLI output formatters for Rich tables and JSON.

Provides human-readable Rich output (default) and machine-parseable JSON
output (--json flag). All formatting goes through these functions so the
CLI commands stay clean.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from shippo_client.entity.base import Entity
from shippo_client.entity.location import Location
from shippo_client.http.response.collection import Collection
from shippo_client.http.response.tracks import Track

console = Console()

# Tracking status color map
STATUS_COLORS = {
    "UNKNOWN": "dim",
    "TRANSIT": "blue",
    "DELIVERED": "green",
    "RETURNED": "yellow",
    "FAILURE": "red",
    "VALID": "green",
    "INVALID": "red",
    "SUCCESS": "green",
    "ERROR": "red",
    "QUEUED": "yellow",
    "WAITING": "yellow",
}

LIST_COLUMNS: dict[str, tuple[str, ...]] = {
    "addresses": ("object_id", "name", "street1", "city", "country", "object_state"),
    "parcels": (
        "object_id", "length", "width", "height", "distance_unit",
        "weight", "mass_unit",
    ),
    "shipments": ("object_id", "object_status", "address_from", "address_to", "parcel"),
    "transactions": ("object_id", "object_status", "tracking_number", "label_url"),
    "rates": ("object_id", "provider", "servicelevel_name", "amount", "currency", "days"),
}


def _render(renderable: Any) -> str:
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def _plain(value: Any) -> str:
    return "—" if value in (None, "") else escape(str(value))


def _colored(value: Any) -> str:
    text = _plain(value)
    color = STATUS_COLORS.get(text)
    return f"[{color}]{text}[/{color}]" if color else text


def format_location(location: Location) -> str:
    """Format a location as "City, ST 12345, US" or "—" when empty."""
    if location.is_empty():
        return "—"
    head = ", ".join(p for p in (location.get_city(), location.get_state()) if p)
    parts = [p for p in (head, location.get_zip()) if p]
    text = " ".join(parts)
    country = location.get_country()
    return f"{text}, {country}" if text and country else (text or country)


def format_entity(entity: Entity, title: str, as_json: bool = False) -> str:
    """Format one entity's fields as a Rich panel or JSON.

    Args:
        entity: Entity to display.
        title: Panel title, e.g. "Parcel".
        as_json: If True, return JSON string instead of Rich panel.

    Returns:
        Formatted string output.
    """
    data = entity.to_dict()
    if as_json:
        return json.dumps(data, indent=2, default=str)

    lines = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, default=str) if value else ""
        lines.append(f"[bold]{key}:[/bold] {_colored(value)}")
    return _render(Panel("\n".join(lines) or "(empty)", title=title, expand=False))


def format_collection(
    collection: Collection, resource: str, as_json: bool = False
) -> str:
    """Format one page of a list endpoint as a Rich table or JSON.

    Args:
        collection: Page to display.
        resource: Key into LIST_COLUMNS, e.g. "parcels".
        as_json: If True, return JSON string instead of Rich table.

    Returns:
        Formatted string output.
    """
    if as_json:
        data = collection.to_dict()
        data["results"] = [e.to_dict() for e in data["results"]]
        return json.dumps(data, indent=2, default=str)

    if not len(collection):
        return f"No {resource} found."

    columns = LIST_COLUMNS[resource]
    table = Table(
        title=f"{resource.capitalize()} ({len(collection)} of {collection.get_count()})",
        show_lines=True,
    )
    for column in columns:
        table.add_column(column, no_wrap=column == "object_id")

    for entity in collection:
        data = entity.to_dict()
        table.add_row(*(_colored(data.get(column)) for column in columns))

    output = _render(table)
    if collection.get_next():
        output += f"More results: {collection.get_next()}\n"
    return output


def format_track(track: Track, as_json: bool = False) -> str:
    """Format a tracking lookup: current status plus history table."""
    if as_json:
        return json.dumps(track.to_dict(), indent=2, default=str)

    status = track.get_tracking_status()
    eta = track.get_eta()
    lines = [
        f"[bold]Carrier:[/bold]   {_plain(track.get_carrier())}",
        f"[bold]Number:[/bold]    {_plain(track.get_tracking_number())}",
        f"[bold]Status:[/bold]    {_colored(status.get_status())}",
        f"[bold]Details:[/bold]   {_plain(status.get_status_details())}",
        f"[bold]Location:[/bold]  {_plain(format_location(status.get_location()))}",
        f"[bold]ETA:[/bold]       {eta.isoformat() if eta else '—'}",
    ]
    output = _render(Panel("\n".join(lines), title="Tracking", expand=False))

    history = track.get_tracking_history()
    if history:
        table = Table(title="History")
        table.add_column("Date")
        table.add_column("Status")
        table.add_column("Details")
        table.add_column("Location")
        for event in history:
            table.add_row(
                _plain(event.get_status_date()),
                _colored(event.get_status()),
                _plain(event.get_status_details()),
                _plain(format_location(event.get_location())),
            )
        output += _render(table)
    return output
