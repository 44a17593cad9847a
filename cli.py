"""CLI commands for ECard event management."""

import asyncio
from pathlib import Path
from uuid import UUID

import typer

from ecard.errors import ECardError
from ecard.events.dtos import TIERS, EventStatus, Tier
from ecard.events.repository.read_models import SqlEventReadModel
from ecard.events.repository.write_models import SqlEventWriteModel
from ecard.responses.export import render_csv
from ecard.responses.repository.read_models import SqlResponseReadModel

app = typer.Typer(help="CLI commands for ECard event management")


def _parse_event_id(event_id: str) -> UUID:
    try:
        return UUID(event_id)
    except ValueError:
        typer.secho(f"Not a valid event id: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def create_event(
    title: str = typer.Argument(
        ...,
        help="Title of the event",
    ),
    host_id: str = typer.Option(
        ...,
        "--host",
        help="Id of the host who owns the event",
    ),
    no_plus_ones: bool = typer.Option(
        False,
        "--no-plus-ones",
        help="Count every RSVP as a single guest",
    ),
    max_guests_per_rsvp: int = typer.Option(
        10,
        "--max-guests-per-rsvp",
        help="Largest headcount a single RSVP may bring",
    ),
    max_attendees: int = typer.Option(
        None,
        "--max-attendees",
        help="Optional ceiling on the total attending headcount",
    ),
):
    """Create a draft event on the free tier."""
    event = asyncio.run(
        SqlEventWriteModel().create_event(
            host_id=host_id,
            title=title,
            allow_plus_ones=not no_plus_ones,
            max_guests_per_rsvp=max_guests_per_rsvp,
            max_attendees=max_attendees,
        )
    )

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Slug: {event.slug}", fg=typer.colors.CYAN)
    typer.secho(f"  Status: {event.status.value}", fg=typer.colors.BLUE)
    typer.secho(f"  Response limit: {event.max_responses}", fg=typer.colors.BLUE)


@app.command()
def publish(
    event_id: str = typer.Argument(
        ...,
        help="Event UUID",
    ),
    host_id: str = typer.Option(
        ...,
        "--host",
        help="Id of the host who owns the event",
    ),
):
    """Toggle an event between draft and published."""
    event_uuid = _parse_event_id(event_id)

    async def _toggle():
        event = await SqlEventReadModel().get_event_for_host(event_uuid, host_id)
        if event is None:
            return None
        return await SqlEventWriteModel().set_status(event.id, host_id, event.status.toggled())

    event = asyncio.run(_toggle())
    if event is None:
        typer.secho(f"Event not found: {event_id}", fg=typer.colors.RED)
        raise typer.Exit(1)

    color = typer.colors.GREEN if event.status == EventStatus.PUBLISHED else typer.colors.YELLOW
    typer.secho(f"Event is now {event.status.value}", fg=color)
    typer.secho(f"  Slug: {event.slug}", fg=typer.colors.CYAN)


@app.command()
def upgrade_tier(
    event_id: str = typer.Argument(
        ...,
        help="Event UUID",
    ),
    tier: Tier = typer.Argument(
        ...,
        help="Paid tier to move the event to",
    ),
    payment_id: str = typer.Option(
        None,
        "--payment-id",
        "-p",
        help="Payment reference to store on the event",
    ),
):
    """Raise an event's response limit to a paid tier, as the payment webhook would."""
    event_uuid = _parse_event_id(event_id)

    try:
        event = asyncio.run(
            SqlEventWriteModel().raise_capacity(
                event_uuid, TIERS[tier], tier=tier, payment_id=payment_id
            )
        )
    except ECardError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Event upgraded!", fg=typer.colors.GREEN)
    typer.secho(f"  Tier: {event.tier.value}", fg=typer.colors.BLUE)
    typer.secho(f"  Response limit: {event.max_responses}", fg=typer.colors.BLUE)


@app.command()
def export_responses(
    event_id: str = typer.Argument(
        ...,
        help="Event UUID",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the CSV to; defaults to responses-<event id>.csv",
    ),
):
    """Write an event's responses to a CSV file."""
    event_uuid = _parse_event_id(event_id)

    export = asyncio.run(SqlResponseReadModel().export_responses(event_uuid))
    path = output or Path(export.filename)
    path.write_text(render_csv(export), encoding="utf-8")

    typer.secho(f"Exported {len(export.responses)} responses", fg=typer.colors.GREEN)
    typer.secho(f"  File: {path}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
