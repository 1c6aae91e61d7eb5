#!/usr/bin/env python3
"""
View recent analysis events from analysis_events.log.

Provides filtered access to the event log with options to filter by
document name and event type.
"""

import json
import sys
from typing import Optional

import typer
from dotenv import load_dotenv

from atlas.utils.event_logging import get_recent_events
from atlas.utils.timestamp import format_timestamp

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="View recent analysis events",
)


@app.command()
def main(
    n: int = typer.Option(10, "--num", "-n", help="Number of recent events to show"),
    document: Optional[str] = typer.Option(
        None, "--document", "-d", help="Filter to events for this document"
    ),
    event_type: Optional[str] = typer.Option(
        None, "--event-type", "-e", help="Filter to events of this type"
    ),
    compact: bool = typer.Option(
        False, "--compact", "-c", help="Print one event per line (no pretty formatting)"
    ),
):
    """
    Show the last n events from the analysis log.

    Examples:\n

        $ python scripts/tail_events.py                        # Last 10 events

        $ python scripts/tail_events.py -e analysis_completed  # Last 10 analyses

        $ python scripts/tail_events.py -n 5 -d jane_resume    # Last 5 events for one resume
    """
    events = get_recent_events(n=n, document_name=document, event_type=event_type)

    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    if not compact:
        filters = []
        if document:
            filters.append(f"document={document}")
        if event_type:
            filters.append(f"type={event_type}")

        suffix = f" [{', '.join(filters)}]" if filters else ""
        typer.secho(f"\nShowing last {len(events)} event(s){suffix}:", fg=typer.colors.BLUE)
        typer.echo("")

    for event in events:
        if compact:
            typer.echo(json.dumps(event))
        else:
            typer.echo(json.dumps(event, indent=2))
            typer.echo("")


@app.command()
def history(
    document: str = typer.Argument(..., help="Resume name (file stem) to track"),
    n: Optional[int] = typer.Option(None, "--num", "-n", help="Maximum number of analyses to show"),
):
    """
    Show the score history of one resume, oldest first.

    Examples:\n

        $ python scripts/tail_events.py history jane_resume
    """
    events = get_recent_events(
        n=n if n else 9999,
        document_name=document,
        event_type="analysis_completed",
    )

    if not events:
        typer.secho(f"No analyses found for {document}", fg=typer.colors.YELLOW)
        return

    typer.secho(f"\nScore history for {document}", bold=True)
    typer.echo("")

    for event in events:
        job = event.get("job_name") or "(no job)"
        typer.echo(
            f"  {format_timestamp(event['timestamp'])}  "
            f"overall {event.get('overall_score', '?'):>3}  "
            f"keywords {event.get('keyword_match', '?'):>3}%  {job}"
        )

    typer.echo("")


if __name__ == "__main__":
    # Default to 'main' so "tail_events.py -n 20" works without the subcommand
    if len(sys.argv) == 1 or (len(sys.argv) > 1 and sys.argv[1].startswith("-")):
        sys.argv.insert(1, "main")
    app()
