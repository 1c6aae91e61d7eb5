#!/usr/bin/env python3
"""
Validate job posting extraction before scoring against it.

Usage:
    python scripts/extract_job.py posting.txt
    python scripts/extract_job.py posting.txt --json
"""

import json
from pathlib import Path

import typer
from dotenv import load_dotenv

from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.exceptions import UnreadableDocumentError

load_dotenv()

app = typer.Typer(help="Validate job posting extraction.")


@app.command()
def main(
    job_file: Path = typer.Argument(..., help="Plain-text job posting"),
    as_json: bool = typer.Option(False, "--json", help="Print the extracted data as JSON"),
):
    """Extract job requirements and display what was found."""
    try:
        job = JobRequirements.from_file(job_file)
    except UnreadableDocumentError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(job.to_dict(), indent=2))
        return

    typer.echo(f"Loading {job_file.name}")

    typer.echo("\n=== Classification ===")
    typer.echo(f"  experience level: {job.experience_level.value}")
    typer.echo(f"  role type: {job.role_type.value}")

    typer.echo(f"\n=== Required Skills ({len(job.required_skills)}) ===")
    typer.echo(f"  {', '.join(job.required_skills)}" if job.required_skills else "  None")

    typer.echo(f"\n=== Keywords ({len(job.keywords)}) ===")
    typer.echo(f"  {', '.join(job.keywords)}" if job.keywords else "  None")

    typer.echo(f"\n=== Responsibilities ({len(job.responsibilities)}) ===")
    for line in job.responsibilities:
        typer.echo(f"  - {line}")

    warnings = []
    if not job.required_skills:
        warnings.append("No required skills detected (skills score will use the resume alone)")
    if not job.keywords:
        warnings.append("No technical keywords detected (keyword match will be 0%)")

    if warnings:
        typer.echo("\n=== Warnings ===")
        for w in warnings:
            typer.echo(f"  ! {w}")

    typer.secho("\nExtraction successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
