#!/usr/bin/env python3
"""
Show how a plain-text resume is segmented.

Usage:
    python scripts/segment_resume.py resume.txt
    python scripts/segment_resume.py resume.txt --json
"""

import json
from pathlib import Path

import typer
from dotenv import load_dotenv

from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.exceptions import UnreadableDocumentError
from atlas.utils.text_processing import truncate_display

load_dotenv()

app = typer.Typer(help="Show resume segmentation.")


@app.command()
def main(
    resume_file: Path = typer.Argument(..., help="Plain-text resume file"),
    as_json: bool = typer.Option(False, "--json", help="Print the sections as JSON"),
):
    """Segment a resume and display each section."""
    try:
        sections = ResumeSections.from_file(resume_file)
    except UnreadableDocumentError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(sections.to_dict(), indent=2))
        return

    typer.echo(f"=== Skills ({len(sections.skills)}) ===")
    typer.echo(f"  {', '.join(sections.skills)}" if sections.skills else "  None")

    typer.echo(f"\n=== Experience ({len(sections.experience)}) ===")
    for entry in sections.experience:
        typer.echo(f"  {entry.title or '(no title)'} | {entry.company} | {entry.duration}")
        if entry.description:
            typer.echo(f"    {truncate_display(entry.description, 70)}")

    typer.echo(f"\n=== Projects ({len(sections.projects)}) ===")
    for project in sections.projects:
        tech = f" [{', '.join(project.technologies)}]" if project.technologies else ""
        typer.echo(f"  {project.name}{tech}")

    typer.echo(f"\n=== Education ({len(sections.education)}) ===")
    for entry in sections.education:
        typer.echo(f"  {entry.degree} | {entry.institution} | {entry.year}")

    if sections.is_empty():
        typer.secho("\n! No sections detected", fg=typer.colors.YELLOW)


if __name__ == "__main__":
    app()
