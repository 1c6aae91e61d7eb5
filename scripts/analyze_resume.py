#!/usr/bin/env python3
"""
Score a plain-text resume, optionally against a job posting.

Usage:
    python scripts/analyze_resume.py resume.txt
    python scripts/analyze_resume.py resume.txt --job posting.txt
    python scripts/analyze_resume.py resume.txt --job posting.txt --json
"""

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.contexts.targeting.analysis import score_resume
from atlas.contexts.targeting.logger import _log_info, _log_success, setup_targeting_logger
from atlas.exceptions import UnreadableDocumentError
from atlas.utils.event_logging import log_analysis_event
from atlas.utils.report_formatter import format_analysis_report

load_dotenv()

app = typer.Typer(help="Score a resume for ATS compatibility.")


@app.command()
def main(
    resume_file: Path = typer.Argument(..., help="Plain-text resume file"),
    job_file: Optional[Path] = typer.Option(None, "--job", "-j", help="Plain-text job posting"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw analysis as JSON"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Session log directory"),
):
    """Segment the resume, extract the job, and print the ATS analysis."""
    setup_targeting_logger(
        log_dir,
        phase="compare" if job_file else "analyze",
        console_level="WARNING" if as_json else "INFO",
        extra_provenance={"Resume": resume_file, "Job": job_file or "(none)"},
    )

    try:
        sections = ResumeSections.from_file(resume_file)
        job = JobRequirements.from_file(job_file) if job_file else None
    except UnreadableDocumentError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    _log_info(f"Scoring {resume_file.name}" + (f" against {job_file.name}" if job_file else ""))
    result = score_resume(sections, job)
    _log_success(f"{resume_file.stem}: overall score {result.overall_score}")

    log_analysis_event(
        event_type="analysis_completed",
        document_name=resume_file.stem,
        source="cli",
        job_name=job_file.stem if job_file else None,
        overall_score=result.overall_score,
        keyword_match=result.keyword_match.percentage,
    )

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(format_analysis_report(result, title=resume_file.stem))


if __name__ == "__main__":
    app()
