"""
Targeting context logger.

Provides logging interface for the targeting (scoring) context with automatic
[target] prefix.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from atlas.utils.logger import session_log_dir
from atlas.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(
    log_dir: Optional[Path] = None,
    phase: str = "analyze",
    console_level: str = "INFO",
    extra_provenance: Optional[dict] = None,
) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this scoring session (defaults to a new
            timestamped directory per phase)
        phase: Phase name for provenance ("analyze" or "compare")
        console_level: Minimum level echoed to stdout
        extra_provenance: Inputs to record, e.g. {"Resume": "resume.txt"}

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir or session_log_dir(phase),
        extra_provenance={"Phase": phase, **(extra_provenance or {})},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_section_scores(scores) -> None:
    """Log per-section scores."""
    _log_debug(
        f"Section scores: skills={scores.skills}, experience={scores.experience}, "
        f"projects={scores.projects}, education={scores.education}"
    )


def log_analysis_result(result) -> None:
    """Log the headline numbers of a finished analysis."""
    _log_debug(
        f"Overall score {result.overall_score} "
        f"(keyword match {result.keyword_match.percentage}%, "
        f"{len(result.feedback.suggestions)} suggestions)"
    )
