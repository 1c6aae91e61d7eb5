"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.

Intake only logs at DEBUG; sessions are configured by the scripts through
atlas.utils.logger.setup_logger().
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_segmentation_result(sections) -> None:
    """Log how many entries the segmenter found per section."""
    _log_debug(
        f"Segmented resume: {len(sections.skills)} skills, "
        f"{len(sections.experience)} experience, "
        f"{len(sections.projects)} projects, "
        f"{len(sections.education)} education"
    )


def log_job_extraction_result(job) -> None:
    """Log a one-line summary of extracted job requirements."""
    _log_debug(
        f"Extracted job: {len(job.required_skills)} required skills, "
        f"{len(job.keywords)} keywords, level={job.experience_level.value}, "
        f"role={job.role_type.value}"
    )
