"""
Job description extraction for the Intake context.

Pulls required skills, seniority, employment type, technical keywords and
responsibilities out of raw job posting text with fixed regexes and
substring checks. Deterministic and total: any string, including empty,
produces a JobRequirements.
"""

from typing import List

from atlas.contexts.intake.extraction_patterns import (
    MAX_RESPONSIBILITIES,
    REQUIRED_SKILL_PATTERNS,
    RequirementPatterns,
    detect_experience_level,
    detect_role_type,
)
from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.logger import log_job_extraction_result
from atlas.utils.taxonomies import TAXONOMIES
from atlas.utils.text_processing import find_substrings, split_nonempty_lines, unique_in_order


def extract_required_skills(text: str) -> List[str]:
    """
    Collect comma/semicolon separated skills after requirement labels.

    Each of the "required skills", "qualifications" and "requirements"
    patterns contributes its first match in the text. Results are
    accumulated across patterns, then de-duplicated.

    Example:
        >>> extract_required_skills("Required Skills: Python, SQL; Docker")
        ['Python', 'SQL', 'Docker']
    """
    skills = []

    for pattern in REQUIRED_SKILL_PATTERNS:
        match = pattern.search(text)
        if match:
            parts = RequirementPatterns.LIST_SEPARATORS.split(match.group(1))
            skills.extend(part.strip() for part in parts if part.strip())

    return unique_in_order(skills)


def extract_responsibilities(text: str) -> List[str]:
    """
    Return up to five responsibility lines.

    Takes the block following the first "responsibilities" label, up to the
    next blank line.
    """
    match = RequirementPatterns.RESPONSIBILITIES.search(text)
    if not match:
        return []
    return split_nonempty_lines(match.group(1))[:MAX_RESPONSIBILITIES]


def extract_job_keywords(text: str) -> List[str]:
    """Job keyword vocabulary terms found in the text, vocabulary order."""
    return find_substrings(text, TAXONOMIES.job_keywords)


def extract_job_requirements(text: str) -> JobRequirements:
    """
    Extract structured requirements from a job posting.

    Args:
        text: Raw job posting text (None is treated as empty)

    Returns:
        JobRequirements; preferred_skills is always empty
    """
    text = text or ""

    job = JobRequirements(
        required_skills=extract_required_skills(text),
        preferred_skills=[],
        experience_level=detect_experience_level(text),
        role_type=detect_role_type(text),
        keywords=extract_job_keywords(text),
        responsibilities=extract_responsibilities(text),
    )

    log_job_extraction_result(job)

    return job
