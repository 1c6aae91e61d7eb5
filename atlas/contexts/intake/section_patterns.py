"""
Pattern matching for resume section identification.

This module provides regex patterns and helper functions to find section
headings in plain-text resumes and to spot the lines that open a new entry
inside a section.

Pattern classes follow one convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SectionState(str, Enum):
    """Segmenter states. NO_SECTION means no heading has been seen yet."""

    NO_SECTION = "none"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    EDUCATION = "education"


# =============================================================================
# SECTION HEADING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SectionHeadingPatterns:
    """
    Regex patterns for resume section headings.

    Anchored at line start, so a heading word in the middle of a sentence
    is not a heading. There is no trailing anchor: "Skills: Python" and
    "Experienced engineer" both start a section.
    """

    SKILLS: re.Pattern = re.compile(
        r"^(skills|technical skills|core competencies|technologies|tech stack)", re.IGNORECASE
    )

    EXPERIENCE: re.Pattern = re.compile(
        r"^(experience|work experience|professional experience|employment|work history)",
        re.IGNORECASE,
    )

    PROJECTS: re.Pattern = re.compile(
        r"^(projects|personal projects|academic projects|key projects)", re.IGNORECASE
    )

    EDUCATION: re.Pattern = re.compile(
        r"^(education|academic background|qualifications|degrees)", re.IGNORECASE
    )


# Tested in this order, first match wins
SECTION_HEADINGS = [
    (SectionState.SKILLS, SectionHeadingPatterns.SKILLS),
    (SectionState.EXPERIENCE, SectionHeadingPatterns.EXPERIENCE),
    (SectionState.PROJECTS, SectionHeadingPatterns.PROJECTS),
    (SectionState.EDUCATION, SectionHeadingPatterns.EDUCATION),
]


# =============================================================================
# ENTRY TRIGGER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EntryTriggerPatterns:
    """
    Regex patterns for lines that open a new entry within a section.
    """

    # "Jan 2020", "September2019", "2019 - Present", "2018–2021"
    DATE_RANGE: re.Pattern = re.compile(
        r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s*[0-9]{4}"
        r"|[0-9]{4}\s*[-–]\s*(present|current|now|[0-9]{4})",
        re.IGNORECASE,
    )

    # Whole words only, so "internal" is not "intern"
    JOB_TITLE: re.Pattern = re.compile(
        r"\b(developer|engineer|manager|analyst|designer|intern|consultant|lead|architect|specialist)s?\b",
        re.IGNORECASE,
    )

    DEGREE: re.Pattern = re.compile(
        r"(b\.|m\.|phd|bachelor|master|doctorate|degree|diploma|certification)", re.IGNORECASE
    )

    YEAR: re.Pattern = re.compile(r"\d{4}", re.ASCII)

    # Project headline: short line that is labelled or capitalised
    PROJECT_NAME_START: re.Pattern = re.compile(r"^[A-Z]")

    # Delimiters between skills in a skills list
    SKILL_DELIMITERS: re.Pattern = re.compile(r"[,|•\-·]+")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def match_section_heading(line: str) -> Optional[SectionState]:
    """
    Match a line against the section heading families.

    Args:
        line: Trimmed resume line

    Returns:
        The section the line opens, or None if it is not a heading
    """
    for state, pattern in SECTION_HEADINGS:
        if pattern.match(line):
            return state
    return None


def find_date_token(line: str) -> str:
    """Return the first date or date-range token in a line, or empty string."""
    match = EntryTriggerPatterns.DATE_RANGE.search(line)
    return match.group(0) if match else ""


def find_year(line: str) -> str:
    """Return the first 4-digit token in a line, or empty string."""
    match = EntryTriggerPatterns.YEAR.search(line)
    return match.group(0) if match else ""


def is_job_title(line: str) -> bool:
    """Check if a line names a job title."""
    return EntryTriggerPatterns.JOB_TITLE.search(line) is not None


def is_degree(line: str) -> bool:
    """Check if a line names a degree or certification."""
    return EntryTriggerPatterns.DEGREE.search(line) is not None


def is_project_headline(line: str, max_length: int = 80) -> bool:
    """
    Check if a line looks like a project name.

    A headline is shorter than max_length and either contains a colon
    ("Chat App: realtime messaging") or starts with an uppercase letter.
    """
    if len(line) >= max_length:
        return False
    return ":" in line or EntryTriggerPatterns.PROJECT_NAME_START.match(line) is not None
