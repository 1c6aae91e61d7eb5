"""
Reusable patterns and priority tables for job description extraction.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

Level and role detection are ordered tables of (indicator tokens, result).
The first row with any token present in the text wins, so row order is the
priority order and must not be shuffled.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, TypeVar


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    ANY = "any"


class RoleType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    ANY = "any"


# =============================================================================
# REQUIREMENT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class RequirementPatterns:
    """
    Regex patterns for pulling requirement lists out of job postings.

    Each captures the remainder of the labelled line. The \\s* after the
    label may cross a line break, so "Requirements:\\nPython, SQL" captures
    the next line.
    """

    REQUIRED_SKILLS: re.Pattern = re.compile(r"required skills?:?\s*([^\n]+)", re.IGNORECASE)
    QUALIFICATIONS: re.Pattern = re.compile(r"qualifications?:?\s*([^\n]+)", re.IGNORECASE)
    REQUIREMENTS: re.Pattern = re.compile(r"requirements?:?\s*([^\n]+)", re.IGNORECASE)

    # Captures everything up to the next blank line
    RESPONSIBILITIES: re.Pattern = re.compile(
        r"responsibilities?:?\s*([^\n]+(?:\n[^\n]+)*)", re.IGNORECASE
    )

    LIST_SEPARATORS: re.Pattern = re.compile(r"[,;]")


# Applied in order; results accumulate
REQUIRED_SKILL_PATTERNS = [
    RequirementPatterns.REQUIRED_SKILLS,
    RequirementPatterns.QUALIFICATIONS,
    RequirementPatterns.REQUIREMENTS,
]

MAX_RESPONSIBILITIES = 5


# =============================================================================
# PRIORITY TABLES
# =============================================================================

EXPERIENCE_LEVEL_RULES: Tuple[Tuple[Tuple[str, ...], ExperienceLevel], ...] = (
    (("senior", "5+", "5-8"), ExperienceLevel.SENIOR),
    (("mid", "2-5", "3+"), ExperienceLevel.MID),
    (("junior", "entry", "0-2", "fresher"), ExperienceLevel.ENTRY),
)

ROLE_TYPE_RULES: Tuple[Tuple[Tuple[str, ...], RoleType], ...] = (
    (("full-time", "full time"), RoleType.FULL_TIME),
    (("part-time", "part time"), RoleType.PART_TIME),
    (("contract",), RoleType.CONTRACT),
    (("internship", "intern"), RoleType.INTERNSHIP),
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

T = TypeVar("T")


def resolve_priority(text: str, rules: Sequence[Tuple[Tuple[str, ...], T]], default: T) -> T:
    """
    Return the result of the first rule with a token present in text.

    Args:
        text: Text to scan (compared lower-case)
        rules: Ordered (tokens, result) rows
        default: Result when no row matches

    Example:
        >>> resolve_priority("Senior or junior", EXPERIENCE_LEVEL_RULES, ExperienceLevel.ANY)
        <ExperienceLevel.SENIOR: 'senior'>
    """
    lowered = text.lower()
    for tokens, result in rules:
        if any(token in lowered for token in tokens):
            return result
    return default


def detect_experience_level(text: str) -> ExperienceLevel:
    """Detect seniority from free text (senior beats mid beats entry)."""
    return resolve_priority(text, EXPERIENCE_LEVEL_RULES, ExperienceLevel.ANY)


def detect_role_type(text: str) -> RoleType:
    """Detect employment type (full-time beats part-time beats contract beats internship)."""
    return resolve_priority(text, ROLE_TYPE_RULES, RoleType.ANY)
