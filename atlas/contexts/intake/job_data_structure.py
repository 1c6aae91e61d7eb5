"""
Job requirements data structure for the Intake context.

Provides JobRequirements, the structured signals pulled from a job posting
that the Targeting context compares a resume against.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from atlas.contexts.intake.documents import DocumentKind, read_document
from atlas.contexts.intake.extraction_patterns import ExperienceLevel, RoleType
from atlas.exceptions import InvalidStructureError


@dataclass
class JobRequirements:
    """
    Structured job requirements.

    A default instance is the "no job description" case: no skills, no
    keywords, level and role "any".

    Factory methods:
        from_text(text) - Extract from raw job posting text
        from_file(path) - Read a UTF-8 text file and extract from it
        from_dict(data) - Rebuild from a previously stored to_dict() mapping
    """

    required_skills: list[str] = field(default_factory=list)
    # Reserved; never populated by the extractor
    preferred_skills: list[str] = field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.ANY
    role_type: RoleType = RoleType.ANY
    keywords: list[str] = field(default_factory=list)
    responsibilities: list[str] = field(default_factory=list)

    def __post_init__(self):
        # Accept plain strings ("senior") as well as enum members
        try:
            self.experience_level = ExperienceLevel(self.experience_level)
            self.role_type = RoleType(self.role_type)
        except ValueError as e:
            raise InvalidStructureError(f"Invalid job requirements: {e}") from e

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: str) -> "JobRequirements":
        """Extract requirements from raw job posting text."""
        from atlas.contexts.intake.job_parser import extract_job_requirements

        return extract_job_requirements(text)

    @classmethod
    def from_file(cls, file_path: Path) -> "JobRequirements":
        """
        Read a plain-text job posting and extract requirements.

        Raises:
            UnreadableDocumentError: If the file cannot be read as UTF-8 text
        """
        document = read_document(file_path, DocumentKind.JOB_POSTING)
        return cls.from_text(document.text)

    @classmethod
    def from_dict(cls, data: dict) -> "JobRequirements":
        """
        Rebuild requirements from a stored camelCase mapping.

        Missing fields take their defaults, so an empty mapping is the
        "no job description" case.

        Raises:
            InvalidStructureError: If the level or role value is unknown
        """
        if not isinstance(data, dict):
            raise InvalidStructureError("Job requirements must be a mapping")

        return cls(
            required_skills=list(data.get("requiredSkills") or []),
            preferred_skills=list(data.get("preferredSkills") or []),
            experience_level=data.get("experienceLevel") or "any",
            role_type=data.get("roleType") or "any",
            keywords=list(data.get("keywords") or []),
            responsibilities=list(data.get("responsibilities") or []),
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible form with camelCase keys."""
        return {
            "requiredSkills": list(self.required_skills),
            "preferredSkills": list(self.preferred_skills),
            "experienceLevel": self.experience_level.value,
            "roleType": self.role_type.value,
            "keywords": list(self.keywords),
            "responsibilities": list(self.responsibilities),
        }
