"""
Resume data structure for the Intake context.

Provides ResumeSections, the structured form of a plain-text resume that the
Targeting context scores. Entries keep the original casing of the source
text; matching elsewhere is case-insensitive.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from atlas.contexts.intake.documents import DocumentKind, read_document
from atlas.exceptions import InvalidStructureError

SECTION_NAMES = ("skills", "experience", "projects", "education")


@dataclass
class ExperienceEntry:
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.title,
            "company": self.company,
            "duration": self.duration,
            "description": self.description,
        }


@dataclass
class ProjectEntry:
    name: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
        }


@dataclass
class EducationEntry:
    degree: str = ""
    institution: str = ""
    year: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"degree": self.degree, "institution": self.institution, "year": self.year}


@dataclass
class ResumeSections:
    """
    Segmented resume.

    All four sections are always present, possibly empty.

    Factory methods:
        from_text(text) - Segment raw resume text
        from_file(path) - Read a UTF-8 text file and segment it
        from_dict(data) - Rebuild from a previously stored to_dict() mapping
    """

    skills: list[str] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    projects: list[ProjectEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: str) -> "ResumeSections":
        """Segment raw resume text into sections."""
        from atlas.contexts.intake.resume_parser import segment_resume

        return segment_resume(text)

    @classmethod
    def from_file(cls, file_path: Path) -> "ResumeSections":
        """
        Read a plain-text resume and segment it.

        Raises:
            UnreadableDocumentError: If the file cannot be read as UTF-8 text
        """
        document = read_document(file_path, DocumentKind.RESUME)
        return cls.from_text(document.text)

    @classmethod
    def from_dict(cls, data: dict) -> "ResumeSections":
        """
        Rebuild sections from a stored mapping.

        Missing sections default to empty. Unknown keys inside entries are
        ignored so older stored shapes still load.

        Raises:
            InvalidStructureError: If a section has the wrong container type
        """
        if not isinstance(data, dict):
            raise InvalidStructureError("Resume sections must be a mapping")

        for name in SECTION_NAMES:
            if not isinstance(data.get(name, []), list):
                raise InvalidStructureError(f"Resume section '{name}' must be a list")

        try:
            return cls(
                skills=[str(skill) for skill in data.get("skills", [])],
                experience=[
                    ExperienceEntry(
                        title=entry.get("title") or "",
                        company=entry.get("company") or "",
                        duration=entry.get("duration") or "",
                        description=entry.get("description") or "",
                    )
                    for entry in data.get("experience", [])
                ],
                projects=[
                    ProjectEntry(
                        name=entry.get("name") or "",
                        description=entry.get("description") or "",
                        technologies=list(entry.get("technologies") or []),
                    )
                    for entry in data.get("projects", [])
                ],
                education=[
                    EducationEntry(
                        degree=entry.get("degree") or "",
                        institution=entry.get("institution") or "",
                        year=entry.get("year") or "",
                    )
                    for entry in data.get("education", [])
                ],
            )
        except AttributeError as e:
            raise InvalidStructureError(f"Resume entries must be mappings: {e}") from e

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def to_dict(self) -> dict[str, list]:
        """Plain JSON-compatible form, in fixed section order."""
        return {
            "skills": list(self.skills),
            "experience": [entry.to_dict() for entry in self.experience],
            "projects": [entry.to_dict() for entry in self.projects],
            "education": [entry.to_dict() for entry in self.education],
        }

    def is_empty(self) -> bool:
        return not (self.skills or self.experience or self.projects or self.education)
