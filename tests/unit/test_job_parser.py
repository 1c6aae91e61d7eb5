"""
Unit tests for job description extraction.

Tests atlas.contexts.intake.job_parser and the priority tables in
atlas.contexts.intake.extraction_patterns.
"""

import pytest

from atlas.contexts.intake.extraction_patterns import (
    EXPERIENCE_LEVEL_RULES,
    ExperienceLevel,
    RoleType,
    detect_experience_level,
    detect_role_type,
    resolve_priority,
)
from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.job_parser import (
    extract_job_keywords,
    extract_job_requirements,
    extract_required_skills,
    extract_responsibilities,
)

pytestmark = pytest.mark.unit


class TestExtractRequiredSkills:
    """Tests for extract_required_skills function."""

    def test_required_skills_line(self):
        assert extract_required_skills("Required Skills: Python, SQL; Docker") == [
            "Python",
            "SQL",
            "Docker",
        ]

    def test_patterns_accumulate_and_dedupe(self):
        text = (
            "Required Skills: Python, SQL\n"
            "Qualifications: BS in CS; 3+ years\n"
            "Requirements: Python, Git"
        )

        assert extract_required_skills(text) == ["Python", "SQL", "BS in CS", "3+ years", "Git"]

    def test_label_on_its_own_line(self):
        """Test that the list may start on the line after the label."""
        assert extract_required_skills("Requirements:\nPython, Go") == ["Python", "Go"]

    def test_no_labels(self):
        assert extract_required_skills("We are hiring a Python developer") == []


class TestExtractResponsibilities:
    """Tests for extract_responsibilities function."""

    def test_block_until_blank_line_capped_at_five(self):
        text = "Responsibilities:\n- a\n- b\n- c\n- d\n- e\n- f\n\nBenefits: lunch"

        assert extract_responsibilities(text) == ["- a", "- b", "- c", "- d", "- e"]

    def test_single_line(self):
        assert extract_responsibilities("Responsibilities: own the roadmap") == ["own the roadmap"]

    def test_missing(self):
        assert extract_responsibilities("Nothing to see") == []


class TestDetection:
    """Tests for experience level and role type detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Senior engineer, mentoring junior staff", ExperienceLevel.SENIOR),
            ("5+ years of experience", ExperienceLevel.SENIOR),
            ("Mid-level developer", ExperienceLevel.MID),
            ("3+ years with Go", ExperienceLevel.MID),
            ("Junior developer", ExperienceLevel.ENTRY),
            ("Entry level role", ExperienceLevel.ENTRY),
            ("Freshers welcome", ExperienceLevel.ENTRY),
            ("Great team", ExperienceLevel.ANY),
        ],
    )
    def test_experience_level(self, text, expected):
        assert detect_experience_level(text) is expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Full time or contract", RoleType.FULL_TIME),
            ("Part-time contract", RoleType.PART_TIME),
            ("Contract role", RoleType.CONTRACT),
            ("Summer internship", RoleType.INTERNSHIP),
            ("Intern wanted", RoleType.INTERNSHIP),
            ("Permanent position", RoleType.ANY),
        ],
    )
    def test_role_type(self, text, expected):
        assert detect_role_type(text) is expected

    def test_resolve_priority_default(self):
        assert resolve_priority("", EXPERIENCE_LEVEL_RULES, ExperienceLevel.ANY) is ExperienceLevel.ANY


class TestExtractJobRequirements:
    """Tests for extract_job_requirements function."""

    def test_keywords_in_vocabulary_order(self):
        assert extract_job_keywords("Docker on AWS, mostly Python") == ["python", "aws", "docker"]

    def test_full_posting(self):
        text = (
            "Junior Frontend Developer (Internship)\n"
            "Requirements: React, TypeScript\n"
            "Responsibilities:\n"
            "Build UI components\n"
            "Write tests\n"
        )

        job = extract_job_requirements(text)

        assert job.required_skills == ["React", "TypeScript"]
        assert job.preferred_skills == []
        assert job.experience_level is ExperienceLevel.ENTRY
        assert job.role_type is RoleType.INTERNSHIP
        assert job.keywords == ["typescript", "react"]
        assert job.responsibilities == ["Build UI components", "Write tests"]

    def test_empty_text(self):
        assert extract_job_requirements("") == JobRequirements()
        assert extract_job_requirements(None) == JobRequirements()

    def test_from_text_factory(self):
        text = "Senior Python role"
        assert JobRequirements.from_text(text) == extract_job_requirements(text)
