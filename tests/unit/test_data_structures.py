"""
Unit tests for the resume, job and analysis data structures.

Tests to_dict()/from_dict() shapes and immutability of analysis results.
"""

from dataclasses import FrozenInstanceError

import pytest

from atlas.contexts.intake.extraction_patterns import ExperienceLevel, RoleType
from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.resume_data_structure import (
    ExperienceEntry,
    ProjectEntry,
    ResumeSections,
)
from atlas.contexts.targeting.analysis import score_resume
from atlas.exceptions import InvalidStructureError

pytestmark = pytest.mark.unit


class TestResumeSections:
    """Tests for ResumeSections conversion."""

    def test_to_dict_section_order(self):
        assert list(ResumeSections().to_dict()) == ["skills", "experience", "projects", "education"]

    def test_from_dict_restores_entries(self):
        sections = ResumeSections(
            skills=["Python"],
            experience=[ExperienceEntry(title="Engineer", company="Acme")],
            projects=[ProjectEntry(name="Tool", technologies=["python"])],
        )

        assert ResumeSections.from_dict(sections.to_dict()) == sections

    def test_from_dict_defaults_missing_sections(self):
        sections = ResumeSections.from_dict({"skills": ["Go"]})

        assert sections.skills == ["Go"]
        assert sections.experience == []
        assert not sections.is_empty()
        assert ResumeSections.from_dict({}).is_empty()

    @pytest.mark.parametrize(
        "data",
        [
            ["skills"],
            {"skills": "Python"},
            {"experience": ["not a mapping"]},
        ],
    )
    def test_from_dict_rejects_bad_shapes(self, data):
        with pytest.raises(InvalidStructureError):
            ResumeSections.from_dict(data)


class TestJobRequirements:
    """Tests for JobRequirements conversion."""

    def test_to_dict_camel_case(self):
        job = JobRequirements(
            required_skills=["Python"],
            experience_level=ExperienceLevel.MID,
            role_type=RoleType.FULL_TIME,
        )

        assert job.to_dict() == {
            "requiredSkills": ["Python"],
            "preferredSkills": [],
            "experienceLevel": "mid",
            "roleType": "full-time",
            "keywords": [],
            "responsibilities": [],
        }
        assert JobRequirements.from_dict(job.to_dict()) == job

    def test_from_empty_dict_is_no_job(self):
        assert JobRequirements.from_dict({}) == JobRequirements()

    def test_from_dict_rejects_unknown_level(self):
        with pytest.raises(InvalidStructureError):
            JobRequirements.from_dict({"experienceLevel": "principal"})

    def test_plain_strings_become_enums(self):
        job = JobRequirements(experience_level="senior", role_type="contract")

        assert job.experience_level is ExperienceLevel.SENIOR
        assert job.role_type is RoleType.CONTRACT
        assert job.to_dict()["experienceLevel"] == "senior"

    @pytest.mark.parametrize(
        "kwargs", [{"experience_level": "principal"}, {"role_type": "freelance"}]
    )
    def test_unknown_strings_rejected(self, kwargs):
        with pytest.raises(InvalidStructureError):
            JobRequirements(**kwargs)

    def test_scoring_with_plain_string_level(self):
        resume = ResumeSections(experience=[ExperienceEntry(title="Senior dev")])
        job = JobRequirements(experience_level="senior", role_type="any")

        result = score_resume(resume, job)

        assert result.section_scores.experience == 65


class TestAnalysisResult:
    """Tests for AnalysisResult immutability."""

    def test_result_is_frozen(self):
        result = score_resume(ResumeSections())

        with pytest.raises(FrozenInstanceError):
            result.overall_score = 100
        with pytest.raises(FrozenInstanceError):
            result.section_scores.skills = 100

        assert isinstance(result.feedback.suggestions, tuple)

    def test_none_sections_scored_as_empty(self):
        assert score_resume(None) == score_resume(ResumeSections())
