"""
Unit tests for resume section patterns.

Tests heading detection and entry triggers in
atlas.contexts.intake.section_patterns.
"""

import pytest

from atlas.contexts.intake.section_patterns import (
    SectionState,
    find_date_token,
    find_year,
    is_degree,
    is_job_title,
    is_project_headline,
    match_section_heading,
)

pytestmark = pytest.mark.unit


class TestMatchSectionHeading:
    """Tests for match_section_heading function."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("Skills", SectionState.SKILLS),
            ("TECHNICAL SKILLS", SectionState.SKILLS),
            ("Tech Stack", SectionState.SKILLS),
            ("Core Competencies", SectionState.SKILLS),
            ("Work Experience", SectionState.EXPERIENCE),
            ("Employment History", SectionState.EXPERIENCE),
            ("Personal Projects", SectionState.PROJECTS),
            ("Education", SectionState.EDUCATION),
            ("Qualifications", SectionState.EDUCATION),
        ],
    )
    def test_recognized_headings(self, line, expected):
        """Test heading families, case-insensitive."""
        assert match_section_heading(line) is expected

    def test_heading_prefix_is_enough(self):
        """Test that only the line start is anchored."""
        assert match_section_heading("Skills: Python, Go") is SectionState.SKILLS
        assert match_section_heading("Experienced engineer") is SectionState.EXPERIENCE

    def test_heading_word_mid_line_is_not_heading(self):
        """Test that a heading word after the line start does not count."""
        assert match_section_heading("My skills include Python") is None
        assert match_section_heading("Relevant Experience") is None

    def test_skills_checked_before_experience(self):
        """Test first-match-wins order."""
        assert match_section_heading("Technologies and experience") is SectionState.SKILLS


class TestEntryTriggers:
    """Tests for date, title, degree and headline helpers."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("Jan 2020 - Present", "Jan 2020"),
            ("September2019", "September2019"),
            ("2019 - Present", "2019 - Present"),
            ("2018–2021", "2018–2021"),
            ("Acme, 2020-2022", "2020-2022"),
            ("No dates here", ""),
            ("Jan \u0662\u0660\u0662\u0660", ""),
        ],
    )
    def test_find_date_token(self, line, expected):
        assert find_date_token(line) == expected

    def test_find_year(self):
        assert find_year("Graduated 2015 with honours") == "2015"
        assert find_year("Graduated recently") == ""
        assert find_year("Graduated \u0662\u0660\u0661\u0668") == ""

    def test_job_title_whole_words(self):
        """Test that title keywords match whole words only."""
        assert is_job_title("Senior Software Engineer")
        assert is_job_title("Team Lead, Payments")
        assert is_job_title("Data Analysts Guild")
        assert not is_job_title("Built internal tools")
        assert not is_job_title("Leading the migration")

    def test_degree(self):
        assert is_degree("Bachelor of Science")
        assert is_degree("B.Tech in Computer Science")
        assert is_degree("PhD, Physics")
        assert not is_degree("State University")

    def test_project_headline(self):
        """Test the short-and-labelled-or-capitalised rule."""
        assert is_project_headline("Chat App")
        assert is_project_headline("chat app: realtime messaging")
        assert not is_project_headline("uses websockets for realtime updates")
        assert not is_project_headline("A" * 80)
