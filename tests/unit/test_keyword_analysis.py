"""
Unit tests for keyword analysis.

Tests keyword extraction, keyword matching and metric detection in
atlas.contexts.targeting.keyword_analysis.
"""

import pytest

from atlas.contexts.targeting.analysis_data_structure import KeywordMatch
from atlas.contexts.targeting.keyword_analysis import (
    calculate_keyword_match,
    extract_keywords,
    find_buzzwords,
    find_repeated_words,
    has_metrics,
)

pytestmark = pytest.mark.unit


class TestExtractKeywords:
    """Tests for extract_keywords function."""

    def test_vocabulary_hits(self):
        keywords = extract_keywords("Developed REST APIs in Python; passionate team player")

        assert keywords.skills == ("python", "rest", "api")
        assert keywords.buzzwords == ("team player", "passionate")
        assert keywords.action_verbs == ("developed",)
        assert keywords.all_words == (
            "developed",
            "rest",
            "apis",
            "in",
            "python",
            "passionate",
            "team",
            "player",
        )

    def test_substring_containment(self):
        """Test that "java" is found inside "javascript"."""
        assert extract_keywords("JavaScript").skills == ("javascript", "java")

    def test_empty_text(self):
        keywords = extract_keywords("")

        assert keywords.skills == ()
        assert keywords.all_words == ()


class TestCalculateKeywordMatch:
    """Tests for calculate_keyword_match function."""

    def test_partial_match(self):
        match = calculate_keyword_match(["python", "java"], ["python", "go"])

        assert match.matched == ("python",)
        assert match.missing == ("go",)
        assert match.percentage == 50

    def test_rounds_half_up(self):
        assert calculate_keyword_match(["a", "b"], ["a", "b", "c"]).percentage == 67
        assert calculate_keyword_match(["a"], ["a", "b", "c"]).percentage == 33

    def test_exact_word_membership(self):
        """Test that keywords must be whole resume words."""
        match = calculate_keyword_match(["javascript"], ["java", "c++"])

        assert match.matched == ()
        assert match.percentage == 0

    def test_no_job_keywords(self):
        assert calculate_keyword_match(["python"], []) == KeywordMatch()


class TestMetricsAndWordChecks:
    """Tests for has_metrics, find_buzzwords and find_repeated_words."""

    @pytest.mark.parametrize(
        "text",
        [
            "Cut costs by 30%",
            "Saved $500 a month",
            "Handled 5k requests per second",
            "Served 300 Customers",
            "Led a team of 6 engineers",
            "Improved onboarding",
        ],
    )
    def test_metrics_found(self, text):
        assert has_metrics(text)

    @pytest.mark.parametrize(
        "text", ["", "Wrote documentation", "Maintained the wiki", "Cut costs by \u0663\u0660%"]
    )
    def test_metrics_absent(self, text):
        assert not has_metrics(text)

    def test_find_buzzwords_case_insensitive(self):
        assert find_buzzwords("Highly MOTIVATED self-starter") == ["self-starter", "motivated"]
        assert find_buzzwords("Shipped three services") == []

    def test_find_repeated_words(self):
        text = "alpha " * 6 + "beta " * 6 + "abc " * 9 + "gamma " * 5

        assert find_repeated_words(text) == ["alpha", "beta"]
