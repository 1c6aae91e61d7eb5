"""
Unit tests for shared text utilities.

Tests atlas.utils.text_processing.
"""

import pytest

from atlas.utils.text_processing import (
    find_substrings,
    round_half_up,
    serialize_for_matching,
    split_nonempty_lines,
    tokenize_words,
    truncate_display,
)

pytestmark = pytest.mark.unit


class TestTextProcessing:
    """Tests for line splitting, matching and rounding helpers."""

    def test_split_nonempty_lines(self):
        assert split_nonempty_lines("  Skills \n\n Python, Go \n") == ["Skills", "Python, Go"]
        assert split_nonempty_lines("") == []

    def test_find_substrings_vocabulary_order(self):
        assert find_substrings("Go and JAVASCRIPT", ["java", "go", "rust", "go"]) == ["java", "go"]

    def test_tokenize_words(self):
        assert tokenize_words("C++ and Node.js, 40%") == ["c", "and", "node", "js", "40"]

    def test_tokenize_words_ascii_only(self):
        assert tokenize_words("R\u00e9sum\u00e9 ready") == ["r", "sum", "ready"]

    def test_serialize_compact_unicode(self):
        assert serialize_for_matching({"skills": ["Café", "Go"]}) == '{"skills":["Café","Go"]}'

    @pytest.mark.parametrize("value,expected", [(31.5, 32), (32.5, 33), (66.666, 67), (0.49, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_truncate_display(self):
        assert truncate_display("short", 10) == "short"
        assert truncate_display("this is a very long string", 10) == "this is..."
