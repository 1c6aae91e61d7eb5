"""
Text processing utilities shared by the intake and targeting contexts.
"""

import json
import math
import re
from typing import Any, Iterable, List

WORD_PATTERN = re.compile(r"\b\w+\b", re.ASCII)


def split_nonempty_lines(text: str) -> List[str]:
    """
    Split text into trimmed lines, dropping blank ones.

    Example:
        >>> split_nonempty_lines("  Skills \\n\\n Python, Go ")
        ['Skills', 'Python, Go']
    """
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def unique_in_order(items: Iterable[str]) -> List[str]:
    """De-duplicate while keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def find_substrings(text: str, vocabulary: Iterable[str]) -> List[str]:
    """
    Return vocabulary entries contained in text, in vocabulary order.

    Matching is case-insensitive substring containment, so "java" is found
    inside "javascript". Vocabulary entries are expected to be lower-case.
    """
    lowered = text.lower()
    return unique_in_order(term for term in vocabulary if term in lowered)


def tokenize_words(text: str) -> List[str]:
    """Lower-cased word-boundary tokens, duplicates kept."""
    return WORD_PATTERN.findall(text.lower())


def serialize_for_matching(data: Any) -> str:
    """
    Serialize a to_dict() mapping into the compact JSON text that keyword,
    buzzword and metric scans run against.

    Compact separators and unescaped non-ASCII keep the text stable and
    close to what was typed.
    """
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def round_half_up(value: float) -> int:
    """
    Round to nearest integer with .5 going up.

    Example:
        >>> round_half_up(31.5)
        32
        >>> round_half_up(32.5)
        33
    """
    return int(math.floor(value + 0.5))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
