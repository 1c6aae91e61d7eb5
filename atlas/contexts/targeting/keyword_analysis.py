"""
Keyword analysis for the Targeting context.

Scans serialized resume or job data for technical skills, buzzwords and
action verbs, measures how many job keywords a resume covers, and detects
quantified impact ("metric patterns").

Vocabulary scans use lower-case substring containment, so multi-word and
partial matches count ("java" is found in "javascript"). The keyword match
is stricter: a job keyword only counts when it is one of the resume's words.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from atlas.contexts.targeting.analysis_data_structure import KeywordMatch
from atlas.utils.taxonomies import TAXONOMIES
from atlas.utils.text_processing import find_substrings, round_half_up, tokenize_words

# =============================================================================
# METRIC PATTERNS
# =============================================================================


@dataclass(frozen=True)
class MetricPatterns:
    """
    Regex patterns for quantified impact. Any one match counts.
    """

    PERCENTAGE: re.Pattern = re.compile(r"[0-9]+%")
    DOLLAR_AMOUNT: re.Pattern = re.compile(r"\$[0-9]+")
    # Case-sensitive: "5k", "3M", "2 million"
    MAGNITUDE: re.Pattern = re.compile(r"[0-9]+\s*(k|K|m|M|million|billion)")
    USER_COUNT: re.Pattern = re.compile(r"[0-9]+\s*(users|customers|clients)", re.IGNORECASE)
    TEAM_SIZE: re.Pattern = re.compile(r"[0-9]+\s*(team|people|engineers)", re.IGNORECASE)
    IMPROVEMENT_VERB: re.Pattern = re.compile(
        r"increased|decreased|improved|reduced|optimized", re.IGNORECASE
    )


METRIC_PATTERNS = [
    MetricPatterns.PERCENTAGE,
    MetricPatterns.DOLLAR_AMOUNT,
    MetricPatterns.MAGNITUDE,
    MetricPatterns.USER_COUNT,
    MetricPatterns.TEAM_SIZE,
    MetricPatterns.IMPROVEMENT_VERB,
]

# Word counts above this flag a keyword as repeated
REPEATED_WORD_THRESHOLD = 5
REPEATED_WORD_MIN_LENGTH = 4


@dataclass(frozen=True)
class ExtractedKeywords:
    """Vocabulary hits in a text. all_words keeps duplicates."""

    skills: Tuple[str, ...]
    buzzwords: Tuple[str, ...]
    action_verbs: Tuple[str, ...]
    all_words: Tuple[str, ...]


def extract_keywords(text: str) -> ExtractedKeywords:
    """
    Extract skills, buzzwords and action verbs from text.

    Args:
        text: Usually the serialized form of a resume or job

    Returns:
        ExtractedKeywords with vocabulary hits in vocabulary order and all
        lower-cased word tokens in text order
    """
    text = text or ""
    return ExtractedKeywords(
        skills=tuple(find_substrings(text, TAXONOMIES.tech_skills)),
        buzzwords=tuple(find_substrings(text, TAXONOMIES.buzzwords)),
        action_verbs=tuple(find_substrings(text, TAXONOMIES.action_verbs)),
        all_words=tuple(tokenize_words(text)),
    )


def calculate_keyword_match(resume_words: Sequence[str], job_keywords: Sequence[str]) -> KeywordMatch:
    """
    Split job keywords into matched and missing against the resume's words.

    A keyword matches only when its lower-case form is exactly one of the
    resume words, so "c++" never matches a word-tokenized resume.

    Args:
        resume_words: Lower-cased word tokens of the resume
        job_keywords: Keywords derived from the job

    Returns:
        KeywordMatch; percentage is 0 when there are no job keywords
    """
    if not job_keywords:
        return KeywordMatch()

    word_set = set(resume_words)
    matched = [keyword for keyword in job_keywords if keyword.lower() in word_set]
    missing = [keyword for keyword in job_keywords if keyword.lower() not in word_set]

    percentage = round_half_up(len(matched) / len(job_keywords) * 100)

    return KeywordMatch(matched=tuple(matched), missing=tuple(missing), percentage=percentage)


def has_metrics(text: str) -> bool:
    """Check if text contains any quantified-impact pattern."""
    if not text:
        return False
    return any(pattern.search(text) for pattern in METRIC_PATTERNS)


def find_buzzwords(text: str) -> List[str]:
    """
    Buzzwords that occur at least once in text (case-insensitive regex count).

    Example:
        >>> find_buzzwords("A passionate team player")
        ['team player', 'passionate']
    """
    return [
        buzzword
        for buzzword in TAXONOMIES.buzzwords
        if len(re.findall(re.escape(buzzword), text, re.IGNORECASE)) > 0
    ]


def find_repeated_words(text: str) -> List[str]:
    """
    Words longer than three characters used more than five times.

    Returned in order of first occurrence.
    """
    counts = Counter(tokenize_words(text))
    return [
        word
        for word, count in counts.items()
        if count > REPEATED_WORD_THRESHOLD and len(word) >= REPEATED_WORD_MIN_LENGTH
    ]
