"""
Analysis result data structures for the Targeting context.

All result types are frozen and hold tuples, so an AnalysisResult cannot be
changed after score_resume() builds it. Callers own persistence; to_dict()
gives the camelCase mapping they store.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class SectionScores:
    skills: int = 0
    experience: int = 0
    projects: int = 0
    education: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "skills": self.skills,
            "experience": self.experience,
            "projects": self.projects,
            "education": self.education,
        }


@dataclass(frozen=True)
class KeywordMatch:
    """Job keywords found / not found among the resume's words."""

    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()
    percentage: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "matched": list(self.matched),
            "missing": list(self.missing),
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class Feedback:
    """Qualitative feedback. Every list keeps discovery order."""

    missing_skills: Tuple[str, ...] = ()
    weak_sections: Tuple[str, ...] = ()
    strong_points: Tuple[str, ...] = ()
    repeated_keywords: Tuple[str, ...] = ()
    overused_buzzwords: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list]:
        return {
            "missingSkills": list(self.missing_skills),
            "weakSections": list(self.weak_sections),
            "strongPoints": list(self.strong_points),
            "repeatedKeywords": list(self.repeated_keywords),
            "overusedBuzzwords": list(self.overused_buzzwords),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class ResumeKeywords:
    skills: Tuple[str, ...] = ()
    action_verbs: Tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list]:
        return {"skills": list(self.skills), "actionVerbs": list(self.action_verbs)}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete ATS analysis of one resume against one (possibly empty) job.

    Created once per score_resume() call. Identity, timestamps and version
    history are the caller's concern.
    """

    overall_score: int
    section_scores: SectionScores
    keyword_match: KeywordMatch
    feedback: Feedback
    resume_keywords: ResumeKeywords = field(default_factory=ResumeKeywords)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "sectionScores": self.section_scores.to_dict(),
            "keywordMatch": self.keyword_match.to_dict(),
            "feedback": self.feedback.to_dict(),
            "resumeKeywords": self.resume_keywords.to_dict(),
        }
