"""
Feedback generation for the Targeting context.

Turns section scores and keyword scans into human-readable feedback.
Checks run in a fixed order and that order is the order of the output
lists.
"""

from typing import List

from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.contexts.targeting.analysis_data_structure import Feedback, SectionScores
from atlas.contexts.targeting.keyword_analysis import (
    find_buzzwords,
    find_repeated_words,
    has_metrics,
)
from atlas.utils.text_processing import serialize_for_matching

MAX_MISSING_SKILLS = 8
MAX_SUGGESTED_SKILLS = 5
WEAK_SECTION_THRESHOLD = 60
STRONG_SECTION_THRESHOLD = 80
MIN_SKILLS_FOR_NO_SUGGESTION = 5

# (score field, weak-section label, strong-point message), in report order
SECTION_FEEDBACK = (
    ("skills", "Skills", "Strong technical skills match"),
    ("experience", "Experience", "Well-documented experience"),
    ("projects", "Projects", "Impressive projects section"),
    ("education", "Education", "Relevant educational background"),
)

SUGGEST_METRICS = 'Add metrics to your experience (e.g., "Increased performance by 40%")'
SUGGEST_REPLACE_BUZZWORDS = "Replace generic terms with specific achievements"
SUGGEST_ADD_PROJECTS = "Add personal projects to showcase your skills"
SUGGEST_EXPAND_SKILLS = "Expand your skills section with more technologies"
SUGGEST_LOOKS_GREAT = "Your resume looks great! Consider adding more quantifiable achievements."


def find_missing_skills(resume: ResumeSections, job: JobRequirements) -> List[str]:
    """Required skills absent from the resume (case-insensitive equality), first eight."""
    resume_skills = {skill.lower() for skill in resume.skills}
    missing = [skill for skill in job.required_skills if skill.lower() not in resume_skills]
    return missing[:MAX_MISSING_SKILLS]


def build_suggestions(
    resume: ResumeSections,
    missing_skills: List[str],
    buzzwords: List[str],
    serialized_resume: str,
) -> List[str]:
    """
    Build the suggestion list.

    Every applicable suggestion is included, in this order: missing skills,
    metrics, buzzwords, projects, skills count. If none apply, a single
    "looks great" suggestion is returned.
    """
    suggestions = []

    if missing_skills:
        suggestions.append(
            f"Add these missing skills: {', '.join(missing_skills[:MAX_SUGGESTED_SKILLS])}"
        )

    if not has_metrics(serialized_resume):
        suggestions.append(SUGGEST_METRICS)

    if buzzwords:
        suggestions.append(SUGGEST_REPLACE_BUZZWORDS)

    if not resume.projects:
        suggestions.append(SUGGEST_ADD_PROJECTS)

    if len(resume.skills) < MIN_SKILLS_FOR_NO_SUGGESTION:
        suggestions.append(SUGGEST_EXPAND_SKILLS)

    if not suggestions:
        suggestions.append(SUGGEST_LOOKS_GREAT)

    return suggestions


def generate_feedback(
    resume: ResumeSections, job: JobRequirements, scores: SectionScores
) -> Feedback:
    """
    Generate feedback for a scored resume.

    Args:
        resume: Segmented resume
        job: Job requirements (a default instance when there is no job)
        scores: Section scores already computed for this pair

    Returns:
        Frozen Feedback
    """
    serialized_resume = serialize_for_matching(resume.to_dict()).lower()

    missing_skills = find_missing_skills(resume, job)

    weak_sections = [
        label
        for field_name, label, _ in SECTION_FEEDBACK
        if getattr(scores, field_name) < WEAK_SECTION_THRESHOLD
    ]
    strong_points = [
        message
        for field_name, _, message in SECTION_FEEDBACK
        if getattr(scores, field_name) >= STRONG_SECTION_THRESHOLD
    ]

    buzzwords = find_buzzwords(serialized_resume)
    repeated = find_repeated_words(serialized_resume)

    suggestions = build_suggestions(resume, missing_skills, buzzwords, serialized_resume)

    return Feedback(
        missing_skills=tuple(missing_skills),
        weak_sections=tuple(weak_sections),
        strong_points=tuple(strong_points),
        repeated_keywords=tuple(repeated),
        overused_buzzwords=tuple(buzzwords),
        suggestions=tuple(suggestions),
    )
