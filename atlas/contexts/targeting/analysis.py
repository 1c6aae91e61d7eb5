"""
Analysis assembly for the Targeting context.

score_resume() is the entry point collaborators call with structured data.
It runs keyword extraction, keyword matching, section scoring and feedback,
and packs the results into one frozen AnalysisResult. It is a pure function
of its inputs: no clock, no randomness, no I/O.
"""

from typing import Optional

from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.job_parser import extract_job_requirements
from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.contexts.intake.resume_parser import segment_resume
from atlas.contexts.targeting.analysis_data_structure import AnalysisResult, ResumeKeywords
from atlas.contexts.targeting.feedback import generate_feedback
from atlas.contexts.targeting.keyword_analysis import calculate_keyword_match, extract_keywords
from atlas.contexts.targeting.logger import log_analysis_result, log_section_scores
from atlas.contexts.targeting.section_scorer import (
    calculate_overall_score,
    calculate_section_scores,
)
from atlas.utils.text_processing import serialize_for_matching


def score_resume(
    sections: ResumeSections, job: Optional[JobRequirements] = None
) -> AnalysisResult:
    """
    Score a segmented resume against job requirements.

    The keyword match and the skills score use different
    inputs and matching rules:
    - keyword match: tech-skill vocabulary found in the serialized job,
      matched against the resume's word tokens
    - skills score: the job's required_skills, matched against resume
      skills by case-insensitive equality

    Args:
        sections: Segmented resume
        job: Job requirements; None scores the resume on its own

    Returns:
        Frozen AnalysisResult
    """
    if sections is None:
        sections = ResumeSections()
    if job is None:
        job = JobRequirements()

    resume_keywords = extract_keywords(serialize_for_matching(sections.to_dict()))
    job_keywords = extract_keywords(serialize_for_matching(job.to_dict()))

    keyword_match = calculate_keyword_match(resume_keywords.all_words, job_keywords.skills)

    section_scores = calculate_section_scores(sections, job)
    log_section_scores(section_scores)

    result = AnalysisResult(
        overall_score=calculate_overall_score(section_scores),
        section_scores=section_scores,
        keyword_match=keyword_match,
        feedback=generate_feedback(sections, job, section_scores),
        resume_keywords=ResumeKeywords(
            skills=resume_keywords.skills,
            action_verbs=resume_keywords.action_verbs,
        ),
    )

    log_analysis_result(result)

    return result


def analyze_texts(resume_text: str, job_text: Optional[str] = None) -> AnalysisResult:
    """
    Segment, extract and score in one call.

    Args:
        resume_text: Plain resume text
        job_text: Plain job posting text, or None to score without a job

    Returns:
        Frozen AnalysisResult
    """
    sections = segment_resume(resume_text)
    job = extract_job_requirements(job_text) if job_text is not None else None
    return score_resume(sections, job)
