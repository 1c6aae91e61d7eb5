"""
ATLAS - Applicant Tracking Likeness Analysis System

A deterministic resume scoring engine that reads plain-text resumes and job
postings and reports how an applicant tracking system is likely to see them.

Architecture:
- Intake Context: Resume segmentation and job description extraction
- Targeting Context: Keyword matching, section scoring and feedback

Public API:
    segment_resume(text) -> ResumeSections
    extract_job_requirements(text) -> JobRequirements
    score_resume(sections, job=None) -> AnalysisResult
    analyze_texts(resume_text, job_text=None) -> AnalysisResult
"""

from loguru import logger

from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.job_parser import extract_job_requirements
from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.contexts.intake.resume_parser import segment_resume
from atlas.contexts.targeting.analysis import analyze_texts, score_resume
from atlas.contexts.targeting.analysis_data_structure import AnalysisResult

__version__ = "0.1.0"

# Silent as a library; setup_logger() re-enables output for scripts
logger.disable("atlas")

__all__ = [
    "AnalysisResult",
    "JobRequirements",
    "ResumeSections",
    "analyze_texts",
    "extract_job_requirements",
    "score_resume",
    "segment_resume",
]
