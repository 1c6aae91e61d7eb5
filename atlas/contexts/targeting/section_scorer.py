"""
Section scoring for the Targeting context.

Each resume section gets an integer score in [0, 100] from a small set of
additive rules. An empty section gets a fixed floor and no bonuses.
The overall score is a fixed weighted sum of the four section scores.
"""

from atlas.contexts.intake.extraction_patterns import ExperienceLevel, detect_experience_level
from atlas.contexts.intake.job_data_structure import JobRequirements
from atlas.contexts.intake.resume_data_structure import ResumeSections
from atlas.contexts.targeting.analysis_data_structure import SectionScores
from atlas.contexts.targeting.keyword_analysis import extract_keywords, has_metrics
from atlas.utils.text_processing import round_half_up, serialize_for_matching

SECTION_WEIGHTS = {
    "skills": 0.35,
    "experience": 0.30,
    "projects": 0.25,
    "education": 0.10,
}

# Skills without a job to compare against
SKILLS_MANY_SCORE = 70
SKILLS_FEW_SCORE = 40
SKILLS_MANY_THRESHOLD = 5

EXPERIENCE_EMPTY_SCORE = 20
EXPERIENCE_BASE_SCORE = 50
EXPERIENCE_METRICS_BONUS = 20
EXPERIENCE_ACTION_VERB_BONUS = 15
EXPERIENCE_LEVEL_BONUS = 15

PROJECTS_EMPTY_SCORE = 30
PROJECTS_BASE_SCORE = 50
PROJECTS_TECH_BONUS = 20
PROJECTS_DESCRIPTION_BONUS = 15
PROJECTS_METRICS_BONUS = 15
PROJECT_DESCRIPTION_MIN_LENGTH = 50

EDUCATION_EMPTY_SCORE = 40
EDUCATION_BASE_SCORE = 80
EDUCATION_RELEVANT_SCORE = 95
RELEVANT_DEGREE_TERMS = (
    "computer",
    "software",
    "engineering",
    "science",
    "b.tech",
    "m.tech",
    "b.e",
    "m.e",
)


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def calculate_skill_overlap(resume_skills: list[str], required_skills: list[str]) -> int:
    """
    Percentage of required skills covered by resume skills.

    Uses case-insensitive exact equality, not substring matching:
    "Java" does not cover "JavaScript".
    """
    if not required_skills:
        return 0

    required = {skill.lower() for skill in required_skills}
    matched = [skill for skill in resume_skills if skill.lower() in required]

    return round_half_up(len(matched) / len(required_skills) * 100)


def score_skills(resume: ResumeSections, job: JobRequirements) -> int:
    if job.required_skills:
        return _clamp(calculate_skill_overlap(resume.skills, job.required_skills))
    if len(resume.skills) > SKILLS_MANY_THRESHOLD:
        return SKILLS_MANY_SCORE
    return SKILLS_FEW_SCORE


def score_experience(resume: ResumeSections, job: JobRequirements) -> int:
    """
    Score experience entries.

    Bonuses: quantified impact in any description, an action verb in any
    description, and a seniority that fits the job (any level fits "any").
    """
    if not resume.experience:
        return EXPERIENCE_EMPTY_SCORE

    score = EXPERIENCE_BASE_SCORE

    if any(has_metrics(entry.description) for entry in resume.experience):
        score += EXPERIENCE_METRICS_BONUS

    if any(extract_keywords(entry.description).action_verbs for entry in resume.experience):
        score += EXPERIENCE_ACTION_VERB_BONUS

    serialized = serialize_for_matching([entry.to_dict() for entry in resume.experience])
    resume_level = detect_experience_level(serialized)
    if job.experience_level == ExperienceLevel.ANY or resume_level == job.experience_level:
        score += EXPERIENCE_LEVEL_BONUS

    return _clamp(score)


def score_projects(resume: ResumeSections) -> int:
    """
    Score project entries.

    Bonuses: any project with a technology tag, every project with a
    description of at least 50 characters, quantified impact in any project.
    """
    if not resume.projects:
        return PROJECTS_EMPTY_SCORE

    score = PROJECTS_BASE_SCORE

    if any(project.technologies for project in resume.projects):
        score += PROJECTS_TECH_BONUS

    if all(len(project.description) >= PROJECT_DESCRIPTION_MIN_LENGTH for project in resume.projects):
        score += PROJECTS_DESCRIPTION_BONUS

    if any(has_metrics(project.description) for project in resume.projects):
        score += PROJECTS_METRICS_BONUS

    return _clamp(score)


def score_education(resume: ResumeSections) -> int:
    if not resume.education:
        return EDUCATION_EMPTY_SCORE

    for entry in resume.education:
        degree = entry.degree.lower()
        if any(term in degree for term in RELEVANT_DEGREE_TERMS):
            return EDUCATION_RELEVANT_SCORE

    return EDUCATION_BASE_SCORE


def calculate_section_scores(resume: ResumeSections, job: JobRequirements) -> SectionScores:
    return SectionScores(
        skills=score_skills(resume, job),
        experience=score_experience(resume, job),
        projects=score_projects(resume),
        education=score_education(resume),
    )


def calculate_overall_score(scores: SectionScores) -> int:
    """
    Weighted overall score.

    Example:
        >>> calculate_overall_score(SectionScores(skills=40, experience=20, projects=30, education=40))
        32
    """
    weighted = (
        scores.skills * SECTION_WEIGHTS["skills"]
        + scores.experience * SECTION_WEIGHTS["experience"]
        + scores.projects * SECTION_WEIGHTS["projects"]
        + scores.education * SECTION_WEIGHTS["education"]
    )
    return _clamp(round_half_up(weighted))
