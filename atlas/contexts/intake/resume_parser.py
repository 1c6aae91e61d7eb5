"""
Resume segmentation for the Intake context.

Splits plain resume text into skills, experience, projects and education
using heading detection and one small sub-parser per section. Everything is
keyword and regex based; nothing here raises on odd input. Garbled text
just yields empty or partial sections.

Segmentation walks the lines once as a state machine:

    NO_SECTION --heading--> SKILLS | EXPERIENCE | PROJECTS | EDUCATION

Each heading flushes the buffered lines of the current state through that
state's sub-parser. Lines before the first heading are dropped.
"""

from typing import Callable, List, Optional

from atlas.contexts.intake.logger import _log_debug, log_segmentation_result
from atlas.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeSections,
)
from atlas.contexts.intake.section_patterns import (
    EntryTriggerPatterns,
    SectionState,
    find_date_token,
    find_year,
    is_degree,
    is_job_title,
    is_project_headline,
    match_section_heading,
)
from atlas.utils.taxonomies import TAXONOMIES
from atlas.utils.text_processing import find_substrings, split_nonempty_lines, unique_in_order

# Lines at or above this length are treated as prose, not as a title/company/institution
MAX_SHORT_LINE = 100


def _append_text(existing: str, line: str) -> str:
    return f"{existing} {line}" if existing else line


# =============================================================================
# SECTION SUB-PARSERS
# =============================================================================


def parse_skills(lines: List[str]) -> List[str]:
    """
    Parse a skills section into individual skills.

    Lines are joined and split on commas, pipes, bullets, hyphens and middle
    dots. Stop words and tokens outside 2-49 characters are dropped.

    Example:
        >>> parse_skills(["Python, React | Docker"])
        ['Python', 'React', 'Docker']
    """
    text = " ".join(lines)
    skills = []

    for part in EntryTriggerPatterns.SKILL_DELIMITERS.split(text):
        skill = part.strip()
        if 1 < len(skill) < 50 and skill.lower() not in TAXONOMIES.stop_words:
            skills.append(skill)

    return unique_in_order(skills)


def parse_experience(lines: List[str]) -> List[ExperienceEntry]:
    """
    Parse an experience section into entries.

    A line with a date/date-range or a job-title keyword opens a new entry.
    The date token fills duration; a title match puts the whole line in
    title. Following lines fill title, then company (short lines only), and
    everything else goes to description.

    Entries with neither title nor description are dropped.
    """
    entries = []
    current: Optional[ExperienceEntry] = None

    for line in lines:
        duration = find_date_token(line)
        has_title = is_job_title(line)

        if duration or has_title:
            if current is not None:
                entries.append(current)
            current = ExperienceEntry(duration=duration, title=line if has_title else "")
        elif current is not None:
            if not current.title and len(line) < MAX_SHORT_LINE:
                current.title = line
            elif not current.company and len(line) < MAX_SHORT_LINE:
                current.company = line
            else:
                current.description = _append_text(current.description, line)

    if current is not None:
        entries.append(current)

    return [entry for entry in entries if entry.title or entry.description]


def parse_projects(lines: List[str]) -> List[ProjectEntry]:
    """
    Parse a projects section into entries.

    Short lines that contain a colon or start with a capital letter are
    project names; other lines are description and are scanned for known
    technologies.
    """
    projects = []
    current: Optional[ProjectEntry] = None

    for line in lines:
        if is_project_headline(line):
            if current is not None:
                projects.append(current)
            current = ProjectEntry(name=line.replace(":", "", 1).strip())
        elif current is not None:
            for tech in find_substrings(line, TAXONOMIES.project_technologies):
                if tech not in current.technologies:
                    current.technologies.append(tech)
            current.description = _append_text(current.description, line)

    if current is not None:
        projects.append(current)

    return [project for project in projects if project.name]


def parse_education(lines: List[str]) -> List[EducationEntry]:
    """
    Parse an education section into entries.

    A line naming a degree or containing a 4-digit year opens an entry.
    Following lines fill institution (short lines only), then degree.
    """
    entries = []
    current: Optional[EducationEntry] = None

    for line in lines:
        has_degree = is_degree(line)
        year = find_year(line)

        if has_degree or year:
            if current is not None:
                entries.append(current)
            current = EducationEntry(degree=line if has_degree else "", year=year)
        elif current is not None:
            if not current.institution and len(line) < MAX_SHORT_LINE:
                current.institution = line
            elif not current.degree:
                current.degree = line

    if current is not None:
        entries.append(current)

    return [entry for entry in entries if entry.degree or entry.institution]


def extract_skills_from_text(text: str) -> List[str]:
    """
    Find known skills anywhere in the text.

    Used when a resume has no skills heading. Returns lower-case vocabulary
    entries in vocabulary order.
    """
    return find_substrings(text, TAXONOMIES.fallback_skills)


SECTION_PARSERS: dict[SectionState, Callable[[List[str]], list]] = {
    SectionState.SKILLS: parse_skills,
    SectionState.EXPERIENCE: parse_experience,
    SectionState.PROJECTS: parse_projects,
    SectionState.EDUCATION: parse_education,
}


# =============================================================================
# SEGMENTATION
# =============================================================================


def _flush(sections: ResumeSections, state: SectionState, buffer: List[str]) -> None:
    """Run buffered lines through the state's sub-parser and store the result."""
    if state is SectionState.NO_SECTION or not buffer:
        return
    setattr(sections, state.value, SECTION_PARSERS[state](buffer))


def segment_resume(text: str) -> ResumeSections:
    """
    Split raw resume text into typed sections.

    A repeated heading replaces the earlier section content. If no skills
    were found under a heading, the whole text is scanned against the
    fallback skill vocabulary.

    Args:
        text: Plain resume text (None is treated as empty)

    Returns:
        ResumeSections with all four sections present
    """
    text = text or ""
    sections = ResumeSections()
    state = SectionState.NO_SECTION
    buffer: List[str] = []

    for line in split_nonempty_lines(text):
        heading = match_section_heading(line)

        if heading is not None:
            _flush(sections, state, buffer)
            _log_debug(f"Section heading '{line}' -> {heading.value}")
            state = heading
            buffer = []
        elif state is not SectionState.NO_SECTION:
            buffer.append(line)

    _flush(sections, state, buffer)

    if not sections.skills:
        sections.skills = extract_skills_from_text(text)

    log_segmentation_result(sections)

    return sections
