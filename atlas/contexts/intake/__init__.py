"""
Intake Context

Responsibilities:
- Reads plain-text resumes and job postings (already decoded by the caller)
- Segments resume text into skills, experience, projects and education
- Extracts required skills, seniority, role type, keywords and
  responsibilities from job postings

Owns: Resume segmentation and job extraction logic
Never: Scores resumes or decodes binary document formats
"""
