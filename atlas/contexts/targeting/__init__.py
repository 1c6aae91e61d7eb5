"""
Targeting Context

Responsibilities:
- Extracts skill, buzzword and action-verb keywords from structured data
- Scores each resume section against job requirements
- Combines section scores into the weighted overall ATS score
- Generates feedback and suggestions
- Assembles the immutable AnalysisResult handed back to callers

Owns: Scoring weights, keyword matching, feedback rules
Never: Parses raw text or persists results
"""
