"""
Utility functions for formatting text-based reports and tables.

Used by the scripts to print analysis results. Nothing in the scoring core
depends on this module.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List

REPORT_WIDTH = 72


@dataclass(frozen=True)
class Column:
    """A fixed-width table column. align is a format-spec alignment: < > or ^."""

    name: str
    width: int
    align: str = "<"

    def format_header(self) -> str:
        return self.format_value(self.name)

    def format_value(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns. Methods chain."""

    def __init__(self, columns: List[Column], total_width: int = REPORT_WIDTH):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_bullets(self, title: str, items: Iterable[str], empty: str = "None") -> "TableFormatter":
        """Add a titled bullet list, or a placeholder line when there are no items."""
        items = list(items)
        self.lines.append(f"{title} ({len(items)}):")
        if items:
            self.lines.extend(f"  - {item}" for item in items)
        else:
            self.lines.append(f"  {empty}")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_score_bar(score: int, width: int = 20) -> str:
    """
    Render a 0-100 score as a fixed-width bar.

    Example:
        >>> format_score_bar(50, width=10)
        '[#####-----]'
    """
    filled = round(max(0, min(100, score)) / 100 * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_analysis_report(result, title: str = "ATS Analysis") -> str:
    """
    Format an AnalysisResult as a plain-text report.

    Args:
        result: AnalysisResult from score_resume()
        title: Report heading

    Returns:
        Multi-line report string
    """
    table = TableFormatter(
        [Column("Section", 14), Column("Score", 6, ">"), Column("", 24)]
    )

    table.add_section_header(f"{title}: overall {result.overall_score}/100")
    table.add_table_header().add_separator()

    for name, score in result.section_scores.to_dict().items():
        table.add_row([name.capitalize(), score, format_score_bar(score)])

    match = result.keyword_match
    table.add_blank_line()
    table.add_text(f"Keyword match: {match.percentage}%")
    table.add_bullets("Matched", match.matched)
    table.add_bullets("Missing", match.missing)

    feedback = result.feedback
    table.add_blank_line()
    table.add_bullets("Missing skills", feedback.missing_skills)
    table.add_bullets("Weak sections", feedback.weak_sections)
    table.add_bullets("Strong points", feedback.strong_points)
    table.add_bullets("Overused buzzwords", feedback.overused_buzzwords)
    table.add_bullets("Repeated keywords", feedback.repeated_keywords)

    table.add_blank_line()
    table.add_bullets("Suggestions", feedback.suggestions)

    return table.render()

