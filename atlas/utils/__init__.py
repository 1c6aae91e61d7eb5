"""
Shared utilities for ATLAS.

Common functionality used across contexts:
- Keyword taxonomies
- Text processing
- Logging (Tier 1 loguru sessions, Tier 2 event log)
- Report formatting
"""

from atlas.utils.taxonomies import TAXONOMIES, load_taxonomies
from atlas.utils.timestamp import format_timestamp, now_exact

__all__ = ["TAXONOMIES", "format_timestamp", "load_taxonomies", "now_exact"]
