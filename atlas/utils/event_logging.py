"""
Analysis event logging utilities for ATLAS (Tier 2 logging).

Appends one JSON object per line to the analysis event log so runs of the
scripts can be reviewed later without keeping full session logs.
The scoring core never writes events; only scripts and callers do.

For detailed within-context logging (Tier 1), use atlas.utils.logger instead.

Usage:
    from atlas.utils.event_logging import log_analysis_event

    log_analysis_event(
        event_type="analysis_completed",
        document_name="jane_doe_resume",
        source="cli",
        overall_score=78,
    )
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from atlas.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
ANALYSIS_EVENTS_FILE = LOGS_PATH / os.getenv("ANALYSIS_EVENTS_FILE", "analysis_events.log")


def log_analysis_event(
    event_type: str,
    document_name: str,
    source: str,
    events_file: Optional[Path] = None,
    **extra_fields,
) -> None:
    """
    Log an event to the analysis event log.

    Args:
        event_type: Type of event (e.g., "analysis_completed", "job_extracted")
        document_name: Resume or job identifier (usually the file stem)
        source: Event source (e.g., "cli", "api", "manual")
        events_file: Override for the log file (defaults to ANALYSIS_EVENTS_FILE)
        **extra_fields: Additional event-specific fields (must be JSON serializable)
    """
    events_file = Path(events_file or ANALYSIS_EVENTS_FILE)
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "document_name": document_name,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    n: int = 10,
    document_name: Optional[str] = None,
    event_type: Optional[str] = None,
    events_file: Optional[Path] = None,
) -> list[dict]:
    """
    Get the last n events from the analysis log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        document_name: Filter to only events for this document (optional)
        event_type: Filter to only events of this type (optional)
        events_file: Override for the log file (defaults to ANALYSIS_EVENTS_FILE)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = Path(events_file or ANALYSIS_EVENTS_FILE)
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if document_name:
        events = [e for e in events if e.get("document_name") == document_name]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
