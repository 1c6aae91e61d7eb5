"""
Unit tests for the analysis event log.

Tests atlas.utils.event_logging with a temporary events file.
"""

import json

import pytest

from atlas.utils.event_logging import get_recent_events, log_analysis_event

pytestmark = pytest.mark.unit


class TestAnalysisEvents:
    """Tests for log_analysis_event and get_recent_events."""

    def test_event_written_as_json_line(self, tmp_path):
        events_file = tmp_path / "logs" / "events.log"

        log_analysis_event(
            "analysis_completed", "jane", "cli", events_file=events_file, overall_score=78
        )

        lines = events_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event_type"] == "analysis_completed"
        assert event["document_name"] == "jane"
        assert event["source"] == "cli"
        assert event["overall_score"] == 78
        assert "timestamp" in event

    def test_recent_events_filtered(self, tmp_path):
        events_file = tmp_path / "events.log"
        for i in range(5):
            log_analysis_event("analysis_completed", f"doc{i % 2}", "cli", events_file=events_file)
        log_analysis_event("job_extracted", "doc0", "cli", events_file=events_file)

        assert len(get_recent_events(n=3, events_file=events_file)) == 3
        assert len(get_recent_events(document_name="doc0", events_file=events_file)) == 4
        assert len(
            get_recent_events(document_name="doc0", event_type="job_extracted", events_file=events_file)
        ) == 1

    def test_malformed_lines_skipped(self, tmp_path):
        events_file = tmp_path / "events.log"
        events_file.write_text('not json\n{"event_type": "x", "document_name": "d"}\n')

        assert get_recent_events(events_file=events_file) == [
            {"event_type": "x", "document_name": "d"}
        ]

    def test_missing_file(self, tmp_path):
        assert get_recent_events(events_file=tmp_path / "absent.log") == []
