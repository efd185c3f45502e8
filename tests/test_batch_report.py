"""Tests for the batch report command line entry point and the sample batch."""

import csv
import json

from builders import NOW, fixed_clock
from skywatch.batch_report import main, to_row
from skywatch.filters import assess_health, get_interpretation_stats
from skywatch.interpreter import interpret
from skywatch.mock_data import sample_request
from skywatch.models import HealthStatus


class TestSampleBatch:
    """The built-in sample is mostly silence, as a real feed should be."""

    def test_sample_counts(self):
        response = interpret(sample_request(NOW), fixed_clock)

        assert len(response.decisions) == 11
        assert response.suppressed_count == 6
        assert response.relevant_count == 5

    def test_sample_health_is_warning(self):
        response = interpret(sample_request(NOW), fixed_clock)
        stats = get_interpretation_stats(response.decisions)

        assert stats.civilian_relevant == 2
        assert assess_health(stats).status is HealthStatus.WARNING

    def test_row_mirrors_decision(self):
        decision = interpret(sample_request(NOW), fixed_clock).decisions[0]

        row = to_row(decision)

        assert row.event_type == "asteroid"
        assert row.event_id == decision.event_id
        assert row.suppressed is decision.suppressed
        assert row.decision_id == decision.decision_id


class TestMain:

    def test_sample_run_prints_summary(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "INTERPRETATION RESULTS: 11 EVENTS" in out
        assert "INTERPRETATION SUMMARY" in out
        assert "warning" in out

    def test_audience_count_is_reported(self, capsys):
        assert main(["--audience", "civilian"]) == 0
        assert "Visible to civilian:" in capsys.readouterr().out

    def test_csv_output(self, tmp_path):
        out_path = tmp_path / "decisions.csv"

        assert main(["--csv", str(out_path)]) == 0

        with out_path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        assert len(rows) == 11
        assert list(rows[0])[:3] == ["event_type", "event_id", "suppressed"]

    def test_request_file(self, tmp_path, capsys):
        request_path = tmp_path / "request.json"
        request_path.write_text(json.dumps(sample_request(NOW).model_dump(mode="json")), encoding="utf-8")

        assert main([str(request_path)]) == 0
        assert "INTERPRETATION RESULTS: 11 EVENTS" in capsys.readouterr().out

    def test_missing_request_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_invalid_request_file(self, tmp_path):
        request_path = tmp_path / "request.json"
        request_path.write_text('{"asteroids": []}', encoding="utf-8")

        assert main([str(request_path)]) == 1
