"""Tests for io_utils.py — text loading and JSON report output."""
from __future__ import annotations

import json

from manuscript_assessment.io_utils import load_text, report_to_dict, save_assessment, save_report
from manuscript_assessment.schema import (
    Issue,
    MatchedSource,
    QualityReport,
    Recommendation,
    SimilarityReport,
)


def _similarity_report() -> SimilarityReport:
    return SimilarityReport(
        similarity_score=30.0,
        matched_sources=[
            MatchedSource(
                source="Common Academic Phrases",
                similarity=30.0,
                matched_text="Detected 60 instances of common phrases",
            )
        ],
        status="COMPLETED",
    )


def _quality_report() -> QualityReport:
    return QualityReport(
        overall_score=63,
        structure_score=25,
        formatting_score=70,
        readability_score=100,
        completeness_score=50,
        word_count=0,
        abstract_length=0,
        reference_count=0,
        figure_count=0,
        table_count=0,
        issues=[Issue(severity="critical", category="Structure", message="Missing")],
        recommendations=[Recommendation(priority="high", category="Structure", suggestion="Add")],
    )


class TestLoadText:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "manuscript.txt"
        path.write_text("Résumé of findings", encoding="utf-8")
        assert load_text(path) == "Résumé of findings"


class TestReportToDict:
    def test_nested_sources_become_dicts(self):
        payload = report_to_dict(_similarity_report())
        assert payload["status"] == "COMPLETED"
        assert payload["error_message"] is None
        assert payload["matched_sources"][0]["source"] == "Common Academic Phrases"

    def test_quality_findings_become_dicts(self):
        payload = report_to_dict(_quality_report())
        assert payload["issues"] == [{"severity": "critical", "category": "Structure", "message": "Missing"}]
        assert payload["recommendations"][0]["priority"] == "high"


class TestSaveReport:
    def test_writes_json(self, tmp_path):
        path = tmp_path / "out" / "similarity.json"
        save_report(_similarity_report(), path)
        assert json.loads(path.read_text(encoding="utf-8"))["similarity_score"] == 30.0

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "quality.json"
        save_report(_quality_report(), path)
        assert path.exists()


class TestSaveAssessment:
    def test_writes_both_reports(self, tmp_path):
        path = tmp_path / "assessment.json"
        save_assessment(_similarity_report(), _quality_report(), path)
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert set(payload) == {"similarity", "quality"}
        assert payload["quality"]["overall_score"] == 63

    def test_missing_quality_written_as_null(self, tmp_path):
        path = tmp_path / "assessment.json"
        save_assessment(_similarity_report(), None, path)
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["quality"] is None
        assert payload["similarity"]["similarity_score"] == 30.0
