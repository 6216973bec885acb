"""Tests for pipeline.py — routing text and PDF sources through both assessors."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from manuscript_assessment.errors import ExtractionError
from manuscript_assessment.pipeline import assess_source, is_pdf_source
from manuscript_assessment.quality import assess_quality
from manuscript_assessment.schema import STATUS_COMPLETED, STATUS_FAILED


class TestIsPdfSource:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("paper.pdf", True),
            ("PAPER.PDF", True),
            ("https://journal.example/paper", True),
            ("http://journal.example/paper.pdf", True),
            ("paper.txt", False),
            ("drafts/pdf_notes.md", False),
        ],
    )
    def test_detection(self, source, expected):
        assert is_pdf_source(source) is expected


class TestAssessSourceText:
    def test_text_file_runs_both_assessors(self, tmp_path, well_formed_manuscript, abstract_200):
        path = tmp_path / "paper.txt"
        path.write_text(well_formed_manuscript, encoding="utf-8")
        extractor = MagicMock()

        similarity, quality = assess_source(str(path), abstract_200, extractor=extractor)

        assert similarity.status == STATUS_COMPLETED
        assert quality == assess_quality(well_formed_manuscript, abstract_200)
        extractor.assert_not_called()


class TestAssessSourcePdf:
    def test_extracted_text_feeds_both_assessors(self, well_formed_manuscript, abstract_200):
        extractor = MagicMock(return_value=well_formed_manuscript)

        similarity, quality = assess_source(
            "https://journal.example/paper.pdf", abstract_200, timeout=12.0, extractor=extractor
        )

        extractor.assert_called_once_with("https://journal.example/paper.pdf", timeout=12.0)
        assert similarity.status == STATUS_COMPLETED
        assert quality == assess_quality(well_formed_manuscript, abstract_200)

    def test_extraction_failure_gives_failed_similarity_and_no_quality(self, abstract_200):
        extractor = MagicMock(side_effect=ExtractionError("Failed to extract text from PDF"))

        similarity, quality = assess_source("missing.pdf", abstract_200, extractor=extractor)

        assert similarity.status == STATUS_FAILED
        assert similarity.error_message == "Failed to extract text from PDF"
        assert similarity.similarity_score == 0.0
        assert quality is None

    def test_short_extracted_text_still_gets_quality_report(self, abstract_200):
        extractor = MagicMock(return_value="A scanned cover page.")

        similarity, quality = assess_source("cover.pdf", abstract_200, extractor=extractor)

        assert similarity.status == STATUS_FAILED
        assert quality is not None
        assert quality.word_count == 4

    def test_uses_supplied_check_and_assess(self, abstract_200):
        calls: list[str] = []

        def check(text=None, *, source, extractor):
            calls.append(extractor(source))
            return MagicMock(status=STATUS_COMPLETED)

        assess = MagicMock()
        extractor = MagicMock(return_value="body text")

        assess_source("paper.pdf", abstract_200, check=check, assess=assess, extractor=extractor)

        assert calls == ["body text"]
        assess.assert_called_once_with("body text", abstract_200)
