"""Tests for extraction.py — PDF text from local files and URLs (network mocked)."""
from __future__ import annotations

import pymupdf
import httpx
import pytest

from manuscript_assessment.errors import ExtractionError
from manuscript_assessment.extraction import extract_text, fetch_pdf_bytes, pdf_bytes_to_text


def _make_pdf(*pages: str) -> bytes:
    document = pymupdf.open()
    for text in pages:
        page = document.new_page()
        page.insert_text((72, 72), text)
    data = document.tobytes()
    document.close()
    return data


def _client_returning(status_code: int, content: bytes = b"") -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=content)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestPdfBytesToText:
    def test_reads_page_text(self):
        text = pdf_bytes_to_text(_make_pdf("Manuscript body text"))
        assert "Manuscript body text" in text

    def test_joins_pages_in_order(self):
        text = pdf_bytes_to_text(_make_pdf("First page", "Second page"))
        assert text.index("First page") < text.index("Second page")


class TestFetchPdfBytes:
    def test_returns_body(self):
        client = _client_returning(200, b"%PDF-bytes")
        assert fetch_pdf_bytes("https://example.org/paper.pdf", client=client) == b"%PDF-bytes"

    def test_http_error_raises(self):
        client = _client_returning(404)
        with pytest.raises(httpx.HTTPStatusError):
            fetch_pdf_bytes("https://example.org/missing.pdf", client=client)


class TestExtractText:
    def test_local_file(self, tmp_path):
        path = tmp_path / "paper.pdf"
        path.write_bytes(_make_pdf("Local manuscript"))
        assert "Local manuscript" in extract_text(path)

    def test_url(self):
        client = _client_returning(200, _make_pdf("Remote manuscript"))
        assert "Remote manuscript" in extract_text("https://example.org/paper.pdf", client=client)

    def test_missing_file_raises_extraction_error(self, tmp_path):
        with pytest.raises(ExtractionError, match="Failed to extract text from PDF"):
            extract_text(tmp_path / "absent.pdf")

    def test_invalid_pdf_raises_extraction_error(self, tmp_path):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not a pdf at all")
        with pytest.raises(ExtractionError):
            extract_text(path)

    def test_download_failure_raises_extraction_error(self):
        with pytest.raises(ExtractionError) as excinfo:
            extract_text("https://example.org/paper.pdf", client=_client_returning(500))
        assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)

    def test_timeout_raises_extraction_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        with pytest.raises(ExtractionError):
            extract_text("https://example.org/slow.pdf", client=client)
