"""Manuscript text extraction from PDF files on disk or behind a URL."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import pymupdf

from .errors import ExtractionError

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 30.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_pdf_bytes(url: str, timeout: float = DEFAULT_FETCH_TIMEOUT, client: httpx.Client | None = None) -> bytes:
    """Download a PDF and return its raw bytes.

    Args:
        url: Absolute http(s) URL of the PDF.
        timeout: Request ceiling in seconds.
        client: Optional pre-configured client; one is created and closed otherwise.

    Returns:
        Response body bytes.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.content
    finally:
        if owns_client:
            client.close()


def pdf_bytes_to_text(data: bytes) -> str:
    """Return the text of every page of a PDF, pages joined by newlines."""
    with pymupdf.open(stream=data, filetype="pdf") as reader:
        return "\n".join(page.get_text() or "" for page in reader)


def extract_text(
    source: str | Path,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.Client | None = None,
) -> str:
    """Extract plain text from a PDF given as a local path or an http(s) URL.

    Args:
        source: Local file path or URL.
        timeout: Download ceiling in seconds, used for URLs only.
        client: Optional HTTP client used for URL downloads.

    Returns:
        Extracted text.

    Raises:
        ExtractionError: If the document cannot be read, fetched or parsed.
    """
    location = str(source)
    try:
        if _is_url(location):
            data = fetch_pdf_bytes(location, timeout=timeout, client=client)
        else:
            data = Path(location).read_bytes()
        return pdf_bytes_to_text(data)
    except Exception as exc:
        logger.error("pdf_text_extraction_failed source=%s error=%s", location, exc)
        raise ExtractionError("Failed to extract text from PDF") from exc
