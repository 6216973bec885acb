from __future__ import annotations

from typing import Callable

from .extraction import DEFAULT_FETCH_TIMEOUT, extract_text
from .io_utils import load_text
from .plagiarism import assess_plagiarism
from .quality import assess_quality
from .schema import QualityReport, SimilarityReport


def is_pdf_source(source: str) -> bool:
    return source.startswith(("http://", "https://")) or source.lower().endswith(".pdf")


def assess_source(
    source: str,
    abstract: str,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    check: Callable[..., SimilarityReport] = assess_plagiarism,
    assess: Callable[..., QualityReport] = assess_quality,
    extractor: Callable[..., str] = extract_text,
) -> tuple[SimilarityReport, QualityReport | None]:
    """Run both assessments for one manuscript given as a text file, PDF file or PDF URL.

    PDF sources are handed to the plagiarism check as `source`, so an
    extraction failure comes back as a FAILED similarity report. The text
    extracted there is reused for the quality assessment.

    Args:
        source: Plain-text file path, PDF file path or http(s) PDF URL.
        abstract: Abstract text.
        timeout: Download ceiling in seconds for PDF URLs.
        check: Plagiarism check, possibly wrapped with tracing.
        assess: Quality assessment, possibly wrapped with tracing.
        extractor: Callable `(source, timeout=...) -> str` for PDF sources.

    Returns:
        Tuple of `(similarity_report, quality_report)`. The quality report is
        `None` when no manuscript text could be extracted.
    """
    if not is_pdf_source(source):
        text = load_text(source)
        return check(text), assess(text, abstract)

    extracted: list[str] = []

    def extract_once(location: str) -> str:
        text = extractor(location, timeout=timeout)
        extracted.append(text)
        return text

    similarity = check(source=source, extractor=extract_once)
    if not extracted:
        return similarity, None
    return similarity, assess(extracted[0], abstract)
