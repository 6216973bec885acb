"""Similarity / originality assessment for a single manuscript.

There is no external comparison corpus. The check combines two internal
signals:
  - boilerplate phrase overuse (flag_common_phrases)
  - repetition between the document's own sentences (estimate_self_similarity)

assess_plagiarism never raises: every failure comes back as a FAILED report.
"""
from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable

from .extraction import extract_text
from .rules import (
    COMMON_ACADEMIC_PHRASES,
    COMMON_PHRASE_SOURCE,
    INSUFFICIENT_TEXT_MESSAGE,
    MAX_SENTENCES_COMPARED,
    MAX_SIMILARITY_SCORE,
    MIN_PLAGIARISM_TEXT_LENGTH,
    MIN_SENTENCES_FOR_SELF_SIMILARITY,
    PHRASE_RATIO_THRESHOLD,
    PHRASE_SIMILARITY_CAP,
    PHRASE_SIMILARITY_MULTIPLIER,
    SELF_SIMILARITY_CAP,
    SELF_SIMILARITY_SCALE,
)
from .schema import STATUS_COMPLETED, STATUS_FAILED, Document, MatchedSource, SimilarityReport
from .text import split_sentences
from .vectors import text_similarity

logger = logging.getLogger(__name__)


def count_common_phrases(text: str) -> int:
    """Count case-insensitive occurrences of every boilerplate phrase."""
    lowered = text.lower()
    return sum(lowered.count(phrase) for phrase in COMMON_ACADEMIC_PHRASES)


def flag_common_phrases(text: str) -> list[MatchedSource]:
    """Flag documents that lean heavily on boilerplate academic phrasing.

    The phrase ratio is phrase occurrences per hundred words. Above the
    threshold a single match is reported whose similarity grows with the
    ratio and is capped.

    Args:
        text: Full manuscript text.

    Returns:
        Zero or one `MatchedSource`.
    """
    word_count = Document(text).word_count
    if word_count == 0:
        return []

    phrase_count = count_common_phrases(text)
    phrase_ratio = phrase_count / word_count * 100
    if phrase_ratio <= PHRASE_RATIO_THRESHOLD:
        return []

    return [
        MatchedSource(
            source=COMMON_PHRASE_SOURCE,
            similarity=min(phrase_ratio * PHRASE_SIMILARITY_MULTIPLIER, PHRASE_SIMILARITY_CAP),
            matched_text=f"Detected {phrase_count} instances of common phrases",
        )
    ]


def estimate_self_similarity(text: str) -> float:
    """Conservative originality estimate from internal sentence repetition.

    Compares every pair among the first sentences of the document and scales
    down the strongest pairwise similarity. Short documents carry too little
    signal and score 0.

    Args:
        text: Full manuscript text.

    Returns:
        Estimate between 0 and 15.
    """
    sentences = split_sentences(text)
    if len(sentences) < MIN_SENTENCES_FOR_SELF_SIMILARITY:
        return 0.0

    max_similarity = 0.0
    for first, second in combinations(sentences[:MAX_SENTENCES_COMPARED], 2):
        max_similarity = max(max_similarity, text_similarity(first, second))

    return min(max_similarity * SELF_SIMILARITY_SCALE, SELF_SIMILARITY_CAP)


def _failed_report(message: str) -> SimilarityReport:
    return SimilarityReport(
        similarity_score=0.0,
        matched_sources=[],
        status=STATUS_FAILED,
        error_message=message,
    )


def assess_plagiarism(
    text: str | None = None,
    *,
    source: str | None = None,
    extractor: Callable[[str], str] = extract_text,
) -> SimilarityReport:
    """Produce a similarity report for one manuscript.

    Args:
        text: Already-extracted manuscript text. Takes precedence over `source`.
        source: PDF path or URL, used only when `text` is empty.
        extractor: Callable turning `source` into text.

    Returns:
        A COMPLETED report with the similarity score and evidence, or a FAILED
        report with a short reason. Never raises.
    """
    try:
        if not text and source is not None:
            text = extractor(source)

        if not text or len(text.strip()) < MIN_PLAGIARISM_TEXT_LENGTH:
            logger.info("plagiarism_check_skipped reason=insufficient_text")
            return _failed_report(INSUFFICIENT_TEXT_MESSAGE)

        matched_sources = flag_common_phrases(text)
        if matched_sources:
            similarity_score = max(match.similarity for match in matched_sources)
        else:
            similarity_score = estimate_self_similarity(text)

        report = SimilarityReport(
            similarity_score=min(similarity_score, MAX_SIMILARITY_SCORE),
            matched_sources=matched_sources,
            status=STATUS_COMPLETED,
        )
    except Exception as exc:
        logger.exception("plagiarism_check_failed")
        return _failed_report(str(exc) or type(exc).__name__)

    logger.debug(
        "plagiarism_check_completed score=%.2f matches=%d",
        report.similarity_score,
        len(report.matched_sources),
    )
    return report
