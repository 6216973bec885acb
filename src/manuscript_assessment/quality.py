"""Heuristic manuscript quality assessment.

Four independent scorers (structure, formatting, readability, completeness)
each start at 100, subtract penalties and floor at 0. They append their
findings to the issue and recommendation lists owned by one assess_quality
call. assess_quality combines the sub-scores with fixed weights.
"""
from __future__ import annotations

import logging
import math
import re

from . import rules
from .schema import (
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    SEVERITY_CRITICAL,
    SEVERITY_MINOR,
    SEVERITY_MODERATE,
    Document,
    Issue,
    QualityReport,
    Recommendation,
)
from .text import split_paragraphs, split_sentences, split_words

logger = logging.getLogger(__name__)

FULL_SCORE = 100


# ---------------------------------------------------------------------------
# Content counts
# ---------------------------------------------------------------------------


def count_references(text: str) -> int:
    """Estimate the number of cited references from citation-like patterns.

    Sums bracketed numerals, parenthesized years and "et al." occurrences,
    plus one for a References/Bibliography heading, then halves the total
    since most references surface through more than one pattern.
    """
    total = sum(len(pattern.findall(text)) for pattern in rules.REFERENCE_PATTERNS)
    if rules.REFERENCE_HEADING_PATTERN.search(text):
        total += 1
    return min(total // 2, rules.MAX_REFERENCE_COUNT)


def _count_distinct(pattern: re.Pattern[str], text: str) -> int:
    return len({match.lower() for match in pattern.findall(text)})


def count_figures(text: str) -> int:
    return _count_distinct(rules.FIGURE_PATTERN, text)


def count_tables(text: str) -> int:
    return _count_distinct(rules.TABLE_PATTERN, text)


# ---------------------------------------------------------------------------
# Sub-scorers
# ---------------------------------------------------------------------------


def _sections_out_of_order(lowered: str) -> bool:
    """Check first-occurrence order of section markers.

    A pair is only judged when both markers occur; an absent marker has no
    position to compare.
    """
    for earlier, later in rules.SECTION_ORDER:
        earlier_pos = lowered.find(earlier)
        later_pos = lowered.find(later)
        if earlier_pos == -1 or later_pos == -1:
            continue
        if earlier_pos >= later_pos:
            return True
    return False


def score_structure(text: str, issues: list[Issue], recommendations: list[Recommendation]) -> int:
    """Score presence and ordering of the standard research-paper sections."""
    score = FULL_SCORE

    missing = [name for name, pattern in rules.SECTION_PATTERNS if not pattern.search(text)]
    if missing:
        score -= rules.MISSING_SECTION_PENALTY * len(missing)
        names = ", ".join(missing)
        issues.append(
            Issue(
                severity=SEVERITY_CRITICAL,
                category="Structure",
                message=f"Missing essential sections: {names}",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_HIGH,
                category="Structure",
                suggestion=f"Add the following sections: {names}",
            )
        )

    if _sections_out_of_order(text.lower()):
        score -= rules.SECTION_ORDER_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MODERATE,
                category="Structure",
                message="Sections may not be in logical order",
            )
        )

    return max(score, 0)


def score_formatting(
    text: str,
    word_count: int,
    issues: list[Issue],
    recommendations: list[Recommendation],
) -> int:
    """Score manuscript length and paragraph sizing."""
    score = FULL_SCORE

    if word_count < rules.MIN_WORD_COUNT:
        score -= rules.SHORT_MANUSCRIPT_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_CRITICAL,
                category="Formatting",
                message=f"Word count ({word_count}) is below minimum recommended length",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_HIGH,
                category="Content",
                suggestion=f"Expand the manuscript to at least {rules.TYPICAL_WORD_COUNT} words",
            )
        )
    elif word_count < rules.TYPICAL_WORD_COUNT:
        score -= rules.BELOW_TYPICAL_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MODERATE,
                category="Formatting",
                message=f"Word count ({word_count}) is below typical length for research papers",
            )
        )
    elif word_count > rules.MAX_WORD_COUNT:
        score -= rules.LONG_MANUSCRIPT_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MINOR,
                category="Formatting",
                message=f"Word count ({word_count}) is quite long; consider condensing",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_MEDIUM,
                category="Content",
                suggestion="Consider reducing length to improve readability",
            )
        )

    paragraphs = split_paragraphs(text)
    if paragraphs and word_count / len(paragraphs) > rules.MAX_AVG_PARAGRAPH_WORDS:
        score -= rules.LONG_PARAGRAPH_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MINOR,
                category="Formatting",
                message="Paragraphs are too long on average",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_LOW,
                category="Formatting",
                suggestion="Break long paragraphs into smaller, more digestible sections",
            )
        )

    return max(score, 0)


def score_readability(text: str, issues: list[Issue], recommendations: list[Recommendation]) -> int:
    """Score sentence length, passive voice and long-word density."""
    score = FULL_SCORE
    sentences = split_sentences(text)
    words = split_words(text)

    avg_sentence_length = len(words) / len(sentences) if sentences else 0.0
    if avg_sentence_length > rules.MAX_AVG_SENTENCE_WORDS:
        score -= rules.VERY_LONG_SENTENCES_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MODERATE,
                category="Readability",
                message="Average sentence length is too long, affecting readability",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_MEDIUM,
                category="Writing",
                suggestion="Reduce average sentence length to improve clarity",
            )
        )
    elif avg_sentence_length > rules.LONG_SENTENCE_WARNING_WORDS:
        score -= rules.LONG_SENTENCES_PENALTY
        recommendations.append(
            Recommendation(
                priority=PRIORITY_LOW,
                category="Writing",
                suggestion="Consider shortening some longer sentences",
            )
        )

    passive_count = sum(1 for _ in rules.PASSIVE_VOICE_PATTERN.finditer(text))
    passive_ratio = passive_count / len(sentences) * 100 if sentences else 0.0
    if passive_ratio > rules.MAX_PASSIVE_RATIO:
        score -= rules.PASSIVE_VOICE_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MODERATE,
                category="Readability",
                message="Excessive use of passive voice detected",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_MEDIUM,
                category="Writing",
                suggestion="Use more active voice to improve clarity and engagement",
            )
        )

    long_words = [word for word in words if len(word) > rules.JARGON_WORD_LENGTH]
    jargon_ratio = len(long_words) / len(words) * 100 if words else 0.0
    if jargon_ratio > rules.MAX_JARGON_RATIO:
        score -= rules.JARGON_PENALTY
        recommendations.append(
            Recommendation(
                priority=PRIORITY_LOW,
                category="Writing",
                suggestion="Consider simplifying technical terminology where possible",
            )
        )

    return max(score, 0)


def score_completeness(
    text: str,
    abstract_length: int,
    reference_count: int,
    issues: list[Issue],
    recommendations: list[Recommendation],
) -> int:
    """Score abstract length, reference coverage and acknowledgments."""
    score = FULL_SCORE

    if abstract_length < rules.MIN_ABSTRACT_WORDS:
        score -= rules.SHORT_ABSTRACT_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_CRITICAL,
                category="Completeness",
                message=f"Abstract is too short ({abstract_length} words)",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_HIGH,
                category="Abstract",
                suggestion="Expand abstract to 150-250 words",
            )
        )
    elif abstract_length > rules.MAX_ABSTRACT_WORDS:
        score -= rules.LONG_ABSTRACT_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MINOR,
                category="Completeness",
                message=f"Abstract is too long ({abstract_length} words)",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_MEDIUM,
                category="Abstract",
                suggestion="Condense abstract to 150-250 words",
            )
        )

    if reference_count < rules.MIN_REFERENCES:
        score -= rules.FEW_REFERENCES_PENALTY
        issues.append(
            Issue(
                severity=SEVERITY_MODERATE,
                category="Completeness",
                message=f"Insufficient references ({reference_count} detected)",
            )
        )
        recommendations.append(
            Recommendation(
                priority=PRIORITY_HIGH,
                category="References",
                suggestion="Add more references to support your claims (aim for 20-40)",
            )
        )
    elif reference_count < rules.ADEQUATE_REFERENCES:
        score -= rules.SOME_REFERENCES_PENALTY
        recommendations.append(
            Recommendation(
                priority=PRIORITY_MEDIUM,
                category="References",
                suggestion="Consider adding more references to strengthen your literature review",
            )
        )

    if not rules.ACKNOWLEDGMENT_PATTERN.search(text):
        score -= rules.MISSING_ACKNOWLEDGMENT_PENALTY
        recommendations.append(
            Recommendation(
                priority=PRIORITY_LOW,
                category="Completeness",
                suggestion="Consider adding an acknowledgments section",
            )
        )

    return max(score, 0)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


def weighted_overall_score(structure: int, formatting: int, readability: int, completeness: int) -> int:
    """Combine sub-scores with the fixed weights, rounding halves up."""
    weighted = (
        structure * rules.STRUCTURE_WEIGHT
        + formatting * rules.FORMATTING_WEIGHT
        + readability * rules.READABILITY_WEIGHT
        + completeness * rules.COMPLETENESS_WEIGHT
    )
    return int(math.floor(weighted + 0.5))


def assess_quality(text: str, abstract: str) -> QualityReport:
    """Run all four quality scorers and assemble the quality report.

    Args:
        text: Manuscript body text.
        abstract: Abstract text.

    Returns:
        `QualityReport` with sub-scores, weighted overall score, content
        counts, issues and recommendations.
    """
    issues: list[Issue] = []
    recommendations: list[Recommendation] = []

    word_count = Document(text).word_count
    abstract_length = Document(abstract).word_count
    reference_count = count_references(text)
    figure_count = count_figures(text)
    table_count = count_tables(text)

    structure_score = score_structure(text, issues, recommendations)
    formatting_score = score_formatting(text, word_count, issues, recommendations)
    readability_score = score_readability(text, issues, recommendations)
    completeness_score = score_completeness(
        text, abstract_length, reference_count, issues, recommendations
    )

    overall_score = weighted_overall_score(
        structure_score, formatting_score, readability_score, completeness_score
    )
    logger.debug(
        "quality_assessment_completed overall=%d issues=%d recommendations=%d",
        overall_score,
        len(issues),
        len(recommendations),
    )

    return QualityReport(
        overall_score=overall_score,
        structure_score=structure_score,
        formatting_score=formatting_score,
        readability_score=readability_score,
        completeness_score=completeness_score,
        word_count=word_count,
        abstract_length=abstract_length,
        reference_count=reference_count,
        figure_count=figure_count,
        table_count=table_count,
        issues=issues,
        recommendations=recommendations,
    )
