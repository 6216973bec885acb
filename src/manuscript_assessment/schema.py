from __future__ import annotations

from dataclasses import dataclass, field

from .text import count_words

STATUS_COMPLETED = "COMPLETED"
STATUS_FAILED = "FAILED"

SEVERITY_CRITICAL = "critical"
SEVERITY_MODERATE = "moderate"
SEVERITY_MINOR = "minor"

PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable manuscript text handed to the assessors."""

    text: str

    @property
    def word_count(self) -> int:
        return count_words(self.text)


@dataclass(slots=True)
class MatchedSource:
    """One piece of similarity evidence attached to a similarity report."""

    source: str
    similarity: float
    matched_text: str


@dataclass(slots=True)
class SimilarityReport:
    """Outcome of one plagiarism check; `error_message` is set only when FAILED."""

    similarity_score: float
    matched_sources: list[MatchedSource] = field(default_factory=list)
    status: str = STATUS_COMPLETED
    error_message: str | None = None


@dataclass(slots=True)
class Issue:
    """Problem found in a manuscript, graded by severity."""

    severity: str
    category: str
    message: str


@dataclass(slots=True)
class Recommendation:
    """Actionable suggestion for the author, graded by priority."""

    priority: str
    category: str
    suggestion: str


@dataclass(slots=True)
class QualityReport:
    """Sub-scores, weighted overall score, content counts and findings for one manuscript."""

    overall_score: int
    structure_score: int
    formatting_score: int
    readability_score: int
    completeness_score: int
    word_count: int
    abstract_length: int
    reference_count: int
    figure_count: int
    table_count: int
    issues: list[Issue] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
