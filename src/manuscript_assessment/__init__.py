"""Similarity and quality assessment for submitted research manuscripts."""

from .plagiarism import assess_plagiarism
from .quality import assess_quality
from .schema import Document, Issue, MatchedSource, QualityReport, Recommendation, SimilarityReport

__all__ = [
    "assess_plagiarism",
    "assess_quality",
    "Document",
    "Issue",
    "MatchedSource",
    "QualityReport",
    "Recommendation",
    "SimilarityReport",
]
