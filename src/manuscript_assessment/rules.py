"""Heuristic tables and thresholds shared by the assessors.

Module constants only; none of these are read from the environment.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Tokenization
# ---------------------------------------------------------------------------

MIN_TOKEN_LENGTH = 3

# ---------------------------------------------------------------------------
# Plagiarism
# ---------------------------------------------------------------------------

MIN_PLAGIARISM_TEXT_LENGTH = 100
INSUFFICIENT_TEXT_MESSAGE = "Insufficient text content for plagiarism check"

# Boilerplate academic phrasing. Heavy use is a weak similarity signal.
COMMON_ACADEMIC_PHRASES: tuple[str, ...] = (
    "in this paper",
    "this study",
    "our results",
    "we found that",
    "it was observed",
    "the results show",
    "in conclusion",
)
COMMON_PHRASE_SOURCE = "Common Academic Phrases"
PHRASE_RATIO_THRESHOLD = 5.0
PHRASE_SIMILARITY_MULTIPLIER = 2.0
PHRASE_SIMILARITY_CAP = 30.0

MIN_SENTENCES_FOR_SELF_SIMILARITY = 5
MAX_SENTENCES_COMPARED = 20
SELF_SIMILARITY_SCALE = 0.3
SELF_SIMILARITY_CAP = 15.0

MAX_SIMILARITY_SCORE = 100.0

# ---------------------------------------------------------------------------
# Quality: structure
# ---------------------------------------------------------------------------

SECTION_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("introduction", re.compile(r"introduction|background", re.IGNORECASE)),
    ("methodology", re.compile(r"method|methodology|materials and methods", re.IGNORECASE)),
    ("results", re.compile(r"results|findings", re.IGNORECASE)),
    ("discussion", re.compile(r"discussion", re.IGNORECASE)),
    ("conclusion", re.compile(r"conclusion", re.IGNORECASE)),
)
MISSING_SECTION_PENALTY = 15

# Pairs of markers that should appear in this order (first occurrence).
SECTION_ORDER: tuple[tuple[str, str], ...] = (
    ("introduction", "method"),
    ("method", "results"),
)
SECTION_ORDER_PENALTY = 10

# ---------------------------------------------------------------------------
# Quality: formatting
# ---------------------------------------------------------------------------

MIN_WORD_COUNT = 2000
TYPICAL_WORD_COUNT = 3000
MAX_WORD_COUNT = 10000
SHORT_MANUSCRIPT_PENALTY = 30
BELOW_TYPICAL_PENALTY = 15
LONG_MANUSCRIPT_PENALTY = 10

MAX_AVG_PARAGRAPH_WORDS = 200
LONG_PARAGRAPH_PENALTY = 10

# ---------------------------------------------------------------------------
# Quality: readability
# ---------------------------------------------------------------------------

MAX_AVG_SENTENCE_WORDS = 30
LONG_SENTENCE_WARNING_WORDS = 25
VERY_LONG_SENTENCES_PENALTY = 20
LONG_SENTENCES_PENALTY = 10

PASSIVE_VOICE_PATTERN = re.compile(r"\b(was|were|been|being)\s+\w+ed\b", re.IGNORECASE)
MAX_PASSIVE_RATIO = 30.0
PASSIVE_VOICE_PENALTY = 15

JARGON_WORD_LENGTH = 12
MAX_JARGON_RATIO = 15.0
JARGON_PENALTY = 10

# ---------------------------------------------------------------------------
# Quality: completeness
# ---------------------------------------------------------------------------

MIN_ABSTRACT_WORDS = 100
MAX_ABSTRACT_WORDS = 300
SHORT_ABSTRACT_PENALTY = 25
LONG_ABSTRACT_PENALTY = 10

MIN_REFERENCES = 10
# Counts from MIN_REFERENCES up to (not including) this still get a recommendation.
ADEQUATE_REFERENCES = 15
FEW_REFERENCES_PENALTY = 20
SOME_REFERENCES_PENALTY = 10

ACKNOWLEDGMENT_PATTERN = re.compile(r"acknowledge?ment", re.IGNORECASE)
MISSING_ACKNOWLEDGMENT_PENALTY = 5

# Each pattern contributes every match it finds.
REFERENCE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[\d+\]"),
    re.compile(r"\(\d{4}\)"),
    re.compile(r"et al\.", re.IGNORECASE),
)
# A reference-list heading counts once, however often it appears.
REFERENCE_HEADING_PATTERN = re.compile(r"References|Bibliography", re.IGNORECASE)
MAX_REFERENCE_COUNT = 100

FIGURE_PATTERN = re.compile(r"Figure\s+\d+|Fig\.\s+\d+", re.IGNORECASE)
TABLE_PATTERN = re.compile(r"Table\s+\d+", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Quality: overall
# ---------------------------------------------------------------------------

STRUCTURE_WEIGHT = 0.25
FORMATTING_WEIGHT = 0.20
READABILITY_WEIGHT = 0.30
COMPLETENESS_WEIGHT = 0.25
