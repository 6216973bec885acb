from __future__ import annotations

import re

from .rules import MIN_TOKEN_LENGTH

_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")
_PARAGRAPH_BOUNDARY_RE = re.compile(r"\n[^\S\n]*(?:\n[^\S\n]*)+")


def tokenize(text: str) -> list[str]:
    """Normalize text into comparable word tokens.

    Lower-cases the text, turns everything except letters, digits and
    whitespace into spaces, and drops tokens shorter than three characters.
    No stemming or stop-word removal is applied.

    Args:
        text: Raw text to tokenize.

    Returns:
        Tokens in their original order, duplicates kept.
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


def split_sentences(text: str) -> list[str]:
    """Split text on runs of `.`, `!` and `?`, dropping blank pieces."""
    return [piece for piece in _SENTENCE_BOUNDARY_RE.split(text) if piece.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split text on blank lines, dropping blank pieces."""
    return [piece for piece in _PARAGRAPH_BOUNDARY_RE.split(text) if piece.strip()]


def split_words(text: str) -> list[str]:
    return text.split()


def count_words(text: str) -> int:
    return len(split_words(text))
