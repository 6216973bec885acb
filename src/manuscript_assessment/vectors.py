from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from .errors import ComputationError
from .text import tokenize


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Ordered, deduplicated token list shared by a pair of frequency vectors.

    The enumeration order is fixed at construction. Every vector built from
    the same vocabulary object uses that order, so index `i` means the same
    token in all of them.
    """

    tokens: tuple[str, ...]
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_index", {token: idx for idx, token in enumerate(self.tokens)})

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def index_of(self, token: str) -> int:
        return self._index[token]


def build_vocabulary(*sequences: list[str]) -> Vocabulary:
    """Union the distinct tokens of the given sequences in first-seen order.

    Args:
        sequences: One or more token sequences.

    Returns:
        A `Vocabulary` listing each token once, ordered by first occurrence
        across the sequences in argument order.
    """
    seen: dict[str, None] = {}
    for sequence in sequences:
        for token in sequence:
            seen.setdefault(token, None)
    return Vocabulary(tokens=tuple(seen))


def term_frequency_vector(tokens: list[str], vocabulary: Vocabulary) -> np.ndarray:
    """Count raw token occurrences aligned to the vocabulary's order.

    Plain term frequency: no inverse-document-frequency weighting and no
    length normalization. Tokens missing from the vocabulary are ignored.

    Args:
        tokens: Token sequence to count.
        vocabulary: Vocabulary that fixes the vector layout.

    Returns:
        A `float64` vector of length `len(vocabulary)`.
    """
    vector = np.zeros(len(vocabulary), dtype=np.float64)
    for token, count in Counter(tokens).items():
        if token in vocabulary:
            vector[vocabulary.index_of(token)] = count
    return vector


def build_aligned_vectors(
    first: list[str], second: list[str]
) -> tuple[Vocabulary, np.ndarray, np.ndarray]:
    """Build one shared vocabulary and two index-aligned frequency vectors.

    Args:
        first: Tokens of the first text.
        second: Tokens of the second text.

    Returns:
        Tuple of `(vocabulary, first_vector, second_vector)`.
    """
    vocabulary = build_vocabulary(first, second)
    return (
        vocabulary,
        term_frequency_vector(first, vocabulary),
        term_frequency_vector(second, vocabulary),
    )


def cosine_similarity(first: np.ndarray, second: np.ndarray) -> float:
    """Cosine similarity of two frequency vectors scaled to `[0, 100]`.

    A zero vector on either side scores 0. The squared norms are multiplied
    before taking one square root, so identical count vectors score exactly
    100 and argument order never changes the result.

    Args:
        first: Frequency vector.
        second: Frequency vector of the same length.

    Returns:
        Similarity score between 0 and 100.

    Raises:
        ComputationError: If the vectors are not one-dimensional and equal length.
    """
    if first.ndim != 1 or first.shape != second.shape:
        raise ComputationError(
            f"Cannot compare vectors of shapes {first.shape} and {second.shape}"
        )

    norm_product = float(np.dot(first, first)) * float(np.dot(second, second))
    if norm_product == 0.0:
        return 0.0

    score = float(np.dot(first, second)) / float(np.sqrt(norm_product)) * 100
    return float(np.clip(score, 0.0, 100.0))


def text_similarity(first: str, second: str) -> float:
    """Tokenize two texts and return their term-frequency cosine similarity (0-100)."""
    _, first_vector, second_vector = build_aligned_vectors(tokenize(first), tokenize(second))
    return cosine_similarity(first_vector, second_vector)
