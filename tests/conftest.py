"""Shared pytest fixtures for manuscript_assessment unit tests."""
from __future__ import annotations

import pytest

BODY_SENTENCE = "The team measured river flow across many sites each week."


def make_paragraphs(word_count: int, words_per_paragraph: int = 100) -> str:
    """Build filler text of an exact word count split into blank-line paragraphs."""
    paragraphs: list[str] = []
    remaining = word_count
    while remaining > 0:
        size = min(words_per_paragraph, remaining)
        paragraphs.append(" ".join(["word"] * size))
        remaining -= size
    return "\n\n".join(paragraphs)


def body_paragraph(sentences: int = 10) -> str:
    return " ".join([BODY_SENTENCE] * sentences)


@pytest.fixture()
def well_formed_manuscript() -> str:
    """~5000-word manuscript with all sections in order, 25 references, short paragraphs."""
    sections = ["Introduction", "Methods", "Results", "Discussion", "Conclusion"]
    parts: list[str] = []
    for heading in sections:
        parts.append(heading)
        parts.extend(body_paragraph() for _ in range(10))
    parts.append("Acknowledgments")
    parts.append("We thank the field crews.")
    parts.append("References")
    parts.append(" ".join(f"[{idx}]" for idx in range(1, 51)))
    parts.append("Figure 1 and Fig. 2 summarize flow while Table 1 lists sites.")
    return "\n\n".join(parts)


@pytest.fixture()
def abstract_200() -> str:
    return " ".join(["summary"] * 200)


@pytest.fixture()
def abstract_50() -> str:
    return " ".join(["summary"] * 50)


@pytest.fixture()
def distinct_sentences_text() -> str:
    """Exactly 100 characters, five sentences, no shared tokens, no boilerplate."""
    return "Rivers carry silt downstream. Glaciers carve valleys. Winds shape dunes. Tides move sand. Rain falls"


@pytest.fixture()
def repeated_sentence_text() -> str:
    """Five sentences where the first and last are identical."""
    return (
        "Rivers carry silt downstream. Winds shape dunes. Tides move sand. "
        "Rain falls. Rivers carry silt downstream."
    )


@pytest.fixture()
def boilerplate_text() -> str:
    return "In this paper we found that this study shows. " * 20
