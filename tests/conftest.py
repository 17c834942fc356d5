"""Shared test fixtures for the bionic_reader test suite.

WHY: Several test modules render the same sample documents. Centralizing
them here keeps the expected span boundaries in one place.

HOW: Pytest fixtures provide the raw sample text and its pre-built
TransformedDocument, constructed by hand (not by the engine) so that
formatter tests do not depend on transformer correctness.

RULES:
- SAMPLE_TEXT at 0.5 has two paragraphs: "Hi, there!" and "--- ok"
- The hand-built document must match what transform() produces
"""

import pytest

from bionic_reader.core.ir import Emphasis, Paragraph, Span, TransformedDocument, Word

SAMPLE_TEXT = "Hi, there!\n\n--- ok"
SAMPLE_FRACTION = 0.5


def _word(token, stem, trailer, bold_length, *spans):
    return Word(
        token=token,
        stem=stem,
        trailer=trailer,
        bold_length=bold_length,
        spans=[Span(text, emphasis) for text, emphasis in spans],
    )


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_document():
    """Hand-built IR for SAMPLE_TEXT at bold fraction 0.5."""
    first = Paragraph(
        words=[
            _word("Hi,", "Hi", ",", 1, ("H", Emphasis.BOLD), ("i,", Emphasis.NORMAL)),
            _word("there!", "there", "!", 3, ("the", Emphasis.BOLD), ("re!", Emphasis.NORMAL)),
        ],
        separator="",
    )
    second = Paragraph(
        words=[
            _word("---", "", "---", 0, ("---", Emphasis.NORMAL)),
            _word("ok", "ok", "", 1, ("o", Emphasis.BOLD), ("k", Emphasis.NORMAL)),
        ],
        separator="\n\n",
    )
    return TransformedDocument(paragraphs=[first, second], bold_fraction=SAMPLE_FRACTION)


@pytest.fixture
def markup_document():
    """Single word whose trailer contains HTML and Markdown metacharacters."""
    word = _word(
        "a_b<*>&\"",
        "a_b",
        "<*>&\"",
        2,
        ("a_", Emphasis.BOLD),
        ("b<*>&\"", Emphasis.NORMAL),
    )
    return TransformedDocument(paragraphs=[Paragraph(words=[word])], bold_fraction=0.5)
