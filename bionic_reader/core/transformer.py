"""Paragraph segmentation, stem/trailer splitting, bold-length computation,
and TransformedDocument construction.

WHY: Bionic reading bolds the first part of every word. Deciding *which*
characters to bold is the whole problem: punctuation must never be
bolded, every word needs at least one bold character, and the amount
must follow the user's bold fraction. This module is the bridge between
raw text and the structured IR.

HOW: The document is split into paragraphs on blank lines, each paragraph
into tokens on literal spaces. Each token is split into a stem (leading
word characters) and a trailer (the rest). The stem's bold length is
ceil(len(stem) * fraction), clamped into 1..len(stem). Each token yields
a Word with a bold span and a normal span, or a single normal span when
the stem is empty.

RULES:
- Paragraph break: "\\n", optional whitespace, "\\n" (regex \\n\\s*\\n)
- Word break: the literal " " only — tabs and newlines stay in tokens
- Stem: leading run of \\w (Unicode letters, digits, underscore), plus any
  combining marks that follow (decomposed accents, Indic vowel signs)
- Trailer: everything after the stem, emitted verbatim, never bolded
- Bold length: clamp(ceil(stem_len * f), 1, stem_len) with f clamped to [0, 1]
- Empty stem → one normal span holding the whole token (never an empty bold span)
- Pure functions only: no I/O, no logging, no module-level mutable state
"""

from __future__ import annotations

import math
import re
import unicodedata

from bionic_reader.core.ir import Emphasis, Paragraph, Span, TransformedDocument, Word


# A blank line: newline, optional whitespace (possibly more newlines), newline.
# The capturing group keeps the separator so it can be stored on the paragraph.
_PARAGRAPH_BREAK_RE = re.compile(r"(\n\s*\n)")

_WORD_CHAR_RE = re.compile(r"\w")

_WORD_SEPARATOR = " "


def split_paragraphs(document: str) -> list[tuple[str, str]]:
    """Split a document into (separator, paragraph) pairs.

    WHY: Paragraphs are rendered as separate blocks. Keeping the exact
    separator lets the IR rebuild the source text.

    RULES:
    - The first pair always has separator ""
    - A document without blank lines is a single paragraph
    - The empty document yields [("", "")]
    - Whitespace-only paragraphs are kept (no filtering, no reordering)
    """
    parts = _PARAGRAPH_BREAK_RE.split(document)
    pairs = [("", parts[0])]
    pairs.extend(zip(parts[1::2], parts[2::2]))
    return pairs


def split_words(paragraph: str) -> list[str]:
    """Split a paragraph into tokens on the literal space character.

    Consecutive spaces produce empty tokens.
    """
    return paragraph.split(_WORD_SEPARATOR)


def split_stem(token: str) -> tuple[str, str]:
    """Split a token into its stem and trailer.

    >>> split_stem("there!")
    ('there', '!')
    >>> split_stem("--")
    ('', '--')
    """
    end = 0
    for char in token:
        if _WORD_CHAR_RE.match(char) or (end and _is_combining_mark(char)):
            end += 1
        else:
            break
    return token[:end], token[end:]


def _is_combining_mark(char: str) -> bool:
    # Mn, Mc, Me: accents and vowel signs that attach to the previous character.
    return unicodedata.category(char).startswith("M")


def bold_length(stem_length: int, bold_fraction: float) -> int:
    """Number of leading stem characters to emphasize.

    WHY: Every non-empty stem must show at least one bold character and
    can never show more than itself, whatever fraction the caller sends.

    HOW: Clamp the fraction into [0, 1], take the ceiling of
    stem_length * fraction, then clamp the result into 1..stem_length.
    The ceiling is taken on the raw float product, with no rounding
    first. 10 * 0.7 evaluates to exactly 7.0, so it stays 7.

    RULES:
    - stem_length == 0 → 0 (no bold span is produced)
    - otherwise 1 <= result <= stem_length
    - non-decreasing in bold_fraction for a fixed stem_length
    - NaN fraction → ValueError

    Args:
        stem_length: Length of the stem in characters.
        bold_fraction: Proportion of the stem to emphasize.

    Returns:
        The bold length.
    """
    if math.isnan(bold_fraction):
        raise ValueError("bold_fraction must be a number, got NaN")
    if stem_length <= 0:
        return 0
    fraction = min(max(bold_fraction, 0.0), 1.0)
    return max(1, min(stem_length, math.ceil(stem_length * fraction)))


def transform_word(token: str, bold_fraction: float) -> Word:
    """Build the span-group for a single token."""
    stem, trailer = split_stem(token)
    length = bold_length(len(stem), bold_fraction)

    if not stem:
        spans = [Span(token, Emphasis.NORMAL)]
    else:
        spans = [
            Span(stem[:length], Emphasis.BOLD),
            Span(stem[length:] + trailer, Emphasis.NORMAL),
        ]

    return Word(
        token=token,
        stem=stem,
        trailer=trailer,
        bold_length=length,
        spans=spans,
    )


def transform_paragraph(
    paragraph: str,
    bold_fraction: float,
    separator: str = "",
) -> Paragraph:
    """Transform every token of one paragraph, in order."""
    words = [transform_word(token, bold_fraction) for token in split_words(paragraph)]
    return Paragraph(words=words, separator=separator)


def transform(document: str, bold_fraction: float) -> TransformedDocument:
    """Convert raw text into a paragraph-grouped sequence of styled spans.

    WHY: This is the single entry point every calling layer (CLI, HTTP
    API, tests) uses. It is total: any string and any finite fraction
    produce a document, degenerate inputs degrade through clamping.

    HOW: split_paragraphs → split_words → transform_word for every token,
    assembled into Paragraphs and a TransformedDocument.

    RULES:
    - Deterministic: same inputs → structurally identical output
    - The input string is never modified
    - transform("", f) → one paragraph with one empty normal span
    - Blank-input rejection is the caller's job (see config.require_text)

    Args:
        document: Raw input text.
        bold_fraction: Proportion of each stem to emphasize, normally in
                       [0.1, 0.7]; values outside [0, 1] are clamped.

    Returns:
        The TransformedDocument for the given text.
    """
    if math.isnan(bold_fraction):
        raise ValueError("bold_fraction must be a number, got NaN")

    paragraphs = [
        transform_paragraph(text, bold_fraction, separator=separator)
        for separator, text in split_paragraphs(document)
    ]
    return TransformedDocument(paragraphs=paragraphs, bold_fraction=bold_fraction)
