"""Intermediate representation dataclasses for transformed documents.

WHY: Renderers (HTML, Markdown, terminal, JSON) all need the same facts —
which characters of which word are emphasized, and how words group into
paragraphs — but express them in different markup. The IR is a single,
well-typed form that every formatter consumes, decoupling the engine
from presentation.

HOW: Four dataclasses form a hierarchy:
  Span                — a run of text with one emphasis (bold or normal)
  Word                — the span-group produced from one space-delimited token
  Paragraph           — ordered words of one blank-line-delimited block
  TransformedDocument — ordered paragraphs plus the bold fraction used

RULES:
- Span is the atomic rendering unit — formatters map Spans to inline runs
- A Word's span texts always concatenate back to its original token
- Words are separated by exactly one space; the space belongs to no Word
- Paragraph.separator keeps the exact blank-line run the paragraph
  followed, so TransformedDocument.text rebuilds the source document
  exactly (runs of spaces survive as empty Words)
- Instances are built fresh per transformation call and never shared
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class Emphasis(str, Enum):
    """Visual weight of a Span."""

    BOLD = "bold"
    NORMAL = "normal"


@dataclass
class Span:
    """A run of text rendered with a single emphasis."""

    text: str
    emphasis: Emphasis = Emphasis.NORMAL

    @property
    def is_bold(self) -> bool:
        return self.emphasis is Emphasis.BOLD


@dataclass
class Word:
    """The span-group produced from one space-delimited token.

    WHY: Formatters occasionally need more than the spans — the JSON
    output exposes the stem/trailer split and the bold length so clients
    can re-style without re-running the engine.

    RULES:
    - token: the original token, verbatim (may be empty)
    - stem: leading run of word characters (may be empty)
    - trailer: everything after the stem, never bolded
    - bold_length: 0 when stem is empty, else 1..len(stem)
    - spans: [bold, normal] when stem is non-empty, else [normal(token)]
    """

    token: str
    stem: str
    trailer: str
    bold_length: int
    spans: list[Span] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass
class Paragraph:
    """Ordered words of one paragraph, in reading order.

    ``separator`` is the blank-line run that preceded the paragraph in
    the source document ("" for the first paragraph).
    """

    words: list[Word] = field(default_factory=list)
    separator: str = ""

    @property
    def text(self) -> str:
        return " ".join(word.text for word in self.words)

    def spans(self) -> Iterator[Span]:
        for word in self.words:
            yield from word.spans


@dataclass
class TransformedDocument:
    """The complete structural result of one transformation call.

    WHY: This is the top-level container that formatters receive. It
    holds everything needed to render any output format.

    RULES:
    - paragraphs: ordered by appearance in the source, never empty
    - bold_fraction: the fraction the caller asked for (unclamped)
    - text: source reconstruction (separators + paragraph texts)
    """

    paragraphs: list[Paragraph]
    bold_fraction: float

    @property
    def text(self) -> str:
        return "".join(p.separator + p.text for p in self.paragraphs)

    def words(self) -> Iterator[Word]:
        for paragraph in self.paragraphs:
            yield from paragraph.words

    def spans(self) -> Iterator[Span]:
        for paragraph in self.paragraphs:
            yield from paragraph.spans()
