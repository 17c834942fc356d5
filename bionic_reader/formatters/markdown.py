"""Markdown formatter with ``**bold**`` stem prefixes.

WHY: Note-taking tools, wikis and chat apps render Markdown. Emitting
bionic text as Markdown lets users paste it anywhere without HTML.

HOW: Bold spans are wrapped in ``**``, which CommonMark allows inside a
word (``**he**llo``). Characters that Markdown would interpret are
backslash-escaped in every span so source punctuation stays literal.
Each rendered line is then checked for block syntax at its start (rules,
setext underlines, list markers, indented code), since a source line such
as "---" or "    code" would otherwise change the document structure.
Paragraphs are joined with a blank line.

RULES:
- Use "**" (not "__") — underscore emphasis does not work intraword
- Backslash-escape \\ ` * _ [ ] < > # & in every span
- Line start: escape a leading - + = ~ and the "." or ")" of "N." / "N)"
- Line start: leading spaces become "&#32;", leading tabs "&#9;"
- Empty spans emit nothing
- Paragraphs separated by exactly one blank line, trailing newline at end
- Output suffix: "-bionic.md"
- Media type: "text/markdown"
"""

from __future__ import annotations

import re
from typing import List

from bionic_reader.core.ir import Paragraph, TransformedDocument
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>#&])")

_LINE_INDENT_RE = re.compile(r"^[ \t]+")
_BLOCK_MARKER_RE = re.compile(r"^([-+=~])")
_ORDERED_MARKER_RE = re.compile(r"^(\d{1,9})([.)])")

_INDENT_ENTITIES = {" ": "&#32;", "\t": "&#9;"}


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def escape_line_start(line: str) -> str:
    """Keep one rendered line from opening a Markdown block construct.

    >>> escape_line_start("--- ok")
    '\\\\--- ok'
    >>> escape_line_start("1. item")
    '1\\\\. item'
    >>> escape_line_start("  x")
    '&#32;&#32;x'
    """
    indent = _LINE_INDENT_RE.match(line)
    if indent:
        entities = "".join(_INDENT_ENTITIES[char] for char in indent.group(0))
        return entities + line[indent.end():]
    line = _BLOCK_MARKER_RE.sub(r"\\\1", line)
    return _ORDERED_MARKER_RE.sub(r"\1\\\2", line)


def _render_paragraph(paragraph: Paragraph) -> str:
    words: List[str] = []
    for word in paragraph.words:
        parts: List[str] = []
        for span in word.spans:
            if not span.text:
                continue
            escaped = escape_markdown(span.text)
            parts.append("**{}**".format(escaped) if span.is_bold else escaped)
        words.append("".join(parts))
    # Newlines inside trailers start new source lines too.
    lines = " ".join(words).split("\n")
    return "\n".join(escape_line_start(line) for line in lines)


class MarkdownFormatter(BaseFormatter):
    """Formatter that produces bionic Markdown."""

    @property
    def name(self) -> str:
        return "Markdown"

    def format(self, document: TransformedDocument) -> List[FormatterOutput]:
        content = "\n\n".join(_render_paragraph(p) for p in document.paragraphs)
        if content:
            content += "\n"
        return [
            FormatterOutput(
                suffix="-bionic.md",
                content=content,
                media_type="text/markdown",
            )
        ]
