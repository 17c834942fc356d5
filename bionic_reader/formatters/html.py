"""HTML formatter — standalone bionic reading page.

WHY: Browsers are the most common place to read bionic text. A single
self-contained HTML file opens anywhere, and the paragraph fragment can
be embedded into an existing page or e-book chapter.

HOW: Each Paragraph becomes a ``<p>``. Bold spans are wrapped in
``<b>``; normal spans are emitted as escaped text. Words are joined with
a single space. render_fragment() returns only the paragraphs;
the formatter wraps them in a minimal page with reading-friendly CSS.

RULES:
- All span text is escaped with html.escape (quotes included)
- Empty spans and empty words emit nothing (no empty <b></b>)
- One <p> per paragraph, in order, whitespace-only paragraphs included
- Output suffix: "-bionic.html"
- Media type: "text/html"
"""

from __future__ import annotations

import html
from typing import List

from bionic_reader.core.ir import Paragraph, TransformedDocument
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
  body {{ background: #f8fafc; margin: 0; }}
  article.bionic {{ max-width: 48rem; margin: 2rem auto; padding: 2rem;
                    font-family: Georgia, serif; font-size: 1.125rem; color: #334155; }}
  article.bionic p {{ margin: 0 0 1rem; line-height: 1.625; }}
  article.bionic b {{ font-weight: 700; color: #0f172a; }}
</style>
</head>
<body>
<article class="bionic">
{body}
</article>
</body>
</html>
"""


def _render_paragraph(paragraph: Paragraph) -> str:
    words: List[str] = []
    for word in paragraph.words:
        parts: List[str] = []
        for span in word.spans:
            if not span.text:
                continue
            escaped = html.escape(span.text)
            parts.append("<b>{}</b>".format(escaped) if span.is_bold else escaped)
        words.append("".join(parts))
    return "<p>{}</p>".format(" ".join(words))


def render_fragment(document: TransformedDocument) -> str:
    """Render only the ``<p>`` elements, one per line."""
    return "\n".join(_render_paragraph(p) for p in document.paragraphs)


class HTMLFormatter(BaseFormatter):
    """Formatter that produces a standalone HTML page."""

    def __init__(self, title: str = "Bionic Reading") -> None:
        self.title = title

    @property
    def name(self) -> str:
        return "HTML"

    def format(self, document: TransformedDocument) -> List[FormatterOutput]:
        content = _PAGE_TEMPLATE.format(
            title=html.escape(self.title),
            body=render_fragment(document),
        )
        return [
            FormatterOutput(
                suffix="-bionic.html",
                content=content,
                media_type="text/html",
            )
        ]
