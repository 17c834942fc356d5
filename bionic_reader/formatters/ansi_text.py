"""ANSI terminal formatter.

WHY: The CLI's ``--stdout`` mode is mostly read in a terminal. SGR bold
escapes give the bionic effect there without any markup language.

HOW: Bold spans are wrapped in ESC[1m ... ESC[22m (bold on / normal
intensity), normal spans pass through. Paragraphs are joined with a
blank line.

RULES:
- Only bold spans carry escapes; normal text is byte-for-byte unchanged
- ESC[22m (not ESC[0m) ends bold so user colour settings are kept
- Output suffix: "-bionic.ansi.txt"
- Media type: "text/plain"
"""

from typing import List

from bionic_reader.core.ir import TransformedDocument
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[22m"


class AnsiTextFormatter(BaseFormatter):
    """Formatter that produces terminal text with ANSI bold escapes."""

    @property
    def name(self) -> str:
        return "ANSI Terminal Text"

    def format(self, document: TransformedDocument) -> List[FormatterOutput]:
        paragraphs: List[str] = []
        for paragraph in document.paragraphs:
            words = []
            for word in paragraph.words:
                words.append("".join(
                    BOLD_ON + span.text + BOLD_OFF if span.is_bold else span.text
                    for span in word.spans
                ))
            paragraphs.append(" ".join(words))

        content = "\n\n".join(paragraphs)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-bionic.ansi.txt",
                content=content,
                media_type="text/plain",
            )
        ]
