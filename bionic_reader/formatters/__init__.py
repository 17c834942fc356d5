"""Output formatter registry — pluggable rendering adapters.

WHY: The CLI and API layers need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["html"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bionic_reader.formatters.ansi_text import AnsiTextFormatter
from bionic_reader.formatters.html import HTMLFormatter
from bionic_reader.formatters.json_document import JSONDocumentFormatter
from bionic_reader.formatters.markdown import MarkdownFormatter

if TYPE_CHECKING:
    from bionic_reader.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "html": HTMLFormatter,
    "markdown": MarkdownFormatter,
    "ansi_text": AnsiTextFormatter,
    "json_document": JSONDocumentFormatter,
}
