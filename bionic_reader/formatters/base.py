"""Abstract base formatter and output container.

WHY: Every output format consumes the same TransformedDocument but
produces different file content. This base class enforces a consistent
interface so the CLI and the HTTP API can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content (string or bytes) and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list — every current formatter returns one item,
  but the contract allows multi-file formats
- ``suffix`` starts with a hyphen, e.g. ``"-bionic.html"``
- The caller is responsible for prepending the source filename stem
- Formatters never modify the TransformedDocument
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from bionic_reader.core.ir import TransformedDocument


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-bionic.html"`` → ``"notes-bionic.html"``.
        content: The file content as a string or bytes.
        media_type: MIME type for the content, e.g. ``"text/html"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'HTML'."""

    @abstractmethod
    def format(self, document: TransformedDocument) -> list[FormatterOutput]:
        """Render the TransformedDocument into one or more output files.

        Args:
            document: Paragraphs of styled spans produced by the engine.

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string/bytes, and MIME type.
        """
