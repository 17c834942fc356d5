"""Structured JSON formatter, validated against the bundled schema.

WHY: Web front ends, e-book pipelines and other renderers want the
structure itself rather than one fixed markup. The JSON output exposes
every paragraph, word and span so any client can apply its own styling.

HOW: document_to_dict() walks the IR into plain dicts and lists. The
formatter serializes that dict and validates it with jsonschema against
bionic_document_schema.json (shipped next to this module) before
returning.

RULES:
- Schema version is "1.0.0"
- Emphasis values are the Emphasis enum values ("bold" / "normal")
- Non-ASCII text is written as-is (ensure_ascii=False), UTF-8 on save
- Validate output against the schema before returning; raise on failure
- Output suffix: "-bionic.json"
- Media type: "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from bionic_reader.core.ir import TransformedDocument
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_VERSION = "1.0.0"

_SCHEMA_PATH = Path(__file__).resolve().parent / "bionic_document_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load the document schema from disk, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def document_to_dict(document: TransformedDocument) -> dict[str, Any]:
    """Convert the IR into JSON-ready nested dicts."""
    return {
        "version": SCHEMA_VERSION,
        "bold_fraction": document.bold_fraction,
        "paragraphs": [
            {
                "separator": paragraph.separator,
                "words": [
                    {
                        "token": word.token,
                        "stem": word.stem,
                        "trailer": word.trailer,
                        "bold_length": word.bold_length,
                        "spans": [
                            {"text": span.text, "emphasis": span.emphasis.value}
                            for span in word.spans
                        ],
                    }
                    for word in paragraph.words
                ],
            }
            for paragraph in document.paragraphs
        ],
    }


class JSONDocumentFormatter(BaseFormatter):
    """Formatter that produces the schema-validated JSON structure."""

    @property
    def name(self) -> str:
        return "JSON Document"

    def format(self, document: TransformedDocument) -> list[FormatterOutput]:
        data = document_to_dict(document)
        jsonschema.validate(instance=data, schema=get_schema())

        return [
            FormatterOutput(
                suffix="-bionic.json",
                content=json.dumps(data, ensure_ascii=False, indent=2) + "\n",
                media_type="application/json",
            )
        ]
