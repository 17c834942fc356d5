"""Bionic Reader — text to bionic-reading conversion hub.

WHY: Bionic reading emphasizes the first part of every word so the eye
can anchor on it and the brain fills in the rest. Producing that form by
hand is tedious; this package does it for any text and any renderer.

HOW: Two-stage pipeline — transform (core engine builds a neutral
paragraph/word/span structure) and format (pluggable formatters render
that structure as HTML, Markdown, ANSI terminal text or JSON). The CLI
and the HTTP API are thin calling layers around both stages.

RULES:
- The core engine is pure: no I/O, no logging, no state between calls
- All formatters consume the same TransformedDocument
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
