"""Core transformation engine and structural representation.

WHY: The core package is the only part of the converter with real logic —
paragraph segmentation, stem/trailer splitting and bold-length rounding.
Keeping it apart from rendering lets it be tested rigorously on its own.

HOW: ir.py defines the data structures, transformer.py builds them from
raw text and a bold fraction.

RULES:
- IR dataclasses are the contract — change with care
- Transformation logic is renderer-agnostic — no markup here
"""
