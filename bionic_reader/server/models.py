"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: One request model shared by both conversion endpoints, one response
model mirroring the IR hierarchy (paragraphs → words → spans), plus the
small format/health/error models. Enums represent closed sets like
output format names and span emphasis.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Enum values match internal constants exactly (format keys, emphasis)
- bold_fraction is bounded to the configured slider range; the endpoint
  snaps it to the step
- Response models never expose internal implementation details
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from bionic_reader.config import (
    DEFAULT_BOLD_FRACTION,
    MAX_BOLD_FRACTION,
    MIN_BOLD_FRACTION,
)
from bionic_reader.core.ir import Emphasis


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class OutputFormat(str, Enum):
    """Available output format identifiers.

    RULES:
    - Values match keys in bionic_reader.formatters.FORMATTERS exactly
    """

    html = "html"
    markdown = "markdown"
    ansi_text = "ansi_text"
    json_document = "json_document"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ConversionRequest(BaseModel):
    """Text and settings for one conversion.

    WHY: Re-styling with a new bold fraction is just another request with
    the same text — the server keeps no state between calls.
    """

    text: str = Field(description="The text to convert. Must not be blank.")
    bold_fraction: float = Field(
        default=DEFAULT_BOLD_FRACTION,
        ge=MIN_BOLD_FRACTION,
        le=MAX_BOLD_FRACTION,
        description="Proportion of each word stem to bold. Snapped to 0.05 steps.",
    )
    output_format: Optional[OutputFormat] = Field(
        default=None,
        description="Also render the document in this format and return it as 'content'.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "Hi, there!\n\nSecond paragraph.",
                "bold_fraction": 0.5,
                "output_format": "html",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SpanModel(BaseModel):
    text: str = Field(description="Span text.")
    emphasis: Emphasis = Field(description="'bold' or 'normal'.")


class WordModel(BaseModel):
    token: str = Field(description="Original space-delimited token, verbatim.")
    stem: str = Field(description="Leading word characters of the token.")
    trailer: str = Field(description="Rest of the token after the stem (never bold).")
    bold_length: int = Field(description="Number of bold stem characters (0 if stem is empty).")
    spans: List[SpanModel] = Field(description="Bold prefix and normal suffix, or one normal span.")


class ParagraphModel(BaseModel):
    separator: str = Field(description="Blank-line run preceding this paragraph ('' for the first).")
    words: List[WordModel] = Field(description="Words in reading order.")


class ConversionResponse(BaseModel):
    """Structured conversion result.

    RULES:
    - paragraphs mirror the IR exactly, in reading order
    - content/media_type are only set when output_format was requested
    """

    bold_fraction: float = Field(description="The snapped bold fraction that was applied.")
    paragraphs: List[ParagraphModel] = Field(description="Transformed paragraphs.")
    output_format: Optional[OutputFormat] = Field(
        default=None,
        description="Format of 'content', when requested.",
    )
    content: Optional[str] = Field(
        default=None,
        description="Rendered document, only present when output_format was given.",
    )
    media_type: Optional[str] = Field(
        default=None,
        description="MIME type of 'content'.",
    )


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-bionic.html').")
    media_type: str = Field(description="MIME type of the rendered content.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
