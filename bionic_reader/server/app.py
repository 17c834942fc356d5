"""FastAPI application with conversion API routes and OpenAPI docs.

WHY: Web front ends, browser extensions and automation tools need an
HTTP API to convert text into bionic form without shipping the engine
themselves. FastAPI provides automatic OpenAPI documentation and request
validation.

HOW: A single FastAPI app exposes four endpoints grouped by tags.
POST /conversions returns the structured document (and optionally one
rendered format); POST /conversions/render/{format_key} returns the raw
rendered file. Both run the engine synchronously — conversion is fast
and holds no state, so there is no job store.

RULES:
- All endpoints have OpenAPI descriptions on every response
- Error responses use a consistent ErrorResponse schema
- Blank text → 422 "Please enter some text to convert."
- Text longer than MAX_INPUT_CHARS → 413
- bold_fraction is range-checked by pydantic and snapped to the step here
- Nothing is cached or stored between requests
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from bionic_reader import __version__
from bionic_reader.config import (
    API_HOST,
    API_PORT,
    DEFAULT_BOLD_FRACTION,
    MAX_INPUT_CHARS,
    require_text,
    snap_bold_fraction,
)
from bionic_reader.core.ir import TransformedDocument
from bionic_reader.core.transformer import transform
from bionic_reader.formatters import FORMATTERS
from bionic_reader.formatters.base import FormatterOutput
from bionic_reader.formatters.json_document import document_to_dict
from bionic_reader.server.models import (
    ConversionRequest,
    ConversionResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bionic Reader API",
    description=(
        "REST API for converting text into bionic reading form: the first "
        "part of every word is emphasized to guide the eye. Returns the "
        "structured document or renders it as HTML, Markdown, ANSI text "
        "or JSON."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _convert(request: ConversionRequest) -> TransformedDocument:
    """Validate the request text and run the engine.

    RULES:
    - Size check first (413), then blank check (422)
    - The snapped fraction is what the engine receives
    """
    if len(request.text) > MAX_INPUT_CHARS:
        logger.warning("Rejected conversion: %d chars exceeds limit", len(request.text))
        raise HTTPException(
            status_code=413,
            detail="Text too large ({} chars, max {})".format(
                len(request.text), MAX_INPUT_CHARS
            ),
        )
    try:
        require_text(request.text)
    except ValueError as exc:
        logger.warning("Rejected conversion: blank text")
        raise HTTPException(status_code=422, detail=str(exc))

    bold_fraction = snap_bold_fraction(request.bold_fraction)
    document = transform(request.text, bold_fraction)
    logger.info(
        "Converted %d paragraph(s) at bold fraction %.2f",
        len(document.paragraphs),
        bold_fraction,
    )
    return document


def _render(format_key: str, document: TransformedDocument) -> FormatterOutput:
    formatter = FORMATTERS[format_key]()
    return formatter.format(document)[0]


# ---------------------------------------------------------------------------
# Endpoints: Conversions
# ---------------------------------------------------------------------------


@app.post(
    "/conversions",
    response_model=ConversionResponse,
    tags=["conversions"],
    summary="Convert text to bionic reading form",
    description=(
        "Transform the text into paragraphs of bold/normal spans. "
        "If output_format is given, the rendered document is returned "
        "in 'content' as well. To change the bold fraction, send the "
        "same text again with the new value."
    ),
    responses={
        413: {"model": ErrorResponse, "description": "Text too large"},
        422: {"model": ErrorResponse, "description": "Blank text or invalid bold fraction"},
    },
)
async def create_conversion(request: ConversionRequest) -> ConversionResponse:
    document = _convert(request)
    data = document_to_dict(document)

    content = None
    media_type = None
    if request.output_format is not None:
        output = _render(request.output_format.value, document)
        content = output.content
        media_type = output.media_type

    return ConversionResponse(
        bold_fraction=document.bold_fraction,
        paragraphs=data["paragraphs"],
        output_format=request.output_format,
        content=content,
        media_type=media_type,
    )


@app.post(
    "/conversions/render/{format_key}",
    tags=["conversions"],
    summary="Convert text and return one rendered file",
    description=(
        "Transform the text and return the output of a single formatter "
        "as the raw response body with the formatter's media type."
    ),
    responses={
        404: {"model": ErrorResponse, "description": "Unknown output format"},
        413: {"model": ErrorResponse, "description": "Text too large"},
        422: {"model": ErrorResponse, "description": "Blank text or invalid bold fraction"},
    },
)
async def render_conversion(format_key: str, request: ConversionRequest) -> Response:
    if format_key not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        raise HTTPException(
            status_code=404,
            detail="Unknown output format '{}'. Available: {}".format(format_key, available),
        )

    document = _convert(request)
    output = _render(format_key, document)
    return Response(content=output.content, media_type=output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description=(
        "Returns all supported output formats with their identifiers, "
        "human-readable names, file suffixes and media types."
    ),
)
async def list_formats() -> List[FormatInfo]:
    # Render an empty document to read each formatter's suffix and media type
    sample = transform("", DEFAULT_BOLD_FRACTION)
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        output = formatter.format(sample)[0]
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=output.suffix,
            media_type=output.media_type,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the bionic-api console script."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
