"""Configuration constants, bold-fraction control rules, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The bold-fraction range and step mirror the
slider the reading UI offers; the CLI and HTTP API enforce the same
rules so every calling layer behaves alike.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values, each overridable by a BIONIC_* environment
variable. snap_bold_fraction() and require_text() are the calling-layer
checks that run before the core engine is invoked.

RULES:
- The core engine never imports this module — it takes the fraction as
  an explicit argument and clamps on its own
- Default fraction 0.4, range [0.1, 0.7], step 0.05
- Blank input is rejected here, never by the engine
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import math
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            "Invalid value for {}: {!r} is not a number.".format(name, raw)
        ) from None


# ---------------------------------------------------------------------------
# Bold fraction control
# ---------------------------------------------------------------------------

DEFAULT_BOLD_FRACTION = _env_float("BIONIC_DEFAULT_BOLD_FRACTION", 0.4)
MIN_BOLD_FRACTION = _env_float("BIONIC_MIN_BOLD_FRACTION", 0.1)
MAX_BOLD_FRACTION = _env_float("BIONIC_MAX_BOLD_FRACTION", 0.7)
BOLD_FRACTION_STEP = _env_float("BIONIC_BOLD_FRACTION_STEP", 0.05)

# ---------------------------------------------------------------------------
# Input / output defaults
# ---------------------------------------------------------------------------

DEFAULT_OUTPUT_FORMAT = os.getenv("BIONIC_DEFAULT_FORMAT", "html")
MAX_INPUT_CHARS = int(_env_float("BIONIC_MAX_INPUT_CHARS", 200000))

SUPPORTED_INPUT_SUFFIXES: set[str] = {".txt", ".text", ".md"}
"""Input file extensions accepted by the CLI (lowercase, with dot)."""

EMPTY_INPUT_MESSAGE = "Please enter some text to convert."


def snap_bold_fraction(value: float) -> float:
    """Clamp a bold fraction into the allowed range and snap it to the step.

    WHY: The reading UI only offers [0.1, 0.7] in 0.05 increments. Callers
    that accept a free-form number (CLI flag, JSON body) snap it the same
    way a slider would, so 0.42 becomes 0.4 and 0.9 becomes 0.7.

    HOW: Clamp into [MIN, MAX], round to the nearest multiple of STEP
    measured from MIN, then round to 10 decimals to drop float noise.

    RULES:
    - Result is always within [MIN_BOLD_FRACTION, MAX_BOLD_FRACTION]
    - Result is MIN + k * STEP for an integer k
    - NaN → ValueError
    """
    if math.isnan(value):
        raise ValueError("Bold fraction must be a number, got NaN.")
    clamped = min(max(value, MIN_BOLD_FRACTION), MAX_BOLD_FRACTION)
    if BOLD_FRACTION_STEP <= 0:
        return clamped
    steps = round((clamped - MIN_BOLD_FRACTION) / BOLD_FRACTION_STEP)
    snapped = MIN_BOLD_FRACTION + steps * BOLD_FRACTION_STEP
    return round(min(snapped, MAX_BOLD_FRACTION), 10)


def require_text(text: str) -> str:
    """Reject empty or whitespace-only input before conversion.

    RULES:
    - Raises ValueError with EMPTY_INPUT_MESSAGE when text.strip() is empty
    - Returns the text unchanged otherwise (no stripping)
    """
    if not text or not text.strip():
        raise ValueError(EMPTY_INPUT_MESSAGE)
    return text


# ---------------------------------------------------------------------------
# HTTP API
# ---------------------------------------------------------------------------

API_HOST = os.getenv("BIONIC_API_HOST", "127.0.0.1")
API_PORT = int(_env_float("BIONIC_API_PORT", 8000))
