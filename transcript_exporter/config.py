"""Configuration constants, PDF page sizes, and .env loading.

WHY: Centralizes every tunable value of the exporter so it is easy to
find and override. The boundary default format, log level, PDF page size
and optional PDF font all come from the environment; the filename rules
are plain constants next to them.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read through os.getenv(). load_page_size() turns
the configured page size name into a reportlab (width, height) tuple.

RULES:
- DEFAULT_EXPORT_FORMAT is only used by the HTTP and CLI boundaries;
  the dispatcher itself never substitutes a default
- PAGE_SIZES maps lowercase names to reportlab page sizes
- Unknown page size names raise ValueError with the accepted names
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv
from reportlab.lib.pagesizes import A4, LETTER

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Boundary defaults
# ---------------------------------------------------------------------------

DEFAULT_EXPORT_FORMAT = os.getenv("TRANSCRIPT_EXPORT_DEFAULT_FORMAT", "txt").strip().lower()
LOG_LEVEL = os.getenv("TRANSCRIPT_EXPORT_LOG_LEVEL", "INFO").strip().upper()

API_HOST = os.getenv("TRANSCRIPT_EXPORT_HOST", "0.0.0.0")
API_PORT = int(os.getenv("TRANSCRIPT_EXPORT_PORT", "8000"))

# ---------------------------------------------------------------------------
# Filenames
# ---------------------------------------------------------------------------

FILENAME_MAX_LENGTH = 50
"""Maximum length of the suggested filename stem (extension excluded)."""

FALLBACK_FILENAME_STEM = "transcript"
"""Stem used when a title has no alphanumeric characters at all."""

FALLBACK_TITLE = "Transcript"

# ---------------------------------------------------------------------------
# PDF rendering
# ---------------------------------------------------------------------------

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "letter": LETTER,
    "a4": A4,
}

PDF_PAGE_SIZE = os.getenv("TRANSCRIPT_EXPORT_PDF_PAGE_SIZE", "letter").strip().lower()
PDF_FONT_PATH: Optional[str] = os.getenv("TRANSCRIPT_EXPORT_PDF_FONT_PATH", "").strip() or None


def load_page_size(name: Optional[str] = None) -> Tuple[float, float]:
    """Resolve a page size name to a reportlab (width, height) tuple.

    WHY: The page size is configured as a human-readable name in .env,
    but reportlab needs point dimensions.

    RULES:
    - None falls back to TRANSCRIPT_EXPORT_PDF_PAGE_SIZE
    - Lookup is case-insensitive
    - Raises ValueError for unknown names
    """
    key = (name if name is not None else PDF_PAGE_SIZE).strip().lower()
    if key not in PAGE_SIZES:
        raise ValueError(
            "Unknown PDF page size '{}'. Supported: {}".format(
                key, ", ".join(sorted(PAGE_SIZES))
            )
        )
    return PAGE_SIZES[key]
