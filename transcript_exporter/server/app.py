"""FastAPI application exposing transcript export over HTTP.

WHY: The dashboard backend fetches a transcript, checks ownership, and
then needs a download response. This app is that last step: it takes the
fetched transcript as JSON, renders the requested format, and returns it
with Content-Type and Content-Disposition headers set.

HOW: POST /exports validates the body with pydantic, resolves the format
(defaulting a missing one to TRANSCRIPT_EXPORT_DEFAULT_FORMAT), and calls
export(). The route is synchronous so FastAPI runs the PDF/DOCX rendering
in its threadpool. GET /formats and GET /health are informational.

RULES:
- Missing format -> configured default; unknown format -> 400
- Rendering failure -> 500 with a generic message; details go to the log
- Error responses use the ErrorResponse schema
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from transcript_exporter import __version__
from transcript_exporter.config import API_HOST, API_PORT, DEFAULT_EXPORT_FORMAT
from transcript_exporter.core.ir import ExportOptions
from transcript_exporter.errors import InvalidFormat, RenderFailure
from transcript_exporter.export import CONTENT_TYPES, FILE_EXTENSIONS, ExportFormat, export
from transcript_exporter.formatters import FORMATTERS
from transcript_exporter.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    TranscriptPayload,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transcript Exporter API",
    description=(
        "Render a fetched transcript as plain text, SRT subtitles, PDF, or "
        "a Word document, with optional timestamps and speaker labels."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Endpoints: Exports
# ---------------------------------------------------------------------------


@app.post(
    "/exports",
    tags=["exports"],
    summary="Export a transcript",
    description=(
        "Render the transcript in the request body into the requested format "
        "and return it as a file download."
    ),
    responses={
        200: {"description": "The rendered file, served as an attachment."},
        400: {"model": ErrorResponse, "description": "Unsupported export format"},
        500: {"model": ErrorResponse, "description": "Rendering backend failed"},
    },
)
def create_export(
    transcript: TranscriptPayload,
    format: Annotated[
        Optional[str],
        Query(description="Export format: txt, srt, pdf, or docx. Defaults to txt."),
    ] = None,
    timestamps: Annotated[
        bool,
        Query(description="Prefix each segment with its [M:SS] start time."),
    ] = False,
    speakers: Annotated[
        bool,
        Query(description="Prefix each segment with its speaker label."),
    ] = False,
    title: Annotated[
        Optional[str],
        Query(description="Heading override; defaults to the transcript name."),
    ] = None,
) -> Response:
    requested = format if format else DEFAULT_EXPORT_FORMAT
    options = ExportOptions(
        include_timestamps=timestamps,
        include_speakers=speakers,
        title=title,
    )

    try:
        result = export(transcript.to_transcript(), requested, options)
    except InvalidFormat as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except RenderFailure:
        logger.exception("Export failed for transcript %s", transcript.id)
        raise HTTPException(status_code=500, detail="Failed to export transcript")

    return Response(
        content=result.payload,
        media_type=result.content_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(result.filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available export formats",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(
            key=member.value,
            name=FORMATTERS[member.value]().name,
            extension=FILE_EXTENSIONS[member],
            media_type=CONTENT_TYPES[member],
        )
        for member in ExportFormat
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the transcript-export-api console script."""
    import uvicorn

    from transcript_exporter.logging_setup import configure_logging

    configure_logging()
    uvicorn.run(app, host=API_HOST, port=API_PORT)
