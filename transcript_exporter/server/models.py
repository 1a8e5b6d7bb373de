"""Pydantic request/response models for the HTTP API.

WHY: The export endpoint receives an already-fetched transcript as JSON
and must validate it before rendering. Pydantic enforces field types at
runtime, accepts the camelCase field names the web client sends, and
generates the JSON Schema shown in /docs.

HOW: TranscriptPayload and SegmentPayload mirror the IR with camelCase
aliases; to_transcript() converts them to the core dataclasses. The CLI
reuses the same models to read transcript JSON files.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- camelCase aliases and snake_case names are both accepted
- Optional fields stay None when absent; no truthy/falsy defaults
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from transcript_exporter.core.ir import TranscriptData, TranscriptSegment


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class SegmentPayload(BaseModel):
    """One time-coded transcript segment."""

    text: str = Field(default="", description="Spoken text for this segment.")
    speaker: Optional[str] = Field(
        default=None,
        description="Speaker label, or null when attribution is unknown.",
    )
    start_time: float = Field(
        alias="startTime",
        description="Segment start in seconds from the beginning of the recording.",
    )
    end_time: float = Field(
        alias="endTime",
        description="Segment end in seconds from the beginning of the recording.",
    )

    model_config = {"populate_by_name": True}

    def to_segment(self) -> TranscriptSegment:
        return TranscriptSegment(
            text=self.text,
            speaker=self.speaker,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class TranscriptPayload(BaseModel):
    """A fetched transcript record with its ordered segments.

    RULES:
    - segments must already be in chronological order
    - text is used when segments is empty
    """

    id: str = Field(description="Transcript identifier.")
    name: str = Field(description="Display title; default heading and filename stem.")
    text: str = Field(default="", description="Full transcript text.")
    language: Optional[str] = Field(default=None, description="Language code, e.g. 'en'.")
    duration: Optional[float] = Field(default=None, description="Total duration in seconds.")
    created_at: Optional[datetime] = Field(
        default=None,
        alias="createdAt",
        description="Creation timestamp, shown in PDF and DOCX metadata.",
    )
    segments: List[SegmentPayload] = Field(
        default_factory=list,
        description="Ordered time-coded segments; may be empty.",
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "clx0q2b7k0000",
                    "name": "Q4 Strategy Review",
                    "text": "Welcome everyone. Thanks for having me.",
                    "language": "en",
                    "duration": 12.5,
                    "createdAt": "2025-01-15T10:30:00Z",
                    "segments": [
                        {"text": "Welcome everyone.", "speaker": "Alice", "startTime": 0.0, "endTime": 4.2},
                        {"text": "Thanks for having me.", "speaker": "Bob", "startTime": 4.5, "endTime": 7.9},
                    ],
                }
            ]
        },
    }

    def to_transcript(self) -> TranscriptData:
        return TranscriptData(
            id=self.id,
            name=self.name,
            text=self.text,
            language=self.language,
            duration=self.duration,
            created_at=self.created_at,
            segments=[segment.to_segment() for segment in self.segments],
        )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FormatInfo(BaseModel):
    """Description of an available export format."""

    key: str = Field(description="Format identifier used in the 'format' query parameter.")
    name: str = Field(description="Human-readable format name.")
    extension: str = Field(description="File extension of the download, without the dot.")
    media_type: str = Field(description="MIME type of the download.")


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
