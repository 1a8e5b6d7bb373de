"""Shared test fixtures for the transcript_exporter test suite.

WHY: Every formatter, the dispatcher, the HTTP API and the CLI need the
same small transcripts. Centralizing them here keeps expected strings in
one place and makes the tests easy to read side by side.

HOW: Pytest fixtures provide a three-segment diarized transcript, a
transcript with no segments (flat text only), one with inverted segment
timing, and the JSON body shape the HTTP API and CLI accept.

RULES:
- Segment times are chosen to exercise M:SS and H:MM:SS display
- Speaker labels include one None to cover unknown attribution
- created_at is fixed so document metadata is reproducible
"""

from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from transcript_exporter.core.ir import ExportOptions, TranscriptData, TranscriptSegment

CREATED_AT = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def sample_transcript():
    """Three segments: Alice, Bob, then an unattributed line past one hour."""
    return TranscriptData(
        id="tr_001",
        name="Q4 Strategy: Review!!",
        text="Welcome everyone. Thanks for having me. Let's get started.",
        language="en",
        duration=3725.0,
        created_at=CREATED_AT,
        segments=[
            TranscriptSegment(text="Welcome everyone.", speaker="Alice", start_time=0.0, end_time=4.25),
            TranscriptSegment(text="Thanks for having me.", speaker="Bob", start_time=65.5, end_time=70.0),
            TranscriptSegment(text="Let's get started.", speaker=None, start_time=3661.0, end_time=3664.5),
        ],
    )


@pytest.fixture
def flat_transcript():
    """A transcript whose upstream result had no time-coded segments."""
    return TranscriptData(
        id="tr_002",
        name="Voice memo",
        text="Pick up groceries and call the landlord about the heating.",
        language=None,
        duration=None,
        created_at=None,
        segments=[],
    )


@pytest.fixture
def malformed_transcript():
    """A transcript whose second segment ends before it starts."""
    return TranscriptData(
        id="tr_003",
        name="Broken timing",
        text="",
        segments=[
            TranscriptSegment(text="First line.", speaker="A", start_time=0.0, end_time=2.0),
            TranscriptSegment(text="Backwards line.", speaker="B", start_time=10.0, end_time=5.0),
            TranscriptSegment(text="Last line.", speaker="A", start_time=12.0, end_time=14.0),
        ],
    )


@pytest.fixture
def default_options():
    return ExportOptions()


@pytest.fixture
def transcript_payload() -> Dict[str, Any]:
    """The camelCase JSON body accepted by POST /exports and the CLI."""
    return {
        "id": "tr_001",
        "name": "Q4 Strategy: Review!!",
        "text": "Welcome everyone. Thanks for having me.",
        "language": "en",
        "duration": 70.0,
        "createdAt": "2025-01-15T10:30:00Z",
        "segments": [
            {"text": "Welcome everyone.", "speaker": "Alice", "startTime": 0.0, "endTime": 4.25},
            {"text": "Thanks for having me.", "speaker": "Bob", "startTime": 65.5, "endTime": 70.0},
        ],
    }
