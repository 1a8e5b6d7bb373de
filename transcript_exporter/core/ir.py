"""Intermediate representation dataclasses for exportable transcripts.

WHY: The persistence layer hands over a transcript record with ordered
segments; every output format needs the same fields (title, metadata,
segment text, speaker, timing) but renders them differently. The IR is
the single well-typed shape all formatters consume.

HOW: Three dataclasses:
  TranscriptSegment : one time-coded span of text, optionally attributed
  TranscriptData    : the full record: flat text, metadata, segments
  ExportOptions     : per-call rendering switches and title override

RULES:
- Built fresh per export call; formatters never mutate them
- segments are in chronological order; the list may be empty
- text is the fallback when segments is empty; no reconciliation
- speaker, language, duration and created_at are Optional; every
  formatter defines its behavior for the None case
- All times are float seconds from the start of the recording
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from transcript_exporter.config import FALLBACK_TITLE


@dataclass
class TranscriptSegment:
    """One time-coded span of transcript text.

    RULES:
    - text may be empty (renders as a blank line)
    - speaker is None when attribution is unknown or diarization was off
    - end_time >= start_time is expected but not enforced
    """

    text: str
    start_time: float
    end_time: float
    speaker: Optional[str] = None

    @property
    def is_malformed(self) -> bool:
        """True when the segment ends before it starts."""
        return self.end_time < self.start_time


@dataclass
class TranscriptData:
    """A persisted speech-to-text result, ready to export.

    WHY: This is the top-level container formatters receive. It holds
    everything needed for any output: title, metadata block, flat text
    and time-coded segments.

    RULES:
    - name is the display title and the default filename stem
    - duration is total length in seconds, or None when unknown
    - created_at feeds the metadata block of PDF and DOCX output
    """

    id: str
    name: str
    text: str
    language: Optional[str] = None
    duration: Optional[float] = None
    created_at: Optional[datetime] = None
    segments: List[TranscriptSegment] = field(default_factory=list)


@dataclass
class ExportOptions:
    """Rendering switches for a single export call.

    RULES:
    - include_timestamps adds "[M:SS]" markers (ignored by SRT, where
      every cue already carries its time range)
    - include_speakers adds speaker labels where a segment has one
    - title overrides TranscriptData.name as the document heading
    """

    include_timestamps: bool = False
    include_speakers: bool = False
    title: Optional[str] = None

    def resolve_title(self, transcript: TranscriptData) -> str:
        """Return the heading to render for this transcript."""
        if self.title is not None and self.title.strip():
            return self.title.strip()
        if transcript.name.strip():
            return transcript.name.strip()
        return FALLBACK_TITLE
