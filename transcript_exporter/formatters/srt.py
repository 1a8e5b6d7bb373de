"""SubRip (SRT) subtitle formatter.

WHY: Video editors and players import transcripts as subtitles. SRT is
the lowest common denominator: numbered cues, a time range per cue, and
the cue text.

HOW: One cue per segment in input order. Times use the fixed
"HH:MM:SS,mmm" form from core.timestamps. Speaker labels are prepended as
"Speaker: " when requested; include_timestamps is ignored because every
cue already carries its time range.

RULES:
- Cue indices are 1-based and contiguous, whatever the source ordering
- Every cue is followed by a blank line
- end_time < start_time: end is clamped to start (warning logged)
- No segments: output is the empty string, not an error
- Media type: "application/x-subrip"
"""

from __future__ import annotations

from typing import List

from transcript_exporter.core.grouping import safe_end_time
from transcript_exporter.core.ir import ExportOptions, TranscriptData
from transcript_exporter.core.timestamps import clamp_seconds, format_srt_timestamp
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput


class SRTFormatter(BaseFormatter):
    """Formatter that produces one SRT cue per transcript segment."""

    @property
    def name(self) -> str:
        return "SubRip Subtitles"

    @property
    def extension(self) -> str:
        return "srt"

    @property
    def media_type(self) -> str:
        return "application/x-subrip"

    def format(self, transcript: TranscriptData, options: ExportOptions) -> FormatterOutput:
        cues: List[str] = []
        for index, segment in enumerate(transcript.segments):
            start = clamp_seconds(segment.start_time)
            end = safe_end_time(segment, index)

            text = segment.text.strip()
            speaker = segment.speaker.strip() if segment.speaker is not None else ""
            if options.include_speakers and speaker:
                text = "{}: {}".format(speaker, text)

            cues.append("{}\n{} --> {}\n{}\n".format(
                index + 1,
                format_srt_timestamp(start),
                format_srt_timestamp(end),
                text,
            ))

        return self._output("\n".join(cues) + ("\n" if cues else ""))
