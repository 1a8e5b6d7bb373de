"""Turn transcript segments into render-ready lines.

WHY: Plain text, PDF and DOCX all print one block per segment with the
same optional "[M:SS]" and "[speaker]:" prefixes. Computing those labels
once keeps the three outputs consistent and leaves each formatter with
layout only.

HOW: group_segments() walks the segments in input order and emits one
RenderLine per segment, attaching labels only when the matching option
is on and the data is present. With no segments it emits a single line
wrapping the transcript's flat text.

RULES:
- One line per segment, input order; no merging, filtering, reordering
- Speaker label only when requested AND the segment has a non-blank one
- Timestamp label only when requested, from start_time
- end_time < start_time: warning logged, end clamped to start, line kept
- Empty segments list: one synthetic line, no speaker, no timestamp
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from transcript_exporter.core.ir import TranscriptData, TranscriptSegment
from transcript_exporter.core.timestamps import clamp_seconds, format_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderLine:
    """One display line derived from a single segment."""

    text: str
    speaker: Optional[str] = None
    timestamp: Optional[str] = None
    start_time: float = 0.0
    end_time: float = 0.0


def _speaker_label(segment: TranscriptSegment) -> Optional[str]:
    if segment.speaker is None:
        return None
    label = segment.speaker.strip()
    return label if label else None


def safe_end_time(segment: TranscriptSegment, index: int) -> float:
    """Return the segment's end time, clamped to its start when inverted.

    Logs the anomaly so bad upstream timing data is visible without
    failing the export.
    """
    start = clamp_seconds(segment.start_time)
    end = clamp_seconds(segment.end_time)
    if segment.is_malformed:
        logger.warning(
            "Malformed segment %d: end_time %.3f precedes start_time %.3f; "
            "clamping duration to zero",
            index, segment.end_time, segment.start_time,
        )
        return start
    return max(end, start)


def group_segments(
    transcript: TranscriptData,
    include_speakers: bool = False,
    include_timestamps: bool = False,
) -> List[RenderLine]:
    """Build the ordered list of render lines for a transcript.

    Args:
        transcript: The transcript IR.
        include_speakers: Attach speaker labels where present.
        include_timestamps: Attach "[M:SS]" labels from segment starts.

    Returns:
        One RenderLine per segment, or a single fallback line for the
        flat text when the transcript has no segments.
    """
    if not transcript.segments:
        return [RenderLine(text=transcript.text)]

    lines: List[RenderLine] = []
    for index, segment in enumerate(transcript.segments):
        start = clamp_seconds(segment.start_time)
        end = safe_end_time(segment, index)
        lines.append(RenderLine(
            text=segment.text,
            speaker=_speaker_label(segment) if include_speakers else None,
            timestamp=format_timestamp(start) if include_timestamps else None,
            start_time=start,
            end_time=end,
        ))
    return lines


def render_prefix(line: RenderLine) -> str:
    """Return the "[M:SS] [speaker]: " prefix for a line (may be empty)."""
    parts: List[str] = []
    if line.timestamp is not None:
        parts.append("[{}] ".format(line.timestamp))
    if line.speaker is not None:
        parts.append("[{}]: ".format(line.speaker))
    return "".join(parts)


def render_line_text(line: RenderLine) -> str:
    """Return the full display text of a line, prefix included."""
    return render_prefix(line) + line.text
