"""Plain text transcript formatter.

WHY: The simplest export: a readable transcript for review, archival
and pasting into other tools. It is also the baseline every other
formatter's line rules are checked against.

HOW: Writes the title, a blank line, then one block per render line from
the segment grouper, blocks separated by a blank line. The timestamp and
speaker prefixes come from render_line_text() so TXT, PDF and DOCX agree.

RULES:
- First line is the resolved title, followed by a blank line
- One block per segment, double newline between blocks
- "[M:SS] " prefix when timestamps are on, "[speaker]: " when speakers
  are on and the segment has one
- No escaping; output ends with a single newline after the last block
- An empty segment is an empty block, so it still shows as a blank line
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from transcript_exporter.core.grouping import group_segments, render_line_text
from transcript_exporter.core.ir import ExportOptions, TranscriptData
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces a titled, blank-line separated text file."""

    @property
    def name(self) -> str:
        return "Plain Text"

    @property
    def extension(self) -> str:
        return "txt"

    @property
    def media_type(self) -> str:
        return "text/plain"

    def format(self, transcript: TranscriptData, options: ExportOptions) -> FormatterOutput:
        lines = group_segments(
            transcript,
            include_speakers=options.include_speakers,
            include_timestamps=options.include_timestamps,
        )
        blocks: List[str] = [render_line_text(line).rstrip() for line in lines]

        content = options.resolve_title(transcript) + "\n\n" + "\n\n".join(blocks) + "\n"
        return self._output(content)
