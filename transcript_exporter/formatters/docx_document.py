"""Word-processor (DOCX) transcript formatter using python-docx.

WHY: Many users edit transcripts in Word or Google Docs before
publishing. The DOCX export mirrors the PDF layout but stays editable.

HOW: Creates a fresh python-docx Document, adds a level-0 heading with
the title, one paragraph per metadata field, then one paragraph per
render line. Timestamp and speaker prefixes are bold runs followed by a
plain run with the segment text. The document is saved to an in-memory
buffer.

RULES:
- Structure matches the PDF formatter: title, metadata, one paragraph
  per segment with identical prefix rules
- Core properties: title from the resolved title, created from
  TranscriptData.created_at when known
- Characters XML 1.0 cannot carry (NUL, vertical tab, form feed and the
  other C0 controls except tab, newline and carriage return) are removed
  before text reaches python-docx, so input TXT, SRT and PDF accept is
  never rejected here
- Any backend error becomes RenderFailure; no partial document is returned
- Media type: the Office Open XML wordprocessing MIME type
"""

from __future__ import annotations

import io
import logging
import re

from docx import Document
from docx.shared import Pt, RGBColor

from transcript_exporter.core.grouping import group_segments, render_prefix
from transcript_exporter.core.ir import ExportOptions, TranscriptData
from transcript_exporter.core.timestamps import format_timestamp
from transcript_exporter.errors import RenderFailure
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_METADATA_COLOR = RGBColor(0x6B, 0x72, 0x80)

_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _xml_safe(text: str) -> str:
    """Drop characters that cannot appear in an XML 1.0 document."""
    return _XML_INVALID_CHARS.sub("", text)


class DocxFormatter(BaseFormatter):
    """Formatter that produces an editable Word document."""

    @property
    def name(self) -> str:
        return "Word Document"

    @property
    def extension(self) -> str:
        return "docx"

    @property
    def media_type(self) -> str:
        return DOCX_MEDIA_TYPE

    def format(self, transcript: TranscriptData, options: ExportOptions) -> FormatterOutput:
        title = _xml_safe(options.resolve_title(transcript))
        lines = group_segments(
            transcript,
            include_speakers=options.include_speakers,
            include_timestamps=options.include_timestamps,
        )

        buffer = io.BytesIO()
        try:
            doc = Document()
            doc.core_properties.title = title
            if transcript.created_at is not None:
                doc.core_properties.created = transcript.created_at
                doc.core_properties.modified = transcript.created_at

            doc.add_heading(title, level=0)

            if transcript.created_at is not None:
                self._add_metadata(doc, "Created", transcript.created_at.strftime("%Y-%m-%d %H:%M"))
            if transcript.language is not None and transcript.language.strip():
                self._add_metadata(doc, "Language", _xml_safe(transcript.language.strip()))
            if transcript.duration is not None:
                self._add_metadata(doc, "Duration", format_timestamp(transcript.duration))

            for line in lines:
                paragraph = doc.add_paragraph()
                prefix = render_prefix(line)
                if prefix:
                    paragraph.add_run(_xml_safe(prefix)).bold = True
                paragraph.add_run(_xml_safe(line.text))

            doc.save(buffer)
        except Exception as exc:
            logger.exception("DOCX rendering failed for transcript %s", transcript.id)
            raise RenderFailure(self.extension, str(exc)) from exc

        return self._output(buffer.getvalue())

    @staticmethod
    def _add_metadata(doc, label: str, value: str) -> None:
        paragraph = doc.add_paragraph()
        label_run = paragraph.add_run("{}: ".format(label))
        label_run.bold = True
        value_run = paragraph.add_run(value)
        for run in (label_run, value_run):
            run.font.size = Pt(9)
            run.font.color.rgb = _METADATA_COLOR
