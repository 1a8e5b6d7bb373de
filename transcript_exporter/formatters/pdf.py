"""PDF transcript formatter using ReportLab.

WHY: Users share and print transcripts as PDF. The document needs a
title, a small metadata block and readable paragraphs, and it must cope
with transcripts of any length.

HOW: Builds a platypus story (title, metadata lines, then one Paragraph
per render line) and lets SimpleDocTemplate flow it across pages into an
in-memory buffer. Each page gets a centred "Page N" footer. Page size and
font are constructor arguments, so each formatter instance owns its own
renderer settings.

RULES:
- Title from ExportOptions.title, falling back to TranscriptData.name
- Metadata: "Created:" always when known; "Language:" and "Duration:"
  only when present
- Body lines use the same "[M:SS] [speaker]: " prefixes as plain text;
  prefixes are bold, text is XML-escaped for paragraph markup
- Pagination is left to ReportLab; no manual page breaks
- No glyph sanitization; a TTF font may be registered for other scripts.
  Each font file gets its own registry name derived from its path, so
  instances with different fonts never share a face
- Any backend error becomes RenderFailure; no partial PDF is returned
- Media type: "application/pdf"
"""

from __future__ import annotations

import hashlib
import io
import logging
import os
from typing import Any, List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from transcript_exporter.config import PDF_FONT_PATH, load_page_size
from transcript_exporter.core.grouping import RenderLine, group_segments, render_prefix
from transcript_exporter.core.ir import ExportOptions, TranscriptData
from transcript_exporter.core.timestamps import format_timestamp
from transcript_exporter.errors import RenderFailure
from transcript_exporter.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

_DEFAULT_FONT = "Helvetica"
_DEFAULT_BOLD_FONT = "Helvetica-Bold"
_CUSTOM_FONT_PREFIX = "TranscriptBody"


def _font_name_for(font_path: str) -> str:
    """Registry name for a TTF file, unique per resolved path."""
    resolved = os.path.realpath(font_path)
    digest = hashlib.sha1(resolved.encode("utf-8")).hexdigest()[:12]
    return "{}-{}".format(_CUSTOM_FONT_PREFIX, digest)


def _metadata_lines(transcript: TranscriptData) -> List[Tuple[str, str]]:
    """Return (label, value) pairs for the metadata block."""
    lines: List[Tuple[str, str]] = []
    if transcript.created_at is not None:
        lines.append(("Created", transcript.created_at.strftime("%Y-%m-%d %H:%M")))
    if transcript.language is not None and transcript.language.strip():
        lines.append(("Language", transcript.language.strip()))
    if transcript.duration is not None:
        lines.append(("Duration", format_timestamp(transcript.duration)))
    return lines


class PDFFormatter(BaseFormatter):
    """PDF export formatter using ReportLab.

    Args:
        pagesize: (width, height) in points. Defaults to the configured
                  TRANSCRIPT_EXPORT_PDF_PAGE_SIZE.
        font_path: Optional TrueType font file for body and title text.
                   Defaults to TRANSCRIPT_EXPORT_PDF_FONT_PATH.
    """

    def __init__(
        self,
        pagesize: Optional[Tuple[float, float]] = None,
        font_path: Optional[str] = None,
    ) -> None:
        self.pagesize = pagesize if pagesize is not None else load_page_size()
        self.font_path = font_path if font_path is not None else PDF_FONT_PATH

    @property
    def name(self) -> str:
        return "PDF Document"

    @property
    def extension(self) -> str:
        return "pdf"

    @property
    def media_type(self) -> str:
        return "application/pdf"

    def format(self, transcript: TranscriptData, options: ExportOptions) -> FormatterOutput:
        title = options.resolve_title(transcript)
        lines = group_segments(
            transcript,
            include_speakers=options.include_speakers,
            include_timestamps=options.include_timestamps,
        )

        buffer = io.BytesIO()
        try:
            regular, bold = self._fonts()
            doc = SimpleDocTemplate(
                buffer,
                pagesize=self.pagesize,
                topMargin=1 * inch,
                bottomMargin=1 * inch,
                leftMargin=1 * inch,
                rightMargin=1 * inch,
                title=title,
                invariant=1,
            )
            story = self._build_story(transcript, title, lines, regular, bold)
            doc.build(story, onFirstPage=self._add_page_number, onLaterPages=self._add_page_number)
        except RenderFailure:
            raise
        except Exception as exc:
            logger.exception("PDF rendering failed for transcript %s", transcript.id)
            raise RenderFailure(self.extension, str(exc)) from exc

        return self._output(buffer.getvalue())

    def _fonts(self) -> Tuple[str, str]:
        """Register the configured TTF font, if any, and return font names."""
        if not self.font_path:
            return _DEFAULT_FONT, _DEFAULT_BOLD_FONT
        # pdfmetrics is process-wide; one name per font file keeps instances apart
        font_name = _font_name_for(self.font_path)
        if font_name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(font_name, self.font_path))
            except Exception as exc:
                raise RenderFailure(
                    self.extension, "cannot load font {}: {}".format(self.font_path, exc)
                ) from exc
            logger.debug("Registered PDF font %s from %s", font_name, self.font_path)
        # One face for both weights; bold is not synthesized for TTF fonts
        return font_name, font_name

    def _build_story(
        self,
        transcript: TranscriptData,
        title: str,
        lines: List[RenderLine],
        regular: str,
        bold: str,
    ) -> List[Any]:
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            "TranscriptTitle",
            parent=styles["Title"],
            fontName=bold,
        )
        meta_style = ParagraphStyle(
            "Metadata",
            parent=styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#6b7280"),
            fontName=regular,
        )
        text_style = ParagraphStyle(
            "TranscriptText",
            parent=styles["Normal"],
            fontSize=10,
            leading=14,
            spaceAfter=8,
            fontName=regular,
        )

        story: List[Any] = [Paragraph(escape(title), title_style)]
        for label, value in _metadata_lines(transcript):
            story.append(Paragraph(
                '<font name="{}">{}:</font> {}'.format(bold, label, escape(value)),
                meta_style,
            ))
        story.append(Spacer(1, 0.3 * inch))

        for line in lines:
            prefix = render_prefix(line)
            body = escape(line.text)
            if prefix:
                markup = '<font name="{}">{}</font>{}'.format(bold, escape(prefix), body)
            else:
                markup = body
            if not markup.strip():
                story.append(Spacer(1, text_style.leading))
                continue
            story.append(Paragraph(markup, text_style))

        return story

    @staticmethod
    def _add_page_number(canvas_obj: canvas.Canvas, doc: SimpleDocTemplate) -> None:
        """Draw a centred "Page N" footer on the current page."""
        page_width = doc.pagesize[0]
        canvas_obj.saveState()
        canvas_obj.setFont(_DEFAULT_FONT, 9)
        canvas_obj.setFillColor(colors.HexColor("#6b7280"))
        canvas_obj.drawCentredString(
            page_width / 2.0,
            0.5 * inch,
            "Page {}".format(canvas_obj.getPageNumber()),
        )
        canvas_obj.restoreState()
