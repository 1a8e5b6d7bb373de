"""Export dispatcher, the public entry point of the package.

WHY: Callers hold a transcript, a format selector and some options, and
need back three things to build an HTTP download: the payload, its MIME
type and a safe filename. Keeping that in one function means the HTTP
layer and the CLI cannot drift apart.

HOW: ExportFormat is a closed str enum. export() coerces the selector to
the enum (raising InvalidFormat for anything else), looks up the
formatter, renders, and derives the filename from the resolved title.

RULES:
- Supported formats: txt, srt, pdf, docx; nothing else and no defaulting
- Formatter errors that are not ExportError are wrapped in RenderFailure
- Partial output is never returned
- Filename: non-alphanumerics -> "_", runs collapsed, edges stripped,
  stem truncated to 50 chars, "<stem>.<ext>"
"""

from __future__ import annotations

import enum
import logging
import re
from typing import Mapping, NamedTuple, Optional, Union

from transcript_exporter.config import FALLBACK_FILENAME_STEM, FILENAME_MAX_LENGTH
from transcript_exporter.core.ir import ExportOptions, TranscriptData
from transcript_exporter.errors import ExportError, InvalidFormat, RenderFailure
from transcript_exporter.formatters import FORMATTERS
from transcript_exporter.formatters.base import BaseFormatter

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_UNDERSCORE_RUNS = re.compile(r"_+")


class ExportFormat(str, enum.Enum):
    """Supported export formats.

    HOW: Inherits from str so members compare equal to their wire values
    and serialize cleanly to JSON and query strings.
    """

    TXT = "txt"
    SRT = "srt"
    PDF = "pdf"
    DOCX = "docx"

    @property
    def media_type(self) -> str:
        return CONTENT_TYPES[self]

    @property
    def extension(self) -> str:
        return FILE_EXTENSIONS[self]

    @classmethod
    def parse(cls, value: Union[str, "ExportFormat", None]) -> "ExportFormat":
        """Coerce a selector to an ExportFormat or raise InvalidFormat.

        Matching is exact and case-sensitive; None and "" are invalid.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidFormat(value, SUPPORTED_FORMATS)


CONTENT_TYPES = {
    ExportFormat.TXT: "text/plain",
    ExportFormat.SRT: "application/x-subrip",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

FILE_EXTENSIONS = {
    ExportFormat.TXT: "txt",
    ExportFormat.SRT: "srt",
    ExportFormat.PDF: "pdf",
    ExportFormat.DOCX: "docx",
}

SUPPORTED_FORMATS = tuple(member.value for member in ExportFormat)

for _member in ExportFormat:
    if _member not in CONTENT_TYPES or _member not in FILE_EXTENSIONS or _member.value not in FORMATTERS:
        raise ImportError("Export format {!r} is not fully registered".format(_member.value))
if set(FORMATTERS) != set(SUPPORTED_FORMATS):
    raise ImportError("FORMATTERS keys do not match ExportFormat members")


class ExportResult(NamedTuple):
    """Rendered export: payload plus the headers the caller needs."""

    payload: Union[str, bytes]
    content_type: str
    filename: str


def suggest_filename(title: str, fmt: Union[str, ExportFormat]) -> str:
    """Derive a download filename from a title.

    >>> suggest_filename("Q4 Strategy: Review!!", "pdf")
    'Q4_Strategy_Review.pdf'
    """
    export_format = ExportFormat.parse(fmt)
    stem = _UNDERSCORE_RUNS.sub("_", _NON_ALNUM.sub("_", title)).strip("_")
    stem = stem[:FILENAME_MAX_LENGTH].rstrip("_")
    if not stem:
        stem = FALLBACK_FILENAME_STEM
    return "{}.{}".format(stem, export_format.extension)


def export(
    transcript: TranscriptData,
    fmt: Union[str, ExportFormat, None],
    options: Optional[ExportOptions] = None,
    formatters: Optional[Mapping[str, BaseFormatter]] = None,
) -> ExportResult:
    """Render a transcript into one export format.

    Args:
        transcript: The transcript to export.
        fmt: One of "txt", "srt", "pdf", "docx" (or an ExportFormat).
        options: Rendering switches; defaults to ExportOptions().
        formatters: Optional pre-built formatter instances keyed by
                    format, e.g. a PDFFormatter with a custom font. Formats
                    missing from the mapping use a fresh default instance.

    Returns:
        ExportResult(payload, content_type, filename).

    Raises:
        InvalidFormat: fmt is not a supported format.
        RenderFailure: the format backend could not produce output.
    """
    export_format = ExportFormat.parse(fmt)
    options = options if options is not None else ExportOptions()

    formatter = None
    if formatters is not None:
        formatter = formatters.get(export_format.value)
    if formatter is None:
        formatter = FORMATTERS[export_format.value]()

    try:
        output = formatter.format(transcript, options)
    except ExportError:
        raise
    except Exception as exc:
        logger.exception("Export of transcript %s to %s failed", transcript.id, export_format.value)
        raise RenderFailure(export_format.value, str(exc)) from exc

    filename = suggest_filename(options.resolve_title(transcript), export_format)
    logger.info(
        "Exported transcript %s as %s (%d segments)",
        transcript.id, filename, len(transcript.segments),
    )
    return ExportResult(
        payload=output.content,
        content_type=export_format.media_type,
        filename=filename,
    )
