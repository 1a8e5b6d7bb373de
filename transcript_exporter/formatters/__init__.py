"""Output formatter registry: one formatter per export format.

WHY: The dispatcher, HTTP API and CLI need a single lookup to find the
formatter for a format key. A central dict makes the set of supported
formats explicit and easy to audit.

HOW: FORMATTERS maps format keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["pdf"]()``.

RULES:
- Keys are the ExportFormat values in export.py ("txt", "srt", "pdf",
  "docx"); export.py refuses to import if the two sets differ
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transcript_exporter.formatters.docx_document import DocxFormatter
from transcript_exporter.formatters.pdf import PDFFormatter
from transcript_exporter.formatters.plain_text import PlainTextFormatter
from transcript_exporter.formatters.srt import SRTFormatter

if TYPE_CHECKING:
    from transcript_exporter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "txt": PlainTextFormatter,
    "srt": SRTFormatter,
    "pdf": PDFFormatter,
    "docx": DocxFormatter,
}
