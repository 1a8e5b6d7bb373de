"""Abstract base formatter and output container.

WHY: Every export format consumes the same TranscriptData IR but
produces different content. This base class enforces one interface so
the dispatcher, HTTP API and CLI can drive any formatter generically.

HOW: BaseFormatter is an ABC with ``name``, ``extension`` and
``media_type`` properties and a ``format()`` method. FormatterOutput is a
plain dataclass bundling the content (str or bytes) with its MIME type
and extension.

RULES:
- Subclasses MUST implement ``name``, ``extension``, ``media_type`` and
  ``format()``
- ``format()`` returns exactly one FormatterOutput; no multi-file formats
- Text formats return str content, binary formats return bytes
- ``extension`` has no leading dot, e.g. ``"pdf"``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from transcript_exporter.core.ir import ExportOptions, TranscriptData


@dataclass
class FormatterOutput:
    """The single rendered payload produced by a formatter.

    Attributes:
        content: The payload as a string (TXT, SRT) or bytes (PDF, DOCX).
        media_type: MIME type for the content, e.g. ``"application/pdf"``.
        extension: Canonical file extension without the dot.
    """

    content: Union[str, bytes]
    media_type: str
    extension: str


class BaseFormatter(ABC):
    """Abstract base for all export formatters.

    To add a new output format:
    1. Add a member to ExportFormat in export.py
    2. Create a new file in formatters/ and subclass BaseFormatter
    3. Register it in FORMATTERS in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'PDF Document'."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without the dot, e.g. 'pdf'."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the produced content."""

    @abstractmethod
    def format(self, transcript: TranscriptData, options: ExportOptions) -> FormatterOutput:
        """Render the transcript IR into this format.

        Args:
            transcript: The transcript to export.
            options: Rendering switches and title override.

        Returns:
            A FormatterOutput with the payload and its MIME type.
        """

    def _output(self, content: Union[str, bytes]) -> FormatterOutput:
        return FormatterOutput(
            content=content,
            media_type=self.media_type,
            extension=self.extension,
        )
