"""Exception hierarchy for transcript export.

WHY: Callers must tell a client mistake (unsupported format, HTTP 400)
apart from a server-side rendering failure (HTTP 500) without parsing
messages.

HOW: ExportError is the common base. InvalidFormat also subclasses
ValueError so generic argument validation code still catches it.
RenderFailure chains the backend exception via ``raise ... from``.

RULES:
- Inconsistent segment timing is logged, never raised
- Partial output is never attached to an exception
"""

from __future__ import annotations

from typing import Iterable, Optional


class ExportError(Exception):
    """Base exception for all export failures."""


class InvalidFormat(ExportError, ValueError):
    """Raised when the requested export format is not supported."""

    def __init__(self, value: object, supported: Iterable[str]) -> None:
        self.value = value
        self.supported = sorted(supported)
        super().__init__(
            "Invalid export format {!r}. Use one of: {}".format(
                value, ", ".join(self.supported)
            )
        )


class RenderFailure(ExportError):
    """Raised when a format backend cannot produce output."""

    def __init__(self, fmt: str, reason: Optional[str] = None) -> None:
        self.format = fmt
        message = "Failed to render {} export".format(fmt)
        if reason:
            message = "{}: {}".format(message, reason)
        super().__init__(message)
