"""Logging configuration for the CLI and HTTP entry points.

WHY: Library modules only create module-level loggers; somebody has to
attach a handler. The CLI and the API server do that once at startup,
with the level taken from TRANSCRIPT_EXPORT_LOG_LEVEL.

RULES:
- Logs go to stderr so CLI stdout output stays pipeable
- Library modules never call configure_logging() themselves
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from transcript_exporter.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stderr handler to the root logger at the given level."""
    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr, level=numeric)
