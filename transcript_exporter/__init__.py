"""Transcript Exporter: turn stored transcripts into downloadable files.

WHY: A transcript is stored as flat text plus optional time-coded,
speaker-attributed segments. Users download it as plain text, SRT
subtitles, PDF, or a Word document, and every one of those outputs must
follow the same timestamp and speaker labelling rules.

HOW: Three layers: the IR (core/ir.py) built fresh per request, the
shared rendering rules (timestamps + segment grouping), and one pluggable
formatter per output format. export.py dispatches on a closed format enum
and derives the MIME type and download filename.

RULES:
- All formatters consume the same TranscriptData IR
- Formatters are pure: same input, same textual content and structure
- Defaulting a missing format is the caller's job, never the dispatcher's
"""

__version__ = "0.1.0"
