"""Command-line interface for the Transcript Exporter.

WHY: Operators and scripts need to export a transcript without going
through the web dashboard, e.g. for bulk archival or debugging a bad
export. The CLI reads the same transcript JSON the HTTP API accepts and
writes the rendered file next to it.

HOW: argparse accepts the transcript JSON path, the format and the
rendering switches. The JSON is validated with the server's pydantic
model, exported via export(), and saved under the suggested filename in
the output directory, or written to stdout with --stdout. Status messages
go to stderr.

RULES:
- Positional argument: transcript JSON file path
- --format defaults to TRANSCRIPT_EXPORT_DEFAULT_FORMAT; unknown -> exit 1
- Output naming: suggested filename, numeric suffix on conflicts
  (Q4_Review.pdf, Q4_Review-2.pdf, ...)
- Status output goes to stderr (not stdout)
- Exit code 1 on unreadable input, invalid JSON or export failure
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from transcript_exporter.config import DEFAULT_EXPORT_FORMAT
from transcript_exporter.core.ir import ExportOptions
from transcript_exporter.errors import ExportError
from transcript_exporter.export import SUPPORTED_FORMATS, export
from transcript_exporter.logging_setup import configure_logging
from transcript_exporter.server.models import TranscriptPayload


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so --stdout can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(filename: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Exporting the same transcript twice must not overwrite the
    earlier file.

    RULES:
    - First attempt: {filename}
    - Conflict: counter inserted before the extension, starting at 2
    """
    base_path = output_dir / filename
    if not base_path.exists():
        return base_path

    stem = base_path.stem
    suffix = base_path.suffix
    counter = 2
    while True:
        candidate = output_dir / "{}-{}{}".format(stem, counter, suffix)
        if not candidate.exists():
            return candidate
        counter += 1


def _write_payload(payload: Union[str, bytes], path: Path) -> None:
    if isinstance(payload, bytes):
        path.write_bytes(payload)
    else:
        path.write_text(payload, encoding="utf-8")


def _write_stdout(payload: Union[str, bytes]) -> None:
    if isinstance(payload, bytes):
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
    else:
        sys.stdout.write(payload)
        sys.stdout.flush()


def _run(args: argparse.Namespace) -> None:
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        payload = TranscriptPayload.model_validate_json(input_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        _fail("Invalid transcript JSON in {}:\n{}".format(input_path.name, e))
    except OSError as e:
        _fail("Cannot read {}: {}".format(input_path, e))

    transcript = payload.to_transcript()
    options = ExportOptions(
        include_timestamps=args.timestamps,
        include_speakers=args.speakers,
        title=args.title,
    )

    _status("Exporting '{}' ({} segments) as {}...".format(
        transcript.name, len(transcript.segments), args.format,
    ))
    try:
        result = export(transcript, args.format, options)
    except ExportError as e:
        _fail(str(e))

    if args.stdout:
        _write_stdout(result.payload)
        return

    out_path = _resolve_output_path(result.filename, output_dir)
    _write_payload(result.payload, out_path)
    _status("Saved: {} ({})".format(out_path, result.content_type))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running an export.
    """
    parser = argparse.ArgumentParser(
        prog="transcript_exporter",
        description="Export a transcript JSON file as plain text, SRT, PDF, or DOCX.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the transcript JSON file (same shape as the HTTP API body).",
    )

    parser.add_argument(
        "--format",
        default=DEFAULT_EXPORT_FORMAT,
        help="Export format. Available: {}. Default: %(default)s.".format(
            ", ".join(SUPPORTED_FORMATS)
        ),
    )

    parser.add_argument(
        "--timestamps",
        action="store_true",
        help="Prefix each segment with its [M:SS] start time.",
    )

    parser.add_argument(
        "--speakers",
        action="store_true",
        help="Prefix each segment with its speaker label.",
    )

    parser.add_argument(
        "--title",
        default=None,
        help="Heading override (default: the transcript name).",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save the export (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the export to stdout instead of a file.",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: TRANSCRIPT_EXPORT_LOG_LEVEL or INFO).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    _run(args)


if __name__ == "__main__":
    main()
