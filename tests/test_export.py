"""Tests for the export dispatcher and filename derivation.

WHY: export() is the only function the HTTP layer and CLI call. It must
map every supported format to the right MIME type, refuse anything else,
and never leak a half-rendered payload.

HOW: Calls export() with the conftest transcripts and stub formatters
that fail on purpose.
"""

import pytest

from transcript_exporter.core.ir import ExportOptions
from transcript_exporter.errors import ExportError, InvalidFormat, RenderFailure
from transcript_exporter.export import (
    CONTENT_TYPES,
    SUPPORTED_FORMATS,
    ExportFormat,
    ExportResult,
    export,
    suggest_filename,
)
from transcript_exporter.formatters.plain_text import PlainTextFormatter

EXPECTED_CONTENT_TYPES = {
    "txt": "text/plain",
    "srt": "application/x-subrip",
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class _ExplodingFormatter(PlainTextFormatter):
    def format(self, transcript, options):
        raise MemoryError("renderer ran out of memory")


# =========================================================================
# Format selection
# =========================================================================

class TestFormatSelection:

    @pytest.mark.parametrize("fmt", ["txt", "srt", "pdf", "docx"])
    def test_content_type_matches_table(self, sample_transcript, fmt):
        result = export(sample_transcript, fmt, ExportOptions())
        assert result.content_type == EXPECTED_CONTENT_TYPES[fmt]

    def test_content_type_table(self):
        assert {k.value: v for k, v in CONTENT_TYPES.items()} == EXPECTED_CONTENT_TYPES

    def test_enum_member_accepted(self, sample_transcript):
        result = export(sample_transcript, ExportFormat.SRT)
        assert result.content_type == "application/x-subrip"

    @pytest.mark.parametrize("fmt", ["html", "PDF", " txt", "", None, "vtt"])
    def test_unsupported_format_raises(self, sample_transcript, fmt):
        with pytest.raises(InvalidFormat) as excinfo:
            export(sample_transcript, fmt)
        assert excinfo.value.value == fmt
        assert excinfo.value.supported == sorted(SUPPORTED_FORMATS)

    def test_invalid_format_is_value_error(self, sample_transcript):
        with pytest.raises(ValueError):
            export(sample_transcript, "odt")

    def test_text_and_binary_payloads(self, sample_transcript):
        assert isinstance(export(sample_transcript, "txt").payload, str)
        assert isinstance(export(sample_transcript, "srt").payload, str)
        assert isinstance(export(sample_transcript, "pdf").payload, bytes)
        assert isinstance(export(sample_transcript, "docx").payload, bytes)


# =========================================================================
# Result shape
# =========================================================================

class TestExportResult:

    def test_unpacks_as_triple(self, sample_transcript):
        payload, content_type, filename = export(sample_transcript, "txt")
        assert payload.startswith("Q4 Strategy: Review!!")
        assert content_type == "text/plain"
        assert filename == "Q4_Strategy_Review.txt"

    def test_default_options(self, sample_transcript):
        result = export(sample_transcript, "txt")
        assert isinstance(result, ExportResult)
        assert "[Alice]" not in result.payload
        assert "[0:00]" not in result.payload

    def test_plain_text_idempotent(self, sample_transcript):
        options = ExportOptions(include_speakers=True, include_timestamps=True)
        assert export(sample_transcript, "txt", options) == export(sample_transcript, "txt", options)

    def test_empty_segments_fallback(self, flat_transcript):
        assert flat_transcript.text in export(flat_transcript, "txt").payload
        assert export(flat_transcript, "srt").payload == ""

    def test_srt_cue_numbering(self, sample_transcript):
        payload = export(sample_transcript, "srt").payload
        indices = [line for line in payload.split("\n") if line.isdigit()]
        assert indices == ["1", "2", "3"]

    @pytest.mark.parametrize("fmt", ["txt", "srt", "pdf", "docx"])
    def test_malformed_segment_does_not_raise(self, malformed_transcript, fmt):
        options = ExportOptions(include_speakers=True, include_timestamps=True)
        result = export(malformed_transcript, fmt, options)
        assert result.payload

    def test_filename_uses_title_override(self, sample_transcript):
        result = export(sample_transcript, "docx", ExportOptions(title="Board minutes / 2025"))
        assert result.filename == "Board_minutes_2025.docx"


# =========================================================================
# Failure propagation
# =========================================================================

class TestFailures:

    def test_backend_error_wrapped_as_render_failure(self, sample_transcript):
        with pytest.raises(RenderFailure) as excinfo:
            export(sample_transcript, "txt", formatters={"txt": _ExplodingFormatter()})
        assert excinfo.value.format == "txt"
        assert isinstance(excinfo.value.__cause__, MemoryError)
        assert isinstance(excinfo.value, ExportError)

    def test_injected_formatter_used_only_for_its_format(self, sample_transcript):
        result = export(sample_transcript, "srt", formatters={"txt": _ExplodingFormatter()})
        assert result.payload.startswith("1\n")


# =========================================================================
# Filename derivation
# =========================================================================

class TestSuggestFilename:

    def test_spec_example(self):
        assert suggest_filename("Q4 Strategy: Review!!", "pdf") == "Q4_Strategy_Review.pdf"

    def test_underscore_runs_collapsed(self):
        assert suggest_filename("a -- b __ c", "txt") == "a_b_c.txt"

    def test_truncated_to_fifty_characters(self):
        filename = suggest_filename("x" * 80, "srt")
        assert filename == "x" * 50 + ".srt"

    def test_truncation_does_not_leave_trailing_underscore(self):
        title = "a" * 49 + " tail"
        assert suggest_filename(title, "txt") == "a" * 49 + ".txt"

    def test_non_ascii_replaced(self):
        assert suggest_filename("Réunion d'équipe", "docx") == "R_union_d_quipe.docx"

    def test_empty_stem_falls_back(self):
        assert suggest_filename("!!!", "pdf") == "transcript.pdf"

    def test_invalid_format_raises(self):
        with pytest.raises(InvalidFormat):
            suggest_filename("Title", "rtf")
