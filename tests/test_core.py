"""Unit tests for timestamp formatting and segment grouping.

WHY: Every formatter relies on these two modules for its time markers
and speaker labels. A padding or rounding slip here shows up in all four
export formats at once.

HOW: Direct calls with hand-picked boundary values (0, 59.999, 3599,
3600, negative, NaN) and small transcripts from conftest.py.
"""

import logging
import math

import pytest

from transcript_exporter.core.grouping import (
    RenderLine,
    group_segments,
    render_line_text,
    render_prefix,
)
from transcript_exporter.core.ir import ExportOptions, TranscriptData, TranscriptSegment
from transcript_exporter.core.timestamps import (
    clamp_seconds,
    format_srt_timestamp,
    format_timestamp,
)


# =========================================================================
# Timestamp formatting
# =========================================================================

class TestFormatTimestamp:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "0:00"),
        (5, "0:05"),
        (65, "1:05"),
        (65.9, "1:05"),
        (599, "9:59"),
        (3599.99, "59:59"),
        (3600, "1:00:00"),
        (3661, "1:01:01"),
        (36000, "10:00:00"),
    ])
    def test_display_format(self, seconds, expected):
        assert format_timestamp(seconds) == expected

    @pytest.mark.parametrize("bad", [-1, -0.5, float("nan"), float("-inf"), float("inf")])
    def test_invalid_input_clamped_to_zero(self, bad):
        assert format_timestamp(bad) == "0:00"


class TestFormatSrtTimestamp:

    @pytest.mark.parametrize("seconds, expected", [
        (0, "00:00:00,000"),
        (1.5, "00:00:01,500"),
        (65.25, "00:01:05,250"),
        (3661.007, "01:01:01,007"),
        (1.9996, "00:00:02,000"),
    ])
    def test_fixed_width_format(self, seconds, expected):
        assert format_srt_timestamp(seconds) == expected

    def test_negative_clamped(self):
        assert format_srt_timestamp(-3) == "00:00:00,000"


def test_clamp_seconds():
    assert clamp_seconds(2.5) == 2.5
    assert clamp_seconds(-2.5) == 0.0
    assert clamp_seconds(math.nan) == 0.0


# =========================================================================
# Export options
# =========================================================================

class TestResolveTitle:

    def test_title_overrides_name(self, sample_transcript):
        assert ExportOptions(title="Board Minutes").resolve_title(sample_transcript) == "Board Minutes"

    def test_falls_back_to_name(self, sample_transcript):
        assert ExportOptions().resolve_title(sample_transcript) == "Q4 Strategy: Review!!"

    def test_blank_title_falls_back_to_name(self, sample_transcript):
        assert ExportOptions(title="   ").resolve_title(sample_transcript) == "Q4 Strategy: Review!!"

    def test_blank_name_uses_generic_title(self):
        transcript = TranscriptData(id="x", name="", text="")
        assert ExportOptions().resolve_title(transcript) == "Transcript"


# =========================================================================
# Segment grouping
# =========================================================================

class TestGroupSegments:

    def test_one_line_per_segment_in_order(self, sample_transcript):
        lines = group_segments(sample_transcript)
        assert [line.text for line in lines] == [
            "Welcome everyone.",
            "Thanks for having me.",
            "Let's get started.",
        ]

    def test_no_labels_by_default(self, sample_transcript):
        for line in group_segments(sample_transcript):
            assert line.speaker is None
            assert line.timestamp is None

    def test_speaker_labels_only_where_present(self, sample_transcript):
        lines = group_segments(sample_transcript, include_speakers=True)
        assert [line.speaker for line in lines] == ["Alice", "Bob", None]

    def test_timestamp_labels(self, sample_transcript):
        lines = group_segments(sample_transcript, include_timestamps=True)
        assert [line.timestamp for line in lines] == ["0:00", "1:05", "1:01:01"]

    def test_blank_speaker_treated_as_absent(self):
        transcript = TranscriptData(
            id="x", name="x", text="",
            segments=[TranscriptSegment(text="hi", speaker="  ", start_time=0, end_time=1)],
        )
        assert group_segments(transcript, include_speakers=True)[0].speaker is None

    def test_same_speaker_segments_not_merged(self):
        transcript = TranscriptData(
            id="x", name="x", text="",
            segments=[
                TranscriptSegment(text="one", speaker="A", start_time=0, end_time=1),
                TranscriptSegment(text="two", speaker="A", start_time=1, end_time=2),
            ],
        )
        assert len(group_segments(transcript, include_speakers=True)) == 2

    def test_empty_segments_fall_back_to_flat_text(self, flat_transcript):
        lines = group_segments(flat_transcript, include_speakers=True, include_timestamps=True)
        assert lines == [RenderLine(text=flat_transcript.text)]

    def test_malformed_segment_clamped_and_logged(self, malformed_transcript, caplog):
        with caplog.at_level(logging.WARNING, logger="transcript_exporter.core.grouping"):
            lines = group_segments(malformed_transcript, include_timestamps=True)

        assert len(lines) == 3
        assert lines[1].text == "Backwards line."
        assert lines[1].start_time == 10.0
        assert lines[1].end_time == 10.0
        assert "Malformed segment 1" in caplog.text


class TestRenderLineText:

    def test_plain_line(self):
        assert render_line_text(RenderLine(text="Hello")) == "Hello"

    def test_full_prefix(self):
        line = RenderLine(text="Hello", speaker="Alice", timestamp="1:05")
        assert render_prefix(line) == "[1:05] [Alice]: "
        assert render_line_text(line) == "[1:05] [Alice]: Hello"

    def test_speaker_only(self):
        assert render_line_text(RenderLine(text="Hi", speaker="Bob")) == "[Bob]: Hi"

    def test_timestamp_only(self):
        assert render_line_text(RenderLine(text="Hi", timestamp="0:07")) == "[0:07] Hi"
