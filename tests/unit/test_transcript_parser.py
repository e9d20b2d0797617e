from __future__ import annotations

import logging

import pytest

from tc2srt.core.errors import (
    ConversionError,
    EmptyInputError,
    InvalidFrameRateError,
    MalformedTimecodeError,
    NoTimecodesFoundError,
)
from tc2srt.core.subtitle import format_timestamp, parse_timing_line
from tc2srt.core.transcript import convert, parse_transcript

SAMPLE_TRANSCRIPT = (
    "00;00;03;15 - 00;00;06;20\n"
    "Hello world\n"
    "\n"
    "00;00;06;21 - 00;00;09;10\n"
    "Second line"
)


def test_convert_sample_transcript_at_24_fps() -> None:
    assert convert(SAMPLE_TRANSCRIPT, 24) == (
        "1\n"
        "00:00:03,625 --> 00:00:06,833\n"
        "Hello world\n"
        "\n"
        "2\n"
        "00:00:06,875 --> 00:00:09,417\n"
        "Second line"
    )


def test_emitted_timing_lines_reformat_identically() -> None:
    document = convert(SAMPLE_TRANSCRIPT, 29.97)
    timing_lines = [line for line in document.splitlines() if " --> " in line]
    assert len(timing_lines) == 2
    for line in timing_lines:
        start, end = parse_timing_line(line)
        assert f"{format_timestamp(start)} --> {format_timestamp(end)}" == line


@pytest.mark.parametrize("raw_text", ["", "   ", "\n\t\n"])
def test_empty_input_is_rejected(raw_text: str) -> None:
    with pytest.raises(EmptyInputError, match="Please enter or upload"):
        convert(raw_text, 24)


def test_transcript_without_timecodes_fails() -> None:
    with pytest.raises(NoTimecodesFoundError, match="No valid timecodes found"):
        convert("Just some notes\nwith no timing at all.", 24)


def test_timecode_lines_without_text_fail_as_no_timecodes() -> None:
    with pytest.raises(NoTimecodesFoundError):
        convert("00;00;01;00 - 00;00;02;00\n\n00;00;03;00 - 00;00;04;00\n", 24)


def test_malformed_timecode_reports_source_line_number() -> None:
    raw_text = (
        "Interview with the director\n"
        "\n"
        "00;00;03 - 00;00;06;20\n"
        "Text that never becomes a cue"
    )
    with pytest.raises(MalformedTimecodeError) as exc_info:
        convert(raw_text, 24)
    assert exc_info.value.line_number == 3
    assert str(exc_info.value) == (
        "Error parsing timecode on line 3: Invalid timecode format: 00;00;03"
    )


def test_malformed_timecode_aborts_after_valid_cues() -> None:
    raw_text = SAMPLE_TRANSCRIPT + "\n\n00;00;10;00 - 00;00;12\nLate"
    with pytest.raises(MalformedTimecodeError, match="line 7"):
        convert(raw_text, 24)


def test_consecutive_timecode_lines_drop_the_empty_cue(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="tc2srt.core.transcript")
    raw_text = (
        "00;00;01;00 - 00;00;02;00\n"
        "00;00;03;00 - 00;00;04;00\n"
        "Only text"
    )
    cues = parse_transcript(raw_text, 24)
    assert len(cues) == 1
    assert str(cues[0].start) == "00:00:03,000"
    assert cues[0].text == "Only text"
    assert "Dropping cue from line 1" in caplog.text
    assert convert(raw_text, 24).startswith("1\n00:00:03,000 --> 00:00:04,000\n")


def test_mixed_separators_parse_like_uniform_ones() -> None:
    mixed = convert("00:00:03;15 - 00;00;06:20\nHello", 24)
    uniform = convert("00;00;03;15 - 00;00;06;20\nHello", 24)
    assert mixed == uniform


def test_text_after_second_timecode_starts_the_cue() -> None:
    raw_text = "00;00;01;00 – 00;00;02;00   NARRATOR: It begins.\n  and continues  "
    cues = parse_transcript(raw_text, 25)
    assert cues[0].lines == ("NARRATOR: It begins.", "and continues")
    assert cues[0].text == "NARRATOR: It begins.\nand continues"


def test_lines_before_first_timecode_are_ignored() -> None:
    raw_text = "Title card\nProducer notes\n00;00;01;00 - 00;00;02;00\nFirst"
    cues = parse_transcript(raw_text, 24)
    assert [cue.text for cue in cues] == ["First"]


def test_blank_line_before_any_text_keeps_the_cue_open() -> None:
    raw_text = "00;00;01;00 - 00;00;02;00\n\nLate text"
    cues = parse_transcript(raw_text, 24)
    assert [cue.text for cue in cues] == ["Late text"]


def test_text_after_a_closed_cue_is_ignored_until_next_timecode() -> None:
    raw_text = (
        "00;00;01;00 - 00;00;02;00\n"
        "First\n"
        "\n"
        "stray remark\n"
        "00;00;03;00 - 00;00;04;00\n"
        "Second"
    )
    cues = parse_transcript(raw_text, 24)
    assert [cue.text for cue in cues] == ["First", "Second"]


def test_crlf_line_endings_are_handled() -> None:
    raw_text = SAMPLE_TRANSCRIPT.replace("\n", "\r\n")
    assert convert(raw_text, 24) == convert(SAMPLE_TRANSCRIPT, 24)


def test_clock_times_inside_cue_text_stay_text() -> None:
    raw_text = "00;00;01;00 - 00;00;02;00\nSee you 10:30 - 11:00"
    cues = parse_transcript(raw_text, 24)
    assert cues[0].text == "See you 10:30 - 11:00"


def test_invalid_frame_rate_is_a_conversion_error() -> None:
    with pytest.raises(InvalidFrameRateError):
        convert(SAMPLE_TRANSCRIPT, 0)


def test_conversion_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        convert("no timecodes", 24)
    assert issubclass(ConversionError, ValueError)


def test_non_breaking_spaces_around_the_dash_are_accepted() -> None:
    raw_text = "00;00;03;15\u00a0-\u00a000;00;06;20\nHello world"
    assert convert(raw_text, 24) == "1\n00:00:03,625 --> 00:00:06,833\nHello world"


def test_timecode_like_dialogue_inside_a_cue_stays_text() -> None:
    raw_text = "00;00;01;00 - 00;00;02;00\nThe code is 12:30:45:10 - 3:1 ok"
    cues = parse_transcript(raw_text, 24)
    assert len(cues) == 1
    assert cues[0].lines == ("The code is 12:30:45:10 - 3:1 ok",)


def test_five_component_timecode_opening_a_line_is_malformed() -> None:
    with pytest.raises(
        MalformedTimecodeError, match="line 1: Invalid timecode format: 00;00;03;15;02"
    ):
        convert("00;00;03;15;02 - 00;00;06;20\nHi", 24)


def test_identical_start_and_end_keep_trailing_text() -> None:
    cues = parse_transcript("00;00;01;00 - 00;00;01;00 Hello", 24)
    assert str(cues[0].start) == str(cues[0].end) == "00:00:01,000"
    assert cues[0].lines == ("Hello",)
