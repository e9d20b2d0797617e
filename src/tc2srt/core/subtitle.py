from __future__ import annotations

import re

from tc2srt.schemas.subtitle import SubtitleCue, Timestamp

TIMING_SEPARATOR = " --> "
_SRT_TIMESTAMP = r"\d{2}:\d{2}:\d{2},\d{3,}"
_SRT_TIMESTAMP_PATTERN = re.compile(
    r"^(\d{2}):(\d{2}):(\d{2}),(\d{3,})$", flags=re.ASCII
)
_SRT_TIMING_PATTERN = re.compile(
    rf"^\s*({_SRT_TIMESTAMP})\s*-->\s*({_SRT_TIMESTAMP})\s*$", flags=re.ASCII
)


def format_timestamp(timestamp: Timestamp) -> str:
    """Format a timestamp as SRT ``HH:MM:SS,mmm``."""
    return str(timestamp)


def parse_timestamp(value: str) -> Timestamp:
    match = _SRT_TIMESTAMP_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid SRT timestamp: {value}")
    hours, minutes, seconds, millis = match.groups()
    return Timestamp(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=int(millis),
    )


def format_timing_line(cue: SubtitleCue) -> str:
    return f"{format_timestamp(cue.start)}{TIMING_SEPARATOR}{format_timestamp(cue.end)}"


def parse_timing_line(line: str) -> tuple[Timestamp, Timestamp]:
    match = _SRT_TIMING_PATTERN.match(line)
    if not match:
        raise ValueError(f"Invalid SRT timing line: {line}")
    return parse_timestamp(match.group(1)), parse_timestamp(match.group(2))


def render_srt(cues: list[SubtitleCue]) -> str:
    """Render cues as an SRT document, numbered from 1."""
    lines: list[str] = []
    for index, cue in enumerate(cues, start=1):
        lines.append(str(index))
        lines.append(format_timing_line(cue))
        lines.extend(cue.lines)
        lines.append("")
    return "\n".join(lines).rstrip()

