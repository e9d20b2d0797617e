from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tc2srt.core.errors import (
    EmptyInputError,
    MalformedTimecodeError,
    NoTimecodesFoundError,
)
from tc2srt.core.subtitle import render_srt
from tc2srt.core.timecode import (
    convert_timecode,
    match_timecode_pair,
    validate_frame_rate,
)
from tc2srt.schemas.subtitle import SubtitleCue, Timestamp

logger = logging.getLogger(__name__)


@dataclass
class _PendingCue:
    start: Timestamp
    end: Timestamp
    line_number: int
    lines: list[str] = field(default_factory=list)


def _finalize(pending: _PendingCue | None, cues: list[SubtitleCue]) -> None:
    if pending is None:
        return
    if not pending.lines:
        logger.debug(
            "Dropping cue from line %d: no text follows its timecode.",
            pending.line_number,
        )
        return
    cues.append(
        SubtitleCue(start=pending.start, end=pending.end, lines=tuple(pending.lines))
    )


def parse_transcript(raw_text: str, fps: float) -> list[SubtitleCue]:
    """Group transcript lines into cues under their ``start - end`` timecode line.

    A cue ends at a blank line, at the next timecode line or at the end of the
    input. Cues without any text are dropped. Lines before the first timecode
    are ignored.
    """
    if not raw_text or not raw_text.strip():
        raise EmptyInputError()
    fps = validate_frame_rate(fps)

    cues: list[SubtitleCue] = []
    pending: _PendingCue | None = None
    for line_number, raw_line in enumerate(raw_text.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            if pending is not None and pending.lines:
                _finalize(pending, cues)
                pending = None
            continue

        match = match_timecode_pair(line)
        if match is not None:
            _finalize(pending, cues)
            try:
                start = convert_timecode(match.group(1), fps)
                end = convert_timecode(match.group(2), fps)
            except MalformedTimecodeError as exc:
                raise exc.at_line(line_number) from exc
            pending = _PendingCue(start=start, end=end, line_number=line_number)
            trailing = line[match.end(2):].strip()
            if trailing:
                pending.lines.append(trailing)
        elif pending is not None:
            pending.lines.append(line)

    _finalize(pending, cues)
    if not cues:
        raise NoTimecodesFoundError()
    logger.debug("Parsed %d cues at %s fps.", len(cues), fps)
    return cues


def convert(raw_text: str, fps: float) -> str:
    """Convert a timecoded transcript into an SRT document."""
    return render_srt(parse_transcript(raw_text, fps))
