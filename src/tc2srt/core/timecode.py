from __future__ import annotations

import math
import re

from tc2srt.core.errors import InvalidFrameRateError, MalformedTimecodeError
from tc2srt.schemas.subtitle import Timecode, Timestamp

TIMECODE_COMPONENTS = 4
_DASH = r"\s*[-–—]\s*"
_TIMECODE = r"[0-9]{1,2}(?:[;:][0-9]{1,2}){3}"
_TIMECODE_LIKE = r"[0-9]{1,2}(?:[;:][0-9]{1,2})+"
TIMECODE_PAIR_PATTERN = re.compile(rf"({_TIMECODE}){_DASH}({_TIMECODE})")
LEADING_PAIR_PATTERN = re.compile(rf"({_TIMECODE_LIKE}){_DASH}({_TIMECODE_LIKE})")
_SEPARATOR_PATTERN = re.compile(r"[;:]")


def validate_frame_rate(fps: float) -> float:
    try:
        value = float(fps)
    except (TypeError, ValueError) as exc:
        raise InvalidFrameRateError(fps) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidFrameRateError(fps)
    return value


def frames_to_milliseconds(frames: int, fps: float) -> int:
    """Convert a frame count to milliseconds, rounding halves up like ``Math.round``."""
    return math.floor(frames / fps * 1000 + 0.5)


def split_timecode(value: str) -> Timecode:
    parts = _SEPARATOR_PATTERN.split(value)
    if len(parts) != TIMECODE_COMPONENTS:
        raise MalformedTimecodeError(value)
    hours, minutes, seconds, frames = parts
    return Timecode(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        frames=int(frames),
    )


def convert_timecode(value: str, fps: float) -> Timestamp:
    """Convert ``HH;MM;SS;FF`` into an SRT timestamp.

    Hours, minutes and seconds keep their source digits and are only padded
    on output. Milliseconds are not clamped, so a frame count at or beyond
    ``fps`` renders as four digits.
    """
    timecode = split_timecode(value)
    return Timestamp(
        hours=timecode.hours,
        minutes=timecode.minutes,
        seconds=timecode.seconds,
        milliseconds=frames_to_milliseconds(timecode.frames, fps),
    )


def count_components(value: str) -> int:
    return len(_SEPARATOR_PATTERN.split(value))


def match_timecode_pair(line: str) -> re.Match[str] | None:
    """Find a ``start - end`` timecode pair in a transcript line.

    A full four-component pair may appear anywhere in the line. A pair that
    opens the line is also recognized when only one side has four components,
    so a truncated timecode is reported as malformed instead of being read as
    cue text. Clock times in dialogue stay plain text.
    """
    leading = LEADING_PAIR_PATTERN.match(line)
    if leading is not None and TIMECODE_COMPONENTS in (
        count_components(leading.group(1)),
        count_components(leading.group(2)),
    ):
        return leading
    return TIMECODE_PAIR_PATTERN.search(line)
