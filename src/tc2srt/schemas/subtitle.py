from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timecode:
    hours: str
    minutes: str
    seconds: str
    frames: int


@dataclass(frozen=True)
class Timestamp:
    hours: str
    minutes: str
    seconds: str
    milliseconds: int

    def __str__(self) -> str:
        return (
            f"{self.hours.rjust(2, '0')}:{self.minutes.rjust(2, '0')}:"
            f"{self.seconds.rjust(2, '0')},{self.milliseconds:03d}"
        )


@dataclass(frozen=True)
class SubtitleCue:
    start: Timestamp
    end: Timestamp
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
