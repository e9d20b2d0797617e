from __future__ import annotations


class ConversionError(ValueError):
    """Base class for transcript conversion failures."""


class EmptyInputError(ConversionError):
    def __init__(self) -> None:
        super().__init__("Please enter or upload a transcript to convert.")


class InvalidFrameRateError(ConversionError):
    def __init__(self, fps: object) -> None:
        self.fps = fps
        super().__init__(f"Frame rate must be a positive number, got {fps!r}.")


class MalformedTimecodeError(ConversionError):
    """A recognized timecode does not split into hours/minutes/seconds/frames."""

    def __init__(self, timecode: str, line_number: int | None = None) -> None:
        self.timecode = timecode
        self.line_number = line_number
        message = f"Invalid timecode format: {timecode}"
        if line_number is not None:
            message = f"Error parsing timecode on line {line_number}: {message}"
        super().__init__(message)

    def at_line(self, line_number: int) -> MalformedTimecodeError:
        return MalformedTimecodeError(self.timecode, line_number)


class NoTimecodesFoundError(ConversionError):
    def __init__(self) -> None:
        super().__init__(
            "No valid timecodes found in the input. Please check the format."
        )
